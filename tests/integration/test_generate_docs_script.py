"""
문서 생성 스크립트(generate_docs) 통합 테스트.
프로젝트 JSON 파일로 마크다운/아티팩트를 만들고 종료 코드를 확인합니다.
"""

import pytest

from docuforge.layers.layer4_composition import composer as composer_module
from docuforge.scripts import generate_docs
from docuforge.models import DocumentType
from docuforge.services import ProjectStorage


@pytest.fixture
def project_file(tmp_path, sample_project):
    path = tmp_path / "project.json"
    path.write_text(sample_project.model_dump_json(), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def shared_composer(monkeypatch, composer):
    monkeypatch.setattr(composer_module, "_document_composer", composer)


async def test_generates_all_documents(settings_env, project_file, tmp_path, sample_project, composer):
    """옵션 없이 실행하면 다섯 문서의 .md 파일을 만들고 0을 반환해야 한다."""
    output_dir = tmp_path / "out"

    exit_code = await generate_docs.main(
        ["--project", str(project_file), "--offline", "--output-dir", str(output_dir)]
    )

    assert exit_code == 0
    assert sorted(p.name for p in output_dir.glob("*.md")) == [
        "functional-specs.md",
        "nda.md",
        "project-summary.md",
        "technical-requirements.md",
        "timeline.md",
    ]
    assert (output_dir / "nda.md").read_text(encoding="utf-8") == composer.compose(
        sample_project, DocumentType.NDA
    )

    stored = await ProjectStorage(settings_env.data_dir).get(sample_project.id)
    assert len(stored.documents) == 5


async def test_selected_types_with_render(settings_env, project_file, tmp_path):
    """--type 과 --render 를 지정하면 해당 문서만 만들고 .docx도 출력 폴더에 생성해야 한다."""
    output_dir = tmp_path / "out"

    exit_code = await generate_docs.main([
        "--project", str(project_file),
        "--type", "timeline",
        "--type", "nda",
        "--offline",
        "--render",
        "--output-dir", str(output_dir),
    ])

    assert exit_code == 0
    assert sorted(p.name for p in output_dir.glob("*.md")) == ["nda.md", "timeline.md"]
    assert len(list(output_dir.glob("*.docx"))) == 2
    assert not (tmp_path / "data" / "artifacts").exists()


async def test_missing_project_file(settings_env, tmp_path):
    """프로젝트 파일이 없으면 1을 반환해야 한다."""
    exit_code = await generate_docs.main(["--project", str(tmp_path / "missing.json")])

    assert exit_code == 1


async def test_malformed_project_file(settings_env, tmp_path, capsys):
    """필수 필드가 빠진 프로젝트 파일은 트레이스백 없이 1을 반환해야 한다."""
    path = tmp_path / "broken.json"
    path.write_text('{"name": "No launch date"}', encoding="utf-8")

    exit_code = await generate_docs.main(["--project", str(path), "--offline"])

    assert exit_code == 1
    assert "프로젝트 파일 형식이 올바르지 않습니다" in capsys.readouterr().out


async def test_invalid_json_syntax(settings_env, tmp_path):
    path = tmp_path / "garbage.json"
    path.write_text("{not json", encoding="utf-8")

    exit_code = await generate_docs.main(["--project", str(path), "--offline"])

    assert exit_code == 1


def test_invalid_type_rejected():
    """지원하지 않는 --type 값은 argparse 에러로 종료되어야 한다."""
    with pytest.raises(SystemExit):
        generate_docs.build_parser().parse_args(["--project", "p.json", "--type", "brochure"])
