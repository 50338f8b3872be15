#!/usr/bin/env python3
"""프로젝트 문서 생성 스크립트.

Usage:
    python -m docuforge.scripts.generate_docs --project project.json
    python -m docuforge.scripts.generate_docs --project project.json --type nda --offline
    python -m docuforge.scripts.generate_docs --project project.json --render --output-dir out

프로젝트 JSON(Project 필드)을 읽어 문서별 {slug}.md 파일을 만들고 (--render 시 .docx도 같은 폴더에),
프로젝트와 문서 메타데이터를 저장소(data_dir)에 기록합니다.
렌더링/저장에 실패한 문서가 하나라도 있으면 종료 코드 1을 반환합니다.
"""

import argparse
import asyncio
import sys
import time
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from docuforge.config import get_settings
from docuforge.logging_config import configure_logging
from docuforge.models import DocumentType, Project
from docuforge.services import DocumentRenderer, GenerationMode, ProjectStorage, create_pipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="프로젝트 정보로 요약/기술 요구사항/기능 명세/일정/NDA 문서 생성"
    )
    parser.add_argument(
        "--project",
        type=str,
        required=True,
        help="프로젝트 JSON 파일 경로",
    )
    parser.add_argument(
        "--type",
        dest="types",
        action="append",
        choices=[document_type.slug for document_type in DocumentType],
        help="생성할 문서 종류 (여러 번 지정 가능, 기본값: 전체)",
    )
    parser.add_argument(
        "--offline",
        action="store_true",
        help="원격 생성기를 사용하지 않고 오프라인으로만 생성",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="output",
        help="마크다운(.md)과 아티팩트(.docx) 출력 폴더 (기본값: output)",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help=".docx 아티팩트도 --output-dir 에 함께 생성",
    )
    return parser


async def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    project_path = Path(args.project)
    if not project_path.exists():
        print(f"프로젝트 파일을 찾을 수 없습니다: {project_path}")
        return 1

    try:
        project = Project.model_validate_json(project_path.read_text(encoding="utf-8"))
    except ValidationError as e:
        print(f"프로젝트 파일 형식이 올바르지 않습니다: {project_path}")
        print(e)
        return 1

    document_types = (
        [DocumentType.from_slug(slug) for slug in args.types] if args.types else list(DocumentType)
    )

    print('\n' + '=' * 70)
    print(f'문서 생성 시작: {project.name}')
    print(f'시작 시간: {datetime.now().strftime("%Y-%m-%d %H:%M:%S")}')
    print('=' * 70)

    storage = ProjectStorage(settings.data_dir, settings.reading_words_per_minute)
    if await storage.get(project.id) is None:
        await storage.save(project)

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    pipeline = create_pipeline(
        mode=GenerationMode.OFFLINE if args.offline else None,
        render=args.render,
        storage=storage,
        renderer=DocumentRenderer(output_dir=str(output_dir)),
    )
    print(f'생성 모드: {pipeline.selector.mode.value}')

    start = time.time()
    results = await pipeline.generate_all(project, document_types)

    failed = 0
    for result in results:
        md_path = output_dir / f"{result.document_type.slug}.md"
        md_path.write_text(result.content, encoding="utf-8")

        print(f'\n  [{result.document_type.label}] {result.status.value}')
        print(f'      Markdown: {md_path}')
        if result.artifact_path:
            print(f'      Artifact: {result.artifact_path}')
        if not result.succeeded:
            failed += 1
            print(f'      실패: {result.error}')

    print('\n' + '=' * 70)
    print(f'완료: {len(results) - failed}/{len(results)}개 성공 ({time.time() - start:.1f}초)')
    print('=' * 70)

    return 1 if failed else 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
