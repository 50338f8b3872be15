"""ProjectStorage unit tests.

임시 디렉터리에서 프로젝트 저장/조회/삭제와 문서 갱신을 검증합니다.
"""

import asyncio
import shutil
from datetime import date, datetime, timedelta

import pytest

from docuforge.exceptions import ProjectNotFoundError, StorageError
from docuforge.models import DocumentType, Project
from docuforge.services import ProjectStorage


def make_project(name: str = "Stored", created_at: datetime = None) -> Project:
    fields = {"name": name, "launch_date": date(2027, 6, 1)}
    if created_at:
        fields["created_at"] = created_at
    return Project(**fields)


class TestSaveAndGet:
    async def test_round_trip(self, temp_storage):
        project = make_project()
        project_id = await temp_storage.save(project)

        loaded = await temp_storage.get(project_id)

        assert loaded == project
        assert (temp_storage.projects_path / f"{project.id}.json").exists()

    async def test_get_missing_returns_none(self, temp_storage):
        assert await temp_storage.get("does-not-exist") is None

    async def test_save_overwrites(self, temp_storage):
        project = make_project()
        await temp_storage.save(project)
        project.name = "Renamed"
        await temp_storage.save(project)

        assert (await temp_storage.get(project.id)).name == "Renamed"

    async def test_id_cannot_escape_storage_dir(self, temp_storage):
        project = make_project()
        project.id = "../escape"
        await temp_storage.save(project)

        assert (temp_storage.projects_path / "escape.json").exists()
        assert not (temp_storage.base_path / "escape.json").exists()

    async def test_write_failure_raises_storage_error(self, temp_storage):
        shutil.rmtree(temp_storage.projects_path)
        temp_storage.projects_path.write_text("not a directory")

        with pytest.raises(StorageError):
            await temp_storage.save(make_project())


class TestLoadAll:
    async def test_newest_first(self, temp_storage):
        now = datetime(2027, 1, 1)
        old = make_project("old", created_at=now - timedelta(days=2))
        new = make_project("new", created_at=now)
        middle = make_project("middle", created_at=now - timedelta(days=1))
        for project in (old, new, middle):
            await temp_storage.save(project)

        projects = await temp_storage.load_all()

        assert [p.name for p in projects] == ["new", "middle", "old"]

    async def test_unreadable_file_skipped(self, temp_storage):
        await temp_storage.save(make_project("good"))
        (temp_storage.projects_path / "broken.json").write_text("{not json", encoding="utf-8")

        projects = await temp_storage.load_all()

        assert [p.name for p in projects] == ["good"]

    async def test_empty_storage(self, temp_storage):
        assert await temp_storage.load_all() == []


class TestDelete:
    async def test_delete_removes_project_and_artifacts(self, temp_storage, tmp_path):
        project = make_project()
        await temp_storage.save(project)
        artifact = tmp_path / "summary.docx"
        artifact.write_bytes(b"docx")
        await temp_storage.update_document(project.id, DocumentType.PROJECT_SUMMARY, "# S", str(artifact))

        assert await temp_storage.delete(project.id) is True

        assert await temp_storage.get(project.id) is None
        assert not artifact.exists()

    async def test_delete_missing_returns_false(self, temp_storage):
        assert await temp_storage.delete("nope") is False


class TestUpdateDocument:
    async def test_adds_document_with_metadata(self, temp_storage):
        project = make_project()
        await temp_storage.save(project)
        content = "# Title\n- A sufficiently long bullet\n" + "word " * 250

        updated = await temp_storage.update_document(project.id, DocumentType.TIMELINE, content)

        document = updated.get_document(DocumentType.TIMELINE)
        assert document.content == content
        assert document.word_count == 257
        assert document.reading_time_minutes == 2
        assert document.key_points == ["A sufficiently long bullet"]
        assert (await temp_storage.get(project.id)).get_document(DocumentType.TIMELINE) is not None

    async def test_replaces_existing_document_of_same_type(self, temp_storage):
        project = make_project()
        await temp_storage.save(project)
        first = await temp_storage.update_document(project.id, DocumentType.NDA, "first version")
        first_id = first.get_document(DocumentType.NDA).id

        updated = await temp_storage.update_document(project.id, DocumentType.NDA, "second version here")

        nda_documents = [d for d in updated.documents if d.type == DocumentType.NDA]
        assert len(nda_documents) == 1
        assert nda_documents[0].id == first_id
        assert nda_documents[0].content == "second version here"
        assert nda_documents[0].word_count == 3

    async def test_documents_of_different_types_coexist(self, temp_storage):
        project = make_project()
        await temp_storage.save(project)
        await temp_storage.update_document(project.id, DocumentType.NDA, "nda")
        updated = await temp_storage.update_document(project.id, DocumentType.TIMELINE, "timeline")

        assert {d.type for d in updated.documents} == {DocumentType.NDA, DocumentType.TIMELINE}

    async def test_concurrent_updates_keep_every_document(self, temp_storage):
        """같은 프로젝트에 동시에 여러 문서를 갱신해도 모두 저장되어야 한다."""
        project = make_project()
        await temp_storage.save(project)

        await asyncio.gather(*(
            temp_storage.update_document(project.id, document_type, f"{document_type.slug} body")
            for document_type in DocumentType
        ))

        stored = await temp_storage.get(project.id)
        assert {d.type for d in stored.documents} == set(DocumentType)

    async def test_replaced_artifact_is_removed(self, temp_storage, tmp_path):
        """다시 렌더링되어 경로가 바뀌면 이전 아티팩트 파일은 삭제되어야 한다."""
        project = make_project()
        await temp_storage.save(project)
        old_artifact = tmp_path / "nda_old.docx"
        new_artifact = tmp_path / "nda_new.docx"
        old_artifact.write_bytes(b"old")
        new_artifact.write_bytes(b"new")
        await temp_storage.update_document(project.id, DocumentType.NDA, "v1", str(old_artifact))

        updated = await temp_storage.update_document(project.id, DocumentType.NDA, "v2", str(new_artifact))

        assert updated.get_document(DocumentType.NDA).artifact_path == str(new_artifact)
        assert not old_artifact.exists()
        assert new_artifact.exists()

    async def test_same_artifact_path_is_kept(self, temp_storage, tmp_path):
        project = make_project()
        await temp_storage.save(project)
        artifact = tmp_path / "timeline.docx"
        artifact.write_bytes(b"docx")
        await temp_storage.update_document(project.id, DocumentType.TIMELINE, "v1", str(artifact))

        await temp_storage.update_document(project.id, DocumentType.TIMELINE, "v2", str(artifact))

        assert artifact.exists()

    async def test_unknown_project_raises(self, temp_storage):
        with pytest.raises(ProjectNotFoundError):
            await temp_storage.update_document("ghost", DocumentType.NDA, "text")

    async def test_words_per_minute_setting(self, tmp_path):
        storage = ProjectStorage(str(tmp_path / "slow"), words_per_minute=10)
        project = make_project()
        await storage.save(project)

        updated = await storage.update_document(project.id, DocumentType.NDA, "word " * 25)

        assert updated.get_document(DocumentType.NDA).reading_time_minutes == 3
