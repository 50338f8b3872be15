"""
파일 기반 프로젝트 저장소입니다.
프로젝트 하나를 JSON 파일 하나로 저장합니다: {data_dir}/projects/{id}.json

생성된 문서(GeneratedDocument)는 프로젝트 파일 안에 함께 저장되며,
렌더링된 아티팩트 파일 경로만 기록합니다.

같은 프로젝트 파일에 대한 save/delete/update_document는 프로젝트별
asyncio.Lock으로 직렬화됩니다 (읽기-수정-쓰기 사이에 다른 쓰기가 끼어들지 않음).
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import Optional

import aiofiles

from docuforge.config import get_settings
from docuforge.exceptions import ProjectNotFoundError, StorageError
from docuforge.models import DocumentType, GeneratedDocument, Project
from docuforge.utils.text_metrics import DEFAULT_WORDS_PER_MINUTE

logger = logging.getLogger(__name__)


class ProjectStorage:
    """JSON 파일 기반의 프로젝트 저장소 클래스입니다."""

    def __init__(self, base_path: str = "data", words_per_minute: int = DEFAULT_WORDS_PER_MINUTE):
        self.base_path = Path(base_path)
        self.projects_path = self.base_path / "projects"
        self.words_per_minute = words_per_minute
        self._locks: dict[str, asyncio.Lock] = {}

        self.projects_path.mkdir(parents=True, exist_ok=True)

    # ==================== 프로젝트 ====================

    async def save(self, project: Project) -> str:
        """프로젝트를 파일로 저장합니다 (있으면 덮어씀)."""
        async with self._lock(project.id):
            await self._write(self._project_file(project.id), project)
        return project.id

    async def load_all(self) -> list[Project]:
        """
        저장된 모든 프로젝트를 최신 생성 순으로 불러옵니다.
        읽을 수 없는 파일은 에러 로그를 남기고 건너뜁니다.
        """
        projects = []
        for file_path in sorted(self.projects_path.glob("*.json")):
            project = await self._read(file_path)
            if project:
                projects.append(project)

        projects.sort(key=lambda p: p.created_at, reverse=True)
        return projects

    async def get(self, project_id: str) -> Optional[Project]:
        """ID로 프로젝트를 불러옵니다."""
        file_path = self._project_file(project_id)
        if not file_path.exists():
            return None
        return await self._read(file_path)

    async def delete(self, project_id: str) -> bool:
        """프로젝트 파일과 해당 문서들의 아티팩트 파일을 삭제합니다."""
        async with self._lock(project_id):
            file_path = self._project_file(project_id)
            if not file_path.exists():
                return False

            project = await self._read(file_path)
            file_path.unlink()

        for document in project.documents if project else []:
            self._remove_artifact(document.artifact_path)

        logger.info(f"[Storage] 프로젝트 삭제: {project_id}")
        return True

    # ==================== 문서 ====================

    async def update_document(
        self,
        project_id: str,
        document_type: DocumentType,
        content: str,
        artifact_path: Optional[str] = None,
    ) -> Project:
        """
        프로젝트의 해당 종류 문서를 새 본문으로 교체하거나 추가합니다.
        단어 수/읽기 시간/핵심 포인트는 본문에서 다시 계산됩니다.
        이전 아티팩트 파일은 경로가 바뀌면 저장 후 삭제됩니다.

        Raises:
            ProjectNotFoundError: 프로젝트가 없음
            StorageError: 파일 저장 실패
        """
        async with self._lock(project_id):
            project = await self.get(project_id)
            if project is None:
                raise ProjectNotFoundError(
                    f"프로젝트를 찾을 수 없습니다: {project_id}",
                    details={"project_id": project_id},
                )

            replaced_artifact = None
            existing = project.get_document(document_type)
            if existing:
                if existing.artifact_path != artifact_path:
                    replaced_artifact = existing.artifact_path
                existing.apply_content(content, artifact_path, self.words_per_minute)
            else:
                project.documents.append(GeneratedDocument.from_content(
                    document_type,
                    content,
                    artifact_path=artifact_path,
                    words_per_minute=self.words_per_minute,
                ))

            await self._write(self._project_file(project.id), project)

        self._remove_artifact(replaced_artifact)
        logger.info(f"[Storage] 문서 갱신: {document_type.label} (project={project.name})")
        return project

    # ==================== 내부 도우미 함수들 ====================

    def _lock(self, project_id: str) -> asyncio.Lock:
        return self._locks.setdefault(Path(project_id).name, asyncio.Lock())

    def _project_file(self, project_id: str) -> Path:
        # 경로 구분자가 섞인 ID로 저장소 밖을 가리키지 않도록 파일명만 사용
        return self.projects_path / f"{Path(project_id).name}.json"

    @staticmethod
    def _remove_artifact(artifact_path: Optional[str]) -> None:
        if artifact_path and os.path.exists(artifact_path):
            os.remove(artifact_path)
            logger.debug(f"[Storage] 아티팩트 삭제: {artifact_path}")

    async def _write(self, file_path: Path, project: Project) -> None:
        try:
            async with aiofiles.open(file_path, "w", encoding="utf-8") as f:
                await f.write(project.model_dump_json(indent=2))
        except OSError as e:
            logger.error(f"[Storage] 파일 저장 실패 {file_path}: {e}", exc_info=True)
            raise StorageError(
                f"파일 저장에 실패했습니다: {file_path.name}",
                details={"path": str(file_path), "error": str(e)},
            )

    async def _read(self, file_path: Path) -> Optional[Project]:
        try:
            async with aiofiles.open(file_path, "r", encoding="utf-8") as f:
                content = await f.read()
            return Project.model_validate_json(content)
        except (OSError, ValueError) as e:
            logger.error(f"[Storage] 파일 로딩 에러 {file_path}: {e}", exc_info=True)
            return None


# 싱글톤 인스턴스 (프로그램 전체에서 공유)
_project_storage: Optional[ProjectStorage] = None


def get_project_storage() -> ProjectStorage:
    """ProjectStorage 인스턴스를 반환합니다."""
    global _project_storage
    if _project_storage is None:
        settings = get_settings()
        _project_storage = ProjectStorage(settings.data_dir, settings.reading_words_per_minute)
    return _project_storage
