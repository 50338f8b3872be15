"""
문서 생성 파이프라인입니다.

처리 단계:
1. 생성 (Generation): 선택기로 본문 텍스트를 만듭니다. 이 단계는 실패하지 않습니다.
2. 렌더링 (Render): 본문을 .docx 아티팩트로 저장합니다.
3. 저장 (Persist): 프로젝트 파일에 문서 메타데이터를 기록합니다.

렌더링/저장 실패는 예외 대신 PipelineResult.status로 보고하며,
실패한 경우에도 생성된 본문은 결과에 남습니다.
"""

import asyncio
import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from docuforge.config import get_settings
from docuforge.exceptions import ProjectNotFoundError, RenderError, StorageError
from docuforge.layers.layer4_composition import DocumentComposer, get_document_composer
from docuforge.models import DocumentType, Project
from docuforge.services.document_renderer import DocumentRenderer
from docuforge.services.generation_selector import (
    GenerationMode,
    GenerationSession,
    GenerationStrategySelector,
)
from docuforge.services.openai_client import get_openai_client
from docuforge.services.project_storage import ProjectStorage, get_project_storage

logger = logging.getLogger(__name__)


class PipelineStatus(str, Enum):
    SUCCESS = "success"
    RENDER_FAILED = "render_failed"
    PERSIST_FAILED = "persist_failed"


class PipelineResult(BaseModel):
    """문서 하나에 대한 파이프라인 실행 결과."""
    status: PipelineStatus
    document_type: DocumentType
    content: str = Field(..., description="생성된 본문 (실패 시에도 유지)")
    artifact_path: Optional[str] = Field(default=None, description="렌더링된 파일 경로")
    error: Optional[str] = Field(default=None, description="실패 원인 메시지")
    project: Optional[Project] = Field(default=None, description="저장 후 갱신된 프로젝트")

    @property
    def succeeded(self) -> bool:
        return self.status == PipelineStatus.SUCCESS


class DocumentPipeline:
    """
    생성 → 렌더링 → 저장 순서를 조율하는 클래스입니다.

    Attributes:
        selector: 원격/오프라인 생성 전략 선택기
        storage: 프로젝트 저장소 (None이면 저장 단계 생략)
        renderer: 아티팩트 렌더러 (None이면 렌더링 단계 생략)
    """

    def __init__(
        self,
        selector: GenerationStrategySelector,
        storage: Optional[ProjectStorage] = None,
        renderer: Optional[DocumentRenderer] = None,
    ):
        self.selector = selector
        self.storage = storage
        self.renderer = renderer

    async def generate_document(self, project: Project, document_type: DocumentType) -> PipelineResult:
        # ========== 1단계: 생성 ==========
        content = await self.selector.generate_async(project, document_type)
        return await self._deliver(project, document_type, content)

    async def _deliver(self, project: Project, document_type: DocumentType, content: str) -> PipelineResult:
        # ========== 2단계: 렌더링 ==========
        artifact_path: Optional[str] = None
        if self.renderer is not None:
            try:
                loop = asyncio.get_running_loop()
                path = await loop.run_in_executor(
                    None, self.renderer.render, content, f"{project.name} {document_type.label}"
                )
                artifact_path = str(path)
            except RenderError as e:
                logger.error(f"[Pipeline] 렌더링 실패 ({document_type.label}): {e.message}")
                return PipelineResult(
                    status=PipelineStatus.RENDER_FAILED,
                    document_type=document_type,
                    content=content,
                    error=e.message,
                    project=project,
                )

        # ========== 3단계: 저장 ==========
        updated = project
        if self.storage is not None:
            try:
                updated = await self.storage.update_document(
                    project.id, document_type, content, artifact_path
                )
            except (StorageError, ProjectNotFoundError) as e:
                logger.error(f"[Pipeline] 저장 실패 ({document_type.label}): {e.message}")
                return PipelineResult(
                    status=PipelineStatus.PERSIST_FAILED,
                    document_type=document_type,
                    content=content,
                    artifact_path=artifact_path,
                    error=e.message,
                    project=project,
                )

        logger.info(f"[Pipeline] 완료: {document_type.label} (project={project.name})")
        return PipelineResult(
            status=PipelineStatus.SUCCESS,
            document_type=document_type,
            content=content,
            artifact_path=artifact_path,
            project=updated,
        )

    async def generate_all(
        self,
        project: Project,
        document_types: Optional[list[DocumentType]] = None,
    ) -> list[PipelineResult]:
        """
        여러 문서를 생성합니다.

        본문 생성은 병렬로 실행하고, 같은 프로젝트 파일을 갱신하는 저장 단계는
        순서대로 실행하여 서로의 문서를 덮어쓰지 않도록 합니다.
        """
        types = document_types or list(DocumentType)
        contents = await asyncio.gather(
            *(self.selector.generate_async(project, document_type) for document_type in types)
        )

        results = []
        for document_type, content in zip(types, contents):
            results.append(await self._deliver(project, document_type, content))
        return results


def create_pipeline(
    mode: Optional[GenerationMode] = None,
    render: bool = True,
    storage: Optional[ProjectStorage] = None,
    composer: Optional[DocumentComposer] = None,
    renderer: Optional[DocumentRenderer] = None,
) -> DocumentPipeline:
    """
    설정값으로 파이프라인을 구성합니다.

    Args:
        mode: 생성 모드. None이면 설정의 generation_mode(auto/offline/remote)를 따릅니다.
        render: False면 아티팩트 렌더링을 생략합니다.
        storage: 프로젝트 저장소 (기본값: 공유 저장소)
        composer: 오프라인 조립기 (기본값: 공유 조립기)
        renderer: 아티팩트 렌더러 (기본값: {data_dir}/artifacts 에 저장)
    """
    settings = get_settings()
    remote = get_openai_client()
    session = GenerationSession(
        mode or GenerationMode.resolve(settings.generation_mode, remote.is_configured())
    )
    selector = GenerationStrategySelector(
        remote, composer or get_document_composer(), session=session
    )
    return DocumentPipeline(
        selector,
        storage=storage or get_project_storage(),
        renderer=(renderer or DocumentRenderer()) if render else None,
    )
