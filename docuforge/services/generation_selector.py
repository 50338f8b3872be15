"""
생성 전략 선택기.

원격 생성기(OpenAI)와 오프라인 DocumentComposer 중 하나로 문서 본문을 만듭니다.

┌─────────────────────────────┬──────────────────────────────────────┐
│ 상황                         │ 결과                                  │
├─────────────────────────────┼──────────────────────────────────────┤
│ mode=REMOTE, 원격 설정됨      │ 원격 결과 (실패 시 compose 결과)        │
│ mode=REMOTE, 원격 설정 안 됨  │ compose 결과                          │
│ mode=OFFLINE                │ compose 결과                          │
│ generate_sync()             │ 항상 compose 결과                      │
└─────────────────────────────┴──────────────────────────────────────┘

원격 경로의 모든 예외는 이 경계에서 흡수되며 호출자에게 전달되지 않습니다.
"""

import asyncio
import logging
from enum import Enum
from typing import Optional, Protocol

from docuforge.exceptions import RemoteGenerationError
from docuforge.layers.layer4_composition import DocumentComposer
from docuforge.models import DocumentType, Project

logger = logging.getLogger(__name__)


class GenerationMode(str, Enum):
    OFFLINE = "offline"
    REMOTE = "remote"

    @classmethod
    def resolve(cls, value: Optional[str], remote_configured: bool) -> "GenerationMode":
        """설정 문자열(auto/offline/remote)을 실제 모드로 변환합니다."""
        normalized = (value or "auto").strip().lower()
        if normalized == "auto":
            return cls.REMOTE if remote_configured else cls.OFFLINE
        return cls(normalized)


class RemoteGenerator(Protocol):
    def is_configured(self) -> bool:
        ...

    async def generate(self, project: Project, document_type: DocumentType) -> str:
        ...


class GenerationSession:
    """호출자가 소유하는 생성 모드 상태."""

    def __init__(self, mode: GenerationMode):
        self.mode = mode


class GenerationStrategySelector:
    """
    원격/오프라인 생성 전략 선택기.

    Attributes:
        remote: 원격 생성기 (is_configured / generate)
        composer: 오프라인 문서 조립기
        session: 현재 생성 모드를 담는 세션
    """

    def __init__(
        self,
        remote: RemoteGenerator,
        composer: DocumentComposer,
        mode: Optional[GenerationMode] = None,
        session: Optional[GenerationSession] = None,
    ):
        self.remote = remote
        self.composer = composer
        if session is None:
            default_mode = GenerationMode.REMOTE if remote.is_configured() else GenerationMode.OFFLINE
            session = GenerationSession(mode or default_mode)
        elif mode is not None:
            session.mode = mode
        self.session = session

        if not remote.is_configured():
            logger.info("[Selector] 원격 생성기 미설정, 오프라인 모드로 동작합니다")

    @property
    def mode(self) -> GenerationMode:
        return self.session.mode

    def set_mode(self, mode: GenerationMode) -> None:
        self.session.mode = mode
        logger.info(f"[Selector] 모드 변경: {mode.value}")

    def can_use_remote(self) -> bool:
        return self.remote.is_configured()

    async def generate_async(self, project: Project, document_type: DocumentType) -> str:
        """
        현재 모드에 따라 문서를 생성합니다.

        원격 생성이 어떤 이유로든 실패하면 경고를 남기고
        compose() 결과를 그대로 반환합니다.
        """
        if self.mode == GenerationMode.REMOTE and self.can_use_remote():
            try:
                content = await self.remote.generate(project, document_type)
                logger.info(f"[Selector] 원격 생성 성공: {document_type.label}")
                return content
            except (RemoteGenerationError, asyncio.TimeoutError) as e:
                logger.warning(
                    f"[Selector] 원격 생성 실패, 오프라인으로 대체: "
                    f"{type(e).__name__}: {e}"
                )
            except Exception as e:
                # 분류되지 않은 원격 오류도 호출자에게 전달하지 않음
                logger.warning(
                    f"[Selector] 예상하지 못한 원격 오류, 오프라인으로 대체: "
                    f"{type(e).__name__}: {e}",
                    exc_info=True,
                )

        return self.composer.compose(project, document_type)

    def generate_sync(self, project: Project, document_type: DocumentType) -> str:
        """원격 경로를 사용하지 않는 동기 생성 (항상 오프라인)."""
        return self.composer.compose(project, document_type)
