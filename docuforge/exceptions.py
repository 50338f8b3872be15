"""
DocuForge 커스텀 예외 계층입니다.
각 서비스별 구조화된 에러 코드와 메시지를 제공합니다.

원격 생성 경로의 예외(RemoteGenerationError 하위)는 GenerationStrategySelector
경계에서 모두 흡수되어 오프라인 생성으로 대체됩니다.
"""

from typing import Optional, Any


class DocuForgeError(Exception):
    """DocuForge 기본 예외 클래스."""

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Any] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)


# ==================== 원격 생성기 ====================

class RemoteGenerationError(DocuForgeError):
    """원격(OpenAI) 생성 경로 에러의 기본 클래스."""

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_REMOTE_000",
        details: Optional[Any] = None,
    ):
        super().__init__(message, error_code=error_code, details=details)


class RemoteNotConfiguredError(RemoteGenerationError):
    """API 키가 설정되지 않음."""

    def __init__(self, message: str = "Remote generator is not configured", details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_REMOTE_001", details=details)


class RemoteTransientError(RemoteGenerationError):
    """재시도 가능한 일시적 네트워크 오류 (타임아웃, 연결 실패 등)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_REMOTE_002", details=details)


class RemoteNetworkError(RemoteGenerationError):
    """재시도를 모두 소진했거나 재시도 불가능한 네트워크 오류."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_REMOTE_003", details=details)


class RemoteAPIError(RemoteGenerationError):
    """서버가 에러 메시지를 반환함."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_REMOTE_004", details=details)


class RemoteDecodeError(RemoteGenerationError):
    """응답 본문을 해석할 수 없음."""

    def __init__(self, message: str = "Malformed response from remote generator", details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_REMOTE_005", details=details)


# ==================== 저장소 / 렌더링 ====================

class StorageError(DocuForgeError):
    """프로젝트 저장소 관련 에러."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_STORE_001", details=details)


class ProjectNotFoundError(DocuForgeError):
    """요청한 프로젝트가 저장소에 없음."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_STORE_404", details=details)


class RenderError(DocuForgeError):
    """문서 아티팩트(docx) 렌더링 에러."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_RENDER_001", details=details)


class InputValidationError(DocuForgeError):
    """입력 유효성 검증 에러 (400 응답)."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message, error_code="ERR_INPUT_001", details=details)
