"""
DocuForge 문서 생성 서버의 메인 진입점 파일입니다.
웹 서버 애플리케이션을 생성하고 설정하는 역할을 담당합니다.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from docuforge import __version__
from docuforge.api.router import api_router
from docuforge.config import get_settings
from docuforge.exceptions import DocuForgeError, InputValidationError, ProjectNotFoundError
from docuforge.logging_config import configure_logging
from docuforge.services import GenerationMode

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션의 생명주기(시작과 종료)를 관리하는 함수입니다.

    서버가 시작될 때:
    1. 로깅과 설정을 초기화합니다.
    2. 기본 생성 모드를 로그로 남깁니다.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    mode = GenerationMode.resolve(settings.generation_mode, settings.remote_configured)
    logger.info(f"DocuForge가 다음 주소에서 시작됩니다: {settings.host}:{settings.port}")
    logger.info(f"기본 생성 모드: {mode.value} (원격 설정: {settings.remote_configured})")

    yield

    logger.info("DocuForge가 종료됩니다")


def error_status_code(exc: DocuForgeError) -> int:
    if isinstance(exc, ProjectNotFoundError):
        return 404
    if isinstance(exc, InputValidationError):
        return 400
    return 500


def create_app() -> FastAPI:
    """
    FastAPI 웹 애플리케이션을 생성하고 설정하는 함수입니다.

    주요 기능:
    1. 기본 앱 정보 설정 (제목, 설명 등)
    2. 커스텀 예외를 구조화된 JSON 응답으로 변환
    3. API 라우터 연결 (/api/v1)
    """
    app = FastAPI(
        title="DocuForge",
        description="프로젝트 정보로 5종 프로젝트 문서를 생성하는 오프라인 우선 문서 엔진",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # 글로벌 예외 핸들러: 커스텀 예외를 구조화된 JSON 응답으로 변환
    @app.exception_handler(DocuForgeError)
    async def docuforge_error_handler(request: Request, exc: DocuForgeError):
        return JSONResponse(
            status_code=error_status_code(exc),
            content={
                "error_code": exc.error_code,
                "message": exc.message,
                "details": exc.details,
                "timestamp": datetime.now().isoformat(),
            },
        )

    @app.exception_handler(Exception)
    async def general_error_handler(request: Request, exc: Exception):
        logger.error(f"처리되지 않은 예외: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error_code": "ERR_INTERNAL",
                "message": "내부 서버 오류가 발생했습니다",
                "details": None,
                "timestamp": datetime.now().isoformat(),
            },
        )

    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """루트 엔드포인트: 서버의 기본 정보를 반환합니다."""
        return {
            "name": "DocuForge",
            "version": __version__,
            "description": "프로젝트 문서 자동 생성",
            "docs": "/docs",
            "api": "/api/v1",
        }

    return app


# 애플리케이션 인스턴스 생성
app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "docuforge.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )
