"""
헬스 체크(Health Check) 엔드포인트입니다.
서버가 살아서 정상적으로 응답하는지 확인하는 용도입니다.
"""

from fastapi import APIRouter

from docuforge.config import get_settings
from docuforge.services import GenerationMode

router = APIRouter()


@router.get("")
async def health_check():
    """
    기본 상태 확인 함수.
    서버가 켜져 있으면 {"status": "healthy"}를 반환합니다.
    """
    return {"status": "healthy"}


@router.get("/detail")
async def health_check_detail():
    """
    상세 상태 확인 함수.
    기본 생성 모드와 원격 생성기 설정 여부, 텍스트 분석 모델을 같이 보여줍니다.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "config": {
            "generation_mode": GenerationMode.resolve(
                settings.generation_mode, settings.remote_configured
            ).value,
            "remote_configured": settings.remote_configured,  # OpenAI 키 설정 여부
            "openai_model": settings.openai_model,
            "spacy_model": settings.spacy_model,
        }
    }
