"""
API 라우터 설정 파일입니다.
각 기능별로 나누어진 API 주소들을 하나로 모으는 역할을 합니다.
"""

from fastapi import APIRouter

from docuforge.api.endpoints import compose, documents, health, projects

# 메인 API 라우터 생성
api_router = APIRouter()

# 헬스 체크 엔드포인트: 서버 상태 및 생성 모드 확인 (/health)
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"]
)

# 프로젝트 관리 엔드포인트: 생성/조회/삭제 (/projects)
api_router.include_router(
    projects.router,
    prefix="/projects",
    tags=["projects"]
)

# 문서 생성 엔드포인트: 프로젝트별 문서 생성/조회/내보내기 (/projects/{id}/documents)
api_router.include_router(
    documents.router,
    prefix="/projects/{project_id}/documents",
    tags=["documents"]
)

# 즉시 조립 엔드포인트: 저장 없이 오프라인 조립 (/compose)
api_router.include_router(
    compose.router,
    prefix="/compose",
    tags=["compose"]
)
