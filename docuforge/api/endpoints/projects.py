"""
프로젝트 관리 API입니다.
문서 생성의 입력이 되는 프로젝트를 등록하고 조회/삭제합니다.
"""

from fastapi import APIRouter, Depends

from docuforge.api.deps import load_project
from docuforge.exceptions import ProjectNotFoundError
from docuforge.models import ProjectCreate
from docuforge.services import ProjectStorage, get_project_storage

router = APIRouter()


@router.post("", status_code=201)
async def create_project(
    request: ProjectCreate,
    storage: ProjectStorage = Depends(get_project_storage),
) -> dict:
    """새 프로젝트 등록"""
    project = request.to_project()
    await storage.save(project)
    return project.model_dump(mode="json")


@router.get("")
async def list_projects(
    skip: int = 0,
    limit: int = 20,
    storage: ProjectStorage = Depends(get_project_storage),
) -> dict:
    """등록된 프로젝트 목록 조회 (최신순, 페이지네이션 지원)"""
    projects = await storage.load_all()
    page = projects[skip:skip + limit]

    return {
        "total": len(projects),
        "projects": [
            {
                "id": project.id,
                "name": project.name,
                "launch_date": project.launch_date.isoformat(),
                "created_at": project.created_at.isoformat(),
                "documents": [document.type.slug for document in project.documents],
            }
            for project in page
        ],
    }


@router.get("/{project_id}")
async def get_project(
    project_id: str,
    storage: ProjectStorage = Depends(get_project_storage),
) -> dict:
    """ID로 프로젝트 상세 조회"""
    project = await load_project(storage, project_id)
    return project.model_dump(mode="json")


@router.delete("/{project_id}")
async def delete_project(
    project_id: str,
    storage: ProjectStorage = Depends(get_project_storage),
) -> dict:
    """프로젝트 및 렌더링된 문서 파일 삭제"""
    deleted = await storage.delete(project_id)
    if not deleted:
        raise ProjectNotFoundError(
            "프로젝트를 찾을 수 없습니다", details={"project_id": project_id}
        )
    return {"deleted": True, "project_id": project_id}
