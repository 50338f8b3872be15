"""API 공통 의존성."""

from docuforge.exceptions import InputValidationError, ProjectNotFoundError
from docuforge.models import DocumentType, Project
from docuforge.services import ProjectStorage


def resolve_document_type(slug: str) -> DocumentType:
    """URL 슬러그(project-summary 등)를 DocumentType으로 변환합니다."""
    try:
        return DocumentType.from_slug(slug)
    except ValueError:
        raise InputValidationError(
            f"지원하지 않는 문서 종류입니다: {slug}",
            details={"supported": [document_type.slug for document_type in DocumentType]},
        )


async def load_project(storage: ProjectStorage, project_id: str) -> Project:
    project = await storage.get(project_id)
    if not project:
        raise ProjectNotFoundError(
            "프로젝트를 찾을 수 없습니다", details={"project_id": project_id}
        )
    return project
