"""
프로젝트 문서 생성/조회 API입니다.

생성 요청은 DocumentPipeline(생성 → 렌더링 → 저장)을 실행하며,
렌더링/저장 실패는 HTTP 에러가 아닌 결과의 status 필드로 전달됩니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from docuforge.api.deps import load_project, resolve_document_type
from docuforge.layers.layer4_composition import DocumentComposer, get_document_composer
from docuforge.services import (
    GenerationMode,
    PipelineResult,
    ProjectStorage,
    create_pipeline,
    get_project_storage,
)

router = APIRouter()


def _result_payload(result: PipelineResult) -> dict:
    document = result.project.get_document(result.document_type) if result.project else None
    return {
        "status": result.status.value,
        "document_type": result.document_type.slug,
        "content": result.content,
        "artifact_path": result.artifact_path,
        "error": result.error,
        "document": document.model_dump(mode="json") if result.succeeded and document else None,
    }


@router.post("")
async def generate_all_documents(
    project_id: str,
    mode: Optional[GenerationMode] = None,
    render: bool = True,
    storage: ProjectStorage = Depends(get_project_storage),
    composer: DocumentComposer = Depends(get_document_composer),
) -> dict:
    """프로젝트의 다섯 가지 문서를 모두 생성"""
    project = await load_project(storage, project_id)
    pipeline = create_pipeline(mode=mode, render=render, storage=storage, composer=composer)

    results = await pipeline.generate_all(project)
    return {
        "project_id": project_id,
        "results": [_result_payload(result) for result in results],
    }


@router.post("/{slug}")
async def generate_document(
    project_id: str,
    slug: str,
    mode: Optional[GenerationMode] = None,
    render: bool = True,
    storage: ProjectStorage = Depends(get_project_storage),
    composer: DocumentComposer = Depends(get_document_composer),
) -> dict:
    """
    문서 하나를 생성하여 프로젝트에 저장합니다.

    - mode: offline / remote (생략 시 설정값)
    - render: .docx 아티팩트 생성 여부
    """
    document_type = resolve_document_type(slug)
    project = await load_project(storage, project_id)
    pipeline = create_pipeline(mode=mode, render=render, storage=storage, composer=composer)

    result = await pipeline.generate_document(project, document_type)
    return _result_payload(result)


@router.get("/{slug}")
async def get_document(
    project_id: str,
    slug: str,
    storage: ProjectStorage = Depends(get_project_storage),
) -> dict:
    """저장된 문서 조회"""
    document_type = resolve_document_type(slug)
    project = await load_project(storage, project_id)

    document = project.get_document(document_type)
    if not document:
        raise HTTPException(status_code=404, detail="문서가 아직 생성되지 않았습니다")

    return document.model_dump(mode="json")


@router.get("/{slug}/export")
async def export_document(
    project_id: str,
    slug: str,
    format: str = "markdown",
    storage: ProjectStorage = Depends(get_project_storage),
) -> Response:
    """
    저장된 문서를 파일로 다운로드하는 API.

    지원하는 형식:
    - markdown: 마크다운 텍스트 파일 (.md)
    - json: 메타데이터 포함 원본 (.json)
    """
    document_type = resolve_document_type(slug)
    project = await load_project(storage, project_id)

    document = project.get_document(document_type)
    if not document:
        raise HTTPException(status_code=404, detail="문서가 아직 생성되지 않았습니다")

    filename = f"{project.id}-{document_type.slug}"
    if format == "markdown":
        return Response(
            content=document.content,
            media_type="text/markdown",
            headers={
                "Content-Disposition": f'attachment; filename="{filename}.md"'
            }
        )
    elif format == "json":
        return Response(
            content=document.model_dump_json(indent=2),
            media_type="application/json",
            headers={
                "Content-Disposition": f'attachment; filename="{filename}.json"'
            }
        )
    else:
        raise HTTPException(
            status_code=400,
            detail=f"지원하지 않는 형식입니다: {format}"
        )
