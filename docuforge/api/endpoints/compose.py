"""
즉시 조립 API입니다.
프로젝트를 저장하지 않고 요청 본문만으로 오프라인 문서를 조립합니다.
"""

from fastapi import APIRouter, Depends

from docuforge.api.deps import resolve_document_type
from docuforge.layers.layer4_composition import DocumentComposer, get_document_composer
from docuforge.models import ProjectCreate
from docuforge.utils.text_metrics import count_words, extract_key_points, reading_time_minutes

router = APIRouter()


@router.post("/{slug}")
async def compose_document(
    slug: str,
    request: ProjectCreate,
    composer: DocumentComposer = Depends(get_document_composer),
) -> dict:
    """요청 본문의 프로젝트로 문서 하나를 조립 (원격 생성기 미사용)"""
    document_type = resolve_document_type(slug)
    content = composer.compose(request.to_project(), document_type)
    word_count = count_words(content)

    return {
        "document_type": document_type.slug,
        "label": document_type.label,
        "content": content,
        "word_count": word_count,
        "reading_time_minutes": reading_time_minutes(word_count),
        "key_points": extract_key_points(content),
    }
