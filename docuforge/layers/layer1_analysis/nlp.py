"""spaCy 파이프라인 로더.

설정된 모델(기본: en_core_web_sm)을 한 번만 로드하여 재사용합니다.
모델 패키지가 설치되어 있지 않으면 spacy.blank("en")으로 대체합니다.
이 경우 품사/개체명 정보가 없으므로 키워드는 빈도 기반 단계에서만 추출됩니다.
"""

import logging
from functools import lru_cache

import spacy
from spacy.language import Language

logger = logging.getLogger(__name__)

# 품사 정보를 제공하는 컴포넌트 이름
_POS_COMPONENTS = ("tagger", "morphologizer", "attribute_ruler")


@lru_cache(maxsize=4)
def load_pipeline(model_name: str) -> Language:
    """모델을 로드합니다. 실패 시 빈 영어 파이프라인을 반환합니다."""
    try:
        nlp = spacy.load(model_name)
        logger.info(f"[NLP] spaCy 모델 로드 완료: {model_name} ({', '.join(nlp.pipe_names)})")
        return nlp
    except OSError as e:
        logger.warning(f"[NLP] spaCy 모델 '{model_name}'을 찾을 수 없어 blank 파이프라인을 사용합니다: {e}")
        return spacy.blank("en")


def has_pos_tags(nlp: Language) -> bool:
    """파이프라인이 품사 태그를 생성하는지 여부."""
    return any(name in nlp.pipe_names for name in _POS_COMPONENTS)
