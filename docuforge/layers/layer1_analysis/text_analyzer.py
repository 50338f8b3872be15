"""Layer 1: 텍스트 분석기.

자유 텍스트(프로젝트 설명/목표/기능명)에서 언어적 신호를 추출합니다.

주요 기능:
- extract_keywords(): 개체명 → 명사 → 동사 → 형용사 → 고빈도 표제어 순 키워드 (최대 15개)
- analyze_sentiment(): 문단 단위 극성 점수와 신뢰도
- first_verb_and_noun(): 기능명에서 첫 동사/명사 추출 (기능 설명 생성에 사용)

모든 메서드는 입력 텍스트에 대한 순수 함수이며 같은 입력에 항상 같은 결과를 냅니다.
"""

import logging
from collections import Counter
from typing import Iterable, Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from docuforge.config import get_settings
from docuforge.models import SentimentResult
from .nlp import has_pos_tags, load_pipeline
from .sentiment import polarity_score

logger = logging.getLogger(__name__)

MAX_KEYWORDS = 15
TOP_NOUNS = 5
TOP_VERBS = 3
TOP_ADJECTIVES = 3
TOP_EXTRA_TERMS = 5
MIN_TOKEN_LENGTH = 3  # 길이 2 이하 토큰은 버림

# 관사, 조동사 등 키워드에서 제외할 단어
STOPWORDS = frozenset({
    "the", "and", "this", "that", "with", "for", "will", "have", "from", "not",
    "are", "were", "was", "been", "being", "can", "could", "should", "would",
    "shall", "may", "might", "must",
})

# 인명/지명/조직명 계열만 개체명으로 취급 (날짜, 수량 등은 제외)
ENTITY_LABELS = frozenset({"PERSON", "ORG", "GPE", "LOC", "FAC", "NORP", "PRODUCT"})

NOUN_TAGS = frozenset({"NOUN", "PROPN"})
VERB_TAGS = frozenset({"VERB"})
ADJECTIVE_TAGS = frozenset({"ADJ"})


class TextAnalyzer:
    """
    spaCy 기반 텍스트 분석기.

    Attributes:
        nlp: 사용할 spaCy 파이프라인. None이면 설정의 spacy_model을 지연 로드합니다.
    """

    def __init__(self, nlp: Optional[Language] = None, model_name: Optional[str] = None):
        self._nlp = nlp
        self._model_name = model_name

    @property
    def nlp(self) -> Language:
        if self._nlp is None:
            self._nlp = load_pipeline(self._model_name or get_settings().spacy_model)
            if not has_pos_tags(self._nlp):
                logger.info("[TextAnalyzer] 품사 태그 없음: 키워드는 빈도 기반으로만 추출됩니다")
        return self._nlp

    # ==================== 키워드 추출 ====================

    def extract_keywords(self, text: str) -> list[str]:
        """
        텍스트에서 키워드를 우선순위대로 추출합니다.

        우선순위:
        1. 개체명 (원문 표기, 첫 등장 순)
        2. 빈도 상위 명사 5개
        3. 빈도 상위 동사 3개
        4. 빈도 상위 형용사 3개
        5. 아직 포함되지 않은 고빈도 표제어 5개

        대소문자 구분 없이 중복을 제거하고 최대 15개로 자릅니다.
        빈도가 같으면 먼저 등장한 단어가 앞섭니다.

        Args:
            text: 분석할 자유 텍스트

        Returns:
            키워드 목록 (빈 텍스트는 빈 목록)
        """
        if not text or not text.strip():
            return []

        doc = self.nlp(text)

        entities: list[str] = []
        nouns: list[str] = []
        verbs: list[str] = []
        adjectives: list[str] = []
        lemma_of: dict[str, str] = {}
        frequencies: Counter = Counter()

        for token in doc:
            if token.is_punct or token.is_space:
                continue

            if token.ent_type_ in ENTITY_LABELS:
                entities.append(token.text)

            lemma = self._normalize(token)
            if self._is_candidate(lemma):
                frequencies[lemma] += 1

            word = token.lower_
            if not self._is_candidate(word):
                continue
            lemma_of.setdefault(word, lemma)

            if token.pos_ in NOUN_TAGS:
                nouns.append(word)
            elif token.pos_ in VERB_TAGS:
                verbs.append(word)
            elif token.pos_ in ADJECTIVE_TAGS:
                adjectives.append(word)

        def rank(words: Iterable[str]) -> list[str]:
            unique = list(dict.fromkeys(words))
            return sorted(unique, key=lambda w: frequencies.get(lemma_of.get(w, w), 0), reverse=True)

        keywords: list[str] = []
        seen: set[str] = set()

        def take(candidates: Iterable[str], limit: Optional[int] = None) -> None:
            taken = 0
            for candidate in candidates:
                if limit is not None and taken >= limit:
                    break
                key = candidate.lower()
                if key in seen:
                    continue
                seen.add(key)
                keywords.append(candidate)
                taken += 1

        take(entities)
        take(rank(nouns), TOP_NOUNS)
        take(rank(verbs), TOP_VERBS)
        take(rank(adjectives), TOP_ADJECTIVES)
        take((term for term, _ in frequencies.most_common()), TOP_EXTRA_TERMS)

        result = keywords[:MAX_KEYWORDS]
        logger.debug(f"[TextAnalyzer] 키워드 {len(result)}개 추출 (개체명 {len(entities)}개)")
        return result

    # ==================== 감성 분석 ====================

    def analyze_sentiment(self, text: str) -> SentimentResult:
        """
        문단 단위 감성 점수를 계산합니다.

        - score: -1(문제/비판) ~ 1(기회/긍정), 0 근처는 중립
        - confidence: min(len(text), 100) / 100

        빈 텍스트는 (0, 0)을 반환합니다.
        """
        if not text:
            return SentimentResult(score=0.0, confidence=0.0)

        doc = self.nlp(text)
        terms = [self._normalize(token) for token in doc if not (token.is_punct or token.is_space)]
        score = polarity_score(terms)
        confidence = min(len(text), 100) / 100.0

        return SentimentResult(score=score, confidence=confidence)

    # ==================== 기능명 분석 ====================

    def first_verb_and_noun(self, text: str) -> tuple[Optional[str], Optional[str]]:
        """기능명에서 처음 나오는 동사와 명사를 소문자로 반환합니다."""
        if not text or not text.strip():
            return None, None

        doc = self.nlp(text)
        verb = self._first_with_tag(doc, VERB_TAGS)
        noun = self._first_with_tag(doc, NOUN_TAGS)
        return verb, noun

    # ==================== 내부 도우미 ====================

    @staticmethod
    def _normalize(token: Token) -> str:
        """표제어(lemma)를 소문자로. lemmatizer가 없으면 표면형을 사용합니다."""
        lemma = token.lemma_.lower().strip()
        return lemma or token.lower_

    @staticmethod
    def _is_candidate(word: str) -> bool:
        return len(word) >= MIN_TOKEN_LENGTH and word not in STOPWORDS

    @staticmethod
    def _first_with_tag(doc: Doc, tags: frozenset) -> Optional[str]:
        for token in doc:
            if token.pos_ in tags:
                return token.lower_
        return None
