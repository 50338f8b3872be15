"""사전(lexicon) 기반 감성 점수 계산.

문단 단위로 긍정/부정 단어 수를 합산하고, 직전 3개 토큰 안에 부정어가 있으면
극성을 뒤집습니다. 합산 점수는 raw / sqrt(raw^2 + alpha)로 정규화하여
[-1, 1] 범위로 만듭니다.
"""

import math
from typing import Iterable

NORMALIZATION_ALPHA = 15.0
NEGATION_WINDOW = 3

POSITIVE_TERMS = frozenset({
    "innovative", "innovation", "innovate", "opportunity", "improve", "improvement",
    "efficient", "efficiency", "easy", "simple", "seamless", "fast", "reliable",
    "success", "successful", "great", "excellent", "powerful", "intuitive",
    "delight", "delightful", "enjoy", "love", "benefit", "beneficial", "growth",
    "grow", "empower", "enhance", "better", "best", "effective", "robust",
    "modern", "exciting", "happy", "valuable", "streamline", "productive",
    "convenient", "flexible", "clear", "smart", "helpful", "engaging", "elegant",
    "amazing", "awesome", "good", "fun", "friendly", "trusted", "thrive",
    "opportunities", "win", "boost", "save", "savings", "satisfaction",
})

NEGATIVE_TERMS = frozenset({
    "problem", "issue", "difficult", "difficulty", "slow", "broken", "fail",
    "failure", "error", "risk", "risky", "costly", "expensive", "frustrating",
    "frustration", "confusing", "painful", "pain", "waste", "inefficient",
    "tedious", "lack", "poor", "bad", "worse", "worst", "struggle", "challenge",
    "critical", "crisis", "vulnerable", "unreliable", "outdated", "bug", "lose",
    "loss", "insecure", "chaos", "chaotic", "delay", "threat", "hard", "burden",
    "complaint", "decline", "damage", "danger", "dangerous", "stress", "urgent",
    "missing", "fragmented", "cumbersome", "overwhelming",
})

NEGATORS = frozenset({"not", "no", "never", "without", "n't", "nor", "neither", "hardly"})


def polarity_score(terms: Iterable[str]) -> float:
    """
    소문자 표제어(lemma) 시퀀스의 극성 점수를 계산합니다.

    Args:
        terms: 토큰 순서대로 나열된 소문자 단어 (가능하면 lemma)

    Returns:
        -1.0 ~ 1.0 사이의 점수. 감성 단어가 없으면 0.0
    """
    raw = 0.0
    window: list[str] = []

    for term in terms:
        polarity = 0.0
        if term in POSITIVE_TERMS:
            polarity = 1.0
        elif term in NEGATIVE_TERMS:
            polarity = -1.0

        if polarity and any(previous in NEGATORS for previous in window):
            polarity = -polarity
        raw += polarity

        window.append(term)
        if len(window) > NEGATION_WINDOW:
            window.pop(0)

    if raw == 0.0:
        return 0.0
    score = raw / math.sqrt(raw * raw + NORMALIZATION_ALPHA)
    return max(-1.0, min(1.0, score))
