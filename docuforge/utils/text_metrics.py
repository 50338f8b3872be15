"""생성된 문서의 메타데이터(단어 수, 읽기 시간, 핵심 포인트) 계산 유틸리티."""

import math
import re

DEFAULT_WORDS_PER_MINUTE = 220
MAX_KEY_POINTS = 5

# 글머리표 또는 번호 목록 ("1. ") 접두어
_BULLET_PREFIXES = ("- ", "* ", "• ")
_NUMBERED_PREFIX = re.compile(r"^\d+\.\s")


def count_words(text: str) -> int:
    """공백/줄바꿈 기준으로 비어있지 않은 토큰 수를 셉니다."""
    return len(text.split())


def reading_time_minutes(word_count: int, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    """
    읽기 시간(분)을 계산합니다.

    모든 호출 지점에서 동일하게 max(1, ceil(words / wpm))을 사용합니다.
    """
    if words_per_minute <= 0:
        words_per_minute = DEFAULT_WORDS_PER_MINUTE
    return max(1, math.ceil(word_count / words_per_minute))


def extract_key_points(content: str, limit: int = MAX_KEY_POINTS) -> list[str]:
    """
    글머리표/번호 목록 줄에서 핵심 포인트를 추출합니다.

    조건:
    - 줄 전체(trim 후) 길이가 5 초과 120 미만
    - 접두어 제거 후 길이가 10 초과
    - 최대 limit개
    """
    key_points: list[str] = []

    for line in content.splitlines():
        trimmed = line.strip()
        if not (5 < len(trimmed) < 120):
            continue

        if trimmed.startswith(_BULLET_PREFIXES):
            point = trimmed[2:]
        else:
            match = _NUMBERED_PREFIX.match(trimmed)
            if not match:
                continue
            point = trimmed[match.end():]

        point = point.strip()
        if len(point) > 10:
            key_points.append(point)

        if len(key_points) >= limit:
            break

    return key_points
