"""날짜 포맷 도우미.

문서 템플릿에서 사용하는 두 가지 표기법:
- medium: "Mar 5, 2027"
- long: "March 5, 2027"
"""

from datetime import date


def format_medium_date(value: date) -> str:
    return f"{value:%b} {value.day}, {value.year}"


def format_long_date(value: date) -> str:
    return f"{value:%B} {value.day}, {value.year}"
