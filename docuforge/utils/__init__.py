"""유틸리티 모듈."""

from .dates import format_medium_date, format_long_date
from .text_metrics import (
    count_words,
    reading_time_minutes,
    extract_key_points,
)

__all__ = [
    "format_medium_date",
    "format_long_date",
    "count_words",
    "reading_time_minutes",
    "extract_key_points",
]
