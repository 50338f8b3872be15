"""Layer 2: Planning - complexity scoring and timeline synthesis."""

from .complexity import score_complexity, complexity_level
from .timeline import (
    synthesize_phases,
    phase_durations,
    total_days_until,
    MIN_TOTAL_DAYS,
)

__all__ = [
    "score_complexity",
    "complexity_level",
    "synthesize_phases",
    "phase_durations",
    "total_days_until",
    "MIN_TOTAL_DAYS",
]
