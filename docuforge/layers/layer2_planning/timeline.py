"""개발 일정(4단계) 합성.

전체 기간을 고정 비율로 나눕니다:
- 기획 & 설계: 20% (최소 5일)
- 개발: 50% (최소 10일)
- 테스트: 20% (최소 5일)
- 배포 & 출시: 나머지 (0일 미만이면 0일)

각 단계는 이전 단계가 끝나는 시점에 바로 시작합니다.
"""

import math
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from docuforge.models import ProjectPhase

MIN_TOTAL_DAYS = 30

PLANNING_RATIO = 0.2
DEVELOPMENT_RATIO = 0.5
TESTING_RATIO = 0.2

MIN_PLANNING_DAYS = 5
MIN_DEVELOPMENT_DAYS = 10
MIN_TESTING_DAYS = 5

PLANNING_PHASE = "Planning & Design"
DEVELOPMENT_PHASE = "Development"
TESTING_PHASE = "Testing & Refinement"
DEPLOYMENT_PHASE = "Deployment & Launch"

PLANNING_DELIVERABLES = (
    "Project requirements document",
    "UI/UX design mockups",
    "Technical architecture document",
    "Development roadmap",
)

TESTING_DELIVERABLES = (
    "Unit tests",
    "Integration tests",
    "User acceptance testing",
    "Bug fixes and refinements",
)

DEPLOYMENT_DELIVERABLES = (
    "App store submission",
    "Marketing materials",
    "User documentation",
    "Launch event coordination",
)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def total_days_until(launch_date: date, today: Optional[date] = None) -> int:
    """오늘부터 출시일까지의 일수. 최소 30일."""
    today = today or date.today()
    return max((launch_date - today).days, MIN_TOTAL_DAYS)


def phase_durations(total_days: int) -> tuple[int, int, int, int]:
    """(기획, 개발, 테스트, 배포) 기간을 일 단위로 계산합니다."""
    planning = max(_round_half_up(total_days * PLANNING_RATIO), MIN_PLANNING_DAYS)
    development = max(_round_half_up(total_days * DEVELOPMENT_RATIO), MIN_DEVELOPMENT_DAYS)
    testing = max(_round_half_up(total_days * TESTING_RATIO), MIN_TESTING_DAYS)
    # 짧은 일정에서 최소값 합(20일)이 전체를 넘으면 음수가 되므로 0으로 제한
    deployment = max(total_days - planning - development - testing, 0)
    return planning, development, testing, deployment


def synthesize_phases(
    total_days: int,
    features: Sequence[str],
    start: Optional[datetime] = None,
) -> list[ProjectPhase]:
    """
    4개의 연속된 개발 단계를 생성합니다.

    Args:
        total_days: 전체 기간 (일)
        features: 핵심 기능 목록. 앞에서부터 max(개수 // 3, 1)개가 개발 단계 산출물이 됩니다.
        start: 기획 단계 시작 시점 (기본값: 현재 시각)

    Returns:
        기획 → 개발 → 테스트 → 배포 순서의 ProjectPhase 4개
    """
    start = start or datetime.now()
    planning, development, testing, deployment = phase_durations(total_days)

    features_per_phase = max(len(features) // 3, 1)
    development_deliverables = [
        f"Implementation of: {feature}" for feature in list(features)[:features_per_phase]
    ]

    plan = [
        (PLANNING_PHASE, planning, list(PLANNING_DELIVERABLES)),
        (DEVELOPMENT_PHASE, development, development_deliverables),
        (TESTING_PHASE, testing, list(TESTING_DELIVERABLES)),
        (DEPLOYMENT_PHASE, deployment, list(DEPLOYMENT_DELIVERABLES)),
    ]

    phases: list[ProjectPhase] = []
    cursor = start
    for name, duration, deliverables in plan:
        end = cursor + timedelta(days=duration)
        phases.append(ProjectPhase(
            name=name,
            duration_days=duration,
            start_date=cursor,
            end_date=end,
            deliverables=deliverables,
        ))
        cursor = end

    return phases
