"""프로젝트 복잡도 산정.

기능 수, 기술 스택 수, 대상 사용자 키워드로 1~5 등급을 계산하고
등급별 고정 테이블에서 설명/공수/접근 방식을 가져옵니다.

점수 계산:
┌──────────────────────────────┬───────┐
│ 조건                         │ 가산  │
├──────────────────────────────┼───────┤
│ 기본                         │ 1     │
│ 기능 > 10 (또는 > 5)         │ +2/+1 │
│ 기술 스택 > 8 (또는 > 4)     │ +2/+1 │
│ enterprise/professional 대상 │ +1    │
└──────────────────────────────┴───────┘
최종 점수는 [1, 5]로 제한합니다.
"""

from docuforge.models import Project, ProjectComplexity

MIN_LEVEL = 1
MAX_LEVEL = 5

COMPLEX_AUDIENCE_TERMS = ("enterprise", "professional")

# 인덱스 0 = 등급 1
LEVEL_DESCRIPTIONS = (
    "minimal",
    "low",
    "moderate",
    "significant",
    "high",
)

LEVEL_EFFORTS = (
    "1-2 weeks",
    "2-4 weeks",
    "1-2 months",
    "2-3 months",
    "3+ months",
)

LEVEL_APPROACHES = (
    "Rapid prototyping with minimal planning phase",
    "Agile approach with weekly iterations",
    "Agile development with thorough planning phase",
    "Structured development with detailed technical specifications",
    "Comprehensive planning and phased development approach",
)


def _count_bonus(count: int, high: int, medium: int) -> int:
    if count > high:
        return 2
    if count > medium:
        return 1
    return 0


def complexity_level(feature_count: int, tech_count: int, audience: str) -> int:
    """복잡도 등급(1~5)만 계산합니다."""
    level = MIN_LEVEL
    level += _count_bonus(feature_count, high=10, medium=5)
    level += _count_bonus(tech_count, high=8, medium=4)

    audience_lower = audience.lower()
    if any(term in audience_lower for term in COMPLEX_AUDIENCE_TERMS):
        level += 1

    return max(MIN_LEVEL, min(level, MAX_LEVEL))


def score_complexity(project: Project) -> ProjectComplexity:
    """프로젝트 복잡도를 산정합니다."""
    level = complexity_level(
        len(project.core_features),
        len(project.tech_stack),
        project.target_audience,
    )
    index = level - 1
    return ProjectComplexity(
        level=level,
        description=LEVEL_DESCRIPTIONS[index],
        development_effort=LEVEL_EFFORTS[index],
        recommended_approach=LEVEL_APPROACHES[index],
    )
