"""일정/복잡도 계산 결과 모델. 생성 호출마다 새로 계산되며 저장되지 않습니다."""

from datetime import datetime

from pydantic import BaseModel, Field


class ProjectPhase(BaseModel):
    """개발 단계 하나."""
    name: str
    duration_days: int = Field(..., description="기간 (일)")
    start_date: datetime
    end_date: datetime
    deliverables: list[str] = Field(default_factory=list, description="산출물")


class ProjectComplexity(BaseModel):
    """복잡도 등급(1~5)과 등급별 설명."""
    level: int = Field(..., ge=1, le=5)
    description: str
    development_effort: str
    recommended_approach: str
