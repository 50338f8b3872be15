"""텍스트 분석 및 추천 결과 모델."""

from pydantic import BaseModel, Field

POSITIVE_TONE = "The project has a positive outlook with an emphasis on innovation and opportunity."
CRITICAL_TONE = "The project addresses critical challenges and aims to solve important problems."
BALANCED_TONE = "The project has a balanced approach focusing on practical implementation."

TONE_THRESHOLD = 0.3


class SentimentResult(BaseModel):
    """감성 분석 결과. score는 -1(비판적) ~ 1(긍정적)."""
    score: float = Field(0.0, ge=-1.0, le=1.0)
    confidence: float = Field(0.0, ge=0.0, le=1.0)

    @property
    def tone(self) -> str:
        """점수에 따른 프로젝트 톤 문장."""
        if self.score > TONE_THRESHOLD:
            return POSITIVE_TONE
        if self.score < -TONE_THRESHOLD:
            return CRITICAL_TONE
        return BALANCED_TONE


class KeywordGroups(BaseModel):
    """키워드 분류 결과 (기술/비즈니스/대상 사용자)."""
    technical: list[str] = Field(default_factory=list)
    business: list[str] = Field(default_factory=list)
    audience: list[str] = Field(default_factory=list)


class TechRecommendations(BaseModel):
    """기술 요구사항 문서의 아키텍처 추천 블록."""
    frontend: str
    backend: str
    storage: str
    authentication: str
    privacy: str
    performance: str
