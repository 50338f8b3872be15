"""
Layer 4: 문서 조립기.

Layer 1~3의 결과와 프로젝트 원본 필드를 문서 종류별 템플릿에 채워
최종 마크다운 텍스트를 만듭니다.

┌────────────────────────────┬──────────────────────────────────────────┐
│ 문서 종류                    │ 사용하는 계층                              │
├────────────────────────────┼──────────────────────────────────────────┤
│ Project Summary            │ L1 키워드/감성, L3 키워드 그룹/요약 확장      │
│ Technical Requirements     │ L2 복잡도, L3 아키텍처/보안/의존성/확장성     │
│ Functional Specifications  │ L3 기능 설명/사용자 흐름/성공 기준            │
│ Milestones & Timeline      │ L2 일정 합성                               │
│ NDA Template               │ 프로젝트 필드만                             │
└────────────────────────────┴──────────────────────────────────────────┘

compose()는 빈 기능/스택 목록을 포함한 모든 Project에 대해 비어 있지 않은
텍스트를 반환합니다. 현재 시각은 `now` 콜러블로 주입할 수 있어 같은 입력과
같은 시각에 대해 항상 같은 텍스트를 냅니다.
"""

import logging
from datetime import datetime
from typing import Callable, Iterable, Optional

from docuforge.layers.layer1_analysis import TextAnalyzer
from docuforge.layers.layer2_planning import score_complexity, synthesize_phases, total_days_until
from docuforge.layers.layer3_recommendation import FeatureProseWriter, RecommendationEngine
from docuforge.models import DocumentType, Project
from docuforge.utils.dates import format_long_date, format_medium_date
from . import templates

logger = logging.getLogger(__name__)


def bullet_list(items: Iterable[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


class DocumentComposer:
    """
    프로젝트 + 문서 종류 → 마크다운 텍스트.

    Attributes:
        analyzer: 텍스트 분석기 (키워드/감성/품사)
        recommender: 기술 추천 블록 생성기
        prose_writer: 기능 설명 문장 생성기 (analyzer 공유)
        now: 현재 시각 공급자
    """

    def __init__(
        self,
        analyzer: Optional[TextAnalyzer] = None,
        recommender: Optional[RecommendationEngine] = None,
        now: Optional[Callable[[], datetime]] = None,
    ):
        self.analyzer = analyzer or TextAnalyzer()
        self.recommender = recommender or RecommendationEngine()
        self.prose_writer = FeatureProseWriter(self.analyzer)
        self.now = now or datetime.now

        self._builders: dict[DocumentType, Callable[[Project, datetime], str]] = {
            DocumentType.PROJECT_SUMMARY: self._project_summary,
            DocumentType.TECHNICAL_REQUIREMENTS: self._technical_requirements,
            DocumentType.FUNCTIONAL_SPECS: self._functional_specs,
            DocumentType.TIMELINE: self._timeline,
            DocumentType.NDA: self._nda,
        }

    def compose(self, project: Project, document_type: DocumentType) -> str:
        """문서 종류에 맞는 템플릿으로 문서를 조립합니다."""
        generated_at = self.now()
        content = self._builders[document_type](project, generated_at)
        logger.debug(
            f"[Composer] {document_type.label} 조립 완료 - "
            f"project={project.name!r}, {len(content)} chars"
        )
        return content

    # ==================== 문서별 조립 ====================

    def _project_summary(self, project: Project, generated_at: datetime) -> str:
        keywords = self.analyzer.extract_keywords(f"{project.description} {project.goal}")
        sentiment = self.analyzer.analyze_sentiment(project.description)
        groups = self.recommender.group_keywords(keywords, project)

        return templates.PROJECT_SUMMARY_TEMPLATE.format(
            name_upper=project.name.upper(),
            description=project.description,
            summary_extension=self.recommender.summary_extension(groups, project),
            tone=sentiment.tone,
            target_audience=project.target_audience,
            launch_date=project.formatted_launch_date,
            goal=project.goal,
            features=bullet_list(project.core_features),
            technologies=bullet_list(project.tech_stack),
            client_notes=project.client_notes,
            keywords=", ".join(keywords),
            generated_on=format_long_date(generated_at),
        )

    def _technical_requirements(self, project: Project, generated_at: datetime) -> str:
        complexity = score_complexity(project)
        recommendations = self.recommender.technology_recommendations(project)

        return templates.TECHNICAL_REQUIREMENTS_TEMPLATE.format(
            name_upper=project.name.upper(),
            name=project.name,
            complexity_description=complexity.description,
            development_effort=complexity.development_effort,
            technologies=bullet_list(project.tech_stack),
            frontend=recommendations.frontend,
            backend=recommendations.backend,
            storage=recommendations.storage,
            authentication=recommendations.authentication,
            dependencies=self.recommender.dependencies(project.tech_stack),
            security=self.recommender.security_recommendations(project),
            launch_date=project.formatted_launch_date,
            recommended_approach=complexity.recommended_approach,
            privacy=recommendations.privacy,
            performance=recommendations.performance,
            scalability=self.recommender.scalability(project),
            generated_on=format_long_date(generated_at),
        )

    def _functional_specs(self, project: Project, generated_at: datetime) -> str:
        sections = [
            templates.FEATURE_SECTION_TEMPLATE.format(
                number=index,
                feature=feature,
                description=self.prose_writer.describe(feature),
                user_flow=self.prose_writer.user_flow(feature),
                success_criteria=self.prose_writer.success_criteria(feature),
            )
            for index, feature in enumerate(project.core_features, start=1)
        ]

        return templates.FUNCTIONAL_SPECS_TEMPLATE.format(
            name_upper=project.name.upper(),
            name=project.name,
            feature_sections="\n\n".join(sections),
            target_audience=project.target_audience,
            generated_on=format_long_date(generated_at),
        )

    def _timeline(self, project: Project, generated_at: datetime) -> str:
        total_days = total_days_until(project.launch_date, today=generated_at.date())
        phases = synthesize_phases(total_days, project.core_features, start=generated_at)

        sections = [
            templates.PHASE_SECTION_TEMPLATE.format(
                number=index,
                name=phase.name,
                duration=phase.duration_days,
                start_date=format_medium_date(phase.start_date),
                end_date=format_medium_date(phase.end_date),
                deliverables=bullet_list(phase.deliverables),
            )
            for index, phase in enumerate(phases, start=1)
        ]

        return templates.TIMELINE_TEMPLATE.format(
            name_upper=project.name.upper(),
            start_date=format_medium_date(generated_at),
            launch_date=project.formatted_launch_date,
            total_days=total_days,
            phase_sections="\n\n".join(sections),
            generated_on=format_long_date(generated_at),
        )

    def _nda(self, project: Project, generated_at: datetime) -> str:
        generated_on = format_long_date(generated_at)
        return templates.NDA_TEMPLATE.format(
            name_upper=project.name.upper(),
            name=project.name,
            description=project.description,
            effective_date=generated_on,
            launch_date=project.formatted_launch_date,
            generated_on=generated_on,
        )


_document_composer: Optional[DocumentComposer] = None


def get_document_composer() -> DocumentComposer:
    """DocumentComposer 인스턴스를 반환합니다 (spaCy 파이프라인 공유)."""
    global _document_composer
    if _document_composer is None:
        _document_composer = DocumentComposer()
    return _document_composer
