"""
Layer 3: 추천 엔진.

프로젝트의 기술 스택/대상 사용자/설명 텍스트로부터 기술 요구사항 문서와
프로젝트 요약 문서에 들어갈 서술 블록을 만듭니다.

┌──────────────────┬──────────────────────────────────────────────┐
│ 블록              │ 판단 기준 (소문자 부분 문자열)                 │
├──────────────────┼──────────────────────────────────────────────┤
│ frontend         │ 스택 항목에 "ui" / "front"                    │
│ backend          │ 스택 항목에 "kit" / "framework"               │
│ storage          │ 스택 항목에 "data" / "store" / "file"         │
│ authentication   │ 대상에 "private"/"enterprise", 설명에 "secure" │
│ security         │ 설명에 confidential/secure/private 또는        │
│                  │ 대상에 enterprise/business/professional       │
└──────────────────┴──────────────────────────────────────────────┘
"""

import logging

from docuforge.models import KeywordGroups, Project, TechRecommendations

logger = logging.getLogger(__name__)


# ==================== 스택 매칭 키워드 ====================

FRONTEND_MARKERS = ("ui", "front")
BACKEND_MARKERS = ("kit", "framework")
STORAGE_MARKERS = ("data", "store", "file")

AUTH_AUDIENCE_MARKERS = ("private", "enterprise")
AUTH_DESCRIPTION_MARKERS = ("secure",)

CONFIDENTIAL_MARKERS = ("confidential", "secure", "private")
ENTERPRISE_AUDIENCE_MARKERS = ("enterprise", "business", "professional")

TECHNICAL_INDICATORS = (
    "app", "software", "code", "data", "system", "platform", "api", "interface",
    "mobile", "web", "cloud", "server", "client", "database", "ui", "ux",
)
BUSINESS_INDICATORS = (
    "market", "user", "customer", "revenue", "cost", "price", "value", "business",
    "industry", "product", "service", "solution", "strategy", "plan", "goal",
)


# ==================== 고정 블록 ====================

DEFAULT_FRONTEND = "SwiftUI"
FRONTEND_BLOCK = """- Primary UI Framework: {frameworks}
- Design System: Apple Human Interface Guidelines
- Responsive Design: Adaptable layouts for iPhone and iPad
- Accessibility: VoiceOver support and Dynamic Type"""

DEFAULT_BACKEND = "Foundation, NaturalLanguage, PDFKit"
BACKEND_BLOCK = """- Core Frameworks: {frameworks}
- Business Logic: Swift with MVVM architecture
- Document Processing: Custom text processing engine"""

DEFAULT_STORAGE = "FileManager for document storage"
STORAGE_BLOCK = """- Primary Storage: {storage}
- Format: JSON for structured data, PDF for generated documents
- Backup: Local backup and restore functionality
- Search: Indexed content for fast local search"""

SECURE_AUTHENTICATION = """- Authentication Method: Local biometric (Face ID/Touch ID)
- Document Security: Optional password protection for PDFs
- Access Control: Local user preferences for security settings"""

BASIC_AUTHENTICATION = """- Authentication Method: Not required (optional for enhanced security)
- Document Security: Optional password protection for PDFs
- Access Control: Basic user preferences"""

PRIVACY_STATEMENT = (
    "All data stored locally on device with no external transmission. "
    "No analytics or telemetry collected. "
    "Complete user control over data with ability to delete all content."
)

PERFORMANCE_STATEMENT = (
    "UI responsiveness is critical for a positive user experience. "
    "Document generation should complete within 3 seconds, with progress indication for large documents. "
    "Memory usage should be optimized for mobile devices."
)

SENSITIVE_SECURITY = """This application handles potentially sensitive information and should implement the following security measures:
- Data Encryption: Use FileProtection API to encrypt stored documents
- Authentication: Implement biometric authentication (Face ID/Touch ID) for app access
- Document Security: Provide option for password-protected PDFs
- Secure Defaults: Enable security features by default
- Data Isolation: Ensure app data is sandboxed properly
- Export Warnings: Notify users when exporting sensitive documents
- Session Management: Auto-lock after period of inactivity"""

BASELINE_SECURITY = """While this application primarily handles non-sensitive information, basic security practices should be implemented:
- Data Isolation: Ensure app data is properly sandboxed
- Export Controls: Clear user confirmations for document sharing
- Optional Security: Provide user options to enable additional security features
- Privacy First: No data collection or external transmission
- Transparency: Clear documentation of all data storage practices"""

BASE_DEPENDENCIES = (
    "- SwiftUI: UI framework",
    "- NaturalLanguage: For text processing and analysis",
    "- PDFKit: For document generation and export",
    "- FileManager: For local file storage",
)
STRUCTURED_STORAGE_DEPENDENCY = "- CoreData: For structured data storage"

HIGH_SCALABILITY = "Design for high scalability with modular architecture"
MODERATE_SCALABILITY = "Moderate scalability requirements expected"
MINIMAL_SCALABILITY = "Minimal scalability concerns for initial release"


def _contains_any(text: str, markers: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(marker in lowered for marker in markers)


def filter_stack(tech_stack: list[str], markers: tuple[str, ...]) -> list[str]:
    """마커를 포함하는 스택 항목만 원래 순서대로 반환합니다."""
    return [tech for tech in tech_stack if _contains_any(tech, markers)]


class RecommendationEngine:
    """기술 스택/대상 사용자/설명 기반 서술 블록 생성기."""

    # ==================== 아키텍처 추천 ====================

    def technology_recommendations(self, project: Project) -> TechRecommendations:
        frontend = filter_stack(project.tech_stack, FRONTEND_MARKERS)
        backend = filter_stack(project.tech_stack, BACKEND_MARKERS)
        storage = filter_stack(project.tech_stack, STORAGE_MARKERS)

        logger.debug(
            f"[Recommender] 스택 매칭 - frontend: {len(frontend)}, "
            f"backend: {len(backend)}, storage: {len(storage)}"
        )

        return TechRecommendations(
            frontend=FRONTEND_BLOCK.format(frameworks=", ".join(frontend) or DEFAULT_FRONTEND),
            backend=BACKEND_BLOCK.format(frameworks=", ".join(backend) or DEFAULT_BACKEND),
            storage=STORAGE_BLOCK.format(storage=", ".join(storage) or DEFAULT_STORAGE),
            authentication=self.authentication(project),
            privacy=PRIVACY_STATEMENT,
            performance=PERFORMANCE_STATEMENT,
        )

    def authentication(self, project: Project) -> str:
        needs_auth = (
            _contains_any(project.target_audience, AUTH_AUDIENCE_MARKERS)
            or _contains_any(project.description, AUTH_DESCRIPTION_MARKERS)
        )
        return SECURE_AUTHENTICATION if needs_auth else BASIC_AUTHENTICATION

    def security_recommendations(self, project: Project) -> str:
        sensitive = (
            _contains_any(project.description, CONFIDENTIAL_MARKERS)
            or _contains_any(project.target_audience, ENTERPRISE_AUDIENCE_MARKERS)
        )
        return SENSITIVE_SECURITY if sensitive else BASELINE_SECURITY

    def dependencies(self, tech_stack: list[str]) -> str:
        lines = list(BASE_DEPENDENCIES)
        if any("data" in tech.lower() for tech in tech_stack):
            lines.append(STRUCTURED_STORAGE_DEPENDENCY)
        return "\n".join(lines)

    def scalability(self, project: Project) -> str:
        size = len(project.core_features) + len(project.tech_stack)
        if size > 10:
            return HIGH_SCALABILITY
        if size > 5:
            return MODERATE_SCALABILITY
        return MINIMAL_SCALABILITY

    # ==================== 요약 확장 ====================

    def group_keywords(self, keywords: list[str], project: Project) -> KeywordGroups:
        """
        키워드를 기술/비즈니스/대상 사용자 그룹으로 분류합니다.

        판단 순서: 기술 지표어 또는 스택 항목 포함 → 비즈니스 지표어 →
        대상 사용자 텍스트에 포함 → 그 외는 비즈니스.
        """
        groups = KeywordGroups()
        audience = project.target_audience.lower()
        stack = [tech.lower() for tech in project.tech_stack]

        for keyword in keywords:
            lowered = keyword.lower()
            if _contains_any(lowered, TECHNICAL_INDICATORS) or any(lowered in tech for tech in stack):
                groups.technical.append(keyword)
            elif _contains_any(lowered, BUSINESS_INDICATORS):
                groups.business.append(keyword)
            elif lowered in audience:
                groups.audience.append(keyword)
            else:
                groups.business.append(keyword)

        return groups

    def summary_extension(self, groups: KeywordGroups, project: Project) -> str:
        sentences: list[str] = []

        if groups.technical:
            sentences.append(
                f"From a technical perspective, this project involves {', '.join(groups.technical[:3])}. "
            )
            if project.tech_stack:
                main_tech = " and ".join(project.tech_stack[:2])
                sentences.append(f"It leverages {main_tech} to deliver a robust solution. ")

        if groups.business:
            sentences.append(
                f"The project addresses business needs related to {', '.join(groups.business[:3])}. "
            )

        feature_count = len(project.core_features)
        if feature_count:
            plural = "s" if feature_count > 1 else ""
            sentences.append(
                f"With {feature_count} core feature{plural}, the solution will provide "
                "comprehensive functionality to meet user requirements. "
            )

        return "".join(sentences)
