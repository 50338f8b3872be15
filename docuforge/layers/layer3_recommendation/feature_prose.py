"""기능명 → 설명 문장 확장.

기능 문자열 하나로부터 세 가지 문장을 만듭니다:
- describe(): 첫 동사/명사 + 동사 강화 표현 + 맥락 절
- user_flow(): 시작 → 상호작용 → 완료 3단계 사용자 흐름
- success_criteria(): 기능/성능/사용자 관점 성공 기준

분류는 소문자 기능명에 대한 부분 문자열 매칭이며, 테이블에 정의된 순서대로
처음 일치하는 범주를 사용합니다.
"""

from enum import Enum
from typing import Mapping, Optional, TypeVar

from docuforge.layers.layer1_analysis import TextAnalyzer

CategoryT = TypeVar("CategoryT", bound=Enum)


# ==================== 동사 강화 표현 ====================

VERB_ENHANCEMENTS: dict[str, str] = {
    "use": "empowers users to utilize",
    "access": "provides streamlined access to",
    "view": "visualizes and presents",
    "create": "facilitates the creation of",
    "edit": "enables intuitive editing of",
    "delete": "manages the removal of",
    "save": "securely stores",
    "share": "simplifies sharing of",
    "upload": "handles seamless uploading of",
    "download": "efficiently retrieves",
    "search": "enables intelligent searching across",
    "filter": "provides powerful filtering of",
    "sort": "intelligently organizes",
    "manage": "streamlines the management of",
    "generate": "automates the generation of",
    "analyze": "performs in-depth analysis of",
    "track": "precisely monitors",
    "monitor": "continuously observes",
    "report": "generates comprehensive reports on",
    "integrate": "seamlessly connects with",
    "authenticate": "securely verifies",
}
DEFAULT_VERB_PHRASE = "enables users to work with"


# ==================== 기능 맥락 ====================

class FeatureContext(str, Enum):
    SECURITY = "security"
    STORAGE = "storage"
    REPORTING = "reporting"
    SETTINGS = "settings"
    SHARING = "sharing"
    SEARCH = "search"
    DEFAULT = "default"


CONTEXT_KEYWORDS: dict[FeatureContext, tuple[str, ...]] = {
    FeatureContext.SECURITY: ("user", "account", "profile", "auth"),
    FeatureContext.STORAGE: ("data", "file", "document", "storage"),
    FeatureContext.REPORTING: ("report", "chart", "graph", "analytics"),
    FeatureContext.SETTINGS: ("settings", "config", "preferences"),
    FeatureContext.SHARING: ("export", "share", "send"),
    FeatureContext.SEARCH: ("search", "find", "filter"),
}

CONTEXT_CLAUSES: dict[FeatureContext, str] = {
    FeatureContext.SECURITY: "with appropriate security and privacy controls",
    FeatureContext.STORAGE: "with local storage for offline availability",
    FeatureContext.REPORTING: "with clear visual representations",
    FeatureContext.SETTINGS: "with user customization options",
    FeatureContext.SHARING: "across standard device interfaces",
    FeatureContext.SEARCH: "using optimized algorithms for fast results",
    FeatureContext.DEFAULT: "in an intuitive, user-friendly interface",
}


# ==================== 사용자 흐름 ====================

class FlowCategory(str, Enum):
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
    SEARCH = "search"
    VIEW = "view"
    EXPORT = "export"
    IMPORT = "import"
    SETTINGS = "settings"
    DEFAULT = "default"


FLOW_KEYWORDS: dict[FlowCategory, tuple[str, ...]] = {
    FlowCategory.CREATE: ("create", "add", "new"),
    FlowCategory.EDIT: ("edit", "update", "modify"),
    FlowCategory.DELETE: ("delete", "remove"),
    FlowCategory.SEARCH: ("search", "find", "filter"),
    FlowCategory.VIEW: ("view", "display", "show"),
    FlowCategory.EXPORT: ("export", "share", "send"),
    FlowCategory.IMPORT: ("import", "upload"),
    FlowCategory.SETTINGS: ("settings", "config", "preferences"),
}

# (시작, 상호작용, 완료)
FLOW_STEPS: dict[FlowCategory, tuple[str, str, str]] = {
    FlowCategory.CREATE: (
        "User selects the 'Add New' or '+' button",
        "completes all required fields in the form",
        "and saves to create a new entry",
    ),
    FlowCategory.EDIT: (
        "User selects the existing item",
        "modifies the necessary information",
        "and confirms changes to update",
    ),
    FlowCategory.DELETE: (
        "User selects the item to be removed",
        "confirms the deletion request",
        "and the system removes the item with appropriate feedback",
    ),
    FlowCategory.SEARCH: (
        "User accesses the search interface",
        "enters search criteria or filters",
        "and reviews the dynamically updated results",
    ),
    FlowCategory.VIEW: (
        "User navigates to the appropriate section",
        "selects viewing preferences if applicable",
        "and examines the clearly presented information",
    ),
    FlowCategory.EXPORT: (
        "User selects content to be exported",
        "chooses the desired export format",
        "and initiates the export to complete the process",
    ),
    FlowCategory.IMPORT: (
        "User initiates the import process",
        "selects the source file or data",
        "and confirms to complete the import operation",
    ),
    FlowCategory.SETTINGS: (
        "User navigates to the settings screen",
        "adjusts the desired configuration options",
        "and saves to apply the new preferences",
    ),
    FlowCategory.DEFAULT: (
        "User navigates to the relevant section",
        "interacts with the interface",
        "and completes the process efficiently",
    ),
}


# ==================== 성공 기준 ====================

class CriteriaCategory(str, Enum):
    CREATE = "create"
    SEARCH = "search"
    DOCUMENT = "document"
    ACCOUNT = "account"
    DATA = "data"
    INTERFACE = "interface"
    DEFAULT = "default"


CRITERIA_KEYWORDS: dict[CriteriaCategory, tuple[str, ...]] = {
    CriteriaCategory.CREATE: ("create", "add", "new"),
    CriteriaCategory.SEARCH: ("search", "find", "filter"),
    CriteriaCategory.DOCUMENT: ("export", "pdf", "document"),
    CriteriaCategory.ACCOUNT: ("user", "account", "profile"),
    CriteriaCategory.DATA: ("data", "storage", "save"),
    CriteriaCategory.INTERFACE: ("ui", "interface", "display"),
}

# (기능, 성능, 사용자)
CRITERIA_PARTS: dict[CriteriaCategory, tuple[str, str, str]] = {
    CriteriaCategory.CREATE: (
        "New items are created and stored correctly",
        "with proper validation of inputs",
        "and immediate feedback on success",
    ),
    CriteriaCategory.SEARCH: (
        "Search results are accurate and relevant",
        "with response times under 1 second",
        "and intuitive presentation of results",
    ),
    CriteriaCategory.DOCUMENT: (
        "Documents are generated with correct formatting",
        "and include all required content",
        "while being easily readable and professional",
    ),
    CriteriaCategory.ACCOUNT: (
        "User data is managed correctly and securely",
        "with appropriate privacy controls",
        "and intuitive profile management",
    ),
    CriteriaCategory.DATA: (
        "Data is stored correctly and persistently",
        "with proper error handling for edge cases",
        "and appropriate confirmation of successful operations",
    ),
    CriteriaCategory.INTERFACE: (
        "Interface elements render correctly across devices",
        "with smooth transitions and animations",
        "and clear visual hierarchy for usability",
    ),
    CriteriaCategory.DEFAULT: (
        "Feature functions without errors",
        "with appropriate response time",
        "and meets user needs effectively",
    ),
}


def classify(text: str, keywords: Mapping[CategoryT, tuple[str, ...]], default: CategoryT) -> CategoryT:
    """키워드 테이블 순서대로 처음 일치하는 범주를 반환합니다."""
    lowered = text.lower()
    for category, terms in keywords.items():
        if any(term in lowered for term in terms):
            return category
    return default


def enhance_verb(verb: Optional[str]) -> str:
    if not verb:
        return DEFAULT_VERB_PHRASE
    return VERB_ENHANCEMENTS.get(verb.lower(), DEFAULT_VERB_PHRASE)


class FeatureProseWriter:
    """기능명을 설명/사용자 흐름/성공 기준 문장으로 확장합니다."""

    def __init__(self, analyzer: Optional[TextAnalyzer] = None):
        self.analyzer = analyzer or TextAnalyzer()

    def describe(self, feature: str) -> str:
        verb, noun = self.analyzer.first_verb_and_noun(feature)
        feature_lower = feature.lower()

        if verb and noun:
            context = CONTEXT_CLAUSES[classify(feature, CONTEXT_KEYWORDS, FeatureContext.DEFAULT)]
            return (
                f"This feature {enhance_verb(verb)} {noun} {context}. "
                f"It enhances the user experience by providing seamless access to {feature_lower} functionality."
            )

        return (
            f"This feature enables users to work with {feature_lower} efficiently. "
            "It provides core functionality needed to complete this aspect of the project."
        )

    def user_flow(self, feature: str) -> str:
        initiation, interaction, completion = FLOW_STEPS[
            classify(feature, FLOW_KEYWORDS, FlowCategory.DEFAULT)
        ]
        return f"{initiation}, {interaction}, {completion}."

    def success_criteria(self, feature: str) -> str:
        functional, performance, user = CRITERIA_PARTS[
            classify(feature, CRITERIA_KEYWORDS, CriteriaCategory.DEFAULT)
        ]
        return f"{functional} {performance} {user}."
