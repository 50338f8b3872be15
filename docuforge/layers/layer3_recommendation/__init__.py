"""Layer 3: Recommendation - architecture blocks and feature prose."""

from .recommender import RecommendationEngine, filter_stack
from .feature_prose import (
    FeatureProseWriter,
    FeatureContext,
    FlowCategory,
    CriteriaCategory,
    VERB_ENHANCEMENTS,
    classify,
    enhance_verb,
)

__all__ = [
    "RecommendationEngine",
    "filter_stack",
    "FeatureProseWriter",
    "FeatureContext",
    "FlowCategory",
    "CriteriaCategory",
    "VERB_ENHANCEMENTS",
    "classify",
    "enhance_verb",
]
