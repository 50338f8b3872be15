"""Data models for the DocuForge document engine."""

from .project import DocumentType, GeneratedDocument, Project, ProjectCreate
from .planning import ProjectPhase, ProjectComplexity
from .analysis import SentimentResult, KeywordGroups, TechRecommendations

__all__ = [
    # Project models
    "DocumentType",
    "GeneratedDocument",
    "Project",
    "ProjectCreate",
    # Planning models
    "ProjectPhase",
    "ProjectComplexity",
    # Analysis models
    "SentimentResult",
    "KeywordGroups",
    "TechRecommendations",
]
