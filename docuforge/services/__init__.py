"""Services for the DocuForge document engine."""

from .openai_client import OpenAIDocumentClient, get_openai_client
from .generation_selector import (
    GenerationMode,
    GenerationSession,
    GenerationStrategySelector,
)
from .project_storage import ProjectStorage, get_project_storage
from .document_renderer import DocumentRenderer
from .pipeline import DocumentPipeline, PipelineResult, PipelineStatus, create_pipeline

__all__ = [
    "OpenAIDocumentClient",
    "get_openai_client",
    "GenerationMode",
    "GenerationSession",
    "GenerationStrategySelector",
    "ProjectStorage",
    "get_project_storage",
    "DocumentRenderer",
    "DocumentPipeline",
    "PipelineResult",
    "PipelineStatus",
    "create_pipeline",
]
