"""Layer 4: Composition - assembles the five document templates."""

from .composer import DocumentComposer, bullet_list, get_document_composer

__all__ = [
    "DocumentComposer",
    "bullet_list",
    "get_document_composer",
]
