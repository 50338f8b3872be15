"""Layer 1: Text analysis - keywords, sentiment and lexical classes."""

from .nlp import load_pipeline, has_pos_tags
from .sentiment import polarity_score
from .text_analyzer import TextAnalyzer, STOPWORDS, MAX_KEYWORDS

__all__ = [
    "TextAnalyzer",
    "STOPWORDS",
    "MAX_KEYWORDS",
    "load_pipeline",
    "has_pos_tags",
    "polarity_score",
]
