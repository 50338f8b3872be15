"""Processing layers for the document generation engine."""

# Note: Import layers individually to avoid circular imports
# Use: from docuforge.layers.layer1_analysis import TextAnalyzer
# Use: from docuforge.layers.layer2_planning import score_complexity, synthesize_phases
# Use: from docuforge.layers.layer3_recommendation import RecommendationEngine
# Use: from docuforge.layers.layer4_composition import DocumentComposer

__all__ = [
    "layer1_analysis",
    "layer2_planning",
    "layer3_recommendation",
    "layer4_composition",
]
