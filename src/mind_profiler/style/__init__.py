"""
Style Analysis Module

Rule-based measurement of formality, complexity, cognitive signatures,
archetype and topic distribution over surface linguistic markers.
"""

from .markers import (
    DEFAULT_MARKERS,
    MarkerLibrary,
    MarkerRule,
    TopicCategory,
)
from .metrics import TextStatistics, clamp01, score_complexity, score_formality
from .percentile import PercentileBand, complexity_percentile, formality_percentile
from .signatures import extract_cognitive_signatures
from .classifier import Archetype, classify_archetype, score_archetypes
from .topics import analyze_topic_distribution, normalize_percentages
from .insights import generate_insights

__all__ = [
    # Markers
    "DEFAULT_MARKERS",
    "MarkerLibrary",
    "MarkerRule",
    "TopicCategory",
    # Metrics
    "TextStatistics",
    "clamp01",
    "score_complexity",
    "score_formality",
    # Percentiles
    "PercentileBand",
    "complexity_percentile",
    "formality_percentile",
    # Signatures
    "extract_cognitive_signatures",
    # Classification
    "Archetype",
    "classify_archetype",
    "score_archetypes",
    # Topics
    "analyze_topic_distribution",
    "normalize_percentages",
    # Insights
    "generate_insights",
]
