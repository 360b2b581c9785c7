"""Data models for documents and analytics results."""

from mind_profiler.models.analytics import (
    AnalyticsResult,
    Archetype,
    CognitiveArchetype,
    CognitiveProfile,
    CognitiveSignatures,
    ComplexityAnalysis,
    ComplexitySubdimensions,
    EvolutionPeriods,
    FormalityAnalysis,
    FormalitySubdimensions,
    Insight,
    KeyMetrics,
    LongitudinalPoint,
    MetaReflection,
    Period,
    PsychostylisticInsights,
    TemporalEvolution,
    TopicDistribution,
    TopicShare,
    Trajectory,
    TrajectoryType,
    WritingStyleAnalysis,
)
from mind_profiler.models.document import Document

__all__ = [
    "AnalyticsResult",
    "Archetype",
    "CognitiveArchetype",
    "CognitiveProfile",
    "CognitiveSignatures",
    "ComplexityAnalysis",
    "ComplexitySubdimensions",
    "Document",
    "EvolutionPeriods",
    "FormalityAnalysis",
    "FormalitySubdimensions",
    "Insight",
    "KeyMetrics",
    "LongitudinalPoint",
    "MetaReflection",
    "Period",
    "PsychostylisticInsights",
    "TemporalEvolution",
    "TopicDistribution",
    "TopicShare",
    "Trajectory",
    "TrajectoryType",
    "WritingStyleAnalysis",
]
