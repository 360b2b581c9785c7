"""
Temporal Evolution

Split a time-ordered corpus into three epochs and classify how sentence
complexity moved between the first and the last.
"""

import logging
from typing import Sequence

from mind_profiler.ingest.splitter import segment
from mind_profiler.ingest.timeframe import chronological
from mind_profiler.models.analytics import (
    EvolutionPeriods,
    KeyMetrics,
    Period,
    TemporalEvolution,
    Trajectory,
    TrajectoryType,
)
from mind_profiler.models.document import Document
from mind_profiler.style.metrics import TextStatistics

logger = logging.getLogger(__name__)


MIN_DOCUMENTS = 3
PERIOD_LABELS = ("Exploration", "Development", "Synthesis")

# Relative change in mean sentence length that counts as a trend
EXPANSION_FACTOR = 1.2
COMPRESSION_FACTOR = 0.8

# Documents longer than this (characters) read as comprehensive
COMPREHENSIVE_LENGTH = 1000


def sentence_complexity(document: Document) -> float:
    """Mean words per sentence of a single document."""
    return TextStatistics.from_segmentation(segment(document.content)).avg_sentence_length


def period_archetype(complexity: float) -> str:
    """Descriptive label for an epoch's mean sentence length."""
    if complexity > 20:
        return "Deep Analyst"
    elif complexity > 15:
        return "Balanced Thinker"
    else:
        return "Efficient Communicator"


def analyze_period(documents: Sequence[Document], label: str) -> Period:
    """Summarize one epoch of the corpus."""
    count = len(documents)
    avg_length = sum(len(doc.content) for doc in documents) / count if count else 0.0
    complexity = sum(sentence_complexity(doc) for doc in documents) / count if count else 0.0

    scope = "comprehensive" if avg_length > COMPREHENSIVE_LENGTH else "focused"

    return Period(
        label=label,
        archetype_label=period_archetype(complexity),
        description=f"{label} phase characterized by {scope} analysis",
        key_metrics=KeyMetrics(
            avg_document_length=round(avg_length),
            avg_sentence_complexity=round(complexity, 1),
            document_count=count,
        ),
    )


def split_epochs(documents: Sequence[Document]) -> tuple[list[Document], list[Document], list[Document]]:
    """Split date-ordered documents into thirds; the remainder goes to the last."""
    third = len(documents) // 3
    return (
        list(documents[:third]),
        list(documents[third:third * 2]),
        list(documents[third * 2:]),
    )


def classify_trajectory(early_complexity: float, recent_complexity: float) -> TrajectoryType:
    """Compare recent against early mean sentence complexity."""
    if recent_complexity > early_complexity * EXPANSION_FACTOR:
        return TrajectoryType.EXPLORATORY_EXPANSION
    elif recent_complexity < early_complexity * COMPRESSION_FACTOR:
        return TrajectoryType.COMPRESSION_ABSTRACTION
    else:
        return TrajectoryType.CRYSTALLIZATION


def analyze_temporal_evolution(documents: Sequence[Document]) -> TemporalEvolution:
    """
    Analyze how writing complexity evolved across the corpus.

    Args:
        documents: Corpus in any order

    Returns:
        TemporalEvolution with early/middle/recent periods and a trajectory,
        or the default evolution when fewer than three documents are given
    """
    if len(documents) < MIN_DOCUMENTS:
        return default_evolution()

    ordered = chronological(documents)
    early_docs, middle_docs, recent_docs = split_epochs(ordered)

    periods = EvolutionPeriods(
        early=analyze_period(early_docs, PERIOD_LABELS[0]),
        middle=analyze_period(middle_docs, PERIOD_LABELS[1]),
        recent=analyze_period(recent_docs, PERIOD_LABELS[2]),
    )

    trajectory_type = classify_trajectory(
        periods.early.key_metrics.avg_sentence_complexity,
        periods.recent.key_metrics.avg_sentence_complexity,
    )
    logger.debug(
        "Trajectory %s (early %.1f, recent %.1f)",
        trajectory_type.value,
        periods.early.key_metrics.avg_sentence_complexity,
        periods.recent.key_metrics.avg_sentence_complexity,
    )

    return TemporalEvolution(
        periods=periods,
        trajectory=Trajectory(
            type=trajectory_type,
            description=trajectory_type.description,
            prognosis=trajectory_type.prognosis,
        ),
    )


def default_evolution() -> TemporalEvolution:
    """Baseline evolution used until there is enough history to compare."""
    return TemporalEvolution(
        periods=EvolutionPeriods(
            early=Period(
                label="Baseline",
                archetype_label="Emerging Analyst",
                description="Initial cognitive profile establishment",
                key_metrics=KeyMetrics(avg_document_length=500, avg_sentence_complexity=15, document_count=1),
            ),
            middle=Period(
                label="Development",
                archetype_label="Developing Thinker",
                description="Cognitive pattern development phase",
                key_metrics=KeyMetrics(avg_document_length=600, avg_sentence_complexity=16, document_count=1),
            ),
            recent=Period(
                label="Current",
                archetype_label="Active Analyst",
                description="Current cognitive state",
                key_metrics=KeyMetrics(avg_document_length=700, avg_sentence_complexity=17, document_count=1),
            ),
        ),
        trajectory=Trajectory(
            type=TrajectoryType.CRYSTALLIZATION,
            description="Establishing baseline cognitive patterns",
            prognosis="Continue documenting to enable meaningful temporal analysis",
        ),
    )
