"""
Longitudinal Series

One feature vector per document, ordered by date, for trend charts.
"""

from concurrent.futures import Executor
from datetime import timezone
from typing import Optional, Sequence

from mind_profiler.ingest.splitter import segment
from mind_profiler.ingest.timeframe import chronological
from mind_profiler.models.analytics import LongitudinalPoint
from mind_profiler.models.document import Document
from mind_profiler.style.markers import DEFAULT_MARKERS, MarkerLibrary
from mind_profiler.style.metrics import TextStatistics, clamp01


# High-water marks that earn an annotation
CONCEPTUAL_DENSITY_PEAK = 0.7
FORMALITY_PEAK = 0.8
COMPLEXITY_PEAK = 0.8


def longitudinal_point(document: Document, markers: MarkerLibrary = DEFAULT_MARKERS) -> LongitudinalPoint:
    """
    Compute the feature vector for a single document.

    - conceptual density: abstract/technical terms per 100 words
    - formality index: discourse connectives per 10 sentences
    - cognitive complexity: blend of sentence length (/25) and word length (/8)
    """
    segmentation = segment(document.content)
    stats = TextStatistics.from_segmentation(segmentation)
    text = segmentation.lower

    abstract_terms = markers.count("abstract_terms", text)
    connectives = markers.count("discourse_connectives", text)

    conceptual_density = clamp01(abstract_terms * 100 / stats.word_count) if stats.word_count else 0.0
    formality_index = clamp01(connectives * 10 / stats.sentence_count) if stats.sentence_count else 0.0
    cognitive_complexity = clamp01(
        (stats.avg_sentence_length / 25 + stats.avg_word_length / 8) / 2
    )

    annotations = []
    if conceptual_density > CONCEPTUAL_DENSITY_PEAK:
        annotations.append("High conceptual density")
    if formality_index > FORMALITY_PEAK:
        annotations.append("Peak formality")
    if cognitive_complexity > COMPLEXITY_PEAK:
        annotations.append("Maximum complexity")

    return LongitudinalPoint(
        date=document.date.astimezone(timezone.utc).date(),
        conceptual_density=conceptual_density,
        formality_index=formality_index,
        cognitive_complexity=cognitive_complexity,
        annotations=tuple(annotations) if annotations else None,
    )


def build_longitudinal_series(
    documents: Sequence[Document],
    markers: MarkerLibrary = DEFAULT_MARKERS,
    executor: Optional[Executor] = None,
) -> tuple[LongitudinalPoint, ...]:
    """
    Build the per-document series in ascending date order.

    Args:
        documents: Corpus in any order
        markers: Marker library
        executor: Optional executor to compute points concurrently;
                  results keep date order either way

    Returns:
        Tuple of LongitudinalPoint, oldest first
    """
    ordered = chronological(documents)

    if executor is not None:
        points = executor.map(lambda doc: longitudinal_point(doc, markers), ordered)
    else:
        points = (longitudinal_point(doc, markers) for doc in ordered)

    return tuple(points)
