"""
Analytics Engine

Main entry point for corpus analysis. Filters documents to a timeframe
and composes the style, archetype, topic and temporal components into a
single AnalyticsResult.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, Optional, Sequence

from mind_profiler.defaults import empty_result
from mind_profiler.ingest.splitter import TextSegmentation, segment
from mind_profiler.ingest.timeframe import Timeframe, chronological, filter_by_timeframe
from mind_profiler.models.analytics import AnalyticsResult, WritingStyleAnalysis
from mind_profiler.models.document import Document
from mind_profiler.style.classifier import classify_archetype
from mind_profiler.style.insights import generate_insights
from mind_profiler.style.markers import DEFAULT_MARKERS, MarkerLibrary
from mind_profiler.style.metrics import TextStatistics, score_complexity, score_formality
from mind_profiler.style.signatures import extract_cognitive_signatures
from mind_profiler.style.topics import analyze_topic_distribution
from mind_profiler.temporal.evolution import analyze_temporal_evolution
from mind_profiler.temporal.longitudinal import build_longitudinal_series

logger = logging.getLogger(__name__)


@dataclass
class AnalysisProgress:
    """Progress tracking for corpus analysis."""
    phase: str
    current: int
    total: int
    message: str = ""


def corpus_text(documents: Sequence[Document]) -> str:
    """Join document contents into one text, in the order given."""
    return " ".join(doc.content for doc in documents)


def score_writing_style(
    segmentation: TextSegmentation,
    stats: TextStatistics,
    markers: MarkerLibrary,
) -> WritingStyleAnalysis:
    """Formality, complexity and cognitive signatures of a segmented text."""
    return WritingStyleAnalysis(
        formality=score_formality(segmentation, stats, markers),
        complexity=score_complexity(segmentation, stats, markers),
        cognitive_signatures=extract_cognitive_signatures(segmentation, markers),
    )


def analyze_writing_style(text: str, markers: MarkerLibrary = DEFAULT_MARKERS) -> WritingStyleAnalysis:
    """Formality, complexity and cognitive signatures of a text."""
    segmentation = segment(text)
    stats = TextStatistics.from_segmentation(segmentation, markers.common_long_words)
    return score_writing_style(segmentation, stats, markers)


class AnalyticsEngine:
    """
    Computes the stylometric fingerprint of a document corpus.

    The engine holds only read-only configuration, so one instance can
    serve any number of calls.

    Usage:
        engine = AnalyticsEngine()
        result = engine.analyze(documents, "30days")
        print(result.cognitive_archetype.type)
    """

    PHASES = ("filter", "archetype", "style", "topics", "insights", "temporal", "longitudinal")

    def __init__(
        self,
        markers: MarkerLibrary = DEFAULT_MARKERS,
        max_workers: int = 1,
        progress_callback: Optional[Callable[[AnalysisProgress], None]] = None,
    ):
        """
        Initialize the engine.

        Args:
            markers: Marker library to measure with
            max_workers: Threads for per-document extraction (1 = inline)
            progress_callback: Optional callback for progress updates
        """
        self.markers = markers
        self.max_workers = max(1, max_workers)
        self.progress_callback = progress_callback

    def _report_progress(self, phase: str, message: str = ""):
        """Report progress via callback if set."""
        if self.progress_callback:
            self.progress_callback(
                AnalysisProgress(phase, self.PHASES.index(phase) + 1, len(self.PHASES), message)
            )

    def analyze(
        self,
        documents: Iterable[Document],
        timeframe: "str | Timeframe" = Timeframe.SEVEN_DAYS,
        now: Optional[datetime] = None,
    ) -> AnalyticsResult:
        """
        Analyze the documents that fall inside a timeframe.

        Args:
            documents: Corpus to analyze (not modified)
            timeframe: One of 7days, 30days, 3months, 6months; anything else means 7days
            now: Reference instant for the timeframe (defaults to current UTC time)

        Returns:
            AnalyticsResult, or the fixed cold-start result if no document qualifies
        """
        self._report_progress("filter", "Selecting documents...")
        selected = filter_by_timeframe(documents, timeframe, now)
        logger.debug("Timeframe %s selected %d document(s)", timeframe, len(selected))

        if not selected:
            return empty_result()

        return self.analyze_corpus(selected)

    def analyze_corpus(self, documents: Sequence[Document]) -> AnalyticsResult:
        """Analyze an already-selected, non-empty corpus."""
        documents = chronological(documents)
        text = corpus_text(documents)
        segmentation = segment(text)
        stats = TextStatistics.from_segmentation(segmentation, self.markers.common_long_words)

        self._report_progress("archetype", "Classifying archetype...")
        archetype = classify_archetype(text, len(documents), self.markers)

        self._report_progress("style", "Scoring writing style...")
        writing_style = score_writing_style(segmentation, stats, self.markers)

        self._report_progress("topics", "Measuring topic distribution...")
        topics = analyze_topic_distribution(text, self.markers)

        self._report_progress("insights", "Generating insights...")
        insights = generate_insights(segmentation, stats, self.markers)

        self._report_progress("temporal", "Analyzing temporal evolution...")
        evolution = analyze_temporal_evolution(documents)

        self._report_progress("longitudinal", "Building longitudinal series...")
        if self.max_workers > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                series = build_longitudinal_series(documents, self.markers, executor)
        else:
            series = build_longitudinal_series(documents, self.markers)

        return AnalyticsResult(
            cognitive_archetype=archetype,
            writing_style=writing_style,
            topic_distribution=topics,
            temporal_evolution=evolution,
            psychostylistic_insights=insights,
            longitudinal_patterns=series,
        )


def analyze(
    documents: Iterable[Document],
    timeframe: "str | Timeframe" = Timeframe.SEVEN_DAYS,
    now: Optional[datetime] = None,
    markers: MarkerLibrary = DEFAULT_MARKERS,
) -> AnalyticsResult:
    """Analyze a corpus with a default-configured engine."""
    return AnalyticsEngine(markers=markers).analyze(documents, timeframe, now)
