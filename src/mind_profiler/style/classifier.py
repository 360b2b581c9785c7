"""
Archetype Classification

Score a corpus against six reasoning-style archetypes and select the
dominant one. Rule-based: each archetype's marker set is counted over
the full corpus text and the highest score wins.
"""

import logging
from dataclasses import dataclass

from mind_profiler.models.analytics import Archetype, CognitiveArchetype
from .markers import MarkerLibrary

logger = logging.getLogger(__name__)


CONFIDENCE_FLOOR = 0.6
CONFIDENCE_CEILING = 0.95

# Marker score per document needed to add 0.1 confidence
MARKERS_PER_DOCUMENT = 10


@dataclass
class ArchetypeScores:
    """Marker scores for every archetype, in declaration order."""
    scores: dict[Archetype, float]

    @property
    def dominant(self) -> Archetype:
        """Highest-scoring archetype; ties go to the earliest declared."""
        best = self.max_score
        return next(a for a in Archetype if self.scores[a] == best)

    @property
    def max_score(self) -> float:
        return max(self.scores.values())


def score_archetypes(text: str, markers: MarkerLibrary) -> ArchetypeScores:
    """Count every archetype's markers in ``text``."""
    return ArchetypeScores(
        scores={archetype: markers.archetypes[archetype].score(text) for archetype in Archetype}
    )


def archetype_confidence(max_score: float, document_count: int) -> float:
    """Confidence grows with marker density relative to corpus size."""
    density = max_score / (max(document_count, 1) * MARKERS_PER_DOCUMENT)
    return min(CONFIDENCE_CEILING, density + CONFIDENCE_FLOOR)


def classify_archetype(
    text: str,
    document_count: int,
    markers: MarkerLibrary,
) -> CognitiveArchetype:
    """
    Classify the dominant archetype of a corpus.

    Args:
        text: Full corpus text (all documents joined)
        document_count: Number of documents in the corpus
        markers: Marker library providing the archetype marker sets

    Returns:
        CognitiveArchetype with fixed description and traits for the winner
    """
    scores = score_archetypes(text.lower(), markers)
    dominant = scores.dominant

    logger.debug(
        "Archetype scores: %s -> %s",
        {a.value: s for a, s in scores.scores.items()},
        dominant.value,
    )

    return CognitiveArchetype(
        type=dominant,
        confidence=archetype_confidence(scores.max_score, document_count),
        description=dominant.description,
        traits=dominant.traits,
    )
