"""Cognitive signatures: per-sentence rates of reasoning-structure markers."""

from mind_profiler.ingest.splitter import TextSegmentation
from mind_profiler.models.analytics import CognitiveSignatures
from .markers import MarkerLibrary
from .metrics import clamp01


# Rescaling applied to matches-per-sentence before clamping
NESTED_HYPOTHETICAL_SCALE = 100
ANAPHORIC_REASONING_SCALE = 20
STRUCTURAL_ANALOGY_SCALE = 20


def dialectical_ratio(dialectical: float, didactic: float) -> float:
    """Share of dialectical markers; the +1 leans towards didactic when both are absent."""
    return clamp01(dialectical / (dialectical + didactic + 1))


def extract_cognitive_signatures(
    segmentation: TextSegmentation,
    markers: MarkerLibrary,
) -> CognitiveSignatures:
    """Compute the four cognitive signature rates for a text."""
    text = segmentation.lower
    sentences = max(segmentation.sentence_count, 1)

    nested = markers.count("nested_hypotheticals", text) / sentences
    anaphoric = markers.count("anaphoric_reasoning", text) / sentences
    analogies = markers.count("analogy", text) / sentences

    return CognitiveSignatures(
        nested_hypotheticals=clamp01(nested * NESTED_HYPOTHETICAL_SCALE),
        anaphoric_reasoning=clamp01(anaphoric * ANAPHORIC_REASONING_SCALE),
        structural_analogies=clamp01(analogies * STRUCTURAL_ANALOGY_SCALE),
        dialectical_vs_didactic=dialectical_ratio(
            markers.count("dialectical", text),
            markers.count("didactic", text),
        ),
    )
