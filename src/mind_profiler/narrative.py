"""
Narrative Profiles

Optional layer that turns measured writing style into a free-text
cognitive profile with a generative model. The analytics engine never
calls this; callers pass ``result.writing_style`` in after analysis.
"""

import logging
from typing import Optional, Protocol, Sequence

from pydantic import ValidationError

from mind_profiler.llm import LLMClient
from mind_profiler.models.analytics import CognitiveProfile, WritingStyleAnalysis
from mind_profiler.models.document import Document

logger = logging.getLogger(__name__)

# Characters of corpus text included in a prompt
MAX_SAMPLE_CHARS = 50_000


class NarrativeGenerator(Protocol):
    """Anything that can describe a writer from their documents and style."""

    def generate(
        self,
        documents: Sequence[Document],
        style: WritingStyleAnalysis,
    ) -> Optional[CognitiveProfile]:
        ...


def _pct(value: float) -> str:
    return f"{round(value * 100)}%"


def build_cognitive_prompt(documents: Sequence[Document], style: WritingStyleAnalysis) -> str:
    """Render the prompt for a cognitive profile."""
    sample = "\n\n".join(doc.content for doc in documents)[:MAX_SAMPLE_CHARS]
    signatures = style.cognitive_signatures

    return f"""Analyze this person's writing to create a cognitive (intellectual) profile.

WRITING SAMPLE:
{sample}

COGNITIVE METRICS:
- Formality: {_pct(style.formality.score)} (percentile {style.formality.percentile})
- Complexity: {_pct(style.complexity.score)} (percentile {style.complexity.percentile})
- Nested Hypotheticals: {_pct(signatures.nested_hypotheticals)}
- Anaphoric Reasoning: {_pct(signatures.anaphoric_reasoning)}
- Structural Analogies: {_pct(signatures.structural_analogies)}
- Dialectical vs Didactic: {_pct(signatures.dialectical_vs_didactic)}

Respond with a single JSON object with these keys:
"intellectualApproach" (string), "strengths" (3-5 strings), "weaknesses" (2-4 strings),
"growthPathways" (3-4 strings), "potentialPitfalls" (2-3 strings),
"supportingQuotations" (2-3 quotations from the text), "detailedAnalysis" (string).
Ground every claim in the writing sample."""


class LLMNarrativeGenerator:
    """Narrative generator backed by an LLMClient."""

    def __init__(self, client: Optional[LLMClient] = None, temperature: float = 0.3):
        self.client = client or LLMClient()
        self.temperature = temperature

    def generate(
        self,
        documents: Sequence[Document],
        style: WritingStyleAnalysis,
    ) -> Optional[CognitiveProfile]:
        """Ask the model for a profile; None if nothing usable comes back."""
        if not documents:
            return None

        response = self.client.generate(
            build_cognitive_prompt(documents, style),
            temperature=self.temperature,
        )
        data = self.client.extract_json(response)

        if not isinstance(data, dict):
            logger.warning("Narrative response was not a JSON object")
            return None

        try:
            return CognitiveProfile.model_validate(data)
        except ValidationError as e:
            logger.warning("Narrative response did not match profile schema: %s", e)
            return None
