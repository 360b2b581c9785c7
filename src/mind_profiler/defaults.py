"""Cold-start result returned when no documents fall inside the timeframe."""

from mind_profiler.models.analytics import (
    AnalyticsResult,
    Archetype,
    CognitiveArchetype,
    CognitiveSignatures,
    ComplexityAnalysis,
    ComplexitySubdimensions,
    FormalityAnalysis,
    FormalitySubdimensions,
    Insight,
    MetaReflection,
    PsychostylisticInsights,
    TopicDistribution,
    TopicShare,
    WritingStyleAnalysis,
)
from mind_profiler.style.markers import OTHER_TOPIC_COLOR
from mind_profiler.temporal.evolution import default_evolution


def _build_empty_result() -> AnalyticsResult:
    return AnalyticsResult(
        cognitive_archetype=CognitiveArchetype(
            type=Archetype.CATALOGUER,
            confidence=0.6,
            description=(
                "Begin documenting your thoughts to establish your cognitive archetype. "
                "Early patterns suggest systematic information processing."
            ),
            traits=("Systematic analysis", "Information organization", "Detail orientation", "Structured thinking"),
        ),
        writing_style=WritingStyleAnalysis(
            formality=FormalityAnalysis(
                score=0.5,
                percentile=50,
                subdimensions=FormalitySubdimensions(
                    tone_register=0.5,
                    modality_usage=0.3,
                    contraction_rate=0.2,
                    hedging_frequency=0.3,
                ),
            ),
            complexity=ComplexityAnalysis(
                score=0.5,
                percentile=50,
                subdimensions=ComplexitySubdimensions(
                    clause_density=0.4,
                    dependency_length=0.5,
                    embedded_structure_rate=0.4,
                    lexical_rarity=0.3,
                ),
            ),
            cognitive_signatures=CognitiveSignatures(
                nested_hypotheticals=0.2,
                anaphoric_reasoning=0.3,
                structural_analogies=0.2,
                dialectical_vs_didactic=0.5,
            ),
        ),
        topic_distribution=TopicDistribution(
            dominant=(
                TopicShare(name="Technology", percentage=25, color_token="#3b82f6",
                           psychological_implication="Systematic thinking orientation"),
                TopicShare(name="Philosophy", percentage=25, color_token="#8b5cf6",
                           psychological_implication="Abstract conceptual processing"),
                TopicShare(name="Science", percentage=25, color_token="#10b981",
                           psychological_implication="Empirical analysis preference"),
                TopicShare(name="Other", percentage=25, color_token=OTHER_TOPIC_COLOR,
                           psychological_implication="Broad intellectual curiosity"),
            ),
            interpretation="Upload documents to reveal your dominant cognitive themes and thinking patterns",
            cognitive_style="Emerging intellectual profile",
        ),
        temporal_evolution=default_evolution(),
        psychostylistic_insights=PsychostylisticInsights(
            primary=(
                Insight(
                    observation="Initial cognitive baseline being established",
                    interpretation="Your thinking patterns will become clearer as you document more content",
                    significance="medium",
                ),
            ),
            meta_reflection=MetaReflection(
                mind_profile=(
                    "Developing cognitive profile - upload more documents to reveal your "
                    "characteristic thinking patterns"
                ),
                cognitive_preferences=("Systematic processing", "Information organization", "Analytical approach"),
                thinking_tempo="Baseline establishment phase",
            ),
        ),
        longitudinal_patterns=(),
    )


def empty_result() -> AnalyticsResult:
    """The fixed result for an empty corpus, built fresh on every call."""
    return _build_empty_result()
