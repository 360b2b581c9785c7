"""Result models for corpus analytics.

Every model is frozen and uses tuples for sequences, so an
``AnalyticsResult`` cannot be modified after it is assembled. Field
names serialize in camelCase, which is the contract the dashboard reads.
"""

import datetime as dt
import json
from enum import Enum
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


UnitScore = Annotated[float, Field(ge=0.0, le=1.0)]
Percentile = Annotated[int, Field(ge=0, le=100)]


class Archetype(str, Enum):
    """Dominant reasoning style of a corpus.

    Declaration order is significant: when several archetypes share the
    highest marker score, the earliest one wins.
    """
    DECONSTRUCTOR = "deconstructor"
    SYNTHESIST = "synthesist"
    ALGORITHMIC_THINKER = "algorithmic_thinker"
    RHETORICAL_STRATEGIST = "rhetorical_strategist"
    ARCHITECT = "architect"
    CATALOGUER = "cataloguer"

    @property
    def description(self) -> str:
        return {
            Archetype.DECONSTRUCTOR: (
                "You dismantle assumptions and examine contradictions. Your mind thrives on "
                "identifying flaws in reasoning and challenging established paradigms."
            ),
            Archetype.SYNTHESIST: (
                "You excel at connecting disparate concepts and building unified theories. "
                "Your cognitive strength lies in integration and pattern recognition."
            ),
            Archetype.ALGORITHMIC_THINKER: (
                "You approach problems with systematic logic and structured methodologies. "
                "Your thinking follows clear procedural frameworks."
            ),
            Archetype.RHETORICAL_STRATEGIST: (
                "You understand the power of language and persuasion. Your writing demonstrates "
                "sophisticated awareness of audience and impact."
            ),
            Archetype.ARCHITECT: (
                "You build conceptual structures and organize complex ideas into coherent "
                "frameworks. Your mind designs systems of thought."
            ),
            Archetype.CATALOGUER: (
                "You excel at categorization and detailed analysis. Your strength lies in "
                "comprehensive documentation and systematic exploration."
            ),
        }[self]

    @property
    def traits(self) -> tuple[str, ...]:
        return {
            Archetype.DECONSTRUCTOR: (
                "Critical analysis", "Contrarian thinking", "Assumption questioning", "Logical skepticism",
            ),
            Archetype.SYNTHESIST: (
                "Pattern recognition", "Conceptual integration", "Bridge-building", "Holistic thinking",
            ),
            Archetype.ALGORITHMIC_THINKER: (
                "Systematic approach", "Logical sequencing", "Methodological rigor", "Procedural clarity",
            ),
            Archetype.RHETORICAL_STRATEGIST: (
                "Persuasive communication", "Audience awareness", "Strategic framing", "Narrative construction",
            ),
            Archetype.ARCHITECT: (
                "Structural thinking", "System design", "Organizational clarity", "Framework development",
            ),
            Archetype.CATALOGUER: (
                "Detail orientation", "Comprehensive analysis", "Systematic documentation", "Taxonomic thinking",
            ),
        }[self]


class TrajectoryType(str, Enum):
    """Direction of change in sentence complexity across three epochs."""
    EXPLORATORY_EXPANSION = "exploratory_expansion"
    COMPRESSION_ABSTRACTION = "compression_abstraction"
    CRYSTALLIZATION = "crystallization"

    @property
    def description(self) -> str:
        return {
            TrajectoryType.EXPLORATORY_EXPANSION: "Your thinking has become more elaborate and exploratory over time",
            TrajectoryType.COMPRESSION_ABSTRACTION: "Your expression has become more distilled and precise",
            TrajectoryType.CRYSTALLIZATION: "Your thinking style has stabilized into a consistent cognitive pattern",
        }[self]

    @property
    def prognosis(self) -> str:
        return {
            TrajectoryType.EXPLORATORY_EXPANSION: (
                "Trajectory suggests developing expertise and increasing analytical sophistication"
            ),
            TrajectoryType.COMPRESSION_ABSTRACTION: (
                "Movement toward crystallization and axiomatic expression typical of mastery"
            ),
            TrajectoryType.CRYSTALLIZATION: (
                "Indicates developed intellectual framework and consistent analytical approach"
            ),
        }[self]


class ResultModel(BaseModel):
    """Base for immutable, camelCase-serialized result models."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dictionary using the wire field names."""
        return self.model_dump(by_alias=True, mode="json")

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


# === Writing style ===

class FormalitySubdimensions(ResultModel):
    tone_register: UnitScore
    modality_usage: UnitScore
    contraction_rate: UnitScore
    hedging_frequency: UnitScore


class ComplexitySubdimensions(ResultModel):
    clause_density: UnitScore
    dependency_length: UnitScore
    embedded_structure_rate: UnitScore
    lexical_rarity: UnitScore


class FormalityAnalysis(ResultModel):
    score: UnitScore
    percentile: Percentile
    subdimensions: FormalitySubdimensions


class ComplexityAnalysis(ResultModel):
    score: UnitScore
    percentile: Percentile
    subdimensions: ComplexitySubdimensions


class CognitiveSignatures(ResultModel):
    """Secondary reasoning-structure rates, each in [0, 1]."""
    nested_hypotheticals: UnitScore
    anaphoric_reasoning: UnitScore
    structural_analogies: UnitScore
    dialectical_vs_didactic: UnitScore


class WritingStyleAnalysis(ResultModel):
    formality: FormalityAnalysis
    complexity: ComplexityAnalysis
    cognitive_signatures: CognitiveSignatures


# === Archetype ===

class CognitiveArchetype(ResultModel):
    type: Archetype
    confidence: Annotated[float, Field(ge=0.6, le=0.95)]
    description: str
    traits: tuple[str, ...]


# === Topics ===

class TopicShare(ResultModel):
    name: str
    percentage: Percentile
    color_token: str = Field(alias="color")
    psychological_implication: str


class TopicDistribution(ResultModel):
    dominant: tuple[TopicShare, ...]
    interpretation: str
    cognitive_style: str


# === Temporal evolution ===

class KeyMetrics(ResultModel):
    avg_document_length: int
    avg_sentence_complexity: float
    document_count: int


class Period(ResultModel):
    label: str
    archetype_label: str = Field(alias="archetype")
    description: str
    key_metrics: KeyMetrics


class EvolutionPeriods(ResultModel):
    early: Period
    middle: Period
    recent: Period


class Trajectory(ResultModel):
    type: TrajectoryType
    description: str
    prognosis: str


class TemporalEvolution(ResultModel):
    periods: EvolutionPeriods
    trajectory: Trajectory


# === Insights ===

class Insight(ResultModel):
    observation: str
    interpretation: str
    causality: Optional[str] = None
    significance: Literal["high", "medium", "low"]


class MetaReflection(ResultModel):
    mind_profile: str
    cognitive_preferences: tuple[str, ...]
    thinking_tempo: str


class PsychostylisticInsights(ResultModel):
    primary: tuple[Insight, ...]
    meta_reflection: MetaReflection


# === Longitudinal ===

class LongitudinalPoint(ResultModel):
    """Feature vector for a single document."""
    date: dt.date
    conceptual_density: UnitScore
    formality_index: UnitScore
    cognitive_complexity: UnitScore
    annotations: Optional[tuple[str, ...]] = None


# === Aggregate ===

class AnalyticsResult(ResultModel):
    """Everything measured for one corpus and timeframe."""
    cognitive_archetype: CognitiveArchetype
    writing_style: WritingStyleAnalysis
    topic_distribution: TopicDistribution
    temporal_evolution: TemporalEvolution
    psychostylistic_insights: PsychostylisticInsights
    longitudinal_patterns: tuple[LongitudinalPoint, ...]


# === Narrative (produced outside the engine) ===

class CognitiveProfile(ResultModel):
    """Free-text profile returned by a narrative generator."""
    intellectual_approach: str = ""
    strengths: tuple[str, ...] = ()
    weaknesses: tuple[str, ...] = ()
    growth_pathways: tuple[str, ...] = ()
    potential_pitfalls: tuple[str, ...] = ()
    supporting_quotations: tuple[str, ...] = ()
    detailed_analysis: str = ""
