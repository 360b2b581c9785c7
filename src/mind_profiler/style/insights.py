"""
Psychostylistic Insights

Template-based observations about sentence length, subordination,
questioning and assertiveness, plus a short reflection on the writer's
overall habits. Every string is chosen by fixed thresholds.
"""

from dataclasses import dataclass

from mind_profiler.ingest.splitter import TextSegmentation, split_with_terminators
from mind_profiler.models.analytics import Insight, MetaReflection, PsychostylisticInsights
from .markers import MarkerLibrary
from .metrics import TextStatistics


def is_question(sentence: str) -> bool:
    """True if the closing punctuation run contains a question mark, so "?!" counts."""
    body = sentence.rstrip()
    terminator = body[len(body.rstrip(".!?")):]
    return "?" in terminator


@dataclass
class InsightStatistics:
    """Corpus-level rates the insight templates are keyed on."""
    avg_sentence_length: float
    subordination_rate: float  # share of embedded sentences
    question_ratio: float      # share of sentences closing with "?", "?!" or "!?"
    assertive_ratio: float     # assertive markers per sentence
    modality_ratio: float      # modal verbs per word

    @classmethod
    def from_text(
        cls,
        segmentation: TextSegmentation,
        stats: TextStatistics,
        markers: MarkerLibrary,
    ) -> "InsightStatistics":
        text = segmentation.lower
        terminated = split_with_terminators(segmentation.text)
        questions = sum(1 for s in terminated if is_question(s))

        return cls(
            avg_sentence_length=stats.avg_sentence_length,
            subordination_rate=stats.embedded_rate,
            question_ratio=questions / len(terminated) if terminated else 0.0,
            assertive_ratio=markers.count("assertive", text) / max(stats.sentence_count, 1),
            modality_ratio=markers.count("modality", text) / max(stats.word_count, 1),
        )


def _sentence_length_insight(avg_length: float) -> Insight:
    if avg_length > 20:
        label = "complex"
        interpretation = (
            "Your preference for extended sentences suggests a mind that resists premature closure. "
            "You build comprehensive analytical frameworks rather than offering quick declarative strikes."
        )
        causality = (
            "This often emerges from academic training or philosophical temperament, "
            "a belief that complexity requires linguistic precision."
        )
    elif avg_length < 12:
        label = "direct"
        interpretation = (
            "Your preference for concise sentences indicates crystallized thinking: you write to assert "
            "established conclusions rather than explore uncertainty."
        )
        causality = "This pattern typically develops in minds oriented toward implementation rather than pure theory."
    else:
        label = "mid-complex" if avg_length > 15 else "direct"
        interpretation = (
            "Your balanced sentence length reflects a mind capable of both exploration and synthesis, "
            "adapting cognitive tempo to analytical demands."
        )
        causality = None

    return Insight(
        observation=f"Average sentence length: {avg_length:.1f} words ({label})",
        interpretation=interpretation,
        causality=causality,
        significance="high" if avg_length > 25 or avg_length < 10 else "medium",
    )


def _subordination_insight(rate: float) -> Insight:
    if rate > 0.4:
        level = "high"
    elif rate > 0.2:
        level = "moderate"
    else:
        level = "low"

    if rate > 0.4:
        interpretation = (
            "High subordination suggests recursive cognitive architecture: you think in nested conditional "
            "statements and embed qualifications within assertions. This reflects tolerance for ambiguity."
        )
        causality = (
            "Often correlates with philosophical training or legal thinking, "
            "minds accustomed to managing multiple simultaneous conditions."
        )
    elif rate < 0.15:
        interpretation = (
            "Low subordination indicates direct cognitive flow. You prefer linear progression over "
            "epistemic forking, favouring parsimony over contingency in inferential space."
        )
        causality = "Typically emerges from engineering or scientific backgrounds where clarity trumps comprehensiveness."
    else:
        interpretation = (
            "Moderate subordination reflects balanced cognitive processing: you employ complexity when "
            "necessary but avoid unnecessary analytical detours."
        )
        causality = None

    return Insight(
        observation=f"Subordination rate: {round(rate * 100)}% ({level} structural complexity)",
        interpretation=interpretation,
        causality=causality,
        significance="high",
    )


def _question_insight(ratio: float) -> Insight:
    if ratio > 0.1:
        label = "inquiry-driven"
    elif ratio > 0.05:
        label = "moderately questioning"
    else:
        label = "declarative"

    if ratio < 0.01:
        interpretation = (
            "Your writing is interrogatively inert, not from lack of curiosity, but because you write to "
            "assert, not explore. Your intellectual output is declarative and closed-form."
        )
        causality = (
            "This emerges when the writer has internalized answers before articulation; "
            "questions are resolved before writing begins."
        )
    elif ratio > 0.1:
        interpretation = (
            "High question usage reveals a dialectical temperament. You think through inquiry, using "
            "questions as cognitive scaffolding rather than mere rhetorical devices."
        )
        causality = "Often develops in minds trained in Socratic method or therapeutic frameworks."
    else:
        interpretation = (
            "Moderate questioning suggests strategic uncertainty: you pose questions not from confusion "
            "but as analytical tools to guide reader cognition."
        )
        causality = None

    return Insight(
        observation=f"Interrogative usage: {ratio * 100:.1f}% ({label})",
        interpretation=interpretation,
        causality=causality,
        significance="high" if ratio < 0.01 or ratio > 0.15 else "medium",
    )


def _assertive_insight(ratio: float) -> Insight:
    if ratio > 0.15:
        interpretation = (
            "High assertive language suggests epistemic confidence: you write from a position of "
            "intellectual authority, minimizing hedging and qualification."
        )
    elif ratio < 0.05:
        interpretation = (
            "Low assertive language indicates either intellectual humility or strategic ambiguity; "
            "you prefer to let evidence speak rather than claim authority."
        )
    else:
        interpretation = (
            "Moderate assertiveness reflects a balanced epistemological stance: confident in "
            "conclusions but respectful of analytical limits."
        )

    return Insight(
        observation=f"Assertive confidence markers: {round(ratio * 100)} per 100 sentences",
        interpretation=interpretation,
        significance="high" if ratio > 0.2 or ratio < 0.03 else "medium",
    )


def mind_profile(s: InsightStatistics) -> str:
    """Pick the first matching overall profile."""
    if s.avg_sentence_length > 20 and s.subordination_rate > 0.4 and s.question_ratio < 0.05:
        return (
            "Your intellectual identity pivots between theorist and engineer: you build comprehensive "
            "systems from first principles, then evaluate them for real-world coherence. You tolerate "
            "ambiguity only as scaffolding for rigor."
        )
    if s.avg_sentence_length < 15 and s.subordination_rate < 0.2 and s.assertive_ratio > 0.15:
        return (
            "You think in vectors, not clouds. Your writing reflects a belief in intellectual progress: "
            "premise, inference, resolution. You don't meander; you construct."
        )
    if s.question_ratio > 0.15 and s.modality_ratio > 0.02:
        return (
            "Your mind operates in interrogative mode, not from uncertainty but from systematic doubt. "
            "You use questions as cognitive instruments, probing assumptions rather than asserting conclusions."
        )
    if s.subordination_rate > 0.35 and s.assertive_ratio < 0.1:
        return (
            "You exhibit signs of crystallized cognition: an internalized framework that is extended "
            "rather than revised, marching toward resolution through carefully qualified logic."
        )
    if s.avg_sentence_length > 18 and s.question_ratio < 0.02 and s.assertive_ratio > 0.1:
        return (
            "Your cognitive ecosystem thrives on synthesis, not speculation. You present complex analysis "
            "with prosecutorial confidence; questions are resolved before articulation reaches the page."
        )
    return (
        "Your thinking style reflects mature intellectual architecture: integration over improvisation, "
        "declaration over interrogation. You prioritize clarity and systematic progression over "
        "exploratory uncertainty."
    )


def thinking_tempo(s: InsightStatistics) -> str:
    """Pick the first matching tempo description."""
    if s.avg_sentence_length > 22 and s.subordination_rate > 0.4:
        return (
            "Deliberative and architectonic: you prefer to exhaust analytical space before committing "
            "to conclusions."
        )
    if s.avg_sentence_length < 13 and s.subordination_rate < 0.2:
        return (
            "Rapid synthesis and decisive articulation: you move quickly from analysis to resolution."
        )
    if s.question_ratio > 0.1:
        return (
            "Interrogative pacing: you think through systematic questioning rather than direct assertion."
        )
    return (
        "Adaptive cognitive tempo: you modulate analytical speed based on content complexity while "
        "maintaining consistent standards for rigor and clarity."
    )


def cognitive_preferences(s: InsightStatistics) -> tuple[str, ...]:
    return (
        "Comprehensive exposition" if s.avg_sentence_length > 20 else "Crystallized articulation",
        "Conditional reasoning architecture" if s.subordination_rate > 0.3 else "Linear cognitive progression",
        "Dialectical exploration" if s.question_ratio > 0.1 else "Declarative resolution",
        "Epistemic confidence" if s.assertive_ratio > 0.15 else "Strategic qualification",
    )


def generate_insights(
    segmentation: TextSegmentation,
    stats: TextStatistics,
    markers: MarkerLibrary,
) -> PsychostylisticInsights:
    """Build the observations and meta-reflection for a corpus."""
    s = InsightStatistics.from_text(segmentation, stats, markers)

    return PsychostylisticInsights(
        primary=(
            _sentence_length_insight(s.avg_sentence_length),
            _subordination_insight(s.subordination_rate),
            _question_insight(s.question_ratio),
            _assertive_insight(s.assertive_ratio),
        ),
        meta_reflection=MetaReflection(
            mind_profile=mind_profile(s),
            cognitive_preferences=cognitive_preferences(s),
            thinking_tempo=thinking_tempo(s),
        ),
    )
