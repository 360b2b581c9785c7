"""Tests for psychostylistic insights."""

from mind_profiler.ingest.splitter import segment
from mind_profiler.style.insights import (
    InsightStatistics,
    cognitive_preferences,
    generate_insights,
    is_question,
    mind_profile,
    thinking_tempo,
)
from mind_profiler.style.markers import DEFAULT_MARKERS
from mind_profiler.style.metrics import TextStatistics


def insights_of(text: str):
    seg = segment(text)
    return generate_insights(seg, TextStatistics.from_segmentation(seg), DEFAULT_MARKERS)


class TestInsightStatistics:
    """Test the rates insights are keyed on."""

    def test_question_ratio(self):
        seg = segment("Is this right? Yes it is. What now?")
        stats = InsightStatistics.from_text(seg, TextStatistics.from_segmentation(seg), DEFAULT_MARKERS)
        assert stats.question_ratio == 2 / 3

    def test_mixed_terminators_count_as_questions(self):
        seg = segment("Really?! Yes. Truly!? Done.")
        stats = InsightStatistics.from_text(seg, TextStatistics.from_segmentation(seg), DEFAULT_MARKERS)
        assert stats.question_ratio == 0.5

    def test_is_question(self):
        assert is_question("What?")
        assert is_question(" Really?! ")
        assert is_question("Wait!?")
        assert not is_question("Done.")
        assert not is_question("Is it? no")

    def test_no_questions(self):
        seg = segment("The cat sat. The dog ran.")
        stats = InsightStatistics.from_text(seg, TextStatistics.from_segmentation(seg), DEFAULT_MARKERS)
        assert stats.question_ratio == 0.0


class TestGenerateInsights:
    """Test generated observations."""

    def test_four_primary_insights(self):
        result = insights_of("The cat sat. The dog ran.")
        assert len(result.primary) == 4
        assert all(i.significance in ("high", "medium", "low") for i in result.primary)

    def test_declarative_writing(self):
        result = insights_of("The cat sat. The dog ran.")
        question = result.primary[2]
        assert "(declarative)" in question.observation
        assert question.significance == "high"
        assert result.meta_reflection.cognitive_preferences[2] == "Declarative resolution"

    def test_inquiry_driven_writing(self):
        result = insights_of("Is this right? Yes it is. What now?")
        assert "(inquiry-driven)" in result.primary[2].observation
        assert result.meta_reflection.cognitive_preferences[2] == "Dialectical exploration"

    def test_sentence_length_observation(self):
        result = insights_of("One two three. Four five six.")
        assert result.primary[0].observation == "Average sentence length: 3.0 words (direct)"

    def test_deterministic(self):
        text = "However, we should consider this. Clearly it matters? Perhaps not."
        assert insights_of(text) == insights_of(text)


class TestMetaReflection:
    """Test profile and tempo selection."""

    def test_theorist_profile(self):
        s = InsightStatistics(25, 0.5, 0.0, 0.0, 0.0)
        assert "theorist and engineer" in mind_profile(s)
        assert thinking_tempo(s).startswith("Deliberative")

    def test_vector_profile(self):
        s = InsightStatistics(10, 0.1, 0.0, 0.2, 0.0)
        assert mind_profile(s).startswith("You think in vectors")
        assert thinking_tempo(s).startswith("Rapid synthesis")

    def test_fallback_profile(self):
        s = InsightStatistics(16, 0.25, 0.05, 0.05, 0.0)
        assert mind_profile(s).startswith("Your thinking style reflects mature")
        assert thinking_tempo(s).startswith("Adaptive")

    def test_preferences(self):
        s = InsightStatistics(25, 0.5, 0.2, 0.2, 0.0)
        assert cognitive_preferences(s) == (
            "Comprehensive exposition",
            "Conditional reasoning architecture",
            "Dialectical exploration",
            "Epistemic confidence",
        )
