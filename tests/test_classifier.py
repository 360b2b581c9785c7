"""Tests for archetype classification."""

import pytest

from mind_profiler.models.analytics import Archetype
from mind_profiler.style.classifier import (
    CONFIDENCE_CEILING,
    CONFIDENCE_FLOOR,
    archetype_confidence,
    classify_archetype,
    score_archetypes,
)
from mind_profiler.style.markers import (
    DEFAULT_ARCHETYPE_MARKERS,
    DEFAULT_CATEGORIES,
    DEFAULT_MARKERS,
    DEFAULT_TOPICS,
    MarkerLibrary,
    MarkerRule,
)


class TestArchetypeScoring:
    """Test archetype marker scoring."""

    def test_declaration_order(self):
        assert list(Archetype)[0] is Archetype.DECONSTRUCTOR
        assert list(Archetype)[-1] is Archetype.CATALOGUER

    def test_scores_every_archetype(self):
        scores = score_archetypes("for example, such as", DEFAULT_MARKERS)
        assert set(scores.scores) == set(Archetype)
        assert scores.scores[Archetype.CATALOGUER] == 2

    def test_tie_goes_to_first_declared(self):
        scores = score_archetypes("however furthermore", DEFAULT_MARKERS)
        assert scores.scores[Archetype.DECONSTRUCTOR] == scores.scores[Archetype.SYNTHESIST] == 1
        assert scores.dominant is Archetype.DECONSTRUCTOR


class TestClassifyArchetype:
    """Test the classification result."""

    def test_no_markers_defaults_to_first(self):
        result = classify_archetype("hello world", 1, DEFAULT_MARKERS)
        assert result.type is Archetype.DECONSTRUCTOR
        assert result.confidence == CONFIDENCE_FLOOR

    def test_cataloguer(self):
        result = classify_archetype("For example, namely such as.", 1, DEFAULT_MARKERS)
        assert result.type is Archetype.CATALOGUER
        assert result.confidence == pytest.approx(0.9)
        assert result.description == Archetype.CATALOGUER.description
        assert result.traits == Archetype.CATALOGUER.traits

    def test_synthesist_beats_single_contrast(self):
        result = classify_archetype("Furthermore, moreover, however.", 1, DEFAULT_MARKERS)
        assert result.type is Archetype.SYNTHESIST

    def test_confidence_bounds(self):
        assert archetype_confidence(0, 5) == CONFIDENCE_FLOOR
        assert archetype_confidence(1000, 1) == CONFIDENCE_CEILING
        assert archetype_confidence(10, 0) == CONFIDENCE_CEILING

    def test_confidence_shrinks_with_more_documents(self):
        assert archetype_confidence(10, 10) < archetype_confidence(10, 2)

    def test_weighted_markers(self):
        archetypes = dict(DEFAULT_ARCHETYPE_MARKERS)
        archetypes[Archetype.ARCHITECT] = MarkerRule("architect", (r"\bblueprint\b",), weight=5.0)
        library = MarkerLibrary(categories=DEFAULT_CATEGORIES, archetypes=archetypes, topics=DEFAULT_TOPICS)

        result = classify_archetype("A blueprint, however.", 1, library)
        assert result.type is Archetype.ARCHITECT
        assert result.confidence == CONFIDENCE_CEILING
