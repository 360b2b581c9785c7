"""Tests for the longitudinal series."""

from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime, timedelta, timezone

import pytest

from mind_profiler.models.document import Document
from mind_profiler.temporal.longitudinal import build_longitudinal_series, longitudinal_point


class TestLongitudinalPoint:
    """Test per-document features."""

    def test_conceptual_density(self, make_document):
        point = longitudinal_point(make_document("Theory and concept. Framework analysis."))

        assert point.conceptual_density == 1.0
        assert point.formality_index == 0.0
        assert point.cognitive_complexity == pytest.approx(0.4875)
        assert point.annotations == ("High conceptual density",)

    def test_peak_formality(self, make_document):
        point = longitudinal_point(make_document("However, we go. Therefore we stay."))

        assert point.formality_index == 1.0
        assert point.annotations == ("Peak formality",)

    def test_no_annotations(self, make_document):
        point = longitudinal_point(make_document("A cat sat."))
        assert point.annotations is None

    def test_empty_document(self, make_document):
        point = longitudinal_point(make_document(""))

        assert point.conceptual_density == 0.0
        assert point.formality_index == 0.0
        assert point.cognitive_complexity == 0.0
        assert point.annotations is None

    def test_date_is_utc(self):
        eastern = timezone(timedelta(hours=-5))
        doc = Document(id="late", content="Late night.", date=datetime(2026, 1, 1, 23, 30, tzinfo=eastern))
        assert longitudinal_point(doc).date == date(2026, 1, 2)


class TestLongitudinalSeries:
    """Test series ordering."""

    @pytest.fixture
    def corpus(self, make_document):
        return [
            make_document("Middle. However, yes.", days_ago=5),
            make_document("Newest theory.", days_ago=1),
            make_document("Oldest concept here.", days_ago=9),
        ]

    def test_ascending_dates(self, corpus):
        series = build_longitudinal_series(corpus)
        dates = [p.date for p in series]

        assert len(series) == 3
        assert dates == sorted(dates)

    def test_executor_matches_sequential(self, corpus):
        with ThreadPoolExecutor(max_workers=3) as executor:
            parallel = build_longitudinal_series(corpus, executor=executor)
        assert parallel == build_longitudinal_series(corpus)

    def test_empty(self):
        assert build_longitudinal_series([]) == ()

    def test_serialized_fields(self, corpus):
        point = build_longitudinal_series(corpus)[0].to_dict()
        assert set(point) == {"date", "conceptualDensity", "formalityIndex", "cognitiveComplexity", "annotations"}
        assert point["date"] == corpus[2].date.date().isoformat()

    def test_tied_dates_in_any_order(self, make_document):
        docs = [
            make_document("Theory and concept.", days_ago=2, doc_id="b"),
            make_document("A cat sat.", days_ago=2, doc_id="a"),
            make_document("However, we go.", days_ago=2, doc_id="c"),
        ]
        assert build_longitudinal_series(docs) == build_longitudinal_series(docs[::-1])
        assert build_longitudinal_series(docs)[0].annotations is None
