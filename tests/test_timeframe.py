"""Tests for timeframe selection."""

from datetime import datetime, timedelta, timezone

from mind_profiler.ingest.timeframe import Timeframe, chronological, cutoff_for, filter_by_timeframe


class TestTimeframeParsing:
    """Test timeframe parsing and fallbacks."""

    def test_known_values(self):
        assert Timeframe.parse("7days") is Timeframe.SEVEN_DAYS
        assert Timeframe.parse("30days") is Timeframe.THIRTY_DAYS
        assert Timeframe.parse("3months") is Timeframe.THREE_MONTHS
        assert Timeframe.parse("6months") is Timeframe.SIX_MONTHS

    def test_unknown_falls_back_to_seven_days(self):
        assert Timeframe.parse("1year") is Timeframe.SEVEN_DAYS
        assert Timeframe.parse("") is Timeframe.SEVEN_DAYS
        assert Timeframe.parse(None) is Timeframe.SEVEN_DAYS

    def test_enum_passthrough(self):
        assert Timeframe.parse(Timeframe.SIX_MONTHS) is Timeframe.SIX_MONTHS


class TestCutoff:
    """Test cutoff computation."""

    def test_day_windows(self, now):
        assert cutoff_for("7days", now) == now - timedelta(days=7)
        assert cutoff_for("30days", now) == now - timedelta(days=30)

    def test_calendar_months(self, now):
        assert cutoff_for("3months", now) == datetime(2026, 7, 18, 12, 0, tzinfo=timezone.utc)
        assert cutoff_for("6months", now) == datetime(2026, 4, 18, 12, 0, tzinfo=timezone.utc)

    def test_month_end_is_clamped(self):
        end_of_may = datetime(2026, 5, 31, tzinfo=timezone.utc)
        assert cutoff_for("3months", end_of_may) == datetime(2026, 2, 28, tzinfo=timezone.utc)

    def test_naive_now_is_utc(self):
        naive = datetime(2026, 10, 18, 12, 0)
        assert cutoff_for("7days", naive) == datetime(2026, 10, 11, 12, 0, tzinfo=timezone.utc)

    def test_unknown_matches_seven_days(self, now):
        assert cutoff_for("fortnight", now) == cutoff_for("7days", now)


class TestFilter:
    """Test document filtering."""

    def test_boundary_is_inclusive(self, make_document, now):
        docs = [
            make_document("recent", days_ago=1),
            make_document("older", days_ago=6),
            make_document("boundary", days_ago=7),
            make_document("outside", days_ago=8),
        ]
        selected = filter_by_timeframe(docs, "7days", now)
        assert [d.content for d in selected] == ["recent", "older", "boundary"]

    def test_preserves_input_order(self, make_document, now):
        docs = [make_document("b", days_ago=2), make_document("a", days_ago=1)]
        assert filter_by_timeframe(docs, "30days", now) == docs

    def test_longer_window_selects_more(self, make_document, now):
        docs = [make_document(str(d), days_ago=d) for d in (1, 20, 60, 120, 300)]
        counts = [
            len(filter_by_timeframe(docs, tf, now))
            for tf in ("7days", "30days", "3months", "6months")
        ]
        assert counts == [1, 2, 3, 4]

    def test_stable_for_same_instant(self, make_document, now):
        docs = [make_document("x", days_ago=d) for d in range(10)]
        assert filter_by_timeframe(docs, "7days", now) == filter_by_timeframe(docs, "7days", now)


class TestChronological:
    """Test chronological ordering."""

    def test_oldest_first(self, make_document):
        docs = [make_document("new", days_ago=1), make_document("old", days_ago=5)]
        assert [d.content for d in chronological(docs)] == ["old", "new"]

    def test_ties_broken_by_id(self, make_document):
        docs = [
            make_document("z", days_ago=3, doc_id="b"),
            make_document("y", days_ago=3, doc_id="a"),
        ]
        assert [d.id for d in chronological(docs)] == ["a", "b"]
        assert chronological(docs) == chronological(docs[::-1])
