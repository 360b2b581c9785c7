"""Shared fixtures for the test suite."""

from datetime import datetime, timedelta, timezone

import pytest

from mind_profiler.models.document import Document


NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_document():
    """Factory for documents dated relative to NOW."""
    counter = {"n": 0}

    def _make(content: str, days_ago: float = 1, doc_id: str | None = None) -> Document:
        counter["n"] += 1
        return Document(
            id=doc_id or f"doc-{counter['n']}",
            content=content,
            date=NOW - timedelta(days=days_ago),
        )

    return _make
