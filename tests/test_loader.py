"""Tests for corpus loading."""

import json
from datetime import timezone

import pytest

from mind_profiler.ingest.loader import DocumentLoadError, load_documents


RECORDS = [
    {"id": 1, "content": "First note.", "date": "2026-10-17T10:00:00Z"},
    {"id": "b", "content": "Second note.", "date": "2026-10-16T08:30:00+02:00"},
]


class TestJsonLoading:
    """Test JSON and JSONL corpora."""

    def test_json_list(self, tmp_path):
        path = tmp_path / "corpus.json"
        path.write_text(json.dumps(RECORDS))

        docs = load_documents(path)
        assert [d.id for d in docs] == ["1", "b"]
        assert docs[0].date.tzinfo is not None

    def test_json_object(self, tmp_path):
        path = tmp_path / "corpus.json"
        path.write_text(json.dumps({"documents": RECORDS}))
        assert len(load_documents(path)) == 2

    def test_jsonl(self, tmp_path):
        path = tmp_path / "corpus.jsonl"
        path.write_text("\n".join(json.dumps(r) for r in RECORDS) + "\n\n")
        assert [d.content for d in load_documents(path)] == ["First note.", "Second note."]

    def test_naive_dates_are_utc(self, tmp_path):
        path = tmp_path / "corpus.json"
        path.write_text(json.dumps([{"id": "x", "content": "y", "date": "2026-10-17T10:00:00"}]))
        assert load_documents(path)[0].date.tzinfo == timezone.utc


class TestLoadErrors:
    """Test malformed input."""

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "corpus.json"
        path.write_text("{not json")
        with pytest.raises(DocumentLoadError, match="Invalid JSON"):
            load_documents(path)

    def test_invalid_jsonl_line(self, tmp_path):
        path = tmp_path / "corpus.jsonl"
        path.write_text(json.dumps(RECORDS[0]) + "\n{oops\n")
        with pytest.raises(DocumentLoadError, match="line 2"):
            load_documents(path)

    def test_missing_field(self, tmp_path):
        path = tmp_path / "corpus.json"
        path.write_text(json.dumps([{"id": "x", "content": "y"}]))
        with pytest.raises(DocumentLoadError, match="Malformed"):
            load_documents(path)

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "corpus.json"
        path.write_text(json.dumps({"notes": []}))
        with pytest.raises(DocumentLoadError, match="list of documents"):
            load_documents(path)

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "corpus.csv"
        path.write_text("id,content,date\n")
        with pytest.raises(DocumentLoadError, match="Unsupported"):
            load_documents(path)


class TestTextDirectory:
    """Test directories of plain text files."""

    def test_one_document_per_file(self, tmp_path):
        (tmp_path / "beta.txt").write_text("Second.", encoding="utf-8")
        (tmp_path / "alpha.txt").write_text("First.", encoding="utf-8")
        (tmp_path / "skip.md").write_text("Ignored.", encoding="utf-8")

        docs = load_documents(tmp_path)
        assert [d.id for d in docs] == ["alpha", "beta"]
        assert docs[0].content == "First."
        assert docs[0].date.tzinfo is not None

    def test_latin1_fallback(self, tmp_path):
        (tmp_path / "note.txt").write_bytes("caf\xe9".encode("latin-1"))
        assert load_documents(tmp_path)[0].content == "café"
