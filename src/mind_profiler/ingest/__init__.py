"""Corpus ingestion: loading, timeframe selection and tokenization."""

from mind_profiler.ingest.loader import DocumentLoadError, load_documents
from mind_profiler.ingest.splitter import (
    TextSegmentation,
    segment,
    split_into_sentences,
    split_into_words,
)
from mind_profiler.ingest.timeframe import Timeframe, chronological, cutoff_for, filter_by_timeframe

__all__ = [
    "DocumentLoadError",
    "load_documents",
    "TextSegmentation",
    "segment",
    "split_into_sentences",
    "split_into_words",
    "Timeframe",
    "chronological",
    "cutoff_for",
    "filter_by_timeframe",
]
