"""Mind Profiler - deterministic stylometric fingerprints for document corpora."""

__version__ = "0.1.0"
