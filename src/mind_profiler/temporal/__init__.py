"""Temporal analysis: epoch trajectory and per-document time series."""

from .evolution import analyze_temporal_evolution, classify_trajectory, default_evolution
from .longitudinal import build_longitudinal_series, longitudinal_point

__all__ = [
    "analyze_temporal_evolution",
    "classify_trajectory",
    "default_evolution",
    "build_longitudinal_series",
    "longitudinal_point",
]
