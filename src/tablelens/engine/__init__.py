"""Cached analysis pipeline."""

from tablelens.engine.cache import AnalysisCache, CacheEntry, compute_cache_key
from tablelens.engine.engine import (
    AnalysisContext,
    AnalysisEngine,
    AnalysisOptions,
    AnalysisResult,
)

__all__ = [
    "AnalysisCache",
    "AnalysisContext",
    "AnalysisEngine",
    "AnalysisOptions",
    "AnalysisResult",
    "CacheEntry",
    "compute_cache_key",
]
