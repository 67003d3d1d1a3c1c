"""Profiling module for structure analysis and type inference.

Profiles an in-memory dataset column by column:
- Missing and distinct-value counts
- Semantic type inference (date, numeric, boolean, categorical, empty)
- Descriptive statistics for numeric columns
"""

from tablelens.profiling.models import (
    ColumnProfile,
    DataStructure,
    DescriptiveStats,
    Quartiles,
)
from tablelens.profiling.profiler import analyze_structure, profile_column
from tablelens.profiling.statistics import compute_descriptive_stats, percentile
from tablelens.profiling.type_inference import infer_type, infer_type_detailed

__all__ = [
    "analyze_structure",
    "profile_column",
    "compute_descriptive_stats",
    "percentile",
    "infer_type",
    "infer_type_detailed",
    "ColumnProfile",
    "DataStructure",
    "DescriptiveStats",
    "Quartiles",
]
