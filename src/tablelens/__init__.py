"""TableLens.

Profiling and analysis engine for in-memory tabular datasets.
"""

__version__ = "0.1.0"

from tablelens.core.models.base import Result
from tablelens.engine import AnalysisEngine, AnalysisOptions, AnalysisResult

__all__ = [
    "AnalysisEngine",
    "AnalysisOptions",
    "AnalysisResult",
    "Result",
    "__version__",
]
