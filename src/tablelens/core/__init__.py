"""Core infrastructure: result type, errors, settings, logging, dataset helpers."""

from tablelens.core.errors import AnalysisError, ErrorKind, UnsupportedOutlierMethodError
from tablelens.core.models import Result

__all__ = [
    "Result",
    "ErrorKind",
    "AnalysisError",
    "UnsupportedOutlierMethodError",
]
