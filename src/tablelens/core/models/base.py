"""Base models and types used across all modules.

This module contains the fundamental types that don't belong to any specific
analysis module (profiling, outliers, correlation, etc.).
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from tablelens.core.errors import AnalysisError, ErrorKind


class Result[T](BaseModel):
    """Result type for operations that can fail.

    Use this instead of exceptions for expected failures.
    Exceptions are reserved for unexpected/programming errors.
    """

    success: bool
    value: T | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def ok(cls, value: T, warnings: list[str] | None = None) -> Result[T]:
        """Create a successful result."""
        return cls(success=True, value=value, warnings=warnings or [])

    @classmethod
    def fail(cls, error: str, kind: ErrorKind = ErrorKind.INVALID_DATASET) -> Result[T]:
        """Create a failed result."""
        return cls(success=False, error=error, error_kind=kind)

    def unwrap(self) -> T:
        """Get the value or raise if failed."""
        if not self.success:
            raise AnalysisError(
                f"Result failed: {self.error}",
                kind=self.error_kind or ErrorKind.INVALID_DATASET,
            )
        assert self.value is not None
        return self.value

    def map(self, fn: Callable[[T], Any]) -> Result[Any]:
        """Transform the value if successful."""
        if self.success and self.value is not None:
            return Result.ok(fn(self.value), self.warnings)
        return self


# === Enums ===


class InferredType(str, Enum):
    """Semantic type of a column, decided from its non-missing values."""

    DATE = "date"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    CATEGORICAL = "categorical"
    EMPTY = "empty"


class Severity(str, Enum):
    """Severity of an insight."""

    INFO = "info"
    WARNING = "warning"


class CorrelationStrength(str, Enum):
    """Bucketed magnitude of a correlation coefficient."""

    NONE = "none"  # Degenerate input, no coefficient computed
    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"


class CorrelationDirection(str, Enum):
    """Sign of a correlation coefficient."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NONE = "none"


class TrendDirection(str, Enum):
    """Label of a fitted ordinal trend."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    NONE = "none"


class InsightType(str, Enum):
    """Kinds of derived insights, in emission order."""

    DATA_QUALITY = "data_quality"
    ANALYSIS_OPPORTUNITY = "analysis_opportunity"
    VISUALIZATION_OPPORTUNITY = "visualization_opportunity"
    OUTLIERS = "outliers"
