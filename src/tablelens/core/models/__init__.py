"""Shared models for the analysis engine."""

from tablelens.core.models.base import (
    CorrelationDirection,
    CorrelationStrength,
    InferredType,
    InsightType,
    Result,
    Severity,
    TrendDirection,
)

__all__ = [
    "Result",
    "InferredType",
    "Severity",
    "CorrelationStrength",
    "CorrelationDirection",
    "TrendDirection",
    "InsightType",
]
