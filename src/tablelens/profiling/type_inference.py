"""Semantic type inference through ordered recognizer buckets.

Each non-missing value lands in exactly one bucket, tested in precedence
order: date, numeric, boolean, uncategorized. The column type is the first
bucket (same order) whose share of values exceeds the threshold; otherwise
the column is categorical. A column with no values is empty.

The ordered threshold means precedence, not plurality, decides the type:
a column whose date share clears the threshold is a date column even when
another bucket would also clear it.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel

from tablelens.core.config import get_settings
from tablelens.core.models.base import InferredType
from tablelens.profiling.patterns import PatternConfig, default_pattern_config
from tablelens.profiling.values import parse_number


class ValueBucket(str, Enum):
    """Recognizer bucket a single value falls into."""

    DATE = "date"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    UNCATEGORIZED = "uncategorized"


# Precedence used both per value and when reading ratios
_TYPED_BUCKETS: tuple[tuple[ValueBucket, InferredType], ...] = (
    (ValueBucket.DATE, InferredType.DATE),
    (ValueBucket.NUMERIC, InferredType.NUMERIC),
    (ValueBucket.BOOLEAN, InferredType.BOOLEAN),
)


class TypeInferenceResult(BaseModel):
    """Inferred type with the bucket ratios that decided it."""

    inferred_type: InferredType
    value_count: int
    ratios: dict[ValueBucket, float]


def classify_value(value: Any, pattern_config: PatternConfig | None = None) -> ValueBucket:
    """Place one non-missing value into its recognizer bucket."""
    config = pattern_config or default_pattern_config()

    if isinstance(value, (date, datetime)):
        return ValueBucket.DATE

    text = str(value).strip()
    if isinstance(value, str) and config.match_date(text) is not None:
        return ValueBucket.DATE
    if parse_number(value) is not None:
        return ValueBucket.NUMERIC
    if config.is_boolean_token(text):
        return ValueBucket.BOOLEAN
    return ValueBucket.UNCATEGORIZED


def infer_type_detailed(
    values: Sequence[Any],
    pattern_config: PatternConfig | None = None,
    threshold: float | None = None,
) -> TypeInferenceResult:
    """Infer the semantic type of a column's non-missing values.

    Args:
        values: Non-missing raw values of one column
        pattern_config: Recognizer configuration (defaults to bundled patterns)
        threshold: Ratio a bucket must exceed (defaults to settings)

    Returns:
        TypeInferenceResult with the decided type and per-bucket ratios
    """
    if threshold is None:
        threshold = get_settings().type_inference_threshold
    config = pattern_config or default_pattern_config()

    total = len(values)
    counts = dict.fromkeys(ValueBucket, 0)
    for value in values:
        counts[classify_value(value, config)] += 1

    if total == 0:
        return TypeInferenceResult(
            inferred_type=InferredType.EMPTY,
            value_count=0,
            ratios=dict.fromkeys(ValueBucket, 0.0),
        )

    ratios = {bucket: count / total for bucket, count in counts.items()}

    inferred_type = InferredType.CATEGORICAL
    for bucket, candidate in _TYPED_BUCKETS:
        if ratios[bucket] > threshold:
            inferred_type = candidate
            break

    return TypeInferenceResult(inferred_type=inferred_type, value_count=total, ratios=ratios)


def infer_type(
    values: Sequence[Any],
    pattern_config: PatternConfig | None = None,
    threshold: float | None = None,
) -> InferredType:
    """Infer the semantic type of a column's non-missing values."""
    return infer_type_detailed(values, pattern_config, threshold).inferred_type
