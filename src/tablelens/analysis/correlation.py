"""Pearson correlation between two numeric columns.

Rows are paired by position. A row whose value fails numeric parsing on
either side is dropped from both sides, keeping the pairs aligned.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from scipy import stats

from tablelens.analysis.models import CorrelationResult
from tablelens.core.config import Settings, get_settings
from tablelens.core.dataset import EMPTY_DATASET_WARNING, Dataset, check_dataset, column_values
from tablelens.core.models.base import CorrelationDirection, CorrelationStrength, Result
from tablelens.profiling.values import parse_number


def _classify_strength(coefficient: float, settings: Settings) -> CorrelationStrength:
    """Bucket |r| into weak / moderate / strong."""
    magnitude = abs(coefficient)
    if magnitude < settings.correlation_moderate_threshold:
        return CorrelationStrength.WEAK
    if magnitude < settings.correlation_strong_threshold:
        return CorrelationStrength.MODERATE
    return CorrelationStrength.STRONG


def _classify_direction(coefficient: float) -> CorrelationDirection:
    if coefficient > 0:
        return CorrelationDirection.POSITIVE
    if coefficient < 0:
        return CorrelationDirection.NEGATIVE
    return CorrelationDirection.NONE


def paired_numeric_values(
    left: Sequence[object], right: Sequence[object]
) -> tuple[list[float], list[float]]:
    """Keep the positions where both sides parse as finite numbers."""
    xs: list[float] = []
    ys: list[float] = []
    for raw_x, raw_y in zip(left, right, strict=False):
        x = parse_number(raw_x)
        y = parse_number(raw_y)
        if x is None or y is None:
            continue
        xs.append(x)
        ys.append(y)
    return xs, ys


def pearson_coefficient(xs: Sequence[float], ys: Sequence[float]) -> float | None:
    """Pearson r of two aligned sequences.

    Returns:
        The coefficient, or None for empty or mismatched input and when
        either side is constant (zero denominator)
    """
    n = len(xs)
    if n == 0 or n != len(ys):
        return None

    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)

    # Zero variance: max == min is exact, unlike x - mean
    if np.ptp(x) == 0 or np.ptp(y) == 0:
        return None

    pearson_r, _ = stats.pearsonr(x, y)
    pearson_r = float(np.asarray(pearson_r).item())
    if not np.isfinite(pearson_r):
        return None

    # Rounding can push a perfect fit just past 1
    return float(np.clip(pearson_r, -1.0, 1.0))


def calculate_correlation(
    dataset: Dataset,
    column_a: str,
    column_b: str,
    settings: Settings | None = None,
) -> Result[CorrelationResult]:
    """Compute the Pearson correlation of two columns.

    Degenerate inputs (no usable pairs, constant column) are not errors:
    they resolve to coefficient 0 with strength and direction "none".

    Args:
        dataset: Rows to read
        column_a: First column
        column_b: Second column
        settings: Application settings (strength buckets)

    Returns:
        Result containing the CorrelationResult
    """
    if len(dataset) == 0:
        return Result.ok(
            CorrelationResult(column1=column_a, column2=column_b),
            warnings=[EMPTY_DATASET_WARNING],
        )

    failure = check_dataset(dataset, [column_a, column_b])
    if failure is not None:
        return failure

    settings = settings or get_settings()
    xs, ys = paired_numeric_values(
        column_values(dataset, column_a), column_values(dataset, column_b)
    )
    coefficient = pearson_coefficient(xs, ys)

    if coefficient is None:
        return Result.ok(
            CorrelationResult(column1=column_a, column2=column_b, sample_size=len(xs))
        )

    return Result.ok(
        CorrelationResult(
            column1=column_a,
            column2=column_b,
            coefficient=coefficient,
            strength=_classify_strength(coefficient, settings),
            direction=_classify_direction(coefficient),
            sample_size=len(xs),
        )
    )
