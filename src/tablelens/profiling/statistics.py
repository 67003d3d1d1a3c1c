"""Descriptive statistics for numeric columns.

Computes, over the values that parse as finite numbers:
- min / max / sum / count
- mean and median
- population variance and standard deviation (divide by N)
- quartiles by linear-interpolation percentile, and the IQR

Values that fail to parse are excluded silently.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

import numpy as np

from tablelens.profiling.models import DescriptiveStats, Quartiles
from tablelens.profiling.values import numeric_values


def percentile(sorted_values: Sequence[float] | np.ndarray, p: float) -> float:
    """Linear-interpolation percentile over ascending values.

    index = (p / 100) * (n - 1); the result blends the neighbours at
    floor(index) and ceil(index) by the fractional part.
    """
    n = len(sorted_values)
    index = (p / 100) * (n - 1)
    lower = int(np.floor(index))
    upper = min(int(np.ceil(index)), n - 1)
    weight = index - lower
    return float(sorted_values[lower] * (1 - weight) + sorted_values[upper] * weight)


def compute_quartiles(sorted_values: Sequence[float] | np.ndarray) -> Quartiles:
    """Quartiles of ascending values; all None for an empty input."""
    if len(sorted_values) == 0:
        return Quartiles()
    q1 = percentile(sorted_values, 25)
    q2 = percentile(sorted_values, 50)
    q3 = percentile(sorted_values, 75)
    return Quartiles(q1=q1, q2=q2, q3=q3, iqr=q3 - q1)


def compute_descriptive_stats(values: Iterable[Any]) -> DescriptiveStats:
    """Compute summary statistics for a column's values.

    Args:
        values: Raw values; those not parseable as finite numbers are dropped

    Returns:
        DescriptiveStats (all fields None and count 0 when nothing parsed)
    """
    numbers = numeric_values(values)
    if not numbers:
        return DescriptiveStats()

    data = np.sort(np.asarray(numbers, dtype=float))
    n = len(data)

    mean = float(data.mean())
    variance = float(np.mean((data - mean) ** 2))

    mid = n // 2
    median = float(data[mid]) if n % 2 else float((data[mid - 1] + data[mid]) / 2)

    return DescriptiveStats(
        min=float(data[0]),
        max=float(data[-1]),
        mean=mean,
        median=median,
        std_dev=float(np.sqrt(variance)),
        variance=variance,
        sum=float(data.sum()),
        count=n,
        quartiles=compute_quartiles(data),
    )
