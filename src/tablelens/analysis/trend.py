"""Ordinal trend analysis.

Fits value = slope * x + intercept by least squares, where x is the row's
position in the dataset. Timestamps are never parsed: a time column only
names the ordering the rows already carry.

The trend label uses an absolute slope threshold (0.1 value units per
row by default), so it is sensitive to the scale of the column.
"""

from __future__ import annotations

import numpy as np
from scipy import stats

from tablelens.analysis.models import TrendResult
from tablelens.core.config import Settings, get_settings
from tablelens.core.dataset import EMPTY_DATASET_WARNING, Dataset, check_dataset, column_values
from tablelens.core.models.base import Result, TrendDirection
from tablelens.profiling.values import parse_number


def format_equation(slope: float, intercept: float) -> str:
    return f"y = {slope:.4f}x + {intercept:.4f}"


def _classify_trend(slope: float, threshold: float) -> TrendDirection:
    if slope > threshold:
        return TrendDirection.INCREASING
    if slope < -threshold:
        return TrendDirection.DECREASING
    return TrendDirection.NONE


def analyze_trend(
    dataset: Dataset,
    value_column: str,
    time_column: str | None = None,
    settings: Settings | None = None,
) -> Result[TrendResult]:
    """Fit a linear trend of a numeric column against row position.

    Rows whose value does not parse as a number are dropped; the remaining
    rows keep their original positions as x. Fewer than two usable rows
    yield the "none" trend with zero coefficients. A constant column has
    r_squared 0.

    Args:
        dataset: Rows to read, in time order
        value_column: Column to fit
        time_column: Column the rows are ordered by (recorded, not parsed)
        settings: Application settings (slope threshold)

    Returns:
        Result containing the TrendResult
    """
    if len(dataset) == 0:
        return Result.ok(
            TrendResult(column=value_column, time_column=time_column),
            warnings=[EMPTY_DATASET_WARNING],
        )

    required = [value_column] if time_column is None else [value_column, time_column]
    failure = check_dataset(dataset, required)
    if failure is not None:
        return failure

    settings = settings or get_settings()

    # Unparseable values become NaN and are masked out with their positions
    parsed = [parse_number(value) for value in column_values(dataset, value_column)]
    y = np.array([np.nan if value is None else value for value in parsed], dtype=float)
    x = np.arange(len(y), dtype=float)

    mask = ~np.isnan(y)
    x_clean = x[mask]
    y_clean = y[mask]

    if len(x_clean) < 2:
        return Result.ok(
            TrendResult(
                column=value_column,
                time_column=time_column,
                sample_size=len(x_clean),
            )
        )

    y_mean = float(y_clean.mean())
    ss_tot = float(((y_clean - y_mean) ** 2).sum())
    if ss_tot == 0 or np.ptp(y_clean) == 0:
        # Flat column: no slope, nothing explained
        slope = 0.0
        intercept = float(y_clean[0])
        r_squared = 0.0
    else:
        fit = stats.linregress(x_clean, y_clean)
        slope = float(fit.slope)
        intercept = float(fit.intercept)
        ss_res = float(((y_clean - (slope * x_clean + intercept)) ** 2).sum())
        r_squared = float(np.clip(1.0 - ss_res / ss_tot, 0.0, 1.0))

    return Result.ok(
        TrendResult(
            column=value_column,
            time_column=time_column,
            trend=_classify_trend(slope, settings.trend_slope_threshold),
            slope=slope,
            intercept=intercept,
            r_squared=r_squared,
            sample_size=len(x_clean),
            equation=format_equation(slope, intercept),
        )
    )
