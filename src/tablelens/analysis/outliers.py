"""Outlier detection for numeric columns.

Two mutually exclusive policies:

IQR method:
- Calculate Q1 (25th percentile) and Q3 (75th percentile)
- IQR = Q3 - Q1
- Lower fence = Q1 - 1.5 * IQR
- Upper fence = Q3 + 1.5 * IQR
- Values strictly outside the closed fence interval are outliers

Z-score method:
- z = |value - mean| / std_dev, outlier when z > threshold (default 3)
- A constant column (std_dev == 0) flags nothing
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from tablelens.analysis.models import (
    IQRBounds,
    IQRMethod,
    OutlierMethod,
    OutlierReport,
    ZScoreBounds,
    ZScoreMethod,
)
from tablelens.core.config import Settings, get_settings
from tablelens.core.dataset import EMPTY_DATASET_WARNING, Dataset, check_dataset, column_values
from tablelens.core.errors import UnsupportedOutlierMethodError
from tablelens.core.models.base import Result
from tablelens.profiling.statistics import compute_quartiles
from tablelens.profiling.values import numeric_values

_IQR_NAMES = frozenset({"iqr"})
_ZSCORE_NAMES = frozenset({"zscore", "z-score", "z_score"})


def parse_outlier_method(method: Any, settings: Settings | None = None) -> OutlierMethod:
    """Resolve an outlier policy from a variant instance or its name.

    Names take their parameters from settings.

    Args:
        method: Policy variant or its name
        settings: Application settings (IQR multiplier, z-score threshold)

    Raises:
        UnsupportedOutlierMethodError: For any other identifier
    """
    if isinstance(method, (IQRMethod, ZScoreMethod)):
        return method

    if isinstance(method, str):
        name = method.strip().lower()
        settings = settings or get_settings()
        if name in _IQR_NAMES:
            return IQRMethod(multiplier=settings.iqr_multiplier)
        if name in _ZSCORE_NAMES:
            return ZScoreMethod(threshold=settings.zscore_threshold)

    raise UnsupportedOutlierMethodError(method)


def detect_outliers_iqr(
    values: Sequence[float], column: str = "", method: IQRMethod | None = None
) -> OutlierReport:
    """Flag values outside the IQR fences.

    Args:
        values: Parsed numeric values, in row order
        column: Column name recorded on the report
        method: IQR policy (default multiplier 1.5)

    Returns:
        OutlierReport with IQRBounds (None bounds for no values)
    """
    method = method or IQRMethod()
    if len(values) == 0:
        return OutlierReport(column=column, method="iqr")

    quartiles = compute_quartiles(np.sort(np.asarray(values, dtype=float)))
    assert quartiles.q1 is not None and quartiles.q3 is not None and quartiles.iqr is not None

    lower = quartiles.q1 - method.multiplier * quartiles.iqr
    upper = quartiles.q3 + method.multiplier * quartiles.iqr
    outliers = [value for value in values if value < lower or value > upper]

    return OutlierReport(
        column=column,
        method="iqr",
        outliers=outliers,
        bounds=IQRBounds(lower=lower, upper=upper),
        count=len(outliers),
    )


def detect_outliers_zscore(
    values: Sequence[float], column: str = "", method: ZScoreMethod | None = None
) -> OutlierReport:
    """Flag values more than `threshold` standard deviations from the mean.

    Args:
        values: Parsed numeric values, in row order
        column: Column name recorded on the report
        method: Z-score policy (default threshold 3)

    Returns:
        OutlierReport with ZScoreBounds (None bounds for no values)
    """
    method = method or ZScoreMethod()
    if len(values) == 0:
        return OutlierReport(column=column, method="zscore")

    data = np.asarray(values, dtype=float)
    mean = float(data.mean())
    std_dev = float(data.std())  # Population std (ddof=0)

    if std_dev == 0 or np.ptp(data) == 0:
        outliers: list[float] = []
    else:
        outliers = [value for value in values if abs(value - mean) / std_dev > method.threshold]

    return OutlierReport(
        column=column,
        method="zscore",
        outliers=outliers,
        bounds=ZScoreBounds(mean=mean, std_dev=std_dev, threshold=method.threshold),
        count=len(outliers),
    )


def detect_outliers(
    dataset: Dataset,
    column_name: str,
    method: OutlierMethod | str = "iqr",
    settings: Settings | None = None,
) -> Result[OutlierReport]:
    """Detect outlying numeric values in one column of a dataset.

    Values that do not parse as numbers are ignored. An empty dataset
    yields an empty report.

    Args:
        dataset: Rows to read
        column_name: Column to check
        method: Policy variant or its name ("iqr", "zscore")
        settings: Application settings used to resolve a policy name

    Returns:
        Result containing the OutlierReport

    Raises:
        UnsupportedOutlierMethodError: If the method names no known policy
    """
    policy = parse_outlier_method(method, settings)

    failure = check_dataset(dataset, [column_name])
    if failure is not None:
        return failure

    values = numeric_values(column_values(dataset, column_name))
    if isinstance(policy, IQRMethod):
        report = detect_outliers_iqr(values, column_name, policy)
    else:
        report = detect_outliers_zscore(values, column_name, policy)

    warnings = [EMPTY_DATASET_WARNING] if len(dataset) == 0 else None
    return Result.ok(report, warnings=warnings)
