"""Rule-based cleaning of a dataset.

Each column may carry a CleaningRule. Missing cells are handled first,
then z-score outliers of numeric columns. The input rows are copied and
never mutated.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from typing import Any

import numpy as np

from tablelens.analysis.models import (
    CleaningReport,
    CleaningRule,
    MissingValueStrategy,
    OutlierStrategy,
)
from tablelens.core.config import Settings, get_settings
from tablelens.core.dataset import EMPTY_DATASET_WARNING, Dataset, check_dataset
from tablelens.core.logging import get_logger
from tablelens.core.models.base import InferredType, Result
from tablelens.profiling.patterns import pattern_config_for
from tablelens.profiling.type_inference import infer_type
from tablelens.profiling.values import canonical_string, is_missing, numeric_values

logger = get_logger(__name__)


def _fill_value(
    present: list[Any], strategy: MissingValueStrategy, rule: CleaningRule
) -> Any:
    """Single replacement value for the whole-column strategies."""
    if strategy == MissingValueStrategy.CONSTANT:
        return rule.fill_value

    if strategy == MissingValueStrategy.MODE:
        if not present:
            return None
        counts = Counter(canonical_string(value) for value in present)
        winner = counts.most_common(1)[0][0]
        return next(value for value in present if canonical_string(value) == winner)

    numbers = numeric_values(present)
    if not numbers:
        return None
    if strategy == MissingValueStrategy.MEAN:
        return float(np.mean(numbers))
    return float(np.median(numbers))


def _handle_missing(
    rows: list[dict[str, Any]], column: str, rule: CleaningRule
) -> tuple[list[dict[str, Any]], int]:
    """Apply the missing-value strategy of one column.

    Returns:
        Tuple of (rows, number of cells filled)
    """
    strategy = rule.missing_strategy
    if strategy == MissingValueStrategy.IGNORE:
        return rows, 0

    if strategy == MissingValueStrategy.REMOVE:
        return [row for row in rows if not is_missing(row.get(column))], 0

    filled = 0
    if strategy in (MissingValueStrategy.FORWARD_FILL, MissingValueStrategy.BACKWARD_FILL):
        ordered = rows if strategy == MissingValueStrategy.FORWARD_FILL else reversed(rows)
        last: Any = None
        for row in ordered:
            value = row.get(column)
            if not is_missing(value):
                last = value
            elif last is not None:
                row[column] = last
                filled += 1
        return rows, filled

    present = [row.get(column) for row in rows if not is_missing(row.get(column))]
    replacement = _fill_value(present, strategy, rule)
    if is_missing(replacement):
        return rows, 0

    for row in rows:
        if is_missing(row.get(column)):
            row[column] = replacement
            filled += 1
    return rows, filled


def _handle_outliers(
    rows: list[dict[str, Any]], column: str, rule: CleaningRule, settings: Settings
) -> int:
    """Replace z-score outliers of a numeric column in place.

    Returns:
        Number of values handled
    """
    if rule.outlier_strategy == OutlierStrategy.IGNORE:
        return 0

    present = [row.get(column) for row in rows if not is_missing(row.get(column))]
    inferred = infer_type(
        present,
        pattern_config=pattern_config_for(settings),
        threshold=settings.type_inference_threshold,
    )
    if inferred != InferredType.NUMERIC:
        return 0

    data = np.asarray(numeric_values(present), dtype=float)
    mean = float(data.mean())
    std_dev = float(data.std())
    if std_dev == 0 or np.ptp(data) == 0:
        return 0

    threshold = rule.outlier_threshold
    replacements = {
        OutlierStrategy.REMOVE: None,
        OutlierStrategy.MEAN: mean,
        OutlierStrategy.MEDIAN: float(np.median(data)),
    }

    handled = 0
    for row in rows:
        value = numeric_values([row.get(column)])
        if not value or abs(value[0] - mean) / std_dev <= threshold:
            continue
        if rule.outlier_strategy == OutlierStrategy.CAP:
            sign = 1.0 if value[0] > mean else -1.0
            row[column] = mean + sign * threshold * std_dev
        else:
            row[column] = replacements[rule.outlier_strategy]
        handled += 1
    return handled


def clean_dataset(
    dataset: Dataset,
    rules: Mapping[str, CleaningRule],
    settings: Settings | None = None,
) -> Result[CleaningReport]:
    """Clean a copy of the dataset column by column.

    Args:
        dataset: Rows to clean
        rules: Cleaning rule per column name
        settings: Application settings used to recognize numeric columns

    Returns:
        Result containing the CleaningReport with the cleaned rows
    """
    if len(dataset) == 0:
        return Result.ok(
            CleaningReport(rows_before=0, rows_after=0),
            warnings=[EMPTY_DATASET_WARNING],
        )

    failure = check_dataset(dataset, list(rules))
    if failure is not None:
        return failure

    settings = settings or get_settings()
    rows = [dict(row) for row in dataset]
    filled_cells: dict[str, int] = {}
    outliers_handled: dict[str, int] = {}

    for column, rule in rules.items():
        rows, filled = _handle_missing(rows, column, rule)
        filled_cells[column] = filled
        outliers_handled[column] = _handle_outliers(rows, column, rule, settings)

    logger.debug(
        "dataset_cleaned",
        rows_before=len(dataset),
        rows_after=len(rows),
        filled=sum(filled_cells.values()),
        outliers=sum(outliers_handled.values()),
    )

    return Result.ok(
        CleaningReport(
            rows=rows,
            rows_before=len(dataset),
            rows_after=len(rows),
            filled_cells=filled_cells,
            outliers_handled=outliers_handled,
        )
    )
