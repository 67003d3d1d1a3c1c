"""Dataset shape and helpers.

A dataset is an ordered sequence of rows; each row maps column names to
scalars. Rows need not share key sets, an absent key reads as missing.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from tablelens.core.errors import ErrorKind
from tablelens.core.models.base import Result

if TYPE_CHECKING:
    import pandas as pd

type Row = Mapping[str, Any]
type Dataset = Sequence[Row]

EMPTY_DATASET_WARNING = "Dataset has no rows"


def find_invalid_row(dataset: Dataset) -> int | None:
    """Return the index of the first row that is not a mapping, if any."""
    for index, row in enumerate(dataset):
        if not isinstance(row, Mapping):
            return index
    return None


def column_names(dataset: Dataset) -> list[str]:
    """Union of row keys, in first-seen order."""
    seen: dict[str, None] = {}
    for row in dataset:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


def column_values(dataset: Dataset, column: str) -> list[Any]:
    """Raw values of one column, one per row (absent keys become None)."""
    return [row.get(column) for row in dataset]


def has_column(dataset: Dataset, column: str) -> bool:
    """Check whether any row carries the column key."""
    return any(column in row for row in dataset)


def dataset_from_frame(frame: pd.DataFrame) -> list[dict[str, Any]]:
    """Convert a pandas DataFrame into a dataset of plain rows.

    NaN, NaT and pd.NA cells become None so they read as missing.
    """
    import pandas as pd

    records = frame.astype(object).where(pd.notna(frame), None).to_dict("records")
    return [{str(key): value for key, value in record.items()} for record in records]


def check_dataset(dataset: Dataset, columns: Sequence[str] = ()) -> Result[None] | None:
    """Validate rows and required columns.

    An empty dataset passes: callers answer it with an empty result.

    Returns:
        A failed Result describing the first problem, or None if valid
    """
    if len(dataset) == 0:
        return None

    invalid_index = find_invalid_row(dataset)
    if invalid_index is not None:
        return Result.fail(
            f"Row {invalid_index} is not a mapping of column names to values",
            kind=ErrorKind.INVALID_DATASET,
        )

    for column in columns:
        if not has_column(dataset, column):
            return Result.fail(f"Column not found: {column}", kind=ErrorKind.COLUMN_NOT_FOUND)
    return None
