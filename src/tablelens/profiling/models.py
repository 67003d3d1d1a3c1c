"""Profiling models.

Pydantic models for the structural profile of a dataset:
- Quartiles / DescriptiveStats: numeric summary of one column
- ColumnProfile: per-column counts, inferred type and statistics
- DataStructure: the whole-dataset profile
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from tablelens.core.models.base import InferredType


class Quartiles(BaseModel):
    """Linear-interpolation quartiles and their spread."""

    q1: float | None = None
    q2: float | None = None
    q3: float | None = None
    iqr: float | None = None


class DescriptiveStats(BaseModel):
    """Summary statistics over the values of a column that parse as numbers.

    Every field is None when no value parsed, so callers can tell
    "no numeric data" apart from "all zeros".
    """

    min: float | None = None
    max: float | None = None
    mean: float | None = None
    median: float | None = None
    std_dev: float | None = None
    variance: float | None = None  # Population variance (divides by N)
    sum: float | None = None
    count: int | None = None
    quartiles: Quartiles = Field(default_factory=Quartiles)

    @property
    def is_empty(self) -> bool:
        """True when no value parsed as a number."""
        return not self.count


class ColumnProfile(BaseModel):
    """Structural profile of one column."""

    name: str
    inferred_type: InferredType
    missing_count: int
    non_missing_count: int
    unique_count: int
    statistics: DescriptiveStats | None = None
    sample_values: list[Any] = Field(default_factory=list)

    @property
    def row_count(self) -> int:
        """Rows the column was profiled over."""
        return self.missing_count + self.non_missing_count


class DataStructure(BaseModel):
    """Structural profile of a dataset."""

    row_count: int = 0
    column_count: int = 0
    columns: list[ColumnProfile] = Field(default_factory=list)
    total_cells: int = 0
    missing_cells: int = 0

    @property
    def completeness(self) -> float | None:
        """Percentage of non-missing cells, None when there are no cells."""
        if self.total_cells == 0:
            return None
        return (self.total_cells - self.missing_cells) / self.total_cells * 100

    def columns_of_type(self, inferred_type: InferredType) -> list[ColumnProfile]:
        """Columns with the given inferred type, in declaration order."""
        return [column for column in self.columns if column.inferred_type == inferred_type]

    def get_column(self, name: str) -> ColumnProfile | None:
        """Look up a column profile by name."""
        return next((column for column in self.columns if column.name == name), None)
