"""Analysis models.

Pydantic models for on-demand analyses and derived findings:
- IQRMethod / ZScoreMethod: the outlier policy variant
- OutlierReport with IQRBounds or ZScoreBounds
- CorrelationResult, TrendResult
- Insight, Recommendation, DataQualityReport
- CleaningRule and its strategies
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from tablelens.core.models.base import (
    CorrelationDirection,
    CorrelationStrength,
    InsightType,
    Severity,
    TrendDirection,
)

# === Outlier policies ===


class IQRMethod(BaseModel):
    """Flag values outside [q1 - k*iqr, q3 + k*iqr]."""

    kind: Literal["iqr"] = "iqr"
    multiplier: float = 1.5


class ZScoreMethod(BaseModel):
    """Flag values whose |value - mean| / std_dev exceeds the threshold."""

    kind: Literal["zscore"] = "zscore"
    threshold: float = 3.0


OutlierMethod = Annotated[IQRMethod | ZScoreMethod, Field(discriminator="kind")]


class IQRBounds(BaseModel):
    """Closed interval of non-outlying values."""

    lower: float
    upper: float


class ZScoreBounds(BaseModel):
    """Parameters of the z-score rule."""

    mean: float
    std_dev: float
    threshold: float


class OutlierReport(BaseModel):
    """Outlying values of one column and the bounds that flagged them.

    bounds is None when the column has no numeric values.
    """

    column: str
    method: Literal["iqr", "zscore"]
    outliers: list[float] = Field(default_factory=list)
    bounds: IQRBounds | ZScoreBounds | None = None
    count: int = 0


# === Correlation and trend ===


class CorrelationResult(BaseModel):
    """Pearson correlation between two columns."""

    column1: str
    column2: str
    coefficient: float = 0.0
    strength: CorrelationStrength = CorrelationStrength.NONE
    direction: CorrelationDirection = CorrelationDirection.NONE
    sample_size: int = 0


class TrendResult(BaseModel):
    """Least-squares fit of a column against row position."""

    column: str
    time_column: str | None = None
    trend: TrendDirection = TrendDirection.NONE
    slope: float = 0.0
    intercept: float = 0.0
    r_squared: float = 0.0
    sample_size: int = 0
    equation: str = "y = 0.0000x + 0.0000"


# === Insights and reports ===


class Insight(BaseModel):
    """A human-readable finding derived from a structural profile."""

    type: InsightType
    severity: Severity
    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class RecommendationPriority(str, Enum):
    """Priority of a recommendation."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Recommendation(BaseModel):
    """A follow-up action suggested by the insights."""

    category: str
    priority: RecommendationPriority
    action: str
    description: str


class DataQualityReport(BaseModel):
    """Quality score of a dataset with the issues that lowered it."""

    quality: float
    missing_percentage: float = 0.0
    issues: list[str] = Field(default_factory=list)
    total_records: int = 0
    total_fields: int = 0


# === Cleaning ===


class MissingValueStrategy(str, Enum):
    """How to treat missing cells of a column."""

    REMOVE = "remove"  # Drop the row
    MEAN = "mean"
    MEDIAN = "median"
    MODE = "mode"
    FORWARD_FILL = "forward_fill"
    BACKWARD_FILL = "backward_fill"
    CONSTANT = "constant"
    IGNORE = "ignore"


class OutlierStrategy(str, Enum):
    """How to treat z-score outliers of a numeric column."""

    REMOVE = "remove"  # Replace with None
    CAP = "cap"
    MEAN = "mean"
    MEDIAN = "median"
    IGNORE = "ignore"


class CleaningRule(BaseModel):
    """Cleaning policy for one column."""

    missing_strategy: MissingValueStrategy = MissingValueStrategy.IGNORE
    outlier_strategy: OutlierStrategy = OutlierStrategy.IGNORE
    outlier_threshold: float = 3.0
    fill_value: Any = None


class CleaningReport(BaseModel):
    """Cleaned rows and what the cleaning pass changed."""

    rows: list[dict[str, Any]] = Field(default_factory=list)
    rows_before: int
    rows_after: int
    filled_cells: dict[str, int] = Field(default_factory=dict)
    outliers_handled: dict[str, int] = Field(default_factory=dict)

    @property
    def rows_removed(self) -> int:
        return self.rows_before - self.rows_after
