"""Insight generation from a structural profile.

Insights are emitted in a fixed order so that the list is reproducible:
1. data_quality (warning) when non-missing cells fall below the threshold
2. analysis_opportunity (info) when two or more columns are numeric
3. visualization_opportunity (info) when any column is categorical
4. outliers (warning), one per numeric column with outliers, in column order
"""

from __future__ import annotations

from tablelens.analysis.models import Insight, OutlierMethod
from tablelens.analysis.outliers import detect_outliers
from tablelens.core.config import Settings, get_settings
from tablelens.core.dataset import Dataset
from tablelens.core.logging import get_logger
from tablelens.core.models.base import InferredType, InsightType, Severity
from tablelens.profiling.models import DataStructure

logger = get_logger(__name__)


def _data_quality_insight(structure: DataStructure, threshold: float) -> Insight | None:
    quality = structure.completeness
    if quality is None or quality >= threshold:
        return None
    return Insight(
        type=InsightType.DATA_QUALITY,
        severity=Severity.WARNING,
        message=f"Data quality is {quality:.1f}%. Consider cleaning missing values.",
        details={
            "quality": quality,
            "missing": structure.missing_cells,
            "total": structure.total_cells,
        },
    )


def generate_insights(
    structure: DataStructure,
    dataset: Dataset,
    outlier_method: OutlierMethod | str = "iqr",
    settings: Settings | None = None,
) -> list[Insight]:
    """Derive findings from a structure and the dataset it was built from.

    Outliers are recomputed from the raw dataset for each numeric column.

    Args:
        structure: Profile produced by analyze_structure
        dataset: The profiled rows
        outlier_method: Policy for the outlier check (IQR by default)
        settings: Application settings (quality threshold)

    Returns:
        Insights in emission order (possibly empty)

    Raises:
        UnsupportedOutlierMethodError: If the method names no known policy
    """
    settings = settings or get_settings()
    insights: list[Insight] = []

    quality_insight = _data_quality_insight(structure, settings.data_quality_threshold)
    if quality_insight is not None:
        insights.append(quality_insight)

    numeric_columns = structure.columns_of_type(InferredType.NUMERIC)
    categorical_columns = structure.columns_of_type(InferredType.CATEGORICAL)

    if len(numeric_columns) >= 2:
        insights.append(
            Insight(
                type=InsightType.ANALYSIS_OPPORTUNITY,
                severity=Severity.INFO,
                message=(
                    f"Found {len(numeric_columns)} numeric columns. "
                    "Consider correlation analysis."
                ),
                details={"columns": [column.name for column in numeric_columns]},
            )
        )

    if categorical_columns:
        insights.append(
            Insight(
                type=InsightType.VISUALIZATION_OPPORTUNITY,
                severity=Severity.INFO,
                message=(
                    f"Found {len(categorical_columns)} categorical columns. "
                    "Good for bar charts and pie charts."
                ),
                details={"columns": [column.name for column in categorical_columns]},
            )
        )

    for column in numeric_columns:
        report_result = detect_outliers(dataset, column.name, outlier_method, settings)
        if not report_result.success or report_result.value is None:
            logger.warning("outlier_check_skipped", column=column.name, error=report_result.error)
            continue

        report = report_result.value
        if report.count > 0:
            insights.append(
                Insight(
                    type=InsightType.OUTLIERS,
                    severity=Severity.WARNING,
                    message=f'Column "{column.name}" has {report.count} outliers.',
                    details={
                        "column": column.name,
                        "count": report.count,
                        "bounds": report.bounds.model_dump() if report.bounds else None,
                    },
                )
            )

    return insights
