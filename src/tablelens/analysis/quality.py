"""Data quality scoring.

The score starts at 100 and loses points per issue:
- missing cells above 10%: -20 (above 5%: -10)
- each column without any non-missing value: -5

The score never drops below 0.
"""

from __future__ import annotations

from tablelens.analysis.models import DataQualityReport
from tablelens.core.config import Settings
from tablelens.core.dataset import EMPTY_DATASET_WARNING, Dataset
from tablelens.core.errors import ErrorKind
from tablelens.core.models.base import InferredType, Result
from tablelens.profiling.profiler import analyze_structure

HIGH_MISSING_PERCENTAGE = 10.0
MODERATE_MISSING_PERCENTAGE = 5.0


def assess_data_quality(
    dataset: Dataset,
    settings: Settings | None = None,
) -> Result[DataQualityReport]:
    """Score the completeness and consistency of a dataset.

    Args:
        dataset: Rows to assess
        settings: Application settings

    Returns:
        Result containing the DataQualityReport (score 0 for no rows)
    """
    if len(dataset) == 0:
        return Result.ok(
            DataQualityReport(quality=0.0, issues=["No data available"]),
            warnings=[EMPTY_DATASET_WARNING],
        )

    structure_result = analyze_structure(dataset, settings=settings)
    if not structure_result.success:
        return Result.fail(
            structure_result.error or "Structure analysis failed",
            kind=structure_result.error_kind or ErrorKind.INVALID_DATASET,
        )
    structure = structure_result.unwrap()

    missing_percentage = (
        structure.missing_cells / structure.total_cells * 100 if structure.total_cells else 0.0
    )

    issues: list[str] = []
    quality = 100.0

    if missing_percentage > HIGH_MISSING_PERCENTAGE:
        issues.append(f"High missing value rate: {missing_percentage:.1f}%")
        quality -= 20
    elif missing_percentage > MODERATE_MISSING_PERCENTAGE:
        issues.append(f"Moderate missing value rate: {missing_percentage:.1f}%")
        quality -= 10

    for column in structure.columns_of_type(InferredType.EMPTY):
        issues.append(f'Column "{column.name}" has no values')
        quality -= 5

    return Result.ok(
        DataQualityReport(
            quality=max(0.0, quality),
            missing_percentage=missing_percentage,
            issues=issues,
            total_records=structure.row_count,
            total_fields=structure.column_count,
        )
    )
