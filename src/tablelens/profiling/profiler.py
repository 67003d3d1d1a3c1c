"""Column profiler and dataset structure analysis."""

from __future__ import annotations

from tablelens.core.config import Settings, get_settings
from tablelens.core.dataset import (
    EMPTY_DATASET_WARNING,
    Dataset,
    check_dataset,
    column_names,
    column_values,
)
from tablelens.core.logging import get_logger
from tablelens.core.models.base import InferredType, Result
from tablelens.profiling.models import ColumnProfile, DataStructure
from tablelens.profiling.patterns import PatternConfig, pattern_config_for
from tablelens.profiling.statistics import compute_descriptive_stats
from tablelens.profiling.type_inference import infer_type
from tablelens.profiling.values import canonical_string, is_missing

logger = get_logger(__name__)


def profile_column(
    dataset: Dataset,
    column_name: str,
    settings: Settings | None = None,
    pattern_config: PatternConfig | None = None,
) -> ColumnProfile:
    """Profile a single column.

    Absent keys, None, empty strings and NaN all count as missing.
    Statistics are computed only for numeric columns.

    Args:
        dataset: Rows to read
        column_name: Column to profile
        settings: Application settings
        pattern_config: Recognizer configuration

    Returns:
        ColumnProfile for the column
    """
    settings = settings or get_settings()
    pattern_config = pattern_config or pattern_config_for(settings)
    values = column_values(dataset, column_name)
    present = [value for value in values if not is_missing(value)]

    inferred_type = infer_type(
        present,
        pattern_config=pattern_config,
        threshold=settings.type_inference_threshold,
    )
    statistics = None
    if inferred_type == InferredType.NUMERIC:
        statistics = compute_descriptive_stats(present)

    return ColumnProfile(
        name=column_name,
        inferred_type=inferred_type,
        missing_count=len(values) - len(present),
        non_missing_count=len(present),
        unique_count=len({canonical_string(value) for value in present}),
        statistics=statistics,
        sample_values=values[: settings.sample_values_count],
    )


def analyze_structure(
    dataset: Dataset,
    settings: Settings | None = None,
    pattern_config: PatternConfig | None = None,
) -> Result[DataStructure]:
    """Profile every column of a dataset.

    An empty dataset is not an error: it yields an empty structure with a
    warning attached.

    Args:
        dataset: Rows to profile
        settings: Application settings
        pattern_config: Recognizer configuration

    Returns:
        Result containing the DataStructure
    """
    if len(dataset) == 0:
        return Result.ok(DataStructure(), warnings=[EMPTY_DATASET_WARNING])

    failure = check_dataset(dataset)
    if failure is not None:
        return failure

    settings = settings or get_settings()
    names = column_names(dataset)
    pattern_config = pattern_config or pattern_config_for(settings)
    columns = [profile_column(dataset, name, settings, pattern_config) for name in names]

    row_count = len(dataset)
    structure = DataStructure(
        row_count=row_count,
        column_count=len(names),
        columns=columns,
        total_cells=row_count * len(names),
        missing_cells=sum(column.missing_count for column in columns),
    )

    logger.debug(
        "structure_analyzed",
        rows=structure.row_count,
        columns=structure.column_count,
        missing_cells=structure.missing_cells,
    )
    return Result.ok(structure)
