"""Analysis engine: the cached end-to-end pipeline.

perform_analysis runs, on a cache miss:
1. Structure profiling (types, missing and unique counts, statistics)
2. Insight generation (with per-column outlier checks)
3. Requested correlations and trends
4. Recommendations derived from the insights

The result is cached under a key built from the dataset and the options;
a repeated call within the TTL returns the same result object.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from tablelens.analysis.correlation import calculate_correlation
from tablelens.analysis.insights import generate_insights
from tablelens.analysis.models import (
    CorrelationResult,
    Insight,
    IQRMethod,
    OutlierMethod,
    OutlierReport,
    Recommendation,
    TrendResult,
)
from tablelens.analysis.outliers import detect_outliers
from tablelens.analysis.recommendations import generate_recommendations
from tablelens.analysis.trend import analyze_trend
from tablelens.core.config import Settings, get_settings
from tablelens.core.dataset import EMPTY_DATASET_WARNING, Dataset, check_dataset
from tablelens.core.errors import ErrorKind
from tablelens.core.logging import get_logger, log_context
from tablelens.core.models.base import Result
from tablelens.engine.cache import AnalysisCache, compute_cache_key
from tablelens.profiling.models import DataStructure
from tablelens.profiling.profiler import analyze_structure

logger = get_logger(__name__)


class AnalysisOptions(BaseModel):
    """Call-scoped options of a pipeline run.

    An unset outlier_method means IQR with the engine settings' multiplier.
    """

    model_config = ConfigDict(frozen=True)

    outlier_method: OutlierMethod | None = None
    correlations: tuple[tuple[str, str], ...] = ()
    trend_columns: tuple[str, ...] = ()
    time_column: str | None = None


class AnalysisResult(BaseModel):
    """Everything one pipeline run produced.

    Cached and shared between callers, so the result and its sequences are
    immutable.
    """

    model_config = ConfigDict(frozen=True)

    structure: DataStructure
    insights: tuple[Insight, ...] = ()
    correlations: tuple[CorrelationResult, ...] = ()
    trends: tuple[TrendResult, ...] = ()
    recommendations: tuple[Recommendation, ...] = ()
    analysis_time_ms: float = 0.0
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    options: AnalysisOptions = Field(default_factory=AnalysisOptions)


@dataclass(frozen=True)
class AnalysisContext:
    """The dataset and options threaded through one pipeline run."""

    dataset: Dataset
    options: AnalysisOptions = field(default_factory=AnalysisOptions)
    settings: Settings = field(default_factory=get_settings)


def _run_pipeline(context: AnalysisContext) -> Result[AnalysisResult]:
    """Compute an AnalysisResult without consulting the cache."""
    started = time.perf_counter()
    dataset = context.dataset
    options = context.options

    structure_result = analyze_structure(dataset, settings=context.settings)
    if not structure_result.success or structure_result.value is None:
        return Result.fail(
            structure_result.error or "Structure analysis failed",
            kind=structure_result.error_kind or ErrorKind.INVALID_DATASET,
        )
    structure = structure_result.value

    outlier_method = options.outlier_method or IQRMethod(
        multiplier=context.settings.iqr_multiplier
    )
    insights = generate_insights(
        structure, dataset, outlier_method=outlier_method, settings=context.settings
    )

    correlations: list[CorrelationResult] = []
    for column_a, column_b in options.correlations:
        correlation = calculate_correlation(dataset, column_a, column_b, context.settings)
        if not correlation.success or correlation.value is None:
            return Result.fail(
                correlation.error or "Correlation failed",
                kind=correlation.error_kind or ErrorKind.INVALID_DATASET,
            )
        correlations.append(correlation.value)

    trends: list[TrendResult] = []
    for column in options.trend_columns:
        trend = analyze_trend(dataset, column, options.time_column, context.settings)
        if not trend.success or trend.value is None:
            return Result.fail(
                trend.error or "Trend analysis failed",
                kind=trend.error_kind or ErrorKind.INVALID_DATASET,
            )
        trends.append(trend.value)

    analysis_time_ms = (time.perf_counter() - started) * 1000
    return Result.ok(
        AnalysisResult(
            structure=structure,
            insights=tuple(insights),
            correlations=tuple(correlations),
            trends=tuple(trends),
            recommendations=tuple(generate_recommendations(insights)),
            analysis_time_ms=analysis_time_ms,
            options=options,
        ),
        warnings=structure_result.warnings,
    )


class AnalysisEngine:
    """Entry point for analyses, owning one result cache.

    Usage:
        engine = AnalysisEngine()
        result = engine.perform_analysis(rows, AnalysisOptions(trend_columns=["sales"]))
        if result.success:
            for insight in result.value.insights:
                print(insight.message)
    """

    def __init__(self, settings: Settings | None = None, cache: AnalysisCache | None = None):
        self.settings = settings or get_settings()
        self.cache = cache or AnalysisCache(
            max_size=self.settings.cache_max_entries,
            ttl_seconds=self.settings.cache_ttl_seconds,
        )

    def cache_key(self, dataset: Dataset, options: AnalysisOptions) -> str:
        """Cache key for a dataset and options under the current settings."""
        return compute_cache_key(
            dataset,
            options,
            prefix_rows=self.settings.cache_key_prefix_rows,
            full_content=self.settings.cache_key_full_content,
        )

    def perform_analysis(
        self,
        dataset: Dataset,
        options: AnalysisOptions | None = None,
    ) -> Result[AnalysisResult]:
        """Run the full pipeline, or return the cached result.

        An empty dataset yields an empty structure with a warning and is
        never cached.

        Args:
            dataset: Rows to analyze
            options: Call-scoped options (defaults: IQR outliers, no
                correlations or trends)

        Returns:
            Result containing the AnalysisResult
        """
        options = options or AnalysisOptions()

        if len(dataset) == 0:
            return Result.ok(
                AnalysisResult(structure=DataStructure(), options=options),
                warnings=[EMPTY_DATASET_WARNING],
            )

        failure = check_dataset(dataset)
        if failure is not None:
            return Result.fail(failure.error or "Invalid dataset", kind=ErrorKind.INVALID_DATASET)

        key = self.cache_key(dataset, options)
        with log_context(cache_key=key):
            cached = self.cache.get(key)
            if cached is not None:
                return Result.ok(cached)

            logger.info("analysis_started", rows=len(dataset))
            result = _run_pipeline(AnalysisContext(dataset, options, self.settings))
            if not result.success or result.value is None:
                logger.warning("analysis_failed", error=result.error)
                return result

            analysis = result.value
            self.cache.set(key, analysis)
            logger.info(
                "analysis_completed",
                rows=analysis.structure.row_count,
                columns=analysis.structure.column_count,
                insights=len(analysis.insights),
                duration_ms=round(analysis.analysis_time_ms, 2),
            )
            return result

    # On-demand operations outside the cached pipeline

    def analyze_structure(self, dataset: Dataset) -> Result[DataStructure]:
        """Profile every column under the engine settings."""
        return analyze_structure(dataset, settings=self.settings)

    def detect_outliers(
        self, dataset: Dataset, column_name: str, method: OutlierMethod | str = "iqr"
    ) -> Result[OutlierReport]:
        """Detect outliers in one column.

        Policy names resolve with the engine settings' multiplier and
        threshold.

        Raises:
            UnsupportedOutlierMethodError: If the method names no known policy
        """
        return detect_outliers(dataset, column_name, method, self.settings)

    def calculate_correlation(
        self, dataset: Dataset, column_a: str, column_b: str
    ) -> Result[CorrelationResult]:
        """Pearson correlation of two columns, bucketed by the engine settings."""
        return calculate_correlation(dataset, column_a, column_b, self.settings)

    def analyze_trend(
        self, dataset: Dataset, value_column: str, time_column: str | None = None
    ) -> Result[TrendResult]:
        """Linear trend of a column against row position."""
        return analyze_trend(dataset, value_column, time_column, self.settings)

    def generate_insights(self, structure: DataStructure, dataset: Dataset) -> list[Insight]:
        """Insights for a structure, with IQR outlier checks from the engine settings."""
        return generate_insights(structure, dataset, settings=self.settings)
