"""Follow-up recommendations derived from insights."""

from __future__ import annotations

from collections.abc import Sequence

from tablelens.analysis.models import Insight, Recommendation, RecommendationPriority
from tablelens.core.models.base import InsightType, Severity


def generate_recommendations(insights: Sequence[Insight]) -> list[Recommendation]:
    """Suggest actions for the kinds of insight present.

    At most one recommendation per insight type, in a fixed order: data
    quality, visualization, analysis, outliers.

    Args:
        insights: Insights from generate_insights

    Returns:
        List of recommendations (possibly empty)
    """
    kinds = {insight.type for insight in insights}
    recommendations: list[Recommendation] = []

    if any(
        insight.type == InsightType.DATA_QUALITY and insight.severity == Severity.WARNING
        for insight in insights
    ):
        recommendations.append(
            Recommendation(
                category="Data Quality",
                priority=RecommendationPriority.HIGH,
                action="Clean missing values",
                description=(
                    "Consider filling or removing missing data to improve analysis quality."
                ),
            )
        )

    if InsightType.VISUALIZATION_OPPORTUNITY in kinds:
        recommendations.append(
            Recommendation(
                category="Visualization",
                priority=RecommendationPriority.MEDIUM,
                action="Create charts",
                description="Generate visualizations for categorical data to identify patterns.",
            )
        )

    if InsightType.ANALYSIS_OPPORTUNITY in kinds:
        recommendations.append(
            Recommendation(
                category="Analysis",
                priority=RecommendationPriority.MEDIUM,
                action="Perform correlation analysis",
                description="Analyze relationships between numeric variables.",
            )
        )

    if InsightType.OUTLIERS in kinds:
        recommendations.append(
            Recommendation(
                category="Outliers",
                priority=RecommendationPriority.MEDIUM,
                action="Review outliers",
                description="Check flagged values for entry errors before aggregating.",
            )
        )

    return recommendations
