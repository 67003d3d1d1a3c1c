"""On-demand analyses and derived findings.

- Outlier detection (IQR or z-score policy)
- Pearson correlation between two columns
- Ordinal trend fitting
- Insights and recommendations from a structural profile
- Data quality scoring and rule-based cleaning
"""

from tablelens.analysis.cleaning import clean_dataset
from tablelens.analysis.correlation import calculate_correlation
from tablelens.analysis.insights import generate_insights
from tablelens.analysis.models import (
    CleaningReport,
    CleaningRule,
    CorrelationResult,
    DataQualityReport,
    Insight,
    IQRBounds,
    IQRMethod,
    MissingValueStrategy,
    OutlierMethod,
    OutlierReport,
    OutlierStrategy,
    Recommendation,
    RecommendationPriority,
    TrendResult,
    ZScoreBounds,
    ZScoreMethod,
)
from tablelens.analysis.outliers import detect_outliers, parse_outlier_method
from tablelens.analysis.quality import assess_data_quality
from tablelens.analysis.recommendations import generate_recommendations
from tablelens.analysis.trend import analyze_trend

__all__ = [
    # Operations
    "detect_outliers",
    "parse_outlier_method",
    "calculate_correlation",
    "analyze_trend",
    "generate_insights",
    "generate_recommendations",
    "assess_data_quality",
    "clean_dataset",
    # Models
    "CleaningReport",
    "CleaningRule",
    "CorrelationResult",
    "DataQualityReport",
    "Insight",
    "IQRBounds",
    "IQRMethod",
    "MissingValueStrategy",
    "OutlierMethod",
    "OutlierReport",
    "OutlierStrategy",
    "Recommendation",
    "RecommendationPriority",
    "TrendResult",
    "ZScoreBounds",
    "ZScoreMethod",
]
