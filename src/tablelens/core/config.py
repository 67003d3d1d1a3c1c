"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_config_dir() -> Path:
    """Find the bundled config directory next to the package modules.

    Falls back to relative Path("config") if not found.
    """
    # Start from this file: src/tablelens/core/config.py
    package_dir = Path(__file__).resolve().parent.parent
    candidate = package_dir / "config"
    if candidate.is_dir():
        return candidate

    return Path("config")


class Settings(BaseSettings):
    """Application settings.

    All settings can be overridden via environment variables.
    Prefix: TABLELENS_
    """

    model_config = SettingsConfigDict(
        env_prefix="TABLELENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Configuration paths
    config_path: Path = Field(
        default_factory=_find_config_dir,
        description="Path to configuration files (value patterns)",
    )

    # Type inference
    type_inference_threshold: float = Field(
        default=0.8,
        description="Share of non-missing values a recognizer must exceed to decide the type",
    )
    sample_values_count: int = Field(
        default=5,
        description="Number of leading raw values kept on each column profile",
    )

    # Outliers
    iqr_multiplier: float = Field(
        default=1.5,
        description="Fence distance from the quartiles, in IQRs",
    )
    zscore_threshold: float = Field(
        default=3.0,
        description="Standard deviations beyond which a value is an outlier",
    )

    # Correlation buckets
    correlation_moderate_threshold: float = Field(default=0.3)
    correlation_strong_threshold: float = Field(default=0.7)

    # Trend
    trend_slope_threshold: float = Field(
        default=0.1,
        description="Absolute slope (value units per row) above which a trend is labelled",
    )

    # Insights
    data_quality_threshold: float = Field(
        default=80.0,
        description="Non-missing cell percentage below which a data quality warning is raised",
    )

    # Cache
    cache_max_entries: int = Field(default=100)
    cache_ttl_seconds: float = Field(default=600.0)
    cache_key_prefix_rows: int = Field(
        default=100,
        description="Rows fingerprinted for the cache key; later rows do not affect it",
    )
    cache_key_full_content: bool = Field(
        default=False,
        description="Fingerprint every row instead of the bounded prefix",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
