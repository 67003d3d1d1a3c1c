"""Tests for settings."""

from tablelens.core.config import Settings, get_settings


def test_defaults():
    """Test default thresholds."""
    settings = Settings(_env_file=None)

    assert settings.type_inference_threshold == 0.8
    assert settings.iqr_multiplier == 1.5
    assert settings.zscore_threshold == 3.0
    assert settings.cache_max_entries == 100
    assert settings.cache_ttl_seconds == 600
    assert settings.cache_key_prefix_rows == 100
    assert settings.cache_key_full_content is False


def test_bundled_config_dir_exists():
    """Test the default config path points at the bundled patterns."""
    settings = Settings(_env_file=None)

    assert (settings.config_path / "patterns" / "default.yaml").is_file()


def test_environment_override(monkeypatch):
    """Test TABLELENS_ environment variables override defaults."""
    monkeypatch.setenv("TABLELENS_CACHE_MAX_ENTRIES", "7")
    monkeypatch.setenv("TABLELENS_TREND_SLOPE_THRESHOLD", "0.5")

    settings = Settings(_env_file=None)

    assert settings.cache_max_entries == 7
    assert settings.trend_slope_threshold == 0.5


def test_get_settings_is_cached():
    """Test get_settings returns one shared instance."""
    assert get_settings() is get_settings()
