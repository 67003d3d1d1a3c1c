"""Tests for value pattern configuration."""

from tablelens.core.config import Settings
from tablelens.profiling.patterns import PatternConfig, load_pattern_config, pattern_config_for


class TestPatternConfig:
    """Tests for pattern configuration loading."""

    def test_load_default_config(self):
        """Test loading the bundled pattern configuration."""
        config = load_pattern_config()

        names = [pattern.name for pattern in config.get_date_patterns()]
        assert names == ["iso_date", "us_date_slash", "us_date_dash", "ymd_slash"]
        assert config.boolean_tokens == {"true", "false", "yes", "no", "1", "0"}

    def test_match_iso_date(self):
        """Test matching ISO date pattern."""
        config = load_pattern_config()

        match = config.match_date("2024-01-15")
        assert match is not None
        assert match.name == "iso_date"

    def test_match_us_dates(self):
        """Test matching US slash and dash dates."""
        config = load_pattern_config()

        assert config.match_date("01/15/2024").name == "us_date_slash"
        assert config.match_date("01-15-2024").name == "us_date_dash"
        assert config.match_date("2024/01/15").name == "ymd_slash"

    def test_shape_without_calendar_date_is_rejected(self):
        """Test a value of the right shape that is no real date."""
        config = load_pattern_config()

        assert config.match_date("2024-02-30") is None
        assert config.match_date("13/45/2024") is None

    def test_boolean_tokens_case_insensitive(self):
        """Test boolean tokens ignore case."""
        config = load_pattern_config()

        assert config.is_boolean_token("YES")
        assert config.is_boolean_token("False")
        assert not config.is_boolean_token("maybe")


def test_custom_config_file(tmp_path):
    """Test loading recognizers from a custom YAML file."""
    path = tmp_path / "patterns.yaml"
    path.write_text(
        "date_patterns:\n"
        "  - name: dotted\n"
        "    pattern: '^\\d{2}\\.\\d{2}\\.\\d{4}$'\n"
        "    format: '%d.%m.%Y'\n"
        "boolean_tokens: ['ja', 'nein']\n"
    )

    config = load_pattern_config(path)

    assert config.match_date("15.01.2024").name == "dotted"
    assert config.match_date("2024-01-15") is None
    assert config.is_boolean_token("JA")


def test_invalid_pattern_entries_are_skipped():
    """Test entries missing required keys are ignored."""
    config = PatternConfig({"date_patterns": [{"name": "broken"}]})

    assert config.get_date_patterns() == []


def test_pattern_config_for_follows_settings(tmp_path):
    """Test each settings config directory gets its own recognizers, loaded once."""
    (tmp_path / "patterns").mkdir()
    (tmp_path / "patterns" / "default.yaml").write_text("boolean_tokens: ['oui']\n")
    custom = Settings(_env_file=None, config_path=tmp_path)

    config = pattern_config_for(custom)

    assert config.is_boolean_token("OUI")
    assert not config.is_boolean_token("yes")
    assert pattern_config_for(custom) is config
    assert pattern_config_for(Settings(_env_file=None)).is_boolean_token("yes")
