"""Value pattern configuration loader."""

import re
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from pathlib import Path

import yaml

from tablelens.core.config import Settings, get_settings


@dataclass
class DatePattern:
    """A date shape plus the calendar format that must parse it."""

    name: str
    pattern: str
    format: str
    examples: list[str] | None = None

    def __post_init__(self):
        """Compile regex pattern."""
        self._regex = re.compile(self.pattern)

    def matches(self, value: str) -> bool:
        """Check if value has this pattern's shape.

        Args:
            value: Trimmed string value

        Returns:
            True if pattern matches
        """
        if not value:
            return False
        return self._regex.match(value) is not None

    def parses(self, value: str) -> bool:
        """Check that the value names a real calendar date (no 2024-02-30)."""
        try:
            datetime.strptime(value, self.format)
        except ValueError:
            return False
        return True


class PatternConfig:
    """Value recognizer configuration."""

    def __init__(self, config_dict: dict):
        self._config = config_dict
        self._date_patterns: list[DatePattern] = []
        self._boolean_tokens: frozenset[str] = frozenset()
        self._load_patterns()

    def _load_patterns(self):
        """Load all recognizers from configuration."""
        for pattern_dict in self._config.get("date_patterns", []):
            try:
                pattern = DatePattern(
                    name=pattern_dict["name"],
                    pattern=pattern_dict["pattern"],
                    format=pattern_dict["format"],
                    examples=pattern_dict.get("examples"),
                )
            except KeyError:
                # Skip invalid patterns
                continue
            self._date_patterns.append(pattern)

        tokens = self._config.get("boolean_tokens", [])
        self._boolean_tokens = frozenset(str(token).lower() for token in tokens)

    def get_date_patterns(self) -> list[DatePattern]:
        """Get all date patterns.

        Returns:
            List of DatePattern objects
        """
        return self._date_patterns

    @property
    def boolean_tokens(self) -> frozenset[str]:
        """Lower-cased boolean tokens."""
        return self._boolean_tokens

    def match_date(self, value: str) -> DatePattern | None:
        """Find the first date pattern that both matches and parses a value.

        Args:
            value: Trimmed string value

        Returns:
            Matching DatePattern or None
        """
        for pattern in self._date_patterns:
            if pattern.matches(value) and pattern.parses(value):
                return pattern
        return None

    def is_boolean_token(self, value: str) -> bool:
        """Check a trimmed string against the boolean token set."""
        return value.lower() in self._boolean_tokens


def load_pattern_config(config_path: Path | None = None) -> PatternConfig:
    """Load pattern configuration from YAML.

    Args:
        config_path: Optional path to config file. If None, uses default from settings.

    Returns:
        PatternConfig instance
    """
    if config_path is None:
        config_path = get_settings().config_path / "patterns" / "default.yaml"

    with open(config_path) as f:
        config_dict = yaml.safe_load(f)

    return PatternConfig(config_dict or {})


@lru_cache
def _cached_pattern_config(config_dir: Path) -> PatternConfig:
    return load_pattern_config(config_dir / "patterns" / "default.yaml")


def pattern_config_for(settings: Settings | None = None) -> PatternConfig:
    """Pattern configuration under the given settings' config directory.

    Each directory is loaded once per process.
    """
    settings = settings or get_settings()
    return _cached_pattern_config(Path(settings.config_path))


def default_pattern_config() -> PatternConfig:
    """Pattern configuration under the process settings."""
    return pattern_config_for(get_settings())
