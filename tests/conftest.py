"""Shared pytest fixtures for all tests."""

import pytest

from tablelens.core.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture
def small_dataset() -> list[dict]:
    """Three rows with one missing numeric cell."""
    return [
        {"a": 1, "b": "x"},
        {"a": 2, "b": "y"},
        {"a": None, "b": "z"},
    ]


@pytest.fixture
def sales_dataset() -> list[dict]:
    """Ten rows with two numeric columns, a category and a date."""
    return [
        {
            "date": f"2024-01-{day:02d}",
            "region": region,
            "units": day,
            "revenue": day * 10.0 + 5,
        }
        for day, region in zip(
            range(1, 11),
            ["north", "south", "east", "west", "north", "south", "east", "west", "north", "east"],
            strict=True,
        )
    ]


@pytest.fixture
def outlier_dataset() -> list[dict]:
    """Numeric column with a single extreme value."""
    return [{"value": v, "label": f"r{i}"} for i, v in enumerate([1, 2, 3, 4, 100])]
