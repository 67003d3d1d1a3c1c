"""Tests for descriptive statistics."""

import pytest

from tablelens.profiling.statistics import (
    compute_descriptive_stats,
    compute_quartiles,
    percentile,
)


def test_percentile_interpolates():
    """Test linear interpolation between neighbours."""
    values = [10.0, 20.0, 30.0, 40.0]

    assert percentile(values, 0) == 10.0
    assert percentile(values, 100) == 40.0
    assert percentile(values, 50) == pytest.approx(25.0)
    assert percentile(values, 25) == pytest.approx(17.5)


def test_quartiles_of_known_values():
    """Test quartiles of [1, 2, 3, 4, 100]."""
    quartiles = compute_quartiles([1.0, 2.0, 3.0, 4.0, 100.0])

    assert quartiles.q1 == 2.0
    assert quartiles.q2 == 3.0
    assert quartiles.q3 == 4.0
    assert quartiles.iqr == 2.0


def test_descriptive_stats():
    """Test summary statistics with population variance."""
    stats = compute_descriptive_stats([2, 4, 4, 4, 5, 5, 7, 9])

    assert stats.count == 8
    assert stats.min == 2.0
    assert stats.max == 9.0
    assert stats.sum == 40.0
    assert stats.mean == 5.0
    assert stats.median == 4.5
    assert stats.variance == pytest.approx(4.0)
    assert stats.std_dev == pytest.approx(2.0)


def test_odd_count_median():
    """Test the median of an odd count is the middle element."""
    assert compute_descriptive_stats([5, 1, 3]).median == 3.0


def test_unparseable_values_are_excluded():
    """Test non-numeric values do not count."""
    stats = compute_descriptive_stats([1, "2", "abc", None, True])

    assert stats.count == 2
    assert stats.mean == 1.5


def test_no_numeric_values_gives_nulls():
    """Test an empty numeric subset yields None, not zero."""
    stats = compute_descriptive_stats(["a", "b"])

    assert stats.is_empty
    assert stats.count is None
    assert stats.sum is None
    assert stats.mean is None
    assert stats.min is None
    assert stats.quartiles.iqr is None


def test_single_value():
    """Test a single value has zero spread."""
    stats = compute_descriptive_stats([7])

    assert stats.variance == 0.0
    assert stats.quartiles.q1 == stats.quartiles.q3 == 7.0
