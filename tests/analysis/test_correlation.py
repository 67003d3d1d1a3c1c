"""Tests for Pearson correlation."""

import pytest

from tablelens.analysis import calculate_correlation
from tablelens.analysis.correlation import paired_numeric_values, pearson_coefficient
from tablelens.core.errors import ErrorKind
from tablelens.core.models.base import CorrelationDirection, CorrelationStrength


def test_self_correlation_is_one(sales_dataset):
    """Test a column correlates perfectly with itself."""
    result = calculate_correlation(sales_dataset, "units", "units")

    assert result.success
    assert result.value.coefficient == pytest.approx(1.0)
    assert result.value.strength == CorrelationStrength.STRONG
    assert result.value.direction == CorrelationDirection.POSITIVE


def test_perfect_negative_correlation():
    """Test an inverse linear relation."""
    rows = [{"x": i, "y": 100 - 3 * i} for i in range(10)]

    correlation = calculate_correlation(rows, "x", "y").value

    assert correlation.coefficient == pytest.approx(-1.0)
    assert correlation.direction == CorrelationDirection.NEGATIVE
    assert correlation.sample_size == 10


def test_strength_buckets():
    """Test weak and moderate buckets."""
    weak_rows = [{"x": x, "y": y} for x, y in zip([1, 2, 3, 4, 5], [2, 1, 2, 1, 2.2], strict=True)]
    moderate_rows = [
        {"x": x, "y": y} for x, y in zip([1, 2, 3, 4, 5], [1, 3, 1, 4, 2], strict=True)
    ]

    weak = calculate_correlation(weak_rows, "x", "y").value
    moderate = calculate_correlation(moderate_rows, "x", "y").value

    assert abs(weak.coefficient) < 0.3
    assert weak.strength == CorrelationStrength.WEAK
    assert 0.3 <= abs(moderate.coefficient) < 0.7
    assert moderate.strength == CorrelationStrength.MODERATE


def test_rows_with_unparseable_side_are_dropped_from_both():
    """Test pairing stays aligned when one side fails to parse."""
    xs, ys = paired_numeric_values([1, "x", 3, 4], [2, 4, None, 8])

    assert xs == [1.0, 4.0]
    assert ys == [2.0, 8.0]


def test_constant_column_is_degenerate():
    """Test a zero denominator resolves to the none sentinel."""
    rows = [{"x": i, "y": 5} for i in range(5)]

    correlation = calculate_correlation(rows, "x", "y").value

    assert correlation.coefficient == 0.0
    assert correlation.strength == CorrelationStrength.NONE
    assert correlation.direction == CorrelationDirection.NONE


def test_no_usable_pairs_is_degenerate():
    """Test columns with no overlapping numbers."""
    rows = [{"x": 1, "y": "a"}, {"x": "b", "y": 2}]

    correlation = calculate_correlation(rows, "x", "y").value

    assert correlation.strength == CorrelationStrength.NONE
    assert correlation.sample_size == 0


def test_mismatched_lengths_have_no_coefficient():
    """Test mismatched sequences are rejected by the coefficient."""
    assert pearson_coefficient([1.0, 2.0], [1.0]) is None
    assert pearson_coefficient([], []) is None


def test_missing_column_fails(sales_dataset):
    """Test an unknown column is a failed result."""
    result = calculate_correlation(sales_dataset, "units", "profit")

    assert not result.success
    assert result.error_kind == ErrorKind.COLUMN_NOT_FOUND


def test_empty_dataset():
    """Test no rows yields the none sentinel with a warning."""
    result = calculate_correlation([], "a", "b")

    assert result.success
    assert result.value.strength == CorrelationStrength.NONE
    assert result.warnings


@pytest.mark.parametrize("offset", [1e8, 1e9, 1.7e12])
def test_self_correlation_with_large_offset(offset):
    """Test epoch-sized values with small spread still correlate perfectly."""
    rows = [{"x": offset + i} for i in range(3)]

    correlation = calculate_correlation(rows, "x", "x").value

    assert correlation.coefficient == pytest.approx(1.0)
    assert correlation.strength == CorrelationStrength.STRONG
    assert correlation.direction == CorrelationDirection.POSITIVE
    assert correlation.sample_size == 3


def test_linear_relation_with_large_offset():
    """Test a shifted linear relation keeps r = 1."""
    rows = [{"x": 1.7e12 + i, "y": 2 * i + 5} for i in range(10)]

    correlation = calculate_correlation(rows, "x", "y").value

    assert correlation.coefficient == pytest.approx(1.0)


def test_constant_column_with_large_offset_is_degenerate():
    """Test a flat epoch-sized column still resolves to the none sentinel."""
    rows = [{"x": i, "y": 1.7e12} for i in range(5)]

    correlation = calculate_correlation(rows, "x", "y").value

    assert correlation.coefficient == 0.0
    assert correlation.strength == CorrelationStrength.NONE
