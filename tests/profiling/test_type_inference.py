"""Tests for type inference.

Buckets are tested in a fixed precedence (date, numeric, boolean) and the
first one whose share exceeds 0.8 decides the type.
"""

from datetime import date, datetime

from tablelens.core.models.base import InferredType
from tablelens.profiling.type_inference import (
    ValueBucket,
    classify_value,
    infer_type,
    infer_type_detailed,
)


def test_empty_values():
    """Test no values yields the empty type."""
    assert infer_type([]) == InferredType.EMPTY


def test_numeric_column():
    """Test numbers and numeric strings make a numeric column."""
    assert infer_type([1, 2.5, "3", " 4 ", 5]) == InferredType.NUMERIC


def test_date_column():
    """Test date strings and date objects make a date column."""
    values = ["2024-01-15", "01/16/2024", date(2024, 1, 17), datetime(2024, 1, 18, 9, 30)]
    assert infer_type(values) == InferredType.DATE


def test_boolean_column():
    """Test boolean tokens and bools make a boolean column."""
    assert infer_type(["yes", "No", "TRUE", False, "false"]) == InferredType.BOOLEAN


def test_categorical_column():
    """Test free text falls back to categorical."""
    assert infer_type(["red", "green", "blue"]) == InferredType.CATEGORICAL


def test_threshold_is_strict():
    """Test a share of exactly 0.8 does not decide the type."""
    values = [1, 2, 3, 4, "x"]  # 80% numeric

    assert infer_type(values) == InferredType.CATEGORICAL
    assert infer_type([1, 2, 3, 4, 5, 6, 7, 8, 9, "x"]) == InferredType.NUMERIC


def test_numeric_takes_precedence_over_boolean_tokens():
    """Test "1" and "0" land in the numeric bucket before the boolean one."""
    assert classify_value("1") == ValueBucket.NUMERIC
    assert infer_type(["1", "0", "1", "0", "1"]) == InferredType.NUMERIC


def test_date_takes_precedence_over_numeric():
    """Test the date bucket is read first when reading ratios.

    Nine dates and one number: the date share (0.9) clears the threshold
    and is checked before the numeric share.
    """
    values = [f"2024-01-{day:02d}" for day in range(1, 10)] + [7]

    result = infer_type_detailed(values)

    assert result.inferred_type == InferredType.DATE
    assert result.ratios[ValueBucket.DATE] == 0.9
    assert result.ratios[ValueBucket.NUMERIC] == 0.1


def test_mixed_column_below_threshold_is_categorical():
    """Test no bucket above threshold yields categorical."""
    values = ["2024-01-01", "2024-01-02", 3, 4, "yes", "no", "x"]

    assert infer_type(values) == InferredType.CATEGORICAL


def test_custom_threshold():
    """Test a lower threshold changes the decision."""
    assert infer_type([1, 2, 3, "x"], threshold=0.5) == InferredType.NUMERIC
