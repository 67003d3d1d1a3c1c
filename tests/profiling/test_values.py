"""Tests for scalar recognizers."""

import math
from datetime import date

import pytest

from tablelens.profiling.values import canonical_string, is_missing, numeric_values, parse_number


@pytest.mark.parametrize("value", [None, "", math.nan])
def test_missing_markers(value):
    """Test None, empty string and NaN are missing."""
    assert is_missing(value)


@pytest.mark.parametrize("value", [0, " ", "0", False, "n/a"])
def test_present_values(value):
    """Test falsy but real values are not missing."""
    assert not is_missing(value)


class TestParseNumber:
    """Tests for numeric parsing."""

    def test_numbers_and_numeric_strings(self):
        """Test ints, floats and trimmed decimal strings parse."""
        assert parse_number(3) == 3.0
        assert parse_number(2.5) == 2.5
        assert parse_number(" 42 ") == 42.0
        assert parse_number("-1.5e3") == -1500.0
        assert parse_number(".5") == 0.5

    def test_booleans_are_not_numbers(self):
        """Test True and False do not parse as 1 and 0."""
        assert parse_number(True) is None
        assert parse_number(False) is None

    @pytest.mark.parametrize("value", ["abc", "1_000", "0x10", "inf", "nan", "1,5", math.inf])
    def test_rejected_values(self, value):
        """Test non-decimal and non-finite values are rejected."""
        assert parse_number(value) is None


def test_numeric_values_drops_unparseable():
    """Test unparseable values drop out silently."""
    assert numeric_values([1, "2", "x", None, 3.5]) == [1.0, 2.0, 3.5]


def test_canonical_string():
    """Test canonical text forms used for uniqueness."""
    assert canonical_string(1) == canonical_string(1.0) == "1"
    assert canonical_string(True) == "true"
    assert canonical_string(2.5) == "2.5"
    assert canonical_string(date(2024, 1, 15)) == "2024-01-15"
    assert canonical_string("x") == "x"
