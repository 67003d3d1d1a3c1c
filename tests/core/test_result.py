"""Tests for the Result type and error taxonomy."""

import pytest

from tablelens.core import AnalysisError, ErrorKind, Result, UnsupportedOutlierMethodError


class TestResult:
    """Tests for Result construction and access."""

    def test_ok_carries_value_and_warnings(self):
        """Test a successful result keeps its value and warnings."""
        result = Result.ok(42, warnings=["heads up"])

        assert result.success
        assert result.value == 42
        assert result.error is None
        assert result.warnings == ["heads up"]

    def test_fail_carries_kind(self):
        """Test a failed result records its error kind."""
        result = Result.fail("Column not found: x", kind=ErrorKind.COLUMN_NOT_FOUND)

        assert not result.success
        assert result.value is None
        assert result.error_kind == ErrorKind.COLUMN_NOT_FOUND

    def test_unwrap_raises_analysis_error(self):
        """Test unwrap on a failure raises with the same kind."""
        result = Result.fail("bad rows", kind=ErrorKind.INVALID_DATASET)

        with pytest.raises(AnalysisError) as exc_info:
            result.unwrap()

        assert exc_info.value.kind == ErrorKind.INVALID_DATASET
        assert "bad rows" in str(exc_info.value)

    def test_map_transforms_success_only(self):
        """Test map applies to successes and passes failures through."""
        assert Result.ok(2).map(lambda v: v * 10).value == 20

        failed = Result.fail("nope")
        assert failed.map(lambda v: v * 10) is failed


def test_unsupported_outlier_method_error_is_analysis_error():
    """Test the unsupported method error is part of the hierarchy."""
    error = UnsupportedOutlierMethodError("median")

    assert isinstance(error, AnalysisError)
    assert isinstance(error, ValueError)
    assert error.kind == ErrorKind.UNSUPPORTED_OUTLIER_METHOD
    assert error.method == "median"
