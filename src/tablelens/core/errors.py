"""Error taxonomy for the analysis engine."""

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of analysis failures carried by Result and AnalysisError."""

    EMPTY_DATASET = "empty_dataset"
    INVALID_DATASET = "invalid_dataset"
    COLUMN_NOT_FOUND = "column_not_found"
    UNSUPPORTED_OUTLIER_METHOD = "unsupported_outlier_method"


class AnalysisError(ValueError):
    """Raised when an analysis cannot proceed."""

    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message)
        self.kind = kind


class UnsupportedOutlierMethodError(AnalysisError):
    """Raised for an outlier method identifier that names no known policy."""

    def __init__(self, method: object):
        super().__init__(
            f"Unsupported outlier method: {method!r}",
            kind=ErrorKind.UNSUPPORTED_OUTLIER_METHOD,
        )
        self.method = method
