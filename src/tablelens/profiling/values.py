"""Scalar recognizers shared by profiling and analysis.

Coercion failures are never errors here: a value that does not parse
simply returns None and drops out of the caller's aggregate.
"""

from __future__ import annotations

import math
import numbers
import re
from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

# Plain decimal notation only: no underscores, hex, or inf/nan spellings.
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def is_missing(value: Any) -> bool:
    """Check for the missing marker: None, empty string, or float NaN."""
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, float):
        return math.isnan(value)
    return False


def parse_number(value: Any) -> float | None:
    """Parse a scalar as a finite number.

    Booleans are not numbers. Strings are trimmed first.

    Returns:
        The float value, or None when the value is not a finite number
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _DECIMAL_RE.match(text):
            return None
        number = float(text)
    else:
        return None
    return number if math.isfinite(number) else None


def numeric_values(values: Iterable[Any]) -> list[float]:
    """Keep the values that parse as finite numbers, in order."""
    parsed = (parse_number(value) for value in values)
    return [number for number in parsed if number is not None]


def canonical_string(value: Any) -> str:
    """Canonical text form used for distinct-value counting."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)
