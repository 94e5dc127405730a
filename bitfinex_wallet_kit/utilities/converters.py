"""
Lenient field converters for positional Bitfinex payloads.

Every converter is total: it accepts any decoded JSON value and returns the
zero/empty value instead of raising when the slot is null, missing or of the
wrong type. Record shape is checked elsewhere; these only read single slots.
"""

import math
from collections.abc import Sequence
from typing import Any


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a numeric field on the wire
    return isinstance(value, int | float) and not isinstance(value, bool)


def float_or_zero(value: Any) -> float:
    """Return value as float, or 0.0 if it is not a finite number."""
    if not _is_number(value):
        return 0.0
    try:
        result = float(value)
    except OverflowError:
        # ints beyond float range
        return 0.0
    return result if math.isfinite(result) else 0.0


def int_or_zero(value: Any) -> int:
    """Return value as int, or 0 if it is not a finite number."""
    if not _is_number(value):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return int(value)


def str_or_empty(value: Any) -> str:
    """Return value if it is a string, otherwise an empty string."""
    return value if isinstance(value, str) else ""


def dict_or_none(value: Any) -> dict[str, Any] | None:
    """Return a copy of value if it is a JSON object, otherwise None."""
    return dict(value) if isinstance(value, dict) else None


def field_at(raw: Sequence[Any], index: int) -> Any:
    """Return raw[index], or None when the slot does not exist."""
    if 0 <= index < len(raw):
        return raw[index]
    return None
