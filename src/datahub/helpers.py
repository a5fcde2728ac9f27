from __future__ import annotations

import math
from typing import Any, Optional


def is_missing(value: Any) -> bool:
    """True for None, NaN and blank strings as produced by pandas."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def to_int(value: Any) -> int:
    """Robustly convert spreadsheet cells to ints."""
    if is_missing(value):
        raise ValueError("Expected integer-like value, received a missing cell")
    if isinstance(value, bool):
        return int(value)
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Cannot convert {value!r} to int") from exc
    if not number.is_integer():
        raise ValueError(f"Cannot convert {value!r} to int without truncation")
    return int(number)


def to_float(value: Any) -> float:
    """Convert spreadsheet cells to finite floats."""
    if is_missing(value):
        raise ValueError("Expected numeric value, received a missing cell")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Cannot convert {value!r} to float") from exc
    if not math.isfinite(number):
        raise ValueError(f"Non-finite value {value!r}")
    return number


def to_optional_str(value: Any) -> Optional[str]:
    if is_missing(value):
        return None
    return str(value).strip()


def to_optional_int(value: Any) -> Optional[int]:
    if is_missing(value):
        return None
    return to_int(value)


def to_flag(value: Any, default: bool = True) -> bool:
    """Read inclusion flags written as booleans, 0/1 or yes/no."""
    if is_missing(value):
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "1.0", "true", "yes", "y", "include", "included"}:
        return True
    if text in {"0", "0.0", "false", "no", "n", "exclude", "excluded"}:
        return False
    raise ValueError(f"Cannot interpret {value!r} as an inclusion flag")
