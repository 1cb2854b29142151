"""
Numeric helpers for user-supplied input.

Every value that reaches the engine from a form field, a CSV cell or a stored
snapshot goes through "parse or default": malformed numbers never raise.
"""

import math
from typing import Any, Optional


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def parse_float(raw: Any, default: Optional[float] = 0.0) -> Optional[float]:
    """Parse a float, returning default for blanks, junk, NaN and infinities."""
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = float(str(raw).strip())
    except (TypeError, ValueError):
        return default
    if math.isnan(value) or math.isinf(value):
        return default
    return value


def parse_int(raw: Any, default: Optional[int] = 0) -> Optional[int]:
    """Parse an integer, accepting float text like "24.0"."""
    value = parse_float(raw, None)
    if value is None:
        return default
    return int(value)


def parse_nonzero_float(raw: Any, default: float = 0.0) -> float:
    """Parse a float where zero also counts as missing."""
    value = parse_float(raw, None)
    return value if value else default
