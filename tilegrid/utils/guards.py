"""
Argument guards for grid geometry

Turn degenerate geometry into InvalidGridConfigError before it can become
inf/nan inside a layout.
"""

import math

from tilegrid.errors import InvalidGridConfigError


def require_positive(name: str, value: float) -> float:
    """Reject zero, negative and non-finite values"""
    if not _is_finite(value) or value <= 0:
        raise InvalidGridConfigError(f"{name} must be a positive finite number, got {value!r}")
    return value


def require_finite(name: str, value: float) -> float:
    if not _is_finite(value):
        raise InvalidGridConfigError(f"{name} must be a finite number, got {value!r}")
    return value


def _is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False
