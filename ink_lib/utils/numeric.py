"""Scalar sanitization helpers.

Every public scoring function passes its result through ``sanitize`` so
that NaN and infinite values never leave the package.
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)


def is_finite(value: float) -> bool:
    """True for real, finite numbers."""
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def sanitize(value: float, default: float = 0.0,
             lo: float | None = None, hi: float | None = None) -> float:
    """Replace invalid values with a default and clamp to a range.

    Args:
        value: Value to check.
        default: Returned when value is NaN or infinite.
        lo: Optional lower bound.
        hi: Optional upper bound.

    Returns:
        A finite float within [lo, hi] when bounds are given.

    Example:
        >>> sanitize(float('nan'), default=50.0)
        50.0
        >>> sanitize(1.7, lo=0.0, hi=1.0)
        1.0
    """
    if not is_finite(value):
        logger.debug("Replacing non-finite value %r with %r", value, default)
        return default
    value = float(value)
    if lo is not None and value < lo:
        value = lo
    if hi is not None and value > hi:
        value = hi
    return value


def clamp01(value: float, default: float = 0.0) -> float:
    """Sanitize to the unit interval."""
    return sanitize(value, default=default, lo=0.0, hi=1.0)
