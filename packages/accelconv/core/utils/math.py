"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

Number = TypeVar("Number", int, float)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor, 0 gives a and 1 gives b

    Returns:
        Interpolated value
    """
    return a + (b - a) * t


def logistic(z: float) -> float:
    """Logistic function ``1 / (1 + e^-z)`` without overflow for large |z|.

    Example:
        >>> logistic(0.0)
        0.5
    """
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    ez = math.exp(z)
    return ez / (1.0 + ez)


def softplus(z: float) -> float:
    """``ln(1 + e^z)`` without overflow for large |z|.

    Example:
        >>> round(softplus(0.0), 6)
        0.693147
    """
    return max(z, 0.0) + math.log1p(math.exp(-abs(z)))
