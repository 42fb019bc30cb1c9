"""Shared utilities for accelconv."""

from accelconv.core.utils.math import clamp, lerp, logistic, softplus

__all__ = [
    "clamp",
    "lerp",
    "logistic",
    "softplus",
]
