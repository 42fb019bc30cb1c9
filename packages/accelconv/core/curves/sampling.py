"""Curve sampling infrastructure.

This module provides functions for sampling input speeds on an even grid
and for linear interpolation between curve points.
"""

from __future__ import annotations

import bisect

import numpy as np

from accelconv.core.curves.models import Point


def sample_uniform_grid(start: float, stop: float, n: int) -> list[float]:
    """Generate N evenly-spaced samples in [start, stop].

    Both endpoints are included exactly.

    Args:
        start: First sample.
        stop: Last sample, must be greater than start.
        n: Number of samples to generate. Must be >= 2.

    Returns:
        List of N evenly-spaced float values.

    Raises:
        ValueError: If n < 2 or stop <= start.

    Example:
        >>> sample_uniform_grid(0.0, 3.0, 4)
        [0.0, 1.0, 2.0, 3.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    if stop <= start:
        raise ValueError(f"stop must be greater than start, got [{start}, {stop}]")
    return np.linspace(start, stop, n).tolist()


def interpolate_linear(points: list[Point], x: float) -> float:
    """Linearly interpolate the value at input x.

    Given a list of points with increasing x values, find the value at the
    specified input using linear interpolation. Outside the covered range
    the nearest end value is returned.

    Args:
        points: List of Points with increasing x values.
        x: Input at which to interpolate.

    Returns:
        Interpolated value at x.

    Raises:
        ValueError: If points is empty.

    Example:
        >>> points = [Point(x=0.0, y=0.0), Point(x=2.0, y=1.0)]
        >>> interpolate_linear(points, 1.0)
        0.5
    """
    if not points:
        raise ValueError("points cannot be empty")

    if x <= points[0].x:
        return points[0].y
    if x >= points[-1].x:
        return points[-1].y

    # First index with points[i].x > x; the bracket is (i - 1, i)
    i = bisect.bisect_right([p.x for p in points], x)
    left, right = points[i - 1], points[i]
    alpha = (x - left.x) / (right.x - left.x)
    return left.y + alpha * (right.y - left.y)
