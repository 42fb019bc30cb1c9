"""Ramer-Douglas-Peucker curve simplification.

This module provides functions for reducing a sampled curve to the points
that carry its shape. Distances are measured vertically, so the tolerance
bounds the error of linear interpolation between the retained points at
every original sample.
"""

from __future__ import annotations

import logging

from accelconv.core.curves.models import Point
from accelconv.core.curves.sampling import interpolate_linear

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-3


def vertical_distance(point: Point, line_start: Point, line_end: Point) -> float:
    """Distance in y between a point and the chord through two others.

    Args:
        point: The point to measure from.
        line_start: Start of the chord.
        line_end: End of the chord.

    Returns:
        ``|point.y - chord(point.x)|``.

    Example:
        >>> a = Point(x=0.0, y=0.0)
        >>> b = Point(x=2.0, y=2.0)
        >>> vertical_distance(Point(x=1.0, y=3.0), a, b)
        2.0
    """
    dx = line_end.x - line_start.x
    # Degenerate case: zero-width chord
    if dx == 0:
        return abs(point.y - line_start.y)
    alpha = (point.x - line_start.x) / dx
    chord_y = line_start.y + alpha * (line_end.y - line_start.y)
    return abs(point.y - chord_y)


def simplify_rdp(points: list[Point], epsilon: float = DEFAULT_TOLERANCE) -> list[Point]:
    """Simplify a curve using the Ramer-Douglas-Peucker algorithm.

    Repeatedly splits the curve at the point farthest from the chord between
    the current endpoints until every dropped point lies within ``epsilon``
    of its chord.

    Args:
        points: Points with increasing x.
        epsilon: Maximum vertical deviation tolerance (>= 0).

    Returns:
        Simplified list of points with endpoints preserved.

    Raises:
        ValueError: If epsilon is negative.

    Example:
        >>> line = [Point(x=float(i), y=2.0 * i) for i in range(5)]
        >>> len(simplify_rdp(line, epsilon=0.01))  # Only endpoints remain
        2
    """
    if epsilon < 0:
        raise ValueError("epsilon must be >= 0")
    if len(points) <= 2:
        return list(points)

    keep = {0, len(points) - 1}
    # Pending (start, end) spans
    stack = [(0, len(points) - 1)]

    while stack:
        start_idx, end_idx = stack.pop()
        if end_idx - start_idx <= 1:
            continue

        max_dist = 0.0
        max_idx = start_idx
        for i in range(start_idx + 1, end_idx):
            dist = vertical_distance(points[i], points[start_idx], points[end_idx])
            if dist > max_dist:
                max_dist = dist
                max_idx = i

        if max_dist > epsilon:
            keep.add(max_idx)
            stack.append((max_idx, end_idx))
            stack.append((start_idx, max_idx))

    return [points[i] for i in sorted(keep)]


def max_deviation(original: list[Point], simplified: list[Point]) -> float:
    """Largest vertical error of ``simplified`` at the samples of ``original``.

    Example:
        >>> pts = [Point(x=0.0, y=0.0), Point(x=1.0, y=1.0), Point(x=2.0, y=0.0)]
        >>> max_deviation(pts, [pts[0], pts[2]])
        1.0
    """
    if not original:
        return 0.0
    return max(abs(p.y - interpolate_linear(simplified, p.x)) for p in original)


def optimize_points(points: list[Point], tolerance: float = DEFAULT_TOLERANCE) -> list[Point]:
    """Reduce a sampled curve while keeping it within ``tolerance``.

    The first and last points are always retained and the result is never
    longer than the input.

    Args:
        points: Sampled points with increasing x.
        tolerance: Maximum vertical deviation allowed.

    Returns:
        The retained points.
    """
    optimized = simplify_rdp(points, epsilon=tolerance)
    logger.debug(
        "Optimized curve from %d to %d points (tolerance=%g)",
        len(points),
        len(optimized),
        tolerance,
    )
    return optimized
