"""Lookup table acceleration.

The table is applied either as sensitivities (``gain=False``) or as output
speeds (``gain=True``), interpolating linearly between entries.
"""

from __future__ import annotations

import numpy as np

from accelconv.core.curves.models import LookupCurve
from accelconv.core.errors import CurveDomainError


def _velocity(x: float, xs: np.ndarray, ys: np.ndarray) -> float:
    """Output speed at ``x`` from a speed table.

    Below the first entry the speed falls linearly to the origin; past the
    last entry it continues with the slope of the last segment.
    """
    if x <= xs[0]:
        if xs[0] == 0:
            return float(ys[0])
        return float(ys[0] * x / xs[0])
    if x >= xs[-1]:
        if len(xs) == 1:
            slope = ys[-1] / xs[-1]
        else:
            slope = (ys[-1] - ys[-2]) / (xs[-1] - xs[-2])
        return float(ys[-1] + slope * (x - xs[-1]))
    return float(np.interp(x, xs, ys))


def lookup(x: float, curve: LookupCurve, gain: bool = False) -> float:
    """Evaluate the lookup table at input speed ``x``.

    Raises:
        CurveDomainError: If the table is empty, or a speed table is asked
            for the sensitivity at zero input.

    Example:
        >>> from accelconv.core.curves.models import Point
        >>> table = LookupCurve(points=[Point(x=1.0, y=1.0), Point(x=3.0, y=2.0)])
        >>> lookup(2.0, table)
        1.5
    """
    if not curve.points:
        raise CurveDomainError("lookup table is empty")

    xs = np.fromiter((p.x for p in curve.points), dtype=float)
    ys = np.fromiter((p.y for p in curve.points), dtype=float)

    if not gain:
        # np.interp holds the end values past either side of the table.
        return float(np.interp(x, xs, ys))

    if x <= 0:
        raise CurveDomainError("speed lookup table has no sensitivity at zero input")
    return _velocity(x, xs, ys) / x
