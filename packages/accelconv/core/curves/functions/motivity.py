"""Motivity acceleration: a sigmoid in log-log space.

    sens(x) = exp(2 ln(m) * logistic(e^g * (ln x - ln mid)) - ln(m))

which runs from ``1 / m`` well below ``midpoint`` to ``m`` well above it.
"""

from __future__ import annotations

import math

from accelconv.core.curves.functions.integration import average_gain
from accelconv.core.curves.models import MotivityCurve
from accelconv.core.errors import CurveDomainError
from accelconv.core.utils.math import logistic


def _sigmoid(x: float, curve: MotivityCurve) -> float:
    if x <= 0:
        raise CurveDomainError("motivity curve is undefined at zero input")

    accel = math.exp(curve.growth_rate)
    log_motivity = 2 * math.log(curve.motivity)
    midpoint = math.log(curve.midpoint)
    return math.exp(log_motivity * logistic(accel * (math.log(x) - midpoint)) - log_motivity / 2)


def motivity(x: float, curve: MotivityCurve, gain: bool = False) -> float:
    """Evaluate the motivity curve at input speed ``x``.

    Raises:
        CurveDomainError: At zero input.

    Example:
        >>> round(motivity(5.0, MotivityCurve(midpoint=5.0)), 12)
        1.0
    """
    if not gain:
        return _sigmoid(x, curve)
    if x <= 0:
        raise CurveDomainError("motivity curve is undefined at zero input")
    return average_gain(lambda t: _sigmoid(t, curve), x)
