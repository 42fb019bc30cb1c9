"""Jump acceleration: a step from 1 to ``output`` at speed ``input``.

With ``smooth * input >= 1`` the step becomes a logistic with rate
``2*pi / (smooth * input)``. The gain form uses the step (or logistic) as the
slope of the output speed instead of as the sensitivity.
"""

from __future__ import annotations

import math

from accelconv.core.curves.models import JumpCurve
from accelconv.core.utils.math import logistic, softplus

SMOOTH_SCALE = 2 * math.pi


def smooth_rate(curve: JumpCurve) -> float:
    """Logistic rate for the curve, 0 when the step is sharp."""
    rate_inverse = curve.smooth * curve.input
    if rate_inverse < 1:
        return 0.0
    return SMOOTH_SCALE / rate_inverse


def _smooth_antideriv(x: float, step_x: float, step_y: float, rate: float) -> float:
    return step_y * (x + softplus(-rate * (x - step_x)) / rate)


def jump(x: float, curve: JumpCurve, gain: bool = False) -> float:
    """Evaluate the jump curve at input speed ``x``.

    Example:
        >>> jump(20.0, JumpCurve(smooth=0.0, input=15.0, output=1.5))
        1.5
    """
    step_x = curve.input
    step_y = curve.output - 1
    rate = smooth_rate(curve)

    if not gain:
        if rate:
            return step_y * logistic(rate * (x - step_x)) + 1
        if x < step_x:
            return 1.0
        return step_y + 1

    if x <= 0:
        return 1.0
    if rate:
        constant = -_smooth_antideriv(0.0, step_x, step_y, rate)
        return 1 + (_smooth_antideriv(x, step_x, step_y, rate) + constant) / x
    if x < step_x:
        return 1.0
    return 1 + step_y * (x - step_x) / x
