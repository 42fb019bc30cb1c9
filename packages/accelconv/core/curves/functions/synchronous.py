"""Synchronous acceleration.

Sensitivity is symmetric in log-log space around ``sync_speed``, where it is
exactly 1, and bounded by ``[1 / motivity, motivity]``. ``gamma`` sets how
quickly it moves between the bounds and ``smooth`` the sharpness of the
activation; ``smooth = 0`` selects a plain linear clamp.
"""

from __future__ import annotations

import math

from accelconv.core.curves.functions.integration import average_gain
from accelconv.core.curves.models import SynchronousCurve
from accelconv.core.errors import CurveDomainError

# At or above this sharpness the activation is a linear clamp.
LINEAR_CLAMP_SHARPNESS = 16.0


def _activation(x: float, curve: SynchronousCurve) -> float:
    if x <= 0:
        raise CurveDomainError("synchronous curve is undefined at zero input")

    log_motivity = math.log(curve.motivity)
    gamma_const = curve.gamma / log_motivity
    log_syncspeed = math.log(curve.sync_speed)
    sharpness = LINEAR_CLAMP_SHARPNESS if curve.smooth == 0 else 0.5 / curve.smooth

    if sharpness >= LINEAR_CLAMP_SHARPNESS:
        log_space = gamma_const * (math.log(x) - log_syncspeed)
        if log_space < -1:
            return 1 / curve.motivity
        if log_space > 1:
            return curve.motivity
        return math.exp(log_space * log_motivity)

    if x == curve.sync_speed:
        return 1.0

    log_diff = math.log(x) - log_syncspeed
    if log_diff > 0:
        log_space = gamma_const * log_diff
        exponent = math.pow(math.tanh(math.pow(log_space, sharpness)), 1 / sharpness)
    else:
        log_space = -gamma_const * log_diff
        exponent = -math.pow(math.tanh(math.pow(log_space, sharpness)), 1 / sharpness)
    return math.exp(exponent * log_motivity)


def synchronous(x: float, curve: SynchronousCurve, gain: bool = False) -> float:
    """Evaluate the synchronous curve at input speed ``x``.

    Raises:
        CurveDomainError: At zero input, where the log-space model is undefined.

    Example:
        >>> synchronous(5.0, SynchronousCurve(sync_speed=5.0))
        1.0
    """
    if not gain:
        return _activation(x, curve)
    if x <= 0:
        raise CurveDomainError("synchronous curve is undefined at zero input")
    return average_gain(lambda t: _activation(t, curve), x)
