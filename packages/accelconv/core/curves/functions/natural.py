"""Natural acceleration: exponential approach towards ``limit``.

With ``L = limit - 1``, ``k = decay_rate / |L|`` and ``d = x - input_offset``:

    legacy: sens(x) = 1 + L * (1 - e^(-k d)) * d / x
    gain:   sens(x) = 1 + L * (d + (e^(-k d) - 1) / k) / x
"""

from __future__ import annotations

import math

from accelconv.core.curves.models import NaturalCurve


def natural(x: float, curve: NaturalCurve, gain: bool = False) -> float:
    """Evaluate the natural curve at input speed ``x``.

    Example:
        >>> natural(0.0, NaturalCurve())
        1.0
    """
    offset = curve.input_offset
    limit = curve.limit - 1
    if x <= offset or limit == 0:
        return 1.0

    accel = curve.decay_rate / abs(limit)
    offset_x = offset - x
    decay = math.exp(accel * offset_x)

    if not gain:
        return limit * (1 - (offset - decay * offset_x) / x) + 1

    if accel == 0:
        return 1.0
    constant = -limit / accel
    output = limit * (decay / accel - offset_x) + constant
    return output / x + 1
