"""Power acceleration.

Past the offset point the sensitivity is ``(s x)^n + C / x``, where ``C``
keeps the output speed continuous with the ``output_offset`` floor below it.
The gain of that output speed is ``(n + 1)(s x)^n``.

The scale ``s`` comes from the cap's ``acceleration`` slot for input and
output caps. An input/output cap instead derives it from the cap point (as a
gain point in the gain form, as a sensitivity point in the legacy form, which
then ignores the output offset).
"""

from __future__ import annotations

import math
from typing import NamedTuple

from accelconv.core.curves.models import InputCap, InputOutputCap, PowerCurve


class PowerShape(NamedTuple):
    """Derived constants of a power curve."""

    scale: float
    offset_x: float
    offset_y: float
    constant: float

    def base_fn(self, x: float, exponent: float) -> float:
        if x <= self.offset_x:
            return self.offset_y
        return math.pow(self.scale * x, exponent) + self.constant / x


def _gain(x: float, power: float, scale: float) -> float:
    return (power + 1) * math.pow(x * scale, power)


def _gain_inverse(gain: float, power: float, scale: float) -> float:
    return math.pow(gain / (power + 1), 1 / power) / scale


def _scale_from_gain_point(x: float, gain: float, power: float) -> float:
    return math.pow(gain / (power + 1), 1 / power) / x


def _scale_from_sens_point(x: float, sens: float, power: float, constant: float) -> float:
    return math.pow(sens - constant / x, 1 / power) / x


def power_shape(curve: PowerCurve, gain: bool = False) -> PowerShape:
    """Resolve scale, offset point and integration constant for a curve."""
    n = curve.exponent
    cap = curve.cap

    if not isinstance(cap, InputOutputCap):
        scale = cap.acceleration
    elif gain:
        scale = _scale_from_gain_point(cap.cap_x, cap.cap_y, n)
    else:
        scale = _scale_from_sens_point(cap.cap_x, cap.cap_y, n, 0.0)
        return PowerShape(scale=scale, offset_x=0.0, offset_y=0.0, constant=0.0)

    offset_x = _gain_inverse(curve.output_offset, n, scale)
    offset_y = curve.output_offset
    constant = offset_x * offset_y * n / (n + 1)
    return PowerShape(scale=scale, offset_x=offset_x, offset_y=offset_y, constant=constant)


def _legacy(x: float, curve: PowerCurve, shape: PowerShape) -> float:
    n = curve.exponent
    cap = curve.cap
    ceiling = math.inf

    if isinstance(cap, InputOutputCap):
        ceiling = cap.cap_y
    elif isinstance(cap, InputCap):
        if cap.cap_x > 0:
            ceiling = shape.base_fn(cap.cap_x, n)
    elif cap.cap_y > 0:
        ceiling = cap.cap_y

    return min(shape.base_fn(x, n), ceiling)


def _gain_form(x: float, curve: PowerCurve, shape: PowerShape) -> float:
    n = curve.exponent
    cap = curve.cap
    cap_x = cap_y = math.inf

    if isinstance(cap, InputOutputCap):
        cap_x, cap_y = cap.cap_x, cap.cap_y
    elif isinstance(cap, InputCap):
        if cap.cap_x > 0:
            cap_x = cap.cap_x
            cap_y = _gain(cap_x, n, shape.scale)
    elif cap.cap_y > 0:
        cap_x = _gain_inverse(cap.cap_y, n, shape.scale)
        cap_y = cap.cap_y

    if x < cap_x:
        return shape.base_fn(x, n)

    constant_b = (shape.base_fn(cap_x, n) - cap_y) * cap_x
    return cap_y + constant_b / x


def power(x: float, curve: PowerCurve, gain: bool = False) -> float:
    """Evaluate the power curve at input speed ``x``.

    Example:
        >>> from accelconv.core.curves.models import OutputCap
        >>> power(2.0, PowerCurve(cap=OutputCap(acceleration=0.5, cap_y=0.0), exponent=1.0))
        1.0
    """
    shape = power_shape(curve, gain)
    form = _gain_form if gain else _legacy
    return form(x, curve, shape)
