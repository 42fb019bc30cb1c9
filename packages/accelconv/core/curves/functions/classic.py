"""Classic and linear acceleration.

Legacy form, past the input offset ``o``:

    sens(x) = 1 + sign * min(a^(p-1) * (x - o)^p / x, cap)

Gain form: the same family with ``p * (a (x - o))^(p-1)`` as the slope of the
output speed; past the cap point the output speed keeps growing with slope
``cap_y`` so it stays continuous.

Linear acceleration is the classic curve with ``p = 2``.
"""

from __future__ import annotations

import math

from accelconv.core.curves.models import (
    CapMode,
    ClassicCurve,
    InputCap,
    InputOutputCap,
    LinearCurve,
)

LINEAR_EXPONENT = 2.0


def _base_fn(x: float, accel_raised: float, offset: float, power: float) -> float:
    return accel_raised * math.pow(x - offset, power) / x


def _base_accel(x: float, y: float, offset: float, power: float) -> float:
    """Acceleration making the legacy curve pass through ``(x, y + 1)``."""
    return math.pow(x * y * math.pow(x - offset, -power), 1 / (power - 1))


def _gain(x: float, accel: float, power: float, offset: float) -> float:
    return power * math.pow(accel * (x - offset), power - 1)


def _gain_inverse(y: float, accel: float, power: float, offset: float) -> float:
    return (accel * offset + math.pow(y / power, 1 / (power - 1))) / accel


def _gain_accel(x: float, y: float, power: float, offset: float) -> float:
    """Acceleration making the gain reach ``y + 1`` at ``x``."""
    return -math.pow(y / power, 1 / (power - 1)) / (offset - x)


def _legacy(x: float, cap: CapMode, offset: float, power: float) -> float:
    if x <= offset:
        return 1.0

    sign = 1.0
    ceiling = math.inf

    if isinstance(cap, InputOutputCap):
        ceiling = cap.cap_y - 1
        if ceiling < 0:
            ceiling, sign = -ceiling, -sign
        accel_raised = math.pow(_base_accel(cap.cap_x, ceiling, offset, power), power - 1)
    elif isinstance(cap, InputCap):
        accel_raised = math.pow(cap.acceleration, power - 1)
        if cap.cap_x > 0:
            ceiling = _base_fn(cap.cap_x, accel_raised, offset, power) if cap.cap_x > offset else 0.0
    else:
        accel_raised = math.pow(cap.acceleration, power - 1)
        if cap.cap_y > 0:
            ceiling = cap.cap_y - 1
            if ceiling < 0:
                ceiling, sign = -ceiling, -sign

    return sign * min(_base_fn(x, accel_raised, offset, power), ceiling) + 1


def _gain_form(x: float, cap: CapMode, offset: float, power: float) -> float:
    if x <= offset:
        return 1.0

    sign = 1.0
    cap_x = cap_y = math.inf
    constant = 0.0

    if isinstance(cap, InputOutputCap):
        cap_x = cap.cap_x
        cap_y = cap.cap_y - 1
        if cap_y < 0:
            cap_y, sign = -cap_y, -sign
        accel_raised = math.pow(_gain_accel(cap_x, cap_y, power, offset), power - 1)
        constant = (_base_fn(cap_x, accel_raised, offset, power) - cap_y) * cap_x
    elif isinstance(cap, InputCap):
        accel_raised = math.pow(cap.acceleration, power - 1)
        if cap.cap_x > 0:
            cap_x = cap.cap_x
            cap_y = _gain(cap_x, cap.acceleration, power, offset)
            constant = (_base_fn(cap_x, accel_raised, offset, power) - cap_y) * cap_x
    else:
        accel_raised = math.pow(cap.acceleration, power - 1)
        if cap.cap_y > 0 and cap.acceleration > 0:
            cap_y = cap.cap_y - 1
            if cap_y < 0:
                cap_y, sign = -cap_y, -sign
            cap_x = _gain_inverse(cap_y, cap.acceleration, power, offset)
            constant = (_base_fn(cap_x, accel_raised, offset, power) - cap_y) * cap_x

    if x < cap_x:
        output = _base_fn(x, accel_raised, offset, power)
    else:
        output = cap_y + constant / x

    return sign * output + 1


def classic(x: float, curve: ClassicCurve, gain: bool = False) -> float:
    """Evaluate the classic curve at input speed ``x``.

    Args:
        x: Input speed.
        curve: Classic parameters; only the active cap mode's fields are read.
        gain: Use the gain formulation.

    Returns:
        Sensitivity multiplier at ``x``.

    Example:
        >>> from accelconv.core.curves.models import OutputCap
        >>> classic(10.0, ClassicCurve(cap=OutputCap(acceleration=0.01, cap_y=2.0)))
        1.1
    """
    form = _gain_form if gain else _legacy
    return form(x, curve.cap, curve.input_offset, curve.exponent)


def linear(x: float, curve: LinearCurve, gain: bool = False) -> float:
    """Evaluate the linear curve (classic with exponent 2) at ``x``."""
    form = _gain_form if gain else _legacy
    return form(x, curve.cap, curve.input_offset, LINEAR_EXPONENT)
