"""Numeric integration of gain curves.

A gain curve ``g`` describes the slope of the output speed, so the matching
sensitivity is the mean of ``g`` over ``[0, x]``. Families without a closed
form antiderivative go through here.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np

# Midpoint-rule subdivisions; the integrands are smooth in log space and
# bounded, so this keeps the relative error well below plotting resolution.
INTEGRATION_SAMPLES = 256


def average_gain(
    gain_fn: Callable[[float], float],
    x: float,
    samples: int = INTEGRATION_SAMPLES,
) -> float:
    """Mean of ``gain_fn`` over ``[0, x]`` by the midpoint rule.

    Args:
        gain_fn: Gain as a function of input speed; called only at ``t > 0``.
        x: Upper integration bound, must be positive.
        samples: Number of subdivisions.

    Returns:
        ``(1 / x) * integral(gain_fn, 0, x)``.

    Raises:
        ValueError: If x is not positive or samples < 1.

    Example:
        >>> average_gain(lambda t: 2.0, 5.0)
        2.0
    """
    if x <= 0:
        raise ValueError("x must be > 0")
    if samples < 1:
        raise ValueError("samples must be >= 1")

    step = x / samples
    midpoints = (np.arange(samples) + 0.5) * step
    values = np.fromiter((gain_fn(float(t)) for t in midpoints), dtype=float, count=samples)
    return float(np.mean(values))
