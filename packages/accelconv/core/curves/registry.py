"""Transfer function registry and evaluation."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import functools
import logging
import math
from typing import Any

from accelconv.core.curves.functions import (
    classic,
    jump,
    linear,
    lookup,
    motivity,
    natural,
    power,
    synchronous,
)
from accelconv.core.curves.models import AccelMode, AccelSettings

logger = logging.getLogger(__name__)

# (input speed, curve parameters, gain) -> sensitivity
TransferFunction = Callable[[float, Any, bool], float]

# Lower bound of the sampled range for curves singular at zero input.
SINGULAR_MIN_INPUT = 0.1


def noaccel(x: float, curve: Any = None, gain: bool = False) -> float:
    """Identity mapping used when acceleration is off."""
    return x


@dataclass(frozen=True)
class TransferFunctionSpec:
    """Registry entry for one acceleration mode.

    Attributes:
        mode: Mode the entry evaluates.
        function: Transfer function for the mode.
        min_input: Lowest sampled input speed.
        speed_domain: The function maps speed to speed rather than returning
            a sensitivity, so point scaling leaves its output alone.
        description: Human readable summary.
    """

    mode: AccelMode
    function: TransferFunction
    min_input: float = 0.0
    speed_domain: bool = False
    description: str | None = None


class TransferFunctionRegistry:
    """Registry mapping acceleration modes to transfer functions."""

    def __init__(self) -> None:
        self._registry: dict[AccelMode, TransferFunctionSpec] = {}

    def register(self, spec: TransferFunctionSpec) -> None:
        if spec.mode in self._registry:
            raise ValueError(f"Mode '{spec.mode.value}' already registered")
        self._registry[spec.mode] = spec

    def get(self, mode: AccelMode) -> TransferFunctionSpec:
        try:
            return self._registry[AccelMode(mode)]
        except KeyError as exc:
            raise ValueError(f"Mode '{mode}' is not registered") from exc

    def modes(self) -> list[AccelMode]:
        return list(self._registry)


def build_default_registry() -> TransferFunctionRegistry:
    """Create a registry holding every built-in acceleration mode."""
    registry = TransferFunctionRegistry()
    registry.register(
        TransferFunctionSpec(
            mode=AccelMode.OFF,
            function=noaccel,
            speed_domain=True,
            description="No acceleration",
        )
    )
    registry.register(
        TransferFunctionSpec(
            mode=AccelMode.LINEAR,
            function=linear,
            description="Classic with exponent 2",
        )
    )
    registry.register(
        TransferFunctionSpec(
            mode=AccelMode.CLASSIC,
            function=classic,
            description="Capped power-law growth",
        )
    )
    registry.register(
        TransferFunctionSpec(mode=AccelMode.JUMP, function=jump, description="Smoothed step")
    )
    registry.register(
        TransferFunctionSpec(
            mode=AccelMode.NATURAL,
            function=natural,
            description="Exponential approach to a limit",
        )
    )
    registry.register(
        TransferFunctionSpec(
            mode=AccelMode.SYNCHRONOUS,
            function=synchronous,
            description="Log-log symmetric activation",
        )
    )
    registry.register(
        TransferFunctionSpec(
            mode=AccelMode.MOTIVITY,
            function=motivity,
            description="Log-log sigmoid",
        )
    )
    registry.register(
        TransferFunctionSpec(
            mode=AccelMode.POWER,
            function=power,
            min_input=SINGULAR_MIN_INPUT,
            description="Power law with output offset",
        )
    )
    registry.register(
        TransferFunctionSpec(
            mode=AccelMode.LOOKUP,
            function=lookup,
            min_input=SINGULAR_MIN_INPUT,
            description="Interpolated point table",
        )
    )
    return registry


@functools.cache
def default_registry() -> TransferFunctionRegistry:
    """Shared registry of the built-in modes."""
    return build_default_registry()


def evaluate_sensitivity(
    x: float,
    settings: AccelSettings,
    registry: TransferFunctionRegistry | None = None,
) -> float:
    """Evaluate the active transfer function at ``x``, times the multiplier.

    A sample where the model is undefined (division by zero, log of zero,
    empty table, overflow, non-finite result) evaluates to 0.

    Args:
        x: Input speed.
        settings: Parameter bundle; only the active curve is read.
        registry: Registry to dispatch through (defaults to built-ins).

    Returns:
        ``sens_multiplier * f(x)``, or 0.0 for an undefined sample.

    Example:
        >>> evaluate_sensitivity(3.0, AccelSettings(sens_multiplier=2.0))
        6.0
    """
    spec = (registry or default_registry()).get(settings.mode)
    try:
        y = spec.function(x, settings.curve, settings.gain)
    except (ArithmeticError, ValueError) as exc:
        logger.debug("%s curve undefined at x=%s: %s", settings.mode.value, x, exc)
        return 0.0
    if not math.isfinite(y):
        logger.debug("%s curve not finite at x=%s", settings.mode.value, x)
        return 0.0
    return settings.sens_multiplier * y
