"""Curve generation: sample the active transfer function over a speed range."""

from __future__ import annotations

import logging

from accelconv.core.curves.conversion import apply_point_scaling
from accelconv.core.curves.models import AccelSettings, CurvegenResult, Point
from accelconv.core.curves.registry import (
    TransferFunctionRegistry,
    default_registry,
    evaluate_sensitivity,
)
from accelconv.core.curves.sampling import sample_uniform_grid
from accelconv.core.curves.simplification import DEFAULT_TOLERANCE, optimize_points
from accelconv.core.errors import InvalidRangeError

logger = logging.getLogger(__name__)

# Upper bound of the sampled input range is dpi / DPI_RANGE_DIVISOR.
DPI_RANGE_DIVISOR = 20


def sample_range(
    settings: AccelSettings,
    registry: TransferFunctionRegistry | None = None,
) -> tuple[float, float]:
    """Input speed range sampled for the settings.

    Returns:
        ``(x_min, x_max)``: 0 (0.1 for curves singular at zero) to ``dpi / 20``.

    Example:
        >>> sample_range(AccelSettings(dpi=1600))
        (0.0, 80.0)
    """
    spec = (registry or default_registry()).get(settings.mode)
    return spec.min_input, settings.dpi / DPI_RANGE_DIVISOR


def evaluate(
    x: float,
    settings: AccelSettings,
    registry: TransferFunctionRegistry | None = None,
) -> Point:
    """Evaluate one sample in the output domain of ``settings.point_scaling``.

    Raises:
        UnsupportedScalingError: If the scaling has no conversion.
    """
    registry = registry or default_registry()
    spec = registry.get(settings.mode)
    y = evaluate_sensitivity(x, settings, registry)
    return apply_point_scaling(
        Point(x=x, y=y), settings.point_scaling, speed_domain=spec.speed_domain
    )


def generate_curve(
    settings: AccelSettings,
    *,
    tolerance: float = DEFAULT_TOLERANCE,
    registry: TransferFunctionRegistry | None = None,
) -> CurvegenResult:
    """Sample the active curve on an even grid.

    ``point_count`` samples cover ``sample_range(settings)`` including both
    ends. Libinput scalings always take 64 samples and are never optimized,
    since the consumer relies on a fixed step.

    Args:
        settings: Parameter bundle.
        tolerance: Optimizer tolerance when ``optimize_curve`` is set.
        registry: Registry to dispatch through (defaults to built-ins).

    Returns:
        The sampled points and the raw grid step.

    Raises:
        InvalidRangeError: If the range is empty (dpi too low for the mode).
        UnsupportedScalingError: If the scaling has no conversion.

    Example:
        >>> result = generate_curve(AccelSettings(dpi=400, point_count=5))
        >>> [p.x for p in result.points]
        [0.0, 5.0, 10.0, 15.0, 20.0]
        >>> result.step_size
        5.0
    """
    registry = registry or default_registry()
    x_min, x_max = sample_range(settings, registry)
    if x_max <= x_min:
        raise InvalidRangeError(
            f"dpi {settings.dpi} gives an empty range [{x_min}, {x_max}] "
            f"for {settings.mode.value} curves"
        )

    point_count = settings.effective_point_count
    if point_count != settings.point_count:
        logger.info(
            "Point count pinned to %d for %s scaling (requested %d)",
            point_count,
            settings.point_scaling.value,
            settings.point_count,
        )

    step_size = (x_max - x_min) / (point_count - 1)
    grid = sample_uniform_grid(x_min, x_max, point_count)
    points = [evaluate(x, settings, registry) for x in grid]

    if settings.optimize_curve and not settings.point_scaling.is_libinput:
        points = optimize_points(points, tolerance)

    logger.debug(
        "Generated %s curve: %d points over [%g, %g], step %g",
        settings.mode.value,
        len(points),
        x_min,
        x_max,
        step_size,
    )
    return CurvegenResult(points=points, step_size=step_size)
