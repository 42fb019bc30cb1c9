"""Serialization of generated curves for downstream consumers.

Each point scaling has a formatter in ``POINT_FORMATTERS``:

- sens / velocity / gain: JSON array of ``{"x": ..., "y": ...}`` objects
- libinput / libinput_debug: y-values only, each followed by one space
- lookup_velocity / lookup_sens: ``<x>,<y>;`` lines, readable by
  ``parse_lookup_table``

The libinput debug scaling additionally exposes the grid step.
"""

from __future__ import annotations

from collections.abc import Callable
import logging

from pydantic import BaseModel, ConfigDict, TypeAdapter

from accelconv.core.curves.generator import generate_curve
from accelconv.core.curves.models import AccelSettings, CurvegenResult, Point, PointScaling
from accelconv.core.curves.simplification import DEFAULT_TOLERANCE
from accelconv.core.parsers.lookup_table import format_lookup_table
from accelconv.core.utils.logging import log_performance

logger = logging.getLogger(__name__)

Formatter = Callable[[CurvegenResult], str]

_POINTS_ADAPTER = TypeAdapter(list[Point])


def format_structural(result: CurvegenResult) -> str:
    """Dump the full point sequence as JSON.

    Example:
        >>> format_structural(CurvegenResult(points=[Point(x=0.0, y=1.0)]))
        '[{"x":0.0,"y":1.0}]'
    """
    return _POINTS_ADAPTER.dump_json(result.points).decode("utf-8")


def format_libinput(result: CurvegenResult) -> str:
    """Space separated y-values, one trailing space after each.

    Example:
        >>> pts = [Point(x=0.0, y=0.0), Point(x=1.0, y=1.5)]
        >>> format_libinput(CurvegenResult(points=pts))
        '0.0 1.5 '
    """
    return "".join(f"{p.y} " for p in result.points)


def format_lookup_pairs(result: CurvegenResult) -> str:
    """``<x>,<y>;`` lines for lookup table consumers."""
    return format_lookup_table(result.points)


POINT_FORMATTERS: dict[PointScaling, Formatter] = {
    PointScaling.SENS: format_structural,
    PointScaling.VELOCITY: format_structural,
    PointScaling.GAIN: format_structural,
    PointScaling.LIBINPUT: format_libinput,
    PointScaling.LIBINPUT_DEBUG: format_libinput,
    PointScaling.LOOKUP_VELOCITY: format_lookup_pairs,
    PointScaling.LOOKUP_SENS: format_lookup_pairs,
}

# Scalings that expose the grid step alongside the points.
STEP_SCALINGS: frozenset[PointScaling] = frozenset({PointScaling.LIBINPUT_DEBUG})


class ExportedCurve(BaseModel):
    """Text produced for one export.

    Attributes:
        point_scaling: Scaling the curve was generated and encoded with.
        points: Encoded point sequence.
        steps: Grid step as text, for scalings that expose it.
        point_count: Number of encoded points.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    point_scaling: PointScaling
    points: str
    steps: str | None = None
    point_count: int


def format_points(result: CurvegenResult, point_scaling: PointScaling) -> str:
    """Encode a generated curve for the consumer of ``point_scaling``.

    Raises:
        ValueError: If no formatter is registered for the scaling.
    """
    try:
        formatter = POINT_FORMATTERS[PointScaling(point_scaling)]
    except KeyError as exc:
        raise ValueError(f"No formatter for point scaling '{point_scaling}'") from exc
    return formatter(result)


@log_performance
def export_curve(
    settings: AccelSettings,
    point_scaling: PointScaling | None = None,
    *,
    tolerance: float = DEFAULT_TOLERANCE,
) -> ExportedCurve:
    """Generate and encode a curve for export.

    Args:
        settings: Parameter bundle.
        point_scaling: Export scaling; defaults to ``settings.point_scaling``.
        tolerance: Optimizer tolerance when ``optimize_curve`` is set.

    Returns:
        The encoded curve. Libinput exports always hold exactly 64 points.

    Raises:
        UnsupportedScalingError: For scalings without a conversion.
    """
    if point_scaling is not None:
        settings = settings.model_copy(update={"point_scaling": PointScaling(point_scaling)})

    result = generate_curve(settings, tolerance=tolerance)
    scaling = settings.point_scaling
    steps = str(result.step_size) if scaling in STEP_SCALINGS else None

    logger.info("Exported %d points as %s", len(result.points), scaling.value)
    return ExportedCurve(
        point_scaling=scaling,
        points=format_points(result, scaling),
        steps=steps,
        point_count=len(result.points),
    )
