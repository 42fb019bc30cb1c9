"""Conversion of sampled points between output domains.

Curves are evaluated as sensitivities: multipliers on input displacement.
The velocity domain instead gives the resulting output speed, using the
point's own input speed as the common time base.
"""

from __future__ import annotations

from accelconv.core.curves.models import Point, PointScaling
from accelconv.core.errors import UnsupportedScalingError

SENSITIVITY_SCALINGS: frozenset[PointScaling] = frozenset(
    {PointScaling.SENS, PointScaling.LOOKUP_SENS}
)
VELOCITY_SCALINGS: frozenset[PointScaling] = frozenset(
    {
        PointScaling.VELOCITY,
        PointScaling.LIBINPUT,
        PointScaling.LIBINPUT_DEBUG,
        PointScaling.LOOKUP_VELOCITY,
    }
)


def sensitivity_point_to_velocity(point: Point) -> Point:
    """Convert a sensitivity sample into an output speed sample.

    Example:
        >>> sensitivity_point_to_velocity(Point(x=4.0, y=1.5))
        Point(x=4.0, y=6.0)
    """
    return Point(x=point.x, y=point.x * point.y)


def apply_point_scaling(
    point: Point,
    scaling: PointScaling,
    *,
    speed_domain: bool = False,
) -> Point:
    """Express a sensitivity sample in the domain selected by ``scaling``.

    Args:
        point: Sample whose y is a sensitivity.
        scaling: Target output domain.
        speed_domain: The sample already maps speed to speed (no
            acceleration); it is returned unchanged.

    Returns:
        The sample in the target domain.

    Raises:
        UnsupportedScalingError: For gain scaling, which has no conversion.
    """
    if scaling is PointScaling.GAIN:
        raise UnsupportedScalingError("gain point scaling is not implemented")
    if speed_domain or scaling in SENSITIVITY_SCALINGS:
        return point
    if scaling in VELOCITY_SCALINGS:
        return sensitivity_point_to_velocity(point)
    raise UnsupportedScalingError(f"no conversion for point scaling {scaling.value!r}")
