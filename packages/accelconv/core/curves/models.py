"""Curve schema models for the acceleration engine.

This module defines the value types flowing through the engine:
- Point: a single (input speed, output) sample
- CurvegenResult: an ordered point sequence plus its raw grid spacing
- CapMode: tagged union selecting which capping parameters are active
- AccelCurve: tagged union with one variant per acceleration mode
- AccelSettings: the full parameter bundle consumed by the generator

Every model is immutable. Each curve variant carries only the parameters its
mode reads, so switching modes can never leak a stale value into a result.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PointScaling(str, Enum):
    """Output domain (and export encoding) of a generated curve."""

    SENS = "sens"
    VELOCITY = "velocity"
    GAIN = "gain"
    LIBINPUT = "libinput"
    LIBINPUT_DEBUG = "libinput_debug"
    LOOKUP_VELOCITY = "lookup_velocity"
    LOOKUP_SENS = "lookup_sens"

    @property
    def is_libinput(self) -> bool:
        """Whether the scaling targets the fixed-cardinality libinput format."""
        return self in (PointScaling.LIBINPUT, PointScaling.LIBINPUT_DEBUG)


class AccelMode(str, Enum):
    """Acceleration curve families."""

    OFF = "off"
    LINEAR = "linear"
    CLASSIC = "classic"
    JUMP = "jump"
    NATURAL = "natural"
    SYNCHRONOUS = "synchronous"
    MOTIVITY = "motivity"
    POWER = "power"
    LOOKUP = "lookup"


class Point(BaseModel):
    """A single curve sample.

    Attributes:
        x: Input speed (counts per millisecond), never negative.
        y: Output value in the domain selected by the point scaling.

    Example:
        >>> Point(x=1.0, y=2.0)
        Point(x=1.0, y=2.0)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: float = Field(..., ge=0.0, description="Input speed")
    y: float = Field(..., description="Output value")


class CurvegenResult(BaseModel):
    """Points produced by one generation pass.

    ``step_size`` is the spacing of the raw sampling grid. It is kept even
    when the points were optimized afterwards, since fixed-step consumers
    (libinput) need it.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    points: list[Point] = Field(default_factory=list)
    step_size: float = 1.0

    @model_validator(mode="after")
    def _validate_increasing_x(self) -> CurvegenResult:
        for prev, cur in zip(self.points, self.points[1:]):
            if cur.x <= prev.x:
                raise ValueError("CurvegenResult.points must have strictly increasing x")
        return self


# ---------------------------------------------------------------------------
# Cap modes
# ---------------------------------------------------------------------------


class InputOutputCap(BaseModel):
    """Cap given as a point the curve passes through: ``(cap_x, cap_y)``.

    The growth rate is derived from the point, so no acceleration is read.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["input_output"] = "input_output"
    cap_x: float = Field(default=15.0, description="Input speed where the cap starts")
    cap_y: float = Field(default=1.5, description="Output at the cap")


class InputCap(BaseModel):
    """Growth rate plus an input speed past which the output stops growing.

    For power curves ``acceleration`` holds the curve scale.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["input"] = "input"
    acceleration: float = Field(default=0.005, ge=0.0)
    cap_x: float = Field(default=15.0, description="Input cap (<= 0 disables capping)")


class OutputCap(BaseModel):
    """Growth rate plus a ceiling on the output.

    For power curves ``acceleration`` holds the curve scale.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: Literal["output"] = "output"
    acceleration: float = Field(default=0.005, ge=0.0)
    cap_y: float = Field(default=1.5, description="Output cap (<= 0 disables capping)")


CapMode = Annotated[InputOutputCap | InputCap | OutputCap, Field(discriminator="kind")]


# ---------------------------------------------------------------------------
# Curve variants
# ---------------------------------------------------------------------------


class _CurveBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class OffCurve(_CurveBase):
    """No acceleration."""

    mode: Literal["off"] = "off"


class LinearCurve(_CurveBase):
    """Classic curve with the exponent fixed at 2."""

    mode: Literal["linear"] = "linear"
    cap: CapMode = Field(default_factory=OutputCap)
    input_offset: float = Field(default=0.0, ge=0.0)


class ClassicCurve(_CurveBase):
    """Capped power-law growth past an input offset."""

    mode: Literal["classic"] = "classic"
    cap: CapMode = Field(default_factory=OutputCap)
    input_offset: float = Field(default=0.0, ge=0.0)
    exponent: float = 2.0


class JumpCurve(_CurveBase):
    """Step from 1 to ``output`` at ``input``, optionally smoothed."""

    mode: Literal["jump"] = "jump"
    smooth: float = Field(default=0.5, ge=0.0, le=1.0)
    input: float = Field(default=15.0, ge=0.0)
    output: float = Field(default=1.5)


class NaturalCurve(_CurveBase):
    """Exponential approach towards ``limit``."""

    mode: Literal["natural"] = "natural"
    decay_rate: float = Field(default=0.1, ge=0.0)
    input_offset: float = Field(default=0.0, ge=0.0)
    limit: float = Field(default=1.5)


class SynchronousCurve(_CurveBase):
    """Log-log symmetric activation centred on ``sync_speed``."""

    mode: Literal["synchronous"] = "synchronous"
    gamma: float = 1.0
    smooth: float = Field(default=0.5, ge=0.0, le=1.0)
    motivity: float = 1.5
    sync_speed: float = 5.0


class MotivityCurve(_CurveBase):
    """Log-log sigmoid between ``1/motivity`` and ``motivity``."""

    mode: Literal["motivity"] = "motivity"
    growth_rate: float = 1.0
    motivity: float = 1.5
    midpoint: float = 5.0


class PowerCurve(_CurveBase):
    """``(scale * x) ^ exponent`` with an output offset floor.

    The scale lives in the cap's ``acceleration`` slot for the input and
    output cap modes; an input/output cap derives it from the cap point.
    """

    mode: Literal["power"] = "power"
    cap: CapMode = Field(default_factory=lambda: OutputCap(acceleration=1.0))
    exponent: float = 0.05
    output_offset: float = Field(default=0.0, ge=0.0)


class LookupCurve(_CurveBase):
    """Explicit point table interpolated linearly."""

    mode: Literal["lookup"] = "lookup"
    points: list[Point] = Field(default_factory=list)

    @field_validator("points")
    @classmethod
    def _validate_increasing_x(cls, points: list[Point]) -> list[Point]:
        for prev, cur in zip(points, points[1:]):
            if cur.x <= prev.x:
                raise ValueError("lookup points must have strictly increasing x")
        return points


AccelCurve = Annotated[
    OffCurve
    | LinearCurve
    | ClassicCurve
    | JumpCurve
    | NaturalCurve
    | SynchronousCurve
    | MotivityCurve
    | PowerCurve
    | LookupCurve,
    Field(discriminator="mode"),
]


LIBINPUT_POINT_COUNT = 64


class AccelSettings(BaseModel):
    """Parameter bundle for one curve generation.

    Attributes:
        dpi: Device resolution; bounds the sampled speed range at ``dpi / 20``.
        sens_multiplier: Applied uniformly to the output of every mode.
        gain: Use the gain formulation of the curve (for lookup tables: treat
            y-values as output speeds instead of sensitivities).
        curve: Active acceleration mode and its parameters.
        point_count: Number of grid samples (pinned to 64 for libinput).
        point_scaling: Output domain of the generated points.
        optimize_curve: Reduce the point count while preserving shape.

    Example:
        >>> settings = AccelSettings(curve=ClassicCurve())
        >>> settings.mode
        <AccelMode.CLASSIC: 'classic'>
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    dpi: int = Field(default=1200, gt=0)
    sens_multiplier: float = Field(default=1.0, allow_inf_nan=False)
    gain: bool = False
    curve: AccelCurve = Field(default_factory=OffCurve)
    point_count: int = Field(default=64, gt=1)
    point_scaling: PointScaling = PointScaling.SENS
    optimize_curve: bool = False

    @property
    def mode(self) -> AccelMode:
        """Mode of the active curve."""
        return AccelMode(self.curve.mode)

    @property
    def effective_point_count(self) -> int:
        """Sample count actually used; libinput always takes 64 points."""
        if self.point_scaling.is_libinput:
            return LIBINPUT_POINT_COUNT
        return self.point_count
