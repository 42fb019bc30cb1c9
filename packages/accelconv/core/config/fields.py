"""Flat editor field set.

An editor presents every curve parameter as its own field and keeps values
for inactive modes around while the user switches between them.
``EditorFields`` mirrors that flat layout (with the editor's defaults) and
``to_settings`` collapses it into the tagged ``AccelSettings``, keeping only
the fields the active mode and cap mode read.
"""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from accelconv.core.curves.models import (
    AccelCurve,
    AccelMode,
    AccelSettings,
    CapMode,
    ClassicCurve,
    InputCap,
    InputOutputCap,
    JumpCurve,
    LinearCurve,
    LookupCurve,
    MotivityCurve,
    NaturalCurve,
    OffCurve,
    OutputCap,
    Point,
    PointScaling,
    PowerCurve,
    SynchronousCurve,
)
from accelconv.core.parsers.lookup_table import parse_lookup_table

logger = logging.getLogger(__name__)


class CapType(str, Enum):
    """Cap selection as shown in the editor."""

    INPUT_OUTPUT = "input_output"
    INPUT = "input"
    OUTPUT = "output"


class EditorFields(BaseModel):
    """Every field the editor exposes, regardless of mode.

    ``cap_x`` / ``cap_y`` double as the jump curve's input and output, and
    ``gamma`` / ``sync_speed`` as the motivity curve's growth rate and
    midpoint, as in the editor.

    Example:
        >>> fields = EditorFields(mode=AccelMode.CLASSIC, cap_mode=CapType.INPUT)
        >>> fields.to_settings().curve.cap
        InputCap(kind='input', acceleration=0.005, cap_x=15.0)
    """

    model_config = ConfigDict(extra="forbid")

    # global
    dpi: int = Field(default=1200, gt=0)
    sens_multiplier: float = Field(default=1.0, allow_inf_nan=False)
    mode: AccelMode = AccelMode.OFF
    gain: bool = False

    # linear/classic
    acceleration: float = Field(default=0.005, ge=0.0)
    cap_mode: CapType = CapType.OUTPUT
    cap_x: float = 15.0
    cap_y: float = 1.5
    input_offset: float = Field(default=0.0, ge=0.0)
    exponent_classic: float = 2.0

    # jump
    smooth: float = Field(default=0.5, ge=0.0, le=1.0)

    # natural
    decay_rate: float = Field(default=0.1, ge=0.0)
    limit: float = 1.5

    # synchronous/motivity
    gamma: float = 1.0
    motivity: float = 1.5
    sync_speed: float = 5.0

    # power
    scale: float = Field(default=1.0, ge=0.0)
    exponent_power: float = 0.05
    output_offset: float = Field(default=0.0, ge=0.0)

    # lookup (points, or table text in "<x>,<y>;" form)
    lookup_data: list[Point] = Field(default_factory=list)

    # export
    point_count: int = Field(default=64, gt=1)
    point_scaling: PointScaling = PointScaling.SENS
    optimize_curve: bool = True

    @field_validator("lookup_data", mode="before")
    @classmethod
    def _parse_table_text(cls, value: object) -> object:
        if isinstance(value, str):
            points = parse_lookup_table(value)
            if points is None:
                raise ValueError("lookup_data is not a valid lookup table")
            return points
        return value

    def _cap(self, rate: float) -> CapMode:
        if self.cap_mode is CapType.INPUT_OUTPUT:
            return InputOutputCap(cap_x=self.cap_x, cap_y=self.cap_y)
        if self.cap_mode is CapType.INPUT:
            return InputCap(acceleration=rate, cap_x=self.cap_x)
        return OutputCap(acceleration=rate, cap_y=self.cap_y)

    def to_curve(self) -> AccelCurve:
        """Curve variant for the active mode, built from its fields only."""
        match self.mode:
            case AccelMode.OFF:
                return OffCurve()
            case AccelMode.LINEAR:
                return LinearCurve(cap=self._cap(self.acceleration), input_offset=self.input_offset)
            case AccelMode.CLASSIC:
                return ClassicCurve(
                    cap=self._cap(self.acceleration),
                    input_offset=self.input_offset,
                    exponent=self.exponent_classic,
                )
            case AccelMode.JUMP:
                return JumpCurve(smooth=self.smooth, input=self.cap_x, output=self.cap_y)
            case AccelMode.NATURAL:
                return NaturalCurve(
                    decay_rate=self.decay_rate,
                    input_offset=self.input_offset,
                    limit=self.limit,
                )
            case AccelMode.SYNCHRONOUS:
                return SynchronousCurve(
                    gamma=self.gamma,
                    smooth=self.smooth,
                    motivity=self.motivity,
                    sync_speed=self.sync_speed,
                )
            case AccelMode.MOTIVITY:
                return MotivityCurve(
                    growth_rate=self.gamma,
                    motivity=self.motivity,
                    midpoint=self.sync_speed,
                )
            case AccelMode.POWER:
                return PowerCurve(
                    cap=self._cap(self.scale),
                    exponent=self.exponent_power,
                    output_offset=self.output_offset,
                )
            case AccelMode.LOOKUP:
                return LookupCurve(points=self.lookup_data)
        raise ValueError(f"Unknown mode: {self.mode}")

    def to_settings(self) -> AccelSettings:
        """Collapse the fields into a parameter bundle."""
        settings = AccelSettings(
            dpi=self.dpi,
            sens_multiplier=self.sens_multiplier,
            gain=self.gain,
            curve=self.to_curve(),
            point_count=self.point_count,
            point_scaling=self.point_scaling,
            optimize_curve=self.optimize_curve,
        )
        logger.debug("Collapsed editor fields into %s settings", settings.mode.value)
        return settings
