"""Curve evaluation, sampling and conversion."""

from accelconv.core.curves.conversion import apply_point_scaling, sensitivity_point_to_velocity
from accelconv.core.curves.generator import evaluate, generate_curve, sample_range
from accelconv.core.curves.models import (
    AccelMode,
    AccelSettings,
    ClassicCurve,
    CurvegenResult,
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
from accelconv.core.curves.registry import build_default_registry, evaluate_sensitivity
from accelconv.core.curves.simplification import optimize_points

__all__ = [
    "AccelMode",
    "AccelSettings",
    "ClassicCurve",
    "CurvegenResult",
    "InputCap",
    "InputOutputCap",
    "JumpCurve",
    "LinearCurve",
    "LookupCurve",
    "MotivityCurve",
    "NaturalCurve",
    "OffCurve",
    "OutputCap",
    "Point",
    "PointScaling",
    "PowerCurve",
    "SynchronousCurve",
    "apply_point_scaling",
    "build_default_registry",
    "evaluate",
    "evaluate_sensitivity",
    "generate_curve",
    "optimize_points",
    "sample_range",
    "sensitivity_point_to_velocity",
]
