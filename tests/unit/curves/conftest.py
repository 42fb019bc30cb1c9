"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from accelconv.core.curves.models import (
    AccelSettings,
    ClassicCurve,
    JumpCurve,
    LinearCurve,
    LookupCurve,
    MotivityCurve,
    NaturalCurve,
    OffCurve,
    OutputCap,
    Point,
    PowerCurve,
    SynchronousCurve,
)


@pytest.fixture
def ramp_up_points() -> list[Point]:
    """Create ascending ramp points."""
    return [
        Point(x=0.0, y=0.0),
        Point(x=1.0, y=1.0),
    ]


@pytest.fixture
def peak_points() -> list[Point]:
    """Create a triangle with a single peak."""
    return [
        Point(x=0.0, y=0.0),
        Point(x=1.0, y=0.5),
        Point(x=2.0, y=1.0),
        Point(x=3.0, y=0.5),
        Point(x=4.0, y=0.0),
    ]


@pytest.fixture
def lookup_table_points() -> list[Point]:
    """A small sensitivity table."""
    return [
        Point(x=1.0, y=1.0),
        Point(x=10.0, y=1.5),
        Point(x=30.0, y=2.0),
    ]


@pytest.fixture
def classic_settings() -> AccelSettings:
    """Classic curve with an output cap."""
    return AccelSettings(
        dpi=1600,
        curve=ClassicCurve(cap=OutputCap(acceleration=0.01, cap_y=2.0)),
        point_count=64,
    )


@pytest.fixture
def every_curve(lookup_table_points: list[Point]) -> list:
    """One curve of each mode, with defaults where possible."""
    return [
        OffCurve(),
        LinearCurve(),
        ClassicCurve(),
        JumpCurve(),
        NaturalCurve(),
        SynchronousCurve(),
        MotivityCurve(),
        PowerCurve(),
        LookupCurve(points=lookup_table_points),
    ]
