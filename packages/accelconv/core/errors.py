"""Exceptions raised by the acceleration engine."""

from __future__ import annotations


class AccelConvError(Exception):
    """Base class for engine errors."""


class CurveDomainError(AccelConvError, ArithmeticError):
    """A transfer function is undefined at the requested input.

    Raised by curve families and absorbed by the sampler, which substitutes a
    zero sample and carries on.
    """


class UnsupportedScalingError(AccelConvError, NotImplementedError):
    """The requested point scaling has no defined conversion."""


class InvalidRangeError(AccelConvError, ValueError):
    """The sampled speed range is empty for the given settings."""
