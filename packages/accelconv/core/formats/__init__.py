"""Export formats for generated curves."""

from accelconv.core.formats.export import (
    POINT_FORMATTERS,
    ExportedCurve,
    export_curve,
    format_points,
)

__all__ = [
    "POINT_FORMATTERS",
    "ExportedCurve",
    "export_curve",
    "format_points",
]
