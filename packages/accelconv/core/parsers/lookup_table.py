"""Lookup table text format.

A table is a sequence of ``<x>,<y>;`` entries. Whitespace (including
newlines) may surround numbers and entries::

    1.5,1.0;
    5,1.2;
    20,2.4;

Input speeds must be non-negative and strictly increasing.
"""

from __future__ import annotations

import logging
import re

from accelconv.core.curves.models import Point

logger = logging.getLogger(__name__)

ENTRY_TERMINATOR = ";"

_FLOAT = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_ENTRY_RE = re.compile(rf"\s*({_FLOAT})\s*,\s*({_FLOAT})\s*")


def parse_lookup_table(text: str) -> list[Point] | None:
    """Parse lookup table text into points.

    Args:
        text: Table text.

    Returns:
        The points in order, or None if the table is empty, any entry is
        malformed (including a missing final ``;``), or x is not strictly
        increasing. Callers keep their previous table on None.

    Example:
        >>> parse_lookup_table("1,2;\\n3,4;\\n")
        [Point(x=1.0, y=2.0), Point(x=3.0, y=4.0)]
        >>> parse_lookup_table("1,2") is None
        True
    """
    body = text.strip()
    if not body:
        logger.debug("Lookup table is empty")
        return None
    if not body.endswith(ENTRY_TERMINATOR):
        logger.debug("Lookup table entry is missing its terminator")
        return None

    points: list[Point] = []
    for index, entry in enumerate(body[: -len(ENTRY_TERMINATOR)].split(ENTRY_TERMINATOR)):
        match = _ENTRY_RE.fullmatch(entry)
        if match is None:
            logger.debug("Malformed lookup table entry %d: %r", index, entry)
            return None

        x, y = float(match.group(1)), float(match.group(2))
        if x < 0:
            logger.debug("Negative input speed in lookup table entry %d", index)
            return None
        if points and x <= points[-1].x:
            logger.debug("Lookup table x not increasing at entry %d", index)
            return None
        points.append(Point(x=x, y=y))

    return points


def format_lookup_table(points: list[Point]) -> str:
    """Render points in lookup table format, one entry per line.

    Example:
        >>> format_lookup_table([Point(x=1.0, y=2.0)])
        '1.0,2.0;\\n'
    """
    return "".join(f"{p.x},{p.y}{ENTRY_TERMINATOR}\n" for p in points)
