"""Parsers for text inputs."""

from accelconv.core.parsers.lookup_table import format_lookup_table, parse_lookup_table

__all__ = [
    "format_lookup_table",
    "parse_lookup_table",
]
