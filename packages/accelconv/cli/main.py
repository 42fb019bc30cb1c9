"""Command-line interface for accelconv."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from accelconv.core.config.loader import configure_logging, load_app_config, load_curve_settings
from accelconv.core.curves.models import AccelSettings, LookupCurve, PointScaling
from accelconv.core.errors import AccelConvError
from accelconv.core.formats.export import ExportedCurve, export_curve
from accelconv.core.parsers.lookup_table import parse_lookup_table
from accelconv.core.utils.logging import get_logger

console = Console()
logger = get_logger(__name__)


def _read_lookup_table(path: Path) -> LookupCurve:
    """Parse a lookup table file into a lookup curve.

    Raises:
        ValueError: If the table is malformed.
    """
    points = parse_lookup_table(path.read_text(encoding="utf-8"))
    if points is None:
        raise ValueError(f"Invalid lookup table: {path}")
    return LookupCurve(points=points)


def _with_lookup_table(settings: AccelSettings, lut_path: Path | None) -> AccelSettings:
    if lut_path is None:
        return settings
    curve = _read_lookup_table(lut_path)
    logger.debug("Loaded %d lookup points from %s", len(curve.points), lut_path)
    return settings.model_copy(update={"curve": curve})


def _write_export(exported: ExportedCurve, out_path: Path | None) -> None:
    if out_path is None:
        console.print(exported.points, markup=False, highlight=False, soft_wrap=True)
        if exported.steps is not None:
            console.print(f"[bold]steps:[/bold] {exported.steps}")
        return

    out_path.write_text(exported.points, encoding="utf-8")
    console.print(f"[green]Wrote {exported.point_count} points to[/green] {out_path}")
    if exported.steps is not None:
        console.print(f"   steps: {exported.steps}")


def run_generate(args: argparse.Namespace) -> int:
    """Generate and export a curve.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        app_config = load_app_config(args.app_config)
    except (OSError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load app config: {e}[/red]")
        return 1
    configure_logging(app_config)

    try:
        settings = load_curve_settings(Path(args.config))
        settings = _with_lookup_table(settings, Path(args.lut) if args.lut else None)
        exported = export_curve(
            settings,
            PointScaling(args.scaling) if args.scaling else None,
            tolerance=app_config.curves.optimize_tolerance,
        )
    except (OSError, ValueError, ValidationError, AccelConvError, NotImplementedError) as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    _write_export(exported, Path(args.out) if args.out else None)
    return 0


def run_parse_lut(args: argparse.Namespace) -> int:
    """Validate a lookup table file and summarize it.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    path = Path(args.file)
    try:
        curve = _read_lookup_table(path)
    except (OSError, ValueError) as e:
        console.print(f"[red]ERROR: {e}[/red]")
        return 1

    table = Table(title=f"{path.name}: {len(curve.points)} points")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    for point in curve.points:
        table.add_row(str(point.x), str(point.y))
    console.print(table)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="accelconv",
        description="accelconv - pointer acceleration curve generator and converter",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate and export a curve")
    gen.add_argument("config", help="Path to curve settings (.json, .yaml, or .yml)")
    gen.add_argument(
        "--scaling",
        choices=[s.value for s in PointScaling],
        default=None,
        help="Export scaling (default: point_scaling from the settings)",
    )
    gen.add_argument("--lut", default=None, help="Lookup table file to use as the curve")
    gen.add_argument(
        "--app-config",
        default="config.json",
        help="Path to app config (default: config.json)",
    )
    gen.add_argument("--out", default=None, help="Output file (default: stdout)")

    lut = sub.add_parser("parse-lut", help="Validate a lookup table file")
    lut.add_argument("file", help="Path to lookup table text")

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    if args.cmd == "generate":
        sys.exit(run_generate(args))
    elif args.cmd == "parse-lut":
        sys.exit(run_parse_lut(args))
