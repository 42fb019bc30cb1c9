"""Unit tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from accelconv.cli.main import build_arg_parser, main


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory so no stray config.json is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def classic_config(workdir: Path) -> Path:
    path = workdir / "curve.json"
    path.write_text(
        json.dumps(
            {
                "dpi": 1200,
                "point_count": 16,
                "curve": {"mode": "classic", "cap": {"kind": "output", "acceleration": 0.01}},
            }
        )
    )
    return path


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


def test_parser_generate_defaults() -> None:
    args = build_arg_parser().parse_args(["generate", "curve.yaml"])
    assert args.cmd == "generate"
    assert args.config == "curve.yaml"
    assert args.scaling is None
    assert args.lut is None
    assert args.app_config == "config.json"
    assert args.out is None


def test_parser_rejects_unknown_scaling() -> None:
    with pytest.raises(SystemExit):
        build_arg_parser().parse_args(["generate", "curve.yaml", "--scaling", "bogus"])


def test_generate_writes_output_file(classic_config: Path, workdir: Path) -> None:
    out = workdir / "curve.txt"
    assert _run(["generate", str(classic_config), "--out", str(out)]) == 0
    assert len(json.loads(out.read_text())) == 16


def test_generate_libinput_scaling(classic_config: Path, workdir: Path) -> None:
    out = workdir / "curve.txt"
    assert _run(["generate", str(classic_config), "--scaling", "libinput", "--out", str(out)]) == 0
    assert len(out.read_text().split()) == 64


def test_generate_with_lookup_table(classic_config: Path, workdir: Path) -> None:
    lut = workdir / "table.txt"
    lut.write_text("1,1;\n10,1.5;\n60,2;\n")
    out = workdir / "curve.txt"
    args = ["generate", str(classic_config), "--lut", str(lut), "--scaling", "lookup_sens"]
    assert _run([*args, "--out", str(out)]) == 0
    lines = out.read_text().splitlines()
    assert lines[0] == "0.1,1.0;"
    assert lines[-1] == "60.0,2.0;"


def test_generate_prints_to_stdout(
    classic_config: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(["generate", str(classic_config), "--scaling", "libinput_debug"]) == 0
    assert "steps:" in capsys.readouterr().out


def test_generate_gain_scaling_fails(classic_config: Path) -> None:
    assert _run(["generate", str(classic_config), "--scaling", "gain"]) == 1


def test_generate_missing_config_fails(workdir: Path) -> None:
    assert _run(["generate", str(workdir / "missing.json")]) == 1


def test_generate_invalid_lookup_table_fails(classic_config: Path, workdir: Path) -> None:
    lut = workdir / "table.txt"
    lut.write_text("1,1")
    assert _run(["generate", str(classic_config), "--lut", str(lut)]) == 1


def test_parse_lut_valid(workdir: Path) -> None:
    lut = workdir / "table.txt"
    lut.write_text("1,1;\n10,1.5;\n")
    assert _run(["parse-lut", str(lut)]) == 0


def test_parse_lut_invalid(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    lut = workdir / "table.txt"
    lut.write_text("2,1;\n1,1.5;\n")
    assert _run(["parse-lut", str(lut)]) == 1
    assert "Invalid lookup table" in capsys.readouterr().out
