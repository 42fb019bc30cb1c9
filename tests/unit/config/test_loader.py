"""Tests for configuration loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError
import pytest

from accelconv.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    load_curve_settings,
)
from accelconv.core.config.models import AppConfig, LoggingConfig
from accelconv.core.curves.models import (
    AccelMode,
    ClassicCurve,
    InputCap,
    PointScaling,
)
from accelconv.core.curves.simplification import DEFAULT_TOLERANCE
from accelconv.core.utils.logging import StructuredJSONFormatter


class TestDetectFormat:
    """Tests for detect_format."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("a.json", "json"), ("a.yaml", "yaml"), ("a.YML", "yaml"), ("dir/a.JSON", "json")],
    )
    def test_known_formats(self, name: str, expected: str) -> None:
        assert detect_format(name) == expected

    def test_unknown_format_raises(self) -> None:
        with pytest.raises(ValueError, match="Unsupported config format"):
            detect_format("curve.toml")


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_json(self, tmp_path: Path) -> None:
        path = tmp_path / "c.json"
        path.write_text(json.dumps({"dpi": 800}))
        assert load_config(path) == {"dpi": 800}

    def test_load_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "c.yaml"
        path.write_text("dpi: 800\ncurve:\n  mode: jump\n")
        assert load_config(path) == {"dpi": 800, "curve": {"mode": "jump"}}

    def test_empty_yaml_is_empty_dict(self, tmp_path: Path) -> None:
        path = tmp_path / "c.yml"
        path.write_text("")
        assert load_config(path) == {}

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "c.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "c.yaml"
        path.write_text("dpi: [800\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_root_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "c.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError, match="must be a mapping"):
            load_config(path)


class TestLoadAppConfig:
    """Tests for load_app_config."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        config = load_app_config(tmp_path / "config.json")
        assert config == AppConfig()
        assert config.logging.level == "INFO"
        assert config.curves.optimize_tolerance == DEFAULT_TOLERANCE

    def test_values_loaded(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(
            "logging:\n  level: DEBUG\n  structured: true\ncurves:\n  optimize_tolerance: 0.01\n"
        )
        config = load_app_config(path)
        assert config.logging.level == "DEBUG"
        assert config.logging.structured is True
        assert config.curves.optimize_tolerance == 0.01

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"future_section": {"a": 1}}))
        assert load_app_config(path) == AppConfig()

    def test_invalid_level_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"logging": {"level": "LOUD"}}))
        with pytest.raises(ValidationError):
            load_app_config(path)

    def test_load_or_default(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"curves": {"optimize_tolerance": 0.5}}))
        assert AppConfig.load_or_default(path).curves.optimize_tolerance == 0.5


class TestLoadCurveSettings:
    """Tests for load_curve_settings."""

    def test_tagged_document(self, tmp_path: Path) -> None:
        path = tmp_path / "curve.yaml"
        path.write_text(
            "dpi: 1600\n"
            "point_scaling: velocity\n"
            "curve:\n"
            "  mode: classic\n"
            "  exponent: 2.5\n"
            "  cap:\n"
            "    kind: input\n"
            "    cap_x: 20\n"
        )
        settings = load_curve_settings(path)
        assert settings.dpi == 1600
        assert settings.point_scaling is PointScaling.VELOCITY
        assert isinstance(settings.curve, ClassicCurve)
        assert settings.curve.exponent == 2.5
        assert isinstance(settings.curve.cap, InputCap)

    def test_flat_editor_document(self, tmp_path: Path) -> None:
        path = tmp_path / "curve.json"
        path.write_text(
            json.dumps({"dpi": 800, "mode": "classic", "exponent_classic": 3.0, "smooth": 0.2})
        )
        settings = load_curve_settings(path)
        assert settings.mode is AccelMode.CLASSIC
        assert settings.curve.exponent == 3.0
        assert settings.optimize_curve is True

    def test_invalid_document_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "curve.json"
        path.write_text(json.dumps({"dpi": -1}))
        with pytest.raises(ValidationError):
            load_curve_settings(path)


class TestConfigureLogging:
    """Tests for configure_logging from app config."""

    def test_level_applied(self) -> None:
        configure_logging(AppConfig(logging=LoggingConfig(level="WARNING")))
        assert logging.getLogger().level == logging.WARNING

    def test_structured_formatter(self) -> None:
        configure_logging(AppConfig(logging=LoggingConfig(structured=True)))
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, StructuredJSONFormatter)

    def test_file_output(self, tmp_path: Path) -> None:
        log_file = tmp_path / "accel.log"
        configure_logging(AppConfig(logging=LoggingConfig(filename=str(log_file))))
        logging.getLogger("accelconv.test").warning("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
