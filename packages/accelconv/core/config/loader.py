"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from accelconv.core.config.fields import EditorFields
from accelconv.core.config.models import AppConfig
from accelconv.core.curves.models import AccelSettings
from accelconv.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

_DEFAULT_APP_CONFIG_PATH = Path("config.json")


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("curve.json")
        'json'
        >>> detect_format("curve.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Format is auto-detected from the file extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                # safe_load returns None for empty files
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(content, dict):
        raise ValueError(f"Config root in {path} must be a mapping, got {type(content).__name__}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Args:
        path: Path to app config file. Defaults to config.json

    Returns:
        Validated AppConfig; all defaults when the file does not exist

    Raises:
        ValidationError: If config is invalid
    """
    if path is None:
        path = _DEFAULT_APP_CONFIG_PATH

    if Path(path).exists():
        return AppConfig.model_validate(load_config(path))

    logger.debug("No app config at %s, using defaults", path)
    return AppConfig()


def load_curve_settings(path: str | Path) -> AccelSettings:
    """Load a curve parameter bundle.

    Two layouts are accepted. A tagged document nests the mode's parameters
    under ``curve``::

        dpi: 1600
        curve:
          mode: classic
          exponent: 2.5

    A flat editor document keeps every field at the top level, selected by a
    top-level ``mode`` (see ``EditorFields``)::

        dpi: 1600
        mode: classic
        exponent_classic: 2.5

    Args:
        path: Path to the settings file (.json, .yaml, or .yml)

    Returns:
        Validated AccelSettings

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be parsed
        ValidationError: If the settings are invalid
    """
    raw = load_config(path)
    if "mode" in raw:
        logger.debug("Loading %s as editor fields", path)
        return EditorFields.model_validate(raw).to_settings()
    return AccelSettings.model_validate(raw)


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )
