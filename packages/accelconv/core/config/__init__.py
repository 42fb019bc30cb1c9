"""Configuration models and loaders for accelconv."""

from accelconv.core.config.fields import CapType, EditorFields
from accelconv.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    load_curve_settings,
)
from accelconv.core.config.models import AppConfig, CurveEngineConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "CapType",
    "CurveEngineConfig",
    "EditorFields",
    "LoggingConfig",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    "load_curve_settings",
]
