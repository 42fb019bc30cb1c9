"""Configuration models for accelconv."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from accelconv.core.curves.simplification import DEFAULT_TOLERANCE


class ConfigBase(BaseModel):
    """Base class for file-backed configurations.

    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type."""
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path, or from the default path if None.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config is invalid
        """
        from accelconv.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
        raw = load_config(path)
        return cls.model_validate(raw)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (stdout if None)")


class CurveEngineConfig(BaseModel):
    """Curve engine tuning."""

    optimize_tolerance: float = Field(
        default=DEFAULT_TOLERANCE,
        ge=0.0,
        description="Maximum vertical deviation allowed when optimizing a curve",
    )


class AppConfig(ConfigBase):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")
    logging: LoggingConfig = LoggingConfig()
    curves: CurveEngineConfig = CurveEngineConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("config.json")
