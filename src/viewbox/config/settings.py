"""Configuration management for viewbox using pydantic-settings.

Supplies the starting interface metrics (layout direction, tolerance, pixel
scale, screen size) and the logging options. Values come from environment
variables with the ``VIEWBOX_`` prefix or a ``.env`` file.
"""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ViewBoxSettings(BaseSettings):
    """Main configuration settings for viewbox."""

    model_config = SettingsConfigDict(
        env_prefix="VIEWBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Interface settings
    right_to_left: bool = Field(False, description="Lay out in right-to-left interface flow")
    tolerance: float = Field(
        1.0 / 256.0, ge=0.0, description="Default tolerance for near-equality of geometry"
    )
    pixel_scale: float = Field(1.0, ge=1.0, description="Device pixels per point")
    screen_width: float = Field(1920.0, gt=0.0, description="Reference screen width in points")
    screen_height: float = Field(1080.0, gt=0.0, description="Reference screen height in points")

    # Logging settings
    debug_mode: bool = Field(False, description="Enable debug logging")
    log_level: str = Field("INFO", description="Log level when debug mode is off")
    structured_logging: bool = Field(False, description="Render logs as JSON")
    log_file: Path | None = Field(None, description="Optional log file path")


class TestSettings(ViewBoxSettings):
    """Test-specific settings with fixed metrics."""

    model_config = SettingsConfigDict(env_file=".env.test", extra="ignore")

    right_to_left: bool = False
    pixel_scale: float = 2.0
    screen_width: float = 400.0
    screen_height: float = 960.0


# Singleton instance
_settings: ViewBoxSettings | None = None


def get_settings(env: str | None = None) -> ViewBoxSettings:
    """Get the singleton settings instance.

    Args:
        env: Environment name ('test' selects fixed test metrics)

    Returns:
        ViewBoxSettings instance
    """
    global _settings

    if _settings is None:
        env_name = env or os.getenv("VIEWBOX_ENV", "default")
        if env_name == "test":
            _settings = TestSettings()
        else:
            _settings = ViewBoxSettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
