"""Configuration exceptions.

Raised when host code pushes interface metrics that no box computation can
use, such as a pixel scale below one or an empty screen.
"""

from .base_exceptions import ViewBoxException


class ConfigurationException(ViewBoxException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when a configuration value is invalid."""

    def __init__(self, config_key: str, reason: str, **kwargs) -> None:
        """Initialize with config details."""
        super().__init__(
            f"Invalid configuration for '{config_key}': {reason}",
            error_code="INVALID_CONFIG",
            context={"config_key": config_key, "reason": reason, **kwargs},
        )
