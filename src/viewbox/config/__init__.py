"""Configuration package.

Usage:
    from viewbox.config import get_settings

    settings = get_settings()
    print(settings.tolerance)
"""

from .settings import TestSettings, ViewBoxSettings, get_settings, reset_settings

__all__ = [
    "ViewBoxSettings",
    "TestSettings",
    "get_settings",
    "reset_settings",
]
