"""Pytest configuration and fixtures."""

import pytest

from viewbox.config import reset_settings
from viewbox.interface import InterfaceService


@pytest.fixture(autouse=True)
def fresh_interface(monkeypatch):
    """Give every test default settings and a new interface service."""
    for name in (
        "VIEWBOX_ENV",
        "VIEWBOX_RIGHT_TO_LEFT",
        "VIEWBOX_TOLERANCE",
        "VIEWBOX_PIXEL_SCALE",
        "VIEWBOX_SCREEN_WIDTH",
        "VIEWBOX_SCREEN_HEIGHT",
    ):
        monkeypatch.delenv(name, raising=False)

    reset_settings()
    InterfaceService.reset_instance()
    yield InterfaceService.get_instance()
    reset_settings()
    InterfaceService.reset_instance()


@pytest.fixture
def interface(fresh_interface) -> InterfaceService:
    """Provide the shared interface service."""
    return fresh_interface


@pytest.fixture
def rtl(interface) -> InterfaceService:
    """Switch the interface to right-to-left flow."""
    interface.update(right_to_left=True)
    return interface
