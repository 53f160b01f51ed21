"""viewbox: center-and-size boxes for direction-aware interface layout.

Boxes are read and written through Properties (one scalar) and Anchors (one
point). LEADING and TRAILING positions follow the live layout direction held
by the interface service.

Usage:
    >>> from viewbox import Anchor, Box, Point, Property, Size
    >>> box = Box(center=Point(10, 10), size=Size(20, 10))
    >>> box.setting(Property.LEFT, 5, pinning=Property.RIGHT).width
    15.0
"""

from .base_exceptions import ViewBoxException
from .config import ViewBoxSettings, get_settings, reset_settings
from .config_exceptions import ConfigurationException, InvalidConfigurationException
from .host import HostView, ViewAdapter
from .interface import InterfaceService, LayoutDirection, ScreenMetrics, get_interface
from .model import (
    Anchor,
    Axis,
    Box,
    EdgeInsets,
    Point,
    Property,
    Rect,
    Size,
    Unit,
    convert_box,
    piece,
)

__version__ = "0.1.0"

__all__ = [
    # Geometry
    "Box",
    "Point",
    "Size",
    "Rect",
    "EdgeInsets",
    "Axis",
    "Property",
    "Anchor",
    "Unit",
    "convert_box",
    "piece",
    # Interface context
    "InterfaceService",
    "LayoutDirection",
    "ScreenMetrics",
    "get_interface",
    # Host
    "HostView",
    "ViewAdapter",
    # Configuration
    "ViewBoxSettings",
    "get_settings",
    "reset_settings",
    # Exceptions
    "ViewBoxException",
    "ConfigurationException",
    "InvalidConfigurationException",
]
