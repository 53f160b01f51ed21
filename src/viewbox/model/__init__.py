"""Model package.

Geometry value types: primitives, the center-and-size Box, and the
Property and Anchor codes used to read and write it.
"""

from .anchor import Anchor
from .box import Box
from .box_factory import BoxFactory
from .box_geometry import BoxGeometry
from .box_properties import BoxProperties
from .box_transforms import BoxTransforms
from .piece import piece
from .primitives import EdgeInsets, Point, Rect, Size, round_half_away
from .property import Axis, Property
from .units import Unit, convert_box

__all__ = [
    # Primitives
    "Point",
    "Size",
    "Rect",
    "EdgeInsets",
    "round_half_away",
    # Box
    "Box",
    "BoxFactory",
    "BoxGeometry",
    "BoxProperties",
    "BoxTransforms",
    "piece",
    # Codes
    "Axis",
    "Property",
    "Anchor",
    # Units
    "Unit",
    "convert_box",
]
