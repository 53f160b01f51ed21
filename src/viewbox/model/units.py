"""Units - scalar conversion between interface measurement units.

Each unit has a factor relating it to points, read from the interface
service when a conversion happens:

- POINT: 1
- PIXEL: device pixel scale
- PERCENT: screen width / 100
- SCREEN_AREA: screen height / 480
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from ..interface import get_interface
from ..logging import get_logger
from .primitives import Point, Size

if TYPE_CHECKING:
    from .box import Box

logger = get_logger(__name__)


class Unit(Enum):
    """Measurement units for box geometry."""

    POINT = "point"
    PIXEL = "pixel"
    PERCENT = "percent"
    SCREEN_AREA = "screen_area"

    @property
    def to_point(self) -> float:
        """Factor of this unit relative to points under current metrics."""
        interface = get_interface()
        if self is Unit.PIXEL:
            return interface.pixel_scale
        if self is Unit.PERCENT:
            return interface.screen_width / 100.0
        if self is Unit.SCREEN_AREA:
            return interface.screen_height / 480.0
        return 1.0

    def conversion(self, target: Unit) -> float:
        """Multiplier taking a value in this unit to ``target``."""
        return target.to_point / self.to_point

    def convert_value(self, value: float, target: Unit) -> float:
        return value * self.conversion(target)

    def convert_point(self, point: Point, target: Unit) -> Point:
        return point * self.conversion(target)

    def convert_size(self, size: Size, target: Unit) -> Size:
        return size * self.conversion(target)


def convert_box(box: Box, source: Unit, target: Unit) -> Box:
    """Convert a box between units.

    Center and size are both scaled. Results in points are snapped to the
    interface grid so they can be written to a view directly.

    Args:
        box: Box measured in ``source``
        source: Unit of the box
        target: Unit to convert to

    Returns:
        New converted box, or a copy when the units match
    """
    from .box import Box

    if source is target:
        return box.copy()

    conversion = source.conversion(target)
    converted = Box(center=box.center * conversion, size=box.size * conversion)
    logger.debug(
        "box_converted",
        source=source.value,
        target=target.value,
        conversion=conversion,
    )
    return converted.interface if target is Unit.POINT else converted
