"""Factory methods for Box creation.

Provides construction from origins, frames, intervals and anchor points.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .primitives import Point, Rect, Size
from .property import Property

if TYPE_CHECKING:
    from .anchor import Anchor
    from .box import Box


def _anchored_center(role: Property, value: float, length: float) -> float:
    """Center along an axis where ``role`` of a span of ``length`` is at ``value``."""
    if role in (Property.CENTER_X, Property.CENTER_Y):
        return value
    if role in (Property.RIGHT, Property.BOTTOM):
        return value - length * 0.5
    return value + length * 0.5


def _span_between(role: Property, point: float, opposite: float) -> tuple[float, float]:
    """(center, length) with ``point`` on the ``role`` side and ``opposite`` across."""
    if role in (Property.LEFT, Property.TOP):
        length = opposite - point
        return point + length * 0.5, length
    if role in (Property.RIGHT, Property.BOTTOM):
        length = point - opposite
        return opposite + length * 0.5, length
    return (point + opposite) * 0.5, abs(point - opposite)


def _span_around(role: Property, point: float, opposite: float) -> tuple[float, float]:
    """Like _span_between, but a center ``point`` stays the center."""
    if role in (Property.CENTER_X, Property.CENTER_Y):
        return point, abs(point - opposite) * 2.0
    return _span_between(role, point, opposite)


class BoxFactory:
    """Factory for creating Box instances."""

    @staticmethod
    def from_origin(origin: Point, size: Size) -> Box:
        from .box import Box

        return Box(
            center=Point(origin.x + size.width * 0.5, origin.y + size.height * 0.5), size=size
        )

    @staticmethod
    def from_xywh(x: float, y: float, width: float, height: float) -> Box:
        """Create Box from origin coordinates and dimensions.

        Args:
            x: Left edge
            y: Top edge
            width: Width
            height: Height

        Returns:
            New Box instance
        """
        return BoxFactory.from_origin(Point(x, y), Size(width, height))

    @staticmethod
    def from_frame(frame: Rect) -> Box:
        return BoxFactory.from_origin(frame.origin, frame.size)

    @staticmethod
    def from_size(size: Size) -> Box:
        """Create Box of a size with its origin at zero."""
        from .box import Box

        return Box(center=size.center_point, size=size)

    @staticmethod
    def from_sides(sides: tuple[float, float], tips: tuple[float, float]) -> Box:
        """Create Box from horizontal and vertical edge intervals.

        Args:
            sides: (start, end) of the horizontal extent, in either order
            tips: (start, end) of the vertical extent, in either order

        Returns:
            New Box instance
        """
        from .box import Box

        return Box(
            center=Point((sides[0] + sides[1]) * 0.5, (tips[0] + tips[1]) * 0.5),
            size=Size(abs(sides[1] - sides[0]), abs(tips[1] - tips[0])),
        )

    @staticmethod
    def from_anchor(anchor: Anchor, point: Point, size: Size) -> Box:
        """Create Box of a size whose anchor lies on a point.

        Args:
            anchor: Anchor to place
            point: Position of the anchor
            size: Box size

        Returns:
            New Box instance
        """
        from .box import Box

        x = _anchored_center(anchor.horizontal.concrete, point.x, size.width)
        y = _anchored_center(anchor.vertical.concrete, point.y, size.height)
        return Box(center=Point(x, y), size=size)

    @staticmethod
    def from_anchor_xy(anchor: Anchor, x: float, y: float, width: float, height: float) -> Box:
        return BoxFactory.from_anchor(anchor, Point(x, y), Size(width, height))

    @staticmethod
    def from_anchor_points(anchor: Anchor, point: Point, opposite: Point) -> Box:
        """Create Box spanning an anchor point and an opposite point.

        The anchor tells which edge ``point`` is on: with LEFT the point is
        the left edge and ``opposite`` the right edge, with RIGHT the
        reverse. A center axis centers the box between the two points.

        Args:
            anchor: Role of ``point``
            point: Anchor position
            opposite: Position across the box

        Returns:
            New Box instance
        """
        from .box import Box

        x, width = _span_between(anchor.horizontal.concrete, point.x, opposite.x)
        y, height = _span_between(anchor.vertical.concrete, point.y, opposite.y)
        return Box(center=Point(x, y), size=Size(width, height))

    @staticmethod
    def from_anchor_coordinates(
        anchor: Anchor, px: float, py: float, ox: float, oy: float
    ) -> Box:
        """Create Box from anchor and opposite coordinates.

        Edge axes behave as in from_anchor_points. A center axis keeps
        ``px``/``py`` as the center and reaches out to the opposite
        coordinate on both sides, so its size is twice the distance.

        Args:
            anchor: Role of (px, py)
            px: Anchor x
            py: Anchor y
            ox: Opposite x
            oy: Opposite y

        Returns:
            New Box instance
        """
        from .box import Box

        x, width = _span_around(anchor.horizontal.concrete, px, ox)
        y, height = _span_around(anchor.vertical.concrete, py, oy)
        return Box(center=Point(x, y), size=Size(width, height))
