"""Transformation operations for Box.

Handles offsetting, scaling, insetting, slicing and edge trimming. Every
operation returns a new box except the in-place trims.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..interface import get_interface
from .primitives import EdgeInsets, Point, Size
from .property import Property

if TYPE_CHECKING:
    from .box import Box


class BoxTransforms:
    """Transformation operations for boxes."""

    @staticmethod
    def offset(box: Box, dx: float, dy: float = 0.0) -> Box:
        """Copy with the center offset in coordinate space.

        Args:
            box: Box to offset
            dx: X offset
            dy: Y offset

        Returns:
            New offset box
        """
        from .box import Box

        return Box(center=box.center.offset(dx, dy), size=box.size)

    @staticmethod
    def advance(box: Box, dx: float, dy: float = 0.0) -> Box:
        """Copy moved forward in the interface direction.

        Positive ``dx`` moves toward the trailing side: right in
        left-to-right flow, left in right-to-left flow.

        Args:
            box: Box to move
            dx: Distance toward the trailing side
            dy: Distance down

        Returns:
            New advanced box
        """
        return BoxTransforms.offset(box, -dx if get_interface().is_rtl else dx, dy)

    @staticmethod
    def scaled(box: Box, sx: float, sy: float) -> Box:
        """Copy with size scaled around the center."""
        from .box import Box

        return Box(center=box.center, size=Size(box.size.width * sx, box.size.height * sy))

    @staticmethod
    def inset(box: Box, dx: float, dy: float) -> Box:
        """Copy with both sides of each axis moved inward."""
        from .box import Box

        return Box(
            center=box.center, size=Size(box.size.width - dx * 2.0, box.size.height - dy * 2.0)
        )

    @staticmethod
    def inset_edges(box: Box, insets: EdgeInsets) -> Box:
        """Copy with each edge moved inward by its own inset.

        Args:
            box: Box to inset
            insets: Inset per edge

        Returns:
            New inset box
        """
        from .box import Box

        size = Size(
            box.size.width - insets.left - insets.right,
            box.size.height - insets.top - insets.bottom,
        )
        center = Point(
            box.center.x + (insets.left - insets.right) * 0.5,
            box.center.y + (insets.top - insets.bottom) * 0.5,
        )
        return Box(center=center, size=size)

    @staticmethod
    def resized_by(box: Box, adjust: Size) -> Box:
        """Copy with size adjusted around the center."""
        from .box import Box

        return Box(center=box.center, size=box.size + adjust)

    @staticmethod
    def slice(box: Box, distance: float, edge: Property) -> Box:
        """Copy of the strip of a box along one edge.

        The distance is clamped to the box's extent on that axis. Properties
        that are not edges return an unchanged copy.

        Args:
            box: Box to slice
            distance: Depth of the strip
            edge: Edge the strip starts from

        Returns:
            New box covering the strip
        """
        from .box import Box

        edge = edge.concrete
        frame = box.frame.standardized
        width, height = frame.size.width, frame.size.height
        cx, cy = frame.center.x, frame.center.y

        if edge in (Property.LEFT, Property.RIGHT):
            amount = min(max(distance, 0.0), width)
            offset = (width - amount) * 0.5
            cx = cx - offset if edge is Property.LEFT else cx + offset
            width = amount
        elif edge in (Property.TOP, Property.BOTTOM):
            amount = min(max(distance, 0.0), height)
            offset = (height - amount) * 0.5
            cy = cy - offset if edge is Property.TOP else cy + offset
            height = amount

        return Box(center=Point(cx, cy), size=Size(width, height))

    @staticmethod
    def trim(box: Box, edge: Property, amount: float) -> None:
        """Shift an edge inward by an amount, in place.

        The opposite edge stays fixed: size shrinks by ``amount`` and the
        center moves half of it. Negative amounts grow the box. Centers and
        dimensions are ignored.

        Args:
            box: Box to modify
            edge: Edge to shift, abstract edges resolved first
            amount: Distance to move inward
        """
        cx, cy = box.center.x, box.center.y
        width, height = box.size.width, box.size.height
        edge = edge.concrete

        if edge is Property.LEFT:
            cx += amount * 0.5
            width -= amount
        elif edge is Property.RIGHT:
            cx -= amount * 0.5
            width -= amount
        elif edge is Property.TOP:
            cy += amount * 0.5
            height -= amount
        elif edge is Property.BOTTOM:
            cy -= amount * 0.5
            height -= amount
        else:
            return

        box.center = Point(cx, cy)
        box.size = Size(width, height)

    @staticmethod
    def trim_to(box: Box, edge: Property, value: float) -> None:
        """Shift an edge to a position, in place, keeping the opposite edge.

        Args:
            box: Box to modify
            edge: Edge to shift, abstract edges resolved first
            value: New position of the edge
        """
        cx, cy = box.center.x, box.center.y
        width, height = box.size.width, box.size.height
        edge = edge.concrete

        if edge is Property.LEFT:
            width = cx + width * 0.5 - value
            cx = value + width * 0.5
        elif edge is Property.RIGHT:
            width = value - cx + width * 0.5
            cx = value - width * 0.5
        elif edge is Property.TOP:
            height = cy + height * 0.5 - value
            cy = value + height * 0.5
        elif edge is Property.BOTTOM:
            height = value - cy + height * 0.5
            cy = value - height * 0.5
        else:
            return

        box.center = Point(cx, cy)
        box.size = Size(width, height)
