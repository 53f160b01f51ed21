"""Geometric operations for Box.

Set operations over the standardized frames of boxes, so boxes with
negative sizes behave like their mirrored positive equivalents.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .primitives import Point, Rect

if TYPE_CHECKING:
    from .box import Box


def _bounds(x1: float, y1: float, x2: float, y2: float) -> Box:
    from .box_factory import BoxFactory

    return BoxFactory.from_frame(Rect.from_xywh(x1, y1, x2 - x1, y2 - y1))


class BoxGeometry:
    """Geometric operations for boxes."""

    @staticmethod
    def union(box1: Box, box2: Box) -> Box:
        """Get the smallest box containing both boxes.

        Args:
            box1: First box
            box2: Second box

        Returns:
            Union box
        """
        a, b = box1.frame.standardized, box2.frame.standardized
        return _bounds(
            min(a.min_x, b.min_x),
            min(a.min_y, b.min_y),
            max(a.max_x, b.max_x),
            max(a.max_y, b.max_y),
        )

    @staticmethod
    def intersection(box1: Box, box2: Box) -> Box | None:
        """Get the box covered by both boxes.

        Boxes that only touch give a box with zero width or height.

        Args:
            box1: First box
            box2: Second box

        Returns:
            Intersection box or None if the boxes are apart
        """
        a, b = box1.frame.standardized, box2.frame.standardized
        x1 = max(a.min_x, b.min_x)
        y1 = max(a.min_y, b.min_y)
        x2 = min(a.max_x, b.max_x)
        y2 = min(a.max_y, b.max_y)

        if x1 > x2 or y1 > y2:
            return None
        return _bounds(x1, y1, x2, y2)

    @staticmethod
    def intersects(box1: Box, box2: Box) -> bool:
        """Check if the area covered by both boxes is not empty."""
        a, b = box1.frame.standardized, box2.frame.standardized
        return max(a.min_x, b.min_x) < min(a.max_x, b.max_x) and max(a.min_y, b.min_y) < min(
            a.max_y, b.max_y
        )

    @staticmethod
    def contains(box: Box, other: Box) -> bool:
        """Check if a box wholly contains another, edges included."""
        a, b = box.frame.standardized, other.frame.standardized
        return a.min_x <= b.min_x and b.max_x <= a.max_x and a.min_y <= b.min_y and b.max_y <= a.max_y

    @staticmethod
    def contains_point(box: Box, point: Point) -> bool:
        """Check if a point is inside a box.

        The minimum edges are inside and the maximum edges are outside, so
        adjacent boxes never both contain a point.

        Args:
            box: Box to check
            point: Point to check

        Returns:
            True if point is inside
        """
        frame = box.frame.standardized
        return frame.min_x <= point.x < frame.max_x and frame.min_y <= point.y < frame.max_y
