"""Anchor - a two-axis named reference point on a box.

Each anchor pairs a horizontal Property (LEFT, RIGHT, LEADING, TRAILING or
CENTER_X) with a vertical one (TOP, BOTTOM or CENTER_Y). Anchors whose
horizontal part is LEADING or TRAILING are abstract and resolve to concrete
corners or edge midpoints under the current layout direction.
"""

from __future__ import annotations

from enum import Enum

from ..interface import get_interface
from .primitives import Point
from .property import Property


class Anchor(Enum):
    """Named reference points of a box.

    Anchor layout in left-to-right flow:

        TOP_LEFT      CENTER_TOP      TOP_RIGHT
        CENTER_LEFT   CENTER          CENTER_RIGHT
        BOTTOM_LEFT   CENTER_BOTTOM   BOTTOM_RIGHT

    LEADING variants sit on the left and TRAILING variants on the right;
    right-to-left flow mirrors them.
    """

    TOP_LEFT = (Property.LEFT, Property.TOP)
    TOP_RIGHT = (Property.RIGHT, Property.TOP)
    BOTTOM_LEFT = (Property.LEFT, Property.BOTTOM)
    BOTTOM_RIGHT = (Property.RIGHT, Property.BOTTOM)
    TOP_LEADING = (Property.LEADING, Property.TOP)
    TOP_TRAILING = (Property.TRAILING, Property.TOP)
    BOTTOM_LEADING = (Property.LEADING, Property.BOTTOM)
    BOTTOM_TRAILING = (Property.TRAILING, Property.BOTTOM)
    CENTER_LEFT = (Property.LEFT, Property.CENTER_Y)
    CENTER_RIGHT = (Property.RIGHT, Property.CENTER_Y)
    CENTER_TOP = (Property.CENTER_X, Property.TOP)
    CENTER_BOTTOM = (Property.CENTER_X, Property.BOTTOM)
    CENTER_LEADING = (Property.LEADING, Property.CENTER_Y)
    CENTER_TRAILING = (Property.TRAILING, Property.CENTER_Y)
    CENTER = (Property.CENTER_X, Property.CENTER_Y)

    def __init__(self, horizontal: Property, vertical: Property) -> None:
        self.horizontal = horizontal
        self.vertical = vertical

    @classmethod
    def from_properties(cls, horizontal: Property, vertical: Property) -> Anchor | None:
        """Compose an anchor from a horizontal and a vertical property.

        Args:
            horizontal: LEFT, RIGHT, LEADING, TRAILING or CENTER_X
            vertical: TOP, BOTTOM or CENTER_Y

        Returns:
            The matching anchor, or None when the pair is not a valid
            horizontal and vertical position
        """
        return _BY_PROPERTIES.get((horizontal, vertical))

    @property
    def is_abstract(self) -> bool:
        return self.horizontal.is_abstract

    @property
    def is_corner(self) -> bool:
        return self.horizontal is not Property.CENTER_X and self.vertical is not Property.CENTER_Y

    @property
    def is_center(self) -> bool:
        return self is Anchor.CENTER

    @property
    def is_edge(self) -> bool:
        """True for the midpoint of an edge."""
        return (self.horizontal is Property.CENTER_X) != (self.vertical is Property.CENTER_Y)

    @property
    def concrete(self) -> Anchor:
        """Anchor resolved under the current layout direction."""
        return self.resolved(get_interface().is_rtl)

    def resolved(self, right_to_left: bool) -> Anchor:
        """Anchor resolved under an explicit layout direction."""
        if not self.is_abstract:
            return self
        return _BY_PROPERTIES[(self.horizontal.resolved(right_to_left), self.vertical)]

    @property
    def opposite(self) -> Anchor | None:
        """Anchor reflected through the box center.

        Abstract anchors reflect to abstract anchors, so the pairing holds in
        either direction. CENTER has no opposite.
        """
        if self is Anchor.CENTER:
            return None
        return _BY_PROPERTIES[(_OPPOSITES[self.horizontal], _OPPOSITES[self.vertical])]

    @property
    def unit(self) -> Point:
        """Position of the concrete anchor within the unit square."""
        anchor = self.concrete
        return Point(_UNITS[anchor.horizontal], _UNITS[anchor.vertical])


_BY_PROPERTIES: dict[tuple[Property, Property], Anchor] = {
    (anchor.horizontal, anchor.vertical): anchor for anchor in Anchor
}

_OPPOSITES: dict[Property, Property] = {
    Property.LEFT: Property.RIGHT,
    Property.RIGHT: Property.LEFT,
    Property.LEADING: Property.TRAILING,
    Property.TRAILING: Property.LEADING,
    Property.CENTER_X: Property.CENTER_X,
    Property.TOP: Property.BOTTOM,
    Property.BOTTOM: Property.TOP,
    Property.CENTER_Y: Property.CENTER_Y,
}

_UNITS: dict[Property, float] = {
    Property.LEFT: 0.0,
    Property.CENTER_X: 0.5,
    Property.RIGHT: 1.0,
    Property.TOP: 0.0,
    Property.CENTER_Y: 0.5,
    Property.BOTTOM: 1.0,
}
