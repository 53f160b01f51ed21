"""Property and anchor access for Box.

Reads and writes single scalars (Property) and points (Anchor) while
keeping the box's center and size consistent.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .primitives import Point, Size
from .property import Axis, Property

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .anchor import Anchor
    from .box import Box


class _Role(Enum):
    """Role of a concrete property along its axis."""

    LOW = "low"
    HIGH = "high"
    CENTER = "center"
    LENGTH = "length"


_ROLES: dict[Property, _Role] = {
    Property.LEFT: _Role.LOW,
    Property.TOP: _Role.LOW,
    Property.RIGHT: _Role.HIGH,
    Property.BOTTOM: _Role.HIGH,
    Property.CENTER_X: _Role.CENTER,
    Property.CENTER_Y: _Role.CENTER,
    Property.WIDTH: _Role.LENGTH,
    Property.HEIGHT: _Role.LENGTH,
}


def _axis_value(center: float, length: float, role: _Role) -> float:
    if role is _Role.LOW:
        return center - length * 0.5
    if role is _Role.HIGH:
        return center + length * 0.5
    if role is _Role.CENTER:
        return center
    return length


def _assign_axis(
    center: float, length: float, role: _Role, pin: _Role | None, value: float
) -> tuple[float, float]:
    """Assign one role on an axis, returning the new (center, length)."""
    low = center - length * 0.5
    high = center + length * 0.5

    if role is _Role.LOW:
        if pin is _Role.HIGH:
            length = high - value
        elif pin is _Role.CENTER:
            length = (center - value) * 2.0
        return value + length * 0.5, length

    if role is _Role.HIGH:
        if pin is _Role.LOW:
            length = value - low
        elif pin is _Role.CENTER:
            length = (value - center) * 2.0
        return value - length * 0.5, length

    if role is _Role.CENTER:
        if pin is _Role.LOW:
            length = (value - low) * 2.0
        elif pin is _Role.HIGH:
            length = (high - value) * 2.0
        return value, length

    if pin is _Role.LOW:
        center += (value - length) * 0.5
    elif pin is _Role.HIGH:
        center -= (value - length) * 0.5
    return center, value


class BoxProperties:
    """Property and anchor operations for boxes."""

    @staticmethod
    def value(box: Box, prop: Property) -> float:
        """Get the scalar a property names.

        LEADING and TRAILING read as 0.0 here. They are meant to be used
        through anchors or resolved with ``concrete`` first.

        Args:
            box: Box to read
            prop: Property to read

        Returns:
            Scalar value of the property
        """
        role = _ROLES.get(prop)
        if role is None:
            return 0.0
        if prop.is_vertical:
            return _axis_value(box.center.y, box.size.height, role)
        return _axis_value(box.center.x, box.size.width, role)

    @staticmethod
    def assign(box: Box, prop: Property, value: float, pinning: Property | None = None) -> None:
        """Assign a value to a property, optionally pinning a related property.

        Both properties are resolved to concrete form first. A pin on the
        opposite edge or the center of the same axis makes the size absorb
        the change. Without a pin, or when the pin is the property itself,
        the center moves and the size is kept. Pins on the other axis are
        ignored.

        Args:
            box: Box to modify in place
            prop: Property to assign
            value: New value
            pinning: Property to hold fixed
        """
        prop = prop.concrete
        pin = pinning.concrete if pinning is not None else None
        role = _ROLES[prop]
        pin_role = _ROLES[pin] if pin is not None and pin.axis is prop.axis else None

        if prop.is_vertical:
            cy, height = _assign_axis(box.center.y, box.size.height, role, pin_role, value)
            box.center = Point(box.center.x, cy)
            box.size = Size(box.size.width, height)
        else:
            cx, width = _assign_axis(box.center.x, box.size.width, role, pin_role, value)
            box.center = Point(cx, box.center.y)
            box.size = Size(width, box.size.height)

    @staticmethod
    def setting_all(box: Box, entries: Iterable[tuple[Property, float]]) -> Box:
        """Copy of a box with several properties assigned in order.

        The last position property assigned on an axis pins the next
        assignment on that axis, so setting LEFT then WIDTH grows the box
        from the new left edge.

        Args:
            box: Source box
            entries: (property, value) pairs

        Returns:
            New box
        """
        result = box.copy()
        prior: dict[Axis, Property | None] = {Axis.HORIZONTAL: None, Axis.VERTICAL: None}

        for prop, value in entries:
            concrete = prop.concrete
            pin = prior[concrete.axis]
            if concrete.is_position:
                prior[concrete.axis] = concrete
            BoxProperties.assign(result, concrete, value, pin)

        return result

    @staticmethod
    def anchor(box: Box, anchor: Anchor) -> Point:
        """Get the point an anchor names, resolving each axis."""
        return Point(
            BoxProperties.value(box, anchor.horizontal.concrete),
            BoxProperties.value(box, anchor.vertical.concrete),
        )

    @staticmethod
    def move(box: Box, anchor: Anchor, to: Point) -> None:
        """Move a box so its anchor lands on a point, keeping its size."""
        BoxProperties.assign(box, anchor.horizontal, to.x)
        BoxProperties.assign(box, anchor.vertical, to.y)

    @staticmethod
    def with_anchor(box: Box, anchor: Anchor, at: Point) -> Box:
        """Copy of a box resized so an anchor lands on a point.

        Edges named by the anchor move to the point while the opposite edges
        stay fixed. A center axis keeps its size and recenters on the point.

        Args:
            box: Source box
            anchor: Anchor to move
            at: New anchor position

        Returns:
            New box
        """
        from .box import Box

        horizontal = anchor.horizontal.concrete
        vertical = anchor.vertical.concrete

        if horizontal is Property.LEFT:
            width = box.right - at.x
            x = at.x + width * 0.5
        elif horizontal is Property.RIGHT:
            width = at.x - box.left
            x = at.x - width * 0.5
        else:
            width = box.size.width
            x = at.x

        if vertical is Property.TOP:
            height = box.bottom - at.y
            y = at.y + height * 0.5
        elif vertical is Property.BOTTOM:
            height = at.y - box.top
            y = at.y - height * 0.5
        else:
            height = box.size.height
            y = at.y

        return Box(center=Point(x, y), size=Size(width, height))
