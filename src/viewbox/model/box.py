"""Box - a rectangle described by its center and size.

The central value type of viewbox.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .anchor import Anchor
from .box_factory import BoxFactory
from .box_geometry import BoxGeometry
from .box_properties import BoxProperties
from .box_transforms import BoxTransforms
from .piece import piece as _piece
from .primitives import EdgeInsets, Point, Rect, Size
from .property import Property
from .units import Unit, convert_box


def _edge_accessor(prop: Property, doc: str) -> property:
    """Attribute reading a resolved property and moving the box on write."""

    def fget(self: Box) -> float:
        return BoxProperties.value(self, prop.concrete)

    def fset(self: Box, value: float) -> None:
        BoxProperties.assign(self, prop, value)

    return property(fget, fset, doc=doc)


def _anchor_accessor(anchor: Anchor) -> property:
    """Attribute reading an anchor point and moving the box on write."""

    def fget(self: Box) -> Point:
        return BoxProperties.anchor(self, anchor)

    def fset(self: Box, value: Point) -> None:
        BoxProperties.move(self, anchor, value)

    return property(fget, fset, doc=f"{anchor.name.lower()} point; setting it moves the box.")


@dataclass(eq=False)
class Box:
    """A rectangular region of an interface, held as center and size.

    Boxes are read from a host view or frame, transformed, and written
    back. Most operations return a new box; the setters and the
    ``assign_property``, ``move`` and ``trim`` methods change the box in
    place and keep center and size consistent:

    - setting ``origin`` or ``frame`` recomputes the center, keeping size
      (``frame`` takes its size first)
    - setting an edge, center or anchor moves the box, keeping size
    - setting ``width`` or ``height`` resizes around the center

    This class delegates specialized operations to helper classes:
    - BoxProperties: property and anchor reads and writes
    - BoxGeometry: union, intersection, containment
    - BoxTransforms: offset, advance, inset, slice, trim
    - BoxFactory: construction from origins, frames and anchors
    """

    center: Point = field(default_factory=Point)
    """Midpoint of the box."""

    size: Size = field(default_factory=Size)
    """Width and height; may be zero or negative."""

    # Factory methods (delegated to BoxFactory)
    @classmethod
    def from_origin(cls, origin: Point, size: Size) -> Box:
        return BoxFactory.from_origin(origin, size)

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> Box:
        return BoxFactory.from_xywh(x, y, width, height)

    @classmethod
    def from_frame(cls, frame: Rect) -> Box:
        return BoxFactory.from_frame(frame)

    @classmethod
    def from_size(cls, size: Size) -> Box:
        return BoxFactory.from_size(size)

    @classmethod
    def from_sides(cls, sides: tuple[float, float], tips: tuple[float, float]) -> Box:
        return BoxFactory.from_sides(sides, tips)

    @classmethod
    def from_anchor(cls, anchor: Anchor, point: Point, size: Size) -> Box:
        return BoxFactory.from_anchor(anchor, point, size)

    @classmethod
    def from_anchor_xy(
        cls, anchor: Anchor, x: float, y: float, width: float, height: float
    ) -> Box:
        return BoxFactory.from_anchor_xy(anchor, x, y, width, height)

    @classmethod
    def from_anchor_points(cls, anchor: Anchor, point: Point, opposite: Point) -> Box:
        return BoxFactory.from_anchor_points(anchor, point, opposite)

    @classmethod
    def from_anchor_coordinates(
        cls, anchor: Anchor, px: float, py: float, ox: float, oy: float
    ) -> Box:
        return BoxFactory.from_anchor_coordinates(anchor, px, py, ox, oy)

    # Frame representation
    @property
    def origin(self) -> Point:
        """Top-left corner as in a frame."""
        return Point(self.center.x - self.size.width * 0.5, self.center.y - self.size.height * 0.5)

    @origin.setter
    def origin(self, value: Point) -> None:
        self.center = Point(value.x + self.size.width * 0.5, value.y + self.size.height * 0.5)

    @property
    def frame(self) -> Rect:
        return Rect(self.origin, self.size)

    @frame.setter
    def frame(self, value: Rect) -> None:
        self.size = value.size
        self.origin = value.origin

    @property
    def even_frame(self) -> Rect:
        """Frame with even size and integer center."""
        return Rect.from_center(self.center.integral, self.size.even)

    @even_frame.setter
    def even_frame(self, value: Rect) -> None:
        self.size = value.size.even
        self.center = value.center.integral

    @property
    def interface_frame(self) -> Rect:
        """Frame with integer size and integer origin."""
        size = self.size.integral
        return Rect.from_center(self.center.interface_center_for_size(size), size)

    @interface_frame.setter
    def interface_frame(self, value: Rect) -> None:
        self.size = value.size.integral
        self.center = value.center.interface_center_for_size(self.size)

    # Rounding variants
    @property
    def integral(self) -> Box:
        """Copy with the center rounded to integers, size kept."""
        return Box(center=self.center.integral, size=self.size)

    @property
    def even(self) -> Box:
        """Copy with integer center and size rounded up to even integers."""
        return Box(center=self.center.integral, size=self.size.even)

    @property
    def interface(self) -> Box:
        """Copy with size rounded up to integers and an integer origin."""
        size = self.size.integral
        return Box(center=self.center.interface_center_for_size(size), size=size)

    @property
    def is_positive(self) -> bool:
        """True if width and height are greater than zero."""
        return self.size.is_positive

    # Edges and dimensions
    width = _edge_accessor(Property.WIDTH, "Width; setting it resizes around the center.")
    height = _edge_accessor(Property.HEIGHT, "Height; setting it resizes around the center.")
    left = _edge_accessor(Property.LEFT, "Left edge; setting it moves the box.")
    right = _edge_accessor(Property.RIGHT, "Right edge; setting it moves the box.")
    top = _edge_accessor(Property.TOP, "Top edge; setting it moves the box.")
    bottom = _edge_accessor(Property.BOTTOM, "Bottom edge; setting it moves the box.")
    leading = _edge_accessor(Property.LEADING, "Edge where interface flow starts.")
    trailing = _edge_accessor(Property.TRAILING, "Edge where interface flow ends.")

    @property
    def sides(self) -> tuple[float, float]:
        """Left and right edges."""
        return (self.left, self.right)

    @sides.setter
    def sides(self, value: tuple[float, float]) -> None:
        self.center = Point((value[0] + value[1]) * 0.5, self.center.y)
        self.size = Size(abs(value[1] - value[0]), self.size.height)

    @property
    def tips(self) -> tuple[float, float]:
        """Top and bottom edges."""
        return (self.top, self.bottom)

    @tips.setter
    def tips(self, value: tuple[float, float]) -> None:
        self.center = Point(self.center.x, (value[0] + value[1]) * 0.5)
        self.size = Size(self.size.width, abs(value[1] - value[0]))

    # Anchor points
    top_left = _anchor_accessor(Anchor.TOP_LEFT)
    top_right = _anchor_accessor(Anchor.TOP_RIGHT)
    bottom_left = _anchor_accessor(Anchor.BOTTOM_LEFT)
    bottom_right = _anchor_accessor(Anchor.BOTTOM_RIGHT)
    top_leading = _anchor_accessor(Anchor.TOP_LEADING)
    top_trailing = _anchor_accessor(Anchor.TOP_TRAILING)
    bottom_leading = _anchor_accessor(Anchor.BOTTOM_LEADING)
    bottom_trailing = _anchor_accessor(Anchor.BOTTOM_TRAILING)
    center_left = _anchor_accessor(Anchor.CENTER_LEFT)
    center_right = _anchor_accessor(Anchor.CENTER_RIGHT)
    center_top = _anchor_accessor(Anchor.CENTER_TOP)
    center_bottom = _anchor_accessor(Anchor.CENTER_BOTTOM)
    center_leading = _anchor_accessor(Anchor.CENTER_LEADING)
    center_trailing = _anchor_accessor(Anchor.CENTER_TRAILING)

    # Property operations (delegated to BoxProperties)
    def get_property(self, prop: Property) -> float:
        """Get the scalar a property names.

        LEADING and TRAILING read as 0.0 through this getter; use the
        ``leading``/``trailing`` attributes or an anchor for the resolved edge.

        Args:
            prop: Property to read

        Returns:
            Scalar value
        """
        return BoxProperties.value(self, prop)

    def assign_property(
        self, prop: Property, value: float, pinning: Property | None = None
    ) -> None:
        """Assign a property in place, optionally pinning a related property.

        Args:
            prop: Property to assign
            value: New value
            pinning: Property on the same axis to hold fixed
        """
        BoxProperties.assign(self, prop, value, pinning)

    def setting(self, prop: Property, value: float, pinning: Property | None = None) -> Box:
        """Copy with one property assigned.

        Args:
            prop: Property to assign
            value: New value
            pinning: Property on the same axis to hold fixed

        Returns:
            New box
        """
        result = self.copy()
        BoxProperties.assign(result, prop, value, pinning)
        return result

    def setting_all(self, entries: Iterable[tuple[Property, float]]) -> Box:
        """Copy with several properties assigned, each pinning the next on its axis."""
        return BoxProperties.setting_all(self, entries)

    # Anchor operations (delegated to BoxProperties)
    def anchor(self, anchor: Anchor) -> Point:
        """Get the point an anchor names."""
        return BoxProperties.anchor(self, anchor)

    def move(self, anchor: Anchor, to: Point) -> None:
        """Move in place so ``anchor`` lands on ``to``, keeping size."""
        BoxProperties.move(self, anchor, to)

    def moving(self, anchor: Anchor, to: Point) -> Box:
        """Copy moved so ``anchor`` lands on ``to``, keeping size."""
        result = self.copy()
        BoxProperties.move(result, anchor, to)
        return result

    def with_anchor(self, anchor: Anchor, at: Point) -> Box:
        """Copy resized so ``anchor`` lands on ``at`` with opposite edges fixed."""
        return BoxProperties.with_anchor(self, anchor, at)

    def piece(self, anchor: Anchor, x: float, y: float, width: float, height: float) -> Box:
        """Extract a sub-box positioned relative to an anchor.

        Args:
            anchor: Reference anchor
            x: Horizontal position specifier
            y: Vertical position specifier
            width: Width specifier
            height: Height specifier

        Returns:
            New box for the piece
        """
        return _piece(self, anchor, x, y, width, height)

    # Transformation operations (delegated to BoxTransforms)
    def offset(self, dx: float, dy: float = 0.0) -> Box:
        return BoxTransforms.offset(self, dx, dy)

    def advance(self, dx: float, dy: float = 0.0) -> Box:
        """Copy moved forward in the interface direction."""
        return BoxTransforms.advance(self, dx, dy)

    def down(self, dy: float) -> Box:
        return BoxTransforms.offset(self, 0.0, dy)

    def scaled(self, sx: float, sy: float) -> Box:
        return BoxTransforms.scaled(self, sx, sy)

    def inset(self, dx: float, dy: float) -> Box:
        return BoxTransforms.inset(self, dx, dy)

    def inset_edges(self, insets: EdgeInsets) -> Box:
        return BoxTransforms.inset_edges(self, insets)

    def resized_by(self, adjust: Size) -> Box:
        return BoxTransforms.resized_by(self, adjust)

    def slice(self, distance: float, edge: Property) -> Box:
        """Copy of the strip ``distance`` deep along ``edge``."""
        return BoxTransforms.slice(self, distance, edge)

    def trim(self, edge: Property, amount: float) -> None:
        """Shift an edge inward by ``amount`` in place, opposite edge fixed."""
        BoxTransforms.trim(self, edge, amount)

    def trim_to(self, edge: Property, value: float) -> None:
        """Shift an edge to ``value`` in place, opposite edge fixed."""
        BoxTransforms.trim_to(self, edge, value)

    def trimming(self, edge: Property, amount: float) -> Box:
        result = self.copy()
        BoxTransforms.trim(result, edge, amount)
        return result

    def trimming_to(self, edge: Property, value: float) -> Box:
        result = self.copy()
        BoxTransforms.trim_to(result, edge, value)
        return result

    # Geometry operations (delegated to BoxGeometry)
    def union(self, other: Box) -> Box:
        return BoxGeometry.union(self, other)

    def intersection(self, other: Box) -> Box | None:
        return BoxGeometry.intersection(self, other)

    def intersects(self, other: Box) -> bool:
        return BoxGeometry.intersects(self, other)

    def contains(self, other: Box) -> bool:
        return BoxGeometry.contains(self, other)

    def contains_point(self, point: Point) -> bool:
        return BoxGeometry.contains_point(self, point)

    # Units
    def convert(self, source: Unit, target: Unit) -> Box:
        """Copy converted from ``source`` units to ``target`` units."""
        return convert_box(self, source, target)

    # Comparison
    def is_near(self, other: Box, tolerance: float | None = None) -> bool:
        """Check whether center and size match within tolerance per coordinate.

        Args:
            other: Box to compare
            tolerance: Allowed difference, defaults to the interface tolerance

        Returns:
            True if no coordinate differs by more than tolerance
        """
        return self.center.is_near(other.center, tolerance) and self.size.is_near(
            other.size, tolerance
        )

    def matches(self, other: Box) -> bool:
        """Check near-equality with the interface tolerance."""
        return self.is_near(other)

    def copy(self) -> Box:
        return Box(center=self.center, size=self.size)

    # Dunder methods
    def __eq__(self, other: object) -> bool:
        """Check exact equality.

        Coordinates are compared as "not farther apart than zero", so a NaN
        coordinate never counts as a difference: a box with a NaN center
        equals any box of the same size.
        """
        if not isinstance(other, Box):
            return NotImplemented
        return self.is_near(other, 0.0)

    def __str__(self) -> str:
        """String representation."""
        return (
            f"Box(center {self.center.x:g},{self.center.y:g} "
            f"size {self.size.width:g}x{self.size.height:g})"
        )
