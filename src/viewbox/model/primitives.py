"""Primitive geometry values.

Point, Size, Rect and EdgeInsets are immutable value types shared by every
box computation. Rounding follows the interface conventions: coordinates
round half away from zero, sizes round up.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..interface import get_interface


def round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


def _default_tolerance(tolerance: float | None) -> float:
    return get_interface().tolerance if tolerance is None else tolerance


def _ceil(value: float) -> float:
    return math.ceil(value) if math.isfinite(value) else value


def _floor_half(value: float) -> float:
    return math.floor(value) + 0.5 if math.isfinite(value) else value


def _is_odd(value: float) -> bool:
    if not math.isfinite(value):
        return False
    return math.fmod(abs(value), 2.0) == 1.0


def _piece(dimension: float, value: float) -> float:
    if not math.isfinite(value):
        return dimension
    if value > 0.0:
        return dimension * value if value <= 1.0 else value
    return dimension + value


@dataclass(frozen=True)
class Point:
    """A point in interface coordinates, y growing downward.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
    """

    x: float = 0.0
    y: float = 0.0

    @property
    def integral(self) -> Point:
        """Copy rounded to integer coordinates."""
        return Point(round_half_away(self.x), round_half_away(self.y))

    @property
    def angle(self) -> float:
        """Angle of the point as a vector rotated from the horizontal axis."""
        return math.atan2(self.y, self.x)

    def is_near(self, other: Point, tolerance: float | None = None) -> bool:
        """Check whether both coordinates are within tolerance.

        Args:
            other: Point to compare
            tolerance: Allowed difference per coordinate, defaults to the
                interface tolerance

        Returns:
            True if neither coordinate differs by more than tolerance
        """
        tolerance = _default_tolerance(tolerance)
        return not (abs(other.x - self.x) > tolerance or abs(other.y - self.y) > tolerance)

    def offset(self, dx: float, dy: float = 0.0) -> Point:
        """Copy offset in coordinate space."""
        return Point(self.x + dx, self.y + dy)

    def advance(self, dx: float, dy: float = 0.0) -> Point:
        """Copy moved forward in the interface direction.

        Args:
            dx: Distance toward the trailing side
            dy: Distance down

        Returns:
            Advanced point
        """
        return Point(self.x + (-dx if get_interface().is_rtl else dx), self.y + dy)

    def up(self, dy: float) -> Point:
        return Point(self.x, self.y - dy)

    def down(self, dy: float) -> Point:
        return Point(self.x, self.y + dy)

    def interface_center_for_size(self, size: Size) -> Point:
        """Center such that a box of ``size`` centered here has an integer origin.

        Odd dimensions need a center on a half coordinate, even dimensions a
        center on an integer.

        Args:
            size: Integral size to center

        Returns:
            Adjusted center
        """
        x = _floor_half(self.x) if _is_odd(size.width) else round_half_away(self.x)
        y = _floor_half(self.y) if _is_odd(size.height) else round_half_away(self.y)
        return Point(x, y)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)


@dataclass(frozen=True)
class Size:
    """Width and height of a rectangle.

    Sizes may be zero or negative while a layout is being computed;
    ``is_positive`` tells whether the size describes a visible area.
    """

    width: float = 0.0
    height: float = 0.0

    @classmethod
    def square(cls, side: float) -> Size:
        return cls(side, side)

    @classmethod
    def from_point(cls, point: Point) -> Size:
        return cls(point.x, point.y)

    @property
    def is_positive(self) -> bool:
        """True if both width and height are greater than zero."""
        return self.width > 0 and self.height > 0

    @property
    def minimum(self) -> float:
        return min(self.width, self.height)

    @property
    def maximum(self) -> float:
        return max(self.width, self.height)

    @property
    def integral(self) -> Size:
        """Width and height rounded up to integers.

        Values within the interface tolerance above an integer round down to
        it, so accumulated float error does not add a whole point.
        """
        tolerance = get_interface().tolerance
        return Size(_ceil(self.width - tolerance), _ceil(self.height - tolerance))

    @property
    def even(self) -> Size:
        """Width and height rounded up to even integers."""
        return Size(_ceil(self.width * 0.5) * 2.0, _ceil(self.height * 0.5) * 2.0)

    @property
    def as_point(self) -> Point:
        return Point(self.width, self.height)

    @property
    def center_point(self) -> Point:
        """Center of the size with zero origin."""
        return Point(self.width * 0.5, self.height * 0.5)

    def is_near(self, other: Size, tolerance: float | None = None) -> bool:
        """Check whether both dimensions are within tolerance."""
        tolerance = _default_tolerance(tolerance)
        return not (
            abs(other.width - self.width) > tolerance or abs(other.height - self.height) > tolerance
        )

    def piece(self, width: float, height: float) -> Size:
        """Fractional, relative or absolute piece of this size.

        Per dimension: 0 < v <= 1 is a fraction, v <= 0 shrinks by -v,
        v > 1 is absolute and a non-finite value keeps the whole dimension.

        Args:
            width: Width specifier
            height: Height specifier

        Returns:
            Size of the piece
        """
        return Size(_piece(self.width, width), _piece(self.height, height))

    def __add__(self, other: Size) -> Size:
        return Size(self.width + other.width, self.height + other.height)

    def __sub__(self, other: Size) -> Size:
        return Size(self.width - other.width, self.height - other.height)

    def __mul__(self, other: Size | float) -> Size:
        if isinstance(other, Size):
            return Size(self.width * other.width, self.height * other.height)
        return Size(self.width * other, self.height * other)

    def __rmul__(self, scalar: float) -> Size:
        return Size(self.width * scalar, self.height * scalar)

    def __truediv__(self, other: Size) -> Size:
        return Size(self.width / other.width, self.height / other.height)


@dataclass(frozen=True)
class Rect:
    """Origin and size rectangle as used by host view systems."""

    origin: Point = Point()
    size: Size = Size()

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> Rect:
        return cls(Point(x, y), Size(width, height))

    @classmethod
    def from_center(cls, center: Point, size: Size) -> Rect:
        return cls(Point(center.x - size.width * 0.5, center.y - size.height * 0.5), size)

    @property
    def center(self) -> Point:
        return Point(
            self.origin.x + self.size.width * 0.5, self.origin.y + self.size.height * 0.5
        )

    @property
    def min_x(self) -> float:
        return min(self.origin.x, self.origin.x + self.size.width)

    @property
    def max_x(self) -> float:
        return max(self.origin.x, self.origin.x + self.size.width)

    @property
    def min_y(self) -> float:
        return min(self.origin.y, self.origin.y + self.size.height)

    @property
    def max_y(self) -> float:
        return max(self.origin.y, self.origin.y + self.size.height)

    @property
    def standardized(self) -> Rect:
        """Equivalent rectangle with non-negative width and height."""
        return Rect(
            Point(self.min_x, self.min_y),
            Size(self.max_x - self.min_x, self.max_y - self.min_y),
        )

    @property
    def is_positive(self) -> bool:
        return self.size.is_positive

    @property
    def even_frame(self) -> Rect:
        """Copy with even size and integer center."""
        return Rect.from_center(self.center.integral, self.size.even)

    @property
    def interface_frame(self) -> Rect:
        """Copy with integer size and integer origin."""
        size = self.size.integral
        return Rect.from_center(self.center.interface_center_for_size(size), size)


@dataclass(frozen=True)
class EdgeInsets:
    """Distances to inset each edge of a rectangle."""

    top: float = 0.0
    left: float = 0.0
    bottom: float = 0.0
    right: float = 0.0

    @classmethod
    def uniform(cls, inset: float) -> EdgeInsets:
        return cls(inset, inset, inset, inset)
