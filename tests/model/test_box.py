"""Tests for Box construction, properties and anchors."""

import math

import pytest

from viewbox.model import Anchor, Box, Point, Property, Rect, Size, Unit


@pytest.fixture
def box() -> Box:
    """Box centered at (10, 10) with size (20, 10)."""
    return Box(center=Point(10, 10), size=Size(20, 10))


class TestBoxConstruction:
    """Test Box factories."""

    def test_default(self) -> None:
        """Test the zero box."""
        assert Box() == Box(center=Point(0, 0), size=Size(0, 0))

    def test_from_xywh(self) -> None:
        """Test creation from origin and dimensions."""
        result = Box.from_xywh(0, 0, 20, 10)
        assert result.center == Point(10, 5)
        assert result.size == Size(20, 10)

    def test_from_frame(self) -> None:
        """Test creation from a frame."""
        result = Box.from_frame(Rect.from_xywh(10, 20, 30, 40))
        assert result.origin == Point(10, 20)
        assert result.size == Size(30, 40)

    def test_from_size(self) -> None:
        """Test creation with origin at zero."""
        assert Box.from_size(Size(4, 6)).center == Point(2, 3)

    def test_from_sides(self) -> None:
        """Test creation from edge intervals in any order."""
        result = Box.from_sides((20, 0), (5, 15))
        assert result.center == Point(10, 10)
        assert result.size == Size(20, 10)

    def test_from_anchor(self) -> None:
        """Test that the anchor lands on the point."""
        result = Box.from_anchor(Anchor.BOTTOM_RIGHT, Point(100, 50), Size(20, 10))
        assert result.bottom_right == Point(100, 50)
        assert result.size == Size(20, 10)

    @pytest.mark.parametrize("right_to_left", [False, True])
    def test_from_anchor_places_every_anchor(self, interface, right_to_left) -> None:
        """Test that the constructed anchor lands on the point in either flow."""
        interface.update(right_to_left=right_to_left)
        point = Point(7, -3)
        for anchor in Anchor:
            assert Box.from_anchor(anchor, point, Size(12, 8)).anchor(anchor) == point

    def test_from_anchor_xy_leading(self, interface) -> None:
        """Test abstract anchors resolve when constructing."""
        interface.update(right_to_left=True)
        result = Box.from_anchor_xy(Anchor.TOP_LEADING, 100, 0, 20, 10)
        assert result.top_right == Point(100, 0)

    def test_from_anchor_points(self) -> None:
        """Test spanning between an anchor point and the opposite point."""
        result = Box.from_anchor_points(Anchor.BOTTOM_RIGHT, Point(20, 15), Point(0, 5))
        assert result == Box(center=Point(10, 10), size=Size(20, 10))

    def test_from_anchor_points_center_axis(self) -> None:
        """Test that a center axis spans the midpoint of both points."""
        result = Box.from_anchor_points(Anchor.CENTER_TOP, Point(0, 0), Point(10, 10))
        assert result == Box(center=Point(5, 5), size=Size(10, 10))

    def test_from_anchor_coordinates_center_axis(self) -> None:
        """Test that a center coordinate stays the center."""
        result = Box.from_anchor_coordinates(Anchor.CENTER_LEFT, 0, 10, 20, 4)
        assert result == Box(center=Point(10, 10), size=Size(20, 12))


class TestBoxFrame:
    """Test frame representation."""

    def test_origin(self, box) -> None:
        """Test origin derived from center and size."""
        assert box.origin == Point(0, 5)

    def test_set_origin_keeps_size(self, box) -> None:
        """Test that setting origin moves the box."""
        box.origin = Point(100, 200)
        assert box.center == Point(110, 205)
        assert box.size == Size(20, 10)

    def test_frame_round_trip(self, box) -> None:
        """Test that a frame written then read is unchanged."""
        frame = Rect.from_xywh(-3.5, 7.25, 12, 6.5)
        box.frame = frame
        assert box.frame == frame

    def test_set_frame_takes_size_first(self, box) -> None:
        """Test that setting frame replaces size then origin."""
        box.frame = Rect.from_xywh(0, 0, 4, 4)
        assert box.center == Point(2, 2)

    def test_interface_frame(self) -> None:
        """Test integer-aligned frame."""
        result = Box.from_xywh(0.2, 0.2, 10.5, 9.5)
        frame = result.interface_frame
        assert frame.size == Size(11, 10)
        assert frame.origin.x.is_integer()
        assert frame.origin.y.is_integer()

    def test_set_even_frame(self) -> None:
        """Test setting a frame rounded to even size."""
        result = Box()
        result.even_frame = Rect.from_xywh(0, 0, 11, 11)
        assert result.size == Size(12, 12)
        assert result.center == Point(6, 6)


class TestBoxRounding:
    """Test rounding variants."""

    def test_integral_rounds_center_only(self) -> None:
        """Test integral keeps the size."""
        result = Box.from_xywh(0, 0, 11, 11).integral
        assert result.center == Point(6, 6)
        assert result.size == Size(11, 11)

    def test_even(self) -> None:
        """Test even size with integer center."""
        result = Box.from_xywh(0, 0, 11, 11).even
        assert result.size == Size(12, 12)
        assert result.center == Point(6, 6)

    def test_interface_has_integer_origin(self) -> None:
        """Test interface rounding for odd and even sizes."""
        result = Box(center=Point(3.3, 7.7), size=Size(4.5, 6)).interface
        assert result.size == Size(5, 6)
        assert result.origin.x.is_integer()
        assert result.origin.y.is_integer()

    def test_interface_non_finite(self) -> None:
        """Test that NaN and infinite values pass through interface rounding."""
        result = Box(center=Point(math.nan, 0), size=Size(math.inf, 10)).interface
        assert math.isnan(result.center.x)
        assert result.center.y == 0
        assert result.size.width == math.inf
        assert result.size.height == 10

    def test_integral_and_even_non_finite(self) -> None:
        """Test that NaN and infinite values pass through integral and even."""
        box = Box(center=Point(math.nan, 0.4), size=Size(math.inf, 11))
        integral = box.integral
        even = box.even
        assert math.isnan(integral.center.x)
        assert integral.center.y == 0
        assert even.size == Size(math.inf, 12)
        assert box.interface_frame.size == Size(math.inf, 11)

    def test_convert_to_points_non_finite(self) -> None:
        """Test that conversion to points accepts an infinite size."""
        result = Box(size=Size(math.inf, 10)).convert(Unit.PIXEL, Unit.POINT)
        assert result.size == Size(math.inf, 10)
        assert result.center == Point(0, 0)

    def test_is_positive(self) -> None:
        """Test visible area."""
        assert Box.from_xywh(0, 0, 1, 1).is_positive
        assert not Box.from_xywh(0, 0, 0, 1).is_positive


class TestBoxEdges:
    """Test edge and dimension attributes."""

    def test_edges(self, box) -> None:
        """Test edges derived from center and size."""
        assert box.left == 0
        assert box.right == 20
        assert box.top == 5
        assert box.bottom == 15
        assert box.sides == (0, 20)
        assert box.tips == (5, 15)

    def test_leading_trailing_left_to_right(self, box) -> None:
        """Test abstract edges in left-to-right flow."""
        assert box.leading == 0
        assert box.trailing == 20

    def test_leading_trailing_right_to_left(self, box, rtl) -> None:
        """Test abstract edges in right-to-left flow."""
        assert box.leading == 20
        assert box.trailing == 0

    def test_set_edge_moves_box(self, box) -> None:
        """Test that setting an edge keeps size."""
        box.left = 5
        assert box.center == Point(15, 10)
        assert box.size == Size(20, 10)

    def test_set_width_keeps_center(self, box) -> None:
        """Test that setting width resizes around the center."""
        box.width = 40
        assert box.center == Point(10, 10)
        assert box.left == -10

    def test_set_trailing_right_to_left(self, box, rtl) -> None:
        """Test setting an abstract edge in right-to-left flow."""
        box.trailing = 100
        assert box.left == 100

    def test_set_sides_and_tips(self, box) -> None:
        """Test setting both edges of an axis."""
        box.sides = (30, 0)
        box.tips = (0, 40)
        assert box.center == Point(15, 20)
        assert box.size == Size(30, 40)


class TestBoxProperties:
    """Test property reads and writes."""

    @pytest.mark.parametrize(
        "prop, expected",
        [
            (Property.LEFT, 0),
            (Property.RIGHT, 20),
            (Property.TOP, 5),
            (Property.BOTTOM, 15),
            (Property.CENTER_X, 10),
            (Property.CENTER_Y, 10),
            (Property.WIDTH, 20),
            (Property.HEIGHT, 10),
        ],
    )
    def test_get_property(self, box, prop, expected) -> None:
        """Test reading every concrete property."""
        assert box.get_property(prop) == expected

    def test_get_abstract_property_reads_zero(self, box) -> None:
        """Test that LEADING and TRAILING read as zero through the getter."""
        assert box.get_property(Property.LEADING) == 0.0
        assert box.get_property(Property.TRAILING) == 0.0

    @pytest.mark.parametrize("right_to_left, edge", [(False, 0), (True, 20)])
    def test_abstract_getter_differs_from_anchor(self, box, interface, right_to_left, edge) -> None:
        """Test that anchors resolve LEADING even though the getter reads zero."""
        interface.update(right_to_left=right_to_left)
        assert box.get_property(Property.LEADING) == 0.0
        assert box.anchor(Anchor.CENTER_LEADING).x == edge

    def test_setting_with_pin(self, box) -> None:
        """Test that pinning the opposite edge changes the size."""
        result = box.setting(Property.LEFT, 5, pinning=Property.RIGHT)
        assert result.width == 15
        assert result.right == 20
        assert box.width == 20

    def test_setting_pinned_to_center(self, box) -> None:
        """Test pinning the center while moving an edge."""
        result = box.setting(Property.RIGHT, 25, pinning=Property.CENTER_X)
        assert result.center.x == 10
        assert result.width == 30

    def test_setting_dimension_pinned_to_edge(self, box) -> None:
        """Test growing from a fixed edge."""
        result = box.setting(Property.HEIGHT, 20, pinning=Property.BOTTOM)
        assert result.bottom == 15
        assert result.top == -5

    def test_setting_center_pinned_to_edge(self, box) -> None:
        """Test moving the center with an edge fixed."""
        result = box.setting(Property.CENTER_X, 5, pinning=Property.LEFT)
        assert result.left == 0
        assert result.width == 10

    def test_pin_on_other_axis_is_ignored(self, box) -> None:
        """Test that a vertical pin does not affect a horizontal write."""
        result = box.setting(Property.LEFT, 5, pinning=Property.TOP)
        assert result.size == box.size
        assert result.left == 5

    @pytest.mark.parametrize("prop", [p for p in Property if not p.is_abstract])
    @pytest.mark.parametrize(
        "pin", [None, Property.LEFT, Property.CENTER_X, Property.BOTTOM, Property.HEIGHT]
    )
    def test_assign_current_value_is_noop(self, box, prop, pin) -> None:
        """Test that assigning a property its own value changes nothing."""
        expected = box.copy()
        box.assign_property(prop, box.get_property(prop), pinning=pin)
        assert box == expected

    def test_assign_abstract_pinning_abstract(self, box, rtl) -> None:
        """Test that abstract pins resolve with the property."""
        box.assign_property(Property.LEADING, 30, pinning=Property.TRAILING)
        assert box.left == 0
        assert box.right == 30

    def test_setting_all_pins_prior_position(self, box) -> None:
        """Test that a position pins the following writes on its axis."""
        result = box.setting_all([(Property.LEFT, 2), (Property.WIDTH, 6), (Property.TOP, 1)])
        assert result.left == 2
        assert result.width == 6
        assert result.top == 1
        assert result.height == 10

    def test_setting_all_two_edges(self, box) -> None:
        """Test setting both edges of an axis in sequence."""
        result = box.setting_all([(Property.LEFT, -5), (Property.RIGHT, 5)])
        assert result.sides == (-5, 5)


class TestBoxAnchors:
    """Test anchor reads and writes."""

    def test_anchor_points(self, box) -> None:
        """Test reading anchors."""
        assert box.top_left == Point(0, 5)
        assert box.bottom_right == Point(20, 15)
        assert box.center_top == Point(10, 5)
        assert box.anchor(Anchor.CENTER) == box.center

    def test_abstract_anchor_points(self, box, rtl) -> None:
        """Test reading abstract anchors in right-to-left flow."""
        assert box.top_leading == Point(20, 5)
        assert box.center_trailing == Point(0, 10)

    def test_set_anchor_moves_box(self, box) -> None:
        """Test writing an anchor attribute."""
        box.bottom_right = Point(100, 100)
        assert box.top_left == Point(80, 90)
        assert box.size == Size(20, 10)

    def test_moving_returns_copy(self, box) -> None:
        """Test that moving leaves the source unchanged."""
        result = box.moving(Anchor.CENTER, Point(0, 0))
        assert result.center == Point(0, 0)
        assert box.center == Point(10, 10)

    def test_with_anchor_keeps_opposite_edges(self, box) -> None:
        """Test resizing by dragging a corner."""
        result = box.with_anchor(Anchor.TOP_LEFT, Point(-10, 0))
        assert result.bottom_right == box.bottom_right
        assert result.top_left == Point(-10, 0)

    def test_with_anchor_center_axis_recenters(self, box) -> None:
        """Test that a center axis keeps size."""
        result = box.with_anchor(Anchor.CENTER_RIGHT, Point(40, 0))
        assert result.right == 40
        assert result.left == 0
        assert result.center.y == 0
        assert result.height == 10


class TestBoxComparison:
    """Test equality and near-equality."""

    def test_exact_equality(self, box) -> None:
        """Test that equality has no tolerance."""
        other = box.offset(1 / 1024)
        assert box != other
        assert box.matches(other)

    def test_is_near_custom_tolerance(self, box) -> None:
        """Test an explicit tolerance."""
        assert box.is_near(box.offset(0.5, 0.5), tolerance=1)
        assert not box.is_near(box.resized_by(Size(2, 0)), tolerance=1)

    def test_copy_is_independent(self, box) -> None:
        """Test that a copy does not share state."""
        other = box.copy()
        other.left = 100
        assert box.left == 0

    def test_nan_coordinate_never_differs(self, box) -> None:
        """Test that a NaN coordinate compares equal to any value."""
        other = Box(center=Point(math.nan, 10), size=box.size)
        assert other == box
        assert other != Box(center=Point(math.nan, 10), size=Size(1, 1))

    def test_str(self, box) -> None:
        """Test readable form."""
        assert str(box) == "Box(center 10,10 size 20x10)"
