"""Tests for Property and Axis."""

import pytest

from viewbox.model import Axis, Property


class TestPropertyClassification:
    """Test axis and kind of each property."""

    @pytest.mark.parametrize(
        "prop",
        [
            Property.LEFT,
            Property.RIGHT,
            Property.LEADING,
            Property.TRAILING,
            Property.CENTER_X,
            Property.WIDTH,
        ],
    )
    def test_horizontal_properties(self, prop) -> None:
        """Test properties measured along the horizontal axis."""
        assert prop.axis is Axis.HORIZONTAL
        assert not prop.is_vertical

    @pytest.mark.parametrize(
        "prop", [Property.TOP, Property.BOTTOM, Property.CENTER_Y, Property.HEIGHT]
    )
    def test_vertical_properties(self, prop) -> None:
        """Test properties measured along the vertical axis."""
        assert prop.axis is Axis.VERTICAL
        assert prop.is_vertical

    def test_dimensions_are_not_positions(self) -> None:
        """Test that only WIDTH and HEIGHT are dimensions."""
        dimensions = {p for p in Property if not p.is_position}
        assert dimensions == {Property.WIDTH, Property.HEIGHT}

    def test_only_leading_and_trailing_are_abstract(self) -> None:
        """Test the abstract set."""
        abstract = {p for p in Property if p.is_abstract}
        assert abstract == {Property.LEADING, Property.TRAILING}


class TestPropertyResolution:
    """Test resolution of abstract properties."""

    def test_resolved_left_to_right(self) -> None:
        """Test explicit left-to-right resolution."""
        assert Property.LEADING.resolved(False) is Property.LEFT
        assert Property.TRAILING.resolved(False) is Property.RIGHT

    def test_resolved_right_to_left(self) -> None:
        """Test explicit right-to-left resolution."""
        assert Property.LEADING.resolved(True) is Property.RIGHT
        assert Property.TRAILING.resolved(True) is Property.LEFT

    def test_concrete_follows_interface(self, interface) -> None:
        """Test that concrete tracks the interface direction."""
        assert Property.LEADING.concrete is Property.LEFT
        interface.update(right_to_left=True)
        assert Property.LEADING.concrete is Property.RIGHT
        assert Property.TRAILING.concrete is Property.LEFT

    @pytest.mark.parametrize("right_to_left", [False, True])
    def test_concrete_properties_resolve_to_themselves(self, right_to_left) -> None:
        """Test that concrete properties never change."""
        for prop in Property:
            if not prop.is_abstract:
                assert prop.resolved(right_to_left) is prop

    @pytest.mark.parametrize("right_to_left", [False, True])
    def test_resolution_is_concrete(self, right_to_left) -> None:
        """Test that every resolution yields a concrete property."""
        for prop in Property:
            assert not prop.resolved(right_to_left).is_abstract
