"""Property - a single-axis named position on a box.

A Property names one scalar of a box: an edge, a center coordinate or a
dimension. LEADING and TRAILING are abstract: they name the edge where
interface flow starts or ends and resolve to LEFT or RIGHT depending on the
current layout direction. Every other property is concrete.
"""

from __future__ import annotations

from enum import Enum

from ..interface import get_interface


class Axis(Enum):
    """Axis a property measures along."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Property(Enum):
    """Named scalar positions of a box.

    Resolution table for the abstract properties:

    ========  ===========  ===========
    Property  LTR          RTL
    ========  ===========  ===========
    LEADING   LEFT         RIGHT
    TRAILING  RIGHT        LEFT
    ========  ===========  ===========
    """

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    LEADING = "leading"
    TRAILING = "trailing"
    CENTER_X = "center_x"
    CENTER_Y = "center_y"
    WIDTH = "width"
    HEIGHT = "height"

    @property
    def axis(self) -> Axis:
        return _AXES[self]

    @property
    def is_vertical(self) -> bool:
        return _AXES[self] is Axis.VERTICAL

    @property
    def is_position(self) -> bool:
        """True for edges and centers, False for dimensions."""
        return self not in (Property.WIDTH, Property.HEIGHT)

    @property
    def is_abstract(self) -> bool:
        """True for the direction-relative LEADING and TRAILING."""
        return self in _RESOLUTIONS

    @property
    def concrete(self) -> Property:
        """Property resolved under the current layout direction."""
        return self.resolved(get_interface().is_rtl)

    def resolved(self, right_to_left: bool) -> Property:
        """Property resolved under an explicit layout direction.

        Args:
            right_to_left: True to resolve for right-to-left flow

        Returns:
            LEFT or RIGHT for abstract properties, self otherwise
        """
        resolution = _RESOLUTIONS.get(self)
        if resolution is None:
            return self
        return resolution[1] if right_to_left else resolution[0]


_AXES: dict[Property, Axis] = {
    Property.LEFT: Axis.HORIZONTAL,
    Property.RIGHT: Axis.HORIZONTAL,
    Property.LEADING: Axis.HORIZONTAL,
    Property.TRAILING: Axis.HORIZONTAL,
    Property.CENTER_X: Axis.HORIZONTAL,
    Property.WIDTH: Axis.HORIZONTAL,
    Property.TOP: Axis.VERTICAL,
    Property.BOTTOM: Axis.VERTICAL,
    Property.CENTER_Y: Axis.VERTICAL,
    Property.HEIGHT: Axis.VERTICAL,
}

# (left-to-right, right-to-left)
_RESOLUTIONS: dict[Property, tuple[Property, Property]] = {
    Property.LEADING: (Property.LEFT, Property.RIGHT),
    Property.TRAILING: (Property.RIGHT, Property.LEFT),
}
