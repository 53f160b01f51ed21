"""Piece extraction.

A piece is a sub-box placed relative to an anchor of its parent. Sizes and
positions mix fractions, relative amounts and absolute distances:

- size ``v``: 0 < v <= 1 is a fraction of the parent, v <= 0 is the parent
  shrunk by -v, v > 1 is absolute, non-finite is the whole parent
- position ``p``: non-finite rests the piece against the anchor side,
  -1 < p < 0 is a portion of the slack, 0 < p < 1 is a fraction of the
  parent, anything else is an absolute distance from the anchor side
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .primitives import Point
from .property import Property

if TYPE_CHECKING:
    from .anchor import Anchor
    from .box import Box


def _piece_center(
    center: float, length: float, piece_length: float, role: Property, position: float
) -> float:
    """Center of a piece along one axis.

    ``role`` is the concrete anchor property on this axis: the low edge
    (LEFT/TOP), the high edge (RIGHT/BOTTOM) or the center.
    """
    slack = length - piece_length
    low = role in (Property.LEFT, Property.TOP)
    high = role in (Property.RIGHT, Property.BOTTOM)

    if not math.isfinite(position):
        if low:
            return center - slack * 0.5
        if high:
            return center + slack * 0.5
        return center

    if -1.0 < position < 0.0:
        if high:
            return center + slack * (0.5 + position)
        return center - slack * (0.5 + position)

    if 0.0 < position < 1.0:
        if low:
            return center - length * (0.5 - position) + piece_length * 0.5
        if high:
            return center + length * (0.5 - position) - piece_length * 0.5
        return center - length * (0.5 - position)

    if low:
        return center - slack * 0.5 + position
    if high:
        return center + slack * 0.5 - position
    return center + position


def piece(box: Box, anchor: Anchor, x: float, y: float, width: float, height: float) -> Box:
    """Extract a piece of a box.

    Args:
        box: Parent box
        anchor: Reference anchor for the position, resolved per axis
        x: Horizontal position specifier
        y: Vertical position specifier
        width: Width specifier
        height: Height specifier

    Returns:
        New box for the piece
    """
    from .box import Box

    size = box.size.piece(width, height)
    cx = _piece_center(
        box.center.x, box.size.width, size.width, anchor.horizontal.concrete, x
    )
    cy = _piece_center(
        box.center.y, box.size.height, size.height, anchor.vertical.concrete, y
    )
    return Box(center=Point(cx, cy), size=size)
