"""Host view adapter.

Reads boxes from a host view and writes them back. Writes are coalesced:
a view is only touched when its geometry would change by more than the
interface tolerance, so layout code can assign boxes freely without
triggering needless layout work in the host.
"""

from __future__ import annotations

from typing import Protocol

from ..logging import get_logger
from ..model.box import Box
from ..model.primitives import Point, Rect, Size

logger = get_logger(__name__)


class HostView(Protocol):
    """The part of a host view that box layout needs."""

    frame: Rect
    center: Point

    @property
    def bounds_size(self) -> Size: ...

    def alignment_rect_for_frame(self, frame: Rect) -> Rect: ...

    def frame_for_alignment_rect(self, alignment_rect: Rect) -> Rect: ...

    def intrinsic_content_size(self) -> Size: ...

    def size_that_fits(self, size: Size) -> Size: ...


class ViewAdapter:
    """Box access for a host view.

    Example:
        >>> adapter = ViewAdapter(view)
        >>> box = adapter.box
        >>> adapter.box = box.setting(Property.LEFT, 20, pinning=Property.RIGHT)
    """

    def __init__(self, view: HostView) -> None:
        """Initialize with the view to adapt.

        Args:
            view: Host view
        """
        self.view = view

    @property
    def box(self) -> Box:
        """Box of the view's alignment rectangle.

        Setting it writes the interface-aligned frame converted back from
        alignment space.
        """
        return Box.from_frame(self.view.alignment_rect_for_frame(self.view.frame))

    @box.setter
    def box(self, value: Box) -> None:
        natural = self.view.frame_for_alignment_rect(value.interface_frame)
        self._write(natural)

    @property
    def frame_box(self) -> Box:
        """Box of the raw view frame, without alignment adjustments."""
        return Box.from_frame(self.view.frame)

    @frame_box.setter
    def frame_box(self, value: Box) -> None:
        self._write(value.frame)

    @property
    def bounding_box(self) -> Box:
        """Box to use when positioning subviews, in the view's own coordinates."""
        return Box.from_size(self.view.bounds_size)

    @property
    def intrinsic_box(self) -> Box:
        """Box at the current center with the intrinsic content size."""
        return Box(center=self.view.center, size=self.view.intrinsic_content_size())

    def box_fitting_size(self, width: float, height: float) -> Box:
        """Box at the current center sized to fit constraints.

        Negative dimensions are fixed sizes used as given. Non-negative
        dimensions are constraints passed to ``size_that_fits``, which is
        skipped when both dimensions are fixed.

        Args:
            width: Width constraint, or negated fixed width
            height: Height constraint, or negated fixed height

        Returns:
            New box
        """
        if width < 0 and height < 0:
            size = Size(-width, -height)
        else:
            fits = self.view.size_that_fits(Size(abs(width), abs(height)))
            size = Size(
                -width if width < 0 else fits.width,
                -height if height < 0 else fits.height,
            )
        return Box(center=self.view.center, size=size)

    def _write(self, frame: Rect) -> None:
        """Write a frame, touching the view only when geometry changes."""
        if not self.view.frame.size.is_near(frame.size):
            logger.debug("view_frame_written", width=frame.size.width, height=frame.size.height)
            self.view.frame = frame
        elif not self.view.center.is_near(frame.center):
            logger.debug("view_center_written", x=frame.center.x, y=frame.center.y)
            self.view.center = frame.center
        else:
            logger.debug("view_write_skipped")
