"""Interface service holding the live layout context.

This module provides the InterfaceService singleton, the single source of
truth for the values that direction-aware geometry reads on every call:

- layout direction (left-to-right or right-to-left)
- tolerance used by near-equality checks
- device pixel scale and reference screen size used by unit conversion

Host code seeds the service from settings and pushes changes through
``update()`` when the locale or display changes. Nothing in the geometry
core caches these values.

Usage:
    >>> from viewbox.interface import InterfaceService
    >>> service = InterfaceService.get_instance()
    >>> service.update(right_to_left=True)
    >>> service.is_rtl
    True
"""

import math
import threading

from ..config import ViewBoxSettings, get_settings
from ..config_exceptions import InvalidConfigurationException
from ..logging import get_logger
from .types import LayoutDirection, ScreenMetrics

logger = get_logger(__name__)


class InterfaceService:
    """Process-wide layout direction, tolerance and screen metrics.

    This is a thread-safe singleton. Reads are plain attribute access so a
    value changed by ``update()`` is seen by the very next computation.

    Example:
        >>> service = InterfaceService.get_instance()
        >>> service.update(pixel_scale=2.0, screen_width=375, screen_height=667)
        >>> service.screen_metrics
        ScreenMetrics(scale=2.0, 375.0x667.0)
    """

    _instance = None
    _lock = threading.Lock()

    def __init__(self, settings: ViewBoxSettings | None = None) -> None:
        """Initialize InterfaceService.

        Use get_instance() for the shared service; construct directly only
        for an isolated context.

        Args:
            settings: Settings to seed from, defaults to get_settings()
        """
        self._settings = settings
        self._direction = LayoutDirection.LEFT_TO_RIGHT
        self._tolerance = 1.0 / 256.0
        self._metrics = ScreenMetrics(pixel_scale=1.0, width=1920.0, height=1080.0)
        self._refresh()

    @classmethod
    def get_instance(cls) -> "InterfaceService":
        """Get or create the singleton InterfaceService instance.

        Thread-safe singleton access using double-checked locking.

        Returns:
            The singleton InterfaceService instance
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton so the next access reseeds from settings."""
        with cls._lock:
            cls._instance = None

    @property
    def direction(self) -> LayoutDirection:
        return self._direction

    @property
    def is_rtl(self) -> bool:
        return self._direction.is_rtl

    @property
    def tolerance(self) -> float:
        return self._tolerance

    @property
    def screen_metrics(self) -> ScreenMetrics:
        return self._metrics

    @property
    def pixel_scale(self) -> float:
        return self._metrics.pixel_scale

    @property
    def screen_width(self) -> float:
        return self._metrics.width

    @property
    def screen_height(self) -> float:
        return self._metrics.height

    def update(
        self,
        *,
        direction: LayoutDirection | None = None,
        right_to_left: bool | None = None,
        tolerance: float | None = None,
        pixel_scale: float | None = None,
        screen_width: float | None = None,
        screen_height: float | None = None,
    ) -> None:
        """Apply new interface values pushed by the host.

        Only the given values change. Everything is validated before anything
        is applied.

        Args:
            direction: New layout direction
            right_to_left: Shorthand for direction, ignored when direction is given
            tolerance: New near-equality tolerance, must be >= 0
            pixel_scale: New device pixel scale, must be >= 1
            screen_width: New screen width in points, must be > 0
            screen_height: New screen height in points, must be > 0

        Raises:
            InvalidConfigurationException: If a value is out of range
        """
        if direction is None and right_to_left is not None:
            direction = (
                LayoutDirection.RIGHT_TO_LEFT if right_to_left else LayoutDirection.LEFT_TO_RIGHT
            )

        if tolerance is not None and not (math.isfinite(tolerance) and tolerance >= 0):
            raise InvalidConfigurationException("tolerance", "must be a finite value >= 0")
        if pixel_scale is not None and not (math.isfinite(pixel_scale) and pixel_scale >= 1):
            raise InvalidConfigurationException("pixel_scale", "must be a finite value >= 1")
        for key, value in (("screen_width", screen_width), ("screen_height", screen_height)):
            if value is not None and not (math.isfinite(value) and value > 0):
                raise InvalidConfigurationException(key, "must be a finite value > 0")

        metrics = ScreenMetrics(
            pixel_scale=float(pixel_scale) if pixel_scale is not None else self._metrics.pixel_scale,
            width=float(screen_width) if screen_width is not None else self._metrics.width,
            height=float(screen_height) if screen_height is not None else self._metrics.height,
        )

        if direction is not None:
            self._direction = direction
        if tolerance is not None:
            self._tolerance = float(tolerance)
        self._metrics = metrics

        logger.info(
            "interface_updated",
            direction=self._direction.value,
            tolerance=self._tolerance,
            pixel_scale=metrics.pixel_scale,
            screen_width=metrics.width,
            screen_height=metrics.height,
        )

    def update_for_language(self, language_code: str) -> LayoutDirection:
        """Set the layout direction from the character direction of a language.

        Args:
            language_code: Language or locale identifier such as "ar" or "en_US"

        Returns:
            The direction now in effect
        """
        direction = LayoutDirection.for_language(language_code)
        self.update(direction=direction)
        return direction

    def refresh(self) -> None:
        """Reseed every value from settings, discarding host updates."""
        self._refresh()
        logger.info(
            "interface_refreshed",
            direction=self._direction.value,
            tolerance=self._tolerance,
            pixel_scale=self._metrics.pixel_scale,
        )

    def _refresh(self) -> None:
        """Internal refresh implementation."""
        settings = self._settings or get_settings()
        self._direction = (
            LayoutDirection.RIGHT_TO_LEFT if settings.right_to_left else LayoutDirection.LEFT_TO_RIGHT
        )
        self._tolerance = settings.tolerance
        self._metrics = ScreenMetrics(
            pixel_scale=settings.pixel_scale,
            width=settings.screen_width,
            height=settings.screen_height,
        )

    def refresh_screen(self) -> ScreenMetrics:
        """Read the primary monitor size from the display.

        MSS reports the virtual desktop first and physical monitors after it.
        The primary monitor's pixel size is divided by the current pixel
        scale to get the screen size in points.

        Returns:
            The updated screen metrics
        """
        import mss

        with mss.mss() as sct:
            monitors = sct.monitors

        primary = monitors[1] if len(monitors) > 1 else monitors[0]
        scale = self._metrics.pixel_scale
        self.update(
            screen_width=primary["width"] / scale,
            screen_height=primary["height"] / scale,
        )
        return self._metrics

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return (
            f"InterfaceService("
            f"direction={self._direction.value}, "
            f"tolerance={self._tolerance}, "
            f"{self._metrics!r})"
        )


def get_interface() -> InterfaceService:
    """Get the shared interface service."""
    return InterfaceService.get_instance()
