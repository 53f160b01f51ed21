"""Interface context types.

Immutable values describing the flow direction and screen metrics that
direction-aware geometry reads at call time.
"""

from dataclasses import dataclass
from enum import Enum

# ISO 639-1 codes of languages written right to left
RTL_LANGUAGES = frozenset(
    {"ar", "arc", "ckb", "dv", "fa", "he", "iw", "khw", "ks", "ps", "sd", "ug", "ur", "yi"}
)


class LayoutDirection(Enum):
    """Interface flow direction."""

    LEFT_TO_RIGHT = "ltr"
    RIGHT_TO_LEFT = "rtl"

    @property
    def is_rtl(self) -> bool:
        return self is LayoutDirection.RIGHT_TO_LEFT

    @classmethod
    def for_language(cls, language_code: str) -> "LayoutDirection":
        """Get the character direction of a language.

        Args:
            language_code: Language or locale identifier such as "he" or "ar_EG"

        Returns:
            RIGHT_TO_LEFT for right-to-left scripts, LEFT_TO_RIGHT otherwise
        """
        language = language_code.replace("-", "_").split("_", 1)[0].lower()
        return cls.RIGHT_TO_LEFT if language in RTL_LANGUAGES else cls.LEFT_TO_RIGHT


@dataclass(frozen=True)
class ScreenMetrics:
    """Pixel density and reference screen size.

    Attributes:
        pixel_scale: Device pixels per point
        width: Screen width in points
        height: Screen height in points
    """

    pixel_scale: float
    width: float
    height: float

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"ScreenMetrics(scale={self.pixel_scale}, {self.width}x{self.height})"
