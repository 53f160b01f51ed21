"""Host view integration."""

from .view import HostView, ViewAdapter

__all__ = [
    "HostView",
    "ViewAdapter",
]
