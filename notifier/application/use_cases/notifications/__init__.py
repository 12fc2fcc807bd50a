"""Public helpers for producing and rendering notifications."""

from .build import ActionSpec, build_notification
from .render import RenderedContent, RichText, apply_rendering

__all__ = [
    "ActionSpec",
    "build_notification",
    "RenderedContent",
    "RichText",
    "apply_rendering",
]
