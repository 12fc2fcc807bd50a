"""Domain entities exposed by the library."""

from .action import Action
from .notification import Notification

__all__ = ["Action", "Notification"]
