"""Validated notification records and rich object string validation."""

from notifier.domain.entities import Action, Notification
from notifier.domain.exceptions import InvalidArgument, InvalidRichObject

__all__ = ["Action", "Notification", "InvalidArgument", "InvalidRichObject"]
