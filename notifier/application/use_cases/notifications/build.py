"""Helpers used by apps that issue notifications."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from notifier.application.rich_objects import get_default_validator
from notifier.domain.entities import Action, Notification
from notifier.domain.interfaces import RichObjectValidator
from notifier.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionSpec:
    """Plain description of an action, converted to an :class:`Action` on use."""

    label: str
    link: str
    request_type: str = "GET"
    primary: bool = False
    parsed_label: str | None = None

    def to_action(self, notification: Notification) -> Action:
        """Return a populated action created by ``notification``."""

        action = notification.create_action()
        action.set_label(self.label)
        action.set_link(self.link, self.request_type)
        action.set_primary(self.primary)
        if self.parsed_label is not None:
            action.set_parsed_label(self.parsed_label)
        return action


def build_notification(
    *,
    app: str,
    user: str,
    object_type: str,
    object_id: str | int,
    subject: str,
    subject_parameters: Sequence[Any] | None = None,
    date_time: datetime | None = None,
    message: str | None = None,
    message_parameters: Sequence[Any] | None = None,
    link: str | None = None,
    icon: str | None = None,
    actions: Iterable[ActionSpec] = (),
    rich_validator: RichObjectValidator | None = None,
) -> Notification:
    """Assemble a raw notification ready to be stored.

    The notification is stamped with the current time in the configured
    timezone unless ``date_time`` is given, and checked with the shared default
    validator unless ``rich_validator`` is given. ``InvalidArgument`` is raised
    for any rejected value.
    """

    notification = Notification(
        rich_validator if rich_validator is not None else get_default_validator()
    )
    notification.set_app(app).set_user(user)
    notification.set_date_time(date_time if date_time is not None else now_in_app_timezone())
    notification.set_object(object_type, object_id)
    notification.set_subject(subject, subject_parameters)
    if message is not None:
        notification.set_message(message, message_parameters)
    if link is not None:
        notification.set_link(link)
    if icon is not None:
        notification.set_icon(icon)
    for spec in actions:
        notification.add_action(spec.to_action(notification))

    logger.info(
        "Built %s notification %r for %s on %s/%s with %d action(s)",
        app,
        subject,
        user,
        notification.object_type,
        notification.object_id,
        len(notification.actions),
    )
    return notification


__all__ = ["ActionSpec", "build_notification"]
