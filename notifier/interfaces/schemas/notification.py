"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from notifier.domain.entities import Action, Notification
from notifier.utils import ensure_app_timezone


class ActionRead(BaseModel):
    """Representation of a notification action."""

    model_config = ConfigDict(frozen=True)

    label: str
    parsed_label: str
    link: str
    request_type: str
    primary: bool = False

    @classmethod
    def from_entity(cls, action: Action) -> "ActionRead":
        return cls(
            label=action.label,
            parsed_label=action.parsed_label,
            link=action.link,
            request_type=action.request_type,
            primary=action.is_primary(),
        )


class NotificationRead(BaseModel):
    """Representation of a notification handed to an external serializer.

    ``parsed_actions`` keeps the entity order, so a primary parsed action is
    always the first entry.
    """

    model_config = ConfigDict(frozen=True)

    app: str
    user: str
    date_time: datetime | None = None
    object_type: str
    object_id: str
    subject: str
    subject_parameters: list[Any] = Field(default_factory=list)
    parsed_subject: str = ""
    rich_subject: str = ""
    rich_subject_parameters: dict[str, Any] = Field(default_factory=dict)
    message: str = ""
    message_parameters: list[Any] = Field(default_factory=list)
    parsed_message: str = ""
    rich_message: str = ""
    rich_message_parameters: dict[str, Any] = Field(default_factory=dict)
    link: str = ""
    icon: str = ""
    actions: list[ActionRead] = Field(default_factory=list)
    parsed_actions: list[ActionRead] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationRead":
        """Build the payload for ``notification`` with its timestamp in the app timezone."""

        return cls(
            app=notification.app,
            user=notification.user,
            date_time=ensure_app_timezone(notification.date_time),
            object_type=notification.object_type,
            object_id=notification.object_id,
            subject=notification.subject,
            subject_parameters=list(notification.subject_parameters),
            parsed_subject=notification.parsed_subject,
            rich_subject=notification.rich_subject,
            rich_subject_parameters=dict(notification.rich_subject_parameters),
            message=notification.message,
            message_parameters=list(notification.message_parameters),
            parsed_message=notification.parsed_message,
            rich_message=notification.rich_message,
            rich_message_parameters=dict(notification.rich_message_parameters),
            link=notification.link,
            icon=notification.icon,
            actions=[ActionRead.from_entity(action) for action in notification.actions],
            parsed_actions=[
                ActionRead.from_entity(action) for action in notification.parsed_actions
            ],
        )


__all__ = ["ActionRead", "NotificationRead"]
