"""Helpers used by renderers that turn raw notifications into readable ones."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from notifier.domain.entities import Notification

from .build import ActionSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RichText:
    """Rich template together with its rich object parameters."""

    template: str
    parameters: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RenderedContent:
    """Output of an external renderer for a single notification."""

    parsed_subject: str
    parsed_message: str | None = None
    rich_subject: RichText | None = None
    rich_message: RichText | None = None
    parsed_actions: tuple[ActionSpec, ...] = ()


def apply_rendering(notification: Notification, rendering: RenderedContent) -> bool:
    """Copy ``rendering`` onto ``notification`` and report whether it may be delivered.

    Setter failures propagate as ``InvalidArgument``. Rich content problems do
    not raise; they make the return value ``False``.
    """

    notification.set_parsed_subject(rendering.parsed_subject)
    if rendering.parsed_message is not None:
        notification.set_parsed_message(rendering.parsed_message)
    if rendering.rich_subject is not None:
        notification.set_rich_subject(
            rendering.rich_subject.template, rendering.rich_subject.parameters
        )
    if rendering.rich_message is not None:
        notification.set_rich_message(
            rendering.rich_message.template, rendering.rich_message.parameters
        )
    for spec in rendering.parsed_actions:
        notification.add_parsed_action(spec.to_action(notification))

    deliverable = notification.is_valid_parsed()
    if not deliverable:
        logger.warning(
            "Rendered %s notification for %s on %s/%s is not deliverable",
            notification.app,
            notification.user,
            notification.object_type,
            notification.object_id,
        )
    return deliverable


__all__ = ["RenderedContent", "RichText", "apply_rendering"]
