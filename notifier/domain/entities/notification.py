"""Domain entity representing a notification addressed to a user."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any, Final

from notifier.domain.entities.action import Action
from notifier.domain.exceptions import InvalidArgument
from notifier.domain.interfaces import RichObjectValidator
from notifier.utils.datetime import is_epoch

logger = logging.getLogger(__name__)

APP_MAX_LENGTH: Final[int] = 32
USER_MAX_LENGTH: Final[int] = 64
OBJECT_TYPE_MAX_LENGTH: Final[int] = 64
OBJECT_ID_MAX_LENGTH: Final[int] = 64
SUBJECT_MAX_LENGTH: Final[int] = 64
MESSAGE_MAX_LENGTH: Final[int] = 64
LINK_MAX_LENGTH: Final[int] = 4000
ICON_MAX_LENGTH: Final[int] = 4000


def _ensure_text(value: object, error: str, max_length: int | None = None) -> str:
    """Return ``value`` when it is a non-empty string within ``max_length``."""

    if not isinstance(value, str) or value == "":
        raise InvalidArgument(error)
    if max_length is not None and len(value) > max_length:
        raise InvalidArgument(error)
    return value


class Notification:
    """Notification assembled in two phases before delivery.

    The issuing app fills the raw fields (app, user, timestamp, object, subject
    template with its parameters, link, icon, actions) and checks
    :meth:`is_valid`. A renderer later supplies the parsed and rich variants
    plus parsed actions, and :meth:`is_valid_parsed` decides whether the
    notification can be delivered.

    Every setter validates its arguments before assigning anything, raises
    :class:`~notifier.domain.exceptions.InvalidArgument` on rejection and
    returns the notification otherwise.

    The rich object validator used by :meth:`is_valid_parsed` is passed in by
    the caller.
    """

    def __init__(self, rich_validator: RichObjectValidator) -> None:
        self._rich_validator = rich_validator
        self._app = ""
        self._user = ""
        self._date_time: datetime | None = None
        self._object_type = ""
        self._object_id = ""
        self._subject = ""
        self._subject_parameters: Sequence[Any] = []
        self._parsed_subject = ""
        self._rich_subject = ""
        self._rich_subject_parameters: Mapping[str, Any] = {}
        self._message = ""
        self._message_parameters: Sequence[Any] = []
        self._parsed_message = ""
        self._rich_message = ""
        self._rich_message_parameters: Mapping[str, Any] = {}
        self._link = ""
        self._icon = ""
        self._actions: list[Action] = []
        self._parsed_actions: list[Action] = []
        self._has_primary_action = False
        self._has_primary_parsed_action = False

    def __repr__(self) -> str:
        return (
            f"Notification(app={self._app!r}, user={self._user!r}, "
            f"object=({self._object_type!r}, {self._object_id!r}), "
            f"subject={self._subject!r})"
        )

    # Identity of the notification

    def set_app(self, app: str) -> "Notification":
        self._app = _ensure_text(app, "The given app name is invalid", APP_MAX_LENGTH)
        return self

    @property
    def app(self) -> str:
        return self._app

    def set_user(self, user: str) -> "Notification":
        self._user = _ensure_text(user, "The given user id is invalid", USER_MAX_LENGTH)
        return self

    @property
    def user(self) -> str:
        return self._user

    def set_date_time(self, date_time: datetime) -> "Notification":
        """Set the moment the notification refers to.

        The Unix epoch is reserved to mean "unset" and is always rejected.
        """

        if not isinstance(date_time, datetime) or is_epoch(date_time):
            raise InvalidArgument("The given date time is invalid")
        self._date_time = date_time
        return self

    @property
    def date_time(self) -> datetime | None:
        """The timestamp, or ``None`` while it has not been set."""

        return self._date_time

    def set_object(self, object_type: str, object_id: str | int) -> "Notification":
        """Set the object the notification is about.

        Integer identifiers are stored as their decimal string.
        """

        object_type = _ensure_text(
            object_type, "The given object type is invalid", OBJECT_TYPE_MAX_LENGTH
        )
        if isinstance(object_id, int) and not isinstance(object_id, bool):
            digits = OBJECT_ID_MAX_LENGTH - 1 if object_id < 0 else OBJECT_ID_MAX_LENGTH
            if abs(object_id) >= 10**digits:
                raise InvalidArgument("The given object id is invalid")
            object_id = str(object_id)
        object_id = _ensure_text(
            object_id, "The given object id is invalid", OBJECT_ID_MAX_LENGTH
        )
        self._object_type = object_type
        self._object_id = object_id
        return self

    @property
    def object_type(self) -> str:
        return self._object_type

    @property
    def object_id(self) -> str:
        return self._object_id

    # Subject

    def set_subject(
        self, subject: str, parameters: Sequence[Any] | None = None
    ) -> "Notification":
        self._subject = _ensure_text(
            subject, "The given subject is invalid", SUBJECT_MAX_LENGTH
        )
        self._subject_parameters = parameters if parameters is not None else []
        return self

    @property
    def subject(self) -> str:
        return self._subject

    @property
    def subject_parameters(self) -> Sequence[Any]:
        return self._subject_parameters

    def set_parsed_subject(self, subject: str) -> "Notification":
        self._parsed_subject = _ensure_text(subject, "The given parsed subject is invalid")
        return self

    @property
    def parsed_subject(self) -> str:
        return self._parsed_subject

    def set_rich_subject(
        self, subject: str, parameters: Mapping[str, Any] | None = None
    ) -> "Notification":
        """Set the rich subject template and its rich object parameters.

        The parameters are checked by :meth:`is_valid_parsed`, not here.
        """

        self._rich_subject = _ensure_text(subject, "The given rich subject is invalid")
        self._rich_subject_parameters = parameters if parameters is not None else {}
        return self

    @property
    def rich_subject(self) -> str:
        return self._rich_subject

    @property
    def rich_subject_parameters(self) -> Mapping[str, Any]:
        return self._rich_subject_parameters

    # Message

    def set_message(
        self, message: str, parameters: Sequence[Any] | None = None
    ) -> "Notification":
        self._message = _ensure_text(
            message, "The given message is invalid", MESSAGE_MAX_LENGTH
        )
        self._message_parameters = parameters if parameters is not None else []
        return self

    @property
    def message(self) -> str:
        return self._message

    @property
    def message_parameters(self) -> Sequence[Any]:
        return self._message_parameters

    def set_parsed_message(self, message: str) -> "Notification":
        self._parsed_message = _ensure_text(message, "The given parsed message is invalid")
        return self

    @property
    def parsed_message(self) -> str:
        return self._parsed_message

    def set_rich_message(
        self, message: str, parameters: Mapping[str, Any] | None = None
    ) -> "Notification":
        self._rich_message = _ensure_text(message, "The given rich message is invalid")
        self._rich_message_parameters = parameters if parameters is not None else {}
        return self

    @property
    def rich_message(self) -> str:
        return self._rich_message

    @property
    def rich_message_parameters(self) -> Mapping[str, Any]:
        return self._rich_message_parameters

    # Presentation

    def set_link(self, link: str) -> "Notification":
        self._link = _ensure_text(link, "The given link is invalid", LINK_MAX_LENGTH)
        return self

    @property
    def link(self) -> str:
        return self._link

    def set_icon(self, icon: str) -> "Notification":
        self._icon = _ensure_text(icon, "The given icon is invalid", ICON_MAX_LENGTH)
        return self

    @property
    def icon(self) -> str:
        return self._icon

    # Actions

    def create_action(self) -> Action:
        """Return a new, empty action to be filled and added by the caller."""

        return Action()

    def add_action(self, action: Action) -> "Notification":
        """Add a raw action; only one of them may be primary.

        The action is kept by reference and must not be changed once added,
        otherwise the primary action check no longer holds.
        """

        if not action.is_valid():
            raise InvalidArgument("The given action is invalid")

        if action.is_primary():
            if self._has_primary_action:
                raise InvalidArgument("The notification already has a primary action")
            self._has_primary_action = True

        self._actions.append(action)
        return self

    @property
    def actions(self) -> list[Action]:
        return list(self._actions)

    def add_parsed_action(self, action: Action) -> "Notification":
        """Add a rendered action; a primary action always goes first.

        As with :meth:`add_action`, the action must not be changed once added.
        """

        if not action.is_valid_parsed():
            raise InvalidArgument("The given parsed action is invalid")

        if action.is_primary():
            if self._has_primary_parsed_action:
                raise InvalidArgument("The notification already has a primary action")
            self._has_primary_parsed_action = True
            self._parsed_actions.insert(0, action)
        else:
            self._parsed_actions.append(action)
        return self

    @property
    def parsed_actions(self) -> list[Action]:
        return list(self._parsed_actions)

    # Validation

    def is_valid(self) -> bool:
        """Return ``True`` when the raw notification can be stored."""

        return self._is_valid_common() and self._subject != ""

    def is_valid_parsed(self) -> bool:
        """Return ``True`` when the rendered notification can be delivered.

        Rich subject and rich message content is checked only when present.
        A parsed message is not required, a parsed subject is.
        """

        rich_fields = (
            ("subject", self._rich_subject, self._rich_subject_parameters),
            ("message", self._rich_message, self._rich_message_parameters),
        )
        for field, template, parameters in rich_fields:
            if template == "" and not parameters:
                continue
            violation = self._rich_validator.first_violation(template, parameters)
            if violation is not None:
                logger.debug(
                    "Rich %s of %s notification rejected: %s", field, self._app, violation
                )
                return False

        return self._is_valid_common() and self._parsed_subject != ""

    def _is_valid_common(self) -> bool:
        return (
            self._app != ""
            and self._user != ""
            and self._date_time is not None
            and self._object_type != ""
            and self._object_id != ""
        )


__all__ = [
    "Notification",
    "APP_MAX_LENGTH",
    "USER_MAX_LENGTH",
    "OBJECT_TYPE_MAX_LENGTH",
    "OBJECT_ID_MAX_LENGTH",
    "SUBJECT_MAX_LENGTH",
    "MESSAGE_MAX_LENGTH",
    "LINK_MAX_LENGTH",
    "ICON_MAX_LENGTH",
]
