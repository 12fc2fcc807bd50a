"""Domain entity representing an action attached to a notification."""

from __future__ import annotations

from typing import Final

from notifier.domain.exceptions import InvalidArgument

LABEL_MAX_LENGTH: Final[int] = 32
LINK_MAX_LENGTH: Final[int] = 256
REQUEST_TYPES: Final[frozenset[str]] = frozenset({"GET", "POST", "PUT", "DELETE", "WEB"})


def _is_bounded_text(value: object, max_length: int | None = None) -> bool:
    if not isinstance(value, str) or value == "":
        return False
    return max_length is None or len(value) <= max_length


class Action:
    """Button or link offered to the user alongside a notification.

    The same class carries both forms: ``label`` is the raw identifier set by
    the app, ``parsed_label`` the rendered text shown to the user. Setters
    validate first and return the action so calls can be chained.
    """

    def __init__(self) -> None:
        self._label = ""
        self._parsed_label = ""
        self._link = ""
        self._request_type = ""
        self._primary = False

    def __repr__(self) -> str:
        return (
            f"Action(label={self._label!r}, parsed_label={self._parsed_label!r}, "
            f"link={self._link!r}, request_type={self._request_type!r}, "
            f"primary={self._primary!r})"
        )

    def set_label(self, label: str) -> "Action":
        if not _is_bounded_text(label, LABEL_MAX_LENGTH):
            raise InvalidArgument("The given label is invalid")
        self._label = label
        return self

    @property
    def label(self) -> str:
        return self._label

    def set_parsed_label(self, label: str) -> "Action":
        if not _is_bounded_text(label):
            raise InvalidArgument("The given parsed label is invalid")
        self._parsed_label = label
        return self

    @property
    def parsed_label(self) -> str:
        return self._parsed_label

    def set_link(self, link: str, request_type: str) -> "Action":
        """Set the target ``link`` and the HTTP verb used to follow it.

        ``request_type`` is matched case-insensitively against
        :data:`REQUEST_TYPES` and stored upper case.
        """

        if not _is_bounded_text(link, LINK_MAX_LENGTH):
            raise InvalidArgument("The given link is invalid")
        if not isinstance(request_type, str) or request_type.upper() not in REQUEST_TYPES:
            raise InvalidArgument("The given request type is invalid")
        self._link = link
        self._request_type = request_type.upper()
        return self

    @property
    def link(self) -> str:
        return self._link

    @property
    def request_type(self) -> str:
        return self._request_type

    def set_primary(self, primary: bool) -> "Action":
        if not isinstance(primary, bool):
            raise InvalidArgument("The given primary option is invalid")
        self._primary = primary
        return self

    def is_primary(self) -> bool:
        return self._primary

    def is_valid(self) -> bool:
        """Return ``True`` when the raw label and the link are set."""

        return self._label != "" and self._link != ""

    def is_valid_parsed(self) -> bool:
        """Return ``True`` when the rendered label and the link are set."""

        return self._parsed_label != "" and self._link != ""


__all__ = ["Action", "LABEL_MAX_LENGTH", "LINK_MAX_LENGTH", "REQUEST_TYPES"]
