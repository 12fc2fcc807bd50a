"""Registry of rich object types that may appear in rich subjects and messages."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field

from notifier.config import get_settings
from notifier.domain.exceptions import InvalidRichObject

logger = logging.getLogger(__name__)


class ParameterDefinition(BaseModel):
    """Describes one key of a rich object descriptor."""

    model_config = ConfigDict(frozen=True)

    description: str = Field(default="", description="Human readable meaning of the key")
    example: str = Field(default="", description="Sample value")
    required: bool = Field(default=False, description="Whether every descriptor must carry the key")


class ObjectDefinition(BaseModel):
    """Describes a rich object type and the keys its descriptors carry."""

    model_config = ConfigDict(frozen=True)

    author: str = Field(default="", description="App or component that owns the type")
    since: str = Field(default="", description="Version the type was introduced in")
    parameters: dict[str, ParameterDefinition] = Field(default_factory=dict)

    def required_parameters(self) -> tuple[str, ...]:
        """Return the keys every descriptor of this type must provide."""

        return tuple(name for name, item in self.parameters.items() if item.required)


def _definition(author: str, since: str, **parameters: tuple[str, str, bool]) -> ObjectDefinition:
    return ObjectDefinition(
        author=author,
        since=since,
        parameters={
            name.replace("_", "-"): ParameterDefinition(
                description=description, example=example, required=required
            )
            for name, (description, example, required) in parameters.items()
        },
    )


_ID = ("The unique identifier of the object", "42", True)
_NAME = ("The display name shown in the rendered string", "Example", True)

DEFAULT_DEFINITIONS: Mapping[str, ObjectDefinition] = {
    "announcement": _definition(
        "core", "11.0.0",
        id=_ID, name=_NAME,
        link=("The full URL to the announcement", "https://example.com/apps/announcements/#23", False),
    ),
    "calendar": _definition("core", "11.0.0", id=_ID, name=_NAME),
    "calendar-event": _definition(
        "core", "11.0.0",
        id=_ID, name=_NAME,
        link=("A link to the page displaying the event", "https://example.com/apps/calendar/", False),
    ),
    "call": _definition(
        "core", "11.0.0",
        id=_ID, name=_NAME,
        call_type=("The type of the call: one2one, group or public", "one2one", True),
        link=("The link to the conversation", "https://example.com/index.php/call/R4nd0mToken", False),
    ),
    "circle": _definition(
        "core", "12.0.0",
        id=_ID, name=_NAME,
        link=("The full URL to the circle", "https://example.com/apps/circles/#/circle/42", True),
    ),
    "deck-card": _definition(
        "core", "21.0.0",
        id=_ID, name=_NAME,
        boardname=("The board name", "Personal", True),
        stackname=("The stack name", "To do", True),
        link=("The full URL to the card", "https://example.com/apps/deck/#/board/2/card/11", True),
    ),
    "email": _definition("core", "11.0.0", id=_ID, name=_NAME),
    "file": _definition(
        "core", "11.0.0",
        id=_ID, name=_NAME,
        path=("The path of the file relative to the user's root", "path/to/file.txt", True),
        size=("The file size in bytes", "3145728", False),
        link=("The full URL to the file", "https://example.com/f/42", False),
        mimetype=("The mimetype of the file", "text/plain", False),
    ),
    "forms-form": _definition(
        "core", "21.0.0",
        id=_ID, name=_NAME,
        link=("The full URL to the form", "https://example.com/apps/forms/s/Fn0rm1d", True),
    ),
    "guest": _definition("core", "11.0.0", id=_ID, name=_NAME),
    "highlight": _definition(
        "core", "13.0.0",
        id=_ID, name=_NAME,
        link=("The full URL that should be opened when clicking the highlight", "https://example.com/", False),
    ),
    "systemtag": _definition(
        "core", "11.0.0",
        id=_ID, name=_NAME,
        visibility=("Whether the tag is visible: 1 or 0", "1", True),
        assignable=("Whether the tag is assignable: 1 or 0", "1", True),
    ),
    "user": _definition(
        "core", "11.0.0",
        id=_ID, name=_NAME,
        server=("The URL of the instance the user lives on", "localhost", False),
    ),
    "user-group": _definition("core", "11.0.0", id=_ID, name=_NAME),
}


class RichObjectDefinitions:
    """Lookup table of known rich object types.

    Required keys are cached per type; the cache is dropped whenever a type is
    registered.
    """

    def __init__(self, definitions: Mapping[str, ObjectDefinition] | None = None) -> None:
        self._definitions: dict[str, ObjectDefinition] = dict(
            DEFAULT_DEFINITIONS if definitions is None else definitions
        )
        self._required_cache: dict[str, tuple[str, ...]] = {}

    def __contains__(self, object_type: object) -> bool:
        return object_type in self._definitions

    def types(self) -> tuple[str, ...]:
        return tuple(sorted(self._definitions))

    def get_definition(self, object_type: str) -> ObjectDefinition:
        """Return the definition for ``object_type`` or raise ``InvalidRichObject``."""

        try:
            return self._definitions[object_type]
        except (KeyError, TypeError):
            raise InvalidRichObject(f"Object type '{object_type}' is undefined") from None

    def register(self, object_type: str, definition: ObjectDefinition) -> None:
        """Add ``definition`` under ``object_type``, replacing any previous one."""

        if not isinstance(object_type, str) or not object_type:
            raise ValueError("Rich object type names must be non-empty strings")
        if object_type in self._definitions:
            logger.debug("Replacing rich object definition for %s", object_type)
        else:
            logger.debug("Registering rich object definition for %s", object_type)
        self._definitions[object_type] = definition
        self._required_cache.clear()

    def required_parameters(self, object_type: str) -> tuple[str, ...]:
        """Return the keys a descriptor of ``object_type`` must carry."""

        cached = self._required_cache.get(object_type)
        if cached is None:
            cached = self.get_definition(object_type).required_parameters()
            self._required_cache[object_type] = cached
        return cached


def build_default_definitions(extra_types: Iterable[str] | None = None) -> RichObjectDefinitions:
    """Return a registry with the built-in types plus ``extra_types``.

    ``extra_types`` defaults to ``Settings.rich_object_types``. Each extra type
    only requires ``id`` and ``name``.
    """

    if extra_types is None:
        extra_types = get_settings().rich_object_types

    registry = RichObjectDefinitions()
    for object_type in extra_types:
        if object_type in registry:
            continue
        registry.register(object_type, _definition("settings", "", id=_ID, name=_NAME))
    return registry


__all__ = [
    "DEFAULT_DEFINITIONS",
    "ObjectDefinition",
    "ParameterDefinition",
    "RichObjectDefinitions",
    "build_default_definitions",
]
