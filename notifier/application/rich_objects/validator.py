"""Validation of rich object strings.

A rich object string is a template such as ``"{user} shared {file} with you"``
paired with a mapping from each placeholder name to a descriptor of the object
it stands for, e.g. ``{"type": "user", "id": "alice", "name": "Alice"}``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Final

from notifier.domain.exceptions import InvalidRichObject

from .definitions import RichObjectDefinitions, build_default_definitions

PLACEHOLDER_PATTERN: Final[re.Pattern[str]] = re.compile(r"\{([a-z0-9]+)\}", re.IGNORECASE)


class RichTextValidator:
    """Check that a rich template and its parameters fit together.

    Every placeholder in the template needs a parameter, and every parameter
    must be a mapping whose ``type`` is registered in ``definitions`` and
    which carries all keys that type marks as required.
    """

    def __init__(self, definitions: RichObjectDefinitions | None = None) -> None:
        self._definitions = definitions if definitions is not None else build_default_definitions()

    @property
    def definitions(self) -> RichObjectDefinitions:
        return self._definitions

    def validate(self, template: str, parameters: Mapping[str, Any]) -> None:
        """Raise ``InvalidRichObject`` when the content is malformed."""

        violation = self.first_violation(template, parameters)
        if violation is not None:
            raise InvalidRichObject(violation)

    def first_violation(self, template: str, parameters: Mapping[str, Any]) -> str | None:
        """Return a description of the first problem found, or ``None``."""

        if not isinstance(template, str):
            return "Rich template must be a string"
        if not isinstance(parameters, Mapping):
            return "Rich parameters must be a mapping"

        for placeholder in PLACEHOLDER_PATTERN.findall(template):
            if placeholder not in parameters:
                return f"Parameter '{placeholder}' is undefined"

        for name, parameter in parameters.items():
            if not isinstance(parameter, Mapping):
                return f"Parameter '{name}' is malformed"
            violation = self._parameter_violation(name, parameter)
            if violation is not None:
                return violation
        return None

    def _parameter_violation(self, name: str, parameter: Mapping[str, Any]) -> str | None:
        object_type = parameter.get("type")
        if object_type is None:
            return f"Object type of parameter '{name}' is undefined"
        if not isinstance(object_type, str) or object_type not in self._definitions:
            return f"Object type '{object_type}' of parameter '{name}' is unknown"

        missing = [
            key for key in self._definitions.required_parameters(object_type)
            if key not in parameter
        ]
        if missing:
            return f"Object '{name}' is invalid: missing {', '.join(missing)}"
        return None


@lru_cache(maxsize=1)
def get_default_validator() -> RichTextValidator:
    """Return the shared validator over the default definitions registry."""

    return RichTextValidator()


__all__ = ["PLACEHOLDER_PATTERN", "RichTextValidator", "get_default_validator"]
