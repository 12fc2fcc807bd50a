"""Contracts for collaborators consumed by the domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RichObjectValidator(Protocol):
    """Structural check applied to rich subjects and messages.

    ``first_violation`` returns a short description of the first problem found
    in ``template``/``parameters`` or ``None`` when the content is well formed.
    """

    def first_violation(
        self, template: str, parameters: Mapping[str, Any]
    ) -> str | None:
        ...


__all__ = ["RichObjectValidator"]
