"""Tests for rich object string validation and the type registry."""

from __future__ import annotations

import pytest

from notifier.application.rich_objects import (
    ObjectDefinition,
    ParameterDefinition,
    RichObjectDefinitions,
    RichTextValidator,
    build_default_definitions,
    get_default_validator,
)
from notifier.domain.exceptions import InvalidRichObject
from notifier.domain.interfaces import RichObjectValidator

USER = {"type": "user", "id": "alice", "name": "Alice"}
FILE = {"type": "file", "id": "42", "name": "notes.md", "path": "Documents/notes.md"}


def test_validator_satisfies_the_domain_protocol():
    assert isinstance(RichTextValidator(), RichObjectValidator)


def test_validate_accepts_matching_parameters():
    validator = RichTextValidator()

    assert validator.validate("{user} edited {file}", {"user": USER, "file": FILE}) is None
    assert validator.first_violation("{user} edited {file}", {"user": USER, "file": FILE}) is None


def test_text_without_placeholders_needs_no_parameters():
    assert RichTextValidator().first_violation("Plain text", {}) is None


def test_unused_parameters_are_still_checked():
    violation = RichTextValidator().first_violation("Plain text", {"user": {"type": "user"}})

    assert violation is not None
    assert "missing id, name" in violation


@pytest.mark.parametrize(
    ("template", "parameters", "expected"),
    [
        ("{user} edited {file}", {"user": USER}, "'file' is undefined"),
        ("{user}", {"user": "alice"}, "'user' is malformed"),
        ("{user}", {"user": {"id": "alice", "name": "Alice"}}, "type of parameter 'user' is undefined"),
        ("{user}", {"user": {"type": "spaceship", "id": "1", "name": "x"}}, "'spaceship'"),
        ("{file}", {"file": {"type": "file", "id": "1", "name": "a"}}, "missing path"),
    ],
)
def test_validate_raises_for_malformed_content(template, parameters, expected):
    with pytest.raises(InvalidRichObject) as exc:
        RichTextValidator().validate(template, parameters)

    assert expected in str(exc.value)


def test_placeholders_are_matched_case_insensitively_but_looked_up_verbatim():
    validator = RichTextValidator()

    assert validator.first_violation("{User}", {"User": USER}) is None
    assert validator.first_violation("{User}", {"user": USER}) is not None


def test_braces_without_a_valid_name_are_not_placeholders():
    assert RichTextValidator().first_violation("{not a placeholder} {}", {}) is None


def test_registry_lookup_of_unknown_type_raises():
    with pytest.raises(InvalidRichObject):
        RichObjectDefinitions().get_definition("unknown")


def test_registry_register_replaces_and_refreshes_required_keys():
    registry = RichObjectDefinitions()
    assert registry.required_parameters("user") == ("id", "name")

    registry.register(
        "user",
        ObjectDefinition(
            author="tests",
            parameters={"id": ParameterDefinition(required=True)},
        ),
    )

    assert registry.required_parameters("user") == ("id",)
    assert RichTextValidator(registry).first_violation("{u}", {"u": {"type": "user", "id": "a"}}) is None


def test_registry_rejects_empty_type_names():
    with pytest.raises(ValueError):
        RichObjectDefinitions().register("", ObjectDefinition())


def test_registry_ships_common_types():
    types = RichObjectDefinitions().types()

    for expected in ("user", "user-group", "file", "call", "deck-card", "systemtag"):
        assert expected in types
    assert RichObjectDefinitions().required_parameters("call") == ("id", "name", "call-type")


def test_default_definitions_include_configured_types(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NOTIFIER_RICH_OBJECT_TYPES", "recipe, tasks-task")

    registry = build_default_definitions()

    assert "recipe" in registry
    assert registry.required_parameters("tasks-task") == ("id", "name")
    assert registry.required_parameters("file") == ("id", "name", "path")


def test_explicit_extra_types_override_settings():
    registry = build_default_definitions(["poll"])

    assert "poll" in registry
    assert "recipe" not in registry


def test_default_validator_is_shared_and_reads_settings_once(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NOTIFIER_RICH_OBJECT_TYPES", "recipe")

    validator = get_default_validator()
    monkeypatch.setenv("NOTIFIER_RICH_OBJECT_TYPES", "poll")

    assert get_default_validator() is validator
    assert "recipe" in validator.definitions
    assert "poll" not in validator.definitions
