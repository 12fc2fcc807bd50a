"""Tests for the notification read models."""

from datetime import datetime, timezone

import pytest

from notifier.application.rich_objects import get_default_validator
from notifier.domain.entities import Notification
from notifier.interfaces.schemas import NotificationRead


def _rendered_notification() -> Notification:
    notification = (
        Notification(get_default_validator())
        .set_app("spreed")
        .set_user("carol")
        .set_date_time(datetime(2024, 8, 1, 18, 45, tzinfo=timezone.utc))
        .set_object("call", 99)
        .set_subject("missed_call", ["dave"])
        .set_parsed_subject("You missed a call from Dave")
        .set_rich_subject("You missed a call from {user}", {"user": {"type": "user", "id": "dave", "name": "Dave"}})
        .set_icon("https://example.com/apps/spreed/img/app.svg")
    )
    notification.add_parsed_action(
        notification.create_action()
        .set_label("view")
        .set_parsed_label("View chat")
        .set_link("https://example.com/call/abc", "WEB")
    )
    notification.add_parsed_action(
        notification.create_action()
        .set_label("call_back")
        .set_parsed_label("Call back")
        .set_link("https://example.com/call/abc", "GET")
        .set_primary(True)
    )
    return notification


def test_from_entity_copies_every_field_and_keeps_primary_first():
    payload = NotificationRead.from_entity(_rendered_notification())

    assert payload.app == "spreed"
    assert payload.object_id == "99"
    assert payload.subject_parameters == ["dave"]
    assert payload.rich_subject_parameters["user"]["name"] == "Dave"
    assert payload.message == ""
    assert payload.actions == []
    assert [action.parsed_label for action in payload.parsed_actions] == ["Call back", "View chat"]
    assert payload.parsed_actions[0].primary is True
    assert payload.parsed_actions[1].request_type == "WEB"


def test_from_entity_expresses_timestamp_in_configured_timezone(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NOTIFIER_APP_TIMEZONE", "Europe/Berlin")

    payload = NotificationRead.from_entity(_rendered_notification())

    assert payload.date_time == datetime(2024, 8, 1, 18, 45, tzinfo=timezone.utc)
    assert payload.date_time.isoformat() == "2024-08-01T20:45:00+02:00"


def test_from_entity_keeps_unset_timestamp_empty():
    payload = NotificationRead.from_entity(Notification(get_default_validator()))

    assert payload.date_time is None
    assert payload.model_dump()["parsed_actions"] == []
