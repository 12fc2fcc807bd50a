"""Tests for settings and timestamp helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from notifier.config import Settings, get_settings
from notifier.utils import ensure_app_timezone, get_app_timezone, is_epoch


def test_defaults_without_environment():
    settings = get_settings()

    assert settings.app_timezone == "UTC"
    assert settings.rich_object_types == []


def test_rich_object_types_accept_comma_separated_values(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("NOTIFIER_RICH_OBJECT_TYPES", "recipe,, poll ")

    assert Settings().rich_object_types == ["recipe", "poll"]


@pytest.mark.parametrize(
    ("name", "offset"),
    [
        ("UTC", timedelta(0)),
        ("UTC-05:00", timedelta(hours=-5)),
        ("GMT+0530", timedelta(hours=5, minutes=30)),
        ("Not/AZone", timedelta(0)),
    ],
)
def test_app_timezone_resolution(monkeypatch: pytest.MonkeyPatch, name, offset):
    monkeypatch.setenv("NOTIFIER_APP_TIMEZONE", name)

    zone = get_app_timezone()

    assert datetime(2024, 1, 1, tzinfo=zone).utcoffset() == offset


def test_ensure_app_timezone_treats_naive_values_as_utc():
    assert ensure_app_timezone(None) is None
    assert ensure_app_timezone(datetime(2024, 1, 1, 12)) == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)


def test_is_epoch():
    assert is_epoch(datetime(1970, 1, 1))
    assert is_epoch(datetime(1970, 1, 1, 1, tzinfo=timezone(timedelta(hours=1))))
    assert not is_epoch(datetime(1970, 1, 1, 0, 0, 1))
