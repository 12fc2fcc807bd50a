import pathlib
import sys

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from notifier.application.rich_objects import get_default_validator
from notifier.config import reset_settings_cache
from notifier.utils.datetime import get_app_timezone


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Run every test against default settings unless it overrides them."""

    monkeypatch.delenv("NOTIFIER_APP_TIMEZONE", raising=False)
    monkeypatch.delenv("NOTIFIER_RICH_OBJECT_TYPES", raising=False)
    reset_settings_cache()
    get_app_timezone.cache_clear()
    get_default_validator.cache_clear()
    yield
    reset_settings_cache()
    get_app_timezone.cache_clear()
    get_default_validator.cache_clear()


def pytest_make_parametrize_id(config, val, argname):
    """Give huge ints a short test id; str() on them exceeds Python's digit limit."""

    if isinstance(val, int) and not isinstance(val, bool) and val.bit_length() > 4000:
        return f"{argname}_bigint_{val.bit_length()}bits"
    return None
