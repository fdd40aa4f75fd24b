"""Shared test fixtures."""
import pytest
from intl_datetime.duration.selection import get_duration_formatter


@pytest.fixture(autouse=True)
def ambient_defaults(monkeypatch):
    """Pin the ambient locale and time zone so results do not depend on the host."""
    monkeypatch.setenv("INTL_DATETIME_LOCALE", "en-US")
    monkeypatch.setenv("INTL_DATETIME_TIME_ZONE", "UTC")
    monkeypatch.delenv("INTL_DATETIME_NATIVE_DURATION_FORMAT", raising=False)
    monkeypatch.delenv("INTL_DATETIME_VALIDATION_LOCALE", raising=False)
    get_duration_formatter.cache_clear()
    yield
    get_duration_formatter.cache_clear()


@pytest.fixture
def unit_formatter_only(monkeypatch):
    """Force the fallback duration strategy."""
    monkeypatch.setenv("INTL_DATETIME_NATIVE_DURATION_FORMAT", "false")
    get_duration_formatter.cache_clear()
    return get_duration_formatter()
