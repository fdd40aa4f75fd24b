"""Resolution of the ambient locale and time zone.

Public functions call these once at their boundary; helpers below them only
ever receive explicit ``babel.Locale`` and ``tzinfo`` objects.
"""
from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo
from zoneinfo import ZoneInfo

from babel import Locale, default_locale
from tzlocal import get_localzone

from ..config import Settings

FALLBACK_LOCALE = "en_US"


def get_locale(settings: Settings | None = None) -> str:
    """Return the ambient locale identifier.

    ``INTL_DATETIME_LOCALE`` wins, then the process locale (``LANGUAGE``,
    ``LC_ALL``, ``LC_TIME``, ``LANG``), then ``en_US``.
    """
    settings = settings or Settings()
    return settings.locale or default_locale("LC_TIME") or FALLBACK_LOCALE


def get_time_zone(settings: Settings | None = None) -> tzinfo:
    """Return the ambient time zone (``INTL_DATETIME_TIME_ZONE`` or the system zone)."""
    settings = settings or Settings()
    if settings.time_zone:
        return ZoneInfo(settings.time_zone)
    return get_localzone()


def resolve_locale(locale: str | Locale | None = None) -> Locale:
    """Turn a BCP 47 (``en-US``) or POSIX (``en_US``) identifier into a Babel locale."""
    if isinstance(locale, Locale):
        return locale
    identifier = locale or get_locale()
    return Locale.parse(identifier.replace("-", "_"))


def resolve_time_zone(time_zone: str | tzinfo | None = None) -> tzinfo:
    if time_zone is None:
        return get_time_zone()
    if isinstance(time_zone, str):
        return ZoneInfo(time_zone)
    return time_zone


def localize(value: datetime | date, ambient_zone: tzinfo | None = None) -> datetime:
    """Return an aware datetime for *value*.

    Naive datetimes are wall-clock times in the ambient zone; plain dates are
    midnight of that day in the ambient zone.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())
    if value.tzinfo is not None and value.utcoffset() is not None:
        return value
    return value.replace(tzinfo=ambient_zone or get_time_zone())


def now() -> datetime:
    return datetime.now(tz=timezone.utc)
