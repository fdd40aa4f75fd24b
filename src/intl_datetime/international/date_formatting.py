"""Locale and time-zone aware date/time formatting.

Every function resolves its locale and time zone once, at the call, then
hands CLDR skeletons to Babel.  Date and time halves are formatted
separately and joined with the locale's own date-time glue pattern
(``{1}, {0}`` in English), the way CLDR combines them.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date, datetime, tzinfo
from typing import Any

from babel import Locale
from babel.dates import format_datetime, match_skeleton, tokenize_pattern, untokenize_pattern

from ..models.options import DateTimeFormatOptions
from .ambient import get_time_zone, localize, now, resolve_locale, resolve_time_zone
from .date_parsing import FIELD_PART_TYPES, parse

DateInput = datetime | date | int | float | str

# Fixed reference locale and patterns for the locale-independent renderings
PLAIN_LOCALE = "en_US_POSIX"
PLAIN_DATE_PATTERN = "yyyy-MM-dd"
PLAIN_TIME_PATTERN = "HH:mm:ss"
PLAIN_DATE_TIME_PATTERN = f"{PLAIN_DATE_PATTERN}'T'{PLAIN_TIME_PATTERN}"

# Locales whose conventional default date uses a numeric month
NUMERIC_MONTH_LOCALES: frozenset[str] = frozenset({"fi-FI", "ko-KR", "is-IS"})
# Locales whose conventional default date uses a zero-padded month and day
TWO_DIGIT_LOCALES: frozenset[str] = frozenset({"de-DE", "ja-JP"})

_YEAR_SKELETON = {"numeric": "y", "2-digit": "yy"}
_MONTH_SKELETON = {"numeric": "M", "2-digit": "MM", "short": "MMM", "long": "MMMM", "narrow": "MMMMM"}
_DAY_SKELETON = {"numeric": "d", "2-digit": "dd"}
_WEEKDAY_SKELETON = {"short": "E", "long": "EEEE", "narrow": "EEEEE"}
_WIDTH_REPEAT = {"numeric": 1, "2-digit": 2}
# Part types whose numeric width follows the requested skeleton
_NUMERIC_PARTS = frozenset({"year", "month", "day", "hour", "minute", "second"})


def _instant(value: DateInput | None, ambient_zone: tzinfo) -> datetime:
    if value is None:
        return now()
    parsed = parse(value)
    if parsed is None:
        raise ValueError(f"Invalid date value: {value!r}")
    return localize(parsed, ambient_zone)


def _zones(time_zone: str | tzinfo | None) -> tuple[tzinfo, tzinfo]:
    """Return the ambient zone and the display zone, reading settings once."""
    ambient_zone = get_time_zone()
    if time_zone is None:
        return ambient_zone, ambient_zone
    return ambient_zone, resolve_time_zone(time_zone)


def _bcp47(locale: str | Locale | None) -> str:
    """Return ``en-US`` style identifiers so designated locale sets can be matched."""
    if isinstance(locale, Locale):
        parts = [locale.language, locale.territory]
        return "-".join(p for p in parts if p)
    return (locale or "").replace("_", "-")


def date_options_for_locale(locale: str | Locale) -> dict[str, str]:
    """Conventional year/month/day widths for *locale*'s default date."""
    identifier = _bcp47(locale)
    month, day = "short", "numeric"
    if identifier in NUMERIC_MONTH_LOCALES:
        month = "numeric"
    elif identifier in TWO_DIGIT_LOCALES:
        month, day = "2-digit", "2-digit"
    return {"year": "numeric", "month": month, "day": day}


def _hour_symbol(locale: Locale, hour12: bool | None) -> str:
    if hour12 is True:
        return "h"
    if hour12 is False:
        return "H"
    for kind, token in tokenize_pattern(locale.time_formats["medium"].pattern):
        if kind == "field" and token[0] in "hHkK":
            return token[0]
    return "H"


def _date_skeleton(fields: Mapping[str, Any]) -> str:
    skeleton = ""
    if "weekday" in fields:
        skeleton += _WEEKDAY_SKELETON[fields["weekday"]]
    if "year" in fields:
        skeleton += _YEAR_SKELETON[fields["year"]]
    if "month" in fields:
        skeleton += _MONTH_SKELETON[fields["month"]]
    if "day" in fields:
        skeleton += _DAY_SKELETON[fields["day"]]
    return skeleton


def _time_skeleton(fields: Mapping[str, Any], locale: Locale) -> str:
    skeleton = ""
    if "hour" in fields:
        skeleton += _hour_symbol(locale, fields.get("hour12")) * _WIDTH_REPEAT[fields["hour"]]
    if "minute" in fields:
        skeleton += "m" * _WIDTH_REPEAT[fields["minute"]]
    if "second" in fields:
        skeleton += "s" * _WIDTH_REPEAT[fields["second"]]
    return skeleton


def skeleton_pattern(skeleton: str, locale: Locale) -> str:
    """Return the locale pattern best matching *skeleton*, widened to its numeric widths.

    CLDR only ships some skeletons, so ``yMMdd`` may match ``y/M/d``; numeric
    fields the skeleton asks for as two digits are padded to ``y/MM/dd``.
    """
    skeletons = locale.datetime_skeletons
    matched = skeleton if skeleton in skeletons else match_skeleton(skeleton, skeletons)
    pattern = skeletons[matched].pattern

    widths = {
        FIELD_PART_TYPES.get(token[0]): token[1]
        for kind, token in tokenize_pattern(skeleton)
        if kind == "field"
    }
    tokens = []
    for kind, token in tokenize_pattern(pattern):
        if kind == "field":
            part_type = FIELD_PART_TYPES.get(token[0])
            if part_type in _NUMERIC_PARTS and token[1] == 1 and widths.get(part_type) == 2:
                token = (token[0], 2)
        tokens.append((kind, token))
    return untokenize_pattern(tokens)


def _glue_pattern(locale: Locale, fields: Mapping[str, Any]) -> str:
    month = fields.get("month")
    width = "long" if month == "long" else "medium" if month in ("short", "narrow") else "short"
    glue = locale.datetime_formats.get(width) or locale.datetime_formats.get("medium") or "{1} {0}"
    # quoted literals such as {1} 'at' {0}
    return re.sub(r"'([^']*)'", r"\1", str(glue))


def format_fields(value: datetime, fields: Mapping[str, Any], locale: Locale, time_zone: tzinfo) -> str:
    """Render the requested fields of an aware *value* in *time_zone*."""
    date_skeleton = _date_skeleton(fields)
    time_skeleton = _time_skeleton(fields, locale)

    date_str = time_str = ""
    if date_skeleton:
        date_str = format_datetime(value, skeleton_pattern(date_skeleton, locale), tzinfo=time_zone, locale=locale)
    if time_skeleton:
        time_str = format_datetime(value, skeleton_pattern(time_skeleton, locale), tzinfo=time_zone, locale=locale)

    if date_str and time_str:
        return _glue_pattern(locale, fields).replace("{1}", date_str).replace("{0}", time_str)
    return date_str or time_str


def format_plain_date(value: DateInput | None = None, time_zone: str | tzinfo | None = None) -> str:
    """``YYYY-MM-DD`` of *value* in *time_zone*, independent of any locale."""
    ambient_zone, zone = _zones(time_zone)
    instant = _instant(value, ambient_zone)
    return format_datetime(instant, PLAIN_DATE_PATTERN, tzinfo=zone, locale=PLAIN_LOCALE)


def format_plain_time(value: DateInput | None = None, time_zone: str | tzinfo | None = None) -> str:
    """``HH:MM:SS`` wall-clock time of *value* in *time_zone*."""
    ambient_zone, zone = _zones(time_zone)
    instant = _instant(value, ambient_zone)
    return format_datetime(instant, PLAIN_TIME_PATTERN, tzinfo=zone, locale=PLAIN_LOCALE)


def format_plain_date_time(value: DateInput | None = None, time_zone: str | tzinfo | None = None) -> str:
    ambient_zone, zone = _zones(time_zone)
    instant = _instant(value, ambient_zone)
    return format_datetime(instant, PLAIN_DATE_TIME_PATTERN, tzinfo=zone, locale=PLAIN_LOCALE)


def format_numeric_date(
    value: DateInput | None = None,
    locale: str | Locale | None = None,
    time_zone: str | tzinfo | None = None,
) -> str:
    """Short numeric date, e.g. ``8/3/2004`` (en-US) or ``03/08/2004`` (en-GB)."""
    babel_locale = resolve_locale(locale)
    ambient_zone, zone = _zones(time_zone)
    instant = _instant(value, ambient_zone)
    fields = {"year": "numeric", "month": "numeric", "day": "numeric"}
    return format_fields(instant, fields, babel_locale, zone)


def format_date(
    value: DateInput | None = None,
    locale: str | Locale | None = None,
    time_zone: str | tzinfo | None = None,
) -> str:
    """The locale's conventional date, e.g. ``Aug 3, 2004`` or ``03.08.2004``."""
    babel_locale = resolve_locale(locale)
    ambient_zone, zone = _zones(time_zone)
    instant = _instant(value, ambient_zone)
    return format_fields(instant, date_options_for_locale(locale or babel_locale), babel_locale, zone)


def format_time(
    value: DateInput | None = None,
    locale: str | Locale | None = None,
    time_zone: str | tzinfo | None = None,
) -> str:
    babel_locale = resolve_locale(locale)
    ambient_zone, zone = _zones(time_zone)
    instant = _instant(value, ambient_zone)
    fields = {"hour": "numeric", "minute": "numeric", "second": "numeric"}
    return format_fields(instant, fields, babel_locale, zone)


def format_date_time(
    value: DateInput | None = None,
    locale: str | Locale | None = None,
    time_zone: str | tzinfo | None = None,
) -> str:
    babel_locale = resolve_locale(locale)
    ambient_zone, zone = _zones(time_zone)
    instant = _instant(value, ambient_zone)
    fields = {
        **date_options_for_locale(locale or babel_locale),
        "hour": "numeric",
        "minute": "numeric",
        "second": "numeric",
    }
    return format_fields(instant, fields, babel_locale, zone)


def format_date_time_by_options(
    options: DateTimeFormatOptions | Mapping[str, Any] | None,
    value: DateInput | None = None,
    locale: str | Locale | None = None,
    time_zone: str | tzinfo | None = None,
) -> str:
    """Date-time with *options* merged over the default date, hour and minute fields.

    Pass ``{"second": "numeric"}`` to add seconds or ``{"year": None}`` to drop
    the year.  Without options use :func:`format_date_time`.
    """
    if options is None:
        raise ValueError("Please use format_date_time instead")

    babel_locale = resolve_locale(locale)
    ambient_zone, zone = _zones(time_zone)
    instant = _instant(value, ambient_zone)
    defaults = {
        **date_options_for_locale(locale or babel_locale),
        "hour": "numeric",
        "minute": "numeric",
    }
    fields = DateTimeFormatOptions.coerce(options).merged_onto(defaults)
    return format_fields(instant, fields, babel_locale, zone)
