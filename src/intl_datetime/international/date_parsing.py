"""Loose date parsing, locale date patterns and locale-aware validation."""
from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from typing import Literal

from babel import Locale
from babel.dates import match_skeleton, tokenize_pattern

from ..config import Settings
from .ambient import resolve_locale

PLAIN_DATE_RE = re.compile(r'(\d+)-(\d{1,2})-(\d{1,2})')
ISO8601_DATE_RE = re.compile(r'\d{4}-\d{1,2}-\d{1,2}')

# CLDR skeleton for a numeric year, month and day in the locale's order
NUMERIC_DATE_SKELETON = "yMd"

# Pattern field letter → date part type
FIELD_PART_TYPES: dict[str, str] = {
    'G': 'era',
    'y': 'year', 'Y': 'year', 'u': 'year', 'U': 'year', 'r': 'year',
    'Q': 'quarter', 'q': 'quarter',
    'M': 'month', 'L': 'month',
    'w': 'week', 'W': 'week',
    'd': 'day', 'D': 'day', 'F': 'day', 'g': 'day',
    'E': 'weekday', 'e': 'weekday', 'c': 'weekday',
    'a': 'dayPeriod', 'b': 'dayPeriod', 'B': 'dayPeriod',
    'h': 'hour', 'H': 'hour', 'K': 'hour', 'k': 'hour',
    'm': 'minute',
    's': 'second',
    'S': 'fractionalSecond', 'A': 'fractionalSecond',
    'z': 'timeZoneName', 'Z': 'timeZoneName', 'O': 'timeZoneName',
    'v': 'timeZoneName', 'V': 'timeZoneName', 'X': 'timeZoneName', 'x': 'timeZoneName',
}


def parse(value: str | int | float | date | datetime) -> datetime | None:
    """Normalize a loosely specified date into a datetime.

    - ``int``/``float``: epoch milliseconds, returned as an aware UTC datetime.
    - ``datetime``: returned unchanged; ``date``: naive midnight of that day.
    - ``str``: exactly ``YYYY-M-D``; the result is naive local midnight.

    Returns ``None`` for anything that is not a real calendar date, including
    month 13, day overflow ("2004-8-32", "2001-2-29") and trailing segments.
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    if isinstance(value, datetime):
        return value

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    if not isinstance(value, str):
        return None

    match = PLAIN_DATE_RE.fullmatch(value)
    if not match:
        return None

    try:
        # int() refuses digit runs past the interpreter's conversion limit
        year, month, day = (int(g) for g in match.groups())
        # datetime() refuses day/month overflow instead of rolling over
        parsed = datetime(year, month, day)
    except ValueError:
        return None

    return parsed if parsed.day == day else None


def numeric_date_pattern(locale: Locale) -> str:
    """Return the CLDR pattern for a numeric year-month-day date, e.g. ``M/d/y``."""
    skeletons = locale.datetime_skeletons
    skeleton = NUMERIC_DATE_SKELETON
    if skeleton not in skeletons:
        skeleton = match_skeleton(skeleton, skeletons)
    if skeleton is None:
        return locale.date_formats['short'].pattern
    return skeletons[skeleton].pattern


def get_date_pattern(locale: str | Locale | None = None) -> str:
    """Describe the field order and separators of a locale's numeric date.

    Year fields become ``yyyy``, other fields their part type's first letter
    doubled, literals and unmapped letters are kept: ``en-US`` gives
    ``mm/dd/yyyy``.
    """
    babel_locale = resolve_locale(locale)
    pattern = ''
    for kind, token in tokenize_pattern(numeric_date_pattern(babel_locale)):
        if kind == 'chars':
            pattern += token
            continue
        part_type = FIELD_PART_TYPES.get(token[0])
        if part_type is None:
            pattern += token[0] * token[1]
        elif part_type == 'year':
            pattern += 'yyyy'
        else:
            pattern += part_type[0] * 2
    return pattern


def validate_by_locale(date_string: str, locale: str | Locale | None = None) -> datetime | Literal[False]:
    """Check *date_string* against the numeric date field order of *locale*.

    Digit runs are assigned to year, month and day following the letter runs
    of ``get_date_pattern(locale)``.  Only the first three positions are
    consumed: trailing digit groups are not rejected.
    """
    if not isinstance(date_string, str):
        return False

    date_numbers = re.findall(r'\d+', date_string)
    if len(date_numbers) < 3:
        return False

    if locale is None:
        locale = Settings().validation_locale
    date_letters = re.findall(r'[dmy]+', get_date_pattern(locale))
    if len(date_letters) < 3:
        return False

    year = month = day = None
    for index, letters in enumerate(date_letters[:3]):
        if letters == 'mm':
            month = date_numbers[index]
        elif letters == 'dd':
            day = date_numbers[index]
        else:
            year = date_numbers[index]

    return parse(f"{year}-{month}-{day}") or False


def validate(date_string: str, locale: str | Locale | None = None) -> datetime | Literal[False]:
    """Validate a date string, by default against the ISO-like ``sv-SE`` order."""
    return validate_by_locale(date_string, locale)


def validate_iso8601(date_string: str) -> datetime | Literal[False]:
    """Strict ``YYYY-M-D`` check: four-digit year, nothing before or after."""
    if not isinstance(date_string, str) or not ISO8601_DATE_RE.fullmatch(date_string):
        return False
    return parse(date_string) or False
