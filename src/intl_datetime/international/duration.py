"""Elapsed time between two instants and its localized rendering."""
from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any

from babel import Locale

from ..duration.selection import get_duration_formatter
from ..models.duration import Duration
from ..models.options import DurationFormatOptions
from .ambient import get_time_zone, localize, now, resolve_locale

# Languages written without spaces between a number and its unit
COMPACT_LANGUAGES: frozenset[str] = frozenset({"zh", "ja", "ko"})
# Languages whose short and narrow unit data are unreliable; always use long
LONG_ONLY_LANGUAGES: frozenset[str] = frozenset({"ja"})


def compute_duration(from_: datetime, to: datetime | None = None) -> Duration:
    """Break ``to - from_`` down into days, hours, minutes and seconds.

    Naive datetimes are wall-clock times in the ambient zone.  A *to* earlier
    than *from_* gives a negative duration.
    """
    ambient_zone = get_time_zone()
    start = localize(from_, ambient_zone)
    end = localize(to, ambient_zone) if to is not None else now()
    return Duration.from_milliseconds((end - start) // timedelta(milliseconds=1))


def _locale_options(options: DurationFormatOptions, locale: Locale) -> DurationFormatOptions:
    if locale.language in LONG_ONLY_LANGUAGES:
        return options.model_copy(
            update={"style": "long", "days": None, "hours": None, "minutes": None, "seconds": None}
        )
    return options


def format_duration_by_options(
    options: DurationFormatOptions | Mapping[str, Any] | None,
    from_: datetime,
    to: datetime | None = None,
    locale: str | Locale | None = None,
) -> str:
    """Render the time elapsed from *from_* to *to* (default: now).

    Negative durations carry the sign on the leading unit (``-1 day``).
    Without options use :func:`format_duration`.
    """
    if options is None:
        raise ValueError("Please use format_duration instead")

    babel_locale = resolve_locale(locale)
    duration = compute_duration(from_, to)
    resolved = _locale_options(DurationFormatOptions.coerce(options), babel_locale)

    result = get_duration_formatter().format(duration, babel_locale, resolved)

    if babel_locale.language in COMPACT_LANGUAGES:
        return re.sub(r"\s+", "", result)
    return result


def format_duration(from_: datetime, to: datetime | None = None, locale: str | Locale | None = None) -> str:
    """Long-style duration, e.g. ``1 day, 1 hour, 1 minute, 1 second``."""
    return format_duration_by_options(DurationFormatOptions(style="long"), from_, to, locale)
