"""Duration formatting with CLDR unit lists.

Renders each unit with Babel's unit patterns and joins them with the
locale's measurement-unit list pattern, which is what a native duration
formatter produces: ``1 day, 1 hour, 1 minute, 1 second`` (long),
``1d 1h 2m 3s`` (narrow) or ``1 day, 1:02:03`` (digital).
"""
from __future__ import annotations

from babel import Locale
from babel.lists import format_list

from ..models.duration import DURATION_UNITS, Duration
from ..models.options import DurationFormatOptions
from .base import DurationFormatter

LIST_STYLES = {"long": "unit", "short": "unit-short", "narrow": "unit-narrow", "digital": "unit-short"}


class CldrDurationFormatter(DurationFormatter):
    """Primary strategy: per-unit CLDR patterns joined by CLDR unit lists."""

    def format(self, duration: Duration, locale: Locale, options: DurationFormatOptions) -> str:
        if options.style == "digital":
            parts = self._digital_parts(duration, locale, options)
        else:
            parts = [
                self.format_unit(value, unit, options.unit_length(unit), locale)
                for unit, value in self.signed_parts(duration, self._visible_units(duration, options))
            ]
        return format_list(parts, style=LIST_STYLES[options.style], locale=locale)

    def get_name(self) -> str:
        return "cldr"

    @staticmethod
    def _visible_units(duration: Duration, options: DurationFormatOptions) -> list[str]:
        units = [
            unit for unit in DURATION_UNITS
            if getattr(duration, unit) != 0 or options.always_display(unit)
        ]
        # A zero duration still shows its smallest unit: "0 seconds"
        return units or ["seconds"]

    def _digital_parts(self, duration: Duration, locale: Locale, options: DurationFormatOptions) -> list[str]:
        magnitude = duration.abs()
        negative = duration.sign < 0
        parts = []
        if magnitude.days or options.always_display("days"):
            days = -magnitude.days if negative else magnitude.days
            parts.append(self.format_unit(days, "days", options.unit_length("days"), locale))
            negative = negative and not magnitude.days
        clock = f"{magnitude.hours}:{magnitude.minutes:02d}:{magnitude.seconds:02d}"
        parts.append(f"-{clock}" if negative else clock)
        return parts
