"""Fallback duration formatting from plain unit patterns.

Used when CLDR unit lists are unavailable or the primary strategy fails.
Each non-zero unit is formatted on its own and the pieces are joined with
single spaces; seconds are always present so a zero duration reads
``0 seconds`` instead of an empty string.
"""
from __future__ import annotations

from babel import Locale

from ..models.duration import Duration
from ..models.options import DurationFormatOptions
from .base import DurationFormatter


class UnitDurationFormatter(DurationFormatter):
    """Fallback strategy: one unit pattern per component, space separated."""

    def format(self, duration: Duration, locale: Locale, options: DurationFormatOptions) -> str:
        units = [unit for unit in ("days", "hours", "minutes") if getattr(duration, unit)]
        units.append("seconds")
        return " ".join(
            self.format_unit(value, unit, options.unit_length(unit), locale)
            for unit, value in self.signed_parts(duration, units)
        )

    def get_name(self) -> str:
        return "units"
