"""Duration formatter abstract base class."""
from __future__ import annotations
from abc import ABC, abstractmethod
from babel import Locale
from babel.units import format_unit
from ..models.duration import Duration
from ..models.options import DurationFormatOptions

# Duration unit → CLDR measurement unit
CLDR_UNITS = {
    "days": "duration-day",
    "hours": "duration-hour",
    "minutes": "duration-minute",
    "seconds": "duration-second",
}

# CLDR aliases long and narrow unit patterns to short where a locale has none
LENGTH_FALLBACKS = {
    "long": ("long", "short"),
    "short": ("short",),
    "narrow": ("narrow", "short"),
}


class DurationFormatter(ABC):
    """Abstract base class for duration formatting strategies."""

    @abstractmethod
    def format(self, duration: Duration, locale: Locale, options: DurationFormatOptions) -> str:
        """Render *duration* for *locale*."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Return the strategy name used in logs."""
        ...

    @staticmethod
    def format_unit(value: int, unit: str, length: str, locale: Locale) -> str:
        """Format one unit, stepping down to the short pattern if *length* has none."""
        measurement_unit = CLDR_UNITS[unit]
        patterns = locale._data["unit_patterns"].get(measurement_unit, {})
        for candidate in LENGTH_FALLBACKS[length]:
            if patterns.get(candidate):
                return format_unit(value, measurement_unit, length=candidate, locale=locale)
        return format_unit(value, measurement_unit, length=length, locale=locale)

    @staticmethod
    def signed_parts(duration: Duration, units: list[str]) -> list[tuple[str, int]]:
        """Pair each of *units* with its magnitude, the first one carrying the sign.

        ``-1 day, 2 hours`` reads as one negative duration, so only the
        leading unit shows the minus sign.
        """
        magnitude = duration.abs()
        parts = [(unit, getattr(magnitude, unit)) for unit in units]
        if parts and duration.sign < 0:
            unit, value = parts[0]
            parts[0] = (unit, -value)
        return parts

