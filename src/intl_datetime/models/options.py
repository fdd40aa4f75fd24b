"""Option records passed through to the formatting engine.

Both records accept snake_case field names and the camelCase spelling used by
host ``Intl`` option bags (``minutesDisplay``, ``hour12``), so option objects
written for either API validate unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

UnitLength = Literal["long", "short", "narrow"]
UnitDisplay = Literal["auto", "always"]
NumericWidth = Literal["numeric", "2-digit"]


class DurationFormatOptions(BaseModel):
    """Style and per-unit display settings for duration formatting."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    style: Literal["long", "short", "narrow", "digital"] = "long"
    # Accepted so host option bags validate; Babel resolves locales exactly
    locale_matcher: Literal["lookup", "best fit"] = "best fit"

    days: UnitLength | None = None
    hours: UnitLength | None = None
    minutes: UnitLength | None = None
    seconds: UnitLength | None = None

    days_display: UnitDisplay = "auto"
    hours_display: UnitDisplay = "auto"
    minutes_display: UnitDisplay = "auto"
    seconds_display: UnitDisplay = "auto"

    @classmethod
    def coerce(cls, options: "DurationFormatOptions | Mapping[str, Any]") -> "DurationFormatOptions":
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))

    def unit_length(self, unit: str) -> UnitLength:
        """Resolve the display length of *unit* from its override or the style."""
        override = getattr(self, unit)
        if override is not None:
            return override
        return "short" if self.style == "digital" else self.style

    def always_display(self, unit: str) -> bool:
        return getattr(self, f"{unit}_display") == "always"


class DateTimeFormatOptions(BaseModel):
    """Field selection for date-time formatting.

    A field explicitly set to ``None`` removes it from the merged request, for
    example ``{"second": None}`` to drop seconds from the default fields.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    year: NumericWidth | None = None
    month: Literal["numeric", "2-digit", "short", "long", "narrow"] | None = None
    day: NumericWidth | None = None
    weekday: UnitLength | None = None
    hour: NumericWidth | None = None
    minute: NumericWidth | None = None
    second: NumericWidth | None = None
    hour12: bool | None = None

    @classmethod
    def coerce(cls, options: "DateTimeFormatOptions | Mapping[str, Any]") -> "DateTimeFormatOptions":
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))

    def merged_onto(self, defaults: Mapping[str, Any]) -> dict[str, Any]:
        """Overlay the explicitly set fields on *defaults*, dropping ``None`` values."""
        merged = dict(defaults)
        merged.update(self.model_dump(exclude_unset=True))
        return {key: value for key, value in merged.items() if value is not None}
