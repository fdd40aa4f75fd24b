"""Elapsed-time record used by duration formatting.

A ``Duration`` is the breakdown of a millisecond delta into days, hours,
minutes and seconds.  There are no months or years: days absorb everything
above 24 hours.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

MS_PER_SECOND = 1000
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

DURATION_UNITS: tuple[str, ...] = ("days", "hours", "minutes", "seconds")


class Duration(BaseModel):
    """Signed days/hours/minutes/seconds breakdown.

    All non-zero components share one sign, so a negative duration reads as
    ``Duration(days=-1, hours=-2)`` rather than mixing signs.
    """

    model_config = ConfigDict(frozen=True)

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @model_validator(mode="after")
    def _single_sign(self) -> "Duration":
        values = [getattr(self, unit) for unit in DURATION_UNITS]
        if any(v > 0 for v in values) and any(v < 0 for v in values):
            raise ValueError(f"Duration components must share one sign: {values}")
        return self

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> "Duration":
        """Break a millisecond delta down into days, hours, minutes, seconds.

        The magnitude is truncated to whole seconds before the breakdown and
        the sign of *milliseconds* is re-applied to every component.  A
        negative delta under one second therefore yields a zero duration.
        """
        sign = -1 if milliseconds < 0 else 1
        total_seconds = abs(int(milliseconds)) // MS_PER_SECOND

        days, remainder = divmod(total_seconds, SECONDS_PER_DAY)
        hours, remainder = divmod(remainder, SECONDS_PER_HOUR)
        minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)

        return cls(
            days=sign * days,
            hours=sign * hours,
            minutes=sign * minutes,
            seconds=sign * seconds,
        )

    @property
    def sign(self) -> int:
        for unit in DURATION_UNITS:
            value = getattr(self, unit)
            if value:
                return -1 if value < 0 else 1
        return 0

    @property
    def is_zero(self) -> bool:
        return self.sign == 0

    @property
    def total_seconds(self) -> int:
        return (
            self.days * SECONDS_PER_DAY
            + self.hours * SECONDS_PER_HOUR
            + self.minutes * SECONDS_PER_MINUTE
            + self.seconds
        )

    def abs(self) -> "Duration":
        """Return the magnitude of this duration."""
        return Duration(
            days=abs(self.days),
            hours=abs(self.hours),
            minutes=abs(self.minutes),
            seconds=abs(self.seconds),
        )
