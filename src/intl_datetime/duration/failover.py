"""Failover duration formatter that tries primary then falls back."""
from __future__ import annotations
import structlog
from babel import Locale
from ..models.duration import Duration
from ..models.options import DurationFormatOptions
from .base import DurationFormatter

logger = structlog.get_logger(__name__)


class FailoverDurationFormatter(DurationFormatter):
    """Wraps two formatters. Tries primary; on failure falls back to secondary."""

    def __init__(self, primary: DurationFormatter, fallback: DurationFormatter):
        self._primary = primary
        self._fallback = fallback
        self._failover_count = 0

    def format(self, duration: Duration, locale: Locale, options: DurationFormatOptions) -> str:
        try:
            return self._primary.format(duration, locale, options)
        except Exception as e:
            logger.warning(
                "duration_format_failed",
                error=str(e),
                formatter=self._primary.get_name(),
                locale=str(locale),
            )
            self._failover_count += 1
            return self._fallback.format(duration, locale, options)

    def get_name(self) -> str:
        return f"{self._primary.get_name()} (failover: {self._fallback.get_name()})"

    @property
    def failover_count(self) -> int:
        return self._failover_count
