"""One-time choice of the duration formatting strategy.

The capability probe runs once per process: when Babel ships CLDR unit list
patterns the CLDR formatter is used (wrapped with failover to the unit
formatter), otherwise the unit formatter alone.
"""
from __future__ import annotations

from functools import lru_cache

import structlog
from babel.lists import format_list
from babel.units import format_unit

from ..config import Settings
from .base import DurationFormatter
from .cldr import LIST_STYLES, CldrDurationFormatter
from .failover import FailoverDurationFormatter
from .units import UnitDurationFormatter

logger = structlog.get_logger(__name__)

PROBE_LOCALE = "en"


def supports_native_duration_format() -> bool:
    """Check whether unit patterns and every unit list style can be formatted."""
    try:
        format_unit(1, "duration-second", length="narrow", locale=PROBE_LOCALE)
        for style in set(LIST_STYLES.values()):
            format_list(["1", "2"], style=style, locale=PROBE_LOCALE)
    except (KeyError, ValueError) as e:
        logger.info("native_duration_format_unavailable", error=str(e))
        return False
    return True


@lru_cache(maxsize=1)
def get_duration_formatter() -> DurationFormatter:
    """Return the process-wide duration formatter.

    Call ``get_duration_formatter.cache_clear()`` to re-run the probe, e.g.
    after changing ``INTL_DATETIME_NATIVE_DURATION_FORMAT``.
    """
    settings = Settings()
    if settings.native_duration_format and supports_native_duration_format():
        formatter: DurationFormatter = FailoverDurationFormatter(
            primary=CldrDurationFormatter(),
            fallback=UnitDurationFormatter(),
        )
    else:
        formatter = UnitDurationFormatter()

    logger.debug("duration_formatter_selected", formatter=formatter.get_name())
    return formatter
