"""Library configuration via environment variables with INTL_DATETIME_ prefix."""

from __future__ import annotations

from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Formatting defaults.

    All settings are read from environment variables prefixed with
    ``INTL_DATETIME_``.  A fresh instance is built at every public call so a
    changed environment is honoured by the next call.
    """

    model_config = SettingsConfigDict(env_prefix="INTL_DATETIME_")

    # ── Ambient defaults ───────────────────────────────────────────────────
    # Leave empty to use the process locale / system time zone
    locale: str | None = None
    time_zone: str | None = None

    # ── Validation ─────────────────────────────────────────────────────────
    # ISO-like field order (yyyy-mm-dd)
    validation_locale: str = "sv-SE"

    # ── Feature Flags ──────────────────────────────────────────────────────
    native_duration_format: bool = True

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("locale", "time_zone", mode="before")
    @classmethod
    def _blank_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("time_zone")
    @classmethod
    def _known_time_zone(cls, value: str | None) -> str | None:
        if value is None:
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {value}") from e
        return value
