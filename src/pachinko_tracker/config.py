"""Application configuration."""

import logging
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pachinko_tracker.domain.lookups import LookupEntry

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    timezone: str = "UTC"
    employees: str | None = None
    machines: str | None = None
    seed_sample_sessions: bool = True
    api_base_url: str = "http://localhost:8000"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("timezone")
    @classmethod
    def known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        if value.upper() not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return value.upper()


def parse_lookup_entries(raw: str | None) -> list[LookupEntry] | None:
    """Parse ``id:name`` pairs separated by commas."""
    if raw is None:
        return None
    entries: list[LookupEntry] = []
    for chunk in raw.split(","):
        entry_id, sep, name = chunk.partition(":")
        entry_id, name = entry_id.strip(), name.strip()
        if not sep or not entry_id or not name:
            continue
        entries.append(LookupEntry(id=entry_id, name=name))
    return entries or None
