"""Environment-driven settings for typepred.

The predicates themselves take no configuration; what can be configured is how
the library reports itself (log level, log format, service name).

Manifesto:
    Configuration should be explicit, validated, and environment-driven.

    - **Pydantic validation:** Type-checked when the settings object is built
    - **Environment-driven:** Reads ``TYPEPRED_*`` env vars and a ``.env`` file
    - **Extra ignore:** Unknown env vars don't cause startup failures

Examples:
    >>> from typepred.core.settings import TypepredSettings, configure_logging_from_settings
    >>> settings = TypepredSettings(log_level="DEBUG", json_logs=True)
    >>> configure_logging_from_settings(settings)

Tags:
    settings, configuration, pydantic, environment, typepred

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from typepred.core.logging import configure_logging

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TypepredSettings(BaseSettings):
    """Settings for the typepred library.

    Fields
    ──────
    log_level    : structlog filtering level
    json_logs    : True for JSON, False for console, None to auto-detect
    service_name : ``service.name`` stamped on every log record
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPEPRED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "WARNING"
    json_logs: bool | None = None
    service_name: str = Field(
        default="typepred",
        description="Service name included in structured logs",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


def configure_logging_from_settings(settings: TypepredSettings | None = None) -> TypepredSettings:
    """Apply logging settings, reading the environment when none are given."""
    if settings is None:
        settings = TypepredSettings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.json_logs,
        service=settings.service_name,
    )
    return settings


__all__ = [
    "TypepredSettings",
    "configure_logging_from_settings",
]
