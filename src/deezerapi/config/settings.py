"""Client settings loaded from the environment (pydantic-settings).

These are only the DEFAULTS a DeezerClient starts from. Anything passed as a
ClientOption at construction wins over what is configured here.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.deezer.com/"


class DeezerSettings(BaseSettings):
    """Deezer client configuration.

    Every field can be set with a ``DEEZER_`` prefixed environment variable
    (``DEEZER_BASE_URL``, ``DEEZER_TIMEOUT_SECONDS``, ...) or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="DEEZER_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=1,
        description="Origin all relative resource paths are resolved against.",
    )
    timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        description="Per-request timeout applied to the default httpx client.",
    )
    log_requests: bool = Field(
        default=False,
        description="Wrap the default transport in LoggingTransport.",
    )
    log_level: str = Field(
        default="INFO",
        description="Level used by configure_logging().",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON log lines instead of human-readable text.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> DeezerSettings:
    """Return the process-wide settings instance (cached)."""
    return DeezerSettings()
