"""Configuration management for vitrine.

Settings are read from ``VITRINE_*`` environment variables or a ``.env``
file. Use :func:`get_settings` for the cached process-wide instance.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_LOG_FORMATS = {"console", "json"}


class Settings(BaseSettings):
    """Vitrine settings."""

    model_config = SettingsConfigDict(
        env_prefix="VITRINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Root log level")
    log_format: str = Field(default="console", description="console or json")
    first_party_manifest: Optional[str] = Field(
        default=None,
        description="Path to a first-party manifest replacing the bundled one",
    )
    fetch_timeout: float = Field(
        default=10.0, gt=0, description="Third-party manifest fetch timeout (seconds)"
    )
    manifest_query_param: str = Field(
        default="manifest", description="Query parameter carrying the manifest URL"
    )
    page_size: int = Field(default=12, gt=0, description="Items shown per collection page")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {v!r}")
        return level

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in VALID_LOG_FORMATS:
            raise ValueError(f"log_format must be one of {sorted(VALID_LOG_FORMATS)}, got {v!r}")
        return fmt


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
