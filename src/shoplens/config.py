"""Runtime settings for ShopLens.

Every value can be overridden through a ``SHOPLENS_*`` environment variable so
the browser can point at a mirror of the catalogue API or be tuned for slower
machines without code changes.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    # Catalogue API
    api_base_url: str = "https://dummyjson.com"
    fetch_limit: int = Field(default=200, ge=1)
    http_timeout: float = Field(default=10.0, ge=0.1)

    # Join: product attribute matched against a user attribute
    join_product_field: str = Field(default="id", min_length=1)
    join_user_field: str = Field(default="id", min_length=1)

    # Rendering
    row_height: int = Field(default=148, ge=1)
    overscan: int = Field(default=1, ge=0)
    load_thumbnails: bool = True
    thumbnail_cache_size: int = Field(default=256, ge=1)

    # Scheduling: 0 yields to pending input events before recomputing
    defer_ms: int = Field(default=0, ge=0)
    filter_in_thread: bool = False

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="SHOPLENS_",
        case_sensitive=False,
    )

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, raising :class:`ConfigError` on bad overrides."""

    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


__all__ = ["Settings", "get_settings"]
