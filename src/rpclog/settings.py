"""Environment-based configuration using pydantic-settings.

Example:
    >>> from rpclog.settings import get_settings
    >>> get_settings().sink
    'noop'

    # Or with environment variables:
    # RPCLOG_SINK=stdlib
    # RPCLOG_LOGGER_NAME=myservice.rpc
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MiddlewareSettings(BaseSettings):
    """Sink selection for hosts that configure rpclog from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="RPCLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
    )

    sink: Literal["noop", "stdlib"] = Field(default="noop", description="Sink installed by configure_from_settings")
    logger_name: str = Field(default="rpclog", min_length=1, description="stdlib logger used by the stdlib sink")

    @field_validator("sink", mode="before")
    @classmethod
    def _normalize_sink(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v


@lru_cache(maxsize=1)
def get_settings() -> MiddlewareSettings:
    """Get the global settings instance (cached)."""
    return MiddlewareSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
