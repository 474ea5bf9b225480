"""
Settings for filefetch (pydantic-settings).

Values come from keyword arguments, then FILEFETCH_* environment
variables, then defaults:

    FILEFETCH_CHUNK_SIZE=65536
    FILEFETCH_LOG_LEVEL=DEBUG
    FILEFETCH_LOG_JSON=true
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from filefetch.transport._config import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_ENCODING,
    DEFAULT_REQUEST_TIMEOUT,
    MAX_CHUNK_SIZE,
)


class FetchSettings(BaseSettings):
    """Process-wide settings for connections and logging."""

    model_config = SettingsConfigDict(
        env_prefix="FILEFETCH_",
        extra="ignore",
    )

    # Transfer
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, ge=1, le=MAX_CHUNK_SIZE)
    encoding: str = DEFAULT_ENCODING

    # HTTP
    connect_timeout: float = Field(default=DEFAULT_CONNECT_TIMEOUT, ge=1.0, le=120.0)
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, ge=1.0, le=300.0)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_json: bool = False


_settings: FetchSettings | None = None


def get_settings() -> FetchSettings:
    """Return the settings singleton, creating it on first use."""
    global _settings
    if _settings is None:
        _settings = FetchSettings()
    return _settings


def configure_settings(**overrides: Any) -> FetchSettings:
    """Replace the singleton with settings built from overrides."""
    global _settings
    _settings = FetchSettings(**overrides)
    return _settings


def reset_settings() -> None:
    """Drop the singleton so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None


__all__ = ["FetchSettings", "configure_settings", "get_settings", "reset_settings"]
