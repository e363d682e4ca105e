"""
Application settings.

Typed, immutable settings (API bind address, logging, batch worker count)
resolved once from the environment and .env file.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from backend_creditscore.config.env import (
    DEFAULT_API_HOST,
    DEFAULT_API_PORT,
    DEFAULT_MAX_WORKERS,
    get_choice,
    get_int,
    get_str,
)


LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
LOG_FORMATS = ("json", "console")


@dataclass(frozen=True)
class Settings:
    api_host: str = DEFAULT_API_HOST
    api_port: int = DEFAULT_API_PORT
    log_level: str = "INFO"
    log_format: str = "json"
    max_batch_workers: int = DEFAULT_MAX_WORKERS


def load_settings() -> Settings:
    """Build Settings from the current environment (no caching)."""
    return Settings(
        api_host=get_str("API_HOST", DEFAULT_API_HOST),
        api_port=get_int("API_PORT", DEFAULT_API_PORT, minimum=1),
        log_level=get_choice("LOG_LEVEL", "INFO", LOG_LEVELS).upper(),
        log_format=get_choice("LOG_FORMAT", "json", LOG_FORMATS),
        max_batch_workers=get_int("SCORING_MAX_WORKERS", DEFAULT_MAX_WORKERS, minimum=1),
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide settings, loaded on first call."""
    return load_settings()
