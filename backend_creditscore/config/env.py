"""
Environment variable loading for the credit scoring backend.

- API_HOST / API_PORT: HTTP bind address for the API server
- LOG_LEVEL / LOG_FORMAT: structlog level and renderer (json | console)
- SCORING_MAX_WORKERS: thread pool size for batch scoring
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is backend_creditscore/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _CONFIG_DIR.parent
_ROOT = _BACKEND_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000
DEFAULT_MAX_WORKERS = 4


def load_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides set vars."""
    if _ENV_PATH.is_file():
        load_dotenv(_ENV_PATH, override=False)


def get_str(name: str, default: str) -> str:
    load_env()
    return (os.getenv(name) or "").strip() or default


def get_int(name: str, default: int, minimum: int | None = None) -> int:
    """
    Read an integer env var. Empty or unset -> default.

    Raises ValueError on a non-integer or below-minimum value so misconfiguration
    fails at startup rather than silently.
    """
    raw = get_str(name, "")
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if minimum is not None and value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def get_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    """Read a case-insensitive enumerated env var; raises ValueError outside `choices`."""
    value = get_str(name, default).lower()
    if value not in choices:
        raise ValueError(f"{name} must be one of {', '.join(choices)}, got {value!r}")
    return value
