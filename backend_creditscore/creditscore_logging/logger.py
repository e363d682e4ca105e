"""
Structured logging for scoring events.

Every record carries event_type, level, logger, an ISO timestamp and, for
per-subject events, a shortened subject_id. Level and renderer come from
Settings (LOG_LEVEL, LOG_FORMAT) so the API server and the logs agree.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

from backend_creditscore.config.settings import Settings, get_settings

# Aleo addresses are 63 chars; logs keep the prefix only
SUBJECT_LOG_CHARS = 16


def _add_timestamp(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _normalize_event(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog's positional 'event' becomes event_type."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def _shorten_subject(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    subject = event_dict.get("subject_id")
    if subject is not None:
        subject = str(subject)
        if len(subject) > SUBJECT_LOG_CHARS:
            subject = subject[:SUBJECT_LOG_CHARS] + "..."
        event_dict["subject_id"] = subject
    return event_dict


def level_value(level_name: str) -> int:
    return getattr(logging, level_name.upper(), logging.INFO)


def renderer_for(fmt: str) -> Any:
    if fmt == "console":
        return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.processors.JSONRenderer()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply level and renderer from `settings` (process settings when omitted)."""
    settings = settings or get_settings()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            _add_timestamp,
            _normalize_event,
            _shorten_subject,
            renderer_for(settings.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value(settings.log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("batch_scored", records=120, invalid=3)
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_subject(subject_id: Any, name: str = "backend_creditscore") -> structlog.BoundLogger:
    """Logger for `name` with subject_id bound to every call."""
    return get_logger(name).bind(subject_id=str(subject_id))
