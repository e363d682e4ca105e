"""
Structured logging for the credit scoring backend.

JSON logs with timestamp, subject_id, event_type.
Use get_logger() in all modules for aggregation-friendly output.
"""

from backend_creditscore.creditscore_logging.logger import bind_subject, configure_logging, get_logger

__all__ = ["bind_subject", "configure_logging", "get_logger"]
