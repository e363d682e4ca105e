"""
Application-level exceptions.

The scoring engine raises exactly one error kind, InvalidMetrics, and only from
validation, before any factor is computed. Anything else escaping the engine is
a defect, not a condition for callers to handle.
"""

from __future__ import annotations


class ScoringError(Exception):
    """Base class for credit scoring errors."""


class InvalidMetrics(ScoringError, ValueError):
    """Metrics record failed validation; carries a human-readable reason."""

    def __init__(self, reason: str, field: str | None = None):
        super().__init__(reason)
        self.reason = reason
        self.field = field

    def to_dict(self) -> dict[str, str | None]:
        return {"detail": self.reason, "field": self.field}
