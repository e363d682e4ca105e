"""
Metrics validation.

Fail-fast checks run before any factor is computed. Out-of-range input is
rejected, never clamped.
"""

from __future__ import annotations

import math
from typing import Any

from backend_creditscore.analysis_engine.constants import ADDRESS_PREFIX
from backend_creditscore.analysis_engine.models import Metrics
from backend_creditscore.core.exceptions import InvalidMetrics
from backend_creditscore.creditscore_logging import bind_subject

PERCENT_MIN = 0
PERCENT_MAX = 100


def _require_number(name: str, value: Any) -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidMetrics(f"{name} must be a number", field=name)
    if not math.isfinite(value):
        raise InvalidMetrics(f"{name} must be finite", field=name)
    return value


def _require_non_negative(name: str, value: Any, label: str) -> None:
    if _require_number(name, value) < 0:
        raise InvalidMetrics(f"{label} cannot be negative", field=name)


def _require_percent(name: str, value: Any, label: str) -> None:
    number = _require_number(name, value)
    if number < PERCENT_MIN or number > PERCENT_MAX:
        raise InvalidMetrics(f"{label} must be between {PERCENT_MIN} and {PERCENT_MAX}", field=name)


def _check(metrics: Metrics) -> None:
    subject_id = metrics.subject_id
    if not isinstance(subject_id, str) or not subject_id or not subject_id.startswith(ADDRESS_PREFIX):
        raise InvalidMetrics("Invalid Aleo address format", field="subject_id")

    _require_non_negative("activity_count", metrics.activity_count, "Activity count")
    if metrics.activity_count != int(metrics.activity_count):
        raise InvalidMetrics("Activity count must be a whole number", field="activity_count")
    _require_non_negative("age_months", metrics.age_months, "Account age")
    _require_percent("engagement_score", metrics.engagement_score, "Engagement score")
    _require_percent("reliability_rate", metrics.reliability_rate, "Reliability rate")
    _require_non_negative("holding_balance", metrics.holding_balance, "Holding balance")
    _require_non_negative("last_activity_at", metrics.last_activity_at, "Last activity timestamp")


def validate_metrics(metrics: Metrics) -> None:
    """
    Validate a Metrics record.

    Raises:
        InvalidMetrics: subject_id is empty or not an Aleo address; a count,
            age, balance, or timestamp is negative or non-finite; or the
            engagement score / reliability rate is outside [0, 100].
    """
    try:
        _check(metrics)
    except InvalidMetrics as e:
        bind_subject(metrics.subject_id, __name__).info("metrics_rejected", field=e.field, reason=e.reason)
        raise
