"""
Per-factor raw scores (0-100).

Each factor is a monotonic step function with diminishing returns over one
metric, read from the tier tables. Activity history also applies a recency
adjustment relative to a caller-supplied reference time, so the same metrics
and reference time always give the same score.
"""

from __future__ import annotations

from backend_creditscore.analysis_engine.constants import (
    DORMANT_DAYS,
    DORMANT_PENALTY,
    FACTOR_SCALE,
    INACTIVE_DAYS,
    INACTIVE_PENALTY,
    MONTH_ACTIVITY_BONUS,
    MONTH_ACTIVITY_DAYS,
    MS_PER_DAY,
    RECENT_ACTIVITY_BONUS,
    RECENT_ACTIVITY_DAYS,
)
from backend_creditscore.analysis_engine.models import Factor, FactorScore, Metrics
from backend_creditscore.analysis_engine.tiers import (
    ACCOUNT_AGE_TIERS,
    ACTIVITY_TIERS,
    BALANCE_TIERS,
    ENGAGEMENT_TIERS,
    RELIABILITY_TIERS,
)

# Versioned constants; must sum to 1.0
FACTOR_WEIGHTS: dict[Factor, float] = {
    Factor.ACTIVITY_HISTORY: 0.25,
    Factor.ACCOUNT_AGE: 0.20,
    Factor.ENGAGEMENT: 0.20,
    Factor.RELIABILITY: 0.25,
    Factor.BALANCE_STABILITY: 0.10,
}


def _clamp(value: float, low: float = 0.0, high: float = FACTOR_SCALE) -> float:
    return max(low, min(high, value))


def days_since(timestamp_ms: float, now_ms: float) -> float:
    """Fractional days from timestamp_ms to now_ms (negative if in the future)."""
    return (now_ms - timestamp_ms) / MS_PER_DAY


def recency_adjustment(days: float) -> float:
    """Bonus for recent activity, cumulative penalties for long inactivity."""
    adjustment = 0.0
    if days <= RECENT_ACTIVITY_DAYS:
        adjustment += RECENT_ACTIVITY_BONUS
    elif days <= MONTH_ACTIVITY_DAYS:
        adjustment += MONTH_ACTIVITY_BONUS
    if days > INACTIVE_DAYS:
        adjustment -= INACTIVE_PENALTY
    if days > DORMANT_DAYS:
        adjustment -= DORMANT_PENALTY
    return adjustment


def activity_history_score(metrics: Metrics, now_ms: float) -> float:
    # Clamp once, after the recency adjustment
    score = ACTIVITY_TIERS.lookup(metrics.activity_count)
    score += recency_adjustment(days_since(metrics.last_activity_at, now_ms))
    return float(_clamp(score))


def account_age_score(metrics: Metrics) -> float:
    return float(min(FACTOR_SCALE, ACCOUNT_AGE_TIERS.lookup(metrics.age_months)))


def engagement_score(metrics: Metrics) -> float:
    return float(ENGAGEMENT_TIERS.lookup(metrics.engagement_score))


def reliability_score(metrics: Metrics) -> float:
    return float(RELIABILITY_TIERS.lookup(metrics.reliability_rate))


def balance_stability_score(metrics: Metrics) -> float:
    return float(min(FACTOR_SCALE, BALANCE_TIERS.lookup(metrics.holding_balance)))


def compute_factor_scores(metrics: Metrics, now_ms: float) -> list[FactorScore]:
    """
    Raw score for every factor, in Factor order.

    Expects metrics that already passed validate_metrics.
    """
    raw = {
        Factor.ACTIVITY_HISTORY: activity_history_score(metrics, now_ms),
        Factor.ACCOUNT_AGE: account_age_score(metrics),
        Factor.ENGAGEMENT: engagement_score(metrics),
        Factor.RELIABILITY: reliability_score(metrics),
        Factor.BALANCE_STABILITY: balance_stability_score(metrics),
    }
    return [FactorScore(factor=f, raw_score=raw[f], weight=FACTOR_WEIGHTS[f]) for f in Factor]
