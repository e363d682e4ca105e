"""
Improvement suggestions for weak factors.

Every factor scoring below SUGGESTION_THRESHOLD yields one suggestion with the
bonus points it could recover, ordered most actionable first: priority
(high -> low), then potential gain descending. An empty list means no
improvements are needed.
"""

from __future__ import annotations

from backend_creditscore.analysis_engine.analysis import analyze
from backend_creditscore.analysis_engine.constants import (
    FACTOR_SCALE,
    POINTS_PER_FACTOR_POINT,
    SUGGESTION_THRESHOLD,
)
from backend_creditscore.analysis_engine.models import (
    Assessment,
    Factor,
    FactorAnalysis,
    Priority,
    Suggestion,
)
from backend_creditscore.analysis_engine.scorer import round_half_up
from backend_creditscore.creditscore_logging import get_logger

logger = get_logger(__name__)

SUGGESTION_TEXT = {
    Factor.ACTIVITY_HISTORY: "Increase your on-chain activity by making more transactions",
    Factor.ACCOUNT_AGE: "Continue using your wallet consistently over time",
    Factor.ENGAGEMENT: "Engage with DeFi protocols like lending, swapping, or staking",
    Factor.RELIABILITY: "Maintain timely repayments and fulfill all obligations",
    Factor.BALANCE_STABILITY: "Maintain a higher balance to demonstrate financial stability",
}

# Final tie-break when priority and gain are equal: reliability leads
_TIEBREAK_ORDER = (
    Factor.RELIABILITY,
    Factor.ACTIVITY_HISTORY,
    Factor.ENGAGEMENT,
    Factor.BALANCE_STABILITY,
    Factor.ACCOUNT_AGE,
)


def priority_for(factor: Factor, raw_score: float) -> Priority:
    if factor is Factor.RELIABILITY:
        return Priority.HIGH
    if factor is Factor.ACCOUNT_AGE:
        # Age cannot be accelerated by user action
        return Priority.LOW
    if factor is Factor.ACTIVITY_HISTORY:
        return Priority.HIGH if raw_score < 40 else Priority.MEDIUM
    if factor is Factor.ENGAGEMENT:
        return Priority.HIGH if raw_score < 50 else Priority.MEDIUM
    return Priority.MEDIUM if raw_score < 40 else Priority.LOW


def potential_gain(raw_score: float, weight: float) -> int:
    """Bonus points recovered by raising raw_score to 100, on the 0-550 scale."""
    return round_half_up((FACTOR_SCALE - raw_score) * weight * POINTS_PER_FACTOR_POINT)


def _sort_key(s: Suggestion) -> tuple[int, int, int]:
    return (s.priority.rank, -s.potential_gain, _TIEBREAK_ORDER.index(s.factor))


def suggestions_from_analysis(factors: list[FactorAnalysis]) -> list[Suggestion]:
    suggestions = [
        Suggestion(
            factor=fa.factor,
            current_score=fa.raw_score,
            potential_gain=potential_gain(fa.raw_score, fa.weight),
            suggestion=SUGGESTION_TEXT[fa.factor],
            priority=priority_for(fa.factor, fa.raw_score),
        )
        for fa in factors
        if fa.raw_score < SUGGESTION_THRESHOLD
    ]
    return sorted(suggestions, key=_sort_key)


def suggest(assessment: Assessment) -> list[Suggestion]:
    """Ranked suggestions for the assessment's weak factors; [] when all score >= 70."""
    suggestions = suggestions_from_analysis(analyze(assessment))
    logger.debug(
        "suggestions_built",
        subject_id=assessment.subject_id[:16] + "...",
        count=len(suggestions),
        factors=[s.factor.value for s in suggestions],
    )
    return suggestions
