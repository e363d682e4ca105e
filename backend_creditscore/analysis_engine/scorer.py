"""
Credit score computation — weighted aggregation and risk classification.

Responsibilities:
- Validate metrics, compute the five factor scores, and aggregate them into a
  final score in [300, 850].
- Classify the final score into a risk level.
- Output an immutable Assessment for storage, display, and derived analytics.
"""

from __future__ import annotations

import math
import time

from backend_creditscore.analysis_engine.constants import (
    BASE_SCORE,
    FACTOR_SCALE,
    LOW_RISK_MIN_SCORE,
    MAX_BONUS_POINTS,
    MAX_SCORE,
    MEDIUM_RISK_MIN_SCORE,
    MIN_SCORE,
    SCORING_MODEL_VERSION,
)
from backend_creditscore.analysis_engine.factors import compute_factor_scores
from backend_creditscore.analysis_engine.models import Assessment, FactorScore, Metrics, RiskLevel
from backend_creditscore.analysis_engine.validator import validate_metrics
from backend_creditscore.creditscore_logging import bind_subject


def round_half_up(value: float) -> int:
    """Round to the nearest integer; halves round toward +inf (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def now_millis() -> int:
    return int(time.time() * 1000)


def weighted_factor_score(factors: list[FactorScore]) -> float:
    """
    Weighted sum of raw scores on the 0-100 scale.

    Weights are scaled to percentage points before multiplying, then the sum is
    scaled back down, so each term is a product of two small exact-ish numbers.
    """
    weighted_sum = sum(f.raw_score * (f.weight * 100) for f in factors)
    return weighted_sum / 100


def bonus_points_for(normalized_score: float) -> int:
    """Convert a 0-100 weighted factor score to 0-550 bonus points."""
    return round_half_up(normalized_score / FACTOR_SCALE * MAX_BONUS_POINTS)


def classify_risk(final_score: int) -> RiskLevel:
    """Inclusive lower bounds: >=750 low, >=500 medium, else high."""
    if final_score >= LOW_RISK_MIN_SCORE:
        return RiskLevel.LOW
    if final_score >= MEDIUM_RISK_MIN_SCORE:
        return RiskLevel.MEDIUM
    return RiskLevel.HIGH


def score(metrics: Metrics, now_ms: int | None = None) -> Assessment:
    """
    Compute a credit assessment (300-850) from wallet metrics.

    Args:
        metrics: Behavioral metrics for one subject.
        now_ms: Reference time (epoch ms) for activity recency; defaults to the
            current time. Stored as Assessment.computed_at.

    Returns:
        Assessment with base score, bonus points, final score, and risk level.

    Raises:
        InvalidMetrics: metrics failed validation; nothing is computed.
    """
    validate_metrics(metrics)
    computed_at = now_millis() if now_ms is None else int(now_ms)

    factors = compute_factor_scores(metrics, computed_at)
    normalized = weighted_factor_score(factors)
    bonus_points = bonus_points_for(normalized)
    final_score = max(MIN_SCORE, min(MAX_SCORE, BASE_SCORE + bonus_points))
    risk_level = classify_risk(final_score)

    bind_subject(metrics.subject_id, __name__).debug(
        "score_computed",
        factor_scores={f.factor.value: f.raw_score for f in factors},
        normalized_score=normalized,
        bonus_points=bonus_points,
        final_score=final_score,
        risk_level=risk_level.value,
    )
    return Assessment(
        subject_id=metrics.subject_id,
        metrics=metrics,
        base_score=BASE_SCORE,
        bonus_points=bonus_points,
        final_score=final_score,
        risk_level=risk_level,
        computed_at=computed_at,
        model_version=SCORING_MODEL_VERSION,
    )
