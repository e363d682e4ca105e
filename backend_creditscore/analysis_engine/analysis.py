"""
Factor analysis: how each factor contributes to an assessment.

Recomputes raw scores from the assessment's metrics relative to its
computed_at, so repeated calls on the same Assessment return identical figures.
"""

from __future__ import annotations

from backend_creditscore.analysis_engine.constants import (
    RATING_EXCELLENT_MIN,
    RATING_FAIR_MIN,
    RATING_GOOD_MIN,
)
from backend_creditscore.analysis_engine.factors import compute_factor_scores
from backend_creditscore.analysis_engine.models import (
    Assessment,
    Factor,
    FactorAnalysis,
    Metrics,
    Rating,
)


def rating_for(raw_score: float) -> Rating:
    if raw_score >= RATING_EXCELLENT_MIN:
        return Rating.EXCELLENT
    if raw_score >= RATING_GOOD_MIN:
        return Rating.GOOD
    if raw_score >= RATING_FAIR_MIN:
        return Rating.FAIR
    return Rating.POOR


def _fmt(value: float) -> str:
    """Thousands-separated; drops a trailing .0 on whole numbers."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def describe(factor: Factor, metrics: Metrics) -> str:
    if factor is Factor.ACTIVITY_HISTORY:
        return f"{_fmt(metrics.activity_count)} actions on record"
    if factor is Factor.ACCOUNT_AGE:
        return f"{_fmt(metrics.age_months)} months old"
    if factor is Factor.ENGAGEMENT:
        return f"{_fmt(metrics.engagement_score)}% protocol engagement"
    if factor is Factor.RELIABILITY:
        return f"{_fmt(metrics.reliability_rate)}% of obligations met on time"
    return f"{_fmt(metrics.holding_balance)} credits held"


def analyze(assessment: Assessment) -> list[FactorAnalysis]:
    """Five entries in Factor order: raw score, weight, contribution, rating, description."""
    metrics = assessment.metrics
    return [
        FactorAnalysis(
            factor=fs.factor,
            raw_score=fs.raw_score,
            weight=fs.weight,
            contribution=fs.contribution,
            rating=rating_for(fs.raw_score),
            description=describe(fs.factor, metrics),
        )
        for fs in compute_factor_scores(metrics, assessment.computed_at)
    ]
