"""
Score breakdown for display: base score plus each factor's bonus points.
"""

from __future__ import annotations

from backend_creditscore.analysis_engine.analysis import analyze
from backend_creditscore.analysis_engine.constants import MAX_SCORE, POINTS_PER_FACTOR_POINT
from backend_creditscore.analysis_engine.models import Assessment, BreakdownFactor, ScoreBreakdown
from backend_creditscore.analysis_engine.scorer import round_half_up


def score_breakdown(assessment: Assessment) -> ScoreBreakdown:
    """
    Per-factor points on the 0-550 bonus scale.

    Points are rounded per factor, so their sum can differ from
    assessment.bonus_points by rounding; bonus_points is authoritative.
    """
    factors = [
        BreakdownFactor(
            factor=fa.factor,
            raw_score=fa.raw_score,
            weight_pct=fa.weight * 100,
            points=round_half_up(fa.raw_score * fa.weight * POINTS_PER_FACTOR_POINT),
            rating=fa.rating,
        )
        for fa in analyze(assessment)
    ]
    return ScoreBreakdown(
        base=assessment.base_score,
        total=assessment.final_score,
        max_possible=MAX_SCORE,
        factors=factors,
    )
