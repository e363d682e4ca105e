"""
Analysis engine package — credit score computation and explanation.

Consumes a wallet Metrics record, computes five weighted factor scores, and
produces an Assessment plus derived analytics: factor analysis, improvement
suggestions, score breakdown, and a percentile estimate. Pure functions only.
"""

from backend_creditscore.analysis_engine.models import (
    Assessment,
    BreakdownFactor,
    Factor,
    FactorAnalysis,
    FactorScore,
    Metrics,
    Priority,
    Rating,
    RiskLevel,
    ScoreBreakdown,
    Suggestion,
)
from backend_creditscore.analysis_engine.validator import validate_metrics
from backend_creditscore.analysis_engine.factors import FACTOR_WEIGHTS, compute_factor_scores
from backend_creditscore.analysis_engine.scorer import classify_risk, score
from backend_creditscore.analysis_engine.analysis import analyze, rating_for
from backend_creditscore.analysis_engine.suggestions import suggest
from backend_creditscore.analysis_engine.percentile import erf, percentile
from backend_creditscore.analysis_engine.breakdown import score_breakdown
from backend_creditscore.analysis_engine.batch import BatchResult, score_many
from backend_creditscore.analysis_engine.engine import ScoringEngine

__all__ = [
    "Assessment",
    "BreakdownFactor",
    "Factor",
    "FactorAnalysis",
    "FactorScore",
    "Metrics",
    "Priority",
    "Rating",
    "RiskLevel",
    "ScoreBreakdown",
    "Suggestion",
    "validate_metrics",
    "FACTOR_WEIGHTS",
    "compute_factor_scores",
    "classify_risk",
    "score",
    "analyze",
    "rating_for",
    "suggest",
    "erf",
    "percentile",
    "score_breakdown",
    "BatchResult",
    "score_many",
    "ScoringEngine",
]
