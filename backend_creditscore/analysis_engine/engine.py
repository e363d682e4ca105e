"""
ScoringEngine: a zero-state facade over the analysis functions.

Holds no data; every method delegates to a pure module-level function. Safe to
share across threads or construct per call.
"""

from __future__ import annotations

from typing import Iterable

from backend_creditscore.analysis_engine.analysis import analyze
from backend_creditscore.analysis_engine.batch import BatchResult, score_many
from backend_creditscore.analysis_engine.breakdown import score_breakdown
from backend_creditscore.analysis_engine.constants import SCORING_MODEL_VERSION
from backend_creditscore.analysis_engine.models import (
    Assessment,
    FactorAnalysis,
    Metrics,
    ScoreBreakdown,
    Suggestion,
)
from backend_creditscore.analysis_engine.percentile import percentile
from backend_creditscore.analysis_engine.scorer import score
from backend_creditscore.analysis_engine.suggestions import suggest
from backend_creditscore.analysis_engine.validator import validate_metrics


class ScoringEngine:
    __slots__ = ()

    model_version = SCORING_MODEL_VERSION

    def validate(self, metrics: Metrics) -> None:
        validate_metrics(metrics)

    def score(self, metrics: Metrics, now_ms: int | None = None) -> Assessment:
        return score(metrics, now_ms)

    def analyze(self, assessment: Assessment) -> list[FactorAnalysis]:
        return analyze(assessment)

    def suggest(self, assessment: Assessment) -> list[Suggestion]:
        return suggest(assessment)

    def percentile(self, final_score: float) -> int:
        return percentile(final_score)

    def breakdown(self, assessment: Assessment) -> ScoreBreakdown:
        return score_breakdown(assessment)

    def score_many(
        self,
        records: Iterable[Metrics],
        now_ms: int | None = None,
        max_workers: int | None = None,
    ) -> list[BatchResult]:
        return score_many(records, now_ms=now_ms, max_workers=max_workers)

    def report(self, metrics: Metrics, now_ms: int | None = None) -> dict:
        """Score and attach every derived analytic, as plain JSON-ready data."""
        assessment = score(metrics, now_ms)
        return {
            "model_version": assessment.model_version,
            "assessment": assessment.to_dict(),
            "factors": [f.to_dict() for f in analyze(assessment)],
            "suggestions": [s.to_dict() for s in suggest(assessment)],
            "percentile": percentile(assessment.final_score),
            "breakdown": score_breakdown(assessment).to_dict(),
        }
