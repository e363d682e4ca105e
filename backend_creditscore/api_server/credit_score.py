"""
FastAPI router: POST /score, GET /percentile/{score}.

Scores the metrics in the request body; callers fetch metrics themselves.
InvalidMetrics is mapped to 422 by the app-level exception handler.
"""

from __future__ import annotations

import time
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from backend_creditscore.analysis_engine import Metrics, ScoringEngine, percentile
from backend_creditscore.analysis_engine.constants import SCORING_MODEL_VERSION
from backend_creditscore.creditscore_logging import bind_subject

router = APIRouter(tags=["credit-score"])

engine = ScoringEngine()


class MetricsRequest(BaseModel):
    """
    POST /score body. Accepts snake_case or camelCase keys.

    Strict: booleans and numeric strings are rejected rather than coerced.
    Range checks happen in the engine.
    """

    model_config = ConfigDict(populate_by_name=True, strict=True)

    subject_id: str = Field(..., alias="subjectId", description="Aleo address (aleo1...)")
    activity_count: float = Field(..., alias="activityCount", description="Historical action count")
    age_months: float = Field(..., alias="ageMonths", description="Months since first activity")
    engagement_score: float = Field(..., alias="engagementScore", description="Engagement diversity 0-100")
    reliability_rate: float = Field(..., alias="reliabilityRate", description="On-time obligation rate 0-100")
    holding_balance: float = Field(..., alias="holdingBalance", description="Held balance (credits)")
    last_activity_at: float = Field(..., alias="lastActivityAt", description="Epoch ms of last action")
    now_ms: int | None = Field(None, alias="nowMs", description="Reference time (epoch ms); defaults to now")

    def to_metrics(self) -> Metrics:
        return Metrics(
            subject_id=self.subject_id,
            activity_count=self.activity_count,
            age_months=self.age_months,
            engagement_score=self.engagement_score,
            reliability_rate=self.reliability_rate,
            holding_balance=self.holding_balance,
            last_activity_at=self.last_activity_at,
        )


class ScoreReportResponse(BaseModel):
    """POST /score response: assessment plus derived analytics."""

    model_config = ConfigDict(protected_namespaces=())

    model_version: str = Field(..., description="Scoring model version the figures belong to")
    assessment: dict[str, Any]
    factors: list[dict[str, Any]] = Field(default_factory=list)
    suggestions: list[dict[str, Any]] = Field(default_factory=list)
    percentile: int = Field(..., ge=0, le=100)
    breakdown: dict[str, Any]


class PercentileResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    score: int
    percentile: int = Field(..., ge=0, le=100)
    model_version: str


@router.post("/score", response_model=ScoreReportResponse)
def post_score(body: MetricsRequest) -> dict[str, Any]:
    """Score one metrics record and return the full report."""
    t0 = time.perf_counter()
    report = engine.report(body.to_metrics(), body.now_ms)
    bind_subject(body.subject_id, __name__).info(
        "api_score",
        final_score=report["assessment"]["final_score"],
        risk_level=report["assessment"]["risk_level"],
        total_ms=round((time.perf_counter() - t0) * 1000, 2),
    )
    return report


@router.get("/percentile/{score}", response_model=PercentileResponse)
def get_percentile(score: int) -> PercentileResponse:
    """Percentile of an arbitrary score under the population model."""
    return PercentileResponse(score=score, percentile=percentile(score), model_version=SCORING_MODEL_VERSION)
