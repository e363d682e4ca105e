"""
FastAPI server — stateless scoring API.

Exposes POST /api/score and GET /api/percentile/{score} plus GET /health.
Computes on request; reads and writes no storage.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from backend_creditscore import __version__
from backend_creditscore.analysis_engine.constants import SCORING_MODEL_VERSION
from backend_creditscore.api_server.credit_score import router as credit_router
from backend_creditscore.core.exceptions import InvalidMetrics
from backend_creditscore.creditscore_logging import get_logger

logger = get_logger(__name__)


class HealthResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    status: str = Field("ok", description="Always 'ok' when the process serves requests")
    model_version: str = Field(..., description="Scoring model version")
    version: str = Field(..., description="Service version")


app = FastAPI(
    title="Backend CreditScore API",
    description="Explainable 300-850 credit scores from wallet activity metrics.",
    version=__version__,
)

app.include_router(credit_router, prefix="/api")


@app.exception_handler(InvalidMetrics)
async def invalid_metrics_handler(request: Request, exc: InvalidMetrics) -> JSONResponse:
    logger.info("api_invalid_metrics", path=request.url.path, field=exc.field, reason=exc.reason)
    return JSONResponse(status_code=422, content=exc.to_dict())


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", model_version=SCORING_MODEL_VERSION, version=__version__)
