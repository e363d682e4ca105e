"""
Pytest fixtures for credit scoring tests. Uses a fixed reference clock so
recency-dependent scores are reproducible.
"""

from __future__ import annotations

import pytest

from backend_creditscore.analysis_engine import Metrics

NOW_MS = 1_760_000_000_000
DAY_MS = 86_400_000
SUBJECT = "aleo1qnr4dkkvkgfqph0vzc3y6z2eu975wnpz2925ntjccd5cfqxtyu8s7pyjh9"


def make_metrics(**overrides) -> Metrics:
    """Canonical regression fixture, with per-test overrides."""
    values = {
        "subject_id": SUBJECT,
        "activity_count": 25,
        "age_months": 8,
        "engagement_score": 35,
        "reliability_rate": 85,
        "holding_balance": 5000,
        "last_activity_at": NOW_MS,
    }
    values.update(overrides)
    return Metrics(**values)


@pytest.fixture
def canonical_metrics() -> Metrics:
    return make_metrics()


@pytest.fixture
def max_metrics() -> Metrics:
    """Every factor at its top tier."""
    return make_metrics(
        activity_count=250,
        age_months=30,
        engagement_score=100,
        reliability_rate=100,
        holding_balance=2_000_000,
    )


@pytest.fixture
def zero_metrics() -> Metrics:
    """Every metric at zero; last activity at the epoch (long dormant)."""
    return make_metrics(
        activity_count=0,
        age_months=0,
        engagement_score=0,
        reliability_rate=0,
        holding_balance=0,
        last_activity_at=0,
    )


@pytest.fixture
def client():
    """FastAPI TestClient over the scoring API."""
    from fastapi.testclient import TestClient

    from backend_creditscore.api_server.server import app

    return TestClient(app)
