"""
Tests for batch scoring (batch.score_many) and the ScoringEngine facade.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from backend_creditscore.analysis_engine import ScoringEngine, score, score_many, suggest

from tests.conftest import NOW_MS, make_metrics


def test_score_many_preserves_order_and_reports_invalid():
    records = [
        make_metrics(),
        make_metrics(subject_id="not-an-address"),
        make_metrics(activity_count=0, age_months=0, engagement_score=0, reliability_rate=0,
                     holding_balance=0, last_activity_at=0),
    ]
    results = score_many(records, now_ms=NOW_MS, max_workers=3)
    assert [r.index for r in results] == [0, 1, 2]
    assert results[0].ok and results[0].assessment.final_score == 662
    assert not results[1].ok
    assert results[1].error == "Invalid Aleo address format"
    assert results[1].subject_id == "not-an-address"
    assert results[2].assessment.final_score == 300


def test_score_many_matches_sequential():
    records = [make_metrics(activity_count=n, reliability_rate=n % 101) for n in range(0, 400, 7)]
    results = score_many(records, now_ms=NOW_MS, max_workers=8)
    assert [r.assessment for r in results] == [score(m, NOW_MS) for m in records]


def test_score_many_shares_reference_time():
    with patch("backend_creditscore.analysis_engine.batch.now_millis", return_value=NOW_MS):
        results = score_many([make_metrics(), make_metrics(activity_count=90)], max_workers=2)
    assert {r.assessment.computed_at for r in results} == {NOW_MS}


def test_score_many_empty():
    assert score_many([], now_ms=NOW_MS) == []


def test_batch_result_to_dict():
    result = score_many([make_metrics(engagement_score=101)], now_ms=NOW_MS, max_workers=1)[0]
    d = result.to_dict()
    assert d["assessment"] is None
    assert "between 0 and 100" in d["error"]


def test_engine_is_stateless(canonical_metrics):
    engine = ScoringEngine()
    assert not hasattr(engine, "__dict__")
    a = engine.score(canonical_metrics, NOW_MS)
    assert a == ScoringEngine().score(canonical_metrics, NOW_MS)
    assert engine.suggest(a) == suggest(a)
    assert engine.percentile(a.final_score) == 73
    assert len(engine.analyze(a)) == 5
    assert engine.breakdown(a).total == 662


def test_engine_report(canonical_metrics):
    report = ScoringEngine().report(canonical_metrics, NOW_MS)
    assert set(report) == {"model_version", "assessment", "factors", "suggestions", "percentile", "breakdown"}
    assert report["assessment"]["final_score"] == 662
    assert report["percentile"] == 73
    assert [s["factor"] for s in report["suggestions"]] == [
        "engagement",
        "activity_history",
        "account_age",
        "balance_stability",
    ]


def test_engine_validate_raises(canonical_metrics):
    from backend_creditscore.core.exceptions import InvalidMetrics

    ScoringEngine().validate(canonical_metrics)
    with pytest.raises(InvalidMetrics):
        ScoringEngine().validate(make_metrics(subject_id=""))
