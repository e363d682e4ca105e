"""
Tests for tier tables and per-factor raw scores.

Activity tiers use a last activity 60 days back, where the recency adjustment is zero.
"""

from __future__ import annotations

import pytest

from backend_creditscore.analysis_engine.factors import (
    FACTOR_WEIGHTS,
    account_age_score,
    activity_history_score,
    balance_stability_score,
    compute_factor_scores,
    engagement_score,
    recency_adjustment,
    reliability_score,
)
from backend_creditscore.analysis_engine.models import Factor
from backend_creditscore.analysis_engine.tiers import Tier, TierTable

from tests.conftest import DAY_MS, NOW_MS, make_metrics


def test_weights_sum_to_one():
    """Factor weights are versioned constants summing to 1.0."""
    assert abs(sum(FACTOR_WEIGHTS.values()) - 1.0) < 1e-9
    assert set(FACTOR_WEIGHTS) == set(Factor)
    assert all(0 < w < 1 for w in FACTOR_WEIGHTS.values())


def test_tier_table_first_match_inclusive():
    """First satisfied tier wins; thresholds are inclusive lower bounds."""
    table = TierTable("t", (Tier(10, 100), Tier(5, 50)), fallback=lambda v: v)
    assert table.lookup(10) == 100
    assert table.lookup(9.99) == 50
    assert table.lookup(5) == 50
    assert table.lookup(4) == 4


def test_tier_table_rejects_unsorted():
    with pytest.raises(ValueError, match="descending"):
        TierTable("bad", (Tier(5, 50), Tier(10, 100)), fallback=lambda v: v)
    with pytest.raises(ValueError, match="descending"):
        TierTable("dup", (Tier(5, 50), Tier(5, 40)), fallback=lambda v: v)


@pytest.mark.parametrize(
    "count,expected",
    [(250, 100), (200, 100), (199, 85), (100, 85), (50, 70), (25, 55), (10, 40), (5, 25), (4, 20), (0, 0)],
)
def test_activity_tiers(count, expected):
    m = make_metrics(activity_count=count, last_activity_at=NOW_MS - 60 * DAY_MS)
    assert activity_history_score(m, NOW_MS) == expected


@pytest.mark.parametrize(
    "days,expected",
    [(0, 10), (7, 10), (7.5, 5), (30, 5), (31, 0), (90, 0), (91, -15), (180, -15), (181, -40), (-3, 10)],
)
def test_recency_adjustment(days, expected):
    """+10 within a week, +5 within a month, -15 past 90 days, a further -25 past 180."""
    assert recency_adjustment(days) == expected


def test_activity_recency_applied_then_clamped():
    # 200 actions (100) + recent bonus stays capped at 100
    m = make_metrics(activity_count=200, last_activity_at=NOW_MS - 2 * DAY_MS)
    assert activity_history_score(m, NOW_MS) == 100
    # 25 actions (55) + 10
    m = make_metrics(activity_count=25, last_activity_at=NOW_MS)
    assert activity_history_score(m, NOW_MS) == 65
    # 5 actions (25) - 15 - 25 floors at 0
    m = make_metrics(activity_count=5, last_activity_at=NOW_MS - 200 * DAY_MS)
    assert activity_history_score(m, NOW_MS) == 0
    # 100 actions (85) - 15 - 25
    m = make_metrics(activity_count=100, last_activity_at=NOW_MS - 365 * DAY_MS)
    assert activity_history_score(m, NOW_MS) == 45


def test_activity_uses_reference_time_not_wall_clock():
    m = make_metrics(activity_count=25, last_activity_at=NOW_MS)
    assert activity_history_score(m, NOW_MS) == 65
    assert activity_history_score(m, NOW_MS + 100 * DAY_MS) == 40


@pytest.mark.parametrize(
    "months,expected",
    [(120, 100), (24, 100), (23.9, 90), (18, 90), (12, 80), (6, 60), (3, 40), (1, 20), (0.5, 10), (0, 0)],
)
def test_account_age_tiers(months, expected):
    assert account_age_score(make_metrics(age_months=months)) == pytest.approx(expected)


@pytest.mark.parametrize(
    "value,expected",
    [(100, 100), (80, 100), (79.9, 85), (60, 85), (40, 70), (20, 50), (19, 38), (0, 0)],
)
def test_engagement_remap(value, expected):
    assert engagement_score(make_metrics(engagement_score=value)) == expected


@pytest.mark.parametrize(
    "rate,expected",
    [
        (100, 100),
        (95, 100),
        (94.99, 95),
        (90, 95),
        (85, 90),
        (80, 85),
        (75, 75),
        (70, 65),
        (60, 50),
        (59, 41.3),
        (0, 0),
    ],
)
def test_reliability_remap(rate, expected):
    """Below the 60% tier the fallback (rate * 0.7) is harsher than linear."""
    assert reliability_score(make_metrics(reliability_rate=rate)) == pytest.approx(expected)


@pytest.mark.parametrize(
    "balance,expected",
    [
        (2_000_000, 100),
        (1_000_000, 100),
        (999_999, 90),
        (500_000, 90),
        (100_000, 80),
        (50_000, 70),
        (10_000, 60),
        (5_000, 50),
        (1_000, 40),
        (999, 39.96),
        (0, 0),
    ],
)
def test_balance_tiers(balance, expected):
    assert balance_stability_score(make_metrics(holding_balance=balance)) == pytest.approx(expected)


def test_compute_factor_scores_order_and_contribution(canonical_metrics):
    scores = compute_factor_scores(canonical_metrics, NOW_MS)
    assert [s.factor for s in scores] == list(Factor)
    assert [s.raw_score for s in scores] == [65.0, 60.0, 50.0, 90.0, 50.0]
    for s in scores:
        assert s.weight == FACTOR_WEIGHTS[s.factor]
        assert s.contribution == s.raw_score * s.weight
        assert 0 <= s.raw_score <= 100
