"""
Ordered tier tables for factor scoring.

Each table is sorted descending by threshold; the first tier whose threshold the
value meets (inclusive lower bound) wins. Values below the lowest tier fall
through to a per-table linear fallback.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class Tier:
    threshold: float
    score: float


@dataclass(frozen=True)
class TierTable:
    """Descending step function with a linear fallback below the lowest tier."""

    name: str
    tiers: tuple[Tier, ...]
    fallback: Callable[[float], float]

    def __post_init__(self) -> None:
        thresholds = [t.threshold for t in self.tiers]
        if thresholds != sorted(thresholds, reverse=True) or len(set(thresholds)) != len(thresholds):
            raise ValueError(f"tier table {self.name!r} must be strictly descending by threshold")

    def lookup(self, value: float) -> float:
        for tier in self.tiers:
            if value >= tier.threshold:
                return tier.score
        return self.fallback(value)


def _tiers(*pairs: tuple[float, float]) -> tuple[Tier, ...]:
    return tuple(Tier(threshold, score) for threshold, score in pairs)


ACTIVITY_TIERS = TierTable(
    name="activity_count",
    tiers=_tiers((200, 100), (100, 85), (50, 70), (25, 55), (10, 40), (5, 25)),
    fallback=lambda count: count * 5,
)

ACCOUNT_AGE_TIERS = TierTable(
    name="age_months",
    tiers=_tiers((24, 100), (18, 90), (12, 80), (6, 60), (3, 40), (1, 20)),
    fallback=lambda months: months * 20,
)

ENGAGEMENT_TIERS = TierTable(
    name="engagement_score",
    tiers=_tiers((80, 100), (60, 85), (40, 70), (20, 50)),
    fallback=lambda score: score * 2,
)

# Weighted toward punishing low reliability: below 60% the fallback is harsher than linear
RELIABILITY_TIERS = TierTable(
    name="reliability_rate",
    tiers=_tiers((95, 100), (90, 95), (85, 90), (80, 85), (75, 75), (70, 65), (60, 50)),
    fallback=lambda rate: rate * 0.7,
)

BALANCE_TIERS = TierTable(
    name="holding_balance",
    tiers=_tiers(
        (1_000_000, 100),
        (500_000, 90),
        (100_000, 80),
        (50_000, 70),
        (10_000, 60),
        (5_000, 50),
        (1_000, 40),
    ),
    fallback=lambda balance: balance / 25,
)
