"""
Data models for analysis engine input and output.

Responsibilities:
- Define the Metrics input record and the Assessment value object.
- Define the derived records (factor scores, factor analysis, suggestions,
  score breakdown) used by the API and tools.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from backend_creditscore.core.exceptions import InvalidMetrics


class Factor(str, Enum):
    """The five scoring factors, in their fixed evaluation and reporting order."""

    ACTIVITY_HISTORY = "activity_history"
    ACCOUNT_AGE = "account_age"
    ENGAGEMENT = "engagement"
    RELIABILITY = "reliability"
    BALANCE_STABILITY = "balance_stability"

    @property
    def display_name(self) -> str:
        return _FACTOR_DISPLAY_NAMES[self]


_FACTOR_DISPLAY_NAMES = {
    Factor.ACTIVITY_HISTORY: "Activity History",
    Factor.ACCOUNT_AGE: "Account Age",
    Factor.ENGAGEMENT: "Engagement",
    Factor.RELIABILITY: "Reliability",
    Factor.BALANCE_STABILITY: "Balance Stability",
}


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Rating(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort key: high sorts first."""
        return (Priority.HIGH, Priority.MEDIUM, Priority.LOW).index(self)


# Input keys accepted by Metrics.from_dict: snake_case field -> camelCase alias
METRIC_ALIASES = {
    "subject_id": "subjectId",
    "activity_count": "activityCount",
    "age_months": "ageMonths",
    "engagement_score": "engagementScore",
    "reliability_rate": "reliabilityRate",
    "holding_balance": "holdingBalance",
    "last_activity_at": "lastActivityAt",
}


@dataclass(frozen=True)
class Metrics:
    """
    Behavioral metrics for one subject, supplied by an external fetcher.

    Construction does not validate; call validate_metrics (or score, which does)
    before computing anything from it.
    """

    subject_id: str
    """Aleo address; a pass-through identifier, never interpreted."""
    activity_count: float
    """Non-negative count of historical actions."""
    age_months: float
    """Months since first observed activity."""
    engagement_score: float
    """Pre-normalized protocol engagement diversity, 0-100."""
    reliability_rate: float
    """Percentage of obligations fulfilled on time, 0-100."""
    holding_balance: float
    """Held balance (credits); stability proxy."""
    last_activity_at: float
    """Epoch milliseconds of the most recent action."""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Metrics":
        """
        Build Metrics from a mapping with snake_case or camelCase keys.

        Raises InvalidMetrics when a field is missing. Values are passed through
        as-is; type and range checks belong to validate_metrics.
        """
        values: dict[str, Any] = {}
        for name, alias in METRIC_ALIASES.items():
            if name in data:
                values[name] = data[name]
            elif alias in data:
                values[name] = data[alias]
            else:
                raise InvalidMetrics(f"Missing metric field: {name}", field=name)
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return {
            "subject_id": self.subject_id,
            "activity_count": self.activity_count,
            "age_months": self.age_months,
            "engagement_score": self.engagement_score,
            "reliability_rate": self.reliability_rate,
            "holding_balance": self.holding_balance,
            "last_activity_at": self.last_activity_at,
        }


@dataclass(frozen=True)
class FactorScore:
    factor: Factor
    raw_score: float
    weight: float

    @property
    def contribution(self) -> float:
        return self.raw_score * self.weight


@dataclass(frozen=True)
class Assessment:
    """
    Result of one scoring call. Treated as a value object: derived analytics
    are recomputed from `metrics` relative to `computed_at`.
    """

    subject_id: str
    metrics: Metrics
    base_score: int
    bonus_points: int
    final_score: int
    risk_level: RiskLevel
    computed_at: int
    """Epoch milliseconds; also the reference time for activity recency."""
    model_version: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "subject_id": self.subject_id,
            "metrics": self.metrics.to_dict(),
            "base_score": self.base_score,
            "bonus_points": self.bonus_points,
            "final_score": self.final_score,
            "risk_level": self.risk_level.value,
            "computed_at": self.computed_at,
            "model_version": self.model_version,
        }


@dataclass(frozen=True)
class FactorAnalysis:
    factor: Factor
    raw_score: float
    weight: float
    contribution: float
    rating: Rating
    description: str
    """Human-readable summary of the underlying metric value."""

    @property
    def name(self) -> str:
        return self.factor.display_name

    def to_dict(self) -> dict[str, Any]:
        return {
            "factor": self.factor.value,
            "name": self.name,
            "raw_score": self.raw_score,
            "weight": self.weight,
            "contribution": self.contribution,
            "rating": self.rating.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class Suggestion:
    factor: Factor
    current_score: float
    potential_gain: int
    """Bonus points recoverable by bringing this factor to 100."""
    suggestion: str
    priority: Priority

    def to_dict(self) -> dict[str, Any]:
        return {
            "factor": self.factor.value,
            "name": self.factor.display_name,
            "current_score": self.current_score,
            "potential_gain": self.potential_gain,
            "suggestion": self.suggestion,
            "priority": self.priority.value,
        }


@dataclass(frozen=True)
class BreakdownFactor:
    factor: Factor
    raw_score: float
    weight_pct: float
    points: int
    rating: Rating

    def to_dict(self) -> dict[str, Any]:
        return {
            "factor": self.factor.value,
            "name": self.factor.display_name,
            "raw_score": self.raw_score,
            "weight_pct": self.weight_pct,
            "points": self.points,
            "rating": self.rating.value,
        }


@dataclass(frozen=True)
class ScoreBreakdown:
    """Base score plus per-factor bonus points, for display."""

    base: int
    total: int
    max_possible: int
    factors: list[BreakdownFactor] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "base": self.base,
            "total": self.total,
            "max_possible": self.max_possible,
            "factors": [f.to_dict() for f in self.factors],
        }
