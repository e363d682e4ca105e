"""
Core utilities — exceptions and cross-cutting concerns.

Provides the error taxonomy shared by the analysis engine, API server, and tools.
"""

from backend_creditscore.core.exceptions import InvalidMetrics, ScoringError

__all__ = ["InvalidMetrics", "ScoringError"]
