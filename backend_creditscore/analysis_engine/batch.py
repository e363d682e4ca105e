"""
Batch scoring: score many independent metrics records in parallel.

The engine holds no state, so records are scored on a thread pool with no
coordination. All records in a batch share one reference time.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Iterable

from backend_creditscore.analysis_engine.models import Assessment, Metrics
from backend_creditscore.analysis_engine.scorer import now_millis, score
from backend_creditscore.config import get_settings
from backend_creditscore.core.exceptions import InvalidMetrics
from backend_creditscore.creditscore_logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class BatchResult:
    """Outcome for one input record: an assessment, or the validation failure."""

    index: int
    subject_id: str
    assessment: Assessment | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.assessment is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "subject_id": self.subject_id,
            "assessment": self.assessment.to_dict() if self.assessment else None,
            "error": self.error,
        }


def _score_one(index: int, metrics: Metrics, now_ms: int) -> BatchResult:
    try:
        return BatchResult(index=index, subject_id=str(metrics.subject_id), assessment=score(metrics, now_ms))
    except InvalidMetrics as e:
        return BatchResult(index=index, subject_id=str(metrics.subject_id), error=e.reason)


def score_many(
    records: Iterable[Metrics],
    now_ms: int | None = None,
    max_workers: int | None = None,
) -> list[BatchResult]:
    """
    Score records concurrently; results are returned in input order.

    Invalid records produce a BatchResult with `error` set instead of aborting
    the batch. Any other exception is a defect and propagates.
    """
    items = list(records)
    reference_ms = now_millis() if now_ms is None else int(now_ms)
    workers = max_workers or get_settings().max_batch_workers
    if not items:
        return []

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="score-batch") as pool:
        results = list(pool.map(lambda pair: _score_one(pair[0], pair[1], reference_ms), enumerate(items)))

    failed = sum(1 for r in results if not r.ok)
    logger.info(
        "batch_scored",
        total=len(results),
        scored=len(results) - failed,
        invalid=failed,
        workers=workers,
    )
    return results
