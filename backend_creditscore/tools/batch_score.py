"""
Batch-score a CSV of wallet metrics.

Input columns: subject_id, activity_count, age_months, engagement_score,
reliability_rate, holding_balance, last_activity_at (camelCase headers are
accepted too). Writes one row per input with final_score, risk_level,
percentile, or an error for rows that fail validation.

Usage:
  python -m backend_creditscore.tools.batch_score --input metrics.csv --output scores.csv
  python -m backend_creditscore.tools.batch_score --input metrics.csv --output scores.csv --workers 8
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import pandas as pd

from backend_creditscore.analysis_engine import BatchResult, Metrics, percentile, score_many
from backend_creditscore.analysis_engine.models import METRIC_ALIASES
from backend_creditscore.creditscore_logging import get_logger

logger = get_logger(__name__)

NUMERIC_COLUMNS = (
    "activity_count",
    "age_months",
    "engagement_score",
    "reliability_rate",
    "holding_balance",
    "last_activity_at",
)
OUTPUT_COLUMNS = [
    "subject_id",
    "final_score",
    "bonus_points",
    "risk_level",
    "percentile",
    "computed_at",
    "model_version",
    "error",
]


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    renames = {alias: name for name, alias in METRIC_ALIASES.items() if alias in df.columns}
    df = df.rename(columns=renames)
    missing = [name for name in METRIC_ALIASES if name not in df.columns]
    if missing:
        raise ValueError(f"missing columns: {', '.join(missing)}")
    return df


def _to_number(value: Any) -> float:
    # Unparseable or empty cells become NaN and fail validation as non-finite
    number = pd.to_numeric(value, errors="coerce")
    return float(number) if pd.notna(number) else float("nan")


def rows_to_metrics(df: pd.DataFrame) -> list[Metrics]:
    df = _normalize_columns(df)
    records: list[Metrics] = []
    for _, row in df.iterrows():
        subject = row["subject_id"]
        values = {col: _to_number(row[col]) for col in NUMERIC_COLUMNS}
        records.append(Metrics(subject_id=str(subject).strip() if pd.notna(subject) else "", **values))
    return records


def results_to_frame(results: list[BatchResult]) -> pd.DataFrame:
    rows = []
    for r in results:
        a = r.assessment
        rows.append({
            "subject_id": r.subject_id,
            "final_score": a.final_score if a else None,
            "bonus_points": a.bonus_points if a else None,
            "risk_level": a.risk_level.value if a else None,
            "percentile": percentile(a.final_score) if a else None,
            "computed_at": a.computed_at if a else None,
            "model_version": a.model_version if a else None,
            "error": r.error,
        })
    return pd.DataFrame(rows, columns=OUTPUT_COLUMNS)


def run(input_path: Path, output_path: Path, workers: int | None = None, now_ms: int | None = None) -> pd.DataFrame:
    df = pd.read_csv(input_path)
    records = rows_to_metrics(df)
    results = score_many(records, now_ms=now_ms, max_workers=workers)
    out = results_to_frame(results)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    out.to_csv(output_path, index=False)
    logger.info(
        "batch_score_written",
        input=str(input_path),
        output=str(output_path),
        rows=len(out),
        invalid=int(out["error"].notna().sum()),
    )
    return out


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score a CSV of wallet metrics in parallel.")
    parser.add_argument("--input", type=Path, required=True, help="Metrics CSV")
    parser.add_argument("--output", type=Path, required=True, help="Scores CSV to write")
    parser.add_argument("--workers", type=int, default=None, help="Thread pool size (default: SCORING_MAX_WORKERS)")
    parser.add_argument("--now-ms", type=int, default=None, help="Reference time in epoch ms (default: now)")
    args = parser.parse_args(argv)

    if not args.input.exists():
        print(f"[batch_score] ERROR: {args.input} not found", file=sys.stderr)
        return 1
    try:
        out = run(args.input, args.output, workers=args.workers, now_ms=args.now_ms)
    except ValueError as e:
        print(f"[batch_score] ERROR: {e}", file=sys.stderr)
        return 1

    invalid = int(out["error"].notna().sum())
    print(f"[batch_score] scored: {len(out) - invalid}, invalid: {invalid}, output: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
