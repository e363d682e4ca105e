"""
Score one wallet's metrics from a JSON file and print the full report.

The JSON object holds the metric fields (snake_case or camelCase).

Usage:
  python -m backend_creditscore.tools.score_wallet --metrics metrics.json
  python -m backend_creditscore.tools.score_wallet --metrics metrics.json --now-ms 1760000000000
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from backend_creditscore.analysis_engine import Metrics, ScoringEngine
from backend_creditscore.core.exceptions import InvalidMetrics
from backend_creditscore.creditscore_logging import get_logger

logger = get_logger(__name__)

EXIT_INVALID_METRICS = 2


def load_metrics(path: Path) -> Metrics:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise InvalidMetrics("Metrics file must contain a JSON object")
    return Metrics.from_dict(data)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compute a credit score report for one metrics record.")
    parser.add_argument("--metrics", type=Path, required=True, help="Path to metrics JSON file")
    parser.add_argument("--now-ms", type=int, default=None, help="Reference time in epoch ms (default: now)")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    args = parser.parse_args(argv)

    try:
        metrics = load_metrics(args.metrics)
        report = ScoringEngine().report(metrics, args.now_ms)
    except InvalidMetrics as e:
        print(f"ERROR: {e.reason}", file=sys.stderr)
        return EXIT_INVALID_METRICS
    except (OSError, json.JSONDecodeError) as e:
        logger.error("score_wallet_read_failed", path=str(args.metrics), error=str(e))
        print(f"ERROR: cannot read {args.metrics}: {e}", file=sys.stderr)
        return 1

    print(json.dumps(report, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
