"""
Tests for command-line tools (tools.score_wallet, tools.batch_score).
"""

from __future__ import annotations

import json

import pandas as pd

from backend_creditscore.tools import batch_score, score_wallet

from tests.conftest import NOW_MS, SUBJECT, make_metrics

CSV_HEADER = "subject_id,activity_count,age_months,engagement_score,reliability_rate,holding_balance,last_activity_at\n"


def test_score_wallet_prints_report(tmp_path, capsys):
    path = tmp_path / "metrics.json"
    path.write_text(json.dumps(make_metrics().to_dict()), encoding="utf-8")
    code = score_wallet.main(["--metrics", str(path), "--now-ms", str(NOW_MS)])
    assert code == 0
    report = json.loads(capsys.readouterr().out)
    assert report["assessment"]["final_score"] == 662
    assert report["percentile"] == 73


def test_score_wallet_invalid_metrics(tmp_path, capsys):
    path = tmp_path / "metrics.json"
    path.write_text(json.dumps(make_metrics(reliability_rate=-1).to_dict()), encoding="utf-8")
    code = score_wallet.main(["--metrics", str(path)])
    assert code == score_wallet.EXIT_INVALID_METRICS
    assert "Reliability rate must be between 0 and 100" in capsys.readouterr().err


def test_score_wallet_missing_field(tmp_path, capsys):
    path = tmp_path / "metrics.json"
    path.write_text(json.dumps({"subjectId": SUBJECT}), encoding="utf-8")
    assert score_wallet.main(["--metrics", str(path)]) == score_wallet.EXIT_INVALID_METRICS
    assert "Missing metric field" in capsys.readouterr().err


def test_score_wallet_unreadable(tmp_path):
    assert score_wallet.main(["--metrics", str(tmp_path / "nope.json")]) == 1


def test_batch_score_csv(tmp_path, capsys):
    src = tmp_path / "metrics.csv"
    src.write_text(
        CSV_HEADER
        + f"{SUBJECT},25,8,35,85,5000,{NOW_MS}\n"
        + "aleo1zero,0,0,0,0,0,0\n"
        + "bad,1,1,1,1,1,1\n"
        + "aleo1blank,,1,1,1,1,1\n",
        encoding="utf-8",
    )
    dst = tmp_path / "out" / "scores.csv"
    code = batch_score.main(["--input", str(src), "--output", str(dst), "--workers", "2", "--now-ms", str(NOW_MS)])
    assert code == 0
    assert "scored: 2, invalid: 2" in capsys.readouterr().out

    out = pd.read_csv(dst)
    assert list(out.columns) == batch_score.OUTPUT_COLUMNS
    assert out.loc[0, "final_score"] == 662
    assert out.loc[0, "risk_level"] == "medium"
    assert out.loc[0, "percentile"] == 73
    assert out.loc[1, "final_score"] == 300
    assert out.loc[2, "error"] == "Invalid Aleo address format"
    assert out.loc[3, "error"] == "activity_count must be finite"


def test_batch_score_camel_headers(tmp_path):
    src = tmp_path / "metrics.csv"
    src.write_text(
        "subjectId,activityCount,ageMonths,engagementScore,reliabilityRate,holdingBalance,lastActivityAt\n"
        f"{SUBJECT},25,8,35,85,5000,{NOW_MS}\n",
        encoding="utf-8",
    )
    out = batch_score.run(src, tmp_path / "scores.csv", workers=1, now_ms=NOW_MS)
    assert out.loc[0, "final_score"] == 662


def test_batch_score_missing_columns(tmp_path, capsys):
    src = tmp_path / "metrics.csv"
    src.write_text("subject_id,activity_count\naleo1x,5\n", encoding="utf-8")
    assert batch_score.main(["--input", str(src), "--output", str(tmp_path / "o.csv")]) == 1
    assert "missing columns" in capsys.readouterr().err


def test_batch_score_input_not_found(tmp_path):
    assert batch_score.main(["--input", str(tmp_path / "x.csv"), "--output", str(tmp_path / "o.csv")]) == 1
