"""
Tests for settings loading (config.settings) and the requests-based API client.

Client calls are mocked at requests.Session.request so no server is needed.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from backend_creditscore.client import CreditScoreClient, CreditScoreClientError
from backend_creditscore.config.settings import Settings, load_settings


def test_settings_defaults(monkeypatch):
    for name in ("API_HOST", "API_PORT", "LOG_LEVEL", "LOG_FORMAT", "SCORING_MAX_WORKERS"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == Settings()


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("API_HOST", "127.0.0.1")
    monkeypatch.setenv("API_PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("SCORING_MAX_WORKERS", "16")
    s = load_settings()
    assert s.api_host == "127.0.0.1"
    assert s.api_port == 9000
    assert s.log_level == "DEBUG"
    assert s.max_batch_workers == 16


@pytest.mark.parametrize("name,value", [("API_PORT", "abc"), ("SCORING_MAX_WORKERS", "0")])
def test_settings_reject_bad_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError, match=name):
        load_settings()


def _response(status: int, payload: dict) -> MagicMock:
    resp = MagicMock()
    resp.ok = status < 400
    resp.status_code = status
    resp.headers = {"content-type": "application/json"}
    resp.json.return_value = payload
    resp.text = str(payload)
    return resp


def test_client_score_posts_body():
    client = CreditScoreClient("http://scoring.local/")
    with patch("requests.Session.request", return_value=_response(200, {"percentile": 73})) as req:
        data = client.score({"subjectId": "aleo1x"}, now_ms=123)
    assert data == {"percentile": 73}
    req.assert_called_once_with(
        "POST",
        "http://scoring.local/api/score",
        json={"subjectId": "aleo1x", "now_ms": 123},
        timeout=30.0,
    )


def test_client_percentile_and_health():
    client = CreditScoreClient()
    with patch("requests.Session.request", return_value=_response(200, {"percentile": 50})):
        assert client.percentile(600) == 50
    with patch("requests.Session.request", return_value=_response(200, {"status": "ok"})):
        assert client.health() == {"status": "ok"}


def test_client_error_raises():
    client = CreditScoreClient()
    payload = {"detail": "Invalid Aleo address format", "field": "subject_id"}
    with patch("requests.Session.request", return_value=_response(422, payload)):
        with pytest.raises(CreditScoreClientError, match="Invalid Aleo address format") as exc_info:
            client.score({"subjectId": "bad"})
    assert exc_info.value.status_code == 422


@pytest.mark.parametrize("name,value", [("LOG_LEVEL", "verbose"), ("LOG_FORMAT", "xml")])
def test_settings_reject_unknown_logging_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError, match=name):
        load_settings()


def test_settings_logging_values_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "Warning")
    monkeypatch.setenv("LOG_FORMAT", "CONSOLE")
    s = load_settings()
    assert s.log_level == "WARNING"
    assert s.log_format == "console"
