"""
Credit score API Python client.

Uses the requests library against the FastAPI server in api_server.

Usage:
    from backend_creditscore.client import CreditScoreClient
    client = CreditScoreClient("http://localhost:8000")
    report = client.score({"subjectId": "aleo1...", "activityCount": 25, ...})
"""

from __future__ import annotations

from typing import Any

import requests


class CreditScoreClientError(Exception):
    """Raised when the API returns an error response."""

    def __init__(self, message: str, status_code: int | None = None, response: requests.Response | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class CreditScoreClient:
    """Client for the credit score API."""

    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self.base_url}{path}"
        resp = self._session.request(method, url, json=json, timeout=self.timeout)
        if not resp.ok:
            is_json = resp.headers.get("content-type", "").startswith("application/json")
            detail = resp.json().get("detail", resp.text) if is_json else resp.text
            raise CreditScoreClientError(
                f"API error: {detail}",
                status_code=resp.status_code,
                response=resp,
            )
        return resp

    def score(self, metrics: dict[str, Any], now_ms: int | None = None) -> dict[str, Any]:
        """Score a metrics record; returns assessment, factors, suggestions, percentile, breakdown."""
        body = dict(metrics)
        if now_ms is not None:
            body["now_ms"] = now_ms
        r = self._request("POST", "/api/score", json=body)
        return r.json()

    def percentile(self, score: int) -> int:
        r = self._request("GET", f"/api/percentile/{int(score)}")
        return int(r.json()["percentile"])

    def health(self) -> dict[str, str]:
        """Liveness probe."""
        r = self._request("GET", "/health")
        return r.json()
