"""Thin HTTP client that talks to the Claim Eligibility REST API."""

from __future__ import annotations

import os
from typing import Any

import requests


class EligibilityAPIClient:
    """Wrapper around ``requests`` for the claim eligibility backend.

    Parameters
    ----------
    base_url:
        Root URL of the FastAPI backend (e.g. ``http://localhost:5000``).
        Falls back to the ``API_BASE_URL`` env-var, then ``http://localhost:5000``.
    timeout:
        Request timeout in seconds.
    max_retries:
        Number of attempts on connection / 5xx errors.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: int = 30,
        max_retries: int = 2,
    ) -> None:
        self.base_url = (base_url or os.getenv("API_BASE_URL", "http://localhost:5000")).rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries

    # -----------------------------------------------------------------
    # Public helpers
    # -----------------------------------------------------------------

    def health_check(self) -> dict[str, Any]:
        """``GET /api/v1/health`` — liveness probe with active policy size."""
        return self._request("GET", "/api/v1/health")

    def load_sample_policy(self) -> dict[str, Any]:
        """``POST /api/v1/policies/sample`` — make the sample policy active."""
        return self._request("POST", "/api/v1/policies/sample")

    def upload_policy(self, filename: str, content: bytes) -> dict[str, Any]:
        """``POST /api/v1/policies/upload`` — replace the active policy."""
        return self._request(
            "POST",
            "/api/v1/policies/upload",
            files={"policy": (filename, content, "text/plain")},
        )

    def process_query(self, query: str) -> dict[str, Any]:
        """``POST /api/v1/claims/process`` — evaluate *query* against the active policy."""
        return self._request("POST", "/api/v1/claims/process", json={"query": query})

    # -----------------------------------------------------------------
    # Internal request helper
    # -----------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        last_exc: Exception | None = None

        for attempt in range(1, self.max_retries + 1):
            try:
                resp = requests.request(
                    method,
                    url,
                    timeout=self.timeout,
                    **kwargs,
                )
                resp.raise_for_status()
                return resp.json()
            except requests.ConnectionError as exc:
                last_exc = exc
                if attempt < self.max_retries:
                    continue
            except requests.HTTPError as exc:
                # Client errors are final.
                if exc.response is not None and exc.response.status_code < 500:
                    error_body = _safe_json(exc.response)
                    raise APIError(
                        f"HTTP {exc.response.status_code}: "
                        f"{error_body.get('detail', exc.response.text)}",
                        status_code=exc.response.status_code,
                    ) from exc
                last_exc = exc
                if attempt < self.max_retries:
                    continue
            except requests.Timeout as exc:
                last_exc = exc

        raise APIError(
            f"Request to {url} failed after {self.max_retries} attempts: {last_exc}",
        )


class APIError(Exception):
    """Raised when the backend returns an error or is unreachable."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _safe_json(resp: requests.Response) -> dict[str, Any]:
    """Parse a response body as JSON, returning ``{}`` when it is not JSON."""
    try:
        return resp.json()
    except ValueError:
        return {}
