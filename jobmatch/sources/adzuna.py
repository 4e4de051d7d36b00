"""Adzuna job search — aggregator with per-country endpoints.

Free tier: 250 requests/day.  Sign up at https://developer.adzuna.com/
"""
from __future__ import annotations

from typing import Any

import requests

from jobmatch.errors import ProviderError
from jobmatch.log import get_logger
from jobmatch.retry import RetryPolicy, call_with_retry
from jobmatch.sources.base import JobSearchBase

log = get_logger(__name__)

_REDACTED_PARAMS = ("app_id", "app_key")


def _redact(params: dict[str, Any]) -> dict[str, Any]:
    return {k: ("***" if k in _REDACTED_PARAMS else v) for k, v in params.items()}


class AdzunaSource(JobSearchBase):
    name = "adzuna"

    def __init__(
        self,
        app_id: str,
        app_key: str,
        *,
        base_url: str = "https://api.adzuna.com/v1/api/jobs",
        results_per_page: int = 20,
        timeout: float = 15,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        self.app_id = app_id
        self.app_key = app_key
        self.base_url = base_url.rstrip("/")
        self.results_per_page = results_per_page
        self.timeout = timeout
        self.retry_policy = retry_policy or RetryPolicy()

    def _get(self, url: str, params: dict[str, Any]) -> requests.Response:
        return requests.get(url, params=params, timeout=self.timeout)

    def fetch(self, country: str, where: str, page: int = 1, what: str = "") -> list[dict[str, Any]]:
        params: dict[str, Any] = {
            "app_id": self.app_id,
            "app_key": self.app_key,
            "where": where or "",
            "results_per_page": str(self.results_per_page),
        }
        if what:
            params["what"] = what

        url = f"{self.base_url}/{country}/search/{page}"
        log.info("Adzuna request: %s %s", url, _redact(params))

        try:
            r = call_with_retry(
                self._get,
                url,
                params,
                policy=self.retry_policy,
                retryable=(requests.ConnectionError, requests.Timeout),
            )
        except requests.RequestException as exc:
            raise ProviderError(details=str(exc)) from exc

        if not r.ok:
            log.error("Adzuna API error %d: %s", r.status_code, r.text[:500])
            raise ProviderError(f"Adzuna returned HTTP {r.status_code}", details=r.text)

        try:
            data = r.json()
        except ValueError as exc:
            raise ProviderError("Adzuna returned invalid JSON", details=str(exc)) from exc

        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            return []
        log.debug("Adzuna country=%s where=%r page=%d returned %d jobs", country, where, page, len(results))
        return results
