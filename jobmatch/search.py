"""
Location job search.

Runs: resolve country → fetch provider page → normalize → score/rank → payload.
"""
from __future__ import annotations

from typing import Any, Mapping

from jobmatch.config import get_env, load_settings
from jobmatch.errors import JobMatchError
from jobmatch.geo import infer_country_code
from jobmatch.log import get_logger
from jobmatch.models import SearchRequest, SearchResult
from jobmatch.normalize import normalize
from jobmatch.scorer import rank_jobs
from jobmatch.sources import JobSearchBase, get_source

log = get_logger(__name__)


def resolve_country(request: SearchRequest) -> str:
    """An explicit override always wins over inference from the location text."""
    return (request.country or infer_country_code(request.location)).lower()


def search_jobs(request: SearchRequest, source: JobSearchBase) -> SearchResult:
    city, state_or_country = request.city, request.state_or_country
    country = resolve_country(request)
    where = city or request.location or ""

    raw = source.fetch(country, where, page=request.page, what=request.what)
    jobs = normalize(raw)
    ranked = rank_jobs(jobs, request.location, city, state_or_country)

    return SearchResult(
        jobs=ranked,
        page=request.page,
        location=request.location,
        city=city,
        state_or_country=state_or_country,
        country=country,
    )


def run_search(
    params: Mapping[str, Any],
    source: JobSearchBase | None = None,
    settings: dict[str, Any] | None = None,
) -> SearchResult:
    """Parse request params, pick the configured source and run the search."""
    request = SearchRequest.from_params(params)
    if source is None:
        source = get_source(settings or load_settings(), get_env)
    return search_jobs(request, source)


def handle_search(
    params: Mapping[str, Any],
    source: JobSearchBase | None = None,
    settings: dict[str, Any] | None = None,
) -> tuple[dict[str, Any], int]:
    """Answer a search the way the HTTP layer does: ``(payload, status)``."""
    try:
        result = run_search(params, source, settings)
    except JobMatchError as exc:
        log.error("Job search failed: %s", exc)
        return exc.to_payload(), exc.status
    except Exception as exc:
        log.exception("Jobs API error")
        return {"error": "Failed to fetch jobs", "details": str(exc)}, 500

    log.info("%s (country=%s, page=%d)", result.message, result.country, result.page)
    return result.to_dict(), 200
