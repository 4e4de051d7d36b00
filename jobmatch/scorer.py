"""Score jobs by how well their location fits the user's, then rank them."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Sequence

from jobmatch.geo.region import is_same_region
from jobmatch.geo.tables import REMOTE_MARKERS
from jobmatch.log import get_logger
from jobmatch.models import CanonicalJob, MatchCategory, ScoredJob

log = get_logger(__name__)

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def _normalize(s: str | None) -> str:
    return (s or "").lower()


@dataclass(frozen=True)
class LocationContext:
    """Lower-cased job and user locations for one comparison."""

    job: str
    user: str
    city: str
    state_or_country: str


LocationRule = tuple[Callable[[LocationContext], bool], MatchCategory]


def _city_in_job(ctx: LocationContext) -> bool:
    return bool(ctx.city) and ctx.city in ctx.job


def _state_in_job(ctx: LocationContext) -> bool:
    return bool(ctx.state_or_country) and ctx.state_or_country in ctx.job


def _job_is_remote(ctx: LocationContext) -> bool:
    return any(m in ctx.job for m in REMOTE_MARKERS)


def _partial_overlap(ctx: LocationContext) -> bool:
    return ctx.job in ctx.user or ctx.user in ctx.job


def _same_region(ctx: LocationContext) -> bool:
    return is_same_region(ctx.user, ctx.job)


# First match wins. Remote sits below the user's own city and state on purpose.
LOCATION_RULES: tuple[LocationRule, ...] = (
    (_city_in_job, MatchCategory.EXACT_CITY),
    (_state_in_job, MatchCategory.STATE_COUNTRY),
    (_job_is_remote, MatchCategory.REMOTE),
    (_partial_overlap, MatchCategory.PARTIAL),
    (_same_region, MatchCategory.SAME_REGION),
)


def classify_location(
    job_location: str,
    user_location: str,
    user_city: str = "",
    user_state_or_country: str = "",
    rules: Sequence[LocationRule] = LOCATION_RULES,
) -> MatchCategory:
    if not user_location or not job_location:
        return MatchCategory.NONE
    ctx = LocationContext(
        job=_normalize(job_location),
        user=_normalize(user_location),
        city=_normalize(user_city),
        state_or_country=_normalize(user_state_or_country),
    )
    for predicate, category in rules:
        if predicate(ctx):
            return category
    return MatchCategory.OTHER


def score_job(
    job: CanonicalJob,
    user_location: str,
    user_city: str = "",
    user_state_or_country: str = "",
) -> ScoredJob:
    category = classify_location(job.location, user_location, user_city, user_state_or_country)
    return ScoredJob(job=job, location_score=category.score, location_match=category)


def posted_at(value: str | None) -> datetime:
    """Parse an ISO-8601 posting date; missing or malformed dates sort as the earliest."""
    if not value:
        return _EARLIEST
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return _EARLIEST
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def rank_jobs(
    jobs: Sequence[CanonicalJob],
    user_location: str,
    user_city: str = "",
    user_state_or_country: str = "",
) -> list[ScoredJob]:
    """Score every job and order by score, then newest first.

    The sort is stable: jobs equal on both keys keep the provider's order.
    No job is ever dropped.
    """
    scored = [score_job(j, user_location, user_city, user_state_or_country) for j in jobs]
    ranked = sorted(
        scored,
        key=lambda s: (s.location_score, posted_at(s.job.posted_date)),
        reverse=True,
    )
    log.info(
        "Ranked %d jobs for %r → high=%d medium=%d low=%d",
        len(ranked),
        user_location,
        sum(1 for s in ranked if s.is_high_match),
        sum(1 for s in ranked if s.is_medium_match),
        sum(1 for s in ranked if s.is_low_match),
    )
    return ranked
