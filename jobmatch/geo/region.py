"""Coarse "same country / same US state" check between two locations."""
from __future__ import annotations

from typing import Sequence

from jobmatch.geo.tables import REGION_COUNTRIES, REGION_US_STATES


def _share_token(a: str, b: str, tokens: Sequence[str]) -> bool:
    return any(t in a and t in b for t in tokens)


def is_same_region(
    location_a: str,
    location_b: str,
    countries: Sequence[str] = REGION_COUNTRIES,
    states: Sequence[str] = REGION_US_STATES,
) -> bool:
    """True when both (lower-cased) strings contain the same country or US-state token.

    Tokens are matched as raw substrings, so "ca" also matches inside
    "jamaica" or "chicago"; callers rely on this loose behaviour.
    """
    return _share_token(location_a, location_b, countries) or _share_token(
        location_a, location_b, states
    )
