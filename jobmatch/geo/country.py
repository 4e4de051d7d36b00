"""Pick the job-search API region for a free-form location."""
from __future__ import annotations

from typing import Sequence

from jobmatch.geo.tables import COUNTRY_RULES, DEFAULT_COUNTRY_CODE, CountryRule


def infer_country_code(
    location_text: str,
    rules: Sequence[CountryRule] = COUNTRY_RULES,
    default: str = DEFAULT_COUNTRY_CODE,
) -> str:
    """Two-letter lower-case code for ``location_text``; unrecognised text gets ``default``."""
    text = (location_text or "").lower()
    for rule in rules:
        if rule.matches(text):
            return rule.code
    return default
