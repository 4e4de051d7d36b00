"""Static location lookup tables shared by the country and region matchers.

All matching against these tables is plain lower-case substring containment,
so short abbreviations ("ca", "ny", "us") also hit inside longer words.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CountryRule:
    """Route to ``code`` when the text contains any of ``names`` or ``markers``."""

    code: str
    names: tuple[str, ...]
    markers: tuple[str, ...] = ()

    def matches(self, text: str) -> bool:
        return any(n in text for n in self.names) or any(m in text for m in self.markers)


DEFAULT_COUNTRY_CODE = "us"

# Evaluated in order, first match wins. The US rule sits above the others,
# so its short markers mask later countries (e.g. "toronto, canada" -> "us").
COUNTRY_RULES: tuple[CountryRule, ...] = (
    CountryRule(
        "in",
        names=("india",),
        markers=("mumbai", "pune", "delhi", "bangalore", "bengaluru", "hyderabad", "chennai"),
    ),
    CountryRule(
        "us",
        names=("united states", "usa", "us"),
        markers=("new york", "san francisco", "california", "tx", "fl", "wa", "ny", "ca"),
    ),
    CountryRule(
        "gb",
        names=("united kingdom", "uk"),
        markers=("london", "manchester", "edinburgh"),
    ),
    CountryRule("ca", names=("canada",), markers=("toronto", "vancouver", "montreal")),
    CountryRule("au", names=("australia",), markers=("sydney", "melbourne", "brisbane")),
    CountryRule("de", names=("germany",), markers=("berlin", "munich", "münchen", "frankfurt")),
    CountryRule("fr", names=("france",), markers=("paris", "lyon", "marseille")),
)

SUPPORTED_COUNTRY_CODES: tuple[str, ...] = tuple(r.code for r in COUNTRY_RULES)

REGION_COUNTRIES: tuple[str, ...] = (
    "united states", "usa", "us", "canada", "uk",
    "united kingdom", "australia", "germany", "france",
)

REGION_US_STATES: tuple[str, ...] = (
    "california", "ca", "new york", "ny", "texas",
    "tx", "florida", "fl", "washington", "wa",
)

REMOTE_MARKERS: tuple[str, ...] = ("remote", "work from home", "hybrid", "anywhere")
