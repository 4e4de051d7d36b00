"""Data models for job listings, location matches and search requests."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class MatchCategory(str, Enum):
    EXACT_CITY = "exact_city"
    REMOTE = "remote"
    STATE_COUNTRY = "state_country"
    PARTIAL = "partial"
    SAME_REGION = "same_region"
    OTHER = "other"
    NONE = "none"

    @property
    def score(self) -> int:
        return MATCH_SCORES[self]


MATCH_SCORES: dict[MatchCategory, int] = {
    MatchCategory.EXACT_CITY: 100,
    MatchCategory.REMOTE: 90,
    MatchCategory.STATE_COUNTRY: 80,
    MatchCategory.PARTIAL: 70,
    MatchCategory.SAME_REGION: 60,
    MatchCategory.OTHER: 10,
    MatchCategory.NONE: 0,
}

HIGH_MATCH_MIN = 80
MEDIUM_MATCH_MIN = 50


@dataclass
class CanonicalJob:
    id: str
    title: str = ""
    company: str = ""
    location: str = ""
    type: str = "—"
    salary: str = "—"
    description: str = ""
    requirements: list[str] = field(default_factory=list)
    posted_date: str = ""
    application_url: str = ""
    skills: list[str] = field(default_factory=list)
    company_logo: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "type": self.type,
            "salary": self.salary,
            "description": self.description,
            "requirements": list(self.requirements),
            "postedDate": self.posted_date,
            "applicationUrl": self.application_url,
            "skills": list(self.skills),
            "companyLogo": self.company_logo,
        }


@dataclass
class ScoredJob:
    job: CanonicalJob
    location_score: int
    location_match: MatchCategory

    @property
    def match_score(self) -> int:
        return self.location_score

    @property
    def skills_score(self) -> int:
        # Skills matching is not implemented; the field is kept for the payload shape.
        return 0

    @property
    def is_high_match(self) -> bool:
        return self.location_score >= HIGH_MATCH_MIN

    @property
    def is_medium_match(self) -> bool:
        return MEDIUM_MATCH_MIN <= self.location_score < HIGH_MATCH_MIN

    @property
    def is_low_match(self) -> bool:
        return self.location_score < MEDIUM_MATCH_MIN

    def to_dict(self) -> dict[str, Any]:
        data = self.job.to_dict()
        data.update(
            {
                "matchScore": self.match_score,
                "locationScore": self.location_score,
                "skillsScore": self.skills_score,
                "locationMatch": self.location_match.value,
                "isHighMatch": self.is_high_match,
                "isMediumMatch": self.is_medium_match,
                "isLowMatch": self.is_low_match,
            }
        )
        return data


def split_location(location: str) -> tuple[str, str]:
    """``"New York, NY"`` -> ``("New York", "NY")``; either part may be empty."""
    parts = [p.strip() for p in (location or "").split(",")]
    city = parts[0] if parts else ""
    state_or_country = parts[1] if len(parts) > 1 else ""
    return city, state_or_country


def _parse_page(raw: Any) -> int:
    try:
        page = int(str(raw).strip())
    except (TypeError, ValueError):
        return 1
    return max(1, page)


@dataclass
class SearchRequest:
    location: str = ""
    page: int = 1
    country: str = ""
    what: str = ""

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "SearchRequest":
        return cls(
            location=str(params.get("location") or "").strip(),
            page=_parse_page(params.get("page") or 1),
            country=str(params.get("country") or "").strip(),
            what=str(params.get("what") or "").strip(),
        )

    @property
    def city(self) -> str:
        return split_location(self.location)[0]

    @property
    def state_or_country(self) -> str:
        return split_location(self.location)[1]


@dataclass
class SearchResult:
    jobs: list[ScoredJob]
    page: int
    location: str
    city: str
    state_or_country: str
    country: str = "us"

    @property
    def total(self) -> int:
        return len(self.jobs)

    @property
    def message(self) -> str:
        return f"Found {self.total} job opportunities in {self.location or 'your location'}"

    def high_matches(self) -> list[ScoredJob]:
        return [s for s in self.jobs if s.is_high_match]

    def medium_matches(self) -> list[ScoredJob]:
        return [s for s in self.jobs if s.is_medium_match]

    def low_matches(self) -> list[ScoredJob]:
        return [s for s in self.jobs if s.is_low_match]

    def to_dict(self) -> dict[str, Any]:
        return {
            "jobs": [s.to_dict() for s in self.jobs],
            "total": self.total,
            "page": self.page,
            "skills": [],
            "location": self.location,
            "city": self.city,
            "stateOrCountry": self.state_or_country,
            "message": self.message,
        }
