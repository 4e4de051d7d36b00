"""Offline job source returning Adzuna-shaped sample listings."""
from __future__ import annotations

from typing import Any

from jobmatch.log import get_logger
from jobmatch.sources.base import JobSearchBase

log = get_logger(__name__)

_SAMPLE_LISTINGS: tuple[dict[str, Any], ...] = (
    {
        "id": "mock-1",
        "title": "Backend Engineer",
        "company": {"display_name": "Hudson Analytics"},
        "location": {"display_name": "New York, NY"},
        "contract_type": "permanent",
        "salary_min": 120000.0,
        "salary_max": 150000.4,
        "description": "Python services, PostgreSQL, AWS.",
        "created": "2026-10-12T09:30:00Z",
        "redirect_url": "https://example.com/jobs/mock-1",
    },
    {
        "id": "mock-2",
        "title": "Site Reliability Engineer",
        "company": {"display_name": "CloudScale"},
        "location": {"display_name": "Remote"},
        "contract_time": "full_time",
        "salary_is_predicted": "1",
        "description": "On-call rotation, Kubernetes, incident response.",
        "created": "2026-10-15T14:00:00Z",
        "redirect_url": "https://example.com/jobs/mock-2",
    },
    {
        "id": "mock-3",
        "title": "Data Engineer",
        "company": {"display_name": "Lone Star Logistics"},
        "location": {"display_name": "Austin, Texas"},
        "contract_type": "contract",
        "salary_min": 95000,
        "salary_max": 110000,
        "description": "Airflow pipelines and dbt models.",
        "created": "2026-10-10T08:00:00Z",
        "redirect_url": "https://example.com/jobs/mock-3",
    },
    {
        "id": "mock-4",
        "title": "Platform Engineer",
        "company": {"display_name": "Pacific Retail"},
        "location": {"display_name": "San Francisco, California"},
        "description": "Developer tooling and CI/CD.",
        "created": "2026-10-08T11:15:00Z",
        "redirect_url": "https://example.com/jobs/mock-4",
    },
    {
        "id": "mock-5",
        "title": "ML Engineer",
        "company": {"display_name": "Rive Gauche AI"},
        "location": {"display_name": "Paris"},
        "contract_time": "full_time",
        "description": "Recommendation models in production.",
        "created": "2026-10-16T10:00:00Z",
        "redirect_url": "https://example.com/jobs/mock-5",
    },
)


class MockSource(JobSearchBase):
    name = "mock"

    def fetch(self, country: str, where: str, page: int = 1, what: str = "") -> list[dict[str, Any]]:
        log.info("MockSource returning sample listings (country=%s where=%r)", country, where)
        if page > 1:
            return []
        listings = [dict(item) for item in _SAMPLE_LISTINGS]
        if what:
            needle = what.lower()
            listings = [
                item for item in listings
                if needle in item["title"].lower() or needle in item["description"].lower()
            ]
        return listings
