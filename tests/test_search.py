from __future__ import annotations

import pytest

from conftest import adzuna_record

from jobmatch.errors import ProviderError
from jobmatch.models import SearchRequest, split_location
from jobmatch.search import handle_search, resolve_country, run_search
from jobmatch.sources.base import JobSearchBase


class StubSource(JobSearchBase):
    name = "stub"

    def __init__(self, records=None, error=None):
        self.records = records or []
        self.error = error
        self.calls = []

    def fetch(self, country, where, page=1, what=""):
        self.calls.append({"country": country, "where": where, "page": page, "what": what})
        if self.error:
            raise self.error
        return self.records


@pytest.mark.parametrize(
    "location, expected",
    [
        ("New York, NY", ("New York", "NY")),
        ("  Mumbai  ", ("Mumbai", "")),
        ("Austin, TX, USA", ("Austin", "TX")),
        (", NY", ("", "NY")),
        ("", ("", "")),
    ],
)
def test_split_location(location, expected):
    assert split_location(location) == expected


@pytest.mark.parametrize("raw, page", [(None, 1), ("", 1), ("abc", 1), ("0", 1), ("-3", 1), ("3", 3), (4, 4)])
def test_page_parsing(raw, page):
    assert SearchRequest.from_params({"page": raw}).page == page


def test_request_trims_params():
    req = SearchRequest.from_params({"location": "  Pune ", "country": " IN ", "what": " data  "})
    assert (req.location, req.country, req.what) == ("Pune", "IN", "data")


def test_country_override_takes_precedence():
    assert resolve_country(SearchRequest(location="Mumbai", country="GB")) == "gb"
    assert resolve_country(SearchRequest(location="Mumbai")) == "in"
    assert resolve_country(SearchRequest()) == "us"


def test_handle_search_success_payload():
    source = StubSource([
        adzuna_record(id="1", location={"display_name": "Paris"}, created="2026-10-01"),
        adzuna_record(id="2", location={"display_name": "New York, NY"}),
        adzuna_record(id="3", location={"display_name": "Remote"}),
    ])
    payload, status = handle_search({"location": "New York, NY", "page": "2", "what": "python"}, source=source)

    assert status == 200
    assert source.calls == [{"country": "us", "where": "New York", "page": 2, "what": "python"}]
    assert [j["id"] for j in payload["jobs"]] == ["2", "3", "1"]
    assert payload["total"] == 3
    assert payload["page"] == 2
    assert payload["skills"] == []
    assert payload["location"] == "New York, NY"
    assert payload["city"] == "New York"
    assert payload["stateOrCountry"] == "NY"
    assert payload["message"] == "Found 3 job opportunities in New York, NY"

    top = payload["jobs"][0]
    assert top["locationMatch"] == "exact_city"
    assert top["locationScore"] == top["matchScore"] == 100
    assert top["skillsScore"] == 0
    assert top["isHighMatch"] is True and top["isMediumMatch"] is False and top["isLowMatch"] is False
    assert top["postedDate"] == "2026-10-01T12:00:00Z"
    assert top["applicationUrl"].startswith("https://")
    assert top["companyLogo"] == ""


def test_where_falls_back_to_full_location_when_city_blank():
    source = StubSource()
    handle_search({"location": ", NY"}, source=source)
    assert source.calls[0]["where"] == ", NY"


def test_empty_provider_response_is_not_an_error():
    payload, status = handle_search({}, source=StubSource([]))
    assert status == 200
    assert payload["jobs"] == []
    assert payload["total"] == 0
    assert payload["message"] == "Found 0 job opportunities in your location"


def test_provider_failure_maps_to_502():
    source = StubSource(error=ProviderError(details="rate limited"))
    payload, status = handle_search({"location": "Boston"}, source=source)
    assert status == 502
    assert payload == {"error": "Adzuna request failed", "details": "rate limited"}


def test_missing_credentials_maps_to_500():
    payload, status = handle_search({"location": "Boston"}, settings={"provider": "adzuna"})
    assert status == 500
    assert payload == {"error": "Missing ADZUNA_APP_ID or ADZUNA_APP_KEY"}


def test_unexpected_failure_maps_to_500():
    payload, status = handle_search({"location": "Boston"}, source=StubSource(error=RuntimeError("kaput")))
    assert status == 500
    assert payload == {"error": "Failed to fetch jobs", "details": "kaput"}


def test_run_search_with_mock_provider():
    result = run_search({"location": "New York, NY"}, settings={"provider": "mock"})
    assert result.country == "us"
    assert [(s.job.id, s.location_score) for s in result.jobs] == [
        ("mock-1", 100),
        ("mock-2", 90),
        ("mock-5", 10),
        ("mock-3", 10),
        ("mock-4", 10),
    ]
    assert result.jobs[0].job.salary == "120000 - 150000"
    assert result.jobs[1].job.salary == "Estimated"
