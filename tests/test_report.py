from __future__ import annotations

from jobmatch.models import MatchCategory, SearchResult
from jobmatch.report import build_search_report, match_label, write_search_report
from jobmatch.scorer import rank_jobs


def _result(jobs, location="New York, NY"):
    ranked = rank_jobs(jobs, location, "New York", "NY")
    return SearchResult(jobs=ranked, page=1, location=location, city="New York", state_or_country="NY")


def test_report_groups_jobs_by_tier(make_job):
    jobs = [
        make_job("New York, NY", title="Backend Engineer", company="Acme", application_url="https://www.adzuna.com/x"),
        make_job("New York City Area", title="Data Analyst", company="Beta"),
        make_job("Paris", title="ML Engineer", company="Gamma"),
    ]
    report = build_search_report(_result(jobs))

    assert "# Jobs near New York, NY" in report
    assert "**3** jobs | **2** perfect | **0** good | **1** other" in report
    assert "Perfect Location Match (2)" in report
    assert "Other Locations (1)" in report
    assert "Good Location Match" not in report
    assert "### Backend Engineer @ Acme" in report
    assert "Exact City Match (100%)" in report
    assert "[Adzuna](https://www.adzuna.com/x)" in report
    assert report.index("Backend Engineer") < report.index("ML Engineer")


def test_report_for_no_jobs():
    report = build_search_report(SearchResult(jobs=[], page=1, location="", city="", state_or_country=""))
    assert "# Jobs near your location" in report
    assert "No job opportunities found." in report


def test_match_labels():
    assert match_label(MatchCategory.REMOTE)[1] == "Remote Work"
    assert match_label(MatchCategory.SAME_REGION)[1] == "Same Region"
    assert match_label(MatchCategory.OTHER)[1] == "Location Available"
    assert match_label(MatchCategory.NONE)[1] == "Location Available"


def test_write_search_report(tmp_path):
    path = write_search_report("# hello", reports_dir=tmp_path / "reports")
    assert path.parent == tmp_path / "reports"
    assert path.name.startswith("search_") and path.suffix == ".md"
    assert path.read_text(encoding="utf-8") == "# hello"
