import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

# Keep test runs from writing into the project's logs/ folder.
os.environ.setdefault("JOBMATCH_LOG_DIR", str(Path(tempfile.gettempdir()) / "jobmatch-test-logs"))

from jobmatch.models import CanonicalJob  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("ADZUNA_APP_ID", "ADZUNA_APP_KEY", "JOBMATCH_PROVIDER"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def make_job():
    counter = {"n": 0}

    def _make(location: str = "", posted_date: str = "", **kwargs) -> CanonicalJob:
        counter["n"] += 1
        kwargs.setdefault("id", f"job-{counter['n']}")
        kwargs.setdefault("title", f"Engineer {counter['n']}")
        return CanonicalJob(location=location, posted_date=posted_date, **kwargs)

    return _make


def adzuna_record(**overrides):
    record = {
        "id": "4242",
        "title": "Backend Engineer",
        "company": {"display_name": "Acme Corp"},
        "location": {"display_name": "New York, NY"},
        "contract_type": "permanent",
        "contract_time": "full_time",
        "salary_min": 100000.0,
        "salary_max": 120000.0,
        "description": "Build APIs.",
        "created": "2026-10-01T12:00:00Z",
        "redirect_url": "https://www.adzuna.com/land/ad/4242",
    }
    record.update(overrides)
    return record
