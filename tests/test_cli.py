from __future__ import annotations

import json

import run_search


def test_cli_prints_json_payload(monkeypatch, capsys):
    monkeypatch.setenv("JOBMATCH_PROVIDER", "mock")
    assert run_search.main(["--location", "New York, NY", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["total"] == 5
    assert payload["jobs"][0]["locationMatch"] == "exact_city"


def test_cli_prints_markdown(monkeypatch, capsys):
    monkeypatch.setenv("JOBMATCH_PROVIDER", "mock")
    assert run_search.main(["--location", "Austin, TX"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("# Jobs near Austin, TX")


def test_cli_fails_without_credentials(monkeypatch, capsys):
    monkeypatch.setenv("JOBMATCH_PROVIDER", "adzuna")
    assert run_search.main(["--location", "Boston", "--json"]) == 1
    assert json.loads(capsys.readouterr().out) == {"error": "Missing ADZUNA_APP_ID or ADZUNA_APP_KEY"}
