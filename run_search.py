#!/usr/bin/env python3
"""Entry point to run a location job search from the command line."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobmatch.log import get_logger

log = get_logger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search jobs and rank them by location match.")
    p.add_argument("--location", default="", help='Free-form location, e.g. "New York, NY"')
    p.add_argument("--page", default="1", help="Results page (1-based)")
    p.add_argument("--country", default="", help="Two-letter provider region; skips inference")
    p.add_argument("--what", default="", help="Optional keyword filter")
    p.add_argument("--json", action="store_true", help="Print the JSON payload instead of Markdown")
    p.add_argument("--save", action="store_true", help="Write the Markdown report to reports/")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    from jobmatch.errors import JobMatchError
    from jobmatch.report import build_search_report, write_search_report
    from jobmatch.search import run_search

    params = {"location": args.location, "page": args.page, "country": args.country, "what": args.what}
    try:
        result = run_search(params)
    except JobMatchError as exc:
        log.error("Search failed (%d): %s", exc.status, exc.details or exc)
        if args.json:
            print(json.dumps(exc.to_payload(), indent=2, ensure_ascii=False))
        return 1

    content = build_search_report(result)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(content)
    if args.save:
        log.info("Report: %s", write_search_report(content))
    return 0


if __name__ == "__main__":
    sys.exit(main())
