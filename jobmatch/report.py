"""Render a ranked search as a Markdown report."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import urlparse

from jobmatch.config import REPORTS_DIR
from jobmatch.log import get_logger
from jobmatch.models import MatchCategory, ScoredJob, SearchResult

log = get_logger(__name__)

MATCH_LABELS: dict[MatchCategory, tuple[str, str]] = {
    MatchCategory.EXACT_CITY: ("\U0001f3e0", "Exact City Match"),
    MatchCategory.STATE_COUNTRY: ("\U0001f5fa\ufe0f", "State/Country Match"),
    MatchCategory.PARTIAL: ("\U0001f4cd", "Partial Location Match"),
    MatchCategory.REMOTE: ("\U0001f3e0", "Remote Work"),
    MatchCategory.SAME_REGION: ("\U0001f30e", "Same Region"),
}
_FALLBACK_LABEL = ("\U0001f30d", "Location Available")

TIERS: tuple[tuple[str, str, str], ...] = (
    ("high", "\U0001f3e0 Perfect Location Match", "Jobs in your exact city, state, or remote opportunities"),
    ("medium", "\U0001f5fa\ufe0f Good Location Match", "Jobs in your region or nearby areas"),
    ("low", "\U0001f30d Other Locations", "Jobs from other locations that might interest you"),
)


def match_label(category: MatchCategory) -> tuple[str, str]:
    """(icon, text) shown next to a job for its location match."""
    return MATCH_LABELS.get(category, _FALLBACK_LABEL)


def _short_url_label(url: str) -> str:
    host = (urlparse(url).hostname or "").replace("www.", "")
    parts = host.split(".")
    return parts[0].capitalize() if parts and parts[0] else "Link"


def tier_jobs(result: SearchResult, tier: str) -> list[ScoredJob]:
    if tier == "high":
        return result.high_matches()
    if tier == "medium":
        return result.medium_matches()
    return result.low_matches()


def _job_lines(s: ScoredJob) -> list[str]:
    icon, text = match_label(s.location_match)
    job = s.job
    lines = [
        f"### {job.title or 'Untitled role'} @ {job.company or 'Unknown company'}",
        f"- **Location:** {job.location or '—'} — {icon} {text} ({s.location_score}%)",
        f"- **Type:** {job.type} | **Salary:** {job.salary}",
    ]
    if job.posted_date:
        lines.append(f"- **Posted:** {job.posted_date[:10]}")
    if job.application_url:
        lines.append(f"- **Apply:** [{_short_url_label(job.application_url)}]({job.application_url})")
    lines.append("")
    return lines


def build_search_report(result: SearchResult) -> str:
    date = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    where = result.location or "your location"
    lines: list[str] = [f"# Jobs near {where} — {date}", ""]
    lines.append(
        f"**{result.total}** jobs | **{len(result.high_matches())}** perfect | "
        f"**{len(result.medium_matches())}** good | **{len(result.low_matches())}** other "
        f"| page {result.page} | region `{result.country}`"
    )
    lines.append("")

    if not result.jobs:
        lines.append("No job opportunities found.")
        lines.append("")
        lines.append("Try adjusting your location or job role filters.")
        return "\n".join(lines)

    for tier, heading, blurb in TIERS:
        jobs = tier_jobs(result, tier)
        if not jobs:
            continue
        lines.append(f"## {heading} ({len(jobs)})")
        lines.append("")
        lines.append(f"_{blurb}_")
        lines.append("")
        for s in jobs:
            lines.extend(_job_lines(s))

    lines.append("---")
    lines.append("")
    lines.append("| # | Role | Company | Location | Match | Score |")
    lines.append("|--:|------|---------|----------|-------|------:|")
    for i, s in enumerate(result.jobs, 1):
        title = s.job.title[:40] + ("…" if len(s.job.title) > 40 else "")
        company = s.job.company[:22] + ("…" if len(s.job.company) > 22 else "")
        loc = s.job.location.split(",")[0][:18]
        lines.append(f"| {i} | {title} | {company} | {loc} | {match_label(s.location_match)[1]} | {s.location_score} |")
    lines.append("")

    log.info("Built search report: %d jobs", result.total)
    return "\n".join(lines)


def write_search_report(content: str, reports_dir: Path | None = None) -> Path:
    reports_dir = reports_dir or REPORTS_DIR
    reports_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H%M%S")
    path = reports_dir / f"search_{stamp}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
