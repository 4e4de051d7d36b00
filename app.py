"""Streamlit UI for location-ranked job search."""
from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from jobmatch.config import REPORTS_DIR, ensure_dirs, load_settings
from jobmatch.geo.tables import SUPPORTED_COUNTRY_CODES
from jobmatch.log import get_logger
from jobmatch.models import SearchResult
from jobmatch.report import TIERS, build_search_report, match_label, tier_jobs, write_search_report

log = get_logger(__name__)

# ── Constants ────────────────────────────────────────────────────────────

COUNTRY_NAMES: dict[str, str] = {
    "us": "United States",
    "in": "India",
    "gb": "United Kingdom",
    "ca": "Canada",
    "au": "Australia",
    "de": "Germany",
    "fr": "France",
}

_GLASS_CSS = """
<style>
[data-testid="stAppViewContainer"] {
    background: linear-gradient(135deg, #e8eaf6 0%, #f3e5f5 40%, #e0f2f1 100%);
}
[data-testid="stSidebar"] {
    background: rgba(255,255,255,0.55);
    backdrop-filter: blur(16px);
    border-right: 1px solid rgba(255,255,255,0.3);
}
[data-testid="stMetric"] {
    background: rgba(255,255,255,0.6);
    padding: 0.75rem 1rem;
    border-radius: 12px;
    border: 1px solid rgba(255,255,255,0.4);
    box-shadow: 0 4px 16px rgba(0,0,0,0.06);
}
[data-testid="stForm"],
[data-testid="stExpander"] {
    background: rgba(255,255,255,0.5);
    border-radius: 12px;
    border: 1px solid rgba(255,255,255,0.35);
}
h1, h2, h3 {
    color: #1a1a2e;
}
</style>
"""

# ── Helpers ──────────────────────────────────────────────────────────────


def _load_env() -> dict[str, str]:
    env_path = ROOT / ".env"
    values: dict[str, str] = {}
    if env_path.exists():
        for line in env_path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                k, _, v = line.partition("=")
                values[k.strip()] = v.strip()
    return values


def _save_env(values: dict[str, str]) -> None:
    env_path = ROOT / ".env"
    template_path = ROOT / ".env.example"

    lines: list[str] = []
    written: set[str] = set()

    if template_path.exists():
        for line in template_path.read_text(encoding="utf-8").splitlines():
            stripped = line.strip()
            if stripped and not stripped.startswith("#") and "=" in stripped:
                k = stripped.partition("=")[0].strip()
                lines.append(f"{k}={values.get(k, '')}")
                written.add(k)
            else:
                lines.append(line)

    for k, v in values.items():
        if k not in written:
            lines.append(f"{k}={v}")

    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def _status() -> dict[str, bool]:
    env = _load_env()
    settings = load_settings()
    return {
        "adzuna_keys": bool(env.get("ADZUNA_APP_ID") and env.get("ADZUNA_APP_KEY")),
        "mock": settings.get("provider") == "mock",
    }


def _check(label: str, ok: bool) -> str:
    icon = "✅" if ok else "⬜"
    return f"{icon}  {label}"


def _jobs_frame(result: SearchResult):
    import pandas as pd

    rows = [
        {
            "title": s.job.title,
            "company": s.job.company,
            "location": s.job.location,
            "match": match_label(s.location_match)[1],
            "score": s.location_score,
            "salary": s.job.salary,
            "posted": s.job.posted_date[:10],
            "url": s.job.application_url,
        }
        for s in result.jobs
    ]
    return pd.DataFrame(rows)


# ── Page: Search ─────────────────────────────────────────────────────────


def _render_tier(result: SearchResult, tier: str, heading: str, blurb: str) -> None:
    jobs = tier_jobs(result, tier)
    if not jobs:
        return
    st.subheader(f"{heading} ({len(jobs)})")
    st.caption(blurb)
    for s in jobs:
        icon, text = match_label(s.location_match)
        with st.expander(f"{s.job.title} @ {s.job.company} — {icon} {text}"):
            c1, c2, c3 = st.columns(3)
            c1.metric("Location score", f"{s.location_score}%")
            c2.metric("Type", s.job.type)
            c3.metric("Salary", s.job.salary)
            st.markdown(f"**Location:** {s.job.location or '—'}")
            if s.job.posted_date:
                st.markdown(f"**Posted:** {s.job.posted_date[:10]}")
            if s.job.description:
                st.write(s.job.description)
            if s.job.application_url:
                st.link_button("Apply", s.job.application_url)


def page_search() -> None:
    st.header("Find Jobs Near You")

    with st.form("search_form"):
        c1, c2 = st.columns([2, 1])
        with c1:
            location = st.text_input("Location", placeholder="New York, NY")
        with c2:
            what = st.text_input("Keyword (optional)", placeholder="python")
        c1, c2 = st.columns([2, 1])
        with c1:
            country = st.selectbox(
                "Search region",
                ("",) + SUPPORTED_COUNTRY_CODES,
                format_func=lambda c: "Detect from location" if not c else f"{COUNTRY_NAMES.get(c, c)} ({c})",
            )
        with c2:
            page = st.number_input("Page", min_value=1, value=1, step=1)
        submitted = st.form_submit_button("Search", type="primary", use_container_width=True)

    if submitted:
        from jobmatch.errors import JobMatchError
        from jobmatch.search import run_search

        params = {"location": location, "what": what, "country": country, "page": page}
        with st.status("Searching…", expanded=False) as sw:
            try:
                st.session_state["last_result"] = run_search(params)
                sw.update(label="Search complete", state="complete")
            except JobMatchError as exc:
                sw.update(label="Search failed", state="error")
                st.error(f"{exc.public_message}: {exc.details}" if exc.details else exc.public_message)

    result: SearchResult | None = st.session_state.get("last_result")
    if result is None:
        st.info("Enter a location above and click **Search**.")
        return

    st.divider()
    st.success(result.message)
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Jobs", result.total)
    c2.metric("Perfect", len(result.high_matches()))
    c3.metric("Good", len(result.medium_matches()))
    c4.metric("Other", len(result.low_matches()))

    if not result.jobs:
        st.info("No job opportunities found. Try adjusting your location or job role filters.")
        return

    for tier, heading, blurb in TIERS:
        _render_tier(result, tier, heading, blurb)

    st.divider()
    st.dataframe(
        _jobs_frame(result),
        use_container_width=True,
        column_config={
            "url": st.column_config.LinkColumn("Apply Link"),
            "score": st.column_config.ProgressColumn("Score", min_value=0, max_value=100, format="%d"),
        },
        hide_index=True,
    )

    if st.button("Save report"):
        path = write_search_report(build_search_report(result))
        st.success(f"Report saved → `{path.relative_to(ROOT)}`")


# ── Page: Reports ────────────────────────────────────────────────────────


def page_reports() -> None:
    st.header("Saved Reports")
    ensure_dirs()
    reports = sorted(REPORTS_DIR.glob("search_*.md"), reverse=True)
    if not reports:
        st.info("No reports yet. Run a search and click **Save report**.")
        return
    selected = st.selectbox(
        "Select report",
        reports,
        format_func=lambda p: p.stem.replace("search_", ""),
    )
    if selected:
        st.markdown(selected.read_text(encoding="utf-8"))


# ── Page: Settings ───────────────────────────────────────────────────────


def page_settings() -> None:
    st.header("Settings")
    env = _load_env()

    with st.form("creds_form"):
        st.subheader("Adzuna API")
        c1, c2 = st.columns(2)
        with c1:
            adzuna_id = st.text_input(
                "Adzuna App ID",
                value=env.get("ADZUNA_APP_ID", ""),
                help="https://developer.adzuna.com — 250 free requests/day",
            )
        with c2:
            adzuna_key = st.text_input(
                "Adzuna App Key",
                value=env.get("ADZUNA_APP_KEY", ""), type="password",
            )
        provider = st.selectbox(
            "Job source",
            ("adzuna", "mock"),
            index=1 if env.get("JOBMATCH_PROVIDER") == "mock" else 0,
            help="`mock` serves built-in sample listings without network access",
        )

        if st.form_submit_button("Save", type="primary", use_container_width=True):
            env.update({
                "ADZUNA_APP_ID": adzuna_id,
                "ADZUNA_APP_KEY": adzuna_key,
                "JOBMATCH_PROVIDER": provider,
            })
            _save_env(env)
            st.success("Settings saved. Restart the app to pick up new keys.")


# ── Main ─────────────────────────────────────────────────────────────────


def _inject_css() -> None:
    st.markdown(_GLASS_CSS, unsafe_allow_html=True)


def _sidebar_status() -> None:
    with st.sidebar:
        st.divider()
        s = _status()
        st.markdown("**Status**")
        st.markdown(_check("Adzuna keys", s["adzuna_keys"]))
        st.markdown(_check("Offline sample mode", s["mock"]))


def _wrap_search():
    _inject_css()
    _sidebar_status()
    page_search()


def _wrap_reports():
    _inject_css()
    _sidebar_status()
    page_reports()


def _wrap_settings():
    _inject_css()
    _sidebar_status()
    page_settings()


pages = [
    st.Page(_wrap_search, title="Search", icon="🔎", url_path="search", default=True),
    st.Page(_wrap_reports, title="Reports", icon="📋", url_path="reports"),
    st.Page(_wrap_settings, title="Settings", icon="⚙️", url_path="settings"),
]

nav = st.navigation(pages)
nav.run()
