from typing import Any, Callable

from .adzuna import AdzunaSource
from .base import JobSearchBase
from .mock import MockSource

from jobmatch.errors import MissingCredentialsError
from jobmatch.log import get_logger
from jobmatch.retry import RetryPolicy

log = get_logger(__name__)

__all__ = ["JobSearchBase", "AdzunaSource", "MockSource", "get_source"]


def get_source(settings: dict[str, Any], env_getter: Callable[[str], str]) -> JobSearchBase:
    provider = str(settings.get("provider", "adzuna")).lower()
    if provider == "mock":
        log.info("Using source: mock (offline sample listings)")
        return MockSource()
    if provider != "adzuna":
        log.warning("Unknown provider %r, falling back to Adzuna", provider)

    app_id = env_getter("ADZUNA_APP_ID")
    app_key = env_getter("ADZUNA_APP_KEY")
    if not app_id or not app_key:
        raise MissingCredentialsError()

    cfg = settings.get("adzuna", {})
    log.debug("Using source: Adzuna")
    return AdzunaSource(
        app_id,
        app_key,
        base_url=cfg.get("base_url", "https://api.adzuna.com/v1/api/jobs"),
        results_per_page=int(cfg.get("results_per_page", 20)),
        timeout=float(cfg.get("timeout", 15)),
        retry_policy=RetryPolicy.from_settings(settings.get("retry", {})),
    )
