"""Load search settings and env configuration."""
from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from jobmatch.log import get_logger

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"
REPORTS_DIR: Path = ROOT_DIR / "reports"

DEFAULT_SETTINGS: dict[str, Any] = {
    "provider": "adzuna",
    "adzuna": {
        "base_url": "https://api.adzuna.com/v1/api/jobs",
        "results_per_page": 20,
        "timeout": 15,
    },
    "retry": {
        "max_attempts": 3,
        "base_delay": 2.0,
        "max_delay": 30.0,
    },
}


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Settings from ``config/settings.yaml`` layered over DEFAULT_SETTINGS."""
    path = path or SETTINGS_PATH
    data: dict[str, Any] = {}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        log.debug("No settings file at %s, using defaults", path)

    settings = _merge(DEFAULT_SETTINGS, data)

    provider = get_env("JOBMATCH_PROVIDER")
    if provider:
        settings["provider"] = provider.lower()
    return settings


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def ensure_dirs() -> None:
    REPORTS_DIR.mkdir(parents=True, exist_ok=True)
