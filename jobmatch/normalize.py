"""Map raw provider listings (Adzuna shape) onto CanonicalJob."""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

from jobmatch.log import get_logger
from jobmatch.models import CanonicalJob

log = get_logger(__name__)

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def random_base36_id(length: int = 11) -> str:
    return "".join(random.choice(_BASE36) for _ in range(length))


@dataclass(frozen=True)
class FieldDefaults:
    """Value used for each field when the provider leaves it out."""

    text: str = ""
    type: str = "—"
    salary_unknown: str = "—"
    salary_predicted: str = "Estimated"
    id_factory: Callable[[], str] = random_base36_id


DEFAULTS = FieldDefaults()


def _display_name(record: Mapping[str, Any], key: str) -> str:
    nested = record.get(key)
    if isinstance(nested, Mapping):
        return str(nested.get("display_name") or "")
    return ""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _is_predicted(flag: Any) -> bool:
    # Adzuna sends the flag as the string "1"
    return str(flag).strip() in ("1", "true", "True")


def format_salary(record: Mapping[str, Any], defaults: FieldDefaults = DEFAULTS) -> str:
    sal_min = record.get("salary_min")
    sal_max = record.get("salary_max")
    if _is_number(sal_min) and _is_number(sal_max) and sal_min and sal_max:
        return f"{_round_half_up(sal_min)} - {_round_half_up(sal_max)}"
    if _is_predicted(record.get("salary_is_predicted")):
        return defaults.salary_predicted
    return defaults.salary_unknown


def normalize_job(record: Mapping[str, Any], defaults: FieldDefaults = DEFAULTS) -> CanonicalJob:
    raw_id = record.get("id")
    return CanonicalJob(
        id=str(raw_id) if raw_id else defaults.id_factory(),
        title=str(record.get("title") or defaults.text),
        company=_display_name(record, "company") or defaults.text,
        location=_display_name(record, "location") or defaults.text,
        type=str(record.get("contract_type") or record.get("contract_time") or defaults.type),
        salary=format_salary(record, defaults),
        description=str(record.get("description") or defaults.text),
        requirements=[],
        posted_date=str(record.get("created") or defaults.text),
        application_url=str(record.get("redirect_url") or defaults.text),
        skills=[],
        company_logo=defaults.text,
    )


def normalize(records: Iterable[Mapping[str, Any]], defaults: FieldDefaults = DEFAULTS) -> list[CanonicalJob]:
    jobs = [normalize_job(r, defaults) for r in records if isinstance(r, Mapping)]
    log.debug("Normalized %d provider records", len(jobs))
    return jobs
