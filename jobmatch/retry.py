"""Retry with exponential backoff — stdlib only."""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 3
    base_delay: float = 1.0
    max_delay: float = 30.0
    backoff_factor: float = 2.0
    jitter: bool = True

    @classmethod
    def from_settings(cls, cfg: Mapping[str, Any]) -> "RetryPolicy":
        return cls(
            max_attempts=max(1, int(cfg.get("max_attempts", cls.max_attempts))),
            base_delay=float(cfg.get("base_delay", cls.base_delay)),
            max_delay=float(cfg.get("max_delay", cls.max_delay)),
            backoff_factor=float(cfg.get("backoff_factor", cls.backoff_factor)),
            jitter=bool(cfg.get("jitter", cls.jitter)),
        )

    def delay_for(self, attempt: int) -> float:
        """Sleep before the retry that follows failed ``attempt`` (1-based)."""
        delay = min(self.base_delay * (self.backoff_factor ** (attempt - 1)), self.max_delay)
        if self.jitter:
            delay *= 0.5 + random.random()
        return delay


def call_with_retry(
    fn: Callable[..., T],
    *args: Any,
    policy: RetryPolicy,
    retryable: Tuple[Type[BaseException], ...] = (Exception,),
    sleep: Callable[[float], None] = time.sleep,
    **kwargs: Any,
) -> T:
    """Call ``fn`` until it succeeds, re-raising the last retryable error."""
    name = getattr(fn, "__qualname__", repr(fn))
    for attempt in range(1, policy.max_attempts + 1):
        try:
            return fn(*args, **kwargs)
        except retryable as exc:
            if attempt == policy.max_attempts:
                logger.error("%s failed after %d attempts: %s", name, policy.max_attempts, exc)
                raise
            delay = policy.delay_for(attempt)
            logger.warning(
                "%s attempt %d/%d failed (%s), retrying in %.1fs",
                name,
                attempt,
                policy.max_attempts,
                exc,
                delay,
            )
            sleep(delay)
    raise AssertionError("unreachable")  # max_attempts >= 1
