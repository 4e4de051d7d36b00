from __future__ import annotations

import pytest

from jobmatch.retry import RetryPolicy, call_with_retry


def test_retries_until_success():
    sleeps = []
    attempts = []

    def flaky(x):
        attempts.append(x)
        if len(attempts) < 3:
            raise OSError("temporary")
        return x * 2

    policy = RetryPolicy(max_attempts=3, base_delay=1.0, jitter=False)
    assert call_with_retry(flaky, 21, policy=policy, retryable=(OSError,), sleep=sleeps.append) == 42
    assert sleeps == [1.0, 2.0]


def test_gives_up_after_max_attempts():
    sleeps = []

    def always_fails():
        raise OSError("down")

    with pytest.raises(OSError):
        call_with_retry(always_fails, policy=RetryPolicy(max_attempts=2, jitter=False), sleep=sleeps.append)
    assert len(sleeps) == 1


def test_non_retryable_errors_propagate_immediately():
    sleeps = []

    def bad():
        raise KeyError("nope")

    with pytest.raises(KeyError):
        call_with_retry(bad, policy=RetryPolicy(), retryable=(OSError,), sleep=sleeps.append)
    assert sleeps == []


def test_delay_is_capped():
    policy = RetryPolicy(base_delay=10.0, max_delay=25.0, jitter=False)
    assert [policy.delay_for(n) for n in (1, 2, 3, 4)] == [10.0, 20.0, 25.0, 25.0]


def test_jitter_stays_within_bounds():
    policy = RetryPolicy(base_delay=4.0, jitter=True)
    for _ in range(20):
        assert 2.0 <= policy.delay_for(1) <= 6.0


def test_policy_from_settings():
    policy = RetryPolicy.from_settings({"max_attempts": 0, "base_delay": "0.5"})
    assert policy.max_attempts == 1
    assert policy.base_delay == 0.5
    assert policy.max_delay == 30.0
