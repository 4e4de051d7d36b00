from __future__ import annotations

import pytest

from jobmatch.geo import is_same_region


@pytest.mark.parametrize(
    "a, b",
    [
        ("austin, texas", "houston, tx"),
        ("london, uk", "manchester, uk"),
        ("seattle, washington", "spokane, washington"),
        ("toronto, canada", "ottawa, canada"),
        ("albany, ny", "buffalo, ny"),
    ],
)
def test_same_country_or_state(a, b):
    assert is_same_region(a, b)
    assert is_same_region(b, a)


@pytest.mark.parametrize(
    "a, b",
    [
        ("paris", "berlin"),
        ("mumbai", "pune"),
        ("", ""),
        ("london, uk", ""),
    ],
)
def test_different_regions(a, b):
    assert not is_same_region(a, b)


def test_short_state_tokens_match_inside_unrelated_words():
    # "ca" is found inside both "chicago" and "jamaica"
    assert is_same_region("chicago, il", "kingston, jamaica")
    # "wa" inside "ottawa" and "warsaw"
    assert is_same_region("ottawa", "warsaw")


def test_tables_can_be_injected():
    assert is_same_region("lyon", "nice", countries=(), states=()) is False
    assert is_same_region("lyon area", "nice area", countries=("area",), states=())
