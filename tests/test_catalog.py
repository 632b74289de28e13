"""Tests for the day-combination catalog."""

import pytest

from officedays.domain.types import Weekday
from officedays.engine.catalog import (
    DAY_COMBINATIONS,
    SUPPORTED_QUOTAS,
    find_unassignable,
    get_combinations,
    is_supported_quota,
)


def test_catalog_sizes():
    assert len(get_combinations(1)) == 5
    assert len(get_combinations(2)) == 6
    assert len(get_combinations(3)) == 1
    assert len(get_combinations(5)) == 1
    assert SUPPORTED_QUOTAS == {1, 2, 3, 5}


def test_pairs_never_adjacent():
    for combo in get_combinations(2):
        first, second = combo.days
        assert second - first >= 2


def test_fixed_single_combinations():
    assert get_combinations(3)[0].as_set() == {Weekday.MONDAY, Weekday.WEDNESDAY, Weekday.FRIDAY}
    assert get_combinations(5)[0].as_set() == set(Weekday)


def test_combination_sizes_match_quota():
    for quota, combos in DAY_COMBINATIONS.items():
        for combo in combos:
            assert len(combo) == quota
            assert len(combo.as_set()) == quota


def test_unsupported_quota_has_no_entry():
    assert get_combinations(4) == ()
    assert get_combinations(0) == ()
    assert not is_supported_quota(4)
    assert is_supported_quota(2)


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        DAY_COMBINATIONS[4] = ()


def test_find_unassignable(make_employee):
    employees = [
        make_employee(1, required_days=4),
        make_employee(2, required_days=2),
        make_employee(3, required_days=4, fixed_days=["Monday"]),  # fixed days bypass quotas
    ]
    assert [e.id for e in find_unassignable(employees)] == [1]
