"""Tests for the combination selector."""

import random

import pytest

from officedays.domain.types import Weekday, empty_day_load
from officedays.engine.catalog import UnassignableEmployeeError, get_combinations
from officedays.engine.selector import find_best_day_combination


def test_quota_two_returns_catalog_pair(make_employee):
    employee = make_employee(1, required_days=2)
    catalog = get_combinations(2)
    for seed in range(10):
        combo = find_best_day_combination(
            employee, catalog, empty_day_load(), {}, random.Random(seed)
        )
        assert combo in catalog


def test_picks_least_loaded_day(make_employee):
    employee = make_employee(1)
    load = {day: 1 for day in Weekday}
    load[Weekday.FRIDAY] = 0
    for seed in range(20):
        combo = find_best_day_combination(employee, get_combinations(1), load, None, random.Random(seed))
        assert combo.days == (Weekday.FRIDAY,)


def test_avoids_recently_worked_day(make_employee):
    employee = make_employee(7)
    history = {7: [frozenset({Weekday.MONDAY})]}
    for seed in range(20):
        combo = find_best_day_combination(
            employee, get_combinations(1), empty_day_load(), history, random.Random(seed)
        )
        assert Weekday.MONDAY not in combo


def test_ties_keep_first_shuffled_candidate(make_employee):
    employee = make_employee(1)
    catalog = get_combinations(1)
    expected = list(catalog)
    random.Random(5).shuffle(expected)

    combo = find_best_day_combination(employee, catalog, empty_day_load(), {}, random.Random(5))
    assert combo == expected[0]


def test_does_not_modify_day_load(make_employee):
    load = empty_day_load()
    find_best_day_combination(make_employee(1, 2), get_combinations(2), load, {}, random.Random(0))
    assert all(v == 0 for v in load.values())


def test_no_candidates_raises(make_employee):
    with pytest.raises(UnassignableEmployeeError):
        find_best_day_combination(make_employee(1, 4), (), empty_day_load(), {}, random.Random(0))
