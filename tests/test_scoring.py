"""Tests for combination scoring."""

import pytest

from officedays.domain.types import DayCombination, Weekday, empty_day_load
from officedays.services.scoring import (
    calculate_combination_score,
    calculate_day_frequencies,
    calculate_imbalance,
    calculate_repetition_score,
    simulate_load,
)

MON, TUE, WED, THU, FRI = Weekday


def test_no_history_gives_zero_frequencies():
    freqs = calculate_day_frequencies(None)
    assert set(freqs) == set(Weekday)
    assert all(v == 0.0 for v in freqs.values())
    assert all(v == 0.0 for v in calculate_day_frequencies([]).values())


def test_single_month_full_weight():
    freqs = calculate_day_frequencies([{MON}])
    assert freqs[MON] == pytest.approx(1.0)
    assert freqs[TUE] == 0.0


def test_recency_weights_two_months():
    # Oldest kept month weighs 1.0, the next 1 - (1/2) * 0.75 = 0.625
    freqs = calculate_day_frequencies([{MON}, {MON, TUE}])
    assert freqs[MON] == pytest.approx(1.625)
    assert freqs[TUE] == pytest.approx(0.625)


def test_lookback_limit_drops_older_months():
    freqs = calculate_day_frequencies([{FRI}, {MON}, {TUE}], lookback_limit=2)
    assert freqs[FRI] == 0.0
    assert freqs[MON] == pytest.approx(1.0)
    assert freqs[TUE] == pytest.approx(0.625)


def test_imbalance_is_sum_of_squares():
    balanced = {day: 1 for day in Weekday}
    assert calculate_imbalance(balanced) == 0.0

    load = empty_day_load()
    load[MON] = 2
    # mean 0.4: 1.6^2 + 4 * 0.4^2
    assert calculate_imbalance(load) == pytest.approx(3.2)


def test_simulate_load_does_not_mutate():
    load = empty_day_load()
    simulated = simulate_load(load, DayCombination((MON, WED)))
    assert simulated[MON] == 1 and simulated[WED] == 1
    assert load[MON] == 0


def test_repetition_score_sums_combination_days():
    freqs = {MON: 1.0, WED: 0.5}
    assert calculate_repetition_score(DayCombination((MON, WED)), freqs) == pytest.approx(1.5)
    assert calculate_repetition_score(DayCombination((TUE,)), freqs) == 0.0


def test_combination_score():
    freqs = calculate_day_frequencies([{MON}])
    score = calculate_combination_score(DayCombination((MON,)), empty_day_load(), freqs, 3.0)
    # imbalance 0.8 + 3 * 1.0
    assert score == pytest.approx(3.8)
    other = calculate_combination_score(DayCombination((TUE,)), empty_day_load(), freqs, 3.0)
    assert other == pytest.approx(0.8)
