"""Scoring functions for day combinations: load balance and repetition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence

from officedays.domain.types import WEEKDAYS, DayCombination, DayLoad, Weekday


@dataclass(frozen=True)
class ScoringWeights:
    lookback_limit: int = 2
    recency_decay: float = 0.75
    repetition_weight: float = 3.0


DEFAULT_WEIGHTS = ScoringWeights()


def calculate_day_frequencies(
    history: Optional[Sequence[Iterable[Weekday]]],
    lookback_limit: int = 2,
    recency_decay: float = 0.75,
) -> Dict[Weekday, float]:
    """
    Recency-weighted frequency of each weekday in an employee's history.

    Only the last `lookback_limit` months are used. Within those, month i
    (0 = oldest kept) contributes `1.0 - (i / n) * recency_decay` to every
    weekday it contains, where n is the number of months kept.

    Args:
        history: Weekday sets worked per past month, oldest first
        lookback_limit: Maximum number of recent months considered
        recency_decay: How much the weight falls off across the kept months

    Returns:
        Frequency per weekday (all zero without history)
    """
    frequencies = {day: 0.0 for day in WEEKDAYS}
    if not history:
        return frequencies

    recent = list(history)[-lookback_limit:] if lookback_limit > 0 else []
    n = len(recent)
    for i, month_days in enumerate(recent):
        recency_weight = 1.0 - (i / n) * recency_decay
        for day in month_days:
            frequencies[Weekday.parse(day)] += recency_weight

    return frequencies


def calculate_imbalance(day_load: DayLoad) -> float:
    """Sum of squared deviations of the five day-loads from their mean."""
    values = [day_load.get(day, 0) for day in WEEKDAYS]
    mean = sum(values) / len(values)
    return sum((v - mean) ** 2 for v in values)


def calculate_repetition_score(combination: DayCombination, frequencies: Dict[Weekday, float]) -> float:
    return sum(frequencies.get(day, 0.0) for day in combination)


def simulate_load(day_load: DayLoad, combination: DayCombination) -> DayLoad:
    """Copy of `day_load` with one more person on each day of the combination."""
    simulated = {day: day_load.get(day, 0) for day in WEEKDAYS}
    for day in combination:
        simulated[day] += 1
    return simulated


def calculate_combination_score(
    combination: DayCombination,
    day_load: DayLoad,
    frequencies: Dict[Weekday, float],
    repetition_weight: float = 3.0,
) -> float:
    """
    Score a candidate combination for one employee. Lower is better.

    Args:
        combination: Candidate weekdays
        day_load: Current headcount per weekday (not modified)
        frequencies: Employee's repetition frequencies
        repetition_weight: Multiplier on the repetition score

    Returns:
        imbalance after applying the combination + weighted repetition
    """
    imbalance = calculate_imbalance(simulate_load(day_load, combination))
    repetition = calculate_repetition_score(combination, frequencies)
    return imbalance + repetition_weight * repetition
