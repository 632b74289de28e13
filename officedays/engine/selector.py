"""Choosing the best weekday combination for a single employee."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from officedays.domain.types import DayCombination, DayLoad, Employee, PastSchedules
from officedays.services.scoring import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    calculate_combination_score,
    calculate_day_frequencies,
)

from .catalog import UnassignableEmployeeError


def find_best_day_combination(
    employee: Employee,
    combinations: Sequence[DayCombination],
    day_load: DayLoad,
    past_schedules: Optional[PastSchedules],
    rng: random.Random,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> DayCombination:
    """
    Pick the combination with the lowest balance + repetition score.

    Candidates are shuffled first, and a candidate only replaces the
    current best on a strictly lower score, so ties go to whichever
    shuffled candidate came first.

    Args:
        employee: Employee being placed
        combinations: Catalog entries for the employee's quota
        day_load: Current headcount per weekday (not modified)
        past_schedules: History per employee id, oldest month first
        rng: Request-scoped random source
        weights: Lookback and weighting parameters

    Returns:
        The chosen combination

    Raises:
        UnassignableEmployeeError: If there are no candidates
    """
    if not combinations:
        raise UnassignableEmployeeError(employee)

    shuffled = list(combinations)
    rng.shuffle(shuffled)

    history = (past_schedules or {}).get(employee.id)
    frequencies = calculate_day_frequencies(
        history,
        lookback_limit=weights.lookback_limit,
        recency_decay=weights.recency_decay,
    )

    best = shuffled[0]
    min_score = float("inf")
    for combination in shuffled:
        score = calculate_combination_score(
            combination, day_load, frequencies, weights.repetition_weight
        )
        if score < min_score:
            min_score = score
            best = combination

    return best
