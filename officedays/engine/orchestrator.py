"""Orchestrator - builds a balanced monthly office-day schedule."""

from __future__ import annotations

import random
from datetime import date
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from officedays.config import SchedulerConfig
from officedays.domain.repositories import EmployeeRepository, ScheduleRepository
from officedays.domain.types import (
    Employee,
    MonthlySchedule,
    PastSchedules,
    empty_day_load,
    empty_schedule,
)
from officedays.services.constraints import assign_to_day
from officedays.services.scoring import DEFAULT_WEIGHTS, ScoringWeights

from .base import BaseScheduler
from .catalog import UnassignableEmployeeError, find_unassignable, get_combinations
from .grouping import group_by_required_days, partition_fixed_employees
from .selector import find_best_day_combination


def generate_schedule(
    employees: Iterable[Employee],
    past_schedules: Optional[PastSchedules] = None,
    rng: Optional[random.Random] = None,
    *,
    weights: Optional[ScoringWeights] = None,
    strict: bool = False,
    unassignable: Optional[List[Employee]] = None,
) -> MonthlySchedule:
    """
    Assign employees to weekdays for one month.

    Fixed-day employees are placed first. Flexible employees are then
    processed by quota, largest first, each getting the best-scoring
    combination for the current day-load and their history.

    Args:
        employees: Roster to schedule
        past_schedules: History per employee id, oldest month first
        rng: Random source for this call (a fresh unseeded one if None)
        weights: Lookback and weighting parameters
        strict: Raise on an unsupported quota instead of skipping it
        unassignable: Optional list that skipped employees are appended to

    Returns:
        Mapping weekday -> employees assigned that day

    Raises:
        UnassignableEmployeeError: Only when strict and a quota is unsupported
    """
    rng = rng if rng is not None else random.Random()
    weights = weights or DEFAULT_WEIGHTS
    past_schedules = past_schedules or {}

    schedule = empty_schedule()
    day_load = empty_day_load()

    _, flexible = partition_fixed_employees(employees, schedule, day_load)
    grouped = group_by_required_days(flexible, rng)

    # Larger quotas have fewer candidate combinations, so they go first
    for num_days in sorted(grouped, reverse=True):
        combinations = get_combinations(num_days)
        for employee in grouped[num_days]:
            if not combinations:
                if strict:
                    raise UnassignableEmployeeError(employee)
                print(
                    f"[WARN] No day combination for {employee.name} (id={employee.id}) "
                    f"requiring {num_days} days, skipping"
                )
                if unassignable is not None:
                    unassignable.append(employee)
                continue

            best = find_best_day_combination(
                employee, combinations, day_load, past_schedules, rng, weights
            )
            for day in best:
                assign_to_day(schedule, day_load, employee, day)

    return schedule


class BalancedScheduler(BaseScheduler):
    """
    Scheduler balancing daily headcount against weekday repetition.

    Each call to make_schedule uses its own random source, seeded from
    `seed` when given, so repeated calls with a seed are reproducible.
    """

    name = "balanced"

    def __init__(
        self,
        weights: Optional[ScoringWeights] = None,
        seed: Optional[int] = None,
        strict: bool = False,
    ):
        self.weights = weights or DEFAULT_WEIGHTS
        self.seed = seed
        self.strict = strict
        self.last_unassignable: List[Employee] = []

    @classmethod
    def from_config(cls, cfg: SchedulerConfig) -> "BalancedScheduler":
        return cls(weights=cfg.weights, seed=cfg.seed, strict=cfg.strict_quotas)

    def make_schedule(
        self,
        employees: Iterable[Employee],
        past_schedules: Optional[PastSchedules] = None,
        rng: Optional[random.Random] = None,
    ) -> MonthlySchedule:
        rng = rng if rng is not None else random.Random(self.seed)
        unassignable: List[Employee] = []
        schedule = generate_schedule(
            employees,
            past_schedules,
            rng,
            weights=self.weights,
            strict=self.strict,
            unassignable=unassignable,
        )
        self.last_unassignable = unassignable
        return schedule


def check_month(year: int, month: int, cfg: SchedulerConfig, today: Optional[date] = None) -> None:
    """Reject invalid months, and past months unless the config allows them."""
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid date selected ({month}-{year}).")
    today = today or date.today()
    if not cfg.allow_past_months and (year, month) < (today.year, today.month):
        raise ValueError(f"Cannot generate schedules for past months ({month}-{year}).")


def build_month_schedule(
    session: Session,
    year: int,
    month: int,
    cfg: SchedulerConfig,
    persist: bool = False,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> MonthlySchedule:
    """
    Convenience function to build a month's schedule from stored data.

    Args:
        session: Database session
        year: Target year
        month: Target month (1-12)
        cfg: SchedulerConfig
        persist: If True, save (insert or replace) the schedule
        rng: Optional random source; defaults to one seeded from cfg.seed
        today: Reference date for the past-month check

    Returns:
        The generated schedule
    """
    check_month(year, month, cfg, today)

    employees = EmployeeRepository.get_all(session)
    past_schedules = ScheduleRepository.get_past_schedules(
        session, year, month, employees, months_back=cfg.history_months
    )

    unassignable = find_unassignable(employees)
    if unassignable:
        if cfg.strict_quotas:
            raise UnassignableEmployeeError(unassignable[0])
        names = ", ".join(f"{e.name} (id={e.id})" for e in unassignable)
        print(f"[WARN] {len(unassignable)} employee(s) have unsupported required_days and will not be assigned: {names}")

    print(f"[INFO] Generating schedule for {month}-{year} ({len(employees)} employees)")
    scheduler = BalancedScheduler.from_config(cfg)
    schedule = scheduler.make_schedule(employees, past_schedules, rng)

    if persist:
        ScheduleRepository.save(session, year, month, schedule)
        print(f"[INFO] Saved schedule for {month}-{year}")

    print(f"[OK] Generated schedule for {month}-{year}")
    return schedule
