"""Splitting the roster into fixed and flexible employees, and quota buckets."""

from __future__ import annotations

import random
from typing import Dict, Iterable, List, Tuple

from officedays.domain.types import DayLoad, Employee, MonthlySchedule
from officedays.services.constraints import assign_to_day


def partition_fixed_employees(
    employees: Iterable[Employee],
    schedule: MonthlySchedule,
    day_load: DayLoad,
) -> Tuple[List[Employee], List[Employee]]:
    """
    Place employees with fixed days directly into the schedule.

    Args:
        employees: Full roster
        schedule: Working schedule (mutated in place)
        day_load: Working day-load counter (mutated in place)

    Returns:
        (fixed, flexible) lists, both in input order. Flexible employees
        are not touched.
    """
    fixed: List[Employee] = []
    flexible: List[Employee] = []

    for employee in employees:
        if employee.fixed_days:
            for day in employee.fixed_days:
                assign_to_day(schedule, day_load, employee, day)
            fixed.append(employee)
        else:
            flexible.append(employee)

    return fixed, flexible


def group_by_required_days(
    employees: Iterable[Employee],
    rng: random.Random,
) -> Dict[int, List[Employee]]:
    """Bucket employees by quota and shuffle each bucket."""
    grouped: Dict[int, List[Employee]] = {}
    for employee in employees:
        grouped.setdefault(employee.required_days, []).append(employee)

    # Shuffle so the result does not depend on roster order
    for group in grouped.values():
        rng.shuffle(group)

    return grouped
