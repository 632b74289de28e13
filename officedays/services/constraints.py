"""Assignment constraints: per-day uniqueness, fixed days and quotas."""

from __future__ import annotations

from typing import Iterable, Optional

from officedays.domain.types import DayLoad, Employee, MonthlySchedule, Weekday


def is_assigned(schedule: MonthlySchedule, employee_id: int, day: Weekday) -> bool:
    return any(e.id == employee_id for e in schedule.get(day, []))


def assign_to_day(
    schedule: MonthlySchedule,
    day_load: Optional[DayLoad],
    employee: Employee,
    day: Weekday,
) -> bool:
    """
    Append an employee to a day unless already present.

    Args:
        schedule: Schedule to modify in place
        day_load: Headcount counter to increment, or None
        employee: Employee to assign
        day: Target weekday

    Returns:
        True if the employee was appended, False if already on that day
    """
    day = Weekday.parse(day)
    if is_assigned(schedule, employee.id, day):
        return False
    schedule.setdefault(day, []).append(employee)
    if day_load is not None:
        day_load[day] = day_load.get(day, 0) + 1
    return True


def validate_schedule(schedule: MonthlySchedule, employees: Iterable[Employee]) -> None:
    """
    Validate a generated schedule against the roster.

    Raises:
        ValueError: On a duplicate employee in a day, a missing fixed day, or
            a flexible employee with a supported quota assigned the wrong
            number of days
    """
    from officedays.engine.catalog import SUPPORTED_QUOTAS

    for day, day_employees in schedule.items():
        ids = [e.id for e in day_employees]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate employee on {Weekday.parse(day).label}")

    for employee in employees:
        assigned = {day for day in schedule if is_assigned(schedule, employee.id, day)}
        if employee.fixed_days:
            missing = [d.label for d in employee.fixed_days if d not in assigned]
            if missing:
                raise ValueError(
                    f"Employee {employee.name} (id={employee.id}) missing fixed days: {', '.join(missing)}"
                )
        elif employee.required_days in SUPPORTED_QUOTAS and len(assigned) != employee.required_days:
            raise ValueError(
                f"Employee {employee.name} (id={employee.id}) assigned {len(assigned)} days, "
                f"requires {employee.required_days}"
            )

    print("[OK] All schedule constraints validated")
