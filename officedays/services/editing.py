"""Manual edits to a generated schedule."""

from __future__ import annotations

from officedays.domain.types import Employee, MonthlySchedule, Weekday, copy_schedule

from .constraints import assign_to_day


def add_employee_to_day(schedule: MonthlySchedule, employee: Employee, day: Weekday | str) -> MonthlySchedule:
    """Return a copy with the employee added to `day` (no-op if already there)."""
    edited = copy_schedule(schedule)
    assign_to_day(edited, None, employee, Weekday.parse(day))
    return edited


def remove_employee_from_day(schedule: MonthlySchedule, employee_id: int, day: Weekday | str) -> MonthlySchedule:
    """Return a copy without the employee on `day`."""
    edited = copy_schedule(schedule)
    day = Weekday.parse(day)
    edited[day] = [e for e in edited[day] if e.id != employee_id]
    return edited


def move_employee(
    schedule: MonthlySchedule,
    employee_id: int,
    from_day: Weekday | str,
    to_day: Weekday | str,
) -> MonthlySchedule:
    """
    Move an employee from one day to another.

    Raises:
        ValueError: If the employee is not assigned on `from_day`
    """
    from_day = Weekday.parse(from_day)
    to_day = Weekday.parse(to_day)
    employee = next((e for e in schedule.get(from_day, []) if e.id == employee_id), None)
    if employee is None:
        raise ValueError(f"Employee {employee_id} is not assigned on {from_day.label}")

    edited = remove_employee_from_day(schedule, employee_id, from_day)
    assign_to_day(edited, None, employee, to_day)
    return edited
