"""Repository classes for data access."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session

from .models import EmployeeRecord, ScheduleRecord
from .types import Employee, MonthlySchedule, PastSchedules, employee_days


class EmployeeRepository:
    """Repository for employee data access."""

    @staticmethod
    def get_all(session: Session) -> List[Employee]:
        """Get all employees, ordered by id."""
        records = session.query(EmployeeRecord).order_by(EmployeeRecord.id).all()
        return [r.to_employee() for r in records]

    @staticmethod
    def get_by_id(session: Session, employee_id: int) -> Optional[Employee]:
        """Get employee by ID."""
        record = session.get(EmployeeRecord, employee_id)
        return record.to_employee() if record is not None else None

    @staticmethod
    def create(session: Session, employee: Employee) -> Employee:
        """Create a new employee; returns it with the database-assigned id."""
        record = EmployeeRecord.from_employee(employee)
        session.add(record)
        session.commit()
        session.refresh(record)
        return record.to_employee()

    @staticmethod
    def bulk_create(session: Session, employees: Iterable[Employee]) -> List[Employee]:
        """Create multiple employees; ids are assigned by the database."""
        records = [EmployeeRecord.from_employee(e) for e in employees]
        session.add_all(records)
        session.commit()
        return [r.to_employee() for r in records]

    @staticmethod
    def update(session: Session, employee: Employee) -> Employee:
        """Update an existing employee."""
        record = session.get(EmployeeRecord, employee.id)
        if record is None:
            raise ValueError(f"Unknown employee: {employee.id}")
        record.apply(employee)
        session.commit()
        return record.to_employee()

    @staticmethod
    def delete(session: Session, employee_id: int) -> bool:
        """Delete an employee. Returns False when the id does not exist."""
        record = session.get(EmployeeRecord, employee_id)
        if record is None:
            return False
        session.delete(record)
        session.commit()
        return True

    @staticmethod
    def delete_all(session: Session) -> int:
        """Delete all employees. Returns number of deleted rows."""
        count = session.query(EmployeeRecord).delete(synchronize_session=False)
        session.commit()
        return count


def previous_months(year: int, month: int, count: int) -> List[Tuple[int, int]]:
    """The `count` months before (year, month), oldest first."""
    months = []
    for i in range(1, count + 1):
        past_month = month - i
        past_year = year
        while past_month < 1:
            past_month += 12
            past_year -= 1
        months.append((past_year, past_month))
    months.reverse()
    return months


class ScheduleRepository:
    """Repository for monthly schedule data access."""

    @staticmethod
    def get_record(session: Session, year: int, month: int) -> Optional[ScheduleRecord]:
        return (
            session.query(ScheduleRecord)
            .filter(ScheduleRecord.year == year, ScheduleRecord.month == month)
            .first()
        )

    @staticmethod
    def save(session: Session, year: int, month: int, schedule: MonthlySchedule) -> ScheduleRecord:
        """Insert or replace the schedule stored for (year, month)."""
        record = ScheduleRepository.get_record(session, year, month)
        if record is None:
            record = ScheduleRecord(year=year, month=month)
            session.add(record)
        record.set_schedule(schedule)
        record.created_at = datetime.utcnow()
        session.commit()
        return record

    @staticmethod
    def load(session: Session, year: int, month: int) -> Optional[MonthlySchedule]:
        """Load the schedule for (year, month), or None if never saved."""
        record = ScheduleRepository.get_record(session, year, month)
        return record.to_schedule() if record is not None else None

    @staticmethod
    def list_months(session: Session) -> List[Tuple[int, int]]:
        """All stored (year, month) pairs in chronological order."""
        rows = (
            session.query(ScheduleRecord.year, ScheduleRecord.month)
            .order_by(ScheduleRecord.year, ScheduleRecord.month)
            .all()
        )
        return [(int(y), int(m)) for y, m in rows]

    @staticmethod
    def delete_all(session: Session) -> int:
        """Delete all schedules. Returns number of deleted rows."""
        count = session.query(ScheduleRecord).delete(synchronize_session=False)
        session.commit()
        return count

    @staticmethod
    def get_past_schedules(
        session: Session,
        year: int,
        month: int,
        employees: Iterable[Employee],
        months_back: int = 3,
    ) -> PastSchedules:
        """
        Build per-employee history of weekdays worked in previous months.

        Args:
            session: Database session
            year: Year of the month being generated
            month: Month being generated (1-12)
            employees: Employees to collect history for
            months_back: How many previous months to look at

        Returns:
            Mapping employee id -> list of weekday sets, oldest month first.
            Months with no stored schedule are skipped; every employee gets
            an entry, possibly empty.
        """
        stored = []
        for past_year, past_month in previous_months(year, month, months_back):
            schedule = ScheduleRepository.load(session, past_year, past_month)
            if schedule is not None:
                stored.append(schedule)

        past: PastSchedules = {}
        for employee in employees:
            past[employee.id] = [employee_days(schedule, employee.id) for schedule in stored]
        return past
