"""SQLAlchemy models for the office-days scheduler."""

from __future__ import annotations

import json
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase

from .types import Employee, MonthlySchedule, Weekday, schedule_from_dict, schedule_to_dict


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class EmployeeRecord(Base):
    """Stored employee row; fixed days are kept as a JSON list of weekday names."""

    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    sex = Column(String(10), nullable=False)
    role = Column(String(100), nullable=False)
    required_days = Column(Integer, nullable=False)
    fixed_days = Column(Text, nullable=True, default="[]")
    is_nsp = Column(Boolean, nullable=False, default=False)

    def to_employee(self) -> Employee:
        """Convert to the immutable value used by the scheduler."""
        days = json.loads(self.fixed_days) if self.fixed_days else []
        return Employee(
            id=self.id,
            name=self.name,
            sex=self.sex,
            role=self.role,
            required_days=self.required_days,
            fixed_days=tuple(Weekday.parse(d) for d in days),
            is_nsp=bool(self.is_nsp),
        )

    def apply(self, employee: Employee) -> None:
        """Copy editable fields from a value employee (id is left alone)."""
        self.name = employee.name
        self.sex = employee.sex
        self.role = employee.role
        self.required_days = employee.required_days
        self.fixed_days = json.dumps([d.label for d in employee.fixed_days])
        self.is_nsp = employee.is_nsp

    @classmethod
    def from_employee(cls, employee: Employee) -> "EmployeeRecord":
        """New unsaved row; the database assigns the id."""
        record = cls()
        record.apply(employee)
        return record

    def __repr__(self) -> str:
        return f"<EmployeeRecord(id={self.id}, name='{self.name}', required_days={self.required_days})>"


class ScheduleRecord(Base):
    """One stored monthly schedule, unique per (year, month)."""

    __tablename__ = "schedules"
    __table_args__ = (UniqueConstraint("year", "month", name="uq_schedules_year_month"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    year = Column(Integer, nullable=False)
    month = Column(Integer, nullable=False)
    schedule_data = Column(Text, nullable=False)  # JSON serialized MonthlySchedule
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def to_schedule(self) -> MonthlySchedule:
        return schedule_from_dict(json.loads(self.schedule_data))

    def set_schedule(self, schedule: MonthlySchedule) -> None:
        self.schedule_data = json.dumps(schedule_to_dict(schedule))

    def __repr__(self) -> str:
        return f"<ScheduleRecord(id={self.id}, year={self.year}, month={self.month})>"
