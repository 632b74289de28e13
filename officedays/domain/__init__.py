"""Domain types, models and data access layer."""

from .models import Base, EmployeeRecord, ScheduleRecord
from .repositories import EmployeeRepository, ScheduleRepository
from .types import (
    ROLES,
    SEXES,
    WEEKDAYS,
    DayCombination,
    DayLoad,
    Employee,
    MonthlySchedule,
    PastSchedules,
    Weekday,
)

__all__ = [
    "Base",
    "EmployeeRecord",
    "ScheduleRecord",
    "EmployeeRepository",
    "ScheduleRepository",
    "ROLES",
    "SEXES",
    "WEEKDAYS",
    "DayCombination",
    "DayLoad",
    "Employee",
    "MonthlySchedule",
    "PastSchedules",
    "Weekday",
]
