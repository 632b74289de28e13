"""Value types shared by the scheduling engine and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, FrozenSet, Iterable, List, Tuple


class Weekday(IntEnum):
    """Office weekdays, ordered as in the calendar."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label

    @classmethod
    def parse(cls, value: "str | Weekday") -> "Weekday":
        """Parse a weekday from its display name (case-insensitive)."""
        if isinstance(value, Weekday):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid weekday value: {value}") from None


WEEKDAYS: Tuple[Weekday, ...] = tuple(Weekday)

SEXES = ("Male", "Female")

ROLES = (
    "Human Resource Manager",
    "AI-LLM Engineer",
    "Social Media Marketing",
    "IT Support",
    "Machine Learning Engineer",
    "Data Scientist",
    "Data Analyst",
    "Full-stack Engineer",
    "Backend Engineer",
    "Frontend Engineer",
    "Blockchain Engineer",
    "QA Engineer",
    "Project Manager",
    "UI/UX Designer",
    "Mobile Engineer",
    "DevOps Engineer",
    "Operations Manager",
)


@dataclass(frozen=True)
class Employee:
    """A staff member as seen by the scheduler (never mutated by it)."""
    id: int
    name: str
    sex: str
    role: str
    required_days: int
    fixed_days: Tuple[Weekday, ...] = field(default_factory=tuple)
    is_nsp: bool = False  # carried through, not used for assignment

    def __post_init__(self) -> None:
        # Normalize to a sorted, de-duplicated tuple so equal employees hash equally
        days = tuple(sorted({Weekday.parse(d) for d in self.fixed_days}))
        object.__setattr__(self, "fixed_days", days)

    @property
    def is_fixed(self) -> bool:
        return bool(self.fixed_days)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "sex": self.sex,
            "role": self.role,
            "required_days": self.required_days,
            "fixed_days": [d.label for d in self.fixed_days],
            "is_nsp": self.is_nsp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        return cls(
            id=int(data.get("id", 0)),
            name=data["name"],
            sex=data["sex"],
            role=data["role"],
            required_days=int(data["required_days"]),
            fixed_days=tuple(Weekday.parse(d) for d in data.get("fixed_days", [])),
            is_nsp=bool(data.get("is_nsp", False)),
        )


@dataclass(frozen=True)
class DayCombination:
    """An ordered set of distinct weekdays an employee can be given."""
    days: Tuple[Weekday, ...]

    def __iter__(self):
        return iter(self.days)

    def __len__(self) -> int:
        return len(self.days)

    def __contains__(self, day: object) -> bool:
        return day in self.days

    def as_set(self) -> FrozenSet[Weekday]:
        return frozenset(self.days)


# Type aliases for scheduler data
MonthlySchedule = Dict[Weekday, List[Employee]]
DayLoad = Dict[Weekday, int]
PastSchedules = Dict[int, List[FrozenSet[Weekday]]]


def empty_schedule() -> MonthlySchedule:
    """Schedule with an empty roster for every weekday."""
    return {day: [] for day in WEEKDAYS}


def empty_day_load() -> DayLoad:
    return {day: 0 for day in WEEKDAYS}


def copy_schedule(schedule: MonthlySchedule) -> MonthlySchedule:
    """Shallow copy with fresh per-day lists (employees are immutable)."""
    copied = empty_schedule()
    for day, employees in schedule.items():
        copied[Weekday.parse(day)] = list(employees)
    return copied


def schedule_to_dict(schedule: MonthlySchedule) -> Dict[str, List[dict]]:
    """Serialize a schedule to a JSON-compatible dict keyed by weekday name."""
    return {day.label: [e.to_dict() for e in schedule.get(day, [])] for day in WEEKDAYS}


def schedule_from_dict(data: Dict[str, Iterable[dict]]) -> MonthlySchedule:
    schedule = empty_schedule()
    for day_name, employees in data.items():
        schedule[Weekday.parse(day_name)] = [Employee.from_dict(e) for e in employees]
    return schedule


def employee_days(schedule: MonthlySchedule, employee_id: int) -> FrozenSet[Weekday]:
    """Weekdays on which the given employee appears in a schedule."""
    return frozenset(
        day for day, employees in schedule.items()
        if any(e.id == employee_id for e in employees)
    )
