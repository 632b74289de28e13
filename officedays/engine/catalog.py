"""Static catalog of weekday combinations allowed for each quota."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping, Tuple

from officedays.domain.types import DayCombination, Employee, Weekday

MON, TUE, WED, THU, FRI = (
    Weekday.MONDAY,
    Weekday.TUESDAY,
    Weekday.WEDNESDAY,
    Weekday.THURSDAY,
    Weekday.FRIDAY,
)


class UnassignableEmployeeError(ValueError):
    """Raised when an employee's quota has no entry in the catalog."""

    def __init__(self, employee: Employee):
        self.employee = employee
        super().__init__(
            f"Employee {employee.name} (id={employee.id}) requires {employee.required_days} "
            f"days; supported quotas are {sorted(SUPPORTED_QUOTAS)}"
        )


def _combos(*day_sets: Tuple[Weekday, ...]) -> Tuple[DayCombination, ...]:
    return tuple(DayCombination(days) for days in day_sets)


# Pairs never use adjacent days
DAY_COMBINATIONS: Mapping[int, Tuple[DayCombination, ...]] = MappingProxyType({
    1: _combos((MON,), (TUE,), (WED,), (THU,), (FRI,)),
    2: _combos((MON, WED), (MON, THU), (MON, FRI), (TUE, THU), (TUE, FRI), (WED, FRI)),
    3: _combos((MON, WED, FRI)),
    5: _combos((MON, TUE, WED, THU, FRI)),
})

SUPPORTED_QUOTAS = frozenset(DAY_COMBINATIONS)


def get_combinations(required_days: int) -> Tuple[DayCombination, ...]:
    """Legal combinations for a quota; empty when the quota is unsupported."""
    return DAY_COMBINATIONS.get(required_days, ())


def is_supported_quota(required_days: int) -> bool:
    return required_days in SUPPORTED_QUOTAS


def find_unassignable(employees: Iterable[Employee]) -> List[Employee]:
    """Flexible employees whose quota the catalog cannot satisfy."""
    return [e for e in employees if not e.is_fixed and not is_supported_quota(e.required_days)]
