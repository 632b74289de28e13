"""Base scheduler interface that all schedulers must implement."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from officedays.domain.types import Employee, MonthlySchedule, PastSchedules


class BaseScheduler(ABC):
    """
    Abstract base class for monthly office-day schedulers.

    A scheduler turns a roster plus per-employee history into one month's
    weekday assignments. It must not read or write storage itself.
    """

    name: str | None = None  # Override in subclasses

    @abstractmethod
    def make_schedule(
        self,
        employees: Iterable[Employee],
        past_schedules: Optional[PastSchedules] = None,
    ) -> MonthlySchedule:
        """
        Generate assignments for one month.

        Args:
            employees: Roster to schedule
            past_schedules: History per employee id, oldest month first

        Returns:
            Mapping weekday -> employees assigned that day
        """
        pass

    def get_name(self) -> str:
        """Get the scheduler's display name."""
        return self.name or type(self).__name__
