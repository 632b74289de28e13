"""Scheduling engine: combination catalog, selection and orchestration."""

from .base import BaseScheduler
from .catalog import (
    DAY_COMBINATIONS,
    SUPPORTED_QUOTAS,
    UnassignableEmployeeError,
    find_unassignable,
    get_combinations,
)
from .orchestrator import BalancedScheduler, build_month_schedule, generate_schedule
from .selector import find_best_day_combination

__all__ = [
    "BaseScheduler",
    "BalancedScheduler",
    "DAY_COMBINATIONS",
    "SUPPORTED_QUOTAS",
    "UnassignableEmployeeError",
    "find_unassignable",
    "get_combinations",
    "find_best_day_combination",
    "generate_schedule",
    "build_month_schedule",
]
