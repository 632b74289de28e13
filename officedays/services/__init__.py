"""Services for scheduling logic."""

from .constraints import assign_to_day, validate_schedule
from .editing import add_employee_to_day, move_employee, remove_employee_from_day
from .scoring import ScoringWeights, calculate_combination_score, calculate_day_frequencies
from .statistics import ScheduleStatistics, calculate_statistics, summarize_schedule

__all__ = [
    "assign_to_day",
    "validate_schedule",
    "add_employee_to_day",
    "remove_employee_from_day",
    "move_employee",
    "ScoringWeights",
    "calculate_combination_score",
    "calculate_day_frequencies",
    "ScheduleStatistics",
    "calculate_statistics",
    "summarize_schedule",
]
