"""Schedule statistics: headcount and sex/role distribution per weekday."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

import pandas as pd

from officedays.domain.types import WEEKDAYS, Employee, MonthlySchedule, Weekday


@dataclass
class ScheduleStatistics:
    day_counts: Dict[Weekday, int] = field(default_factory=dict)
    sex_distribution: Dict[Weekday, Dict[str, int]] = field(default_factory=dict)
    role_distribution: Dict[Weekday, Dict[str, int]] = field(default_factory=dict)
    total_employees: int = 0
    average_daily_attendance: float = 0.0


def schedule_to_frame(schedule: MonthlySchedule) -> pd.DataFrame:
    """One row per (weekday, employee) assignment."""
    rows = []
    for day in WEEKDAYS:
        for employee in schedule.get(day, []):
            rows.append({
                "day": day.label,
                "emp_id": employee.id,
                "name": employee.name,
                "sex": employee.sex,
                "role": employee.role,
            })
    return pd.DataFrame(rows, columns=["day", "emp_id", "name", "sex", "role"])


def _distribution(df: pd.DataFrame, column: str) -> Dict[Weekday, Dict[str, int]]:
    result: Dict[Weekday, Dict[str, int]] = {day: {} for day in WEEKDAYS}
    if df.empty:
        return result
    counts = df.groupby(["day", column]).size()
    for (day_name, value), count in counts.items():
        result[Weekday.parse(day_name)][str(value)] = int(count)
    return result


def calculate_statistics(
    schedule: MonthlySchedule,
    employees: Optional[Iterable[Employee]] = None,
) -> ScheduleStatistics:
    """
    Compute per-day statistics for a schedule.

    Args:
        schedule: Schedule to analyze
        employees: Full roster; when omitted the total counts the distinct
            employees appearing in the schedule

    Returns:
        ScheduleStatistics
    """
    df = schedule_to_frame(schedule)
    day_counts = {day: len(schedule.get(day, [])) for day in WEEKDAYS}

    if employees is not None:
        total = len(list(employees))
    else:
        total = int(df["emp_id"].nunique()) if not df.empty else 0

    return ScheduleStatistics(
        day_counts=day_counts,
        sex_distribution=_distribution(df, "sex"),
        role_distribution=_distribution(df, "role"),
        total_employees=total,
        average_daily_attendance=sum(day_counts.values()) / len(WEEKDAYS),
    )


def summarize_schedule(schedule: MonthlySchedule) -> str:
    """Human-readable report of a schedule."""
    df = schedule_to_frame(schedule)
    if df.empty:
        return "No assignments."

    day_order = [d.label for d in WEEKDAYS]
    # Rows keyed by id; names alone are not unique
    labels = df["name"] + " (#" + df["emp_id"].astype(str) + ")"
    grid = (
        df.assign(assigned="X", employee=labels)
        .pivot_table(index="employee", columns="day", values="assigned", aggfunc="first", fill_value="")
        .reindex(columns=day_order, fill_value="")
    )
    counts = df.groupby("day").size().reindex(day_order, fill_value=0)
    by_sex = df.groupby(["day", "sex"]).size().unstack(fill_value=0).reindex(day_order, fill_value=0)
    stats = calculate_statistics(schedule)

    lines = ["Assignments:"]
    lines.append(grid.to_string())
    lines.append("")
    lines.append("Headcount per day:")
    lines.append(counts.to_string())
    lines.append("")
    lines.append("Sex distribution per day:")
    lines.append(by_sex.to_string())
    lines.append("")
    lines.append(f"Employees scheduled: {stats.total_employees}")
    lines.append(f"Average daily attendance: {stats.average_daily_attendance:.1f}")
    return "\n".join(lines)
