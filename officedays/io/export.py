"""CSV and XLSX export of a monthly schedule."""

from __future__ import annotations

import calendar
from io import BytesIO
from pathlib import Path
from typing import List, Tuple

import pandas as pd
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from officedays.domain.types import WEEKDAYS, Employee, MonthlySchedule

HEADER_FILL = PatternFill(start_color="4F81BD", end_color="4F81BD", fill_type="solid")
THIN = Side(style="thin")
BORDER = Border(left=THIN, right=THIN, top=THIN, bottom=THIN)
CENTER = Alignment(horizontal="center")
NAME_COLUMN_WIDTH = 17
DAY_COLUMN_WIDTH = 12


def get_month_name(month: int) -> str:
    if 1 <= month <= 12:
        return calendar.month_name[month]
    return f"Month_{month}"


def schedule_filename(year: int, month: int, ext: str) -> str:
    return f"office_schedule_{get_month_name(month)}_{year}.{ext}"


def _unique_employees(schedule: MonthlySchedule) -> List[Employee]:
    seen = {}
    for day in WEEKDAYS:
        for employee in schedule.get(day, []):
            seen.setdefault(employee.id, employee)
    return sorted(seen.values(), key=lambda e: e.name)


def schedule_grid(schedule: MonthlySchedule) -> pd.DataFrame:
    """
    Grid with a count row followed by one row per employee.

    Columns are Name plus the five weekdays; the first row holds the
    headcount per day with an empty Name cell, employee rows are sorted by
    name and hold "X" where assigned.
    """
    columns = ["Name"] + [d.label for d in WEEKDAYS]
    rows = [[""] + [str(len(schedule.get(d, []))) for d in WEEKDAYS]]
    for employee in _unique_employees(schedule):
        row = [employee.name]
        for day in WEEKDAYS:
            assigned = any(e.id == employee.id for e in schedule.get(day, []))
            row.append("X" if assigned else "")
        rows.append(row)
    return pd.DataFrame(rows, columns=columns)


def generate_csv_data(schedule: MonthlySchedule, year: int, month: int) -> Tuple[str, str]:
    """Returns (suggested filename, CSV text)."""
    grid = schedule_grid(schedule)
    csv_data = grid.to_csv(index=False, lineterminator="\n")
    return schedule_filename(year, month, "csv"), csv_data


def _style_sheet(worksheet, n_rows: int) -> None:
    header_font = Font(bold=True, color="FFFFFF", size=14)
    count_font = Font(bold=True, italic=True, color="FFFFFF", size=13)
    name_font = Font(bold=True, size=11)
    x_font = Font(bold=True, color="7A52A3", size=12)

    worksheet.column_dimensions["A"].width = NAME_COLUMN_WIDTH
    for col in "BCDEF":
        worksheet.column_dimensions[col].width = DAY_COLUMN_WIDTH

    # Row 1 header, row 2 counts, then one row per employee
    for row_idx, row in enumerate(worksheet.iter_rows(min_row=1, max_row=n_rows + 1), start=1):
        for cell in row:
            cell.border = BORDER
            cell.alignment = CENTER
            if row_idx == 1:
                cell.font = header_font
                cell.fill = HEADER_FILL
            elif row_idx == 2:
                cell.font = count_font
                cell.fill = HEADER_FILL
            elif cell.column == 1:
                cell.font = name_font
            elif cell.value == "X":
                cell.font = x_font


def generate_xlsx_data(schedule: MonthlySchedule, year: int, month: int) -> Tuple[str, bytes]:
    """Returns (suggested filename, XLSX workbook bytes)."""
    grid = schedule_grid(schedule)
    buffer = BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        grid.to_excel(writer, sheet_name="Schedule", index=False)
        _style_sheet(writer.sheets["Schedule"], len(grid))
    return schedule_filename(year, month, "xlsx"), buffer.getvalue()


def export_schedule(
    schedule: MonthlySchedule,
    year: int,
    month: int,
    fmt: str = "csv",
    out: str | Path | None = None,
) -> Path:
    """
    Write a schedule to disk as CSV or XLSX.

    Args:
        schedule: Schedule to export
        year: Schedule year
        month: Schedule month
        fmt: "csv" or "xlsx"
        out: Output file, or a directory for the suggested filename

    Returns:
        Path written
    """
    fmt = fmt.lower()
    if fmt == "csv":
        filename, data = generate_csv_data(schedule, year, month)
        payload = data.encode("utf-8")
    elif fmt == "xlsx":
        filename, payload = generate_xlsx_data(schedule, year, month)
    else:
        raise ValueError(f"Unsupported export format: {fmt}")

    path = Path(out) if out is not None else Path(filename)
    if path.is_dir():
        path = path / filename
    path.write_bytes(payload)
    print(f"[INFO] Exported schedule to {path}")
    return path
