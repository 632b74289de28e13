"""JSON import of employees into the database."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from officedays.domain.repositories import EmployeeRepository
from officedays.domain.types import ROLES, SEXES, Employee, Weekday
from officedays.engine.catalog import SUPPORTED_QUOTAS

REQUIRED_FIELDS = ("name", "sex", "role", "required_days", "fixed_days", "is_nsp")


def _parse_sex(value: Any) -> str:
    for sex in SEXES:
        if str(value).strip().lower() == sex.lower():
            return sex
    raise ValueError(f"Invalid sex value: {value}")


def _parse_role(value: Any) -> str:
    if value not in ROLES:
        raise ValueError(f"Invalid role value: {value}")
    return value


def _parse_required_days(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Invalid required_days value: {value}")
    if value not in SUPPORTED_QUOTAS:
        raise ValueError(
            f"Unsupported required_days value: {value} (expected one of {sorted(SUPPORTED_QUOTAS)})"
        )
    return value


def convert_to_employee(row: Dict[str, Any]) -> Employee:
    """Validate one JSON object and build an (unsaved, id 0) employee."""
    if not isinstance(row, dict):
        raise ValueError("Expected a JSON object")
    missing = [f for f in REQUIRED_FIELDS if f not in row]
    if missing:
        raise ValueError(f"Missing fields: {', '.join(missing)}")
    if not isinstance(row["fixed_days"], list):
        raise ValueError("fixed_days must be a list")

    return Employee(
        id=0,
        name=str(row["name"]),
        sex=_parse_sex(row["sex"]),
        role=_parse_role(row["role"]),
        required_days=_parse_required_days(row["required_days"]),
        fixed_days=tuple(Weekday.parse(d) for d in row["fixed_days"]),
        is_nsp=bool(row["is_nsp"]),
    )


def parse_employees_json(json_data: str) -> List[Employee]:
    """
    Parse a JSON array of employees.

    Raises:
        ValueError: If the JSON is malformed or any row is invalid; the
            message names the offending row index
    """
    try:
        rows = json.loads(json_data)
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed employee JSON: {e}") from e
    if not isinstance(rows, list):
        raise ValueError("Employee JSON must be an array")

    employees = []
    for i, row in enumerate(rows):
        try:
            employees.append(convert_to_employee(row))
        except ValueError as e:
            raise ValueError(f"Error converting employee at index {i}: {e}") from e
    return employees


def import_employees_json(session: Session, json_path: str | Path) -> int:
    """
    Import employees from a JSON file into the database.

    Args:
        session: Database session
        json_path: Path to employees JSON

    Returns:
        Number of employees imported
    """
    employees = parse_employees_json(Path(json_path).read_text(encoding="utf-8"))
    created = EmployeeRepository.bulk_create(session, employees)
    for employee in created:
        print(f"[INFO] Imported employee: {employee.name} with ID: {employee.id}")

    print(f"[INFO] Imported {len(created)} employees from {json_path}")
    return len(created)
