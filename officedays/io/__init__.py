"""I/O utilities for JSON import and CSV/XLSX export."""

from .export import export_schedule, generate_csv_data, generate_xlsx_data
from .import_json import import_employees_json, parse_employees_json

__all__ = [
    "import_employees_json",
    "parse_employees_json",
    "export_schedule",
    "generate_csv_data",
    "generate_xlsx_data",
]
