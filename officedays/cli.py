"""Command-line interface for the office-days scheduler."""

from __future__ import annotations

import argparse
import random
from dataclasses import replace
from typing import Any, Dict

from officedays.config import SchedulerConfig, load_config
from officedays.domain.db import get_session, init_database, reset_database
from officedays.domain.repositories import EmployeeRepository, ScheduleRepository, previous_months
from officedays.domain.types import ROLES, Weekday
from officedays.engine.orchestrator import build_month_schedule
from officedays.io.export import export_schedule, get_month_name
from officedays.io.import_json import convert_to_employee, import_employees_json
from officedays.services.constraints import validate_schedule
from officedays.services.editing import add_employee_to_day, move_employee, remove_employee_from_day
from officedays.services.statistics import summarize_schedule


def _config(args: argparse.Namespace) -> SchedulerConfig:
    cfg = load_config(args.config)
    if args.db:
        cfg.db_url = args.db
    return cfg


def _cmd_init_db(args: argparse.Namespace) -> None:
    """Initialize the database."""
    cfg = _config(args)
    init_database(cfg.db_url)
    print("[OK] Database initialized")


def _cmd_import_json(args: argparse.Namespace) -> None:
    """Import employees from a JSON file."""
    cfg = _config(args)
    session = get_session(cfg.db_url)

    try:
        count = import_employees_json(session, args.path)
        session.close()
        print(f"[OK] Imported {count} employees")

    except Exception as e:
        session.rollback()
        session.close()
        print(f"[ERROR] Import failed: {e}")
        raise


def _cmd_employees(args: argparse.Namespace) -> None:
    """List stored employees, optionally filtered by name."""
    cfg = _config(args)
    session = get_session(cfg.db_url)
    employees = EmployeeRepository.get_all(session)
    session.close()

    if args.search:
        needle = args.search.strip().lower()
        employees = [e for e in employees if needle in e.name.lower()]

    for e in employees:
        fixed = ", ".join(d.label for d in e.fixed_days) or "-"
        print(f"{e.id:>4}  {e.name:<25} {e.role:<28} days={e.required_days}  fixed={fixed}")
    print(f"[INFO] {len(employees)} employees")


def _employee_fields(args: argparse.Namespace) -> Dict[str, Any]:
    """Employee fields given on the command line (None means not given)."""
    given = {
        "name": args.name,
        "sex": args.sex,
        "role": args.role,
        "required_days": args.required_days,
        "fixed_days": args.fixed_days,
        "is_nsp": args.nsp,
    }
    return {k: v for k, v in given.items() if v is not None}


def _cmd_add_employee(args: argparse.Namespace) -> None:
    """Add a single employee."""
    cfg = _config(args)
    session = get_session(cfg.db_url)

    try:
        row = {"fixed_days": [], "is_nsp": False}
        row.update(_employee_fields(args))
        employee = EmployeeRepository.create(session, convert_to_employee(row))
        session.close()
        print(f"[OK] Added employee: {employee.name} with ID: {employee.id}")

    except Exception as e:
        session.rollback()
        session.close()
        print(f"[ERROR] Adding employee failed: {e}")
        raise


def _cmd_edit_employee(args: argparse.Namespace) -> None:
    """Change the given fields of a stored employee."""
    cfg = _config(args)
    session = get_session(cfg.db_url)

    try:
        current = EmployeeRepository.get_by_id(session, args.id)
        if current is None:
            raise ValueError(f"Unknown employee: {args.id}")

        row = current.to_dict()
        row.update(_employee_fields(args))
        employee = replace(convert_to_employee(row), id=current.id)
        EmployeeRepository.update(session, employee)
        session.close()
        print(f"[OK] Updated employee: {employee.name} (id={employee.id})")

    except Exception as e:
        session.rollback()
        session.close()
        print(f"[ERROR] Editing employee failed: {e}")
        raise


def _cmd_delete_employee(args: argparse.Namespace) -> None:
    """Delete a stored employee."""
    cfg = _config(args)
    session = get_session(cfg.db_url)

    try:
        if not EmployeeRepository.delete(session, args.id):
            raise ValueError(f"Unknown employee: {args.id}")
        session.close()
        print(f"[OK] Deleted employee {args.id}")

    except Exception as e:
        session.rollback()
        session.close()
        print(f"[ERROR] Deleting employee failed: {e}")
        raise


def _cmd_history(args: argparse.Namespace) -> None:
    """Show the weekdays an employee worked in previous stored months."""
    cfg = _config(args)
    months_back = args.months if args.months is not None else cfg.history_months
    session = get_session(cfg.db_url)

    try:
        employee = EmployeeRepository.get_by_id(session, args.employee)
        if employee is None:
            raise ValueError(f"Unknown employee: {args.employee}")

        # Same months, same order as the history builder uses
        stored = [
            (year, month)
            for year, month in previous_months(args.year, args.month, months_back)
            if ScheduleRepository.get_record(session, year, month) is not None
        ]
        past = ScheduleRepository.get_past_schedules(
            session, args.year, args.month, [employee], months_back=months_back
        )
        session.close()

    except Exception as e:
        session.rollback()
        session.close()
        print(f"[ERROR] History lookup failed: {e}")
        raise

    print(f"[INFO] History for {employee.name} (id={employee.id}) before {args.month}-{args.year}")
    if not stored:
        print(f"[INFO] No stored schedules in the {months_back} months before {args.month}-{args.year}")
        return
    for (year, month), days in zip(stored, past[employee.id]):
        worked = ", ".join(d.label for d in sorted(days)) or "-"
        print(f"  {get_month_name(month)} {year}: {worked}")


def _cmd_months(args: argparse.Namespace) -> None:
    """List months with a stored schedule."""
    cfg = _config(args)
    session = get_session(cfg.db_url)
    months = ScheduleRepository.list_months(session)
    session.close()

    for year, month in months:
        print(f"{year}-{month:02d}  {get_month_name(month)} {year}")
    print(f"[INFO] {len(months)} stored schedules")


def _cmd_generate(args: argparse.Namespace) -> None:
    """Generate the schedule for a month."""
    cfg = _config(args)
    if args.strict:
        cfg.strict_quotas = True
    if args.allow_past:
        cfg.allow_past_months = True
    session = get_session(cfg.db_url)

    try:
        seed = args.seed if args.seed is not None else cfg.seed
        rng = random.Random(seed)
        schedule = build_month_schedule(session, args.year, args.month, cfg, rng=rng)
        validate_schedule(schedule, EmployeeRepository.get_all(session))
        if args.save:
            ScheduleRepository.save(session, args.year, args.month, schedule)
            print(f"[INFO] Saved schedule for {args.month}-{args.year}")
        session.close()
        print(summarize_schedule(schedule))

    except Exception as e:
        session.rollback()
        session.close()
        print(f"[ERROR] Generation failed: {e}")
        raise


def _cmd_show(args: argparse.Namespace) -> None:
    """Print a stored schedule."""
    cfg = _config(args)
    session = get_session(cfg.db_url)
    schedule = ScheduleRepository.load(session, args.year, args.month)
    session.close()

    if schedule is None:
        raise SystemExit(f"No schedule saved for {args.month}-{args.year}")
    print(summarize_schedule(schedule))


def _cmd_edit(args: argparse.Namespace) -> None:
    """Add, remove or move an employee on a stored schedule."""
    cfg = _config(args)
    session = get_session(cfg.db_url)

    try:
        schedule = ScheduleRepository.load(session, args.year, args.month)
        if schedule is None:
            raise ValueError(f"No schedule saved for {args.month}-{args.year}")

        if args.command == "add-day":
            employee = EmployeeRepository.get_by_id(session, args.employee)
            if employee is None:
                raise ValueError(f"Unknown employee: {args.employee}")
            schedule = add_employee_to_day(schedule, employee, Weekday.parse(args.day))
        elif args.command == "remove-day":
            schedule = remove_employee_from_day(schedule, args.employee, Weekday.parse(args.day))
        else:
            schedule = move_employee(
                schedule, args.employee, Weekday.parse(args.from_day), Weekday.parse(args.to_day)
            )

        ScheduleRepository.save(session, args.year, args.month, schedule)
        session.close()
        print(f"[OK] Schedule for {args.month}-{args.year} updated")

    except Exception as e:
        session.rollback()
        session.close()
        print(f"[ERROR] Edit failed: {e}")
        raise


def _cmd_export(args: argparse.Namespace) -> None:
    """Export a stored schedule to CSV or XLSX."""
    cfg = _config(args)
    session = get_session(cfg.db_url)
    schedule = ScheduleRepository.load(session, args.year, args.month)
    session.close()

    if schedule is None:
        raise SystemExit(f"No schedule saved for {args.month}-{args.year}")
    path = export_schedule(schedule, args.year, args.month, args.format, args.out or cfg.export_dir)
    print(f"[OK] Exported {path}")


def _cmd_reset(args: argparse.Namespace) -> None:
    """Delete stored employees and/or schedules."""
    cfg = _config(args)
    if not args.employees and not args.schedules:
        reset_database(cfg.db_url)
        return

    session = get_session(cfg.db_url)
    if args.employees:
        count = EmployeeRepository.delete_all(session)
        print(f"[INFO] Deleted {count} employees")
    if args.schedules:
        count = ScheduleRepository.delete_all(session)
        print(f"[INFO] Deleted {count} schedules")
    session.close()


def _add_month_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--year", type=int, required=True)
    p.add_argument("--month", type=int, required=True, help="Month number (1-12)")


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="officedays",
        description="Balanced monthly office-day scheduler",
    )

    # Global options
    parser.add_argument("--db", help="Database URL (default: SQLite in ~/.officedays)")
    parser.add_argument("--config", help="Path to config YAML or JSON")

    sub = parser.add_subparsers(dest="command", required=True)

    init = sub.add_parser("init-db", help="Initialize database")
    init.set_defaults(func=_cmd_init_db)

    imp = sub.add_parser("import-json", help="Import employees from JSON")
    imp.add_argument("path", help="Path to employees JSON")
    imp.set_defaults(func=_cmd_import_json)

    emp = sub.add_parser("employees", help="List employees")
    emp.add_argument("--search", help="Only employees whose name contains this text")
    emp.set_defaults(func=_cmd_employees)

    add_emp = sub.add_parser("add-employee", help="Add a single employee")
    add_emp.add_argument("--name", required=True)
    add_emp.add_argument("--sex", required=True, help="Male or Female")
    add_emp.add_argument("--role", required=True, help=f"One of: {', '.join(ROLES)}")
    add_emp.add_argument("--required-days", type=int, required=True, help="Office days per week (1, 2, 3 or 5)")
    add_emp.add_argument("--fixed-days", nargs="*", help="Weekdays always worked")
    add_emp.add_argument("--nsp", action="store_true", default=None, help="Mark as NSP")
    add_emp.set_defaults(func=_cmd_add_employee)

    edit_emp = sub.add_parser("edit-employee", help="Change fields of an employee")
    edit_emp.add_argument("--id", type=int, required=True, help="Employee ID")
    edit_emp.add_argument("--name")
    edit_emp.add_argument("--sex", help="Male or Female")
    edit_emp.add_argument("--role", help=f"One of: {', '.join(ROLES)}")
    edit_emp.add_argument("--required-days", type=int, help="Office days per week (1, 2, 3 or 5)")
    edit_emp.add_argument("--fixed-days", nargs="*", help="Weekdays always worked (none to clear)")
    edit_emp.add_argument("--nsp", action=argparse.BooleanOptionalAction, default=None, help="NSP flag")
    edit_emp.set_defaults(func=_cmd_edit_employee)

    del_emp = sub.add_parser("delete-employee", help="Delete an employee")
    del_emp.add_argument("--id", type=int, required=True, help="Employee ID")
    del_emp.set_defaults(func=_cmd_delete_employee)

    hist = sub.add_parser("history", help="Weekdays an employee worked in previous months")
    _add_month_args(hist)
    hist.add_argument("--employee", type=int, required=True, help="Employee ID")
    hist.add_argument("--months", type=int, help="Months to look back (default: history_months)")
    hist.set_defaults(func=_cmd_history)

    months = sub.add_parser("months", help="List months with a saved schedule")
    months.set_defaults(func=_cmd_months)

    gen = sub.add_parser("generate", help="Generate schedule for a month")
    _add_month_args(gen)
    gen.add_argument("--seed", type=int, help="Random seed for reproducible output")
    gen.add_argument("--save", action="store_true", help="Save (replace) the month's schedule")
    gen.add_argument("--strict", action="store_true", help="Fail on unsupported required_days")
    gen.add_argument("--allow-past", action="store_true", help="Allow months before the current one")
    gen.set_defaults(func=_cmd_generate)

    show = sub.add_parser("show", help="Show a saved schedule")
    _add_month_args(show)
    show.set_defaults(func=_cmd_show)

    for name, help_text in (("add-day", "Add an employee to a day"), ("remove-day", "Remove an employee from a day")):
        edit = sub.add_parser(name, help=help_text)
        _add_month_args(edit)
        edit.add_argument("--employee", type=int, required=True, help="Employee ID")
        edit.add_argument("--day", required=True, help="Weekday name")
        edit.set_defaults(func=_cmd_edit)

    move = sub.add_parser("move-day", help="Move an employee between days")
    _add_month_args(move)
    move.add_argument("--employee", type=int, required=True, help="Employee ID")
    move.add_argument("--from", dest="from_day", required=True, help="Weekday to move from")
    move.add_argument("--to", dest="to_day", required=True, help="Weekday to move to")
    move.set_defaults(func=_cmd_edit)

    exp = sub.add_parser("export", help="Export a saved schedule")
    _add_month_args(exp)
    exp.add_argument("--format", choices=["csv", "xlsx"], default="csv")
    exp.add_argument("--out", help="Output file or directory")
    exp.set_defaults(func=_cmd_export)

    reset = sub.add_parser("reset", help="Delete stored data (everything if no flag given)")
    reset.add_argument("--employees", action="store_true", help="Delete all employees")
    reset.add_argument("--schedules", action="store_true", help="Delete all schedules")
    reset.set_defaults(func=_cmd_reset)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
