"""Tests for employee and schedule repositories."""

from officedays.domain.models import ScheduleRecord
from officedays.domain.repositories import EmployeeRepository, ScheduleRepository, previous_months
from officedays.domain.types import Weekday, empty_schedule


def test_create_assigns_ids(db_session, make_employee):
    first = EmployeeRepository.create(db_session, make_employee(0, fixed_days=["Friday", "Monday"]))
    second = EmployeeRepository.create(db_session, make_employee(0))

    assert first.id != second.id
    loaded = EmployeeRepository.get_by_id(db_session, first.id)
    assert loaded.fixed_days == (Weekday.MONDAY, Weekday.FRIDAY)
    assert loaded.name == first.name


def test_update_and_delete(db_session, make_employee):
    emp = EmployeeRepository.create(db_session, make_employee(0, required_days=1))
    updated = EmployeeRepository.update(db_session, make_employee(emp.id, required_days=3, name="Renamed"))

    assert updated.required_days == 3
    assert EmployeeRepository.get_by_id(db_session, emp.id).name == "Renamed"

    assert EmployeeRepository.delete(db_session, emp.id) is True
    assert EmployeeRepository.get_by_id(db_session, emp.id) is None
    assert EmployeeRepository.delete(db_session, emp.id) is False


def test_delete_all_employees(db_session, make_employee):
    EmployeeRepository.bulk_create(db_session, [make_employee(0), make_employee(0)])
    assert EmployeeRepository.delete_all(db_session) == 2
    assert EmployeeRepository.get_all(db_session) == []


def test_save_and_load_schedule(db_session, make_employee):
    emp = make_employee(3, fixed_days=["Tuesday"])
    schedule = empty_schedule()
    schedule[Weekday.TUESDAY] = [emp]

    ScheduleRepository.save(db_session, 2030, 6, schedule)
    loaded = ScheduleRepository.load(db_session, 2030, 6)

    assert loaded[Weekday.TUESDAY] == [emp]
    assert loaded[Weekday.MONDAY] == []
    assert ScheduleRepository.load(db_session, 2030, 7) is None


def test_save_replaces_existing_month(db_session, make_employee):
    schedule = empty_schedule()
    schedule[Weekday.MONDAY] = [make_employee(1)]
    ScheduleRepository.save(db_session, 2030, 6, schedule)

    replacement = empty_schedule()
    replacement[Weekday.FRIDAY] = [make_employee(2)]
    ScheduleRepository.save(db_session, 2030, 6, replacement)

    assert db_session.query(ScheduleRecord).count() == 1
    loaded = ScheduleRepository.load(db_session, 2030, 6)
    assert loaded[Weekday.MONDAY] == []
    assert [e.id for e in loaded[Weekday.FRIDAY]] == [2]
    assert ScheduleRepository.list_months(db_session) == [(2030, 6)]


def test_previous_months_wraps_year():
    assert previous_months(2025, 1, 3) == [(2024, 10), (2024, 11), (2024, 12)]
    assert previous_months(2025, 5, 2) == [(2025, 3), (2025, 4)]
    assert previous_months(2025, 5, 0) == []


def test_past_schedules_oldest_first(db_session, make_employee):
    a, b = make_employee(1), make_employee(2)

    november = empty_schedule()
    november[Weekday.MONDAY] = [a]
    december = empty_schedule()
    december[Weekday.FRIDAY] = [a, b]
    ScheduleRepository.save(db_session, 2029, 11, november)
    ScheduleRepository.save(db_session, 2029, 12, december)

    past = ScheduleRepository.get_past_schedules(db_session, 2030, 1, [a, b, make_employee(3)])

    # October 2029 was never stored and is skipped
    assert past[1] == [frozenset({Weekday.MONDAY}), frozenset({Weekday.FRIDAY})]
    assert past[2] == [frozenset(), frozenset({Weekday.FRIDAY})]
    assert past[3] == [frozenset(), frozenset()]


def test_past_schedules_without_history(db_session, make_employee):
    past = ScheduleRepository.get_past_schedules(db_session, 2030, 1, [make_employee(1)])
    assert past == {1: []}
