from __future__ import annotations

from datetime import datetime

import pytest

from taskboard.core.constants import MONTH_NAMES
from taskboard.core.exceptions import NotFoundError
from taskboard.employees.model import Employee
from taskboard.employees.service import EmployeeService, department_distribution, monthly_distribution
from taskboard.tasks.model import Task

from fakes import InMemoryEmployees, InMemoryTasks


def _service(employees, tasks=()):
    tasks_repo = InMemoryTasks(list(tasks))
    return EmployeeService(InMemoryEmployees(tasks_repo, list(employees)))


def test_get_employee_returns_record():
    svc = _service([Employee(employee_id="1", name="John Doe")])

    assert svc.get_employee("1").to_dict() == {"employee_id": "1", "name": "John Doe", "task_ids": []}


def test_get_missing_employee_raises_not_found():
    svc = _service([])

    with pytest.raises(NotFoundError, match="Employee not found"):
        svc.get_employee("T999")


def test_summary_projection():
    svc = _service(
        [
            Employee(
                employee_id="1",
                name="John Doe",
                department="HR",
                date_of_joining=datetime(2023, 5, 1),
                task_ids=("T001",),
            )
        ]
    )

    assert [e.to_summary_dict() for e in svc.list_employees()] == [
        {"name": "John Doe", "employee_id": "1", "task_ids": ["T001"]}
    ]


def test_department_distribution_counts_each_department():
    svc = _service(
        [
            Employee(employee_id="1", name="a", department="HR"),
            Employee(employee_id="2", name="b", department="HR"),
            Employee(employee_id="3", name="c", department="IT"),
        ]
    )

    assert svc.department_distribution() == {"HR": 2, "IT": 1}


def test_department_distribution_groups_missing_department():
    svc = _service(
        [
            Employee(employee_id="1", name="a", department="IT"),
            Employee(employee_id="2", name="b"),
        ]
    )

    assert svc.department_distribution() == {"IT": 1, "null": 1}


def test_department_distribution_merges_literal_null_key():
    assert department_distribution({None: 2, "null": 1, "HR": 3}) == {"null": 3, "HR": 3}


def test_monthly_distribution_has_all_months_in_order():
    svc = _service(
        [
            Employee(employee_id="1", name="a", date_of_joining=datetime(2024, 8, 3)),
            Employee(employee_id="2", name="b", date_of_joining=datetime(2023, 8, 30)),
            Employee(employee_id="3", name="c", date_of_joining=datetime(2024, 9, 1)),
            Employee(employee_id="4", name="d"),
        ]
    )

    result = svc.monthly_joining_distribution()

    assert list(result) == list(MONTH_NAMES)
    assert result["August"] == 2
    assert result["September"] == 1
    assert sum(result.values()) == 3
    assert all(v == 0 for k, v in result.items() if k not in ("August", "September"))


def test_monthly_distribution_with_no_dates_is_all_zero():
    assert monthly_distribution({}) == {name: 0 for name in MONTH_NAMES}


def test_joined_listing_skips_missing_tasks_and_empty_lists():
    svc = _service(
        [
            Employee(employee_id="E001", name="Alice", task_ids=("T001", "T002")),
            Employee(employee_id="E002", name="Bob", task_ids=()),
            Employee(employee_id="E003", name="Carol", task_ids=("T404",)),
        ],
        tasks=[Task(task_id="T001", task_title="Write report", task_description="Q3")],
    )

    rows = [r.to_dict() for r in svc.list_task_rows()]

    assert rows == [{"employee_id": "E001", "name": "Alice", "task_id": "T001", "task_title": "Write report"}]


def test_joined_listing_one_row_per_task():
    svc = _service(
        [Employee(employee_id="E001", name="Alice", task_ids=("T001", "T002"))],
        tasks=[
            Task(task_id="T001", task_title="one", task_description="x"),
            Task(task_id="T002", task_title="two", task_description="y"),
        ],
    )

    assert [(r.employee_id, r.task_id) for r in svc.list_task_rows()] == [("E001", "T001"), ("E001", "T002")]


def test_joined_listing_lists_repeated_task_id_once():
    svc = _service(
        [Employee(employee_id="E001", name="Alice", task_ids=("T001", "T002", "T001"))],
        tasks=[
            Task(task_id="T001", task_title="one", task_description="x"),
            Task(task_id="T002", task_title="two", task_description="y"),
        ],
    )

    assert [r.task_id for r in svc.list_task_rows()] == ["T001", "T002"]


def test_link_task_appends_in_order():
    tasks_repo = InMemoryTasks()
    employees = InMemoryEmployees(tasks_repo, [Employee(employee_id="E001", name="Alice", task_ids=("T001",))])
    svc = EmployeeService(employees)

    assert svc.link_task("T002", "E001") is True
    assert employees.get_by_employee_id("E001").task_ids == ("T001", "T002")


def test_link_task_is_silent_noop_for_unknown_or_missing_owner():
    svc = _service([Employee(employee_id="E001", name="Alice")])

    assert svc.link_task("T001", "E999") is False
    assert svc.link_task("T001", None) is False
    assert svc.link_task("T001", "") is False
    assert svc.get_employee("E001").task_ids == ()
