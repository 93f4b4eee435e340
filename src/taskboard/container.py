from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .tasks.mysql_task_repository import MySQLTaskRepository
from .tasks.repository import TaskRepository
from .tasks.service import TaskService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    tasks_repo: TaskRepository

    employee_service: EmployeeService
    task_service: TaskService


def wire(
    *,
    employees_repo: EmployeeRepository,
    tasks_repo: TaskRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    employee_service = EmployeeService(employees_repo)
    task_service = TaskService(tasks_repo, employee_service)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        tasks_repo=tasks_repo,
        employee_service=employee_service,
        task_service=task_service,
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire(
        employees_repo=MySQLEmployeeRepository(conn),
        tasks_repo=MySQLTaskRepository(conn),
        conn=conn,
    )
