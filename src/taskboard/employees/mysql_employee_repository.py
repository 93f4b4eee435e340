from __future__ import annotations

from collections import defaultdict
from typing import Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, EmployeeTaskRow
from .repository import EmployeeRepository


def _row_to_employee(r: dict, task_ids: Sequence[str]) -> Employee:
    return Employee(
        employee_id=r.get("employee_id"),
        name=r["name"],
        date_of_joining=r.get("date_of_joining"),
        department=r.get("department"),
        task_ids=tuple(task_ids),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, name, date_of_joining, department
                FROM employees
                WHERE employee_id=%s
                ORDER BY id
                LIMIT 1
                """,
                (employee_id,),
            )
            row = fetchone(cur)
            if not row:
                return None

            cur.execute("SELECT task_id FROM employee_tasks WHERE employee_pk=%s ORDER BY seq", (row["id"],))
            task_ids = [r["task_id"] for r in fetchall(cur)]
            return _row_to_employee(row, task_ids)

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, employee_id, name, date_of_joining, department FROM employees ORDER BY id")
            rows = fetchall(cur)

            cur.execute("SELECT employee_pk, task_id FROM employee_tasks ORDER BY employee_pk, seq")
            task_ids: dict[int, list[str]] = defaultdict(list)
            for r in fetchall(cur):
                task_ids[int(r["employee_pk"])].append(r["task_id"])

            return [_row_to_employee(r, task_ids.get(int(r["id"]), [])) for r in rows]

    def list_task_rows(self) -> Sequence[EmployeeTaskRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT e.employee_id, e.name, t.task_id, t.task_title
                FROM employees e
                JOIN employee_tasks et ON et.employee_pk = e.id
                JOIN tasks t ON t.task_id = et.task_id
                GROUP BY e.id, e.employee_id, e.name, t.task_id, t.task_title
                ORDER BY e.id, MIN(et.seq)
                """
            )
            return [
                EmployeeTaskRow(
                    employee_id=r.get("employee_id"),
                    name=r["name"],
                    task_id=r["task_id"],
                    task_title=r["task_title"],
                )
                for r in fetchall(cur)
            ]

    def count_by_department(self) -> Mapping[Optional[str], int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT department, COUNT(*) AS total FROM employees GROUP BY department")
            return {r["department"]: int(r["total"]) for r in fetchall(cur)}

    def count_by_joining_month(self) -> Mapping[int, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT MONTH(date_of_joining) AS month, COUNT(*) AS total
                FROM employees
                WHERE date_of_joining IS NOT NULL
                GROUP BY MONTH(date_of_joining)
                """
            )
            return {int(r["month"]): int(r["total"]) for r in fetchall(cur)}

    def append_task_id(self, employee_id: str, task_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id FROM employees WHERE employee_id=%s ORDER BY id LIMIT 1 FOR UPDATE",
                (employee_id,),
            )
            row = fetchone(cur)
            if not row:
                return False

            cur.execute(
                """
                INSERT INTO employee_tasks(employee_pk, seq, task_id)
                SELECT %s, COALESCE(MAX(seq), 0) + 1, %s
                FROM employee_tasks
                WHERE employee_pk=%s
                """,
                (row["id"], task_id, row["id"]),
            )
            return True
