from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .ids import format_task_id
from .model import EDITABLE_FIELDS, Task
from .repository import TaskRepository

_SELECT_COLUMNS = "task_id, task_title, task_description, emp_id, task_status, due_date"

# Counter row lock serialises allocation; GREATEST() keeps ids ahead of rows
# inserted with explicit task_ids.
_ALLOCATE_SQL = """
    UPDATE task_id_sequence
    SET value = LAST_INSERT_ID(
        GREATEST(
            value,
            (SELECT COALESCE(MAX(CAST(SUBSTRING(task_id, 2) AS UNSIGNED)), 0) FROM tasks)
        ) + 1
    )
    WHERE name = 'task'
"""


def _row_to_task(r: dict) -> Task:
    return Task(
        task_id=r["task_id"],
        task_title=r["task_title"],
        task_description=r["task_description"],
        emp_id=r.get("emp_id"),
        task_status=r.get("task_status"),
        due_date=r.get("due_date"),
    )


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_task_id(self, task_id: str) -> Optional[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SELECT_COLUMNS} FROM tasks WHERE task_id=%s", (task_id,))
            row = fetchone(cur)
            return _row_to_task(row) if row else None

    def list_by_emp_id(self, emp_id: str) -> Sequence[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SELECT_COLUMNS} FROM tasks WHERE emp_id=%s ORDER BY id", (emp_id,))
            return [_row_to_task(r) for r in fetchall(cur)]

    def create(self, fields: Mapping[str, Any]) -> Task:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_ALLOCATE_SQL)
            if cur.rowcount == 0:
                raise RuntimeError("task_id_sequence is not initialised; apply schema.sql")
            cur.execute("SELECT LAST_INSERT_ID() AS value")
            task_id = format_task_id(int(fetchone(cur)["value"]))

            cur.execute(
                """
                INSERT INTO tasks(task_id, task_title, task_description, emp_id, task_status, due_date)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    task_id,
                    fields.get("task_title"),
                    fields.get("task_description"),
                    fields.get("emp_id"),
                    fields.get("task_status"),
                    fields.get("due_date"),
                ),
            )

            cur.execute(f"SELECT {_SELECT_COLUMNS} FROM tasks WHERE task_id=%s", (task_id,))
            return _row_to_task(fetchone(cur))

    def update(self, task_id: str, changes: Mapping[str, Any]) -> bool:
        columns = [c for c in EDITABLE_FIELDS if c in changes]
        if not columns:
            return False

        assignments = ", ".join(f"{c}=%s" for c in columns)
        params = [changes[c] for c in columns]
        params.append(task_id)

        with db_cursor(self._conn_factory) as (_, cur):
            # rowcount counts changed rows only (no CLIENT_FOUND_ROWS flag).
            cur.execute(f"UPDATE tasks SET {assignments} WHERE task_id=%s", tuple(params))
            return cur.rowcount > 0

    def delete(self, task_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tasks WHERE task_id=%s", (task_id,))
            return cur.rowcount > 0
