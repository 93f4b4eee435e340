from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

import mysql.connector

from .connection import DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().with_name("schema.sql")

DEMO_EMPLOYEES = (
    {"employee_id": "E001", "name": "Alice Johnson", "department": "HR", "date_of_joining": datetime(2021, 1, 11)},
    {"employee_id": "E002", "name": "Bob Smith", "department": "IT", "date_of_joining": datetime(2022, 3, 7)},
    {"employee_id": "E003", "name": "Charlie Brown", "department": "Marketing", "date_of_joining": datetime(2022, 8, 1)},
    {"employee_id": "E004", "name": "Diana Prince", "department": "IT", "date_of_joining": datetime(2023, 8, 21)},
    {"employee_id": "E005", "name": "Evan Wright", "department": "Finance", "date_of_joining": None},
)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_sql(cur, sql: str) -> None:
    for stmt in _iter_sql_statements(sql):
        cur.execute(stmt)


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = {
        "host": target.host,
        "port": target.port,
        "user": target.user,
        "password": target.password,
        "use_pure": True,
    }
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: Optional[str | Path] = None) -> None:
    target = DBConfig.from_dict(db_config)
    ensure_database_exists(db_config)

    schema_path = Path(schema_path) if schema_path else SCHEMA_PATH
    sql = _strip_create_db_and_use(schema_path.read_text(encoding="utf-8"))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        _exec_sql(cur, sql)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied %s to %s", schema_path.name, target.database)


def ensure_demo_employees(db_config: dict) -> int:
    """Insert the demo employees that are missing. Returns how many were added."""
    target = DBConfig.from_dict(db_config)

    conn = _connect(target)
    added = 0
    try:
        cur = conn.cursor(dictionary=True)
        for emp in DEMO_EMPLOYEES:
            cur.execute("SELECT id FROM employees WHERE employee_id=%s", (emp["employee_id"],))
            if cur.fetchone():
                cur.execute(
                    """
                    UPDATE employees
                    SET name=%s, department=%s, date_of_joining=%s
                    WHERE employee_id=%s
                    """,
                    (emp["name"], emp["department"], emp["date_of_joining"], emp["employee_id"]),
                )
                continue
            cur.execute(
                """
                INSERT INTO employees (employee_id, name, department, date_of_joining)
                VALUES (%s, %s, %s, %s)
                """,
                (emp["employee_id"], emp["name"], emp["department"], emp["date_of_joining"]),
            )
            added += 1

        conn.commit()
    finally:
        conn.close()
    logger.info("Demo employees ready (%d added)", added)
    return added


def list_tables(db_config: dict) -> list[str]:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
