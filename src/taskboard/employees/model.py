from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import to_iso_utc


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    `task_ids` keeps the ids of tasks created for the employee, in creation
    order. Ids are appended only; deleting a task does not remove its id.
    """

    employee_id: Optional[str]
    name: str
    date_of_joining: Optional[datetime] = None
    department: Optional[str] = None
    task_ids: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.employee_id is not None:
            data["employee_id"] = self.employee_id
        data["name"] = self.name
        if self.date_of_joining is not None:
            data["date_of_joining"] = to_iso_utc(self.date_of_joining)
        if self.department is not None:
            data["department"] = self.department
        data["task_ids"] = list(self.task_ids)
        return data

    def to_summary_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        if self.employee_id is not None:
            data["employee_id"] = self.employee_id
        data["task_ids"] = list(self.task_ids)
        return data


@dataclass(frozen=True)
class EmployeeTaskRow:
    """One row of the joined listing: an employee paired with one of their tasks."""

    employee_id: Optional[str]
    name: str
    task_id: str
    task_title: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "task_id": self.task_id,
            "task_title": self.task_title,
        }
