from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import to_iso_utc

# Fields a caller may set on create or patch on update. task_id is never client-writable.
EDITABLE_FIELDS = ("task_title", "task_description", "emp_id", "task_status", "due_date")


@dataclass(frozen=True)
class Task:
    """Domain entity: Task.

    Note: Plain data object (no DB access code).
    """

    task_id: str
    task_title: str
    task_description: str
    emp_id: Optional[str] = None
    task_status: Optional[str] = None
    due_date: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "task_id": self.task_id,
            "task_title": self.task_title,
            "task_description": self.task_description,
        }
        if self.emp_id is not None:
            data["emp_id"] = self.emp_id
        if self.task_status is not None:
            data["task_status"] = self.task_status
        if self.due_date is not None:
            data["due_date"] = to_iso_utc(self.due_date)
        return data
