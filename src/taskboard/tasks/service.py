from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from ..common.datetime_utils import parse_iso_datetime
from ..common.validators import optional_str, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.service import EmployeeService
from .model import EDITABLE_FIELDS, Task
from .repository import TaskRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("task_title", "task_description")


@dataclass(frozen=True)
class TaskCreation:
    """Outcome of creating a task: the stored task and whether its owner was linked."""

    task: Task
    linked: bool


def _clean_fields(payload: Any, *, partial: bool) -> dict[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")

    fields: dict[str, Any] = {}
    for name in EDITABLE_FIELDS:
        if name not in payload:
            continue
        value = payload[name]
        if name == "due_date":
            fields[name] = parse_iso_datetime(value, name)
        else:
            fields[name] = optional_str(value, name)

    for name in REQUIRED_FIELDS:
        if not partial or name in fields:
            require_non_empty(fields.get(name), name)

    return fields


class TaskService:
    """Use cases: read, create, patch and delete tasks."""

    def __init__(self, tasks: TaskRepository, employees: EmployeeService):
        self._tasks = tasks
        self._employees = employees

    def get_task(self, task_id: str) -> Task:
        task = self._tasks.get_by_task_id(task_id)
        if not task:
            raise NotFoundError("Task not Found")
        return task

    def list_for_employee(self, emp_id: str) -> Sequence[Task]:
        return self._tasks.list_by_emp_id(emp_id)

    def create_task(self, payload: Mapping[str, Any]) -> TaskCreation:
        fields = _clean_fields(payload, partial=False)
        task = self._tasks.create(fields)
        logger.info("Created task %s for employee %r", task.task_id, task.emp_id)

        # Second step: a failure here leaves the task stored and is reported, not raised.
        try:
            linked = self._employees.link_task(task.task_id, task.emp_id)
        except Exception:
            logger.exception("Linking task %s to employee %r failed", task.task_id, task.emp_id)
            linked = False

        return TaskCreation(task=task, linked=linked)

    def update_task(self, task_id: str, payload: Mapping[str, Any]) -> None:
        changes = _clean_fields(payload, partial=True)
        if not self._tasks.update(task_id, changes):
            raise NotFoundError("Task not found or no changes made")

    def delete_task(self, task_id: str) -> None:
        if not self._tasks.delete(task_id):
            raise NotFoundError("Task not found")
