from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Task


class TaskRepository(Protocol):
    """Repository interface for Task.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_task_id(self, task_id: str) -> Optional[Task]:
        raise NotImplementedError

    def list_by_emp_id(self, emp_id: str) -> Sequence[Task]:
        raise NotImplementedError

    def create(self, fields: Mapping[str, Any]) -> Task:
        """Allocate the next task id and persist the task atomically."""

        raise NotImplementedError

    def update(self, task_id: str, changes: Mapping[str, Any]) -> bool:
        """Apply `changes` to the task. False when no task matched or nothing changed."""

        raise NotImplementedError

    def delete(self, task_id: str) -> bool:
        raise NotImplementedError
