from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from .model import Employee, EmployeeTaskRow


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_employee_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_task_rows(self) -> Sequence[EmployeeTaskRow]:
        """Employees joined with the tasks their task_ids still point at."""

        raise NotImplementedError

    def count_by_department(self) -> Mapping[Optional[str], int]:
        raise NotImplementedError

    def count_by_joining_month(self) -> Mapping[int, int]:
        """Month number (1-12) -> employees who joined in it. Undated employees are skipped."""

        raise NotImplementedError

    def append_task_id(self, employee_id: str, task_id: str) -> bool:
        """Append to the first matching employee's task_ids. False if there is none."""

        raise NotImplementedError
