from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from ..core.constants import MISSING_DEPARTMENT_KEY, MONTH_NAMES
from ..core.exceptions import NotFoundError
from .model import Employee, EmployeeTaskRow
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def department_distribution(counts: Mapping[Optional[str], int]) -> dict[str, int]:
    """Department name -> head count; employees without one land under "null"."""
    out: dict[str, int] = {}
    for department, total in counts.items():
        key = MISSING_DEPARTMENT_KEY if department is None else department
        out[key] = out.get(key, 0) + int(total)
    return out


def monthly_distribution(counts: Mapping[int, int]) -> dict[str, int]:
    """Month name -> joiners, always all twelve months in calendar order."""
    out = {name: 0 for name in MONTH_NAMES}
    for month, total in counts.items():
        if 1 <= int(month) <= 12:
            out[MONTH_NAMES[int(month) - 1]] = int(total)
    return out


class EmployeeService:
    """Use cases: employee lookups, the joined task listing and the chart reports."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_employee_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def list_task_rows(self) -> Sequence[EmployeeTaskRow]:
        return self._employees.list_task_rows()

    def department_distribution(self) -> dict[str, int]:
        return department_distribution(self._employees.count_by_department())

    def monthly_joining_distribution(self) -> dict[str, int]:
        return monthly_distribution(self._employees.count_by_joining_month())

    def link_task(self, task_id: str, emp_id: Optional[str]) -> bool:
        """Append `task_id` to the owner's task_ids. False when there is no such employee."""
        if not emp_id:
            return False

        linked = self._employees.append_task_id(emp_id, task_id)
        if not linked:
            logger.info("No employee %r to link task %s to", emp_id, task_id)
        return linked
