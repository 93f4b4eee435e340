"""Task id format: prefix `T` + number zero-padded to at least three digits."""

from __future__ import annotations

from typing import Iterable, Optional

from ..core.constants import TASK_ID_PREFIX, TASK_ID_WIDTH


def format_task_id(number: int) -> str:
    if number < 1:
        raise ValueError(f"Task number must be positive, got {number}")
    return f"{TASK_ID_PREFIX}{number:0{TASK_ID_WIDTH}d}"


def parse_task_number(task_id: str) -> Optional[int]:
    """Numeric suffix of a task id, or None if it does not follow the format."""
    if not task_id or not task_id.startswith(TASK_ID_PREFIX):
        return None
    digits = task_id[len(TASK_ID_PREFIX):]
    if not digits.isdigit():
        return None
    return int(digits)


def next_task_number(existing_ids: Iterable[str], last_allocated: int = 0) -> int:
    """Number after both the last allocated one and the highest in `existing_ids`.

    Numbers of deleted tasks are never handed out again.
    """
    numbers = [n for n in (parse_task_number(t) for t in existing_ids) if n is not None]
    return max(last_allocated, max(numbers, default=0)) + 1


def next_task_id(existing_ids: Iterable[str], last_allocated: int = 0) -> str:
    """Id following the highest numbered one seen so far (T001 when none)."""
    return format_task_id(next_task_number(existing_ids, last_allocated))
