from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value)


def optional_str(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise ValidationError(f"{field_name} must be a string")
    return str(value)
