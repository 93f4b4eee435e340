from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any, Optional

from ..core.exceptions import ValidationError


def parse_iso_datetime(value: Any, field_name: str = "date") -> Optional[datetime]:
    """Parse an ISO-8601 date/datetime into a naive UTC datetime.

    Accepts `2024-10-22`, `2024-10-22T00:00:00`, `2024-10-22T00:00:00.000Z`
    and offset forms. Aware values are converted to UTC; naive values are
    taken as UTC already. Empty values yield None.
    """

    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise ValidationError(f"{field_name} is not a valid date: {value!r}") from None
    else:
        raise ValidationError(f"{field_name} is not a valid date: {value!r}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def to_iso_utc(value: Optional[datetime]) -> Optional[str]:
    """Format a naive UTC datetime as `YYYY-MM-DDTHH:MM:SS.mmmZ`."""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
