from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Optional, Union

from codejson.errors import InvalidDateError


def parse_date(value: Any = None) -> datetime:
    """Parse an untrusted date field.

    Accepts datetime/date objects and ISO-8601 strings. Nothing is silently
    corrected: absent, empty or unparseable input raises InvalidDateError.
    """

    if value is None:
        raise InvalidDateError("date value is required")
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        raise InvalidDateError(f"unsupported date type: {type(value).__name__}")

    raw = value.strip()
    if not raw:
        raise InvalidDateError("date value is empty")
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise InvalidDateError(f"invalid date: {value!r}") from exc


def is_last_day_of_month(dt: Optional[Union[date, datetime]] = None) -> bool:
    """True if the day after dt falls in another month."""

    if dt is None:
        dt = datetime.now()
    return (dt + timedelta(days=1)).month != dt.month
