"""UTC helpers for dates exchanged with web APIs."""

from __future__ import annotations

import datetime as _dt
from typing import Optional

WEB_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def ensure_utc(date: Optional[_dt.datetime]) -> Optional[_dt.datetime]:
    """Return ``date`` converted to UTC unless it is missing or already UTC.

    Naive datetimes are treated as local time, matching :meth:`datetime.astimezone`.
    """

    if date is None:
        return None
    if date.tzinfo is not None and date.utcoffset() == _dt.timedelta(0):
        return date
    return date.astimezone(_dt.timezone.utc)


def get_utc_web_date(date: _dt.datetime) -> str:
    """Format ``date`` as ``yyyy-MM-ddTHH:mm:ss.fffZ`` in UTC."""

    utc_date = ensure_utc(date)
    return f"{utc_date.strftime(WEB_DATE_FORMAT)}.{utc_date.microsecond // 1000:03d}Z"


def parse_web_date(value: str) -> _dt.datetime:
    """Parse a UTC web date back into an aware datetime.

    Other ISO 8601 forms are accepted too; naive results are taken as UTC.
    """

    try:
        parsed = _dt.datetime.strptime(value, f"{WEB_DATE_FORMAT}.%fZ")
    except ValueError:
        parsed = _dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=_dt.timezone.utc)
    return parsed


__all__ = ["WEB_DATE_FORMAT", "ensure_utc", "get_utc_web_date", "parse_web_date"]
