from __future__ import annotations

import datetime as _dt
import re

from tasktrack.models.task import MAX_PRIORITY, MIN_PRIORITY

from .errors import InvalidFormat

DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def validate_priority(priority: int) -> bool:
    return MIN_PRIORITY <= priority <= MAX_PRIORITY


def validate_deadline(deadline: _dt.date, today: _dt.date | None = None) -> bool:
    """Return True when `deadline` is today or later.

    The comparison is by calendar day: a datetime has its time of day
    dropped first, so any moment of today is valid.
    """
    if isinstance(deadline, _dt.datetime):
        deadline = deadline.date()
    return deadline >= (today or _dt.date.today())


def parse_priority(text: str | None) -> int | None:
    raw = (text or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidFormat(f"invalid priority: {raw!r}") from exc


def parse_deadline(text: str | None) -> _dt.date | None:
    raw = (text or "").strip()
    if not raw:
        return None
    # strptime alone accepts single-digit months and days
    if not _DATE_RE.fullmatch(raw):
        raise InvalidFormat(f"invalid deadline format, expected YYYY-MM-DD: {raw!r}")
    try:
        return _dt.datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidFormat(f"invalid deadline format, expected YYYY-MM-DD: {raw!r}") from exc


def format_date(value: _dt.date | None) -> str:
    if value is None:
        return ""
    if isinstance(value, _dt.datetime) and value.tzinfo is not None:
        # Timestamps are stored in UTC; show the local calendar day
        value = value.astimezone()
    return value.strftime(DATE_FORMAT)


__all__ = [
    "DATE_FORMAT",
    "validate_priority",
    "validate_deadline",
    "parse_priority",
    "parse_deadline",
    "format_date",
]
