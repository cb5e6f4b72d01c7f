from __future__ import annotations

import datetime as dt

from tasktrack.models.task import Task

FUTURE = "2099-01-01"
PAST = "2000-01-01"


def make_task(
    summary: str,
    *,
    deadline: str = FUTURE,
    priority: int = 1,
    done_at: str | None = None,
    added_at: str = "2024-01-01T00:00:00+00:00",
    details: str = "",
) -> Task:
    """Build a Task directly, bypassing create-time validation."""
    return Task(
        summary=summary,
        details=details,
        priority=priority,
        deadline=dt.date.fromisoformat(deadline),
        added_at=dt.datetime.fromisoformat(added_at),
        done=done_at is not None,
        done_at=dt.datetime.fromisoformat(done_at) if done_at else None,
    )
