from __future__ import annotations

import datetime as _dt
from collections.abc import Iterable

from tasktrack.models.task import DEFAULT_PRIORITY, Task, TaskPatch

from .errors import DeadlineInPast, DeadlineRequired, EmptySummary, PriorityOutOfRange
from .validate import parse_deadline, parse_priority, validate_deadline, validate_priority


def _now() -> _dt.datetime:
    return _dt.datetime.now(_dt.UTC)


def _require_summary(summary: str) -> str:
    s = summary.strip()
    if not s:
        raise EmptySummary("summary is required")
    return s


def _check_priority(priority: int) -> None:
    if not validate_priority(priority):
        raise PriorityOutOfRange(f"priority out of range (1-5): {priority}")


def _check_deadline(deadline: _dt.date, today: _dt.date | None) -> None:
    if not validate_deadline(deadline, today):
        raise DeadlineInPast(f"deadline is before today: {deadline.isoformat()}")


def create_task(
    summary: str,
    details: str,
    deadline_text: str,
    priority_text: str,
    *,
    now: _dt.datetime | None = None,
    today: _dt.date | None = None,
) -> Task:
    """Build a new Task from raw text fields.

    Checks run in a fixed order (summary, deadline, priority) and the first
    failure is raised. The caller appends the result to its collection.
    """
    s = _require_summary(summary)

    deadline = parse_deadline(deadline_text)
    if deadline is None:
        raise DeadlineRequired("deadline is required")
    _check_deadline(deadline, today)

    priority = parse_priority(priority_text)
    if priority is None:
        priority = DEFAULT_PRIORITY
    _check_priority(priority)

    return Task(
        priority=priority,
        deadline=deadline,
        added_at=now or _now(),
        done_at=None,
        done=False,
        summary=s,
        details=details,
    )


def validate_patch(patch: TaskPatch, *, today: _dt.date | None = None) -> None:
    if patch.priority is not None:
        _check_priority(patch.priority)
    if patch.deadline is not None:
        _check_deadline(patch.deadline, today)
    if patch.summary is not None:
        _require_summary(patch.summary)


def _set_done(task: Task, done: bool, now: _dt.datetime) -> None:
    if done == task.done:
        return
    task.done = done
    task.done_at = now if done else None


def apply_patch(task: Task, patch: TaskPatch, now: _dt.datetime) -> None:
    if patch.done:
        _set_done(task, not task.done, now)
    if patch.mark_done is not None:
        _set_done(task, patch.mark_done, now)
    if patch.summary is not None:
        task.summary = patch.summary.strip()
    if patch.details is not None:
        task.details = patch.details
    if patch.priority is not None:
        task.priority = patch.priority
    if patch.deadline is not None:
        task.deadline = patch.deadline


def patch_tasks(
    tasks: Iterable[Task],
    match: str,
    patch: TaskPatch,
    *,
    now: _dt.datetime | None = None,
    today: _dt.date | None = None,
) -> int:
    """Apply `patch` in place to every task whose summary equals `match`.

    The patch is validated before any task is touched. Returns the number
    of matching tasks; zero means nothing matched.
    """
    validate_patch(patch, today=today)
    ts = now or _now()
    updated = 0
    for task in tasks:
        if task.summary != match:
            continue
        apply_patch(task, patch, ts)
        updated += 1
    return updated


def delete_tasks(tasks: Iterable[Task], match: str) -> tuple[list[Task], int]:
    kept: list[Task] = []
    deleted = 0
    for task in tasks:
        if task.summary == match:
            deleted += 1
            continue
        kept.append(task)
    return kept, deleted


def find_first(tasks: Iterable[Task], match: str) -> Task | None:
    for task in tasks:
        if task.summary == match:
            return task
    return None


__all__ = [
    "create_task",
    "validate_patch",
    "apply_patch",
    "patch_tasks",
    "delete_tasks",
    "find_first",
]
