from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from tasktrack.models.task import Task


def display_key(task: Task) -> tuple[Any, ...]:
    """Sort key for the display order.

    Open tasks come first, by deadline, then higher priority, then age.
    Done tasks follow, oldest completion first, then age. The first element
    separates the groups, so keys of different shapes are never compared
    past it.
    """
    if task.done:
        return (1, task.done_at, task.added_at)
    return (0, task.deadline, -task.priority, task.added_at)


def sort_for_display(tasks: Iterable[Task]) -> list[Task]:
    # sorted() is stable; full ties keep their collection order
    return sorted(tasks, key=display_key)


def visible_tasks(tasks: Iterable[Task], show_all: bool = False) -> list[Task]:
    ordered = sort_for_display(tasks)
    if show_all:
        return ordered
    return [t for t in ordered if not t.done]


__all__ = ["display_key", "sort_for_display", "visible_tasks"]
