from __future__ import annotations

from .errors import (
    DeadlineInPast,
    DeadlineRequired,
    EmptySummary,
    InvalidFormat,
    PersistenceFailure,
    PriorityOutOfRange,
    TaskError,
)
from .mutate import create_task, delete_tasks, find_first, patch_tasks
from .ordering import sort_for_display, visible_tasks
from .validate import parse_deadline, parse_priority, validate_deadline, validate_priority

__all__ = [
    "TaskError",
    "InvalidFormat",
    "PriorityOutOfRange",
    "DeadlineInPast",
    "DeadlineRequired",
    "EmptySummary",
    "PersistenceFailure",
    "create_task",
    "patch_tasks",
    "delete_tasks",
    "find_first",
    "sort_for_display",
    "visible_tasks",
    "parse_priority",
    "parse_deadline",
    "validate_priority",
    "validate_deadline",
]
