from __future__ import annotations


class TaskError(ValueError):
    """Base class for every error a task operation reports to its caller."""


class InvalidFormat(TaskError):
    """Raw text could not be parsed into its typed form."""


class PriorityOutOfRange(TaskError):
    pass


class DeadlineInPast(TaskError):
    pass


class DeadlineRequired(TaskError):
    pass


class EmptySummary(TaskError):
    pass


class PersistenceFailure(TaskError):
    """Reading or writing the backing file failed.

    The in-memory collection keeps any mutation that was already applied.
    """


__all__ = [
    "TaskError",
    "InvalidFormat",
    "PriorityOutOfRange",
    "DeadlineInPast",
    "DeadlineRequired",
    "EmptySummary",
    "PersistenceFailure",
]
