from __future__ import annotations

import datetime as _dt
import uuid

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_PRIORITY = 1
MIN_PRIORITY = 1
MAX_PRIORITY = 5


class Task(BaseModel):
    """A single todo record.

    - `summary` is the match key for update/delete; it is not unique
    - `id` is assigned at creation and never changes
    - `done_at` is set exactly when `done` is true
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    priority: int = Field(default=DEFAULT_PRIORITY, ge=MIN_PRIORITY, le=MAX_PRIORITY)
    deadline: _dt.date
    added_at: _dt.datetime = Field(default_factory=lambda: _dt.datetime.now(_dt.UTC))
    done_at: _dt.datetime | None = None
    done: bool = False
    summary: str = Field(min_length=1)
    details: str = ""

    @field_validator("added_at", "done_at")
    @classmethod
    def _assume_utc(cls, v: _dt.datetime | None) -> _dt.datetime | None:
        # Naive timestamps are read as UTC
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=_dt.UTC)
        return v

    @model_validator(mode="after")
    def _done_matches_done_at(self) -> Task:
        if self.done != (self.done_at is not None):
            raise ValueError("done and done_at disagree")
        return self


class TaskPatch(BaseModel):
    """Sparse update applied to every task whose summary matches.

    `done=True` toggles the current state and `done=False` does nothing;
    `mark_done` sets the state to the given value.
    """

    done: bool | None = None
    mark_done: bool | None = None
    summary: str | None = None
    details: str | None = None
    priority: int | None = None
    deadline: _dt.date | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in type(self).model_fields)


__all__ = [
    "Task",
    "TaskPatch",
    "DEFAULT_PRIORITY",
    "MIN_PRIORITY",
    "MAX_PRIORITY",
]
