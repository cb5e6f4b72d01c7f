from __future__ import annotations

import datetime as dt

import pytest
from pydantic import ValidationError

from tasktrack.models.task import Task, TaskPatch


def test_task_minimal_fields() -> None:
    t = Task(summary="buy milk", deadline=dt.date(2099, 1, 1))

    assert t.id
    assert t.priority == 1
    assert t.done is False
    assert t.done_at is None
    assert t.details == ""
    assert t.added_at.tzinfo is not None


@pytest.mark.parametrize(
    "fields",
    [
        {"priority": 0},
        {"priority": 6},
        {"summary": ""},
        {"done": True},
        {"done_at": dt.datetime(2024, 1, 1, tzinfo=dt.UTC)},
    ],
)
def test_task_rejects_broken_records(fields: dict[str, object]) -> None:
    base: dict[str, object] = {"summary": "x", "deadline": dt.date(2099, 1, 1)}
    base.update(fields)
    with pytest.raises(ValidationError):
        Task.model_validate(base)


def test_patch_is_empty() -> None:
    assert TaskPatch().is_empty()
    assert not TaskPatch(done=False).is_empty()
    assert not TaskPatch(details="").is_empty()
