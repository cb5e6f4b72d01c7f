from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from tasktrack.observability import reset_metrics
from tasktrack.store.task_store import FileTaskStore, TaskStore


@pytest.fixture(autouse=True)
def _fresh_metrics() -> Generator[None, None, None]:
    reset_metrics()
    yield
    reset_metrics()


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def file_store(data_file: Path) -> FileTaskStore:
    return FileTaskStore(data_file)


@pytest.fixture()
def memory_store() -> TaskStore:
    return TaskStore()
