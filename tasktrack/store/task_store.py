from __future__ import annotations

import threading
from collections.abc import Iterable
from pathlib import Path

from tasktrack.core.errors import PersistenceFailure
from tasktrack.core.mutate import create_task, delete_tasks, find_first, patch_tasks
from tasktrack.models.task import Task, TaskPatch
from tasktrack.observability import get_json_logger, get_metrics

from .persistence import dump_tasks, load_tasks


class TaskStore:
    """In-memory task collection guarded by a single lock.

    Every public method holds the lock for its whole duration, including the
    write-back, so readers never see a half-applied mutation. Subclasses
    persist by overriding `_persist`, which is called with the lock held
    after each mutation that changed something.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])
        self._lock = threading.Lock()
        self._logger = get_json_logger("tasktrack.store")

    def _persist(self) -> None:
        return

    def _commit(self, op: str, summary: str, count: int) -> None:
        metrics = get_metrics()
        metrics.increment("task_mutations", {"op": op})
        self._logger.debug(
            "task mutation",
            extra={"event": f"task_{op}", "summary": summary, "count": count},
        )
        try:
            self._persist()
        except PersistenceFailure as exc:
            metrics.increment("persistence_errors", {"op": op})
            self._logger.error(
                "persist failed; keeping in-memory state",
                extra={"event": "persist_error", "summary": summary},
                exc_info=exc,
            )
            raise

    # ----------------------------
    # Reads
    # ----------------------------
    def snapshot(self) -> list[Task]:
        with self._lock:
            return [t.model_copy() for t in self._tasks]

    def find_first(self, summary: str) -> Task | None:
        with self._lock:
            task = find_first(self._tasks, summary)
            return task.model_copy() if task is not None else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    # ----------------------------
    # Mutations
    # ----------------------------
    def add(self, task: Task) -> Task:
        with self._lock:
            self._tasks.append(task)
            self._commit("add", task.summary, 1)
        return task

    def create(
        self,
        summary: str,
        details: str = "",
        deadline_text: str = "",
        priority_text: str = "",
    ) -> Task:
        # Validation happens before the lock; a failure never touches the collection
        task = create_task(summary, details, deadline_text, priority_text)
        return self.add(task)

    def patch(self, summary: str, patch: TaskPatch) -> int:
        with self._lock:
            updated = patch_tasks(self._tasks, summary, patch)
            if updated:
                self._commit("patch", summary, updated)
            return updated

    def delete(self, summary: str) -> int:
        with self._lock:
            kept, deleted = delete_tasks(self._tasks, summary)
            if deleted:
                self._tasks = kept
                self._commit("delete", summary, deleted)
            return deleted


class FileTaskStore(TaskStore):
    """Task store backed by a single JSON file, rewritten on every change."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(load_tasks(self.path))
        self._logger.debug(
            "task store ready",
            extra={"event": "store_ready", "path": str(self.path), "count": len(self._tasks)},
        )

    def _persist(self) -> None:
        dump_tasks(self.path, self._tasks)


__all__ = ["TaskStore", "FileTaskStore"]
