from __future__ import annotations

from .persistence import dump_tasks, load_tasks
from .task_store import FileTaskStore, TaskStore

__all__ = ["TaskStore", "FileTaskStore", "load_tasks", "dump_tasks"]
