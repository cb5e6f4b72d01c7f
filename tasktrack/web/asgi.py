from __future__ import annotations

from tasktrack.config import load_config
from tasktrack.store.task_store import FileTaskStore

from .app import create_app

_store = FileTaskStore(load_config().data_file)
app = create_app(_store)
