from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from tasktrack.core.errors import PersistenceFailure
from tasktrack.models.task import Task
from tasktrack.observability import get_json_logger

_TASK_LIST = TypeAdapter(list[Task])


def load_tasks(path: str | Path) -> list[Task]:
    """Read the whole collection from `path`.

    A missing file is an empty collection. Empty or malformed content is
    logged and also treated as empty; the next save overwrites it.
    """
    p = Path(path)
    logger = get_json_logger("tasktrack.store")
    try:
        raw = p.read_bytes()
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise PersistenceFailure(f"read {p}: {exc}") from exc
    if not raw.strip():
        return []
    try:
        return _TASK_LIST.validate_json(raw)
    except ValidationError as exc:
        logger.warning(
            "ignoring unreadable task file",
            extra={
                "event": "load_malformed",
                "path": str(p),
                "attributes": {"errors": exc.error_count()},
            },
        )
        return []


def dump_tasks(path: str | Path, tasks: Iterable[Task]) -> None:
    """Rewrite `path` with the whole collection.

    The new content goes to a sibling temp file that replaces `path` only
    once fully written, so a failed save leaves the previous file intact.
    """
    p = Path(path)
    data = [t.model_dump(mode="json") for t in tasks]
    tmp: Path | None = None
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=p.parent,
            prefix=f".{p.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp = Path(f.name)
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, p)
    except OSError as exc:
        if tmp is not None:
            tmp.unlink(missing_ok=True)
        raise PersistenceFailure(f"write {p}: {exc}") from exc


__all__ = ["load_tasks", "dump_tasks"]
