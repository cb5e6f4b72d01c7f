from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_FILENAME = ".tasktrack.json"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


@dataclass(slots=True)
class TrackerConfig:
    data_file: Path
    host: str
    port: int


def _default_data_file(e: dict[str, Any]) -> Path:
    home = (e.get("HOME") or "").strip()
    base = Path(home) if home else Path.home()
    return base / DEFAULT_FILENAME


def _read_port(raw: str | None) -> int:
    value = (raw or "").strip()
    try:
        port = int(value) if value else DEFAULT_PORT
    except ValueError:
        return DEFAULT_PORT
    return port if 0 < port < 65536 else DEFAULT_PORT


def load_config(env: dict[str, str] | None = None) -> TrackerConfig:
    e: dict[str, Any] = dict(os.environ)
    if env:
        e.update(env)
    raw_file = (e.get("TASKTRACK_FILE") or "").strip()
    data_file = Path(raw_file).expanduser() if raw_file else _default_data_file(e)
    return TrackerConfig(
        data_file=data_file,
        host=(e.get("TASKTRACK_HOST") or "").strip() or DEFAULT_HOST,
        port=_read_port(e.get("TASKTRACK_PORT")),
    )


__all__ = ["TrackerConfig", "load_config"]
