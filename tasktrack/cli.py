from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from tasktrack import messages
from tasktrack.config import TrackerConfig, load_config
from tasktrack.core.errors import TaskError
from tasktrack.core.ordering import visible_tasks
from tasktrack.core.validate import format_date, parse_deadline, parse_priority
from tasktrack.models.task import Task, TaskPatch
from tasktrack.store.task_store import FileTaskStore, TaskStore


def format_short(task: Task) -> str:
    return f"[{task.priority}/{format_date(task.deadline)}] {task.summary}"


def format_full(task: Task) -> str:
    lines = [
        f"[{'done' if task.done else 'todo'}]     {task.summary}",
        f"details    {task.details}",
        f"added at   {format_date(task.added_at)}",
        f"deadline   {format_date(task.deadline)}",
        f"priority   {task.priority}",
    ]
    if task.done_at is not None:
        lines.append(f"done at    {format_date(task.done_at)}")
    return "\n".join(lines)


def _fail(cmd: str, exc: Exception | str) -> None:
    sys.stderr.write(f"error: {cmd}: {exc}\n")
    raise SystemExit(1)


def _read_line(prompt: str, reader: Callable[[str], str]) -> str:
    try:
        return reader(prompt).strip()
    except EOFError:
        return ""


def cmd_add(store: TaskStore, reader: Callable[[str], str] = input) -> None:
    deadline = _read_line("deadline: ", reader)
    summary = _read_line("summary: ", reader)
    details = _read_line("details: ", reader)
    priority = _read_line("priority (1-5, default 1): ", reader)
    store.create(summary, details, deadline, priority)
    print(messages.TODO_ADDED)


def cmd_list(store: TaskStore, show_all: bool) -> None:
    for task in visible_tasks(store.snapshot(), show_all):
        print(format_full(task) if show_all else format_short(task))


def cmd_delete(store: TaskStore, summary: str) -> None:
    removed = store.delete(summary)
    if removed == 0:
        print(messages.not_found(summary))
    else:
        print(messages.deleted(removed, summary))


def build_patch(args: Any) -> TaskPatch:
    """Build a TaskPatch from `set` flags; raises TaskError on bad text."""
    return TaskPatch(
        done=True if args.done else None,
        mark_done=False if args.reopen else None,
        summary=args.summary,
        details=args.details,
        priority=parse_priority(args.priority) if args.priority is not None else None,
        deadline=parse_deadline(args.deadline) if args.deadline is not None else None,
    )


def cmd_set(store: TaskStore, args: Any) -> None:
    patch = build_patch(args)
    if patch.is_empty():
        _fail(
            "set",
            "no fields provided; use --done/--reopen/--summary/--details/--priority/--deadline",
        )
    updated = store.patch(args.match, patch)
    if updated == 0:
        print(messages.not_found(args.match))
    else:
        print(messages.updated(updated, args.match))


def cmd_serve(store: TaskStore, cfg: TrackerConfig) -> None:
    # Defer web imports to keep the CLI lightweight for non-serve ops
    import uvicorn

    from tasktrack.web.app import create_app

    uvicorn.run(create_app(store), host=cfg.host, port=cfg.port, log_config=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("tasktrack", description="personal todo tracker")
    parser.add_argument("--file", help="task file (default: $TASKTRACK_FILE or ~/.tasktrack.json)")
    sub = parser.add_subparsers(dest="cmd")

    sub.add_parser("add", help="add a new todo")

    p_list = sub.add_parser("list", help="list todos")
    p_list.add_argument("-a", "--all", action="store_true", help="include done todos")

    p_delete = sub.add_parser("delete", help="delete todo(s) by summary")
    p_delete.add_argument("summary", help="summary of the todo(s) to delete")

    p_set = sub.add_parser("set", help="update properties of todo(s) by summary")
    p_set.add_argument("match", help="summary of the todo(s) to update")
    p_set.add_argument("--done", action="store_true", help="toggle done status")
    p_set.add_argument("--reopen", action="store_true", help="mark as not done")
    p_set.add_argument("--summary")
    p_set.add_argument("--details")
    p_set.add_argument("--priority", help="1-5")
    p_set.add_argument("--deadline", help="YYYY-MM-DD")

    p_serve = sub.add_parser("serve", help="start local web server")
    p_serve.add_argument("--host")
    p_serve.add_argument("--port", type=int)
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    cmd = str(getattr(args, "cmd", None) or "")
    if not cmd:
        parser.print_help()
        return

    cfg = load_config()
    if args.file:
        cfg.data_file = Path(args.file).expanduser()
    if cmd == "serve":
        cfg.host = args.host or cfg.host
        cfg.port = args.port or cfg.port

    try:
        store = FileTaskStore(cfg.data_file)
        if cmd == "add":
            cmd_add(store)
        elif cmd == "list":
            cmd_list(store, args.all)
        elif cmd == "delete":
            cmd_delete(store, args.summary)
        elif cmd == "set":
            cmd_set(store, args)
        elif cmd == "serve":
            cmd_serve(store, cfg)
    except TaskError as exc:
        _fail(cmd, exc)


if __name__ == "__main__":
    main()
