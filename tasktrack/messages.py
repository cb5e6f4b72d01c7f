from __future__ import annotations

import json

TODO_ADDED = "todo added"


def quote(text: str) -> str:
    # Double-quoted with escapes, so blank or odd summaries stay visible
    return json.dumps(text, ensure_ascii=False)


def deleted(count: int, summary: str) -> str:
    return f"deleted {count} todo(s) with summary {quote(summary)}"


def updated(count: int, summary: str) -> str:
    return f"updated {count} todo(s) with summary {quote(summary)}"


def not_found(summary: str) -> str:
    return f"no todo found with summary: {quote(summary)}"


__all__ = ["TODO_ADDED", "quote", "deleted", "updated", "not_found"]
