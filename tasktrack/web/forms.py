from __future__ import annotations

import hashlib
from collections.abc import Mapping
from typing import Any

from tasktrack.core.validate import parse_deadline, parse_priority
from tasktrack.models.task import TaskPatch

_TRUTHY = {"1", "t", "true", "yes", "y", "on"}


def is_true(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def form_field(form: Mapping[str, Any], name: str) -> str:
    value = form.get(name)
    return value if isinstance(value, str) else ""


def form_to_patch(form: Mapping[str, Any]) -> TaskPatch:
    """Translate an edit-form submission into a TaskPatch.

    Blank fields are left out of the patch; a truthy `done` requests a
    toggle. Priority and deadline are parsed here but range and date
    checks are left to the patch itself.
    """
    patch = TaskPatch()
    if is_true(form_field(form, "done")):
        patch.done = True
    summary = form_field(form, "summary").strip()
    if summary:
        patch.summary = summary
    details = form_field(form, "details")
    if details:
        patch.details = details
    patch.priority = parse_priority(form_field(form, "priority"))
    patch.deadline = parse_deadline(form_field(form, "deadline"))
    return patch


def css_value(value: object) -> str:
    """Stable CSS class name for an arbitrary value."""
    text = "" if value is None else str(value)
    if not text:
        return "css-empty"
    return "css-" + hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()


__all__ = ["is_true", "form_field", "form_to_patch", "css_value"]
