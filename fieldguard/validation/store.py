# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Violation store helpers: recording, merging and rendering."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

from .messages import FIELD_FORMAT

ViolationStore = Dict[str, List[str]]


def record_violation(store: ViolationStore, path: str, message: str) -> None:
    """Append *message* under *path*, keeping messages already recorded there."""

    store.setdefault(path, []).append(message)


def merge_violations(target: ViolationStore, source: ViolationStore) -> ViolationStore:
    """Merge *source* into *target* in place and return *target*.

    Messages from *source* are appended after the ones *target* already holds
    for the same path; duplicates are kept. Lists for paths *target* does not
    know yet are inserted as-is, so *source* must not be reused afterwards.
    Merging a store into itself is a no-op.
    """

    if source is target:
        return target

    for path, messages in source.items():
        existing = target.get(path)
        if existing is None:
            target[path] = messages
        else:
            existing.extend(messages)
    return target


def render_violations(store: ViolationStore) -> List[str]:
    """Render every message as ``"<path> <message>"``, path by path."""

    return [
        FIELD_FORMAT.format(path=path, message=message)
        for path, messages in store.items()
        for message in messages
    ]


def render_value(value: Any) -> str:
    """Return ``str(value)``, falling back to ``repr`` or a placeholder if it raises."""

    try:
        return str(value)
    except Exception:  # noqa: BLE001 - caller values may raise anything
        pass
    try:
        return repr(value)
    except Exception:  # noqa: BLE001
        return f"<unprintable {type(value).__name__}>"


def bracketed(items: Iterable[Any]) -> str:
    """Return ``[a, b, c]`` for *items*."""

    return "[" + ", ".join(render_value(item) for item in items) + "]"


__all__ = [
    "ViolationStore",
    "bracketed",
    "render_value",
    "merge_violations",
    "record_violation",
    "render_violations",
]
