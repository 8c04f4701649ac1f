"""
Map differencing for audit logging.

Computes a human-readable difference between two key/value snapshots
("before" and "after") so that update paths can log only the fields that
actually changed.

Manifesto:
    Audit lines should say *what changed*, not dump two full records.
    ``difference()`` is a pure function: no I/O, no mutation of its
    inputs, safe to call from any thread.

Examples:
    >>> difference({"a": 1, "b": 2}, {"b": 3, "c": 4})
    {'a': '1 -> null', 'b': '2 -> 3', 'c': 'null -> 4'}
    >>> difference(None, None)
    {}

Ordering:
    Result keys are ``str(key)``.  When two distinct keys share a string
    form the later write wins.  Keys are written in iteration order of
    ``before`` followed by ``after`` (Python dicts preserve insertion
    order), so the winner is the last colliding key in that sequence.

Tags:
    roster, core, diff, audit, logging

Doc-Types:
    api-reference
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, TypeVar

K = TypeVar("K")
V = TypeVar("V")

NULL = "null"


def _render(value: Any) -> str:
    return NULL if value is None else str(value)


def difference(
    before: Mapping[K, V] | None,
    after: Mapping[K, V] | None,
) -> dict[str, str]:
    """Calculate a difference between two mappings suitable for logging.

    Args:
        before: Snapshot before the change.  ``None`` is treated as empty.
        after: Snapshot after the change.  ``None`` is treated as empty.

    Returns:
        Mapping of ``str(key)`` to ``"<before> -> <after>"`` for every key
        that changed, ``"<before> -> null"`` for removed keys and
        ``"null -> <after>"`` for added keys.  Unchanged keys are omitted.
    """
    if before is None:
        before = {}
    if after is None:
        after = {}

    diff: dict[str, str] = {}

    for key, before_value in before.items():
        if key not in after:
            diff[str(key)] = f"{_render(before_value)} -> {NULL}"
            continue
        after_value = after[key]
        if before_value is not after_value and before_value != after_value:
            diff[str(key)] = f"{_render(before_value)} -> {_render(after_value)}"

    for key, after_value in after.items():
        if key not in before:
            diff[str(key)] = f"{NULL} -> {_render(after_value)}"

    return diff


def snapshot(entity: Any, fields: Iterable[str] | None = None) -> dict[str, Any]:
    """Capture the plain field values of *entity* for a later :func:`difference`.

    Accepts a mapping, a dataclass instance, or a SQLAlchemy mapped
    instance (column attributes only, relationships are skipped).  Enum
    members are stored by value.  When *fields* is given only those keys
    are kept.
    """
    if isinstance(entity, Mapping):
        values = dict(entity)
    elif dataclasses.is_dataclass(entity) and not isinstance(entity, type):
        values = {f.name: getattr(entity, f.name) for f in dataclasses.fields(entity)}
    else:
        from sqlalchemy import inspect as sa_inspect

        mapper = sa_inspect(entity).mapper
        values = {attr.key: getattr(entity, attr.key) for attr in mapper.column_attrs}

    if fields is not None:
        wanted = set(fields)
        values = {k: v for k, v in values.items() if k in wanted}

    return {k: (v.value if isinstance(v, Enum) else v) for k, v in values.items()}


__all__ = ["difference", "snapshot", "NULL"]
