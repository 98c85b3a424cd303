"""Value tree model: classification and single-step navigation.

A parsed document is held as plain Python objects. Tables are ``dict``,
sequences are ``list`` (or ``tuple``), and everything the codec produces
otherwise is a scalar. The helpers here are the only traversal primitives
the resolver uses.
"""

from __future__ import annotations

import copy
from datetime import date, datetime, time
from enum import Enum
from typing import Any

__all__ = [
    "Value",
    "Table",
    "ValueKind",
    "SCALAR_TYPES",
    "kind_of",
    "is_table",
    "child",
    "has_child",
    "child_mut",
    "describe",
    "deep_copy",
]

Value = Any
Table = dict[str, Any]

SCALAR_TYPES: tuple[type, ...] = (str, bool, int, float, datetime, date, time)


class ValueKind(str, Enum):
    """The closed set of variants a tree value can take."""

    TABLE = "table"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


def kind_of(value: Value) -> ValueKind:
    """Classify a value. Raises TypeError for objects outside the tree model."""
    if isinstance(value, dict):
        return ValueKind.TABLE
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, SCALAR_TYPES):
        return ValueKind.SCALAR
    raise TypeError(f"{type(value).__name__} is not a tree value")


def describe(value: Value) -> str:
    """Short human-readable variant name, used in error messages."""
    try:
        return kind_of(value).value
    except TypeError:
        return type(value).__name__


def is_table(value: Value) -> bool:
    return isinstance(value, dict)


def child(value: Value, segment: str) -> Value | None:
    """Return the child stored under ``segment``, or None.

    Only tables have children; a sequence or scalar receiver yields None.
    """
    if isinstance(value, dict):
        return value.get(segment)
    return None


def has_child(value: Value, segment: str) -> bool:
    return isinstance(value, dict) and segment in value


def child_mut(value: Value, segment: str) -> Value | None:
    """Return the child under ``segment`` for in-place mutation, or None.

    The stored object itself is returned, not a copy, so mutating a table
    handle mutates the tree. Nothing is created.
    """
    if isinstance(value, dict) and segment in value:
        return value[segment]
    return None


def deep_copy(value: Value) -> Value:
    return copy.deepcopy(value)
