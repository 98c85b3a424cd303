"""Dotted-key resolution over a value tree."""

from __future__ import annotations

import logging
from typing import Any

from treeconf.errors import PathNotFoundError, TypeMismatchError
from treeconf.path import join_key, require_segments, split_key
from treeconf.value import Table, Value, child, child_mut, describe, has_child, is_table

__all__ = ["PathResolver"]

logger = logging.getLogger(__name__)

_MISSING: Any = object()


class PathResolver:
    """Walks dotted keys against a root table.

    Reads never fail: any unresolvable key yields None. Writes and deletes
    descend through existing tables only, except ``create`` which inserts an
    empty table for every missing intermediate segment. Each step re-resolves
    the next container by key from its parent; no handle outlives a call.
    """

    def __init__(self, root: Table) -> None:
        self._root = root

    @property
    def root(self) -> Table:
        return self._root

    def lookup(self, key: str) -> Value | None:
        """Return the value at ``key`` or None.

        A key with no segments resolves to the root itself; a key containing
        an empty segment resolves to nothing.
        """
        current: Value = self._root
        for segment in split_key(key):
            if not segment or not has_child(current, segment):
                return None
            current = child(current, segment)
        return current

    def assign(self, key: str, value: Value) -> None:
        """Insert or overwrite ``key``; every parent table must already exist."""
        segments = require_segments(key)
        parent = self._descend(key, segments[:-1], create=False)
        self._insert(key, parent, segments[-1], value)

    def create(self, key: str, value: Value) -> None:
        """Insert or overwrite ``key``, creating missing parent tables.

        Tables created before a TypeMismatchError is raised stay in place.
        """
        segments = require_segments(key)
        parent = self._descend(key, segments[:-1], create=True)
        self._insert(key, parent, segments[-1], value)

    def delete(self, key: str) -> None:
        """Remove ``key`` from its parent table. Removing an absent key is a no-op."""
        segments = require_segments(key)
        parent = self._descend(key, segments[:-1], create=False)
        last = segments[-1]
        removed = parent.pop(last, _MISSING)
        if removed is _MISSING:
            logger.debug(f"Delete of '{key}' skipped: no such entry")
        else:
            logger.debug(f"Deleted '{key}'")

    def _descend(self, key: str, segments: list[str], create: bool) -> Table:
        current: Table = self._root
        for depth, segment in enumerate(segments):
            if not has_child(current, segment):
                prefix = join_key(segments[: depth + 1])
                if not create:
                    raise PathNotFoundError(key=key, segment=prefix)
                logger.debug(f"Creating table '{prefix}' for '{key}'")
                current[segment] = {}
            nxt = child_mut(current, segment)
            if not is_table(nxt):
                raise TypeMismatchError(
                    key=key,
                    segment=join_key(segments[: depth + 1]),
                    actual=describe(nxt),
                )
            current = nxt
        return current

    def _insert(self, key: str, parent: Table, last: str, value: Value) -> None:
        previous = parent.get(last, _MISSING)
        if previous is not _MISSING and is_table(previous) and not is_table(value):
            logger.warning(f"Replacing table at '{key}' with {describe(value)} value")
        parent[last] = value
        logger.debug(f"Set '{key}'")
