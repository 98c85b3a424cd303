"""Dotted-key handling."""

from __future__ import annotations

from treeconf.errors import EmptyKeyError

__all__ = ["SEPARATOR", "split_key", "require_segments", "join_key"]

SEPARATOR = "."


def split_key(key: str) -> list[str]:
    """Split a dotted key into its segments.

    An empty string yields no segments. Empty segments produced by leading,
    trailing or doubled separators are kept as ``""`` so callers can decide
    whether to reject them.
    """
    if not key:
        return []
    return key.split(SEPARATOR)


def require_segments(key: str) -> list[str]:
    """Split ``key`` for a mutating operation, rejecting vacuous keys."""
    segments = split_key(key)
    if not segments or any(not segment for segment in segments):
        raise EmptyKeyError(key=key)
    return segments


def join_key(segments: list[str]) -> str:
    return SEPARATOR.join(segments)
