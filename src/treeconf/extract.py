"""Typed extraction of tree values via pydantic."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError as PydanticValidationError

from treeconf.errors import ExtractionError
from treeconf.value import Value, deep_copy

__all__ = ["extract", "extract_or_raise"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ADAPTER_CACHE: dict[Any, TypeAdapter[Any]] = {}


def _adapter_for(target: Any) -> TypeAdapter[Any]:
    """Return a TypeAdapter for ``target``, reusing one when possible."""
    try:
        adapter = _ADAPTER_CACHE.get(target)
    except TypeError:
        # Unhashable targets such as Annotated metadata lists are not cached.
        return TypeAdapter(target)
    if adapter is None:
        adapter = TypeAdapter(target)
        _ADAPTER_CACHE[target] = adapter
    return adapter


def _target_name(target: Any) -> str:
    return getattr(target, "__name__", None) or repr(target)


def _error_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        loc = err.get("loc", ())
        path = ".".join(str(segment) for segment in loc)
        details.append(
            {
                "path": path,
                "message": err.get("msg", ""),
                "type": err.get("type", ""),
            }
        )
    return details


def extract_or_raise(value: Value, target: type[T], key: str = "") -> T:
    """Convert ``value`` into ``target``, binding table keys to field names.

    Validation is strict: scalars are never coerced, so ``"8080"`` does not
    become an ``int`` and ``"yes"`` does not become a ``bool``. Raises
    ExtractionError carrying per-field details when the value does not fit
    or when ``target`` is not a type pydantic can validate. The value is
    copied first so validators cannot alter the tree.
    """
    try:
        adapter = _adapter_for(target)
    except PydanticSchemaGenerationError as e:
        raise ExtractionError(
            key=key,
            target=_target_name(target),
            errors=[{"path": "", "message": str(e), "type": "schema_generation"}],
            cause=e,
        ) from e

    try:
        return adapter.validate_python(deep_copy(value), strict=True)
    except PydanticValidationError as e:
        raise ExtractionError(
            key=key,
            target=_target_name(target),
            errors=_error_details(e),
            cause=e,
        ) from e


def extract(value: Value, target: type[T], key: str = "") -> T | None:
    """Like ``extract_or_raise`` but returns None when the value does not fit."""
    try:
        return extract_or_raise(value, target, key=key)
    except ExtractionError as e:
        logger.debug(f"Extraction failed: {e}")
        return None
