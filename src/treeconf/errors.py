"""Error hierarchy for treeconf."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "StoreError",
    "StoreIOError",
    "DocumentParseError",
    "SerializeError",
    "EmptyKeyError",
    "PathNotFoundError",
    "TypeMismatchError",
    "ExtractionError",
    "ErrorCodes",
]


class StoreError(Exception):
    """Base error for all treeconf errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class StoreIOError(StoreError):
    """Raised when the backing file cannot be read or written."""

    def __init__(self, path: str, operation: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="STORE_IO_ERROR",
            message=f"Cannot {operation} '{path}': {reason}",
            details={"path": path, "operation": operation, "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The file path the operation failed on."""
        return self.details["path"]


class DocumentParseError(StoreError):
    """Raised when a document's text is not valid for its codec."""

    def __init__(self, message: str, source: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            code="DOCUMENT_PARSE_ERROR",
            message=message,
            details={"source": source},
            **kwargs,
        )


class SerializeError(StoreError):
    """Raised when the in-memory tree cannot be rendered by the codec."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="SERIALIZE_ERROR", message=message, **kwargs)


class EmptyKeyError(StoreError):
    """Raised when a mutating operation receives a vacuous dotted key."""

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            code="EMPTY_KEY",
            message=f"Key cannot be empty or contain empty segments: '{key}'",
            details={"key": key},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The rejected key."""
        return self.details["key"]


class PathNotFoundError(StoreError):
    """Raised when a segment of a dotted key does not exist."""

    def __init__(self, key: str, segment: str, **kwargs: Any) -> None:
        super().__init__(
            code="PATH_NOT_FOUND",
            message=f"Path '{segment}' does not exist (key '{key}')",
            details={"key": key, "segment": segment},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The full dotted key being resolved."""
        return self.details["key"]

    @property
    def segment(self) -> str:
        """The dotted prefix that failed to resolve."""
        return self.details["segment"]


class TypeMismatchError(StoreError):
    """Raised when an intermediate segment exists but is not a table."""

    def __init__(self, key: str, segment: str, actual: str, **kwargs: Any) -> None:
        super().__init__(
            code="TYPE_MISMATCH",
            message=f"'{segment}' is not a table, cannot descend (key '{key}', found {actual})",
            details={"key": key, "segment": segment, "actual": actual},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The full dotted key being resolved."""
        return self.details["key"]

    @property
    def segment(self) -> str:
        """The dotted prefix occupied by a non-table value."""
        return self.details["segment"]


class ExtractionError(StoreError):
    """Raised when a located value cannot be converted to the requested type."""

    def __init__(
        self,
        key: str,
        target: str,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code="EXTRACTION_ERROR",
            message=f"Value at '{key}' cannot be converted to {target}",
            details={"key": key, "target": target, "errors": errors or []},
            **kwargs,
        )

    @property
    def errors(self) -> list[dict[str, Any]]:
        """Field-level failures, one dict per problem."""
        return self.details["errors"]


class ErrorCodes:
    """All treeconf error codes as constants.

    Example:
        if error.code == ErrorCodes.PATH_NOT_FOUND:
            store.create(key, value)
    """

    STORE_IO_ERROR = "STORE_IO_ERROR"
    DOCUMENT_PARSE_ERROR = "DOCUMENT_PARSE_ERROR"
    SERIALIZE_ERROR = "SERIALIZE_ERROR"
    EMPTY_KEY = "EMPTY_KEY"
    PATH_NOT_FOUND = "PATH_NOT_FOUND"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    EXTRACTION_ERROR = "EXTRACTION_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
