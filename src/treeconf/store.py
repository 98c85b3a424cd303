"""ConfigStore: a single document loaded into a tree addressable by dotted keys."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, TypeVar

from treeconf.codec import Codec, codec_for_path
from treeconf.errors import DocumentParseError, PathNotFoundError, StoreIOError
from treeconf.extract import extract, extract_or_raise
from treeconf.resolver import PathResolver
from treeconf.value import Table, Value, deep_copy

__all__ = ["ConfigStore"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigStore:
    """Configuration accessor with dot-path key support, backed by one file.

    Reads (``get``, ``get_str``, ``get_typed``) never raise; they return None
    or the supplied default when a key does not resolve. Writes go through
    ``set`` (parents must exist), ``create`` (missing parents become tables)
    and ``delete``. Nothing is written to disk until ``save`` is called.

    The store performs no locking. Callers sharing one instance across
    threads must serialize every call themselves.

    Example::

        store = ConfigStore.load("config.toml")
        port = store.get("server.port", 8080)
        store.set("server.port", 9090).create("server.tls.enabled", True)
        store.save()
    """

    def __init__(
        self,
        data: Table | None = None,
        path: str | Path = "config.toml",
        codec: Codec | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self._data: Table = deep_copy(data) if data is not None else {}
        self._path = Path(path)
        self._codec: Codec = codec if codec is not None else codec_for_path(self._path)
        self._encoding = encoding
        self._resolver = PathResolver(self._data)

    @classmethod
    def load(
        cls,
        path: str | Path,
        codec: Codec | None = None,
        encoding: str = "utf-8",
    ) -> ConfigStore:
        """Read and parse ``path`` into a new store.

        Raises:
            StoreIOError: The file cannot be read.
            DocumentParseError: The file is not valid ``encoding`` text or
                not a valid document.
        """
        file_path = Path(path)
        codec = codec if codec is not None else codec_for_path(file_path)
        try:
            content = file_path.read_text(encoding=encoding)
        except OSError as e:
            raise StoreIOError(path=str(file_path), operation="read", reason=str(e), cause=e) from e
        except UnicodeDecodeError as e:
            raise DocumentParseError(
                message=f"Cannot decode {file_path} as {encoding}: {e}",
                source=str(file_path),
                cause=e,
            ) from e

        data = codec.loads(content, source=str(file_path))
        logger.info(f"Loaded configuration from {file_path} ({len(data)} top-level keys)")
        return cls(data, file_path, codec=codec, encoding=encoding)

    def save(self) -> None:
        """Serialize the tree and overwrite the backing file in full.

        The write is not atomic: if it fails partway the file may be left
        truncated.

        Raises:
            SerializeError: The tree holds a value the codec cannot render.
            StoreIOError: The file cannot be written.
        """
        content = self._codec.dumps(self._data)
        try:
            self._path.write_text(content, encoding=self._encoding)
        except OSError as e:
            raise StoreIOError(path=str(self._path), operation="write", reason=str(e), cause=e) from e
        logger.info(f"Saved configuration to {self._path}")

    @property
    def path(self) -> Path:
        """The backing file."""
        return self._path

    @property
    def data(self) -> Mapping[str, Any]:
        """Read-only snapshot of the whole tree."""
        return MappingProxyType(deep_copy(self._data))

    def to_dict(self) -> Table:
        """Detached copy of the whole tree."""
        return deep_copy(self._data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a copy of the value at a dot-path key, or ``default``.

        An empty key returns the whole tree.
        """
        value = self._resolver.lookup(key)
        if value is None:
            return default
        return deep_copy(value)

    def get_str(self, key: str) -> str | None:
        """Get the value at ``key`` if it is a string."""
        value = self._resolver.lookup(key)
        return value if isinstance(value, str) else None

    def get_typed(self, key: str, target: type[T]) -> T | None:
        """Convert the value at ``key`` into ``target``.

        Returns None both when the key does not resolve and when the value
        does not fit ``target``. Use ``get_typed_or_raise`` to tell them apart.
        """
        value = self._resolver.lookup(key)
        if value is None:
            return None
        return extract(value, target, key=key)

    def get_typed_or_raise(self, key: str, target: type[T]) -> T:
        """Convert the value at ``key`` into ``target``.

        Raises:
            PathNotFoundError: The key does not resolve.
            ExtractionError: The value does not fit ``target``.
        """
        value = self._resolver.lookup(key)
        if value is None:
            raise PathNotFoundError(key=key, segment=key)
        return extract_or_raise(value, target, key=key)

    def set(self, key: str, value: Value) -> ConfigStore:
        """Insert or overwrite ``key``. Every parent table must already exist.

        Raises:
            EmptyKeyError: ``key`` is empty or has an empty segment.
            PathNotFoundError: A parent segment does not exist.
            TypeMismatchError: A parent segment is not a table.
        """
        self._resolver.assign(key, deep_copy(value))
        return self

    def create(self, key: str, value: Value) -> ConfigStore:
        """Insert or overwrite ``key``, creating missing parent tables.

        Raises:
            EmptyKeyError: ``key`` is empty or has an empty segment.
            TypeMismatchError: A parent segment holds a non-table value.
        """
        self._resolver.create(key, deep_copy(value))
        return self

    def delete(self, key: str) -> ConfigStore:
        """Remove ``key``. Deleting an absent entry is not an error.

        Raises:
            EmptyKeyError: ``key`` is empty or has an empty segment.
            PathNotFoundError: A parent segment does not exist.
            TypeMismatchError: A parent segment is not a table.
        """
        self._resolver.delete(key)
        return self

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._resolver.lookup(key) is not None

    def __repr__(self) -> str:
        return f"ConfigStore(path={str(self._path)!r}, keys={list(self._data)!r})"
