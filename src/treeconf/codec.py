"""Document codecs: text <-> value tree."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import tomli_w
import yaml

from treeconf.errors import DocumentParseError, SerializeError
from treeconf.value import Table

__all__ = ["Codec", "TomlCodec", "YamlCodec", "codec_for_path"]

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


@runtime_checkable
class Codec(Protocol):
    """Protocol for document formats a store can be backed by."""

    def loads(self, text: str, source: str | None = None) -> Table:
        """Parse document text into a root table."""
        ...

    def dumps(self, tree: Table) -> str:
        """Render a root table as document text."""
        ...


class TomlCodec:
    """TOML documents, read with tomllib and written with tomli-w."""

    def loads(self, text: str, source: str | None = None) -> Table:
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise DocumentParseError(
                message=f"Invalid TOML in {source or '<string>'}: {e}",
                source=source,
                cause=e,
            ) from e

    def dumps(self, tree: Table) -> str:
        try:
            return tomli_w.dumps(tree)
        except (TypeError, ValueError) as e:
            raise SerializeError(message=f"Cannot render tree as TOML: {e}", cause=e) from e


class YamlCodec:
    """YAML documents via PyYAML's safe loader and dumper."""

    def loads(self, text: str, source: str | None = None) -> Table:
        try:
            parsed: Any = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DocumentParseError(
                message=f"Invalid YAML in {source or '<string>'}: {e}",
                source=source,
                cause=e,
            ) from e

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise DocumentParseError(
                message=f"YAML document {source or '<string>'} must be a mapping, got {type(parsed).__name__}",
                source=source,
            )
        return parsed

    def dumps(self, tree: Table) -> str:
        try:
            return yaml.safe_dump(tree, sort_keys=False, allow_unicode=True)
        except yaml.YAMLError as e:
            raise SerializeError(message=f"Cannot render tree as YAML: {e}", cause=e) from e


def codec_for_path(path: str | Path) -> Codec:
    """Pick a codec from the file suffix; TOML unless the file is YAML."""
    if Path(path).suffix.lower() in _YAML_SUFFIXES:
        return YamlCodec()
    return TomlCodec()
