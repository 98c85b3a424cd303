"""treeconf - Hierarchical configuration files with dotted-key access."""

from __future__ import annotations

# Store
from treeconf.store import ConfigStore

# Resolution and value model
from treeconf.resolver import PathResolver
from treeconf.value import ValueKind, kind_of

# Codecs
from treeconf.codec import Codec, TomlCodec, YamlCodec, codec_for_path

# Typed extraction
from treeconf.extract import extract, extract_or_raise

# Errors
from treeconf.errors import (
    DocumentParseError,
    EmptyKeyError,
    ErrorCodes,
    ExtractionError,
    PathNotFoundError,
    SerializeError,
    StoreError,
    StoreIOError,
    TypeMismatchError,
)

__version__ = "0.1.0"

__all__ = [
    # Store
    "ConfigStore",
    "PathResolver",
    # Value model
    "ValueKind",
    "kind_of",
    # Codecs
    "Codec",
    "TomlCodec",
    "YamlCodec",
    "codec_for_path",
    # Typed extraction
    "extract",
    "extract_or_raise",
    # Errors
    "ErrorCodes",
    "StoreError",
    "StoreIOError",
    "DocumentParseError",
    "SerializeError",
    "EmptyKeyError",
    "PathNotFoundError",
    "TypeMismatchError",
    "ExtractionError",
]
