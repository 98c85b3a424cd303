"""Shared fixtures for the treeconf test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from treeconf.store import ConfigStore

SOURCES_TOML = """\
title = "collector"

[sources.opcua_machine1]
source_type = "opcua"
enabled = true
host = "opc.tcp://10.0.0.5:4840"
collection_duration = 60
machine_prefix = "M1"
machine_ip = "10.0.0.5"
file_type = "csv"
response_type = "json"
authtype = "anonymous"
collection_interval_seconds = 5
namespace = 2
node_variance = ["temperature", "pressure"]

[server]
port = 8080
ratio = 0.75
started = 2024-05-01T12:30:00Z
"""

SOURCES_YAML = """\
title: collector
server:
  port: 8080
  hosts:
    - a.example.com
    - b.example.com
"""


@pytest.fixture
def toml_file(tmp_path: Path) -> Path:
    """Write the sample TOML document and return its path."""
    path = tmp_path / "sources.toml"
    path.write_text(SOURCES_TOML, encoding="utf-8")
    return path


@pytest.fixture
def yaml_file(tmp_path: Path) -> Path:
    """Write the sample YAML document and return its path."""
    path = tmp_path / "sources.yaml"
    path.write_text(SOURCES_YAML, encoding="utf-8")
    return path


@pytest.fixture
def store(toml_file: Path) -> ConfigStore:
    """A store loaded from the sample TOML document."""
    return ConfigStore.load(toml_file)


@pytest.fixture
def empty_store(tmp_path: Path) -> ConfigStore:
    """An in-memory store with an empty tree, backed by a not-yet-written file."""
    return ConfigStore({}, tmp_path / "empty.toml")
