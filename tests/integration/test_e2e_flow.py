"""End-to-end load -> mutate -> save -> reload flows."""

from __future__ import annotations

from pathlib import Path

import pytest

from treeconf import ConfigStore, PathNotFoundError


class TestEndToEndFlow:
    def test_delete_leaves_empty_parent_table(self, tmp_path: Path) -> None:
        path = tmp_path / "c.toml"
        path.write_text("[a]\nb = 1\n")
        store = ConfigStore.load(path)
        assert store.get("a.b") == 1
        store.delete("a.b")
        assert store.get("a.b") is None
        assert store.get("a") == {}

    def test_round_trip_preserves_content(self, toml_file: Path) -> None:
        first = ConfigStore.load(toml_file)
        original = first.to_dict()
        first.save()
        second = ConfigStore.load(toml_file)
        assert second.to_dict() == original
        second.save()
        assert ConfigStore.load(toml_file).to_dict() == original

    def test_round_trip_all_scalar_kinds(self, tmp_path: Path) -> None:
        path = tmp_path / "kinds.toml"
        path.write_text(
            "s = \"text\"\n"
            "i = -7\n"
            "f = 3.25\n"
            "b = false\n"
            "dt = 1979-05-27T07:32:00Z\n"
            "ld = 1979-05-27\n"
            "lt = 07:32:00\n"
            "arr = [1, 2, 3]\n"
            "nested = [[1, 2], [\"a\"]]\n"
            "[[products]]\n"
            "name = \"hammer\"\n"
            "[[products]]\n"
            "name = \"nail\"\n"
            "[deep.er.table]\n"
            "x = 1\n"
        )
        original = ConfigStore.load(path).to_dict()
        ConfigStore.load(path).save()
        assert ConfigStore.load(path).to_dict() == original

    def test_mutations_persist(self, toml_file: Path) -> None:
        store = ConfigStore.load(toml_file)
        store.create("logging.file.path", "/var/log/app.log")
        store.set("server.port", 9000)
        store.delete("title")
        store.save()

        reloaded = ConfigStore.load(toml_file)
        assert reloaded.get("logging.file.path") == "/var/log/app.log"
        assert reloaded.get("server.port") == 9000
        assert "title" not in reloaded

    def test_yaml_round_trip(self, yaml_file: Path) -> None:
        store = ConfigStore.load(yaml_file)
        original = store.to_dict()
        store.create("server.tls.enabled", True)
        store.save()
        reloaded = ConfigStore.load(yaml_file)
        assert reloaded.get("server.tls.enabled") is True
        reloaded.delete("server.tls")
        assert reloaded.to_dict() == original

    def test_set_requires_parent_but_create_does_not(self, empty_store: ConfigStore) -> None:
        with pytest.raises(PathNotFoundError):
            empty_store.set("db.host", "localhost")
        empty_store.create("db.host", "localhost")
        empty_store.set("db.port", 5432)
        assert empty_store.get("db") == {"host": "localhost", "port": 5432}
