"""Tests for SettingsStore: load merged over defaults, save on every edit."""

import json
from pathlib import Path

import pytest

from vaultpush.config.models import PushConfig
from vaultpush.config.store import SettingsStore, SettingsStoreError


@pytest.fixture
def store(tmp_path: Path) -> SettingsStore:
    return SettingsStore(tmp_path)


class TestLoad:
    def test_missing_file_gives_defaults(self, store: SettingsStore) -> None:
        assert store.load() == PushConfig()
        assert not store.path.exists()

    def test_partial_file_merged_over_defaults(self, store: SettingsStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({"destination": "/srv/site"}))
        cfg = store.load()
        assert cfg.destination == "/srv/site"
        assert cfg.folder_to_copy == ""

    def test_reads_host_written_file(self, store: SettingsStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text('{"folderToCopy":"blog","destination":"/Users/emma/src/blog"}')
        cfg = store.load()
        assert cfg.folder_to_copy == "blog"
        assert cfg.destination == "/Users/emma/src/blog"

    def test_empty_file_gives_defaults(self, store: SettingsStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text("")
        assert store.load() == PushConfig()

    def test_malformed_json(self, store: SettingsStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json")
        with pytest.raises(SettingsStoreError, match="Invalid JSON") as exc_info:
            store.load()
        assert exc_info.value.path == store.path

    def test_non_object_json(self, store: SettingsStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text("[1, 2]")
        with pytest.raises(SettingsStoreError, match="JSON object"):
            store.load()

    def test_unsupported_version(self, store: SettingsStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text('{"version": 99}')
        with pytest.raises(SettingsStoreError, match="Invalid settings"):
            store.load()


class TestSave:
    def test_creates_parents_and_round_trips(self, store: SettingsStore) -> None:
        cfg = PushConfig(folder_to_copy="blog", destination="/out")
        store.save(cfg)
        assert store.path.is_file()
        assert store.load() == cfg

    def test_writes_host_compatible_keys(self, store: SettingsStore) -> None:
        store.save(PushConfig(folder_to_copy="blog", destination="/out"))
        data = json.loads(store.path.read_text())
        assert data == {"version": 1, "folderToCopy": "blog", "destination": "/out"}

    def test_update_saves_immediately(self, store: SettingsStore) -> None:
        store.update(folder_to_copy="blog")
        store.update(destination="/out")
        reloaded = SettingsStore(store.path.parents[3]).load()
        assert reloaded.folder_to_copy == "blog"
        assert reloaded.destination == "/out"

    def test_update_does_not_validate_paths(self, store: SettingsStore) -> None:
        cfg = store.update(destination="")
        assert cfg.destination == ""

    def test_custom_plugin_location(self, tmp_path: Path) -> None:
        custom = SettingsStore(tmp_path, plugin_id="other", config_dir=".cfg")
        assert custom.path == tmp_path / ".cfg" / "plugins" / "other" / "data.json"

    def test_unwritable_location(self, store: SettingsStore) -> None:
        store.path.parent.parent.mkdir(parents=True)
        store.path.parent.write_text("a file where the plugin directory goes")
        with pytest.raises(SettingsStoreError, match="Cannot write settings") as exc_info:
            store.save(PushConfig(destination="/out"))
        assert exc_info.value.path == store.path
        assert isinstance(exc_info.value.__cause__, OSError)
