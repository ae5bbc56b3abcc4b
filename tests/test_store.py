"""Tests for the JSON settings store."""

import json
import os
import stat
import sys

import pytest

from daily_logger.core.store import ConfigStore, StoredSettings, default_config_path
from daily_logger.core.types import ConfigStoreError


class TestConfigPath:

    def test_env_override(self, isolated_settings):
        assert default_config_path() == isolated_settings

    def test_xdg_config_home(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DAILY_LOGGER_CONFIG")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

        assert default_config_path() == tmp_path / "xdg" / "daily-logger" / "config.json"

    def test_home_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("DAILY_LOGGER_CONFIG")
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert default_config_path() == tmp_path / ".config" / "daily-logger" / "config.json"


class TestConfigStore:

    @pytest.fixture(autouse=True)
    def _store(self, isolated_settings):
        self.store = ConfigStore()

    def test_load_missing_file(self):
        assert not self.store.exists()
        assert self.store.load() == StoredSettings()

    def test_round_trip(self):
        settings = StoredSettings(api_key="sk-ant-secret", author="Jane Doe",
                                  model="claude-3-5-sonnet-latest")

        self.store.save(settings)

        assert self.store.exists()
        assert ConfigStore(self.store.path).load() == settings

    def test_unset_fields_not_written(self):
        self.store.save(StoredSettings(author="Jane Doe"))

        data = json.loads(self.store.path.read_text())

        assert data == {"author": "Jane Doe"}

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_file_is_private(self):
        self.store.save(StoredSettings(api_key="sk-ant-secret"))

        mode = stat.S_IMODE(os.stat(self.store.path).st_mode)

        assert mode == 0o600

    def test_no_temp_files_left_behind(self):
        self.store.save(StoredSettings(author="a"))
        self.store.save(StoredSettings(author="b"))

        assert [p.name for p in self.store.path.parent.iterdir()] == ["config.json"]

    def test_update_merges(self):
        self.store.save(StoredSettings(api_key="sk-ant-secret", author="Jane"))

        updated = self.store.update(author="John", model=None)

        assert updated == StoredSettings(api_key="sk-ant-secret", author="John")
        assert self.store.load() == updated

    def test_unknown_keys_ignored(self):
        self.store.path.parent.mkdir(parents=True)
        self.store.path.write_text(json.dumps({"author": "Jane", "theme": "dark"}))

        assert self.store.load() == StoredSettings(author="Jane")

    def test_invalid_json(self):
        self.store.path.parent.mkdir(parents=True)
        self.store.path.write_text("{not json")

        with pytest.raises(ConfigStoreError, match="not valid JSON"):
            self.store.load()

    def test_non_object_json(self):
        self.store.path.parent.mkdir(parents=True)
        self.store.path.write_text("[1, 2]")

        with pytest.raises(ConfigStoreError, match="JSON object"):
            self.store.load()

    def test_clear(self):
        self.store.save(StoredSettings(author="Jane"))

        assert self.store.clear() is True
        assert not self.store.exists()
        assert self.store.clear() is False

    @pytest.mark.parametrize("key,expected", [
        (None, "(not set)"),
        ("short", "*****"),
        ("sk-ant-api03-abcdefgh1234", "sk-...1234"),
    ])
    def test_masked_key(self, key, expected):
        assert self.store.masked_key(StoredSettings(api_key=key)) == expected
