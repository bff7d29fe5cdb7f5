import json
import os
import stat
import sys
from pathlib import Path

import pytest

from adobecli.config import (
    DEFAULT_BASE_URL,
    ConfigStore,
    JsonFileBackend,
    MemoryBackend,
    default_config_path,
    normalize_key,
)


class TestConfigStore:
    """Test suite for ConfigStore."""

    def test_empty_store(self):
        """Test empty store."""
        store = ConfigStore(MemoryBackend())

        assert store.get("username") is None
        assert store.is_configured() is False
        assert store.base_url == DEFAULT_BASE_URL
        assert store.list_all() == {
            "username": None,
            "password": None,
            "base_url": None,
        }

    def test_set_and_get(self):
        """Test set and get."""
        store = ConfigStore(MemoryBackend())
        store.set("username", "a")
        store.set("password", "b")

        assert store.get("username") == "a"
        assert store.get("password") == "b"
        assert store.is_configured() is True

    def test_is_configured_needs_both_credentials(self):
        """Test is configured needs both credentials."""
        assert not ConfigStore(MemoryBackend({"username": "admin"})).is_configured()
        assert not ConfigStore(MemoryBackend({"password": "admin"})).is_configured()
        assert not ConfigStore(
            MemoryBackend({"username": "admin", "password": ""})
        ).is_configured()

    def test_base_url_aliases(self):
        """Test base URL aliases."""
        store = ConfigStore(MemoryBackend())
        store.set("baseUrl", "http://author:4502")

        assert store.get("base_url") == "http://author:4502"
        assert store.get("base-url") == "http://author:4502"
        assert store.base_url == "http://author:4502"

    def test_unknown_key(self):
        """Test unknown key."""
        store = ConfigStore(MemoryBackend())

        with pytest.raises(KeyError):
            store.get("token")
        with pytest.raises(KeyError):
            store.set("token", "x")

    def test_normalize_key(self):
        """Test normalize key."""
        assert normalize_key("username") == "username"
        assert normalize_key("baseUrl") == "base_url"


class TestJsonFileBackend:
    """Test suite for the JSON file backend."""

    def test_default_path(self):
        """Test default path."""
        assert default_config_path().name == "config.json"
        assert JsonFileBackend().path == default_config_path()

    def test_missing_file_is_empty(self, tmp_path):
        """Test missing file is empty."""
        backend = JsonFileBackend(tmp_path / "config.json")

        assert backend.load() == {}

    def test_values_survive_new_store(self, tmp_path):
        """Test values survive new store."""
        path = tmp_path / "nested" / "config.json"
        ConfigStore(JsonFileBackend(path)).set("username", "admin")

        store = ConfigStore(JsonFileBackend(path))
        assert store.get("username") == "admin"
        assert json.loads(path.read_text()) == {"username": "admin"}

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_file_is_private(self, tmp_path):
        """Test file is private."""
        path = tmp_path / "config.json"
        ConfigStore(JsonFileBackend(path)).set("password", "secret")

        mode = stat.S_IMODE(os.stat(path).st_mode)
        assert mode == stat.S_IRUSR | stat.S_IWUSR

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_temp_file_is_private_before_replace(self, tmp_path, monkeypatch):
        """Test that the password never sits in a readable temp file."""
        path = tmp_path / "config.json"
        stale = tmp_path / "config.json.tmp"
        stale.write_text("{}")
        os.chmod(stale, 0o644)

        modes = []
        original_replace = Path.replace

        def recording_replace(self, target):
            modes.append(stat.S_IMODE(os.stat(self).st_mode))
            return original_replace(self, target)

        monkeypatch.setattr(Path, "replace", recording_replace)
        ConfigStore(JsonFileBackend(path)).set("password", "secret")

        assert modes == [stat.S_IRUSR | stat.S_IWUSR]
        assert not stale.exists()
        assert json.loads(path.read_text()) == {"password": "secret"}

    def test_corrupt_file_is_empty(self, tmp_path, caplog):
        """Test corrupt file is empty."""
        path = tmp_path / "config.json"
        path.write_text("{not json")

        assert JsonFileBackend(path).load() == {}
        assert "Could not read config file" in caplog.text

    def test_non_object_file_is_empty(self, tmp_path):
        """Test non-object file is empty."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")

        assert JsonFileBackend(path).load() == {}
