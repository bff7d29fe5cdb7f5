"""
Persistent CLI configuration.

Holds the AEM username, password and base URL between invocations. The
store itself only knows about keys; where the values live is up to the
backend it is given, a JSON file in the user's application directory by
default or a plain dict in tests.
"""

import json
import logging
import os
import stat
from pathlib import Path

import click

logger = logging.getLogger(__name__)

APP_NAME = "adobecli"
CONFIG_FILENAME = "config.json"
DEFAULT_BASE_URL = "http://localhost:4502"
PRIVATE_MODE = stat.S_IRUSR | stat.S_IWUSR

CONFIG_KEYS = ("username", "password", "base_url")
KEY_ALIASES = {
    "baseUrl": "base_url",
    "base-url": "base_url",
}


def normalize_key(key):
    """Map a user-supplied key to its stored name, or raise KeyError."""
    key = KEY_ALIASES.get(key, key)
    if key not in CONFIG_KEYS:
        raise KeyError(key)
    return key


def default_config_path():
    """Location of the configuration file in the user's app directory."""
    return Path(click.get_app_dir(APP_NAME)) / CONFIG_FILENAME


class MemoryBackend:
    """Keeps the configuration in a dict; nothing survives the process."""

    def __init__(self, initial=None):
        self.data = dict(initial or {})

    def load(self):
        return dict(self.data)

    def save(self, data):
        self.data = dict(data)


class JsonFileBackend:
    """Stores the configuration as a single JSON object in a file."""

    def __init__(self, path=None):
        self.path = Path(path) if path else default_config_path()

    def load(self):
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read config file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring config file {self.path}: not a JSON object")
            return {}
        return data

    def save(self, data):
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # The file holds a password, so it is private from the moment it exists
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, PRIVATE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, sort_keys=True)
            f.write("\n")

        # A stale temp file keeps its old mode through os.open
        try:
            os.chmod(tmp_path, PRIVATE_MODE)
        except OSError as e:
            logger.debug(f"Could not restrict permissions on {tmp_path}: {e}")
        tmp_path.replace(self.path)


class ConfigStore:
    """Read and write configuration values through a backend."""

    def __init__(self, backend=None):
        self.backend = backend if backend is not None else JsonFileBackend()

    def get(self, key):
        return self.backend.load().get(normalize_key(key))

    def set(self, key, value):
        data = self.backend.load()
        data[normalize_key(key)] = value
        self.backend.save(data)

    def is_configured(self):
        """True when both username and password are set and non-empty."""
        return bool(self.get("username")) and bool(self.get("password"))

    def list_all(self):
        data = self.backend.load()
        return {key: data.get(key) for key in CONFIG_KEYS}

    @property
    def base_url(self):
        return self.get("base_url") or DEFAULT_BASE_URL
