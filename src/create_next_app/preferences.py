"""Preference store: remembers the last-used toggles between runs."""

import json
import os

import click

APP_NAME = "create-next-app"
CONFIG_DIR_ENV = "CREATE_NEXT_APP_CONFIG_DIR"
CONFIG_FILE_NAME = "config.json"
PREFERENCES_KEY = "preferences"


def default_config_path():
    """Return the config file path, honouring CREATE_NEXT_APP_CONFIG_DIR."""
    config_dir = os.environ.get(CONFIG_DIR_ENV) or click.get_app_dir(APP_NAME)
    return os.path.join(config_dir, CONFIG_FILE_NAME)


class PreferenceStore:
    """JSON-backed store holding a single namespaced preferences record.

    A missing or unreadable file reads as empty. Nothing is cached: load()
    reads the file and save() replaces the record.
    """

    def __init__(self, path=None):
        self._path = path or default_config_path()

    @property
    def path(self):
        return self._path

    def _read_document(self):
        if not os.path.isfile(self._path):
            return {}
        try:
            with open(self._path) as f:
                document = json.load(f)
        except (OSError, ValueError):
            return {}
        return document if isinstance(document, dict) else {}

    def _write_document(self, document):
        os.makedirs(os.path.dirname(self._path) or ".", exist_ok=True)
        with open(self._path, "w") as f:
            json.dump(document, f, indent=2)
            f.write("\n")

    def load(self) -> dict:
        preferences = self._read_document().get(PREFERENCES_KEY)
        return dict(preferences) if isinstance(preferences, dict) else {}

    def save(self, preferences: dict):
        document = self._read_document()
        document[PREFERENCES_KEY] = dict(preferences)
        self._write_document(document)

    def clear(self):
        """Remove every stored value."""
        if os.path.isfile(self._path):
            self._write_document({})
