# ABOUTME: Key/value storage adapters and the single-slot user preference store.
# ABOUTME: Preferences are one JSON object written wholesale and read back wholesale.

import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from shoresquad.config import PREFERENCES_KEY

logger = logging.getLogger(__name__)


@runtime_checkable
class Storage(Protocol):
    """The subset of browser-local storage the page uses."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """Storage held in a dict for the lifetime of the page."""

    def __init__(self, items: dict[str, str] | None = None):
        self._items = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage:
    """Storage persisted as one JSON object of string values on disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        """Load the backing file. Raises ValueError when it is not a JSON object."""
        if not self.path.exists():
            return {}
        items = json.loads(self.path.read_text(encoding="utf-8"))
        if not isinstance(items, dict):
            raise ValueError(f"Storage file {self.path} does not hold a JSON object")
        return items

    def _write(self, items: dict[str, str]) -> None:
        self.path.write_text(json.dumps(items, indent=2), encoding="utf-8")

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = str(value)
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if items.pop(key, None) is not None:
            self._write(items)


def load_preferences(storage: Storage, key: str = PREFERENCES_KEY) -> dict | None:
    """Read the stored preferences, or None when nothing has been saved.

    A stored value that is not valid JSON raises json.JSONDecodeError.
    """
    raw = storage.get_item(key)
    if raw is None:
        return None
    prefs = json.loads(raw)
    logger.info("Loaded user preferences: %s", prefs)
    return prefs


def save_preferences(storage: Storage, preferences: dict, key: str = PREFERENCES_KEY) -> None:
    """Overwrite the stored preferences with this object."""
    storage.set_item(key, json.dumps(preferences))
    logger.info("Preferences saved: %s", preferences)
