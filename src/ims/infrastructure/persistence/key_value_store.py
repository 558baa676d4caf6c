"""Local key/value stores holding string values, like browser local storage.

``JsonFileKeyValueStore`` keeps every key in one JSON object on disk.
It raises on I/O or decoding problems; callers that must not fail
(the product storage adapter) catch and log.
"""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path


class KeyValueStore(ABC):

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the value stored under *key*, or None if absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing anything already there."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Drop *key*; a missing key is not an error."""


class InMemoryKeyValueStore(KeyValueStore):

    def __init__(self, items: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileKeyValueStore(KeyValueStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- KeyValueStore interface ----------------------------------------------

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if items.pop(key, None) is not None:
            self._write(items)

    # --- File helpers ---------------------------------------------------------

    def _read(self) -> dict[str, str]:
        if not self._file_path.exists():
            return {}
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(
                f"{self._file_path} must hold a JSON object, got {type(raw).__name__}"
            )
        return raw

    def _write(self, items: dict[str, str]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        tmp_path.write_text(json.dumps(items, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp_path, self._file_path)
