"""JSON key-value store — one document per store, flushed on every write."""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

from loguru import logger


class StoreError(Exception):
    """Raised when the store document cannot be written."""


class JsonStore:
    """
    Key-value document persisted as ``{name}.json`` in *data_dir*.

    ``set`` writes the whole document through a temp file and fsyncs it
    before replacing the original. The in-memory document only changes
    once the write has succeeded.
    """

    def __init__(self, data_dir: Path, name: str, defaults: dict[str, Any] | None = None) -> None:
        self._data_dir = data_dir
        self._path = data_dir / f"{name}.json"
        self._data: dict[str, Any] = copy.deepcopy(defaults or {})
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error(f"Failed to load store {self._path.name}: {e}")
            return
        if not isinstance(data, dict):
            logger.error(f"Ignoring store {self._path.name}: top level is not an object")
            return
        self._data.update(data)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Return a deep copy of the value stored under *key*."""
        if key not in self._data:
            return default
        return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        """Store *value* under *key* and persist the document.

        Raises ``StoreError`` if the document could not be written; the
        previous value stays in place.
        """
        data = dict(self._data)
        data[key] = copy.deepcopy(value)
        self._write(data)
        self._data = data

    def _write(self, data: dict[str, Any]) -> None:
        tmp = self._path.with_suffix(".tmp")
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            tmp.replace(self._path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to save store {self._path.name}: {e}")
            tmp.unlink(missing_ok=True)
            raise StoreError(str(e)) from e
