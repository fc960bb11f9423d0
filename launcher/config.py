"""Launcher settings stored as ``config.json`` in the data directory."""

from __future__ import annotations

import copy
import json
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from loguru import logger

DEFAULT_DATA_DIR = Path.home() / "Documents" / "GameLauncher"

DEFAULTS: dict[str, Any] = {
    "language": "en_US",
    "theme": "auto",
    "games_dir": "",  # empty: <data_dir>/games
    "default_background": "#2B2D42",
    "default_icon": "🎮",
    "playtime_flush_seconds": 60,
    # Entry point discovery, in priority order
    "html_entry_points": ["index.html", "game.html", "main.html"],
    "executable_extensions": [".exe", ".app", ".sh", ".bat"],
}

_instance: Config | None = None


def get_config() -> Config:
    """Return the process-wide Config, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = Config()
    return _instance


def reset_config() -> None:
    """Forget the process-wide Config (tests)."""
    global _instance
    _instance = None


def _merge(base: dict[str, Any], override: dict[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(base.get(key), dict) and isinstance(value, dict):
            _merge(base[key], value)
        else:
            base[key] = value


class Config:
    """
    User settings merged over ``DEFAULTS``.

    Values are addressed by dot-separated paths. Every ``set`` rewrites the
    file unless it happens inside ``batch_update``.
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        self._dir = config_dir or DEFAULT_DATA_DIR
        self._path = self._dir / "config.json"
        self._lock = threading.Lock()
        self._deferred = False
        self._data = copy.deepcopy(DEFAULTS)
        self._read()

    def _read(self) -> None:
        if not self._path.is_file():
            return
        try:
            user_data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable {self._path.name}: {e}")
            return
        if isinstance(user_data, dict):
            _merge(self._data, user_data)

    def _write(self) -> None:
        if self._deferred:
            return
        with self._lock:
            tmp = self._path.with_suffix(".tmp")
            try:
                self._dir.mkdir(parents=True, exist_ok=True)
                tmp.write_text(json.dumps(self._data, ensure_ascii=False, indent=2), encoding="utf-8")
                tmp.replace(self._path)
            except OSError as e:
                logger.error(f"Failed to save {self._path.name}: {e}")
                tmp.unlink(missing_ok=True)

    @contextmanager
    def batch_update(self) -> Iterator[None]:
        """Apply several ``set`` calls with one write at the end."""
        self._deferred = True
        try:
            yield
        finally:
            self._deferred = False
            self._write()

    def get(self, key: str, default: Any = None) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set(self, key: str, value: Any) -> None:
        *parents, leaf = key.split(".")
        node = self._data
        for part in parents:
            if not isinstance(node.get(part), dict):
                node[part] = {}
            node = node[part]
        node[leaf] = value
        self._write()

    # ── Typed settings ──

    @property
    def data_dir(self) -> Path:
        return self._dir

    @property
    def language(self) -> str:
        return self.get("language", DEFAULTS["language"])

    @language.setter
    def language(self, value: str) -> None:
        self.set("language", value)

    @property
    def theme(self) -> str:
        return self.get("theme", DEFAULTS["theme"])

    @theme.setter
    def theme(self, value: str) -> None:
        self.set("theme", value)

    @property
    def games_dir(self) -> Path:
        """Where bundles are extracted, one subdirectory per game."""
        raw = self.get("games_dir")
        return Path(raw) if raw else self._dir / "games"

    @games_dir.setter
    def games_dir(self, value: Path | None) -> None:
        self.set("games_dir", str(value) if value else "")

    @property
    def default_background(self) -> str:
        return self.get("default_background", DEFAULTS["default_background"])

    @property
    def default_icon(self) -> str:
        return self.get("default_icon", DEFAULTS["default_icon"])

    @property
    def playtime_flush_seconds(self) -> int:
        raw = self.get("playtime_flush_seconds", DEFAULTS["playtime_flush_seconds"])
        try:
            return max(1, int(raw))
        except (TypeError, ValueError):
            logger.warning(f"Invalid playtime_flush_seconds {raw!r}, using default")
            return DEFAULTS["playtime_flush_seconds"]

    @property
    def html_entry_points(self) -> list[str]:
        return list(self.get("html_entry_points", []))

    @property
    def executable_extensions(self) -> list[str]:
        return [ext.lower() for ext in self.get("executable_extensions", [])]
