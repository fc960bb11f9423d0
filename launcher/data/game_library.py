"""Game library — the record collection kept under the store's ``games`` key."""

from __future__ import annotations

from dataclasses import asdict, fields
from typing import Any

from loguru import logger

from launcher.data.store import JsonStore
from launcher.models.game_record import GameRecord

_GAMES_KEY = "games"
_FIELDS = {f.name for f in fields(GameRecord)}


def _record_from_dict(data: dict[str, Any]) -> GameRecord:
    """Reconstruct a GameRecord from a dict (loaded from JSON)."""
    known = {key: value for key, value in data.items() if key in _FIELDS}
    # Only unlocked ids are meaningful; drop stray false flags
    known["achievements"] = {
        key: True for key, value in (known.get("achievements") or {}).items() if value
    }
    known["play_time"] = dict(known.get("play_time") or {})
    known["total_play_time"] = int(known.get("total_play_time") or 0)
    return GameRecord(**known)


def _record_to_dict(record: GameRecord) -> dict[str, Any]:
    """Convert a GameRecord to a serializable dict."""
    return asdict(record)


def _parse(data: Any) -> GameRecord | None:
    try:
        return _record_from_dict(data)
    except (TypeError, ValueError, AttributeError):
        return None


class GameLibrary:
    """
    Loads and saves the full game collection as one document.

    Stored entries that cannot be read as a GameRecord are never handed
    out, but ``save`` writes them back untouched so a hand-edited or
    damaged entry is not lost by an unrelated update.
    """

    def __init__(self, store: JsonStore) -> None:
        self._store = store

    def load(self) -> list[GameRecord]:
        """Return every stored game. Never ``None``; malformed entries are skipped."""
        records: list[GameRecord] = []
        for index, data in enumerate(self._store.get(_GAMES_KEY) or []):
            record = _parse(data)
            if record is None:
                logger.warning(f"Skipping malformed game entry #{index}")
                continue
            records.append(record)
        return records

    def unreadable_entries(self) -> list[Any]:
        """Raw stored entries that ``load`` skips."""
        return [data for data in self._store.get(_GAMES_KEY) or [] if _parse(data) is None]

    def save(self, records: list[GameRecord]) -> None:
        """Persist *records*. Raises ``StoreError`` if the write fails."""
        preserved = self.unreadable_entries()
        self._store.set(_GAMES_KEY, [_record_to_dict(r) for r in records] + preserved)
        logger.debug(f"Saved {len(records)} game(s)")
        if preserved:
            logger.warning(f"Kept {len(preserved)} unreadable game entry(s) as stored")
