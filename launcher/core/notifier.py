"""Notification emitter — fire-and-forget events for the presentation layer."""

from __future__ import annotations

from typing import Callable

from loguru import logger

from launcher.models.achievement import AchievementDefinition
from launcher.models.game_record import GameRecord

# Type aliases for subscriber callbacks
UnlockedCallback = Callable[[AchievementDefinition], None]
RecordsCallback = Callable[[list[GameRecord]], None]


class AchievementNotifier:
    """Dispatches ``achievement_unlocked`` and ``records_updated`` events.

    Subscribers that raise are logged and skipped; delivery is never
    retried and never affects what has been persisted.
    """

    def __init__(self) -> None:
        self._unlocked: list[UnlockedCallback] = []
        self._records: list[RecordsCallback] = []

    def subscribe_unlocked(self, callback: UnlockedCallback) -> Callable[[], None]:
        """Register *callback*; returns a function that unsubscribes it."""
        self._unlocked.append(callback)
        return lambda: self._remove(self._unlocked, callback)

    def subscribe_records(self, callback: RecordsCallback) -> Callable[[], None]:
        """Register *callback*; returns a function that unsubscribes it."""
        self._records.append(callback)
        return lambda: self._remove(self._records, callback)

    @staticmethod
    def _remove(callbacks: list, callback: Callable) -> None:
        if callback in callbacks:
            callbacks.remove(callback)

    def emit_unlocked(self, definition: AchievementDefinition) -> None:
        for callback in list(self._unlocked):
            try:
                callback(definition)
            except Exception as e:
                logger.warning(f"achievement_unlocked subscriber failed for {definition.id}: {e}")

    def emit_records_updated(self, records: list[GameRecord]) -> None:
        for callback in list(self._records):
            try:
                callback(records)
            except Exception as e:
                logger.warning(f"records_updated subscriber failed: {e}")

    def announce(self, newly_unlocked: list[AchievementDefinition], records: list[GameRecord]) -> None:
        """Emit one unlock event per definition, then one records update."""
        for definition in newly_unlocked:
            self.emit_unlocked(definition)
        self.emit_records_updated(records)
