"""Qt bridge for notifier events."""

from __future__ import annotations

from PySide6.QtCore import QObject, Signal

from launcher.core.notifier import AchievementNotifier


class LauncherSignals(QObject):
    """Re-emits notifier callbacks as Qt signals so widgets can connect to them."""

    achievement_unlocked = Signal(object)  # AchievementDefinition
    records_updated = Signal(object)  # list[GameRecord]

    def __init__(self, notifier: AchievementNotifier, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._unsubscribe = [
            notifier.subscribe_unlocked(self.achievement_unlocked.emit),
            notifier.subscribe_records(self.records_updated.emit),
        ]

    def disconnect_notifier(self) -> None:
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe.clear()
