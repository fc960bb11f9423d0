"""Main window — FluentWindow with library, achievements and stats pages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QSize
from qfluentwidgets import FluentIcon as FIF
from qfluentwidgets import FluentWindow

from launcher.i18n import t
from launcher.ui.pages.achievements_page import AchievementsPage
from launcher.ui.pages.library_page import LibraryPage
from launcher.ui.pages.stats_page import StatsPage
from launcher.ui.signals import LauncherSignals
from launcher.ui.utils import show_success

if TYPE_CHECKING:
    from launcher.context import AppContext
    from launcher.models.achievement import AchievementDefinition


class MainWindow(FluentWindow):
    """Application main window with sidebar navigation."""

    def __init__(self, ctx: AppContext) -> None:
        super().__init__()
        self._ctx = ctx
        self._signals = LauncherSignals(ctx.notifier, self)
        self._signals.achievement_unlocked.connect(self._on_achievement_unlocked)

        self.setWindowTitle("Game Launcher")
        self.setMinimumSize(QSize(960, 640))
        self.resize(1200, 800)

        self._init_pages()

    def _init_pages(self) -> None:
        """Initialize navigation pages."""
        self._library_page = LibraryPage(self._ctx, self._signals, self)
        self.addSubInterface(self._library_page, FIF.GAME, t("nav.library"))

        self._achievements_page = AchievementsPage(self._ctx, self._signals, self)
        self.addSubInterface(self._achievements_page, FIF.CERTIFICATE, t("nav.achievements"))

        self._stats_page = StatsPage(self._ctx, self._signals, self)
        self.addSubInterface(self._stats_page, FIF.PIE_SINGLE, t("nav.stats"))

    def _on_achievement_unlocked(self, definition: AchievementDefinition) -> None:
        show_success(
            self,
            t("achievements.unlocked_title"),
            f"{definition.icon} {definition.title}",
        )

    def closeEvent(self, event) -> None:  # noqa: N802
        self._ctx.play_session.stop()
        self._signals.disconnect_notifier()
        super().closeEvent(event)
