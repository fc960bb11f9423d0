"""Stats page — playtime summary and per-game breakdown."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QHeaderView, QTableWidgetItem, QVBoxLayout, QWidget
from qfluentwidgets import BodyLabel, SubtitleLabel, TableWidget

from launcher.core.stats import library_stats
from launcher.i18n import t
from launcher.utils import format_playtime

if TYPE_CHECKING:
    from launcher.context import AppContext
    from launcher.models.game_record import GameRecord
    from launcher.ui.signals import LauncherSignals


class StatsPage(QWidget):
    def __init__(
        self,
        ctx: AppContext,
        signals: LauncherSignals,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("statsPage")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 16, 24, 16)
        layout.addWidget(SubtitleLabel(t("stats.title"), self))

        self._total = BodyLabel(self)
        self._most_played = BodyLabel(self)
        self._last_played = BodyLabel(self)
        self._sessions = BodyLabel(self)
        self._week = BodyLabel(self)
        for label in (self._total, self._most_played, self._last_played, self._sessions, self._week):
            layout.addWidget(label)

        self._table = TableWidget(self)
        self._table.setColumnCount(2)
        self._table.setHorizontalHeaderLabels([t("library.col_name"), t("library.col_playtime")])
        self._table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self._table.setEditTriggers(TableWidget.EditTrigger.NoEditTriggers)
        layout.addWidget(self._table, 1)

        signals.records_updated.connect(self._on_records_updated)
        self._on_records_updated(ctx.game_manager.list_games())

    def _on_records_updated(self, records: list[GameRecord]) -> None:
        stats = library_stats(records)

        self._total.setText(t("stats.total_playtime", value=format_playtime(stats.total_play_time)))
        if stats.most_played:
            most = f"{stats.most_played.name} ({format_playtime(stats.most_played.total_play_time)})"
        else:
            most = t("stats.none_played")
        self._most_played.setText(t("stats.most_played", value=most))
        last = stats.last_played.name if stats.last_played else t("library.never")
        self._last_played.setText(t("stats.last_played", value=last))
        self._sessions.setText(t("stats.sessions", count=stats.total_sessions))
        week = sum(day.seconds for day in stats.daily)
        self._week.setText(t("stats.last_7_days", value=format_playtime(week)))

        self._table.setRowCount(0)
        for game in stats.by_playtime:
            row = self._table.rowCount()
            self._table.insertRow(row)
            self._table.setItem(row, 0, QTableWidgetItem(game.name))
            self._table.setItem(row, 1, QTableWidgetItem(format_playtime(game.total_play_time)))
