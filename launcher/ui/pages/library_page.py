"""Library page — imported games with import, play and customisation actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QColorDialog,
    QFileDialog,
    QHBoxLayout,
    QHeaderView,
    QInputDialog,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)
from qfluentwidgets import FluentIcon as FIF
from qfluentwidgets import (
    MessageBox,
    PrimaryPushButton,
    PushButton,
    SearchLineEdit,
    TableWidget,
)

from launcher.i18n import t
from launcher.models.achievement import RewardKind
from launcher.ui.utils import show_error, show_result
from launcher.utils import format_playtime

if TYPE_CHECKING:
    from launcher.context import AppContext
    from launcher.models.game_record import GameRecord
    from launcher.ui.signals import LauncherSignals


class LibraryPage(QWidget):
    """Game library view."""

    def __init__(
        self,
        ctx: AppContext,
        signals: LauncherSignals,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._ctx = ctx
        self._games: list[GameRecord] = []
        self.setObjectName("libraryPage")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 16, 24, 16)

        # Toolbar
        toolbar = QHBoxLayout()
        self._search = SearchLineEdit(self)
        self._search.setPlaceholderText(t("library.search_placeholder"))
        self._search.textChanged.connect(lambda _text: self._refresh_table())
        toolbar.addWidget(self._search, 1)

        self._import_btn = PrimaryPushButton(FIF.ADD, t("library.import"), self)
        self._import_btn.clicked.connect(self._on_import)
        toolbar.addWidget(self._import_btn)

        self._play_btn = PushButton(FIF.PLAY, t("library.play"), self)
        self._play_btn.clicked.connect(self._on_play)
        toolbar.addWidget(self._play_btn)

        self._stop_btn = PushButton(FIF.PAUSE, t("library.stop"), self)
        self._stop_btn.clicked.connect(self._on_stop)
        self._stop_btn.setEnabled(False)
        toolbar.addWidget(self._stop_btn)

        self._color_btn = PushButton(FIF.PALETTE, t("library.background"), self)
        self._color_btn.clicked.connect(self._on_pick_background)
        toolbar.addWidget(self._color_btn)

        self._icon_btn = PushButton(FIF.EDIT, t("library.icon"), self)
        self._icon_btn.clicked.connect(self._on_pick_icon)
        toolbar.addWidget(self._icon_btn)

        self._delete_btn = PushButton(FIF.DELETE, t("library.delete"), self)
        self._delete_btn.clicked.connect(self._on_delete)
        toolbar.addWidget(self._delete_btn)

        layout.addLayout(toolbar)

        # Table
        self._table = TableWidget(self)
        self._table.setColumnCount(4)
        self._table.setHorizontalHeaderLabels(
            [t("library.col_icon"), t("library.col_name"), t("library.col_playtime"), t("library.col_last_played")]
        )
        self._table.horizontalHeader().setSectionResizeMode(
            1, QHeaderView.ResizeMode.Stretch
        )
        self._table.setSelectionBehavior(TableWidget.SelectionBehavior.SelectRows)
        self._table.setEditTriggers(TableWidget.EditTrigger.NoEditTriggers)
        layout.addWidget(self._table)

        # Periodic playtime flush while a session is running
        self._flush_timer = QTimer(self)
        self._flush_timer.setInterval(ctx.config.playtime_flush_seconds * 1000)
        self._flush_timer.timeout.connect(self._ctx.play_session.flush)

        signals.records_updated.connect(self._on_records_updated)
        self._on_records_updated(ctx.game_manager.list_games())

    # ── Table ──

    def _on_records_updated(self, records: list[GameRecord]) -> None:
        self._games = list(records)
        self._refresh_table()

    def _refresh_table(self) -> None:
        filter_text = self._search.text().lower()
        self._table.setRowCount(0)
        for game in self._games:
            if filter_text and filter_text not in game.name.lower():
                continue
            row = self._table.rowCount()
            self._table.insertRow(row)

            icon_item = QTableWidgetItem(game.icon)
            if game.background.startswith("#"):
                icon_item.setBackground(QColor(game.background))
            self._table.setItem(row, 0, icon_item)

            name_item = QTableWidgetItem(game.name)
            name_item.setData(Qt.ItemDataRole.UserRole, game.id)
            self._table.setItem(row, 1, name_item)
            self._table.setItem(row, 2, QTableWidgetItem(format_playtime(game.total_play_time)))
            self._table.setItem(row, 3, QTableWidgetItem(game.last_played or t("library.never")))

    def _selected_game_id(self) -> str | None:
        row = self._table.currentRow()
        item = self._table.item(row, 1) if row >= 0 else None
        if item is None:
            show_error(self, t("library.no_selection"))
            return None
        return item.data(Qt.ItemDataRole.UserRole)

    # ── Actions ──

    def _on_import(self) -> None:
        paths, _ = QFileDialog.getOpenFileNames(
            self, t("library.import_dialog"), "", "ZIP Files (*.zip)"
        )
        if not paths:
            return
        result = self._ctx.game_manager.import_games(paths)
        show_result(self, t("library.import"), result)

    def _on_play(self) -> None:
        game_id = self._selected_game_id()
        if game_id is None:
            return
        result = self._ctx.game_manager.launch_game(game_id)
        if not result.success:
            show_result(self, t("library.play"), result)
            return
        self._ctx.play_session.start(game_id)
        self._flush_timer.start()
        self._stop_btn.setEnabled(True)

    def _on_stop(self) -> None:
        self._flush_timer.stop()
        self._ctx.play_session.stop()
        self._stop_btn.setEnabled(False)

    def _on_pick_background(self) -> None:
        game_id = self._selected_game_id()
        if game_id is None:
            return
        color = QColorDialog.getColor(QColor("#FFFFFF"), self, t("library.background"))
        if not color.isValid():
            return
        result = self._ctx.game_manager.set_style(game_id, RewardKind.BACKGROUND, color.name().upper())
        show_result(self, t("library.background"), result)

    def _on_pick_icon(self) -> None:
        game_id = self._selected_game_id()
        if game_id is None:
            return
        text, ok = QInputDialog.getText(self, t("library.icon"), t("library.icon_prompt"))
        if not ok or not text.strip():
            return
        result = self._ctx.game_manager.set_style(game_id, RewardKind.ICON, text.strip())
        show_result(self, t("library.icon"), result)

    def _on_delete(self) -> None:
        game_id = self._selected_game_id()
        if game_id is None:
            return
        box = MessageBox(t("library.delete"), t("library.delete_confirm"), self.window())
        if not box.exec():
            return
        if self._ctx.play_session.game_id == game_id:
            self._on_stop()
        result = self._ctx.game_manager.delete_game(game_id)
        show_result(self, t("library.delete"), result)
