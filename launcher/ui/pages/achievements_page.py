"""Achievements page — catalog with live progress bars."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget
from qfluentwidgets import (
    BodyLabel,
    CaptionLabel,
    CardWidget,
    ProgressBar,
    ScrollArea,
    StrongBodyLabel,
    SubtitleLabel,
)

from launcher.i18n import t
from launcher.models.achievement import AchievementKind, RewardKind
from launcher.utils import format_playtime

if TYPE_CHECKING:
    from launcher.context import AppContext
    from launcher.models.achievement import AchievementProgress
    from launcher.models.game_record import GameRecord
    from launcher.ui.signals import LauncherSignals


def _format_value(progress: AchievementProgress) -> str:
    definition = progress.definition
    if definition.kind == AchievementKind.TOTAL_PLAYTIME:
        return f"{format_playtime(progress.current_value)} / {format_playtime(definition.threshold)}"
    return f"{progress.current_value} / {definition.threshold}"


def _format_reward(progress: AchievementProgress) -> str:
    reward = progress.definition.reward
    if reward is None:
        return ""
    if reward.kind == RewardKind.BACKGROUND:
        return t("achievements.reward_background", value=reward.value)
    return t("achievements.reward_icon", value=reward.value)


class _AchievementCard(CardWidget):
    """One achievement: glyph, title, description, progress and reward."""

    def __init__(self, progress: AchievementProgress, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        definition = progress.definition

        root = QHBoxLayout(self)
        root.setContentsMargins(16, 10, 16, 10)
        root.setSpacing(14)

        glyph = QLabel(definition.icon if progress.is_unlocked else "🔒", self)
        glyph.setStyleSheet("font-size: 28px;")
        root.addWidget(glyph)

        body = QVBoxLayout()
        body.addWidget(StrongBodyLabel(definition.title, self))
        body.addWidget(BodyLabel(definition.description, self))

        bar = ProgressBar(self)
        bar.setRange(0, 100)
        bar.setValue(progress.percent)
        body.addWidget(bar)

        status = t("achievements.unlocked") if progress.is_unlocked else _format_value(progress)
        reward = _format_reward(progress)
        body.addWidget(CaptionLabel(f"{status}    {reward}".strip(), self))
        root.addLayout(body, 1)


class AchievementsPage(ScrollArea):
    """Scrollable list of achievement cards, rebuilt on every records update."""

    def __init__(
        self,
        ctx: AppContext,
        signals: LauncherSignals,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._ctx = ctx
        self.setObjectName("achievementsPage")
        self.setWidgetResizable(True)

        container = QWidget()
        self._layout = QVBoxLayout(container)
        self._layout.setContentsMargins(24, 16, 24, 16)
        self._layout.setSpacing(10)

        self._header = SubtitleLabel(t("nav.achievements"), container)
        self._layout.addWidget(self._header)

        self._cards: list[_AchievementCard] = []
        self.setWidget(container)

        signals.records_updated.connect(self._on_records_updated)
        self._on_records_updated(ctx.game_manager.list_games())

    def _on_records_updated(self, records: list[GameRecord]) -> None:
        progress = self._ctx.achievements.get_progress(records)

        for card in self._cards:
            self._layout.removeWidget(card)
            card.deleteLater()
        self._cards.clear()

        unlocked = sum(1 for p in progress if p.is_unlocked)
        self._header.setText(t("achievements.header", unlocked=unlocked, total=len(progress)))
        for entry in progress:
            card = _AchievementCard(entry, self.widget())
            self._layout.addWidget(card)
            self._cards.append(card)
