"""Achievement service — catalog, progress and unlock checks for the UI."""

from __future__ import annotations

from typing import Sequence

from loguru import logger

from launcher.core.catalog import ACHIEVEMENTS, check_unique_ids, find_achievement
from launcher.core.notifier import AchievementNotifier
from launcher.core.progress import evaluate
from launcher.core.reconciler import reconcile_and_apply
from launcher.core.rewards import apply_reward
from launcher.data.game_library import GameLibrary
from launcher.data.store import StoreError
from launcher.models.achievement import AchievementDefinition, AchievementProgress
from launcher.models.game_record import GameRecord
from launcher.models.results import ErrorKind, OperationResult, ReconcileResult


class AchievementService:
    """
    Presentation boundary of the achievement engine.

    ``check_achievements`` is the only path that persists reconciliation
    results: rewards are saved first, notifications go out afterwards.
    """

    def __init__(
        self,
        library: GameLibrary,
        notifier: AchievementNotifier,
        catalog: Sequence[AchievementDefinition] = ACHIEVEMENTS,
    ) -> None:
        check_unique_ids(list(catalog))
        self._library = library
        self._notifier = notifier
        self._catalog = tuple(catalog)

    def get_catalog(self) -> list[AchievementDefinition]:
        return list(self._catalog)

    def get_progress(self, records: list[GameRecord] | None = None) -> list[AchievementProgress]:
        if records is None:
            records = self._library.load()
        return evaluate(self._catalog, records)

    def reconcile(self, records: list[GameRecord]) -> ReconcileResult:
        """Reconcile *records* in place without persisting or notifying."""
        return reconcile_and_apply(self._catalog, records)

    def check_achievements(self) -> OperationResult:
        """Unlock every newly satisfied achievement, persist, then notify."""
        records = self._library.load()
        result = reconcile_and_apply(self._catalog, records)
        if not result.newly_unlocked:
            return OperationResult(message="No new achievements")

        try:
            self._library.save(result.updated_records)
        except StoreError as e:
            return OperationResult.failure(
                ErrorKind.PERSISTENCE_FAILURE, f"Error saving achievements: {e}"
            )

        self._notifier.announce(result.newly_unlocked, result.updated_records)
        titles = ", ".join(d.title for d in result.newly_unlocked)
        return OperationResult(
            message=f"Achievements unlocked: {titles}",
            unlocked=list(result.newly_unlocked),
        )

    def unlock_achievement(self, achievement_id: str) -> OperationResult:
        """Force-unlock an achievement on every game (developer tool)."""
        definition = find_achievement(achievement_id, self._catalog)
        if definition is None:
            return OperationResult.failure(ErrorKind.NOT_FOUND, "Achievement not found")

        records = apply_reward(self._library.load(), definition)
        try:
            self._library.save(records)
        except StoreError as e:
            return OperationResult.failure(
                ErrorKind.PERSISTENCE_FAILURE, f"Error unlocking achievement: {e}"
            )

        logger.info(f"Manually unlocked achievement {definition.id}")
        self._notifier.emit_records_updated(records)
        return OperationResult(message=f"Achievement unlocked: {definition.title}")
