"""Unlock reconciler — finds achievements crossing from locked to unlocked."""

from __future__ import annotations

from typing import Sequence

from loguru import logger

from launcher.core.progress import evaluate, is_globally_unlocked
from launcher.core.rewards import apply_reward
from launcher.models.achievement import AchievementDefinition
from launcher.models.game_record import GameRecord
from launcher.models.results import ReconcileResult


def reconcile_and_apply(
    catalog: Sequence[AchievementDefinition],
    records: list[GameRecord],
) -> ReconcileResult:
    """Detect newly unlocked achievements and apply their rewards to *records*.

    An achievement is new when its progress is unlocked but no record
    carries its flag yet. Rewards are applied in catalog order, mutating
    *records* in place; the caller is responsible for persisting them.
    """
    already_unlocked = {d.id for d in catalog if is_globally_unlocked(records, d.id)}
    newly_unlocked = [
        entry.definition
        for entry in evaluate(catalog, records)
        if entry.is_unlocked and entry.definition.id not in already_unlocked
    ]

    for definition in newly_unlocked:
        apply_reward(records, definition)
        logger.info(f"Achievement unlocked: {definition.title} ({definition.id})")

    return ReconcileResult(updated_records=records, newly_unlocked=newly_unlocked)
