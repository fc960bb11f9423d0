"""Progress evaluator — maps the game collection to per-achievement progress.

Pure: never mutates records, safe to call as often as the UI likes.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from launcher.models.achievement import AchievementDefinition, AchievementKind, AchievementProgress
from launcher.models.game_record import GameRecord


def is_globally_unlocked(records: Iterable[GameRecord], achievement_id: str) -> bool:
    """An achievement is unlocked if any record carries its flag."""
    return any(record.has_achievement(achievement_id) for record in records)


def metric_value(kind: AchievementKind, records: Sequence[GameRecord]) -> int:
    """Raw metric for *kind* over the whole collection."""
    if kind == AchievementKind.GAMES_ADDED:
        return len(records)
    if kind == AchievementKind.TOTAL_PLAYTIME:
        return sum(record.total_play_time for record in records)
    if kind == AchievementKind.GAMES_PLAYED:
        return sum(1 for record in records if record.was_played)
    raise ValueError(f"Unknown achievement kind: {kind!r}")


def evaluate(
    catalog: Sequence[AchievementDefinition],
    records: Sequence[GameRecord],
) -> list[AchievementProgress]:
    """Return one progress entry per catalog definition, in catalog order.

    Already-unlocked achievements report full progress without looking at
    the metric, so deleting games never shows a drop in unlocked progress.
    """
    progress: list[AchievementProgress] = []
    for definition in catalog:
        if is_globally_unlocked(records, definition.id):
            progress.append(AchievementProgress(definition, definition.threshold, True))
            continue
        value = metric_value(definition.kind, records)
        progress.append(AchievementProgress(definition, value, value >= definition.threshold))
    return progress
