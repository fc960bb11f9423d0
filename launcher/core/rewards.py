"""Reward applicator — writes unlock flags and cosmetic rewards onto every game."""

from __future__ import annotations

from launcher.models.achievement import AchievementDefinition, RewardKind
from launcher.models.game_record import GameRecord


def apply_reward(records: list[GameRecord], definition: AchievementDefinition) -> list[GameRecord]:
    """Flag *definition* as unlocked on every record and apply its reward in place.

    Idempotent. Rewards overwrite the cosmetic field unconditionally, so
    the last applied reward of a given kind wins.
    """
    reward = definition.reward
    for record in records:
        record.achievements[definition.id] = True
        if reward is None:
            continue
        if reward.kind == RewardKind.BACKGROUND:
            record.background = reward.value
        elif reward.kind == RewardKind.ICON:
            record.icon = reward.value
    return records
