"""Built-in achievement catalog.

Order is display order only; every achievement is evaluated on its own.
"""

from __future__ import annotations

from launcher.models.achievement import (
    AchievementDefinition,
    AchievementKind,
    Reward,
    RewardKind,
)

# Background colours granted as rewards
REWARD_COLORS: tuple[str, ...] = (
    "#FF9B54",  # Coral
    "#00B2CA",  # Bright Teal
    "#7D5BA6",  # Medium Purple
    "#FFC857",  # Golden Yellow
    "#E63946",  # Imperial Red
    "#06D6A0",  # Caribbean Green
    "#118AB2",  # Blue Sapphire
    "#FF5400",  # Safety Orange
    "#3A5A40",  # Dark Forest Green
    "#D62828",  # Fire Engine Red
)

# Icons granted as rewards
REWARD_ICONS: tuple[str, ...] = ("🏆", "🎖️", "🥇", "⭐", "💎", "👑", "🌟", "🔮", "💫", "✨")

_HOUR = 60 * 60


def _background(index: int) -> Reward:
    return Reward(RewardKind.BACKGROUND, REWARD_COLORS[index])


def _icon(index: int) -> Reward:
    return Reward(RewardKind.ICON, REWARD_ICONS[index])


ACHIEVEMENTS: tuple[AchievementDefinition, ...] = (
    AchievementDefinition(
        id="games_collector_bronze",
        title="Game Collector: Bronze",
        description="Add 3 games to your collection",
        icon="🎮",
        kind=AchievementKind.GAMES_ADDED,
        threshold=3,
        reward=_background(0),
    ),
    AchievementDefinition(
        id="games_collector_silver",
        title="Game Collector: Silver",
        description="Add 5 games to your collection",
        icon="🎮",
        kind=AchievementKind.GAMES_ADDED,
        threshold=5,
        reward=_background(1),
    ),
    AchievementDefinition(
        id="games_collector_gold",
        title="Game Collector: Gold",
        description="Add 10 games to your collection",
        icon="🎮",
        kind=AchievementKind.GAMES_ADDED,
        threshold=10,
        reward=_background(2),
    ),
    AchievementDefinition(
        id="casual_gamer",
        title="Casual Gamer",
        description="Play games for a total of 1 hour",
        icon="⏱️",
        kind=AchievementKind.TOTAL_PLAYTIME,
        threshold=1 * _HOUR,
        reward=_icon(0),
    ),
    AchievementDefinition(
        id="dedicated_gamer",
        title="Dedicated Gamer",
        description="Play games for a total of 5 hours",
        icon="⏱️",
        kind=AchievementKind.TOTAL_PLAYTIME,
        threshold=5 * _HOUR,
        reward=_icon(1),
    ),
    AchievementDefinition(
        id="gaming_enthusiast",
        title="Gaming Enthusiast",
        description="Play games for a total of 10 hours",
        icon="⏱️",
        kind=AchievementKind.TOTAL_PLAYTIME,
        threshold=10 * _HOUR,
        reward=_icon(2),
    ),
    AchievementDefinition(
        id="game_explorer_bronze",
        title="Game Explorer: Bronze",
        description="Play 3 different games",
        icon="🔍",
        kind=AchievementKind.GAMES_PLAYED,
        threshold=3,
        reward=_background(3),
    ),
    AchievementDefinition(
        id="game_explorer_silver",
        title="Game Explorer: Silver",
        description="Play 5 different games",
        icon="🔍",
        kind=AchievementKind.GAMES_PLAYED,
        threshold=5,
        reward=_background(4),
    ),
    AchievementDefinition(
        id="game_explorer_gold",
        title="Game Explorer: Gold",
        description="Play 10 different games",
        icon="🔍",
        kind=AchievementKind.GAMES_PLAYED,
        threshold=10,
        reward=_icon(3),
    ),
)


def check_unique_ids(catalog: tuple[AchievementDefinition, ...] | list[AchievementDefinition]) -> None:
    """Raise ``ValueError`` if two definitions share an id."""
    seen: set[str] = set()
    for definition in catalog:
        if definition.id in seen:
            raise ValueError(f"Duplicate achievement id: {definition.id!r}")
        seen.add(definition.id)


check_unique_ids(ACHIEVEMENTS)


def get_catalog() -> tuple[AchievementDefinition, ...]:
    """Return the built-in catalog in display order."""
    return ACHIEVEMENTS


def find_achievement(
    achievement_id: str,
    catalog: tuple[AchievementDefinition, ...] | list[AchievementDefinition] = ACHIEVEMENTS,
) -> AchievementDefinition | None:
    for definition in catalog:
        if definition.id == achievement_id:
            return definition
    return None
