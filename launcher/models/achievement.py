"""Achievement definition and progress models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class AchievementKind(StrEnum):
    """Metric an achievement threshold is measured against."""

    GAMES_ADDED = "games_added"  # number of games in the library
    TOTAL_PLAYTIME = "total_playtime"  # seconds, summed over all games
    GAMES_PLAYED = "games_played"  # distinct games with recorded playtime


class RewardKind(StrEnum):
    """Cosmetic field a reward overwrites on every game."""

    BACKGROUND = "background"
    ICON = "icon"


@dataclass(frozen=True)
class Reward:
    kind: RewardKind
    value: str  # colour hex for backgrounds, glyph for icons


@dataclass(frozen=True)
class AchievementDefinition:
    """Static catalog entry — never persisted."""

    id: str
    title: str
    description: str
    icon: str
    kind: AchievementKind
    threshold: int
    reward: Reward | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Achievement id cannot be empty")
        if self.threshold <= 0:
            raise ValueError(f"Invalid threshold for {self.id!r}: {self.threshold}")


@dataclass
class AchievementProgress:
    """Derived progress of one achievement over the current game collection."""

    definition: AchievementDefinition
    current_value: int = 0
    is_unlocked: bool = False

    @property
    def percent(self) -> int:
        """Whole percent towards the threshold, rounded down and clamped to 0-100."""
        return min(100, max(0, self.current_value * 100 // self.definition.threshold))
