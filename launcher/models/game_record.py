"""Game record model — one imported game bundle."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GameRecord:
    """Game index record — stored in game-library.json."""

    id: str  # game_<hex>, assigned at import
    name: str
    path: str  # extraction directory
    import_date: str = ""
    background: str = ""
    icon: str = ""
    play_time: dict[str, int] = field(default_factory=dict)  # YYYY-MM-DD → seconds
    last_played: str | None = None
    total_play_time: int = 0  # seconds
    achievements: dict[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Game id cannot be empty")
        if self.total_play_time < 0:
            raise ValueError("total_play_time cannot be negative")
        if any(seconds < 0 for seconds in self.play_time.values()):
            raise ValueError("daily play time cannot be negative")

    def has_achievement(self, achievement_id: str) -> bool:
        return bool(self.achievements.get(achievement_id))

    @property
    def was_played(self) -> bool:
        """Whether the game has both a play timestamp and recorded playtime."""
        return bool(self.last_played) and self.total_play_time > 0
