"""Application context — service container for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from launcher.config import Config
    from launcher.core.achievement_service import AchievementService
    from launcher.core.game_manager import GameManager
    from launcher.core.notifier import AchievementNotifier
    from launcher.core.play_session import PlaySession
    from launcher.data.game_library import GameLibrary


@dataclass
class AppContext:
    """
    Central service container.

    All pages receive this at construction time.
    """

    config: Config
    library: GameLibrary
    notifier: AchievementNotifier
    achievements: AchievementService
    game_manager: GameManager
    play_session: PlaySession
