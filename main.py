"""Application entry point — wires services and launches the UI."""

from __future__ import annotations

import sys

from launcher.config import Config, get_config
from launcher.context import AppContext
from launcher.core.achievement_service import AchievementService
from launcher.core.game_launcher import GameLauncher
from launcher.core.game_manager import GameManager
from launcher.core.notifier import AchievementNotifier
from launcher.core.play_session import PlaySession
from launcher.data.game_library import GameLibrary
from launcher.data.store import JsonStore
from launcher.i18n import set_language
from launcher.logger import setup_logger


def create_context(config: Config | None = None) -> AppContext:
    """Wire all services and return an AppContext."""
    config = config or get_config()

    # Logger
    setup_logger(config.data_dir / "logs")

    # Data
    store = JsonStore(config.data_dir, "game-library", defaults={"games": []})
    library = GameLibrary(store)

    # Core services
    notifier = AchievementNotifier()
    achievements = AchievementService(library, notifier)
    game_manager = GameManager(config, library, achievements, notifier, GameLauncher(config))
    play_session = PlaySession(game_manager)

    return AppContext(
        config=config,
        library=library,
        notifier=notifier,
        achievements=achievements,
        game_manager=game_manager,
        play_session=play_session,
    )


def main() -> int:
    """Application entry point."""
    from PySide6.QtWidgets import QApplication

    from launcher.ui.main_window import MainWindow
    from launcher.ui.theme import apply_theme

    app = QApplication(sys.argv)
    app.setApplicationName("Game Launcher")
    app.setOrganizationName("GameLauncher")

    # Wire services
    ctx = create_context()

    apply_theme(ctx.config.theme)
    set_language(ctx.config.language)

    # Pick up achievements earned while the app was closed
    ctx.achievements.check_achievements()

    # Create and show main window
    window = MainWindow(ctx)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
