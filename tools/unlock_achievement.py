"""Inspect and force achievement state in a game library (developer tool).

Usage:
    python -m tools.unlock_achievement list [--data-dir DIR]
    python -m tools.unlock_achievement unlock <achievement_id> [--data-dir DIR]
    python -m tools.unlock_achievement check [--data-dir DIR]

``list`` prints progress for every achievement, ``unlock`` writes an
achievement's flag and reward onto every game, ``check`` runs the same
unlock check the application runs after each import or play session.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from launcher.config import Config
from launcher.core.achievement_service import AchievementService
from launcher.core.notifier import AchievementNotifier
from launcher.data.game_library import GameLibrary
from launcher.data.store import JsonStore
from launcher.logger import setup_logger


def open_store(data_dir: Path | None) -> JsonStore:
    config = Config(data_dir)
    return JsonStore(config.data_dir, "game-library", defaults={"games": []})


def build_service(store: JsonStore) -> AchievementService:
    return AchievementService(GameLibrary(store), AchievementNotifier())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect or force achievement state.")
    parser.add_argument("--data-dir", type=Path, default=None, help="Launcher data directory")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="Show progress for every achievement")
    unlock = sub.add_parser("unlock", help="Force-unlock an achievement on every game")
    unlock.add_argument("achievement_id")
    sub.add_parser("check", help="Unlock every achievement whose threshold is met")
    args = parser.parse_args(argv)

    setup_logger(level="WARNING")
    store = open_store(args.data_dir)
    service = build_service(store)

    if args.command == "list":
        print(f"Library: {store.path}")
        for entry in service.get_progress():
            mark = "x" if entry.is_unlocked else " "
            d = entry.definition
            print(f"[{mark}] {d.id:<24} {entry.current_value:>6} / {d.threshold:<6} {d.title}")
        return 0

    if args.command == "unlock":
        result = service.unlock_achievement(args.achievement_id)
    else:
        result = service.check_achievements()

    print(result.message)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
