"""Game launcher — opens HTML games in the browser or spawns executables."""

from __future__ import annotations

import os
import platform
import subprocess
import webbrowser
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from launcher.core.importer import find_executable, find_html_entry
from launcher.models.results import ErrorKind, OperationResult

if TYPE_CHECKING:
    from launcher.config import Config
    from launcher.models.game_record import GameRecord


class GameLauncher:
    """Starts a game from its extraction directory."""

    def __init__(self, config: Config) -> None:
        self._config = config

    def launch(self, record: GameRecord) -> OperationResult:
        game_dir = Path(record.path)
        if not game_dir.is_dir():
            return OperationResult.failure(
                ErrorKind.LAUNCH_FAILED, f"Game directory not found: {game_dir}"
            )

        html_entry = find_html_entry(game_dir, self._config.html_entry_points)
        if html_entry is not None:
            return self._open_html(html_entry)

        executable = find_executable(game_dir, self._config.executable_extensions)
        if executable is not None:
            return self._spawn(executable)

        return OperationResult.failure(
            ErrorKind.LAUNCH_FAILED,
            "Could not find a playable file (HTML or executable) in the game directory",
        )

    def _open_html(self, entry: Path) -> OperationResult:
        if not webbrowser.open(entry.resolve().as_uri()):
            return OperationResult.failure(ErrorKind.LAUNCH_FAILED, "No browser available")
        logger.info(f"Opened HTML game: {entry}")
        return OperationResult(message=f"Game launched successfully from {entry}")

    def _spawn(self, executable: Path) -> OperationResult:
        try:
            if platform.system() == "Windows":
                os.startfile(str(executable))  # noqa: S606
            else:
                subprocess.Popen(  # noqa: S603
                    [str(executable)],
                    cwd=str(executable.parent),
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                    start_new_session=True,
                )
        except OSError as e:
            logger.error(f"Failed to launch {executable}: {e}")
            return OperationResult.failure(ErrorKind.LAUNCH_FAILED, f"Error launching game: {e}")
        logger.info(f"Spawned executable: {executable}")
        return OperationResult(message=f"Game launched successfully from executable: {executable}")
