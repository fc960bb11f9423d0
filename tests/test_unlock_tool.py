"""Tests for the unlock_achievement developer tool."""

from __future__ import annotations

from pathlib import Path

import pytest

from launcher.data.game_library import GameLibrary
from launcher.data.store import JsonStore
from launcher.models.game_record import GameRecord
from tools.unlock_achievement import main


@pytest.fixture
def library(tmp_path: Path) -> GameLibrary:
    library = GameLibrary(JsonStore(tmp_path, "game-library", defaults={"games": []}))
    library.save([GameRecord(id=f"game_{n}", name=f"Game {n}", path=f"/g/{n}") for n in range(3)])
    return library


class TestUnlockTool:
    def test_list(self, library: GameLibrary, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        assert main(["--data-dir", str(tmp_path), "list"]) == 0
        out = capsys.readouterr().out
        assert "[x] games_collector_bronze" in out
        assert "[ ] games_collector_silver" in out

    def test_check_unlocks(self, library: GameLibrary, tmp_path: Path) -> None:
        assert main(["--data-dir", str(tmp_path), "check"]) == 0
        reloaded = GameLibrary(JsonStore(tmp_path, "game-library"))
        assert all(r.has_achievement("games_collector_bronze") for r in reloaded.load())

    def test_unlock(self, library: GameLibrary, tmp_path: Path) -> None:
        assert main(["--data-dir", str(tmp_path), "unlock", "casual_gamer"]) == 0
        reloaded = GameLibrary(JsonStore(tmp_path, "game-library"))
        assert all(r.icon == "🏆" for r in reloaded.load())

    def test_unlock_unknown(self, library: GameLibrary, tmp_path: Path) -> None:
        assert main(["--data-dir", str(tmp_path), "unlock", "nope"]) == 1

    def test_list_shows_library_path(self, library: GameLibrary, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        main(["--data-dir", str(tmp_path), "list"])
        assert f"Library: {tmp_path / 'game-library.json'}" in capsys.readouterr().out
