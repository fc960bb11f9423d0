"""Tests for bundle extraction, entry point discovery and launching."""

from __future__ import annotations

import zipfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from launcher.config import Config
from launcher.core.game_launcher import GameLauncher
from launcher.core.importer import BundleError, extract_bundle, find_executable, find_html_entry
from launcher.models.game_record import GameRecord
from launcher.models.results import ErrorKind


def _zip(path: Path, files: dict[str, str]) -> Path:
    with zipfile.ZipFile(path, "w") as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    return path


class TestExtractBundle:
    def test_extracts_tree(self, tmp_path: Path) -> None:
        bundle = _zip(tmp_path / "game.zip", {"index.html": "<html/>", "js/app.js": "run()"})
        dest = extract_bundle(bundle, tmp_path / "out")
        assert (dest / "index.html").read_text() == "<html/>"
        assert (dest / "js" / "app.js").is_file()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(BundleError):
            extract_bundle(tmp_path / "missing.zip", tmp_path / "out")
        assert not (tmp_path / "out").exists()

    def test_corrupt_file_cleans_destination(self, tmp_path: Path) -> None:
        bundle = tmp_path / "bad.zip"
        bundle.write_bytes(b"PK but not really")
        with pytest.raises(BundleError):
            extract_bundle(bundle, tmp_path / "out")
        assert not (tmp_path / "out").exists()

    def test_uncreatable_destination(self, tmp_path: Path) -> None:
        bundle = _zip(tmp_path / "game.zip", {"index.html": "<html/>"})
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        with pytest.raises(BundleError):
            extract_bundle(bundle, blocker / "game_1")


class TestEntryPoints:
    def test_html_priority(self, tmp_path: Path) -> None:
        (tmp_path / "main.html").write_text("")
        (tmp_path / "game.html").write_text("")
        assert find_html_entry(tmp_path) == tmp_path / "game.html"

    def test_no_html(self, tmp_path: Path) -> None:
        (tmp_path / "readme.txt").write_text("")
        assert find_html_entry(tmp_path) is None

    def test_executable_at_root(self, tmp_path: Path) -> None:
        (tmp_path / "run.sh").write_text("")
        assert find_executable(tmp_path) == tmp_path / "run.sh"

    def test_executable_one_level_down(self, tmp_path: Path) -> None:
        (tmp_path / "bin").mkdir()
        (tmp_path / "bin" / "Game.EXE").write_text("")
        assert find_executable(tmp_path) == tmp_path / "bin" / "Game.EXE"

    def test_executable_not_searched_deeper(self, tmp_path: Path) -> None:
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        (deep / "game.exe").write_text("")
        assert find_executable(tmp_path) is None


class TestGameLauncher:
    @pytest.fixture
    def launcher(self, tmp_path: Path) -> GameLauncher:
        return GameLauncher(Config(config_dir=tmp_path / "data"))

    def _record(self, path: Path) -> GameRecord:
        return GameRecord(id="game_1", name="Snake", path=str(path))

    def test_missing_directory(self, launcher: GameLauncher, tmp_path: Path) -> None:
        result = launcher.launch(self._record(tmp_path / "gone"))
        assert result.error == ErrorKind.LAUNCH_FAILED

    def test_opens_html_in_browser(self, launcher: GameLauncher, tmp_path: Path) -> None:
        (tmp_path / "index.html").write_text("")
        with patch("launcher.core.game_launcher.webbrowser.open", return_value=True) as opener:
            result = launcher.launch(self._record(tmp_path))
        assert result.success
        opener.assert_called_once_with((tmp_path / "index.html").resolve().as_uri())

    def test_spawns_executable(self, launcher: GameLauncher, tmp_path: Path) -> None:
        (tmp_path / "start.sh").write_text("")
        with (
            patch("launcher.core.game_launcher.platform.system", return_value="Linux"),
            patch("launcher.core.game_launcher.subprocess.Popen") as popen,
        ):
            result = launcher.launch(self._record(tmp_path))
        assert result.success
        assert popen.call_args.args[0] == [str(tmp_path / "start.sh")]

    def test_spawn_failure(self, launcher: GameLauncher, tmp_path: Path) -> None:
        (tmp_path / "start.sh").write_text("")
        with (
            patch("launcher.core.game_launcher.platform.system", return_value="Linux"),
            patch(
                "launcher.core.game_launcher.subprocess.Popen",
                MagicMock(side_effect=PermissionError("not executable")),
            ),
        ):
            result = launcher.launch(self._record(tmp_path))
        assert result.error == ErrorKind.LAUNCH_FAILED

    def test_nothing_playable(self, launcher: GameLauncher, tmp_path: Path) -> None:
        (tmp_path / "notes.txt").write_text("")
        result = launcher.launch(self._record(tmp_path))
        assert result.error == ErrorKind.LAUNCH_FAILED
