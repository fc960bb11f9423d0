"""Game manager — import, customise, track and remove games."""

from __future__ import annotations

import shutil
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterable
from uuid import uuid4

from loguru import logger

from launcher.core.importer import BundleError, extract_bundle, find_html_entry
from launcher.data.store import StoreError
from launcher.models.achievement import RewardKind
from launcher.models.game_record import GameRecord
from launcher.models.results import ErrorKind, OperationResult

if TYPE_CHECKING:
    from launcher.config import Config
    from launcher.core.achievement_service import AchievementService
    from launcher.core.game_launcher import GameLauncher
    from launcher.core.notifier import AchievementNotifier
    from launcher.data.game_library import GameLibrary

_STYLE_FIELDS = {kind.value for kind in RewardKind}


class GameManager:
    """
    Game management orchestrator.

    Every mutation is one read-modify-write of the whole collection,
    serialized by a re-entrant lock. Mutations that can move achievement
    metrics run an achievement check once their own write has succeeded.
    """

    def __init__(
        self,
        config: Config,
        library: GameLibrary,
        achievements: AchievementService,
        notifier: AchievementNotifier,
        game_launcher: GameLauncher | None = None,
    ) -> None:
        self._config = config
        self._library = library
        self._achievements = achievements
        self._notifier = notifier
        self._launcher = game_launcher
        self._lock = threading.RLock()

    # ── Queries ──

    def list_games(self) -> list[GameRecord]:
        return self._library.load()

    def get_game(self, game_id: str) -> GameRecord | None:
        for record in self._library.load():
            if record.id == game_id:
                return record
        return None

    # ── Import ──

    def import_game(self, zip_path: Path | str) -> OperationResult:
        """Import a single zipped game bundle."""
        result = self.import_games([zip_path])
        if result.success and result.game is not None:
            result.message = f"Successfully imported {result.game.name}"
        return result

    def import_games(self, zip_paths: Iterable[Path | str]) -> OperationResult:
        """Import several bundles with a single save and a single achievement check."""
        with self._lock:
            imported: list[GameRecord] = []
            errors: list[str] = []
            for zip_path in zip_paths:
                try:
                    imported.append(self._extract(Path(zip_path)))
                except BundleError as e:
                    logger.error(f"Error importing game: {e}")
                    errors.append(str(e))

            if not imported:
                return OperationResult.failure(
                    ErrorKind.IMPORT_FAILED,
                    f"Error importing game: {'; '.join(errors) or 'no bundles given'}",
                )

            records = self._library.load()
            records.extend(imported)
            try:
                self._library.save(records)
            except StoreError as e:
                for record in imported:
                    shutil.rmtree(record.path, ignore_errors=True)
                return OperationResult.failure(
                    ErrorKind.PERSISTENCE_FAILURE, f"Error importing game: {e}"
                )

            check = self._refresh_achievements()
            logger.info(f"Imported {len(imported)} game(s), {len(errors)} failed")

            message = f"Imported {len(imported)} game(s)"
            if errors:
                message += f", {len(errors)} failed"
            return OperationResult(
                message=message,
                game=self.get_game(imported[-1].id),
                unlocked=check.unlocked,
            )

    def _extract(self, zip_path: Path) -> GameRecord:
        game_id = f"game_{uuid4().hex[:12]}"
        game_dir = extract_bundle(zip_path, self._config.games_dir / game_id)
        if find_html_entry(game_dir, self._config.html_entry_points) is None:
            logger.warning(f"No HTML entry point found in {zip_path.name}")
        return GameRecord(
            id=game_id,
            name=zip_path.stem,
            path=str(game_dir),
            import_date=datetime.now(tz=timezone.utc).isoformat(),
            background=self._config.default_background,
            icon=self._config.default_icon,
        )

    # ── Removal ──

    def delete_game(self, game_id: str) -> OperationResult:
        """Remove a game and its files.

        Achievement flags carried only by this game disappear with it.
        """
        with self._lock:
            records = self._library.load()
            target = next((r for r in records if r.id == game_id), None)
            if target is None:
                return OperationResult.failure(ErrorKind.NOT_FOUND, "Game not found")

            remaining = [r for r in records if r.id != game_id]
            try:
                self._library.save(remaining)
            except StoreError as e:
                return OperationResult.failure(
                    ErrorKind.PERSISTENCE_FAILURE, f"Error deleting game: {e}"
                )

            self._remove_files(target)
            self._notifier.emit_records_updated(remaining)
            logger.info(f"Deleted game {target.name} ({game_id})")
            return OperationResult(message=f"Successfully deleted {target.name}")

    @staticmethod
    def _remove_files(record: GameRecord) -> None:
        shutil.rmtree(record.path, ignore_errors=True)
        # Custom artwork may point at files; colours and glyphs never do
        for value in (record.background, record.icon):
            candidate = Path(value) if value else None
            if candidate and candidate.is_absolute() and candidate.is_file():
                try:
                    candidate.unlink()
                except OSError as e:
                    logger.warning(f"Failed to remove artwork {candidate}: {e}")

    # ── Customisation ──

    def update_settings(self, game_id: str, settings: dict[str, str]) -> OperationResult:
        """Merge cosmetic settings (``background`` / ``icon``) into a game."""
        unknown = sorted(set(settings) - _STYLE_FIELDS)
        if unknown:
            return OperationResult.failure(
                ErrorKind.MALFORMED_INPUT, f"Unsupported settings: {', '.join(unknown)}"
            )
        if not all(isinstance(v, str) for v in settings.values()):
            return OperationResult.failure(ErrorKind.MALFORMED_INPUT, "Settings must be strings")

        def mutate(record: GameRecord) -> None:
            for key, value in settings.items():
                setattr(record, key, value)

        result = self._modify(game_id, mutate, self._notify_records)
        if result.success and result.game is not None:
            result.message = f"Successfully updated {result.game.name} settings"
        return result

    def set_style(self, game_id: str, kind: RewardKind | str, value: str) -> OperationResult:
        """Set a game's background colour or icon."""
        try:
            style = RewardKind(kind)
        except ValueError:
            return OperationResult.failure(ErrorKind.MALFORMED_INPUT, f"Unknown style: {kind!r}")

        result = self._modify(game_id, lambda r: setattr(r, style.value, value), self._notify_records)
        if result.success:
            result.message = f"Successfully updated game {style.value}"
            result.value = value
        return result

    # ── Playtime ──

    def track_playtime(
        self, game_id: str, seconds: int, now: datetime | None = None
    ) -> OperationResult:
        """Add *seconds* of play to today's bucket and the game's total."""
        if isinstance(seconds, bool) or not isinstance(seconds, int) or seconds < 0:
            return OperationResult.failure(
                ErrorKind.MALFORMED_INPUT, f"Invalid playtime delta: {seconds!r}"
            )
        now = now or datetime.now(tz=timezone.utc)
        today = now.date().isoformat()

        def mutate(record: GameRecord) -> None:
            record.play_time[today] = record.play_time.get(today, 0) + seconds
            record.total_play_time += seconds
            record.last_played = now.isoformat()

        result = self._modify(game_id, mutate, self._refresh_achievements)
        if result.success and result.game is not None:
            result.message = f"Updated playtime for {result.game.name}"
            result.total_time = result.game.total_play_time
        return result

    # ── Launching ──

    def launch_game(self, game_id: str) -> OperationResult:
        record = self.get_game(game_id)
        if record is None:
            return OperationResult.failure(ErrorKind.NOT_FOUND, "Game not found")
        if self._launcher is None:
            return OperationResult.failure(ErrorKind.LAUNCH_FAILED, "No launcher configured")
        return self._launcher.launch(record)

    # ── Internal helpers ──

    def _modify(
        self,
        game_id: str,
        mutate: Callable[[GameRecord], None],
        after_save: Callable[[], OperationResult | None],
    ) -> OperationResult:
        """Load, mutate one game, save, then run *after_save*."""
        with self._lock:
            records = self._library.load()
            record = next((r for r in records if r.id == game_id), None)
            if record is None:
                return OperationResult.failure(ErrorKind.NOT_FOUND, "Game not found")

            mutate(record)
            try:
                self._library.save(records)
            except StoreError as e:
                return OperationResult.failure(
                    ErrorKind.PERSISTENCE_FAILURE, f"Error updating {record.name}: {e}"
                )

            followup = after_save()
            unlocked = followup.unlocked if followup is not None else []
            # Rewards may have changed the record's cosmetics
            return OperationResult(game=self.get_game(game_id), unlocked=unlocked)

    def _notify_records(self) -> None:
        self._notifier.emit_records_updated(self._library.load())

    def _refresh_achievements(self) -> OperationResult:
        """Run an achievement check; emit ``records_updated`` if it did not."""
        check = self._achievements.check_achievements()
        if not check.success:
            logger.warning(f"Achievement check failed: {check.message}")
        if not check.unlocked:
            self._notify_records()
        return check
