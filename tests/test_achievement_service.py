"""Tests for AchievementService check and unlock flows."""

from __future__ import annotations

from pathlib import Path

import pytest

from launcher.core.achievement_service import AchievementService
from launcher.core.catalog import REWARD_COLORS
from launcher.core.notifier import AchievementNotifier
from launcher.data.game_library import GameLibrary
from launcher.data.store import JsonStore, StoreError
from launcher.models.game_record import GameRecord
from launcher.models.results import ErrorKind


@pytest.fixture
def store(tmp_path: Path) -> JsonStore:
    return JsonStore(tmp_path, "game-library", defaults={"games": []})


@pytest.fixture
def library(store: JsonStore) -> GameLibrary:
    return GameLibrary(store)


@pytest.fixture
def events() -> list[tuple[str, object]]:
    return []


@pytest.fixture
def service(library: GameLibrary, events: list) -> AchievementService:
    notifier = AchievementNotifier()
    notifier.subscribe_unlocked(lambda d: events.append(("unlocked", d.id)))
    notifier.subscribe_records(lambda r: events.append(("records", len(r))))
    return AchievementService(library, notifier)


def _games(count: int) -> list[GameRecord]:
    return [GameRecord(id=f"game_{n}", name=f"Game {n}", path=f"/g/{n}") for n in range(count)]


def _fail_write(data) -> None:
    raise StoreError("read-only file system")


class TestCheckAchievements:
    def test_nothing_new(self, service: AchievementService, library: GameLibrary, events: list) -> None:
        library.save(_games(2))
        result = service.check_achievements()
        assert result.success
        assert result.unlocked == []
        assert result.message == "No new achievements"
        assert events == []

    def test_unlock_persists_then_notifies(
        self, service: AchievementService, library: GameLibrary, events: list
    ) -> None:
        library.save(_games(3))
        result = service.check_achievements()
        assert result.success
        assert [d.id for d in result.unlocked] == ["games_collector_bronze"]
        assert events == [("unlocked", "games_collector_bronze"), ("records", 3)]
        stored = library.load()
        assert all(r.has_achievement("games_collector_bronze") for r in stored)
        assert all(r.background == REWARD_COLORS[0] for r in stored)

    def test_second_check_is_silent(self, service: AchievementService, library: GameLibrary, events: list) -> None:
        library.save(_games(3))
        service.check_achievements()
        events.clear()
        assert service.check_achievements().unlocked == []
        assert events == []

    def test_persistence_failure_skips_notifications(
        self,
        service: AchievementService,
        library: GameLibrary,
        store: JsonStore,
        events: list,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        library.save(_games(3))
        monkeypatch.setattr(store, "_write", _fail_write)
        result = service.check_achievements()
        assert not result.success
        assert result.error == ErrorKind.PERSISTENCE_FAILURE
        assert events == []
        assert all(not r.achievements for r in library.load())

    def test_failed_unlock_is_retried_next_check(
        self,
        service: AchievementService,
        library: GameLibrary,
        store: JsonStore,
        events: list,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        library.save(_games(3))
        monkeypatch.setattr(store, "_write", _fail_write)
        service.check_achievements()
        monkeypatch.undo()
        result = service.check_achievements()
        assert [d.id for d in result.unlocked] == ["games_collector_bronze"]


class TestProgressAndUnlock:
    def test_progress_reads_library(self, service: AchievementService, library: GameLibrary) -> None:
        library.save(_games(2))
        progress = {p.definition.id: p for p in service.get_progress()}
        assert progress["games_collector_bronze"].current_value == 2

    def test_catalog(self, service: AchievementService) -> None:
        assert len(service.get_catalog()) == 9

    def test_unlock_unknown_id(self, service: AchievementService) -> None:
        result = service.unlock_achievement("speedrunner")
        assert not result.success
        assert result.error == ErrorKind.NOT_FOUND

    def test_unlock_applies_reward(self, service: AchievementService, library: GameLibrary, events: list) -> None:
        library.save(_games(1))
        result = service.unlock_achievement("gaming_enthusiast")
        assert result.success
        record = library.load()[0]
        assert record.icon == "🥇"
        assert record.has_achievement("gaming_enthusiast")
        assert events == [("records", 1)]

    def test_reconcile_does_not_persist(self, service: AchievementService, library: GameLibrary) -> None:
        library.save(_games(3))
        records = library.load()
        result = service.reconcile(records)
        assert len(result.newly_unlocked) == 1
        assert all(not r.achievements for r in library.load())
