"""Tests for the achievement catalog and progress evaluation."""

from __future__ import annotations

import pytest

from launcher.core.catalog import ACHIEVEMENTS, REWARD_COLORS, check_unique_ids, find_achievement
from launcher.core.progress import evaluate, is_globally_unlocked, metric_value
from launcher.models.achievement import (
    AchievementDefinition,
    AchievementKind,
    AchievementProgress,
)
from launcher.models.game_record import GameRecord


def _game(n: int, seconds: int = 0, played: bool = False, **kwargs) -> GameRecord:
    return GameRecord(
        id=f"game_{n}",
        name=f"Game {n}",
        path=f"/games/game_{n}",
        total_play_time=seconds,
        last_played="2024-05-01T10:00:00+00:00" if played else None,
        **kwargs,
    )


def _progress(catalog_id: str, records: list[GameRecord]) -> AchievementProgress:
    return next(p for p in evaluate(ACHIEVEMENTS, records) if p.definition.id == catalog_id)


class TestCatalog:
    def test_ids_unique(self) -> None:
        ids = [d.id for d in ACHIEVEMENTS]
        assert len(ids) == len(set(ids)) == 9

    def test_duplicate_ids_rejected(self) -> None:
        with pytest.raises(ValueError):
            check_unique_ids([ACHIEVEMENTS[0], ACHIEVEMENTS[0]])

    def test_find_achievement(self) -> None:
        assert find_achievement("casual_gamer").threshold == 3600
        assert find_achievement("no_such_thing") is None

    def test_collector_rewards_are_backgrounds(self) -> None:
        silver = find_achievement("games_collector_silver")
        assert silver.reward.value == REWARD_COLORS[1]

    def test_definition_rejects_non_positive_threshold(self) -> None:
        with pytest.raises(ValueError):
            AchievementDefinition(
                id="broken",
                title="Broken",
                description="",
                icon="",
                kind=AchievementKind.GAMES_ADDED,
                threshold=0,
            )


class TestMetrics:
    def test_games_added_counts_records(self) -> None:
        assert metric_value(AchievementKind.GAMES_ADDED, [_game(1), _game(2)]) == 2

    def test_total_playtime_sums_seconds(self) -> None:
        records = [_game(1, 1200), _game(2, 2400)]
        assert metric_value(AchievementKind.TOTAL_PLAYTIME, records) == 3600

    def test_games_played_needs_timestamp_and_time(self) -> None:
        records = [
            _game(1, 30, played=True),
            _game(2, 0, played=True),  # launched but no time recorded
            _game(3, 30, played=False),
        ]
        assert metric_value(AchievementKind.GAMES_PLAYED, records) == 1


class TestEvaluate:
    def test_empty_library(self) -> None:
        progress = evaluate(ACHIEVEMENTS, [])
        assert [p.definition.id for p in progress] == [d.id for d in ACHIEVEMENTS]
        assert all(p.current_value == 0 and not p.is_unlocked for p in progress)

    def test_playtime_boundary(self) -> None:
        assert not _progress("casual_gamer", [_game(1, 3599)]).is_unlocked
        assert _progress("casual_gamer", [_game(1, 3600)]).is_unlocked

    def test_progress_is_raw_metric_below_threshold(self) -> None:
        entry = _progress("games_collector_bronze", [_game(1), _game(2)])
        assert entry.current_value == 2
        assert entry.percent == 66

    def test_unlocked_flag_short_circuits_metric(self) -> None:
        # Collector bronze earned earlier, then games were deleted
        records = [_game(1, achievements={"games_collector_bronze": True})]
        entry = _progress("games_collector_bronze", records)
        assert entry.is_unlocked
        assert entry.current_value == 3
        assert entry.percent == 100

    def test_flag_on_any_record_counts(self) -> None:
        records = [_game(1), _game(2, achievements={"casual_gamer": True})]
        assert is_globally_unlocked(records, "casual_gamer")
        assert not is_globally_unlocked(records, "dedicated_gamer")

    def test_does_not_mutate_records(self) -> None:
        records = [_game(n, 4000, played=True) for n in range(3)]
        evaluate(ACHIEVEMENTS, records)
        assert all(r.achievements == {} for r in records)

    def test_percent_is_clamped(self) -> None:
        entry = _progress("casual_gamer", [_game(1, 3 * 3600)])
        assert entry.current_value == 3 * 3600
        assert entry.percent == 100

    def test_locked_achievement_never_shows_full(self) -> None:
        entry = _progress("casual_gamer", [_game(1, 3599)])
        assert not entry.is_unlocked
        assert entry.percent == 99
