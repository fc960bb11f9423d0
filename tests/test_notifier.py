"""Tests for AchievementNotifier event dispatch."""

from __future__ import annotations

from unittest.mock import MagicMock

from launcher.core.catalog import find_achievement
from launcher.core.notifier import AchievementNotifier
from launcher.models.game_record import GameRecord


class TestAchievementNotifier:
    def test_unlocked_subscribers_receive_definition(self) -> None:
        notifier = AchievementNotifier()
        callback = MagicMock()
        notifier.subscribe_unlocked(callback)
        definition = find_achievement("casual_gamer")
        notifier.emit_unlocked(definition)
        callback.assert_called_once_with(definition)

    def test_unsubscribe(self) -> None:
        notifier = AchievementNotifier()
        callback = MagicMock()
        unsubscribe = notifier.subscribe_records(callback)
        unsubscribe()
        unsubscribe()  # second call is a no-op
        notifier.emit_records_updated([])
        callback.assert_not_called()

    def test_failing_subscriber_does_not_block_others(self) -> None:
        notifier = AchievementNotifier()
        broken = MagicMock(side_effect=RuntimeError("boom"))
        healthy = MagicMock()
        notifier.subscribe_records(broken)
        notifier.subscribe_records(healthy)
        records = [GameRecord(id="game_1", name="Snake", path="/g")]
        notifier.emit_records_updated(records)
        healthy.assert_called_once_with(records)

    def test_announce_order(self) -> None:
        notifier = AchievementNotifier()
        events: list[tuple[str, object]] = []
        notifier.subscribe_unlocked(lambda d: events.append(("unlocked", d.id)))
        notifier.subscribe_records(lambda r: events.append(("records", len(r))))
        bronze = find_achievement("games_collector_bronze")
        silver = find_achievement("games_collector_silver")
        notifier.announce([bronze, silver], [])
        assert events == [
            ("unlocked", "games_collector_bronze"),
            ("unlocked", "games_collector_silver"),
            ("records", 0),
        ]
