"""Library statistics derived from game records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone

from launcher.models.game_record import GameRecord


@dataclass
class DailyTotal:
    day: str  # YYYY-MM-DD
    seconds: int = 0


@dataclass
class LibraryStats:
    """Aggregate view of the whole library."""

    total_games: int = 0
    total_play_time: int = 0
    played_games: int = 0
    total_sessions: int = 0  # number of (game, day) buckets with playtime
    most_played: GameRecord | None = None
    last_played: GameRecord | None = None
    daily: list[DailyTotal] = field(default_factory=list)
    by_playtime: list[GameRecord] = field(default_factory=list)


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def library_stats(
    records: list[GameRecord],
    today: date | None = None,
    days: int = 7,
) -> LibraryStats:
    """Summarise *records*; ``daily`` covers the last *days* days, oldest first."""
    today = today or datetime.now(tz=timezone.utc).date()

    by_playtime = sorted(records, key=lambda r: r.total_play_time, reverse=True)
    played = [r for r in by_playtime if r.total_play_time > 0]
    stamped = [r for r in records if r.last_played]

    daily = []
    for offset in range(days - 1, -1, -1):
        day = (today - timedelta(days=offset)).isoformat()
        daily.append(DailyTotal(day, sum(r.play_time.get(day, 0) for r in records)))

    return LibraryStats(
        total_games=len(records),
        total_play_time=sum(r.total_play_time for r in records),
        played_games=sum(1 for r in records if r.was_played),
        total_sessions=sum(len(r.play_time) for r in records),
        most_played=played[0] if played else None,
        last_played=max(stamped, key=lambda r: _parse_timestamp(r.last_played)) if stamped else None,
        daily=daily,
        by_playtime=by_playtime,
    )
