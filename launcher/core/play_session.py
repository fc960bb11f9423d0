"""Play session tracker — turns wall-clock time into playtime increments."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Callable

from loguru import logger

from launcher.models.results import ErrorKind

if TYPE_CHECKING:
    from launcher.core.game_manager import GameManager
    from launcher.models.results import OperationResult


class PlaySession:
    """Tracks one running game and records elapsed whole seconds on flush.

    Fractions of a second are carried over to the next flush so nothing
    is lost across periodic flushes.
    """

    def __init__(self, manager: GameManager, clock: Callable[[], float] = time.monotonic) -> None:
        self._manager = manager
        self._clock = clock
        self._game_id: str | None = None
        self._last_tick = 0.0
        self._carry = 0.0

    @property
    def game_id(self) -> str | None:
        return self._game_id

    @property
    def is_active(self) -> bool:
        return self._game_id is not None

    def start(self, game_id: str) -> None:
        if self.is_active:
            self.stop()
        self._game_id = game_id
        self._last_tick = self._clock()
        self._carry = 0.0
        logger.debug(f"Play session started for {game_id}")

    def flush(self) -> OperationResult | None:
        """Record time played since the last flush. ``None`` if nothing to record."""
        if self._game_id is None:
            return None
        now = self._clock()
        elapsed = now - self._last_tick + self._carry
        seconds = int(elapsed)
        if seconds <= 0:
            return None
        self._last_tick = now
        self._carry = elapsed - seconds

        result = self._manager.track_playtime(self._game_id, seconds)
        if not result.success:
            logger.warning(f"Failed to record playtime for {self._game_id}: {result.message}")
            if result.error == ErrorKind.NOT_FOUND:
                self._game_id = None
        return result

    def stop(self) -> OperationResult | None:
        result = self.flush()
        if self._game_id is not None:
            logger.debug(f"Play session ended for {self._game_id}")
        self._game_id = None
        self._carry = 0.0
        return result
