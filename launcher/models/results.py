"""Operation result models returned to the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from launcher.models.achievement import AchievementDefinition
from launcher.models.game_record import GameRecord


class ErrorKind(StrEnum):
    """Why an operation did not succeed."""

    NOT_FOUND = "not_found"
    PERSISTENCE_FAILURE = "persistence_failure"
    MALFORMED_INPUT = "malformed_input"
    IMPORT_FAILED = "import_failed"
    LAUNCH_FAILED = "launch_failed"


@dataclass
class OperationResult:
    """Result of a user-facing operation. Failures are values, not exceptions."""

    success: bool = True
    message: str = ""
    error: ErrorKind | None = None
    game: GameRecord | None = None
    value: str | None = None
    total_time: int | None = None
    unlocked: list[AchievementDefinition] = field(default_factory=list)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> OperationResult:
        return cls(success=False, message=message, error=error)


@dataclass
class ReconcileResult:
    """Outcome of one reconciliation pass."""

    updated_records: list[GameRecord]
    newly_unlocked: list[AchievementDefinition] = field(default_factory=list)
