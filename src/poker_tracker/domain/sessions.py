"""Domain models for poker sessions."""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from uuid import UUID


class GameType(StrEnum):
    """Kind of poker game played in a session."""

    CASH = "CASH"
    TOURNAMENT = "TOURNAMENT"


class Environment(StrEnum):
    """Where a session was played."""

    ONLINE = "ONLINE"
    LIVE = "LIVE"


@dataclass(frozen=True)
class SessionRecord:
    """Represents a persisted poker session.

    Derived fields stay ``None`` until the session is ended. A session that
    was ended without a cash-out keeps ``profit`` unset, which is distinct
    from breaking even.
    """

    id: UUID
    start_time: datetime
    game_type: GameType
    environment: Environment
    location: str
    buy_in: float
    is_active: bool = True
    end_time: datetime | None = None
    cash_out: float | None = None
    duration: int | None = None
    profit: float | None = None
    profit_per_hour: float | None = None


@dataclass(frozen=True)
class NewSession:
    """Fields supplied when starting a session."""

    game_type: GameType
    environment: Environment
    location: str
    buy_in: float
    start_time: datetime | None = None


@dataclass(frozen=True)
class SessionEnd:
    """End event for an active session."""

    end_time: datetime | None = None
    cash_out: float | None = None
    location: str | None = None


@dataclass(frozen=True)
class SessionPatch:
    """Edits allowed after creation, applied without recomputation."""

    location: str | None = None
    cash_out: float | None = None


def ensure_aware(value: datetime) -> datetime:
    """Treat naive timestamps as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
