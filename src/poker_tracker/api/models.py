"""Pydantic models for the HTTP API payloads."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from poker_tracker.domain.sessions import (
    Environment,
    GameType,
    NewSession,
    SessionEnd,
    SessionPatch,
    SessionRecord,
)
from poker_tracker.domain.stats import (
    LocationSummary,
    MonthlySummary,
    SessionStats,
    WeeklySummary,
)


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateSessionRequest(CamelModel):
    """Payload for starting a session."""

    start_time: datetime | None = None
    game_type: GameType
    environment: Environment
    location: str
    buy_in: float = Field(ge=0)

    def to_domain(self) -> NewSession:
        return NewSession(
            start_time=self.start_time,
            game_type=self.game_type,
            environment=self.environment,
            location=self.location,
            buy_in=self.buy_in,
        )


class EndSessionRequest(CamelModel):
    """Payload for ending a session."""

    end_time: datetime | None = None
    cash_out: float | None = Field(default=None, ge=0)
    location: str | None = None

    def to_domain(self) -> SessionEnd:
        return SessionEnd(
            end_time=self.end_time, cash_out=self.cash_out, location=self.location
        )


class UpdateSessionRequest(CamelModel):
    """Payload for editing a session."""

    location: str | None = None
    cash_out: float | None = Field(default=None, ge=0)

    def to_domain(self) -> SessionPatch:
        return SessionPatch(location=self.location, cash_out=self.cash_out)


class SessionResponse(CamelModel):
    """Poker session as returned by the API."""

    id: UUID
    start_time: datetime
    end_time: datetime | None = None
    game_type: GameType
    environment: Environment
    location: str
    buy_in: float
    cash_out: float | None = None
    duration: int | None = None
    profit: float | None = None
    profit_per_hour: float | None = None
    is_active: bool

    @classmethod
    def from_record(cls, record: SessionRecord) -> "SessionResponse":
        return cls(
            id=record.id,
            start_time=record.start_time,
            end_time=record.end_time,
            game_type=record.game_type,
            environment=record.environment,
            location=record.location,
            buy_in=record.buy_in,
            cash_out=record.cash_out,
            duration=record.duration,
            profit=record.profit,
            profit_per_hour=record.profit_per_hour,
            is_active=record.is_active,
        )


class StatsResponse(CamelModel):
    """Overall session statistics."""

    total_hours: float
    total_profit: float
    most_profitable_week: str
    best_location: str

    @classmethod
    def from_domain(cls, stats: SessionStats) -> "StatsResponse":
        return cls(
            total_hours=stats.total_hours,
            total_profit=stats.total_profit,
            most_profitable_week=stats.most_profitable_week,
            best_location=stats.best_location,
        )


class WeeklySummaryResponse(CamelModel):
    """Totals for one week."""

    week: date
    total_hours: float
    total_profit: float

    @classmethod
    def from_domain(cls, summary: WeeklySummary) -> "WeeklySummaryResponse":
        return cls(
            week=summary.week,
            total_hours=summary.total_hours,
            total_profit=summary.total_profit,
        )


class MonthlySummaryResponse(CamelModel):
    """Totals for one month."""

    month: str
    total_hours: float
    total_profit: float

    @classmethod
    def from_domain(cls, summary: MonthlySummary) -> "MonthlySummaryResponse":
        return cls(
            month=summary.month,
            total_hours=summary.total_hours,
            total_profit=summary.total_profit,
        )


class LocationSummaryResponse(CamelModel):
    """Totals and hourly rate for one location."""

    location: str
    total_hours: float
    total_profit: float
    profit_per_hour: float

    @classmethod
    def from_domain(cls, summary: LocationSummary) -> "LocationSummaryResponse":
        return cls(
            location=summary.location,
            total_hours=summary.total_hours,
            total_profit=summary.total_profit,
            profit_per_hour=summary.profit_per_hour,
        )
