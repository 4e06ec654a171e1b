"""Statistics over completed poker sessions."""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, date, timedelta, tzinfo

from poker_tracker.domain.sessions import SessionRecord, ensure_aware
from poker_tracker.domain.stats import (
    NOT_AVAILABLE,
    LocationSummary,
    MonthlySummary,
    SessionStats,
    WeeklySummary,
)
from poker_tracker.services.sessions import SessionRepository


@dataclass
class _Bucket:
    profit: float = 0
    minutes: int = 0

    def add(self, session: SessionRecord) -> None:
        self.profit += session.profit or 0
        self.minutes += session.duration or 0

    @property
    def hours(self) -> float:
        return _round1(self.minutes / 60)

    @property
    def profit_per_hour(self) -> float:
        if self.minutes <= 0:
            return 0
        return self.profit / self.minutes * 60


@dataclass
class StatsService:
    """Service for computing session stats in a fixed timezone."""

    repository: SessionRepository
    timezone: tzinfo = UTC

    def get_stats(self) -> SessionStats:
        """Return overall totals and best performers."""
        return compute_stats(self.repository.list_sessions(), self.timezone)

    def get_weekly(self) -> list[WeeklySummary]:
        """Return per-week totals, most recent first."""
        return summarize_by_week(self.repository.list_sessions(), self.timezone)

    def get_monthly(self) -> list[MonthlySummary]:
        """Return per-month totals, most recent first."""
        return summarize_by_month(self.repository.list_sessions(), self.timezone)

    def get_locations(self) -> list[LocationSummary]:
        """Return per-location totals, best hourly rate first."""
        return summarize_by_location(self.repository.list_sessions())


def completed_sessions(sessions: Iterable[SessionRecord]) -> list[SessionRecord]:
    """Return ended sessions whose profit and duration are known."""
    return [
        session
        for session in sessions
        if not session.is_active
        and session.profit is not None
        and session.duration is not None
    ]


def week_start(session: SessionRecord, tz: tzinfo = UTC) -> date:
    """Return the Sunday on or before the session's local start date."""
    day = ensure_aware(session.start_time).astimezone(tz).date()
    # weekday() is 0 for Monday, so Sunday maps to 0 days back
    return day - timedelta(days=(day.weekday() + 1) % 7)


def month_key(session: SessionRecord, tz: tzinfo = UTC) -> str:
    """Return the session's local start month as ``YYYY-MM``."""
    day = ensure_aware(session.start_time).astimezone(tz).date()
    return f"{day.year:04d}-{day.month:02d}"


def compute_stats(sessions: Iterable[SessionRecord], tz: tzinfo = UTC) -> SessionStats:
    """Return totals, the most profitable week and the best location."""
    completed = completed_sessions(sessions)
    if not completed:
        return SessionStats(
            total_hours=0,
            total_profit=0,
            most_profitable_week=NOT_AVAILABLE,
            best_location=NOT_AVAILABLE,
        )

    total_minutes = sum(session.duration or 0 for session in completed)
    total_profit = sum(session.profit or 0 for session in completed)

    most_profitable_week = NOT_AVAILABLE
    highest_profit = -math.inf
    for week, bucket in _group_by_week(completed, tz).items():
        if bucket.profit > highest_profit:
            highest_profit = bucket.profit
            most_profitable_week = week.isoformat()

    best_location = NOT_AVAILABLE
    best_rate = -math.inf
    for location, bucket in _group_by_location(completed).items():
        if bucket.profit_per_hour > best_rate:
            best_rate = bucket.profit_per_hour
            best_location = location

    return SessionStats(
        total_hours=_round1(total_minutes / 60),
        total_profit=total_profit,
        most_profitable_week=most_profitable_week,
        best_location=best_location,
    )


def summarize_by_week(
    sessions: Iterable[SessionRecord], tz: tzinfo = UTC
) -> list[WeeklySummary]:
    """Return per-week totals sorted by week start, most recent first."""
    buckets = _group_by_week(completed_sessions(sessions), tz)
    summaries = [
        WeeklySummary(week=week, total_hours=bucket.hours, total_profit=bucket.profit)
        for week, bucket in buckets.items()
    ]
    return sorted(summaries, key=lambda summary: summary.week, reverse=True)


def summarize_by_month(
    sessions: Iterable[SessionRecord], tz: tzinfo = UTC
) -> list[MonthlySummary]:
    """Return per-month totals sorted by month, most recent first."""
    buckets: dict[str, _Bucket] = {}
    for session in completed_sessions(sessions):
        buckets.setdefault(month_key(session, tz), _Bucket()).add(session)
    summaries = [
        MonthlySummary(
            month=month, total_hours=bucket.hours, total_profit=bucket.profit
        )
        for month, bucket in buckets.items()
    ]
    return sorted(summaries, key=lambda summary: summary.month, reverse=True)


def summarize_by_location(sessions: Iterable[SessionRecord]) -> list[LocationSummary]:
    """Return per-location totals sorted by hourly rate, best first.

    Locations are compared verbatim, so case and whitespace differences
    produce separate entries.
    """
    buckets = _group_by_location(completed_sessions(sessions))
    summaries = [
        LocationSummary(
            location=location,
            total_hours=bucket.hours,
            total_profit=bucket.profit,
            profit_per_hour=_round1(bucket.profit_per_hour),
        )
        for location, bucket in buckets.items()
    ]
    return sorted(summaries, key=lambda summary: summary.profit_per_hour, reverse=True)


def _group_by_week(
    sessions: list[SessionRecord], tz: tzinfo
) -> dict[date, _Bucket]:
    buckets: dict[date, _Bucket] = {}
    for session in sessions:
        buckets.setdefault(week_start(session, tz), _Bucket()).add(session)
    return buckets


def _group_by_location(sessions: list[SessionRecord]) -> dict[str, _Bucket]:
    buckets: dict[str, _Bucket] = {}
    for session in sessions:
        buckets.setdefault(session.location, _Bucket()).add(session)
    return buckets


def _round1(value: float) -> float:
    """Round half up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10
