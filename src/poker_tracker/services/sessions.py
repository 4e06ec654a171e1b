"""Poker session lifecycle."""

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from poker_tracker.domain.errors import SessionNotFoundError, SessionValidationError
from poker_tracker.domain.sessions import (
    NewSession,
    SessionEnd,
    SessionPatch,
    SessionRecord,
    ensure_aware,
)

_logger = logging.getLogger(__name__)


class SessionRepository(Protocol):
    """Persistence interface for poker sessions."""

    def create_session(self, payload: NewSession) -> SessionRecord:
        """Create a new active session and return it."""

    def get_session(self, session_id: UUID) -> SessionRecord | None:
        """Return a session by id, if present."""

    def list_sessions(self) -> list[SessionRecord]:
        """Return all sessions, most recent start first."""

    def list_active_sessions(self) -> list[SessionRecord]:
        """Return active sessions, most recent start first."""

    def update_session(
        self, session_id: UUID, changes: dict[str, object]
    ) -> SessionRecord | None:
        """Apply field changes and return the updated session, if present."""

    def delete_session(self, session_id: UUID) -> SessionRecord | None:
        """Delete a session and return it, if present."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class SessionService:
    """Application service for the poker session lifecycle."""

    repository: SessionRepository
    clock: Callable[[], datetime] = _utc_now

    def start_session(self, payload: NewSession) -> SessionRecord:
        """Create an active session, stamping the start time if missing."""
        if not payload.location.strip():
            raise SessionValidationError("Location is required")
        if payload.buy_in < 0:
            raise SessionValidationError("Buy-in must not be negative")
        start_time = ensure_aware(payload.start_time or self.clock())
        session = self.repository.create_session(
            replace(payload, start_time=start_time)
        )
        _logger.info(
            "Session started: id=%s location=%s buy_in=%s",
            session.id,
            session.location,
            session.buy_in,
        )
        return session

    def list_sessions(self) -> list[SessionRecord]:
        """Return all sessions."""
        return self.repository.list_sessions()

    def list_active_sessions(self) -> list[SessionRecord]:
        """Return sessions that have not been ended."""
        return self.repository.list_active_sessions()

    def get_session(self, session_id: UUID) -> SessionRecord:
        """Return a session or raise when it does not exist."""
        session = self.repository.get_session(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def end_session(self, session_id: UUID, payload: SessionEnd) -> SessionRecord:
        """End an active session and persist the derived results."""
        session = self.get_session(session_id)
        ended = end_session(session, payload, self.clock())
        changes: dict[str, object] = {
            "end_time": ended.end_time,
            "duration": ended.duration,
            "profit": ended.profit,
            "profit_per_hour": ended.profit_per_hour,
            "is_active": False,
        }
        if payload.cash_out is not None:
            changes["cash_out"] = payload.cash_out
        if ended.location != session.location:
            changes["location"] = ended.location
        updated = self.repository.update_session(session_id, changes)
        if updated is None:
            raise SessionNotFoundError(session_id)
        _logger.info(
            "Session ended: id=%s duration=%s profit=%s",
            updated.id,
            updated.duration,
            updated.profit,
        )
        return updated

    def update_session(self, session_id: UUID, patch: SessionPatch) -> SessionRecord:
        """Patch location or cash-out without recomputing derived fields."""
        session = self.get_session(session_id)
        changes: dict[str, object] = {}
        if patch.location is not None and patch.location.strip():
            changes["location"] = patch.location
        if patch.cash_out is not None:
            if session.is_active:
                raise SessionValidationError(
                    "Cash-out can only be recorded by ending the session"
                )
            if session.profit is None:
                raise SessionValidationError(
                    "Cash-out cannot be added to a session ended without one"
                )
            changes["cash_out"] = patch.cash_out
        if not changes:
            return session
        updated = self.repository.update_session(session_id, changes)
        if updated is None:
            raise SessionNotFoundError(session_id)
        return updated

    def delete_session(self, session_id: UUID) -> SessionRecord:
        """Delete a session and return the removed record."""
        deleted = self.repository.delete_session(session_id)
        if deleted is None:
            raise SessionNotFoundError(session_id)
        _logger.info("Session deleted: id=%s", session_id)
        return deleted


def end_session(
    session: SessionRecord, payload: SessionEnd, now: datetime
) -> SessionRecord:
    """Return the finalized version of an active session.

    The end time defaults to ``now``. Duration is whole minutes rounded half
    up. Profit is only derived when a cash-out is given, and the hourly rate
    only when the duration is positive.
    """
    if not session.is_active:
        raise SessionValidationError(f"Session already ended: {session.id}")

    end_time = ensure_aware(payload.end_time or now)
    elapsed = end_time - ensure_aware(session.start_time)
    duration = _round_half_up(elapsed.total_seconds() / 60)
    if duration < 0:
        _logger.warning(
            "Rejected negative duration: id=%s start=%s end=%s",
            session.id,
            session.start_time.isoformat(),
            end_time.isoformat(),
        )
        raise SessionValidationError("End time is before the session start")

    profit = None
    if payload.cash_out is not None:
        profit = payload.cash_out - session.buy_in
    profit_per_hour = None
    if profit is not None and duration > 0:
        profit_per_hour = (profit / duration) * 60

    location = session.location
    if payload.location and payload.location.strip():
        location = payload.location

    return replace(
        session,
        end_time=end_time,
        duration=duration,
        cash_out=payload.cash_out if payload.cash_out is not None else session.cash_out,
        profit=profit,
        profit_per_hour=profit_per_hour,
        location=location,
        is_active=False,
    )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)

