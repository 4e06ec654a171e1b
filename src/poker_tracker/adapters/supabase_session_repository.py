"""Supabase-backed poker session repository."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from poker_tracker.domain.errors import SessionStoreError, SessionValidationError
from poker_tracker.domain.sessions import (
    Environment,
    GameType,
    NewSession,
    SessionRecord,
    ensure_aware,
)
from poker_tracker.services.sessions import SessionRepository

_COLUMNS = (
    "id, start_time, end_time, game_type, environment, location, buy_in, "
    "cash_out, duration, profit, profit_per_hour, is_active"
)


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for poker sessions."""

    client: Client
    table: str = "poker_sessions"

    def create_session(self, payload: NewSession) -> SessionRecord:
        """Insert an active session row and return it."""
        if payload.start_time is None:
            raise SessionValidationError("Session start time is required")
        query = self.client.table(self.table).insert(
            {
                "start_time": payload.start_time.isoformat(),
                "game_type": payload.game_type.value,
                "environment": payload.environment.value,
                "location": payload.location,
                "buy_in": payload.buy_in,
                "is_active": True,
            }
        )
        response = _execute(query, "create session")
        if not response.data:
            raise SessionStoreError("Failed to create session")
        return _parse_row(response.data[0])

    def get_session(self, session_id: UUID) -> SessionRecord | None:
        """Return a session by id, if present."""
        query = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .eq("id", str(session_id))
            .limit(1)
        )
        response = _execute(query, "load session")
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def list_sessions(self) -> list[SessionRecord]:
        """Return all sessions ordered by start time, newest first."""
        query = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .order("start_time", desc=True)
        )
        response = _execute(query, "list sessions")
        return [_parse_row(row) for row in response.data or []]

    def list_active_sessions(self) -> list[SessionRecord]:
        """Return sessions still in progress, newest first."""
        query = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .eq("is_active", True)
            .order("start_time", desc=True)
        )
        response = _execute(query, "list active sessions")
        return [_parse_row(row) for row in response.data or []]

    def update_session(
        self, session_id: UUID, changes: dict[str, object]
    ) -> SessionRecord | None:
        """Apply column changes and return the updated row."""
        query = (
            self.client.table(self.table)
            .update(_serialize_changes(changes))
            .eq("id", str(session_id))
        )
        response = _execute(query, "update session")
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def delete_session(self, session_id: UUID) -> SessionRecord | None:
        """Delete a session row and return it."""
        query = self.client.table(self.table).delete().eq("id", str(session_id))
        response = _execute(query, "delete session")
        if not response.data:
            return None
        return _parse_row(response.data[0])


def _execute(query: Any, action: str) -> Any:
    """Run a query, reporting PostgREST and transport failures as store errors."""
    try:
        return query.execute()
    except (APIError, httpx.HTTPError) as exc:
        raise SessionStoreError(f"Failed to {action}") from exc


def _serialize_changes(changes: dict[str, object]) -> dict[str, object]:
    serialized: dict[str, object] = {}
    for key, value in changes.items():
        if isinstance(value, datetime):
            serialized[key] = value.isoformat()
        else:
            serialized[key] = value
    return serialized


def _parse_row(row: dict[str, object]) -> SessionRecord:
    return SessionRecord(
        id=UUID(str(row["id"])),
        start_time=_parse_datetime(row["start_time"]),
        end_time=_parse_datetime(row["end_time"]) if row.get("end_time") else None,
        game_type=GameType(str(row["game_type"])),
        environment=Environment(str(row["environment"])),
        location=str(row.get("location", "")),
        buy_in=float(row.get("buy_in", 0.0)),
        cash_out=_optional_float(row.get("cash_out")),
        duration=int(row["duration"]) if row.get("duration") is not None else None,
        profit=_optional_float(row.get("profit")),
        profit_per_hour=_optional_float(row.get("profit_per_hour")),
        is_active=bool(row.get("is_active", False)),
    )


def _parse_datetime(value: object) -> datetime:
    return ensure_aware(datetime.fromisoformat(str(value)))


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
