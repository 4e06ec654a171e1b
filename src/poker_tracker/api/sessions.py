"""Poker session endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, status

from poker_tracker.api.models import (
    CreateSessionRequest,
    EndSessionRequest,
    SessionResponse,
    UpdateSessionRequest,
)

if TYPE_CHECKING:
    from poker_tracker.containers import AppContainer

router = APIRouter(prefix="/poker-sessions", tags=["sessions"])


@router.post(
    "",
    response_model=SessionResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    payload: CreateSessionRequest, request: Request
) -> SessionResponse:
    """Start tracking a new session."""
    container: AppContainer = request.app.state.container
    session = container.session_service.start_session(payload.to_domain())
    return SessionResponse.from_record(session)


@router.get(
    "", response_model=list[SessionResponse], response_model_exclude_none=True
)
async def list_sessions(request: Request) -> list[SessionResponse]:
    """Return every session, newest first."""
    container: AppContainer = request.app.state.container
    return [
        SessionResponse.from_record(session)
        for session in container.session_service.list_sessions()
    ]


@router.get(
    "/active", response_model=list[SessionResponse], response_model_exclude_none=True
)
async def list_active_sessions(request: Request) -> list[SessionResponse]:
    """Return sessions that are still running."""
    container: AppContainer = request.app.state.container
    return [
        SessionResponse.from_record(session)
        for session in container.session_service.list_active_sessions()
    ]


@router.get(
    "/{session_id}", response_model=SessionResponse, response_model_exclude_none=True
)
async def get_session(session_id: UUID, request: Request) -> SessionResponse:
    """Return a single session."""
    container: AppContainer = request.app.state.container
    return SessionResponse.from_record(
        container.session_service.get_session(session_id)
    )


@router.put(
    "/{session_id}/end",
    response_model=SessionResponse,
    response_model_exclude_none=True,
)
async def end_session(
    session_id: UUID, payload: EndSessionRequest, request: Request
) -> SessionResponse:
    """End a running session and record its result."""
    container: AppContainer = request.app.state.container
    session = container.session_service.end_session(session_id, payload.to_domain())
    return SessionResponse.from_record(session)


@router.put(
    "/{session_id}", response_model=SessionResponse, response_model_exclude_none=True
)
async def update_session(
    session_id: UUID, payload: UpdateSessionRequest, request: Request
) -> SessionResponse:
    """Edit the location or cash-out of a session."""
    container: AppContainer = request.app.state.container
    session = container.session_service.update_session(
        session_id, payload.to_domain()
    )
    return SessionResponse.from_record(session)


@router.delete(
    "/{session_id}", response_model=SessionResponse, response_model_exclude_none=True
)
async def delete_session(session_id: UUID, request: Request) -> SessionResponse:
    """Delete a session and return it."""
    container: AppContainer = request.app.state.container
    return SessionResponse.from_record(
        container.session_service.delete_session(session_id)
    )
