"""Errors raised by session operations."""

from uuid import UUID


class SessionNotFoundError(LookupError):
    """Raised when no session exists for an id."""

    def __init__(self, session_id: UUID) -> None:
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


class SessionValidationError(ValueError):
    """Raised when a session operation is not valid for the record."""


class SessionStoreError(RuntimeError):
    """Raised by repositories when the backing store fails."""
