"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from poker_tracker.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from poker_tracker.config import Settings, parse_timezone
from poker_tracker.services.sessions import SessionService
from poker_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_service: SessionService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    session_repository = SupabaseSessionRepository(
        supabase_client, table=resolved_settings.supabase_table
    )
    session_service = SessionService(session_repository)
    stats_service = StatsService(
        session_repository,
        timezone=parse_timezone(resolved_settings.stats_timezone),
    )
    return AppContainer(
        settings=resolved_settings,
        session_service=session_service,
        stats_service=stats_service,
    )
