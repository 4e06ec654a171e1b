"""Tests for configuration helpers."""

from datetime import UTC
from zoneinfo import ZoneInfo

import pytest

from poker_tracker.config import parse_timezone


def test_parse_timezone_defaults_to_utc() -> None:
    assert parse_timezone(None) is UTC
    assert parse_timezone("  ") is UTC


def test_parse_timezone_resolves_iana_name() -> None:
    assert parse_timezone(" America/Los_Angeles ") == ZoneInfo("America/Los_Angeles")


def test_parse_timezone_rejects_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unknown timezone"):
        parse_timezone("Mars/Olympus")


def test_settings_defaults(settings) -> None:
    assert settings.supabase_table == "poker_sessions"
    assert settings.stats_timezone == "UTC"
