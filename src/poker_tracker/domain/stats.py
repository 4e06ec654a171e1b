"""Domain models for session statistics."""

from dataclasses import dataclass
from datetime import date

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class SessionStats:
    """Overall results across completed sessions."""

    total_hours: float
    total_profit: float
    most_profitable_week: str
    best_location: str


@dataclass(frozen=True)
class WeeklySummary:
    """Totals for a week starting on Sunday."""

    week: date
    total_hours: float
    total_profit: float


@dataclass(frozen=True)
class MonthlySummary:
    """Totals for a calendar month, keyed as ``YYYY-MM``."""

    month: str
    total_hours: float
    total_profit: float


@dataclass(frozen=True)
class LocationSummary:
    """Totals and hourly rate for a location."""

    location: str
    total_hours: float
    total_profit: float
    profit_per_hour: float
