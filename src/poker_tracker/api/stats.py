"""Statistics endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from poker_tracker.api.models import (
    LocationSummaryResponse,
    MonthlySummaryResponse,
    StatsResponse,
    WeeklySummaryResponse,
)

if TYPE_CHECKING:
    from poker_tracker.containers import AppContainer

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=StatsResponse)
async def overall_stats(request: Request) -> StatsResponse:
    """Return totals and best performers across completed sessions."""
    container: AppContainer = request.app.state.container
    return StatsResponse.from_domain(container.stats_service.get_stats())


@router.get("/weekly", response_model=list[WeeklySummaryResponse])
async def weekly_summaries(request: Request) -> list[WeeklySummaryResponse]:
    """Return totals per week, most recent first."""
    container: AppContainer = request.app.state.container
    return [
        WeeklySummaryResponse.from_domain(summary)
        for summary in container.stats_service.get_weekly()
    ]


@router.get("/monthly", response_model=list[MonthlySummaryResponse])
async def monthly_summaries(request: Request) -> list[MonthlySummaryResponse]:
    """Return totals per month, most recent first."""
    container: AppContainer = request.app.state.container
    return [
        MonthlySummaryResponse.from_domain(summary)
        for summary in container.stats_service.get_monthly()
    ]


@router.get("/locations", response_model=list[LocationSummaryResponse])
async def location_summaries(request: Request) -> list[LocationSummaryResponse]:
    """Return totals per location, best hourly rate first."""
    container: AppContainer = request.app.state.container
    return [
        LocationSummaryResponse.from_domain(summary)
        for summary in container.stats_service.get_locations()
    ]
