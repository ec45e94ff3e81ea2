"""Statistics endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request

if TYPE_CHECKING:
    from pachinko_tracker.containers import AppContainer
    from pachinko_tracker.domain.stats import DailyProfit, GroupStats

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/daily")
async def daily_stats(
    request: Request,
    range_name: str = Query(default="all", alias="range"),
    fill_gaps: bool = True,
) -> list[dict[str, object]]:
    """Return profit per day."""
    container: AppContainer = request.app.state.container
    series = container.stats_service.daily(range_name, fill_gaps=fill_gaps)
    return _serialize_daily(series)


@router.get("/daily/cumulative")
async def daily_cumulative_stats(
    request: Request, range_name: str = Query(default="all", alias="range")
) -> list[dict[str, object]]:
    """Return the running profit total per day."""
    container: AppContainer = request.app.state.container
    return _serialize_daily(container.stats_service.daily_cumulative(range_name))


@router.get("/overview")
async def overview_stats(request: Request) -> dict[str, object]:
    """Return overall totals and averages."""
    container: AppContainer = request.app.state.container
    return asdict(container.stats_service.overview())


@router.get("/employees")
async def employee_stats(
    request: Request, sort: str = "insertion"
) -> list[dict[str, object]]:
    """Return per-employee stats."""
    container: AppContainer = request.app.state.container
    return _serialize_groups(container.stats_service.by_employee(sort))


@router.get("/machines")
async def machine_stats(
    request: Request, sort: str = "profit"
) -> list[dict[str, object]]:
    """Return per-machine stats."""
    container: AppContainer = request.app.state.container
    return _serialize_groups(container.stats_service.by_machine(sort))


@router.get("/monthly")
async def monthly_stats(request: Request) -> list[dict[str, object]]:
    """Return profit per month, newest first."""
    container: AppContainer = request.app.state.container
    return [
        {"month": entry.month, "profit": entry.profit}
        for entry in container.stats_service.monthly()
    ]


def _serialize_daily(series: list[DailyProfit]) -> list[dict[str, object]]:
    return [{"date": entry.day.isoformat(), "profit": entry.profit} for entry in series]


def _serialize_groups(groups: list[GroupStats]) -> list[dict[str, object]]:
    return [asdict(group) for group in groups]
