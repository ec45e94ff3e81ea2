"""Employee and machine lookup endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pachinko_tracker.containers import AppContainer
    from pachinko_tracker.domain.lookups import LookupEntry

router = APIRouter(tags=["lookups"])


@router.get("/employees")
async def list_employees(request: Request) -> list[dict[str, str]]:
    """Return the employee lookup table."""
    container: AppContainer = request.app.state.container
    return _serialize(container.lookup_service.employees)


@router.get("/machines")
async def list_machines(request: Request) -> list[dict[str, str]]:
    """Return the machine lookup table."""
    container: AppContainer = request.app.state.container
    return _serialize(container.lookup_service.machines)


def _serialize(entries: Iterable[LookupEntry]) -> list[dict[str, str]]:
    return [{"id": entry.id, "name": entry.name} for entry in entries]
