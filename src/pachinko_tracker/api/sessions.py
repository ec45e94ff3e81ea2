"""Session CRUD endpoints."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from pachinko_tracker.errors import ValidationError

if TYPE_CHECKING:
    from pachinko_tracker.containers import AppContainer
    from pachinko_tracker.domain.sessions import SessionRecord

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("")
async def list_sessions(
    request: Request, player_id: str | None = None, machine_id: str | None = None
) -> list[dict[str, object]]:
    """Return stored sessions, optionally filtered."""
    container: AppContainer = request.app.state.container
    sessions = container.session_service.list_sessions(
        player_id=player_id, machine_id=machine_id
    )
    return [serialize_session(session) for session in sessions]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_session(request: Request) -> dict[str, object]:
    """Record a new session."""
    container: AppContainer = request.app.state.container
    body = await _read_object(request)
    return serialize_session(container.session_service.create(body))


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> dict[str, object]:
    """Return a single session."""
    container: AppContainer = request.app.state.container
    return serialize_session(container.session_service.get(session_id))


@router.put("/{session_id}")
async def update_session(session_id: str, request: Request) -> dict[str, object]:
    """Merge the supplied fields into a session."""
    container: AppContainer = request.app.state.container
    body = await _read_object(request)
    return serialize_session(container.session_service.update(session_id, body))


@router.delete("/{session_id}")
async def delete_session(session_id: str, request: Request) -> dict[str, bool]:
    """Delete a session."""
    container: AppContainer = request.app.state.container
    container.session_service.delete(session_id)
    return {"success": True}


def serialize_session(session: SessionRecord) -> dict[str, object]:
    """Render a session with the snake_case wire field names."""
    return {
        "id": session.id,
        "date": session.date.isoformat(),
        "player_id": session.player_id,
        "machine_id": session.machine_id,
        "starting_count": session.starting_count,
        "investment": session.investment,
        "ending_count": session.ending_count,
        "payout": session.payout,
        "notes": session.notes,
    }


async def _read_object(request: Request) -> dict[str, object]:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationError("Request body must be valid JSON") from exc
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body
