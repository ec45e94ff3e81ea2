"""Session CRUD with input validation."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol, TypeVar

import pydantic

from pachinko_tracker.domain.sessions import SessionInput, SessionPatch, SessionRecord
from pachinko_tracker.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


class SessionRepository(Protocol):
    """Persistence interface for play sessions."""

    def list_sessions(self) -> list[SessionRecord]:
        """Return all sessions in insertion order."""

    def get_session(self, session_id: str) -> SessionRecord | None:
        """Return a session by id, if present."""

    def create_session(self, fields: dict[str, object]) -> SessionRecord:
        """Store a new session under a fresh id and return it."""

    def update_session(
        self, session_id: str, fields: dict[str, object]
    ) -> SessionRecord | None:
        """Merge fields into a session; return None when the id is unknown."""

    def delete_session(self, session_id: str) -> bool:
        """Remove a session; return False when the id is unknown."""


@dataclass
class SessionService:
    """Application service for recording and editing sessions."""

    repository: SessionRepository

    def list_sessions(
        self, player_id: str | None = None, machine_id: str | None = None
    ) -> list[SessionRecord]:
        """Return sessions, optionally filtered by employee or machine."""
        sessions = self.repository.list_sessions()
        if player_id is not None:
            sessions = [s for s in sessions if s.player_id == player_id]
        if machine_id is not None:
            sessions = [s for s in sessions if s.machine_id == machine_id]
        return sessions

    def get(self, session_id: str) -> SessionRecord:
        """Return a session or raise NotFoundError."""
        session = self.repository.get_session(session_id)
        if session is None:
            raise NotFoundError(session_id)
        return session

    def create(self, data: Mapping[str, object]) -> SessionRecord:
        """Validate and store a new session.

        Blank counters and amounts are stored as 0. Non-integer or negative
        values, and missing employee or machine references, are rejected.
        """
        payload = _validate(SessionInput, data)
        fields = payload.model_dump()
        if fields["date"] is None:
            fields["date"] = datetime.now(tz=UTC)
        session = self.repository.create_session(fields)
        logger.info("Session created", extra={"session_id": session.id})
        return session

    def update(self, session_id: str, partial: Mapping[str, object]) -> SessionRecord:
        """Merge supplied fields into an existing session."""
        changes = _validate(SessionPatch, partial).changes()
        if not changes:
            return self.get(session_id)
        session = self.repository.update_session(session_id, changes)
        if session is None:
            raise NotFoundError(session_id)
        logger.info(
            "Session updated",
            extra={"session_id": session_id, "fields": sorted(changes)},
        )
        return session

    def delete(self, session_id: str) -> None:
        """Delete a session or raise NotFoundError."""
        if not self.repository.delete_session(session_id):
            raise NotFoundError(session_id)
        logger.info("Session deleted", extra={"session_id": session_id})


def _validate(model: type[ModelT], data: Mapping[str, object]) -> ModelT:
    if not isinstance(data, Mapping):
        raise ValidationError("Session payload must be an object")
    try:
        return model.model_validate(dict(data))
    except pydantic.ValidationError as exc:
        raise ValidationError(_describe(exc)) from exc


def _describe(exc: pydantic.ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "body"
        problems.append(f"{location}: {error['msg']}")
    return "; ".join(problems)
