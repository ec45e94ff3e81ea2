"""Process-local session repository."""

import itertools
import threading
from dataclasses import dataclass, field, replace

from pachinko_tracker.domain.sessions import SessionRecord
from pachinko_tracker.services.sessions import SessionRepository


@dataclass
class InMemorySessionRepository(SessionRepository):
    """Dict-backed repository; access is serialized with a lock."""

    _sessions: dict[str, SessionRecord] = field(default_factory=dict)
    _ids: itertools.count = field(default_factory=lambda: itertools.count(1))
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def list_sessions(self) -> list[SessionRecord]:
        """Return all sessions in insertion order."""
        with self._lock:
            return list(self._sessions.values())

    def get_session(self, session_id: str) -> SessionRecord | None:
        """Return a session by id."""
        with self._lock:
            return self._sessions.get(session_id)

    def create_session(self, fields: dict[str, object]) -> SessionRecord:
        """Store a session under the next free id."""
        with self._lock:
            session_id = str(next(self._ids))
            session = SessionRecord(id=session_id, **fields)
            self._sessions[session_id] = session
            return session

    def update_session(
        self, session_id: str, fields: dict[str, object]
    ) -> SessionRecord | None:
        """Replace a session with the merged fields."""
        changes = {key: value for key, value in fields.items() if key != "id"}
        with self._lock:
            existing = self._sessions.get(session_id)
            if existing is None:
                return None
            updated = replace(existing, **changes)
            self._sessions[session_id] = updated
            return updated

    def delete_session(self, session_id: str) -> bool:
        """Remove a session by id."""
        with self._lock:
            return self._sessions.pop(session_id, None) is not None
