"""Typed failures raised by the session store, services and HTTP client."""


class TrackerError(Exception):
    """Base class for tracker failures."""


class ValidationError(TrackerError):
    """Raised when session input is malformed or missing required fields."""


class NotFoundError(TrackerError):
    """Raised when a session id does not exist."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


class TransportError(TrackerError):
    """Raised when the tracker API cannot be reached or answers with an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
