"""HTTP client for the session tracker API."""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from pachinko_tracker.errors import NotFoundError, TransportError, ValidationError

logger = logging.getLogger(__name__)


class DashboardClient(Protocol):
    """Interface the presentation layer uses to reach the tracker API."""

    async def fetch_employees(self) -> list[dict[str, object]]:
        """Return the employee lookup table."""

    async def fetch_machines(self) -> list[dict[str, object]]:
        """Return the machine lookup table."""

    async def fetch_sessions(self) -> list[dict[str, object]]:
        """Return all session records."""

    async def create_session(self, session: dict[str, object]) -> dict[str, object]:
        """Create a session and return it with its assigned id."""

    async def update_session(
        self, session_id: str, session: dict[str, object]
    ) -> dict[str, object]:
        """Update a session and return the stored record."""

    async def delete_session(self, session_id: str) -> None:
        """Delete a session."""

    async def fetch_daily_stats(
        self, range_name: str = "all"
    ) -> list[dict[str, object]]:
        """Return profit per day."""


@dataclass
class HttpxDashboardClient(DashboardClient):
    """Dashboard client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxDashboardClient":
        """Create a client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def fetch_employees(self) -> list[dict[str, object]]:
        """Fetch employees."""
        return await self._request("GET", "/employees")

    async def fetch_machines(self) -> list[dict[str, object]]:
        """Fetch machines."""
        return await self._request("GET", "/machines")

    async def fetch_sessions(self) -> list[dict[str, object]]:
        """Fetch session records."""
        return await self._request("GET", "/sessions")

    async def create_session(self, session: dict[str, object]) -> dict[str, object]:
        """POST a new session."""
        return await self._request("POST", "/sessions", json=session)

    async def update_session(
        self, session_id: str, session: dict[str, object]
    ) -> dict[str, object]:
        """PUT changes to an existing session."""
        return await self._request(
            "PUT", f"/sessions/{session_id}", json=session, session_id=session_id
        )

    async def delete_session(self, session_id: str) -> None:
        """DELETE a session."""
        await self._request("DELETE", f"/sessions/{session_id}", session_id=session_id)

    async def fetch_daily_stats(
        self, range_name: str = "all"
    ) -> list[dict[str, object]]:
        """Fetch the daily profit series."""
        return await self._request("GET", "/stats/daily", params={"range": range_name})

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        session_id: str | None = None,
        **kwargs: object,
    ) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.request(
                method, url, timeout=10, **kwargs
            )
        except httpx.HTTPError as exc:
            logger.exception("Tracker API request failed", extra={"url": url})
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        if response.status_code == httpx.codes.BAD_REQUEST:
            raise ValidationError(_error_message(response))
        if response.status_code == httpx.codes.NOT_FOUND and session_id is not None:
            raise NotFoundError(session_id)
        if response.is_error:
            raise TransportError(
                f"{method} {path} returned {response.status_code}: "
                f"{_error_message(response)}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                f"{method} {path} returned a non-JSON body",
                status_code=response.status_code,
            ) from exc


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict) and "error" in payload:
        return str(payload["error"])
    return response.text
