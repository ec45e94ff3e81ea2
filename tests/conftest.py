"""Shared test fixtures."""

from datetime import UTC, datetime

import pytest

from pachinko_tracker.adapters.memory_session_repository import (
    InMemorySessionRepository,
)
from pachinko_tracker.config import Settings
from pachinko_tracker.containers import AppContainer
from pachinko_tracker.domain.lookups import LookupEntry
from pachinko_tracker.domain.sessions import ResolvedSession, SessionRecord
from pachinko_tracker.services.lookups import LookupService
from pachinko_tracker.services.sessions import SessionService
from pachinko_tracker.services.stats import StatsService


def make_session(  # noqa: PLR0913
    session_id: str = "1",
    *,
    investment: int = 0,
    payout: int = 0,
    date: datetime | None = None,
    player_id: str = "1",
    machine_id: str = "1",
) -> SessionRecord:
    """Build a session record with sensible defaults."""
    return SessionRecord(
        id=session_id,
        date=date or datetime(2025, 5, 15, 10, 0, tzinfo=UTC),
        player_id=player_id,
        machine_id=machine_id,
        starting_count=0,
        investment=investment,
        ending_count=0,
        payout=payout,
        notes="",
    )


def resolve(session: SessionRecord) -> ResolvedSession:
    """Attach placeholder names derived from the ids."""
    return ResolvedSession(
        session=session,
        player=f"player-{session.player_id}",
        machine=f"machine-{session.machine_id}",
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(seed_sample_sessions=False, timezone="UTC")


@pytest.fixture
def lookup_service() -> LookupService:
    return LookupService(
        employees=[
            LookupEntry(id="1", name="Taro Tanaka"),
            LookupEntry(id="2", name="Jiro Sato"),
        ],
        machines=[
            LookupEntry(id="1", name="Hokuto no Ken"),
            LookupEntry(id="2", name="Basilisk"),
        ],
    )


@pytest.fixture
def session_repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def session_service(session_repository: InMemorySessionRepository) -> SessionService:
    return SessionService(session_repository)


@pytest.fixture
def container(
    settings: Settings,
    lookup_service: LookupService,
    session_repository: InMemorySessionRepository,
    session_service: SessionService,
) -> AppContainer:
    stats_service = StatsService(
        repository=session_repository,
        lookups=lookup_service,
        timezone=settings.timezone,
    )
    return AppContainer(
        settings=settings,
        lookup_service=lookup_service,
        session_service=session_service,
        stats_service=stats_service,
    )
