"""Dependency container wiring for the application."""

from dataclasses import dataclass

from pachinko_tracker.adapters.dashboard_client import HttpxDashboardClient
from pachinko_tracker.adapters.memory_session_repository import (
    InMemorySessionRepository,
)
from pachinko_tracker.config import Settings, parse_lookup_entries
from pachinko_tracker.domain.lookups import DEFAULT_EMPLOYEES, DEFAULT_MACHINES
from pachinko_tracker.sample_data import seed_sample_sessions
from pachinko_tracker.services.lookups import LookupService
from pachinko_tracker.services.sessions import SessionService
from pachinko_tracker.services.stats import StatsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    lookup_service: LookupService
    session_service: SessionService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    lookup_service = LookupService(
        employees=parse_lookup_entries(resolved_settings.employees)
        or list(DEFAULT_EMPLOYEES),
        machines=parse_lookup_entries(resolved_settings.machines)
        or list(DEFAULT_MACHINES),
    )
    session_repository = InMemorySessionRepository()
    session_service = SessionService(session_repository)
    if resolved_settings.seed_sample_sessions:
        seed_sample_sessions(session_service)
    stats_service = StatsService(
        repository=session_repository,
        lookups=lookup_service,
        timezone=resolved_settings.timezone,
    )
    return AppContainer(
        settings=resolved_settings,
        lookup_service=lookup_service,
        session_service=session_service,
        stats_service=stats_service,
    )


def build_dashboard_client(settings: Settings | None = None) -> HttpxDashboardClient:
    """Create a dashboard client pointed at the configured API."""
    resolved_settings = settings or Settings()
    return HttpxDashboardClient.create(resolved_settings.api_base_url)
