"""Employee and machine name resolution."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pachinko_tracker.domain.lookups import UNKNOWN_NAME, LookupEntry
from pachinko_tracker.domain.sessions import ResolvedSession, SessionRecord


@dataclass
class LookupService:
    """Read-only lookup tables for employees and machines."""

    employees: Sequence[LookupEntry]
    machines: Sequence[LookupEntry]

    def employee_name(self, employee_id: str) -> str:
        """Return the employee name, or the unknown placeholder."""
        return _find_name(self.employees, employee_id)

    def machine_name(self, machine_id: str) -> str:
        """Return the machine name, or the unknown placeholder."""
        return _find_name(self.machines, machine_id)

    def resolve(self, sessions: Iterable[SessionRecord]) -> list[ResolvedSession]:
        """Join sessions with display names."""
        return [
            ResolvedSession(
                session=session,
                player=self.employee_name(session.player_id),
                machine=self.machine_name(session.machine_id),
            )
            for session in sessions
        ]


def _find_name(entries: Sequence[LookupEntry], entry_id: str) -> str:
    for entry in entries:
        if entry.id == entry_id:
            return entry.name
    return UNKNOWN_NAME
