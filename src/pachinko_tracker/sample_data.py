"""Demo sessions preloaded into a fresh store."""

from pachinko_tracker.services.sessions import SessionService

SAMPLE_SESSIONS: tuple[dict[str, object], ...] = (
    {
        "date": "2025-05-15T10:00:00Z",
        "player_id": "1",
        "machine_id": "1",
        "starting_count": 150,
        "investment": 20000,
        "ending_count": 350,
        "payout": 35000,
        "notes": "3 AT runs, possibly setting 6",
    },
    {
        "date": "2025-05-16T09:30:00Z",
        "player_id": "2",
        "machine_id": "3",
        "starting_count": 0,
        "investment": 15000,
        "ending_count": 500,
        "payout": 10000,
        "notes": "Only one bonus",
    },
    {
        "date": "2025-05-16T14:00:00Z",
        "player_id": "3",
        "machine_id": "5",
        "starting_count": 200,
        "investment": 30000,
        "ending_count": 400,
        "payout": 50000,
        "notes": "Two jackpots",
    },
    {
        "date": "2025-05-17T11:00:00Z",
        "player_id": "1",
        "machine_id": "2",
        "starting_count": 50,
        "investment": 25000,
        "ending_count": 300,
        "payout": 20000,
        "notes": "",
    },
    {
        "date": "2025-05-17T16:30:00Z",
        "player_id": "4",
        "machine_id": "4",
        "starting_count": 100,
        "investment": 18000,
        "ending_count": 250,
        "payout": 15000,
        "notes": "Started just before closing",
    },
)


def seed_sample_sessions(service: SessionService) -> None:
    """Record the demo sessions through the regular create path."""
    for payload in SAMPLE_SESSIONS:
        service.create(payload)
