"""Tests for session statistics."""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import pytest

from pachinko_tracker.domain.lookups import UNKNOWN_NAME
from pachinko_tracker.domain.stats import DailyProfit
from pachinko_tracker.errors import ValidationError
from pachinko_tracker.sample_data import SAMPLE_SESSIONS
from pachinko_tracker.services.lookups import LookupService
from pachinko_tracker.services.sessions import SessionService
from pachinko_tracker.services.stats import (
    MAX_FILLED_DAYS,
    StatsService,
    compute_overview,
    cumulative_profit,
    daily_profit,
    group_stats,
    monthly_profit,
    stats_by_employee,
    stats_by_machine,
)
from tests.conftest import make_session, resolve


def _at(day: int, hour: int = 12, month: int = 5) -> datetime:
    return datetime(2025, month, day, hour, 0, tzinfo=UTC)


def test_overview_win_rate_and_totals() -> None:
    sessions = [
        make_session("1", investment=20000, payout=35000),
        make_session("2", investment=15000, payout=10000),
    ]

    overview = compute_overview(sessions)

    assert overview.total_sessions == 2
    assert overview.win_count == 1
    assert overview.win_rate == 50.0
    assert overview.total_profit == 10000
    assert overview.avg_investment == 17500
    assert overview.avg_payout == 22500
    assert overview.max_profit == 15000
    assert overview.min_profit == -5000
    assert overview.monthly_profit == {"2025-05": 10000}


def test_overview_of_empty_list_is_zero() -> None:
    overview = compute_overview([])

    assert overview.total_sessions == 0
    assert overview.win_rate == 0
    assert overview.avg_investment == 0
    assert overview.avg_payout == 0
    assert overview.max_profit == 0
    assert overview.min_profit == 0
    assert overview.monthly_profit == {}


def test_total_profit_matches_payout_minus_investment(
    session_service: SessionService,
) -> None:
    for payload in SAMPLE_SESSIONS:
        session_service.create(payload)
    sessions = session_service.list_sessions()

    overview = compute_overview(sessions)

    assert sum(s.profit for s in sessions) == overview.total_profit
    assert overview.total_profit == overview.total_payout - overview.total_investment
    assert overview.total_profit == 22000


def test_machine_stats_for_shared_machine() -> None:
    sessions = [
        make_session("1", investment=20000, payout=35000, machine_id="3"),
        make_session("2", investment=15000, payout=10000, machine_id="3"),
    ]

    [stats] = stats_by_machine([resolve(s) for s in sessions])

    assert stats.key == "3"
    assert stats.name == "machine-3"
    assert stats.sessions == 2
    assert stats.profit == 10000
    assert stats.win_count == 1
    assert stats.win_rate == 50.0
    assert stats.avg_investment == 17500
    assert stats.avg_payout == 22500
    assert stats.avg_profit == 5000


def test_default_orderings_differ_between_views() -> None:
    sessions = [
        make_session("1", investment=10000, payout=0, player_id="2", machine_id="1"),
        make_session("2", investment=0, payout=5000, player_id="1", machine_id="2"),
    ]
    resolved = [resolve(s) for s in sessions]

    employees = stats_by_employee(resolved)
    machines = stats_by_machine(resolved)

    assert [group.key for group in employees] == ["2", "1"]
    assert [group.key for group in machines] == ["2", "1"]
    assert [group.profit for group in machines] == [5000, -10000]


def test_group_stats_sort_keys() -> None:
    entries = [
        ("a", "Zed", make_session("1", investment=100, payout=0)),
        ("b", "Amy", make_session("2", investment=0, payout=50)),
        ("b", "Amy", make_session("3", investment=0, payout=50)),
        ("c", "Kim", make_session("4", investment=10, payout=20)),
    ]

    by_name = group_stats(entries, sort="name")
    by_sessions = group_stats(entries, sort="sessions")
    by_win_rate = group_stats(entries, sort="win_rate")

    assert [group.name for group in by_name] == ["Amy", "Kim", "Zed"]
    assert by_sessions[0].key == "b"
    assert [group.key for group in by_win_rate] == ["b", "c", "a"]


def test_group_stats_rejects_unknown_sort() -> None:
    with pytest.raises(ValidationError):
        group_stats([], sort="luck")


def test_daily_profit_window_fills_gaps_with_zero() -> None:
    sessions = [
        make_session("1", investment=0, payout=20000, date=_at(16, 9)),
        make_session("2", investment=5000, payout=0, date=_at(16, 14)),
        make_session("3", investment=0, payout=1000, date=_at(18)),
        make_session("4", investment=0, payout=999, date=_at(25)),
    ]

    series = daily_profit(sessions, today=date(2025, 5, 19), days=7)

    assert len(series) == 7
    assert series[0].day == date(2025, 5, 13)
    assert series[-1].day == date(2025, 5, 19)
    profits = {entry.day: entry.profit for entry in series}
    assert profits[date(2025, 5, 16)] == 15000
    assert profits[date(2025, 5, 17)] == 0
    assert profits[date(2025, 5, 18)] == 1000


def test_daily_profit_without_gap_filling_omits_empty_days() -> None:
    sessions = [
        make_session("1", investment=0, payout=300, date=_at(18)),
        make_session("2", investment=0, payout=100, date=_at(16)),
    ]

    series = daily_profit(
        sessions, today=date(2025, 5, 19), days=30, fill_gaps=False
    )

    assert series == [
        DailyProfit(day=date(2025, 5, 16), profit=100),
        DailyProfit(day=date(2025, 5, 18), profit=300),
    ]


def test_daily_profit_all_time_runs_to_today() -> None:
    sessions = [make_session("1", investment=0, payout=100, date=_at(16))]

    series = daily_profit(sessions, today=date(2025, 5, 19))

    assert [entry.day for entry in series] == [
        date(2025, 5, 16),
        date(2025, 5, 17),
        date(2025, 5, 18),
        date(2025, 5, 19),
    ]
    assert [entry.profit for entry in series] == [100, 0, 0, 0]


def test_daily_profit_empty_inputs() -> None:
    assert daily_profit([], today=date(2025, 5, 19)) == []
    window = daily_profit([], today=date(2025, 5, 19), days=7)
    assert [entry.profit for entry in window] == [0] * 7


def test_daily_profit_uses_local_calendar_day() -> None:
    sessions = [make_session("1", investment=0, payout=100, date=_at(15, 20))]

    series = daily_profit(
        sessions,
        today=date(2025, 5, 16),
        days=2,
        tz=ZoneInfo("Asia/Tokyo"),
    )

    assert series == [
        DailyProfit(day=date(2025, 5, 15), profit=0),
        DailyProfit(day=date(2025, 5, 16), profit=100),
    ]


def test_cumulative_profit_is_running_sum() -> None:
    daily = [
        DailyProfit(day=date(2025, 5, 1), profit=100),
        DailyProfit(day=date(2025, 5, 2), profit=-50),
        DailyProfit(day=date(2025, 5, 3), profit=20),
    ]

    cumulative = cumulative_profit(daily)

    assert [entry.profit for entry in cumulative] == [100, 50, 70]
    assert [entry.day for entry in cumulative] == [entry.day for entry in daily]
    assert cumulative[-1].profit == sum(entry.profit for entry in daily)
    assert cumulative_profit([]) == []


def test_monthly_profit_newest_first() -> None:
    sessions = [
        make_session("1", investment=0, payout=100, date=_at(30, month=4)),
        make_session("2", investment=50, payout=0, date=_at(1)),
        make_session("3", investment=0, payout=10, date=_at(2)),
    ]

    monthly = monthly_profit(sessions)

    assert [(entry.month, entry.profit) for entry in monthly] == [
        ("2025-05", -40),
        ("2025-04", 100),
    ]


def test_stats_service_resolves_unknown_names(
    session_service: SessionService, lookup_service: LookupService
) -> None:
    session_service.create(
        {"player_id": "1", "machine_id": "9", "investment": 100, "payout": 300}
    )
    session_service.create(
        {"player_id": "7", "machine_id": "1", "investment": 300, "payout": 100}
    )
    service = StatsService(session_service.repository, lookup_service)

    employees = service.by_employee()
    machines = service.by_machine()

    assert [group.name for group in employees] == ["Taro Tanaka", UNKNOWN_NAME]
    assert [group.name for group in machines] == [UNKNOWN_NAME, "Hokuto no Ken"]
    assert service.overview().total_profit == 0


def test_stats_service_daily_ranges(
    session_service: SessionService, lookup_service: LookupService
) -> None:
    session_service.create(
        {
            "date": "2025-05-18T10:00:00Z",
            "player_id": "1",
            "machine_id": "1",
            "investment": 100,
            "payout": 400,
        }
    )
    service = StatsService(session_service.repository, lookup_service)
    today = date(2025, 5, 19)

    week = service.daily("7days", today=today)
    cumulative = service.daily_cumulative("7days", today=today)

    assert len(week) == 7
    assert week[-2].profit == 300
    assert [entry.profit for entry in cumulative][-2:] == [300, 300]
    with pytest.raises(ValidationError):
        service.daily("14days", today=today)


def test_daily_profit_long_all_time_span_is_sparse() -> None:
    sessions = [
        make_session(
            "1", investment=0, payout=100, date=datetime(1990, 1, 1, tzinfo=UTC)
        ),
        make_session("2", investment=0, payout=50, date=_at(16)),
    ]

    series = daily_profit(sessions, today=date(2025, 5, 19))
    window = daily_profit(sessions, today=date(2025, 5, 19), days=MAX_FILLED_DAYS)

    assert series == [
        DailyProfit(day=date(1990, 1, 1), profit=100),
        DailyProfit(day=date(2025, 5, 16), profit=50),
    ]
    assert len(window) == MAX_FILLED_DAYS


def test_stats_service_handles_earliest_dates_west_of_utc(
    session_service: SessionService, lookup_service: LookupService
) -> None:
    session_service.create(
        {
            "date": "1900-01-01T00:00:00Z",
            "player_id": "1",
            "machine_id": "1",
            "investment": 100,
            "payout": 400,
        }
    )
    service = StatsService(
        session_service.repository, lookup_service, timezone="America/New_York"
    )

    overview = service.overview()
    daily = service.daily(today=date(2025, 5, 19))

    assert overview.monthly_profit == {"1899-12": 300}
    assert [(entry.month, entry.profit) for entry in service.monthly()] == [
        ("1899-12", 300)
    ]
    assert daily == [DailyProfit(day=date(1899, 12, 31), profit=300)]
