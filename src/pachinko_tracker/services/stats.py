"""Statistics over recorded play sessions.

The module-level functions are pure: they take a session list and return
new values without touching storage. ``StatsService`` wires them to the
session repository and the lookup tables.
"""

import itertools
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from pachinko_tracker.domain.sessions import ResolvedSession, SessionRecord
from pachinko_tracker.domain.stats import (
    DailyProfit,
    GroupStats,
    MonthlyProfit,
    Overview,
)
from pachinko_tracker.errors import ValidationError
from pachinko_tracker.services.lookups import LookupService
from pachinko_tracker.services.sessions import SessionRepository

DAILY_RANGES: dict[str, int | None] = {
    "7days": 7,
    "30days": 30,
    "90days": 90,
    "all": None,
}
GROUP_SORTS = ("insertion", "profit", "sessions", "win_rate", "name")
DEFAULT_ZONE = ZoneInfo("UTC")
MAX_FILLED_DAYS = 366 * 10


@dataclass
class _Tally:
    name: str
    sessions: int = 0
    investment: int = 0
    payout: int = 0
    wins: int = 0

    def add(self, session: SessionRecord) -> None:
        self.sessions += 1
        self.investment += session.investment
        self.payout += session.payout
        if session.is_win:
            self.wins += 1


def compute_overview(
    sessions: Sequence[SessionRecord], tz: ZoneInfo = DEFAULT_ZONE
) -> Overview:
    """Return totals, averages and the monthly profit map."""
    count = len(sessions)
    profits = [session.profit for session in sessions]
    wins = sum(1 for profit in profits if profit > 0)
    total_investment = sum(session.investment for session in sessions)
    total_payout = sum(session.payout for session in sessions)
    return Overview(
        total_sessions=count,
        win_count=wins,
        win_rate=_percent(wins, count),
        total_investment=total_investment,
        total_payout=total_payout,
        total_profit=total_payout - total_investment,
        avg_investment=_average(total_investment, count),
        avg_payout=_average(total_payout, count),
        max_profit=max(profits, default=0),
        min_profit=min(profits, default=0),
        monthly_profit={
            entry.month: entry.profit for entry in monthly_profit(sessions, tz)
        },
    )


def monthly_profit(
    sessions: Iterable[SessionRecord], tz: ZoneInfo = DEFAULT_ZONE
) -> list[MonthlyProfit]:
    """Sum profit per YYYY-MM month, newest month first."""
    totals: dict[str, int] = {}
    for session in sessions:
        month = _local_day(session.date, tz).strftime("%Y-%m")
        totals[month] = totals.get(month, 0) + session.profit
    return [
        MonthlyProfit(month=month, profit=profit)
        for month, profit in sorted(totals.items(), reverse=True)
    ]


def group_stats(
    entries: Iterable[tuple[str, str, SessionRecord]], sort: str = "insertion"
) -> list[GroupStats]:
    """Roll up sessions per key.

    ``entries`` yields ``(key, display_name, session)`` triples. Groups keep
    first-seen order unless ``sort`` asks for profit, session count or win
    rate (all descending) or name (ascending).
    """
    if sort not in GROUP_SORTS:
        raise ValidationError(f"Unknown sort key: {sort}")
    tallies: dict[str, _Tally] = {}
    for key, name, session in entries:
        tallies.setdefault(key, _Tally(name=name)).add(session)
    stats = [_to_group_stats(key, tally) for key, tally in tallies.items()]
    if sort == "profit":
        stats.sort(key=lambda item: item.profit, reverse=True)
    elif sort == "sessions":
        stats.sort(key=lambda item: item.sessions, reverse=True)
    elif sort == "win_rate":
        stats.sort(key=lambda item: item.win_rate, reverse=True)
    elif sort == "name":
        stats.sort(key=lambda item: item.name)
    return stats


def stats_by_employee(
    sessions: Iterable[ResolvedSession], sort: str = "insertion"
) -> list[GroupStats]:
    """Group stats per employee."""
    return group_stats(
        ((item.session.player_id, item.player, item.session) for item in sessions),
        sort,
    )


def stats_by_machine(
    sessions: Iterable[ResolvedSession], sort: str = "profit"
) -> list[GroupStats]:
    """Group stats per machine."""
    return group_stats(
        ((item.session.machine_id, item.machine, item.session) for item in sessions),
        sort,
    )


def daily_profit(
    sessions: Iterable[SessionRecord],
    today: date,
    days: int | None = None,
    tz: ZoneInfo = DEFAULT_ZONE,
    *,
    fill_gaps: bool = True,
) -> list[DailyProfit]:
    """Sum profit per calendar day, oldest day first.

    With ``days`` set, the series covers the ``days`` days ending on
    ``today``. Without it, the series starts at the first session day and
    ends at ``today`` or the last session day, whichever is later. Days with
    no sessions are reported as 0 when ``fill_gaps`` is set and omitted
    otherwise. Spans longer than ``MAX_FILLED_DAYS`` are always sparse.
    """
    totals: dict[date, int] = {}
    for session in sessions:
        day = _local_day(session.date, tz)
        totals[day] = totals.get(day, 0) + session.profit

    if days is not None:
        if days < 1:
            raise ValidationError("Window must cover at least one day")
        start, end = today - timedelta(days=days - 1), today
    elif totals:
        start, end = min(totals), max(max(totals), today)
    else:
        return []

    span = (end - start).days + 1
    if fill_gaps and span <= MAX_FILLED_DAYS:
        return [
            DailyProfit(day=day, profit=totals.get(day, 0))
            for day in (start + timedelta(days=offset) for offset in range(span))
        ]
    return [
        DailyProfit(day=day, profit=profit)
        for day, profit in sorted(totals.items())
        if start <= day <= end
    ]


def cumulative_profit(series: Sequence[DailyProfit]) -> list[DailyProfit]:
    """Running total of a daily series."""
    running = itertools.accumulate(entry.profit for entry in series)
    return [
        DailyProfit(day=entry.day, profit=total)
        for entry, total in zip(series, running, strict=True)
    ]


def window_days(range_name: str) -> int | None:
    """Translate a range name such as ``30days`` into a day count."""
    if range_name not in DAILY_RANGES:
        raise ValidationError(f"Unknown range: {range_name}")
    return DAILY_RANGES[range_name]


@dataclass
class StatsService:
    """Computes dashboard statistics from the session repository."""

    repository: SessionRepository
    lookups: LookupService
    timezone: str = "UTC"

    def overview(self) -> Overview:
        """Return overall totals and averages."""
        return compute_overview(self.repository.list_sessions(), self._zone())

    def by_employee(self, sort: str = "insertion") -> list[GroupStats]:
        """Return per-employee stats."""
        return stats_by_employee(self._resolved(), sort)

    def by_machine(self, sort: str = "profit") -> list[GroupStats]:
        """Return per-machine stats."""
        return stats_by_machine(self._resolved(), sort)

    def monthly(self) -> list[MonthlyProfit]:
        """Return profit per month."""
        return monthly_profit(self.repository.list_sessions(), self._zone())

    def daily(
        self,
        range_name: str = "all",
        *,
        fill_gaps: bool = True,
        today: date | None = None,
    ) -> list[DailyProfit]:
        """Return profit per day for a named range."""
        days = window_days(range_name)
        tz = self._zone()
        return daily_profit(
            self.repository.list_sessions(),
            today or datetime.now(tz=tz).date(),
            days,
            tz,
            fill_gaps=fill_gaps,
        )

    def daily_cumulative(
        self, range_name: str = "all", *, today: date | None = None
    ) -> list[DailyProfit]:
        """Return the running profit total per day for a named range."""
        return cumulative_profit(self.daily(range_name, today=today))

    def _resolved(self) -> list[ResolvedSession]:
        return self.lookups.resolve(self.repository.list_sessions())

    def _zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


def _local_day(value: datetime, tz: ZoneInfo) -> date:
    return value.astimezone(tz).date()


def _percent(part: int, whole: int) -> float:
    return part / whole * 100 if whole else 0.0


def _average(total: int, count: int) -> float:
    return total / count if count else 0.0


def _to_group_stats(key: str, tally: _Tally) -> GroupStats:
    profit = tally.payout - tally.investment
    return GroupStats(
        key=key,
        name=tally.name,
        sessions=tally.sessions,
        total_investment=tally.investment,
        total_payout=tally.payout,
        profit=profit,
        win_count=tally.wins,
        win_rate=_percent(tally.wins, tally.sessions),
        avg_investment=_average(tally.investment, tally.sessions),
        avg_payout=_average(tally.payout, tally.sessions),
        avg_profit=_average(profit, tally.sessions),
    )
