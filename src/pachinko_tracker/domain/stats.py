"""Domain models for session statistics."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Overview:
    """Totals and averages across all sessions."""

    total_sessions: int
    win_count: int
    win_rate: float
    total_investment: int
    total_payout: int
    total_profit: int
    avg_investment: float
    avg_payout: float
    max_profit: int
    min_profit: int
    monthly_profit: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class GroupStats:
    """Rollup for one employee or machine."""

    key: str
    name: str
    sessions: int
    total_investment: int
    total_payout: int
    profit: int
    win_count: int
    win_rate: float
    avg_investment: float
    avg_payout: float
    avg_profit: float


@dataclass(frozen=True)
class DailyProfit:
    """Profit summed over one calendar day."""

    day: date
    profit: int


@dataclass(frozen=True)
class MonthlyProfit:
    """Profit summed over one calendar month."""

    month: str
    profit: int
