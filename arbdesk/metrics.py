"""Aggregate trade statistics for the console overview."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal

from arbdesk.numeric import ZERO, to_decimal
from arbdesk.recording.types import TradeRecord
from arbdesk.time_utils import parse_timestamp


__all__ = [
    "DailyProfit",
    "Overview",
    "compute_overview",
    "daily_profit",
]


@dataclass(frozen=True)
class Overview:
    """Platform-wide trade totals."""
    total_trades: int
    total_profit: Decimal
    open_trades: int
    today_trades: int
    today_profit: Decimal

    @property
    def avg_profit_per_trade(self) -> Decimal:
        if not self.total_trades:
            return ZERO
        return self.total_profit / self.total_trades


@dataclass(frozen=True)
class DailyProfit:
    date: date
    profit: Decimal
    trades: int


def _entry_date(trade: TradeRecord) -> date | None:
    try:
        return parse_timestamp(trade.entry_time).date()
    except ValueError:
        return None


def compute_overview(trades: Iterable[TradeRecord], *, now: datetime) -> Overview:
    """
    Compute overview totals.

    "Today" is the UTC calendar date of *now*. Trades whose entry time
    cannot be parsed still count towards the all-time totals.
    """
    today = parse_timestamp(now).date()

    total_trades = 0
    open_trades = 0
    today_trades = 0
    total_profit = ZERO
    today_profit = ZERO

    for t in trades:
        profit = to_decimal(t.net_profit)
        total_trades += 1
        total_profit += profit
        if t.is_open:
            open_trades += 1
        if _entry_date(t) == today:
            today_trades += 1
            today_profit += profit

    return Overview(
        total_trades=total_trades,
        total_profit=total_profit,
        open_trades=open_trades,
        today_trades=today_trades,
        today_profit=today_profit,
    )


def daily_profit(trades: Iterable[TradeRecord], *, now: datetime, days: int = 30) -> list[DailyProfit]:
    """
    Net profit and trade count per entry date over the last *days* days.

    Only dates with at least one trade are returned, oldest first.
    """
    if days <= 0:
        raise ValueError("days must be > 0")

    cutoff = parse_timestamp(now) - timedelta(days=days)

    profit_by_day: dict[date, Decimal] = {}
    count_by_day: dict[date, int] = {}
    for t in trades:
        try:
            ts = parse_timestamp(t.entry_time)
        except ValueError:
            continue
        if ts < cutoff:
            continue
        d = ts.date()
        profit_by_day[d] = profit_by_day.get(d, ZERO) + to_decimal(t.net_profit)
        count_by_day[d] = count_by_day.get(d, 0) + 1

    return [
        DailyProfit(date=d, profit=profit_by_day[d], trades=count_by_day[d])
        for d in sorted(profit_by_day)
    ]
