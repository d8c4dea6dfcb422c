from collections.abc import Iterable
from datetime import date
from typing import Optional

import numpy as np

from arbdesk.metrics import DailyProfit


class ProfitHistory:
    """
    Daily profit series for charting.

    Provides numpy arrays of the series and the scale used to size bars.

    Example:
        history = ProfitHistory(daily_profit(trades, now=now))
        profits = history.get_profits()
        heights = np.abs(profits) / history.scale * 150
    """

    def __init__(self, days: Iterable[DailyProfit]):
        self.days: list[DailyProfit] = sorted(days, key=lambda d: d.date)

    def get_days(self, count: Optional[int] = None) -> list[DailyProfit]:
        """
        Get daily entries.

        Args:
            count: Number of most recent days to return (None = all)

        Returns:
            List of DailyProfit, oldest first
        """
        if count is None:
            return list(self.days)
        return self.days[-count:] if count > 0 else []

    def get_dates(self, count: Optional[int] = None) -> list[date]:
        return [d.date for d in self.get_days(count)]

    def get_profits(self, count: Optional[int] = None) -> np.ndarray:
        """Get array of daily net profits."""
        return np.array([float(d.profit) for d in self.get_days(count)], dtype=np.float64)

    def get_trade_counts(self, count: Optional[int] = None) -> np.ndarray:
        """Get array of daily trade counts."""
        return np.array([d.trades for d in self.get_days(count)], dtype=np.int64)

    @property
    def scale(self) -> float:
        """Largest absolute daily profit, never below 1."""
        profits = self.get_profits()
        if profits.size == 0:
            return 1.0
        return max(float(np.max(np.abs(profits))), 1.0)

    @property
    def latest(self) -> Optional[DailyProfit]:
        """Most recent day, or None if empty."""
        return self.days[-1] if self.days else None

    def __len__(self) -> int:
        return len(self.days)

    def __repr__(self) -> str:
        return f"ProfitHistory(days={len(self)})"
