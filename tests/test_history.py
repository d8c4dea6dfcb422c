from datetime import date
from decimal import Decimal

import numpy as np

from arbdesk.history import ProfitHistory
from arbdesk.metrics import DailyProfit


def _day(d, profit, trades=1):
    return DailyProfit(date=date(2025, 1, d), profit=Decimal(str(profit)), trades=trades)


def test_arrays_are_ordered_by_date():
    h = ProfitHistory([_day(3, "-12.5", 2), _day(1, "4", 1), _day(2, "0", 3)])

    assert h.get_dates() == [date(2025, 1, 1), date(2025, 1, 2), date(2025, 1, 3)]
    np.testing.assert_array_equal(h.get_profits(), np.array([4.0, 0.0, -12.5]))
    np.testing.assert_array_equal(h.get_trade_counts(), np.array([1, 3, 2]))
    assert h.get_profits().dtype == np.float64
    assert h.get_trade_counts().dtype == np.int64


def test_count_returns_most_recent():
    h = ProfitHistory([_day(1, 1), _day(2, 2), _day(3, 3)])
    np.testing.assert_array_equal(h.get_profits(count=2), np.array([2.0, 3.0]))
    assert h.get_days(count=0) == []


def test_scale_is_max_abs_profit_with_floor():
    assert ProfitHistory([_day(1, "4"), _day(2, "-12.5")]).scale == 12.5
    assert ProfitHistory([_day(1, "0.2")]).scale == 1.0
    assert ProfitHistory([]).scale == 1.0


def test_latest_and_len():
    h = ProfitHistory([_day(2, 1), _day(1, 1)])
    assert h.latest == _day(2, 1)
    assert len(h) == 2
    assert ProfitHistory([]).latest is None
    assert repr(h) == "ProfitHistory(days=2)"
