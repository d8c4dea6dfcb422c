# tests/conftest.py
import os
import sys
from datetime import datetime, timezone
from decimal import Decimal

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from arbdesk.recording.types import TradeRecord  # noqa: E402
from arbdesk.types import TradeStatus  # noqa: E402


NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


def _dec(value):
    if value is None or isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def make_trade(**overrides) -> TradeRecord:
    """A closed, valid EURUSD trade; override any field by keyword."""
    defaults = dict(
        entry_time="2025-01-15T10:00:00Z",
        exit_time="2025-01-15T10:00:30Z",
        lot_size="1",
        hfm_entry_price="1.25050",
        equiti_entry_price="1.25000",
        hfm_exit_price=None,
        equiti_exit_price=None,
        entry_gap=None,
        exit_gap=None,
        net_profit="10",
        opportunity_type="BUY_HFM",
        username="alice",
        symbol="EURUSD",
        status=TradeStatus.CLOSED,
    )
    defaults.update(overrides)
    for name in (
        "lot_size",
        "hfm_entry_price",
        "equiti_entry_price",
        "hfm_exit_price",
        "equiti_exit_price",
        "entry_gap",
        "exit_gap",
        "net_profit",
    ):
        defaults[name] = _dec(defaults[name])
    return TradeRecord(**defaults)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def trade_factory():
    return make_trade
