from .loader import load_trades, load_trades_csv, load_trades_json
from .query import DEFAULT_LIMIT, InMemoryTradeQuery, TradeQuery
from .types import TradeRecord

__all__ = [
    "DEFAULT_LIMIT",
    "InMemoryTradeQuery",
    "TradeQuery",
    "TradeRecord",
    "load_trades",
    "load_trades_csv",
    "load_trades_json",
]
