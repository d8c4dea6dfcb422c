"""
Arbdesk - Trade analytics for the cross-broker arbitrage admin console.

Provides the IPO benchmark engine, period-based trade selection and the
aggregate statistics shown on the console dashboard.
"""

from .benchmark import BenchmarkResult, InvalidArgumentError, ScoredTrade, compute_benchmark
from .config import BenchmarkConfig
from .metrics import DailyProfit, Overview, compute_overview, daily_profit
from .recording import InMemoryTradeQuery, TradeQuery, TradeRecord
from .types import Period, TradeStatus

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BenchmarkConfig",
    "BenchmarkResult",
    "DailyProfit",
    "InMemoryTradeQuery",
    "InvalidArgumentError",
    "Overview",
    "Period",
    "ScoredTrade",
    "TradeQuery",
    "TradeRecord",
    "TradeStatus",
    "compute_benchmark",
    "compute_overview",
    "daily_profit",
]
