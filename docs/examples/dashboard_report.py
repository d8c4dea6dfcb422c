# examples/dashboard_report.py
"""Dashboard-style report: overview, 30-day profit history and IPO score per period."""
import logging
import sys
from pathlib import Path

from arbdesk import BenchmarkConfig, InMemoryTradeQuery, Period, compute_overview, daily_profit
from arbdesk.history import ProfitHistory
from arbdesk.recording import load_trades
from arbdesk.runner import configure_logging, run_benchmark
from arbdesk.time_utils import now_utc

log = logging.getLogger(__name__)


def report(path: Path, constant: str = "1") -> None:
    trades = load_trades(path)
    now = now_utc()

    overview = compute_overview(trades, now=now)
    log.info(
        "%d trades (%d open), net %s, today %d trades / %s",
        overview.total_trades,
        overview.open_trades,
        overview.total_profit,
        overview.today_trades,
        overview.today_profit,
    )

    history = ProfitHistory(daily_profit(trades, now=now))
    heights = abs(history.get_profits()) / history.scale * 150
    for day, h in zip(history.get_dates(), heights):
        log.info("%s %s", day.isoformat(), "#" * max(int(h / 10), 1))

    query = InMemoryTradeQuery(trades)
    for period in Period:
        run = run_benchmark(query, BenchmarkConfig.from_raw(constant=constant, period=period))
        log.info("IPO %-5s score=%s (avg %s pts/lot)", period.value, run.result.score, run.result.average_points)


if __name__ == "__main__":
    configure_logging("INFO")
    report(Path(sys.argv[1]), *sys.argv[2:3])
