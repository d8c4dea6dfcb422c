"""
Benchmark runs and the command-line entry point.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from arbdesk.benchmark import BenchmarkResult, compute_benchmark
from arbdesk.config import BenchmarkConfig
from arbdesk.recording import InMemoryTradeQuery, TradeQuery, TradeRecord, load_trades
from arbdesk.reporting import format_summary, write_scored_trades_csv, write_skipped_trades_csv


log = logging.getLogger(__name__)


__all__ = [
    "BenchmarkRun",
    "configure_logging",
    "main",
    "run_benchmark",
]


def configure_logging(level: str = "INFO", force: bool = False) -> None:
    """
    Configure root logger with console output.

    By default, this is non-destructive: if the root logger already has handlers,
    it will do nothing (assuming the application has configured logging).

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        force: If True, clear existing handlers and force this configuration
    """
    root_logger = logging.getLogger()

    if root_logger.hasHandlers() and not force:
        return

    root_logger.setLevel(level.upper())

    if force:
        root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


@dataclass(frozen=True)
class BenchmarkRun:
    config: BenchmarkConfig
    trades: list[TradeRecord]
    result: BenchmarkResult


def run_benchmark(query: TradeQuery, config: BenchmarkConfig) -> BenchmarkRun:
    """Fetch the configured period from *query* and score it."""
    if config.is_custom_range:
        trades = query.fetch_trades(config.period, start=config.start, end=config.end)
        window = f"{config.start.isoformat()} .. {config.end.isoformat()}"
    else:
        trades = query.fetch_trades(config.period)
        window = config.period.value

    result = compute_benchmark(trades, config.constant)
    log.info(
        "Benchmark [%s]: %d trades, %d valid, %d skipped, score=%s",
        window,
        len(trades),
        result.valid_count,
        result.skipped_count,
        result.score,
    )
    return BenchmarkRun(config=config, trades=trades, result=result)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arbdesk",
        description="Compute the IPO benchmark score for exported arbitrage trades.",
    )
    parser.add_argument("trades", type=Path, help="Trades file (.json or .csv)")
    parser.add_argument("--period", default="all", help="day, week, month or all (default: all)")
    parser.add_argument("--start", help="Custom range start (ISO timestamp); requires --end")
    parser.add_argument("--end", help="Custom range end (ISO timestamp); requires --start")
    parser.add_argument("--constant", default="1", help="Points-per-lot constant (default: 1)")
    parser.add_argument("--limit", default=1000, type=int, help="Maximum trades to score (default: 1000)")
    parser.add_argument("--skipped-csv", type=Path, help="Write incomplete pairs to this CSV")
    parser.add_argument("--scored-csv", type=Path, help="Write per-trade points to this CSV")
    parser.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING or ERROR")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        config = BenchmarkConfig.from_raw(
            constant=args.constant,
            period=args.period,
            start=args.start,
            end=args.end,
            limit=args.limit,
            log_level=args.log_level,
        )
    except ValueError as exc:
        configure_logging()
        log.error("Invalid configuration: %s", exc)
        return 2

    configure_logging(config.log_level)

    try:
        trades = load_trades(args.trades)
    except (OSError, ValueError) as exc:
        log.error("Failed to load trades from %s: %s", args.trades, exc)
        return 2

    run = run_benchmark(InMemoryTradeQuery(trades, limit=config.limit), config)

    if args.skipped_csv:
        write_skipped_trades_csv(run.result, args.skipped_csv)
        log.info("Wrote %d skipped trades to %s", len(run.result.skipped_trades), args.skipped_csv)
    if args.scored_csv:
        write_scored_trades_csv(run.result, args.scored_csv)
        log.info("Wrote %d scored trades to %s", run.result.valid_count, args.scored_csv)

    print(format_summary(run.result, constant=config.constant))
    return 0
