"""Benchmark summaries and audit files."""

import csv
from decimal import Decimal
from pathlib import Path
from typing import Any

from arbdesk.benchmark import BenchmarkResult


SKIPPED_COLUMNS = [
    "entry_time",
    "username",
    "symbol",
    "opportunity_type",
    "lot_size",
    "hfm_entry_price",
    "equiti_entry_price",
    "net_profit",
]

SCORED_COLUMNS = [
    "entry_time",
    "username",
    "symbol",
    "lot_size",
    "entry_points",
    "exit_points",
    "trade_points",
    "lot_points",
]


def _cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def format_summary(result: BenchmarkResult, *, constant: Any) -> str:
    """Human-readable benchmark summary, one metric per line."""
    lines = [
        f"IPO score:          {_cell(result.score)}",
        f"Lot x points:       {_cell(result.total_lot_points_product)}",
        f"Total lots:         {_cell(result.total_lots)}",
        f"Constant:           {constant}",
        f"Avg points per lot: {_cell(result.average_points)}",
        f"Valid trades:       {result.valid_count}",
        f"Skipped trades:     {result.skipped_count}",
    ]
    if result.skipped_trades:
        lines.append(f"Incomplete pairs:   {len(result.skipped_trades)} (missing HFM or Equiti entry price)")
    return "\n".join(lines)


def write_skipped_trades_csv(result: BenchmarkResult, path: Path) -> None:
    """Write trades excluded for a missing broker entry price."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        w = csv.writer(f)
        w.writerow(SKIPPED_COLUMNS)
        for t in result.skipped_trades:
            w.writerow([_cell(getattr(t, c)) for c in SKIPPED_COLUMNS])


def write_scored_trades_csv(result: BenchmarkResult, path: Path) -> None:
    """
    Write the per-trade breakdown of included trades.

    Output schema:
    entry_time,username,symbol,lot_size,entry_points,exit_points,trade_points,lot_points
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        w = csv.writer(f)
        w.writerow(SCORED_COLUMNS)
        for s in result.scored_trades:
            w.writerow(
                [
                    s.trade.entry_time,
                    s.trade.username,
                    s.trade.symbol,
                    _cell(s.lot_size),
                    _cell(s.entry_points),
                    _cell(s.exit_points),
                    _cell(s.trade_points),
                    _cell(s.lot_points),
                ]
            )
