"""Tests for benchmark runs and the CLI."""

import json
import logging
from decimal import Decimal

import pytest

from arbdesk.config import BenchmarkConfig
from arbdesk.recording.query import InMemoryTradeQuery
from arbdesk.runner import configure_logging, main, run_benchmark
from arbdesk.types import Period


@pytest.fixture
def trades_file(tmp_path):
    rows = [
        {
            "entry_time": "2025-01-15T10:00:00Z",
            "lot_size": "1",
            "hfm_entry_price": "1.25050",
            "equiti_entry_price": "1.25000",
            "username": "alice",
        },
        {
            "entry_time": "2025-01-15T11:00:00Z",
            "lot_size": "1",
            "hfm_entry_price": "1.25050",
            "username": "bob",
        },
    ]
    p = tmp_path / "trades.json"
    p.write_text(json.dumps({"trades": rows}))
    return p


def test_run_benchmark_uses_period(trade_factory, now):
    trades = [
        trade_factory(entry_time="2025-01-15T10:00:00Z", entry_gap="5"),
        trade_factory(entry_time="2024-01-01T10:00:00Z", entry_gap="5"),
    ]
    query = InMemoryTradeQuery(trades, clock=lambda: now)

    run = run_benchmark(query, BenchmarkConfig(constant=Decimal(0), period=Period.DAY))

    assert len(run.trades) == 1
    assert run.result.score == Decimal(5)


def test_run_benchmark_custom_range(trade_factory, now):
    trades = [
        trade_factory(entry_time="2025-01-15T10:00:00Z", entry_gap="5"),
        trade_factory(entry_time="2024-01-01T10:00:00Z", entry_gap="7"),
    ]
    query = InMemoryTradeQuery(trades, clock=lambda: now)
    config = BenchmarkConfig.from_raw(constant=0, start="2023-12-31", end="2024-01-02")

    run = run_benchmark(query, config)

    assert run.result.score == Decimal(7)


def test_main_prints_summary_and_writes_csvs(trades_file, tmp_path, capsys):
    skipped = tmp_path / "skipped.csv"
    scored = tmp_path / "scored.csv"

    code = main([
        str(trades_file),
        "--constant", "1",
        "--skipped-csv", str(skipped),
        "--scored-csv", str(scored),
    ])

    assert code == 0
    out = capsys.readouterr().out
    assert "IPO score:          49.00000" in out
    assert "Skipped trades:     1" in out
    assert "bob" in skipped.read_text()
    assert "alice" in scored.read_text()


def test_main_rejects_bad_config(trades_file):
    assert main([str(trades_file), "--period", "fortnight"]) == 2


def test_main_reports_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 2


def test_configure_logging_is_non_destructive():
    root = logging.getLogger()
    saved = list(root.handlers)
    saved_level = root.level
    try:
        root.handlers.clear()
        configure_logging("DEBUG")
        assert len(root.handlers) == 1
        configure_logging("INFO")
        assert len(root.handlers) == 1
        configure_logging("WARNING", force=True)
        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved
        root.setLevel(saved_level)
