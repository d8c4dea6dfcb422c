"""Tests for arbdesk.recording.loader – reading exported trades."""

import csv
import json
from decimal import Decimal

import pytest

from arbdesk.recording.loader import load_trades, load_trades_csv, load_trades_json


ROW = {
    "entry_time": "2025-01-15T10:00:00Z",
    "lot_size": "1",
    "hfm_entry_price": "1.25050",
    "equiti_entry_price": "1.25000",
    "username": "alice",
}


def test_json_list(tmp_path):
    p = tmp_path / "trades.json"
    p.write_text(json.dumps([ROW, ROW]))
    trades = load_trades_json(p)
    assert len(trades) == 2
    assert trades[0].hfm_entry_price == Decimal("1.25050")


def test_json_api_response_shape(tmp_path):
    p = tmp_path / "trades.json"
    p.write_text(json.dumps({"trades": [ROW]}))
    assert load_trades_json(p)[0].username == "alice"


@pytest.mark.parametrize("doc", [{"history": []}, 42, "trades", [1, 2]])
def test_json_wrong_shape_raises(tmp_path, doc):
    p = tmp_path / "trades.json"
    p.write_text(json.dumps(doc))
    with pytest.raises(ValueError):
        load_trades_json(p)


def test_csv(tmp_path):
    p = tmp_path / "trades.csv"
    with p.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=list(ROW) + ["exit_gap"])
        w.writeheader()
        w.writerow({**ROW, "exit_gap": ""})
        w.writerow({**ROW, "lot_size": "", "exit_gap": "4"})

    trades = load_trades_csv(p)

    assert len(trades) == 2
    assert trades[0].exit_gap is None
    assert trades[1].lot_size is None
    assert trades[1].exit_gap == Decimal(4)


def test_load_trades_dispatches_on_suffix(tmp_path):
    p = tmp_path / "TRADES.JSON"
    p.write_text(json.dumps([ROW]))
    assert len(load_trades(p)) == 1

    with pytest.raises(ValueError, match="Unsupported"):
        load_trades(tmp_path / "trades.xlsx")
