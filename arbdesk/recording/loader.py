"""Load trade rows exported from the console."""

import csv
import json
import logging
from pathlib import Path
from typing import Any

from arbdesk.recording.types import TradeRecord

log = logging.getLogger(__name__)


def load_trades_json(path: Path) -> list[TradeRecord]:
    """
    Load trades from a JSON file.

    Accepts either a list of trade rows or an object with a ``"trades"``
    list (the shape returned by the console's trade analysis endpoint).

    Raises:
        ValueError: if the document has neither shape
    """
    data: Any = json.loads(Path(path).read_text())

    if isinstance(data, dict):
        data = data.get("trades")
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of trades or an object with a 'trades' list")

    trades = []
    for i, row in enumerate(data):
        if not isinstance(row, dict):
            raise ValueError(f"{path}: trade #{i} is not an object")
        trades.append(TradeRecord.from_row(row))

    log.info("Loaded %d trades from %s", len(trades), path)
    return trades


def load_trades_csv(path: Path) -> list[TradeRecord]:
    """Load trades from a CSV file with a header row of field names."""
    with Path(path).open(newline="") as f:
        trades = [TradeRecord.from_row(row) for row in csv.DictReader(f)]

    log.info("Loaded %d trades from %s", len(trades), path)
    return trades


def load_trades(path: Path) -> list[TradeRecord]:
    """Dispatch on file suffix (``.json`` or ``.csv``)."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        return load_trades_json(path)
    if suffix == ".csv":
        return load_trades_csv(path)
    raise ValueError(f"Unsupported trades file type: {path.suffix or path.name!r}")
