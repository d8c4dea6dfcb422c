from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from arbdesk.numeric import to_optional_decimal
from arbdesk.time_utils import to_iso
from arbdesk.types import TradeStatus


# field name -> accepted row keys, first match wins
_ROW_KEYS: dict[str, tuple[str, ...]] = {
    "entry_time": ("entry_time", "entryTime"),
    "exit_time": ("exit_time", "exitTime"),
    "lot_size": ("lot_size", "lotSize"),
    "hfm_entry_price": ("hfm_entry_price", "hfmEntryPrice"),
    "hfm_exit_price": ("hfm_exit_price", "hfmExitPrice"),
    "equiti_entry_price": ("equiti_entry_price", "equitiEntryPrice"),
    "equiti_exit_price": ("equiti_exit_price", "equitiExitPrice"),
    "entry_gap": ("entry_gap", "entryGap"),
    "exit_gap": ("exit_gap", "exitGap"),
    "net_profit": ("net_profit", "netProfit"),
    "opportunity_type": ("opportunity_type", "opportunityType"),
    "username": ("username",),
    "symbol": ("symbol", "hfm_symbol", "hfmSymbol"),
    "status": ("status",),
    "id": ("id",),
    "hold_duration": ("hold_duration", "holdDuration"),
}

_DECIMAL_FIELDS = (
    "lot_size",
    "hfm_entry_price",
    "hfm_exit_price",
    "equiti_entry_price",
    "equiti_exit_price",
    "entry_gap",
    "exit_gap",
    "net_profit",
    "hold_duration",
)


def _lookup(row: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for k in keys:
        v = row.get(k)
        if v not in (None, ""):
            return v
    return None


def _text(value: Any) -> str:
    if value is None:
        return ""
    return to_iso(value)


@dataclass(frozen=True)
class TradeRecord:
    """One cross-broker arbitrage trade (HFM leg + Equiti leg)."""

    entry_time: str
    exit_time: str | None = None  # None while the trade is open
    lot_size: Decimal | None = None
    hfm_entry_price: Decimal | None = None
    hfm_exit_price: Decimal | None = None
    equiti_entry_price: Decimal | None = None
    equiti_exit_price: Decimal | None = None
    entry_gap: Decimal | None = None  # points, if the bot recorded them
    exit_gap: Decimal | None = None
    net_profit: Decimal | None = None
    opportunity_type: str = ""
    username: str = ""
    symbol: str = ""
    status: TradeStatus = TradeStatus.CLOSED
    id: str = ""
    hold_duration: Decimal | None = None  # seconds

    @property
    def is_open(self) -> bool:
        return self.status is TradeStatus.OPEN

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "TradeRecord":
        """Build a record from a database row or API payload.

        Both snake_case and camelCase keys are accepted. Numeric fields that
        cannot be parsed become ``None``; this never raises for bad values.
        """
        values = {name: _lookup(row, keys) for name, keys in _ROW_KEYS.items()}

        for name in _DECIMAL_FIELDS:
            values[name] = to_optional_decimal(values[name])

        exit_time = values["exit_time"]

        return cls(
            entry_time=_text(values["entry_time"]),
            exit_time=_text(exit_time) if exit_time is not None else None,
            lot_size=values["lot_size"],
            hfm_entry_price=values["hfm_entry_price"],
            hfm_exit_price=values["hfm_exit_price"],
            equiti_entry_price=values["equiti_entry_price"],
            equiti_exit_price=values["equiti_exit_price"],
            entry_gap=values["entry_gap"],
            exit_gap=values["exit_gap"],
            net_profit=values["net_profit"],
            opportunity_type=_text(values["opportunity_type"]),
            username=_text(values["username"]),
            symbol=_text(values["symbol"]),
            status=TradeStatus.parse(values["status"]),
            id=_text(values["id"]),
            hold_duration=values["hold_duration"],
        )
