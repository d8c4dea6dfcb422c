"""IPO benchmark scoring for cross-broker arbitrage trades."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Context, Decimal, localcontext
from typing import Any

from arbdesk.numeric import ZERO, to_decimal
from arbdesk.recording.types import TradeRecord


log = logging.getLogger(__name__)


__all__ = [
    "BenchmarkResult",
    "InvalidArgumentError",
    "ScoredTrade",
    "compute_benchmark",
    "is_valid_pair",
    "normalise_points",
]


# Raw price deltas are ~1e-5; stored point values are normally >= 1.
POINTS_PER_PRICE_UNIT = Decimal(100000)
RAW_PRICE_THRESHOLD = Decimal("0.9")

DEFAULT_CONSTANT = Decimal(1)

# Fixed arithmetic context so results do not depend on the caller's.
# Nothing traps: overflow yields Infinity, which the scoring loop rejects.
_CONTEXT = Context(prec=28, traps=[])


class InvalidArgumentError(TypeError):
    """Raised when the benchmark input is not a sequence of trade records."""


@dataclass(frozen=True)
class ScoredTrade:
    """Per-trade contribution to the benchmark."""
    trade: TradeRecord
    lot_size: Decimal
    entry_points: Decimal
    exit_points: Decimal
    trade_points: Decimal

    @property
    def lot_points(self) -> Decimal:
        return self.lot_size * self.trade_points


@dataclass(frozen=True)
class BenchmarkResult:
    score: Decimal
    total_lot_points_product: Decimal
    total_lots: Decimal
    valid_count: int
    skipped_count: int
    skipped_trades: tuple[TradeRecord, ...] = ()
    scored_trades: tuple[ScoredTrade, ...] = ()

    @property
    def average_points(self) -> Decimal:
        """Lot-weighted average points per lot (zero with no lots)."""
        if not self.total_lots:
            return ZERO
        with localcontext(_CONTEXT):
            return self.total_lot_points_product / self.total_lots


def is_valid_pair(trade: TradeRecord) -> bool:
    """Both broker legs recorded a strictly positive entry price."""
    return to_decimal(trade.hfm_entry_price) > 0 and to_decimal(trade.equiti_entry_price) > 0


def normalise_points(value: Decimal, *, price_derived: bool) -> Decimal:
    """
    Convert a gap value into point units.

    Values computed from prices, and any value under 0.9 in magnitude, are
    taken to be raw price deltas and scaled by 100000. Genuine point values
    below 0.9 are therefore over-scaled; callers rely on this behaviour.
    """
    if price_derived or abs(value) < RAW_PRICE_THRESHOLD:
        return value * POINTS_PER_PRICE_UNIT
    return value


def _resolve_gap(gap: Any, price_a: Any, price_b: Any) -> tuple[Decimal, bool]:
    """Return ``(gap, price_derived)``, falling back to the price difference."""
    value = to_decimal(gap)
    if value == 0:
        a = to_decimal(price_a)
        b = to_decimal(price_b)
        if a and b:
            return abs(a - b), True
    return value, False


def _score_trade(trade: TradeRecord, lot_size: Decimal) -> ScoredTrade:
    entry_gap, entry_derived = _resolve_gap(
        trade.entry_gap, trade.hfm_entry_price, trade.equiti_entry_price
    )
    exit_gap, exit_derived = _resolve_gap(
        trade.exit_gap, trade.hfm_exit_price, trade.equiti_exit_price
    )

    entry_points = normalise_points(entry_gap, price_derived=entry_derived)
    exit_points = normalise_points(exit_gap, price_derived=exit_derived)

    return ScoredTrade(
        trade=trade,
        lot_size=lot_size,
        entry_points=entry_points,
        exit_points=exit_points,
        trade_points=abs(entry_points) + abs(exit_points),
    )


def _as_records(trades: Any) -> list[TradeRecord]:
    if isinstance(trades, (str, bytes, Mapping)) or not isinstance(trades, Iterable):
        raise InvalidArgumentError(
            f"trades must be a sequence of trade records, got {type(trades).__name__}"
        )

    records: list[TradeRecord] = []
    for i, t in enumerate(trades):
        if isinstance(t, TradeRecord):
            records.append(t)
        elif isinstance(t, Mapping):
            records.append(TradeRecord.from_row(t))
        else:
            raise InvalidArgumentError(
                f"trades[{i}] is not a trade record ({type(t).__name__})"
            )
    return records


def compute_benchmark(trades: Iterable[TradeRecord | Mapping[str, Any]], constant: Any = DEFAULT_CONSTANT) -> BenchmarkResult:
    """
    Compute the IPO benchmark score for a set of trades.

    score = sum(lot_size * trade_points) - sum(lot_size) * constant

    Trades missing either broker's entry price are skipped and listed in
    ``skipped_trades``. Trades with a zero lot size are skipped but not
    listed. A trade whose points overflow the decimal range is skipped the
    same way. Malformed numeric fields count as zero; the only error is a
    non-sequence input. An out-of-range constant gives a signed infinite
    score rather than an error.

    Args:
        trades: TradeRecord instances or raw trade rows (mappings)
        constant: Points-per-lot threshold; non-numeric values count as zero

    Returns:
        BenchmarkResult with the score, totals and audit lists

    Raises:
        InvalidArgumentError: if *trades* is not an iterable of trade records
    """
    records = _as_records(trades)
    k = to_decimal(constant)

    skipped: list[TradeRecord] = []
    scored: list[ScoredTrade] = []
    skipped_count = 0
    total_product = ZERO
    total_lots = ZERO

    with localcontext(_CONTEXT):
        for trade in records:
            if not is_valid_pair(trade):
                skipped.append(trade)
                skipped_count += 1
                continue

            lot_size = to_decimal(trade.lot_size)
            if lot_size == 0:
                skipped_count += 1
                continue

            s = _score_trade(trade, lot_size)
            product = total_product + s.lot_points
            lots = total_lots + lot_size
            if not (product.is_finite() and lots.is_finite()):
                log.warning("Excluding trade %r: points overflow", trade.id or trade.username)
                skipped_count += 1
                continue

            scored.append(s)
            total_product = product
            total_lots = lots

        score = total_product - total_lots * k

    log.debug(
        "Benchmark: %d valid, %d skipped (%d incomplete pairs), lots=%s score=%s",
        len(scored),
        skipped_count,
        len(skipped),
        total_lots,
        score,
    )

    return BenchmarkResult(
        score=score,
        total_lot_points_product=total_product,
        total_lots=total_lots,
        valid_count=len(scored),
        skipped_count=skipped_count,
        skipped_trades=tuple(skipped),
        scored_trades=tuple(scored),
    )
