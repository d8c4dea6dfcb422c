"""Period-based trade selection."""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Protocol

from arbdesk.recording.types import TradeRecord
from arbdesk.time_utils import in_bounds, now_utc, parse_timestamp, period_bounds
from arbdesk.types import Period

log = logging.getLogger(__name__)

DEFAULT_LIMIT = 1000


class TradeQuery(Protocol):
    """Read side of the trade store."""

    def fetch_trades(
        self,
        period: Period,
        *,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[TradeRecord]:
        ...


class InMemoryTradeQuery:
    """
    Serves :class:`TradeQuery` from a list of already-loaded trades.

    Results are newest first and capped at ``limit`` rows, matching the
    console's trade analysis endpoint. A custom ``start``/``end`` range
    takes precedence over ``period``; passing only one of them raises
    ``ValueError``.
    """

    def __init__(
        self,
        trades: Iterable[TradeRecord],
        *,
        limit: int = DEFAULT_LIMIT,
        clock: Callable[[], datetime] | None = None,
    ):
        if limit <= 0:
            raise ValueError("limit must be > 0")
        self._trades = list(trades)
        self._limit = limit
        self._clock = clock or now_utc

    def __len__(self) -> int:
        return len(self._trades)

    def fetch_trades(
        self,
        period: Period,
        *,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[TradeRecord]:
        lower, upper = period_bounds(period, now=self._clock(), start=start, end=end)
        bounded = lower is not None or upper is not None

        dated: list[tuple[datetime | None, TradeRecord]] = []
        for t in self._trades:
            try:
                ts = parse_timestamp(t.entry_time)
            except ValueError:
                log.warning("Unparsable entry_time %r on trade %r", t.entry_time, t.id or t.username)
                if not bounded:
                    dated.append((None, t))
                continue

            if in_bounds(ts, lower, upper):
                dated.append((ts, t))

        # newest first; undated rows go last
        dated.sort(key=lambda p: (p[0] is not None, p[0] or datetime.min), reverse=True)
        out = [t for _, t in dated[: self._limit]]
        log.debug("Fetched %d/%d trades for period=%s", len(out), len(self._trades), period.value)
        return out
