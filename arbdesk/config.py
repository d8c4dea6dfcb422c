from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

from arbdesk.benchmark import DEFAULT_CONSTANT
from arbdesk.numeric import to_decimal
from arbdesk.recording.query import DEFAULT_LIMIT
from arbdesk.time_utils import parse_timestamp
from arbdesk.types import Period


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class BenchmarkConfig:
    constant: Decimal = DEFAULT_CONSTANT
    period: Period = Period.ALL
    start: datetime | None = None
    end: datetime | None = None
    limit: int = DEFAULT_LIMIT
    log_level: str = "INFO"

    @property
    def is_custom_range(self) -> bool:
        return self.start is not None and self.end is not None

    @classmethod
    def from_raw(
        cls,
        *,
        constant: Any = DEFAULT_CONSTANT,
        period: Any = None,
        start: Any = None,
        end: Any = None,
        limit: Any = DEFAULT_LIMIT,
        log_level: Any = "INFO",
    ) -> BenchmarkConfig:
        """Validate and construct from raw (CLI or dict) values.

        The constant follows the engine's rule: non-numeric counts as zero.
        Everything else raises ``ValueError`` with a clear message instead of
        letting ``KeyError`` or ``TypeError`` propagate.
        """
        p = Period.parse(period)

        if (start in (None, "")) != (end in (None, "")):
            raise ValueError("start and end must be given together")

        start_dt = end_dt = None
        if start not in (None, ""):
            try:
                start_dt = parse_timestamp(start)
                end_dt = parse_timestamp(end)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"start/end is not a valid timestamp: {exc}") from exc
            if start_dt > end_dt:
                raise ValueError("start must not be after end")

        try:
            n = int(limit)
        except (TypeError, ValueError) as exc:
            raise ValueError("limit is not an integer") from exc
        if n <= 0:
            raise ValueError("limit must be > 0")

        level = str(log_level or "INFO").upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")

        return cls(
            constant=to_decimal(constant),
            period=p,
            start=start_dt,
            end=end_dt,
            limit=n,
            log_level=level,
        )
