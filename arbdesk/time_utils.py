"""Centralised timestamp handling.

All timestamp parsing and period arithmetic goes through this module.
Internal representation: UTC-aware ``datetime``.
Trade records keep their timestamps as ISO strings.
"""

from datetime import datetime, time, timedelta, timezone

from arbdesk.types import Period


WEEK_DAYS = 7
MONTH_DAYS = 30


# ---------------------------------------------------------------------------
# Core conversions
# ---------------------------------------------------------------------------


def _from_epoch_ms(ms: int | float) -> datetime:
    try:
        return datetime.fromtimestamp(ms / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError(f"Epoch milliseconds out of range: {ms!r}") from exc


def parse_timestamp(ts: str | int | float | datetime) -> datetime:
    """Parse any timestamp representation to a UTC-aware datetime.

    Accepted inputs:
      * ``datetime`` (naive values are taken as UTC)
      * ISO 8601 string (``T`` or space separator, with or without ``Z``)
      * ``YYYY/MM/DD`` date prefix (normalised to dashes)
      * Integer or float milliseconds since epoch
      * String containing a numeric value (e.g. ``"1640995200000"``)

    Raises:
        ValueError: for empty or unparsable strings and out-of-range epochs
    """
    if isinstance(ts, datetime):
        return ts if ts.tzinfo is not None else ts.replace(tzinfo=timezone.utc)

    if isinstance(ts, (int, float)):
        return _from_epoch_ms(ts)

    s = (ts or "").strip()
    if not s:
        raise ValueError("Empty timestamp")

    # String that looks like a number → treat as milliseconds
    if s.replace(".", "", 1).lstrip("-").isdigit():
        return _from_epoch_ms(float(s))

    # Normalise YYYY/MM/DD → YYYY-MM-DD
    if len(s) >= 10 and s[4] == "/" and s[7] == "/":
        s = f"{s[:4]}-{s[5:7]}-{s[8:]}"

    s = s.replace("Z", "+00:00")
    s = s.replace(" ", "T", 1)

    dt = datetime.fromisoformat(s)
    return dt if dt.tzinfo is not None else dt.replace(tzinfo=timezone.utc)


def to_iso(ts: object) -> str:
    """Render a datetime as an ISO string; anything else goes through ``str()``."""
    if isinstance(ts, datetime):
        return ts.isoformat()
    return str(ts)


def now_utc() -> datetime:
    """Current UTC time."""
    return datetime.now(timezone.utc)


def start_of_day(dt: datetime) -> datetime:
    """Midnight (UTC) of the UTC calendar day containing *dt*."""
    day = dt.astimezone(timezone.utc).date()
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Reporting periods
# ---------------------------------------------------------------------------


def period_bounds(
    period: Period,
    *,
    now: datetime,
    start: datetime | None = None,
    end: datetime | None = None,
) -> tuple[datetime | None, datetime | None]:
    """Resolve a reporting period to inclusive ``(start, end)`` bounds.

    A custom range (both *start* and *end* given) takes precedence over
    *period*. ``None`` on either side of the result means unbounded.

      * ``DAY``   → from midnight UTC today
      * ``WEEK``  → last 7 days
      * ``MONTH`` → last 30 days
      * ``ALL``   → everything

    Raises:
        ValueError: if only one of *start* and *end* is given
    """
    if (start is None) != (end is None):
        raise ValueError("start and end must be given together")
    if start is not None and end is not None:
        return parse_timestamp(start), parse_timestamp(end)

    now = parse_timestamp(now)
    if period is Period.DAY:
        return start_of_day(now), None
    if period is Period.WEEK:
        return now - timedelta(days=WEEK_DAYS), None
    if period is Period.MONTH:
        return now - timedelta(days=MONTH_DAYS), None
    return None, None


def in_bounds(ts: datetime, lower: datetime | None, upper: datetime | None) -> bool:
    """True if *ts* falls inside the inclusive bounds."""
    if lower is not None and ts < lower:
        return False
    if upper is not None and ts > upper:
        return False
    return True
