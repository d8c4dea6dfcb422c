"""Shared enums for trade analytics."""

from enum import Enum


class TradeStatus(str, Enum):
    """Lifecycle state of a bot trade as stored by the platform."""
    OPEN = "OPEN"
    CLOSED = "CLOSED"

    @classmethod
    def parse(cls, value: "object") -> "TradeStatus":
        """Case-insensitive lookup; anything unknown is treated as closed."""
        if isinstance(value, TradeStatus):
            return value
        s = str(value or "").strip().upper()
        return cls.OPEN if s == cls.OPEN.value else cls.CLOSED


class Period(str, Enum):
    """Selectable reporting window for trade queries."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    ALL = "all"

    @classmethod
    def parse(cls, value: "str | Period | None") -> "Period":
        """
        Resolve a period name.

        ``None`` and the empty string mean :attr:`ALL`.

        Raises:
            ValueError: if the name is not a known period
        """
        if isinstance(value, Period):
            return value
        s = (value or "").strip().lower()
        if not s:
            return cls.ALL
        try:
            return cls(s)
        except ValueError:
            names = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown period {value!r} (expected one of: {names})") from None
