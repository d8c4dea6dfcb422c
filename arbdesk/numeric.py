"""Lenient decimal parsing for trade fields.

Trade rows arrive from the database and the console API with numbers as
strings, floats, ``None`` or garbage. Everything here degrades to zero
(or ``None``) instead of raising.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

ZERO = Decimal(0)


def to_optional_decimal(value: Any) -> Decimal | None:
    """Parse *value* to a finite ``Decimal``, or ``None`` if that is not possible."""
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        d = value
    elif isinstance(value, int):
        d = Decimal(value)
    elif isinstance(value, float):
        # str() keeps the short repr, so 1.2505 stays 1.2505
        d = Decimal(str(value))
    elif isinstance(value, str):
        s = value.strip()
        if not s:
            return None
        try:
            d = Decimal(s)
        except InvalidOperation:
            return None
    else:
        return None

    return d if d.is_finite() else None


def to_decimal(value: Any) -> Decimal:
    """Parse *value* to a ``Decimal``; missing or unparsable input is zero."""
    d = to_optional_decimal(value)
    return ZERO if d is None else d
