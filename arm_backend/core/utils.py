"""
Utility functions for the application.
"""
from collections import Counter
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable, Dict, Iterable, Optional

TWO_PLACES = Decimal("0.01")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Attach UTC to naive datetimes.

    SQLite hands back naive values for timezone-aware columns, PostgreSQL
    hands back aware ones; comparisons need both sides aware.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize_money(value: Any) -> Decimal:
    return to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def format_money(value: Any) -> str:
    """Render an amount the way the API always has: two decimals, as a string."""
    return f"{quantize_money(value):.2f}"


def sum_amounts(rows: Iterable[Any], attr: str = "amount") -> Decimal:
    return sum((to_decimal(getattr(row, attr)) for row in rows), Decimal("0"))


def count_by(rows: Iterable[Any], key: Callable[[Any], Optional[str]]) -> Dict[str, int]:
    """Count rows by a derived key, skipping rows whose key is empty."""
    counter = Counter()
    for row in rows:
        value = key(row)
        if value:
            counter[value] += 1
    return dict(counter)
