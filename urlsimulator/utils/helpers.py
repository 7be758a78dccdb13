"""Helper utilities shared across the simulator.

Functions:
    utc_today() -> date
        Current calendar date in UTC (time of day truncated)
    is_blank(value) -> bool
        True for None, empty or whitespace-only strings

Example:
    >>> from urlsimulator.utils.helpers import is_blank
    >>> is_blank('   ')
    True
    >>> is_blank('my-alias')
    False
"""

from datetime import date, datetime, UTC


def utc_today() -> date:
    """Return the current calendar date in UTC.

    Returns:
        date: today's date in UTC, without a time component.

    Example:
        >>> utc_today()
        datetime.date(2025, 10, 19)
    """
    return datetime.now(UTC).date()


def is_blank(value: str | None) -> bool:
    """Return True if `value` is None, empty or consists only of whitespace."""
    return value is None or not value.strip()
