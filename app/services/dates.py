"""Calendar arithmetic shared by validation and derivation.

All helpers are pure.  ``current_date`` is the only function that reads the
clock, and only service entry points call it.
"""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo


def current_date(tz_name: str = "UTC") -> date:
    """Return today's date in the given IANA timezone."""
    return datetime.now(ZoneInfo(tz_name)).date()


def with_year(value: date, year: int) -> date:
    """Return *value* moved to *year*; Feb 29 becomes Feb 28 in common years."""
    try:
        return value.replace(year=year)
    except ValueError:
        return value.replace(year=year, day=28)


def add_years(value: date, years: int) -> date:
    """Shift *value* by a whole number of years (negative to go back)."""
    return with_year(value, value.year + years)


def months_between(start: date, end: date) -> int:
    """Whole calendar months from *start* to *end*, truncated toward zero.

    A month only counts once the day of month has been reached, so
    1990-05-15 → 2025-07-14 is 421 months and → 2025-07-15 is 422.
    """
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if months > 0 and end.day < start.day:
        months -= 1
    elif months < 0 and end.day > start.day:
        months += 1
    return months


def years_between(start: date, end: date) -> int:
    """Whole years from *start* to *end*, truncated toward zero."""
    months = months_between(start, end)
    if months < 0:
        return -(-months // 12)
    return months // 12


def days_between(start: date, end: date) -> int:
    return (end - start).days


def next_birthday(birth_date: date, today: date) -> date:
    """First anniversary of *birth_date* strictly after *today*.

    A birthday falling on *today* rolls over to next year.
    """
    candidate = with_year(birth_date, today.year)
    if candidate <= today:
        candidate = with_year(birth_date, today.year + 1)
    return candidate
