"""Calendar rules."""

from __future__ import annotations

from datetime import date, datetime


def is_leap_year(value: date) -> bool:
    """Check whether the host-local calendar year of *value* is a leap year.

    An aware ``datetime`` is first converted to the host zone, so an
    instant late on 31 December UTC can fall in the next year locally.
    Naive datetimes and plain dates are already local and use their own
    year.

    Examples:
        >>> from datetime import date
        >>> is_leap_year(date(1900, 1, 1))
        False
        >>> is_leap_year(date(2000, 1, 1))
        True
    """
    if isinstance(value, datetime) and value.utcoffset() is not None:
        value = value.astimezone()
    year = value.year
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
