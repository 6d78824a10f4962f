"""Calendar utilities for utcalc.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths, and conversion between civil
dates and day numbers counted from the Unix epoch.

Day 0 = 1970-01-01. Negative day numbers are dates before the epoch.

This module is not part of the public API.
"""

from __future__ import annotations

from utcalc._internal.constants import DAYS_IN_MONTH

# Days in a full 400-year Gregorian cycle
_DAYS_PER_400_YEARS = 146097


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1. Works for years <= 0 as well, since
    floor division rounds toward negative infinity.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Ordinals <= 0 are shifted forward by whole 400-year cycles, which
    repeat exactly in the Gregorian calendar, and shifted back afterwards.
    """
    cycles_shift = 0
    if ordinal <= 0:
        cycles_shift = (-ordinal) // _DAYS_PER_400_YEARS + 1
        ordinal += cycles_shift * _DAYS_PER_400_YEARS

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1
    n400, n = divmod(n, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, 36524)
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle
    if n1 == 4 or n100 == 4:
        return (year - 1 - cycles_shift * 400, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year - cycles_shift * 400, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


_EPOCH_ORDINAL = ymd_to_ordinal(1970, 1, 1)


def ymd_to_epoch_days(year: int, month: int, day: int) -> int:
    """Convert a civil date to days since 1970-01-01."""
    return ymd_to_ordinal(year, month, day) - _EPOCH_ORDINAL


def epoch_days_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to a civil (year, month, day)."""
    return ordinal_to_ymd(days + _EPOCH_ORDINAL)


def epoch_days_to_weekday(days: int) -> int:
    """Return the day of week (Monday=0, Sunday=6) for an epoch day number.

    1970-01-01 was a Thursday (3).
    """
    return (days + 3) % 7


def clamp_day(year: int, month: int, day: int) -> int:
    """Clamp day to the last valid day of (year, month)."""
    return min(day, days_in_month(year, month))


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ymd_to_epoch_days",
    "epoch_days_to_ymd",
    "epoch_days_to_weekday",
    "clamp_day",
]
