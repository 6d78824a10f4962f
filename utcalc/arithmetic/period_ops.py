"""Period arithmetic for Instants.

This module applies calendar-based Periods to Instants, implementing the
month-end clamping policy.

Clamping behavior:
    Years and months move the month field (carrying into years). If the
    original day does not exist in the resulting month, the day is
    clamped to the last valid day of that month; it never rolls over into
    the following month.

Examples:
    2024-01-31 + Period(months=1) -> 2024-02-29  # leap year
    2023-01-31 + Period(months=1) -> 2023-02-28
    2024-03-31 + Period(months=1) -> 2024-04-30
    2024-02-29 + Period(years=1)  -> 2025-02-28

The components are applied in a fixed order:
    1. Years and months (on the wall-clock date at the given offset)
    2. Weeks and days
    3. The exact time remainder (hours and finer)
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from utcalc._internal.calendar import clamp_day
from utcalc._internal.constants import NANOS_PER_DAY
from utcalc.core.civil import CalendarDateTime
from utcalc.core.instant import Instant

if TYPE_CHECKING:
    from utcalc.core.offset import UtcOffset
    from utcalc.core.period import Period


def shift_months(instant: Instant, months: int, offset: UtcOffset | None = None) -> Instant:
    """Move ``instant`` by whole months, clamping the day of month.

    The wall-clock time of day is preserved.

    Examples:
        >>> jan_31 = Instant.from_seconds(1706659200)  # 2024-01-31T00:00:00Z
        >>> shift_months(jan_31, 1) == Instant.from_seconds(1709164800)  # 2024-02-29
        True
    """
    if months == 0:
        return instant

    civil = CalendarDateTime.from_instant(instant, offset)
    total_months = civil.year * 12 + (civil.month - 1) + months
    year, month_index = divmod(total_months, 12)
    month = month_index + 1
    day = clamp_day(year, month, civil.day)
    return replace(civil, year=year, month=month, day=day).to_instant()


def add_period_to_instant(
    instant: Instant,
    period: Period,
    offset: UtcOffset | None = None,
) -> Instant:
    """Add a Period to an Instant, calendar part first.

    Args:
        instant: The instant to add to.
        period: The period to add.
        offset: Offset whose wall clock defines month boundaries.
            Defaults to UTC.

    Returns:
        A new Instant offset by the period.
    """
    result = shift_months(instant, period.total_months, offset)
    # Fixed offsets have no DST, so a calendar day is always 86400 seconds
    nanos = result.nanos + period.total_days * NANOS_PER_DAY + period.time.total_nanoseconds
    return Instant(nanos)


__all__ = [
    "shift_months",
    "add_period_to_instant",
]
