"""Arithmetic operations on Instants.

This module provides the arithmetic entry points:

    add: Add a Duration or Period to an Instant.
    subtract: Subtract a Duration or Period from an Instant.
    diff: Exact signed difference between two Instants.
    calendar_diff: Calendar decomposition of a difference, anchored at
        one of the two Instants.

None of these read a clock. Anything "relative to now" receives now as
an Instant argument.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from utcalc._internal.constants import NANOS_PER_DAY
from utcalc.arithmetic.period_ops import add_period_to_instant, shift_months
from utcalc.core.civil import CalendarDateTime
from utcalc.core.duration import Duration
from utcalc.core.instant import Instant
from utcalc.core.period import Period

if TYPE_CHECKING:
    from utcalc.core.offset import UtcOffset

Amount = Union[Duration, Period]


def add(instant: Instant, amount: Amount, *, offset: UtcOffset | None = None) -> Instant:
    """Add a Duration or Period to an Instant.

    A Duration is exact elapsed time. A Period applies its calendar
    components first (with month-end clamping on the wall clock at
    ``offset``), then its exact remainder.

    Raises:
        TypeError: If the operands are not an Instant and a Duration/Period.

    Examples:
        >>> from utcalc.parse import parse
        >>> add(parse("2024-01-31T00:00:00Z"), Period(months=1)) == parse("2024-02-29T00:00:00Z")
        True

        >>> add(Instant.epoch(), Duration(hours=1)).nanos
        3600000000000
    """
    if not isinstance(instant, Instant):
        raise TypeError(f"expected Instant, got {type(instant).__name__}")
    if isinstance(amount, Duration):
        return Instant(instant.nanos + amount.total_nanoseconds)
    if isinstance(amount, Period):
        return add_period_to_instant(instant, amount, offset)
    raise TypeError(f"expected Duration or Period, got {type(amount).__name__}")


def subtract(instant: Instant, amount: Amount, *, offset: UtcOffset | None = None) -> Instant:
    """Subtract a Duration or Period from an Instant.

    Equivalent to adding the negated amount, so
    ``subtract(parse("2024-03-31T00:00:00Z"), Period(months=1))`` clamps
    to February 29.
    """
    if not isinstance(amount, (Duration, Period)):
        raise TypeError(f"expected Duration or Period, got {type(amount).__name__}")
    return add(instant, -amount, offset=offset)


def diff(a: Instant, b: Instant) -> Duration:
    """Return the exact elapsed time from ``b`` to ``a``.

    The result is positive when ``a`` is after ``b``. It is never
    decomposed into months or years; use calendar_diff for that.

    Examples:
        >>> from utcalc.parse import parse
        >>> diff(parse("2024-01-02T00:00:00Z"), parse("2024-01-01T00:00:00Z"))
        Duration(nanoseconds=86400000000000)
    """
    if not isinstance(a, Instant) or not isinstance(b, Instant):
        raise TypeError("diff requires two Instants")
    return Duration(nanoseconds=a.nanos - b.nanos)


def calendar_diff(a: Instant, b: Instant, *, offset: UtcOffset | None = None) -> Period:
    """Decompose the difference from ``b`` to ``a`` into calendar components.

    The result is anchored at ``b``: it holds the largest whole number of
    months that can be added to ``b`` without passing ``a``, then whole
    days, then an exact remainder. It always satisfies
    ``add(b, calendar_diff(a, b, offset=o), offset=o) == a``.

    Months are reported as years plus months, both carrying the sign of
    the difference.

    Examples:
        >>> from utcalc.parse import parse
        >>> p = calendar_diff(parse("2024-03-15T06:00:00Z"), parse("2024-01-31T00:00:00Z"))
        >>> (p.years, p.months, p.days, p.time == Duration(hours=6))
        (0, 1, 15, True)
    """
    if not isinstance(a, Instant) or not isinstance(b, Instant):
        raise TypeError("calendar_diff requires two Instants")

    start = CalendarDateTime.from_instant(b, offset)
    end = CalendarDateTime.from_instant(a, offset)
    months = (end.year - start.year) * 12 + (end.month - start.month)

    if a >= b:
        while months > 0 and shift_months(b, months, offset) > a:
            months -= 1
    else:
        while months < 0 and shift_months(b, months, offset) < a:
            months += 1

    remaining = a.nanos - shift_months(b, months, offset).nanos
    if remaining >= 0:
        days, rest = divmod(remaining, NANOS_PER_DAY)
    else:
        days, rest = divmod(-remaining, NANOS_PER_DAY)
        days, rest = -days, -rest

    years = abs(months) // 12
    sign = -1 if months < 0 else 1
    return Period(
        years=sign * years,
        months=sign * (abs(months) % 12),
        days=days,
        nanoseconds=rest,
    )


__all__ = [
    "Amount",
    "add",
    "subtract",
    "diff",
    "calendar_diff",
]
