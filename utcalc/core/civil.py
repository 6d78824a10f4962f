"""CalendarDateTime: a decomposed, zone-aware view of an Instant.

This module provides the wall-clock view used by the parser, the
formatter and calendar arithmetic. It is derived from an Instant plus an
offset on demand and converted back with to_instant(); it is never the
primary representation of a point in time.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from utcalc._internal.calendar import (
    days_in_month,
    epoch_days_to_weekday,
    epoch_days_to_ymd,
    ymd_to_epoch_days,
)
from utcalc._internal.constants import NANOS_PER_DAY, NANOS_PER_HOUR, NANOS_PER_MINUTE, NANOS_PER_SECOND
from utcalc.core.instant import Instant
from utcalc.core.offset import UtcOffset
from utcalc.errors import InvalidFieldError


@dataclass(frozen=True)
class CalendarDateTime:
    """Wall-clock fields of an instant at a fixed UTC offset.

    Every field is validated on construction; an invalid combination
    raises InvalidFieldError naming the first offending field. Days are
    checked against the month length for the given year, so February 29
    exists only in leap years.

    Attributes:
        year: Proleptic Gregorian year (astronomical numbering).
        month: Month 1-12.
        day: Day of month, valid for (year, month).
        hour: Hour 0-23.
        minute: Minute 0-59.
        second: Second 0-59.
        nanosecond: Sub-second fraction in nanoseconds.
        offset: UTC offset the fields are expressed in.

    Examples:
        >>> cdt = CalendarDateTime.from_instant(Instant.from_seconds(86400))
        >>> (cdt.year, cdt.month, cdt.day)
        (1970, 1, 2)

        >>> CalendarDateTime(2024, 2, 30)
        Traceback (most recent call last):
        ...
        utcalc.errors.InvalidFieldError: invalid day: 30
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    offset: UtcOffset = field(default_factory=UtcOffset.utc)

    def __post_init__(self) -> None:
        if self.month < 1 or self.month > 12:
            raise InvalidFieldError("month", self.month)
        if self.day < 1 or self.day > days_in_month(self.year, self.month):
            raise InvalidFieldError("day", self.day)
        if self.hour < 0 or self.hour > 23:
            raise InvalidFieldError("hour", self.hour)
        if self.minute < 0 or self.minute > 59:
            raise InvalidFieldError("minute", self.minute)
        if self.second < 0 or self.second > 59:
            raise InvalidFieldError("second", self.second)
        if self.nanosecond < 0 or self.nanosecond >= NANOS_PER_SECOND:
            raise InvalidFieldError("nanosecond", self.nanosecond)

    @classmethod
    def from_instant(cls, instant: Instant, offset: UtcOffset | None = None) -> CalendarDateTime:
        """Decompose ``instant`` into wall-clock fields at ``offset`` (UTC if None)."""
        if offset is None:
            offset = UtcOffset.utc()
        local_nanos = instant.nanos + offset.nanos
        days, nanos_of_day = divmod(local_nanos, NANOS_PER_DAY)
        year, month, day = epoch_days_to_ymd(days)
        hour, rest = divmod(nanos_of_day, NANOS_PER_HOUR)
        minute, rest = divmod(rest, NANOS_PER_MINUTE)
        second, nanosecond = divmod(rest, NANOS_PER_SECOND)
        return cls(year, month, day, hour, minute, second, nanosecond, offset)

    def to_instant(self) -> Instant:
        """Return the absolute instant these wall-clock fields denote."""
        days = ymd_to_epoch_days(self.year, self.month, self.day)
        local_nanos = (
            days * NANOS_PER_DAY
            + self.hour * NANOS_PER_HOUR
            + self.minute * NANOS_PER_MINUTE
            + self.second * NANOS_PER_SECOND
            + self.nanosecond
        )
        return Instant(local_nanos - self.offset.nanos)

    @property
    def weekday(self) -> int:
        """Return the day of week (Monday=0, Sunday=6)."""
        return epoch_days_to_weekday(ymd_to_epoch_days(self.year, self.month, self.day))


__all__ = ["CalendarDateTime"]
