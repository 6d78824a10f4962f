"""Period class representing calendar-based durations.

This module provides the Period class for durations whose elapsed length
depends on where they are anchored (months, years), as opposed to exact
time spans (Duration).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from utcalc.core.duration import Duration

if TYPE_CHECKING:
    from utcalc.core.instant import Instant
    from utcalc.core.offset import UtcOffset


class Period:
    """A calendar amount with an exact scalar remainder.

    Unlike Duration, a Period represents calendar concepts like "1 month"
    that vary by context. Adding 1 month to Jan 31 yields Feb 28/29, not
    exactly 30 or 31 days. The years, months, weeks and days components
    are stored as given, without normalization; hours and finer units are
    folded into an exact Duration applied after the calendar part.

    Attributes:
        years: Number of years (can be negative).
        months: Number of months (can be negative).
        weeks: Number of weeks (can be negative).
        days: Number of days (can be negative).
        time: Exact remainder (hours, minutes, seconds, sub-second).

    Examples:
        >>> p = Period(years=1, months=2)
        >>> p.total_months
        14

        >>> Period(months=1, hours=3).time == Duration(hours=3)
        True
    """

    __slots__ = ("_years", "_months", "_weeks", "_days", "_time")

    def __init__(
        self,
        years: int = 0,
        months: int = 0,
        weeks: int = 0,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
        *,
        time: Duration | None = None,
    ) -> None:
        for name, value in (("years", years), ("months", months), ("weeks", weeks), ("days", days)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
        self._years = years
        self._months = months
        self._weeks = weeks
        self._days = days
        remainder = Duration(
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            milliseconds=milliseconds,
            microseconds=microseconds,
            nanoseconds=nanoseconds,
        )
        if time is not None:
            remainder = remainder + time
        self._time = remainder

    @classmethod
    def zero(cls) -> Period:
        return cls()

    @classmethod
    def of_months(cls, months: int) -> Period:
        return cls(months=months)

    @classmethod
    def of_years(cls, years: int) -> Period:
        return cls(years=years)

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def weeks(self) -> int:
        return self._weeks

    @property
    def days(self) -> int:
        return self._days

    @property
    def time(self) -> Duration:
        """Return the exact scalar remainder."""
        return self._time

    @property
    def total_months(self) -> int:
        """Return years * 12 + months. Weeks and days are not included."""
        return self._years * 12 + self._months

    @property
    def total_days(self) -> int:
        """Return weeks * 7 + days."""
        return self._weeks * 7 + self._days

    @property
    def is_zero(self) -> bool:
        return self.total_months == 0 and self.total_days == 0 and self._time.is_zero

    def to_duration(self, anchor: Instant, offset: UtcOffset | None = None) -> Duration:
        """Return the exact length of this period when added at ``anchor``.

        A Period has no fixed length; this is the only way to obtain one.

        Examples:
            >>> from utcalc.core.instant import Instant
            >>> jan_1 = Instant.from_seconds(1704067200)  # 2024-01-01T00:00:00Z
            >>> Period(months=1).to_duration(jan_1) == Duration(days=31)
            True
        """
        from utcalc.arithmetic.ops import add, diff

        return diff(add(anchor, self, offset=offset), anchor)

    def __add__(self, other: object) -> Period:
        if isinstance(other, Duration):
            other = Period(time=other)
        if not isinstance(other, Period):
            return NotImplemented
        return Period(
            years=self._years + other._years,
            months=self._months + other._months,
            weeks=self._weeks + other._weeks,
            days=self._days + other._days,
            time=self._time + other._time,
        )

    def __radd__(self, other: object) -> Period:
        if isinstance(other, Duration):
            return Period(time=other) + self
        return NotImplemented

    def __sub__(self, other: object) -> Period:
        if isinstance(other, (Period, Duration)):
            return self + (-other)
        return NotImplemented

    def __rsub__(self, other: object) -> Period:
        if isinstance(other, Duration):
            return Period(time=other) - self
        return NotImplemented

    def __neg__(self) -> Period:
        return Period(
            years=-self._years,
            months=-self._months,
            weeks=-self._weeks,
            days=-self._days,
            time=-self._time,
        )

    def __eq__(self, other: object) -> bool:
        """Compare component-wise.

        Period(years=1) and Period(months=12) are not equal: equality is
        structural, not based on elapsed length.
        """
        if not isinstance(other, Period):
            return NotImplemented
        return (
            self._years == other._years
            and self._months == other._months
            and self._weeks == other._weeks
            and self._days == other._days
            and self._time == other._time
        )

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._weeks, self._days, self._time))

    def __repr__(self) -> str:
        return (
            f"Period(years={self._years}, months={self._months}, weeks={self._weeks}, "
            f"days={self._days}, time={self._time!r})"
        )


__all__ = ["Period"]
