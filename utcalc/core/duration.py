"""Duration class representing an exact span of elapsed time.

This module provides the Duration class: a signed scalar amount of time
with nanosecond precision. Durations are unambiguous regardless of the
calendar; calendar amounts (months, years) live in Period instead.
"""

from __future__ import annotations

from utcalc._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    NANOS_PER_WEEK,
)


class Duration:
    """An exact, signed span of time with nanosecond precision.

    Internally a Duration is a single integer count of nanoseconds, so
    addition, subtraction and comparison are exact.

    Examples:
        >>> Duration(hours=1, minutes=30).total_seconds
        5400.0

        >>> Duration(seconds=30) - Duration(minutes=1)
        Duration(nanoseconds=-30000000000)

        >>> Duration(days=1) == Duration(seconds=86400)
        True
    """

    __slots__ = ("_nanos",)

    def __init__(
        self,
        days: int = 0,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
        *,
        weeks: int = 0,
    ) -> None:
        """Create a Duration from component parts.

        All parameters can be positive, negative, or zero; they are summed
        into a single nanosecond count.

        Raises:
            TypeError: If a component is not an integer.

        Examples:
            >>> Duration(milliseconds=1500).total_nanoseconds
            1500000000
        """
        parts = (
            ("weeks", weeks),
            ("days", days),
            ("hours", hours),
            ("minutes", minutes),
            ("seconds", seconds),
            ("milliseconds", milliseconds),
            ("microseconds", microseconds),
            ("nanoseconds", nanoseconds),
        )
        for name, value in parts:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
        self._nanos = (
            weeks * NANOS_PER_WEEK
            + days * NANOS_PER_DAY
            + hours * NANOS_PER_HOUR
            + minutes * NANOS_PER_MINUTE
            + seconds * NANOS_PER_SECOND
            + milliseconds * NANOS_PER_MILLISECOND
            + microseconds * NANOS_PER_MICROSECOND
            + nanoseconds
        )

    @classmethod
    def zero(cls) -> Duration:
        """Create a zero-length duration."""
        return cls()

    @classmethod
    def from_seconds(cls, seconds: int) -> Duration:
        return cls(seconds=seconds)

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> Duration:
        return cls(milliseconds=milliseconds)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        return cls(nanoseconds=nanoseconds)

    @property
    def total_nanoseconds(self) -> int:
        """Return the total duration in nanoseconds (exact)."""
        return self._nanos

    @property
    def total_seconds(self) -> float:
        """Return the total duration as seconds (approximate).

        For exact calculations, use total_nanoseconds.
        """
        return self._nanos / NANOS_PER_SECOND

    @property
    def is_negative(self) -> bool:
        return self._nanos < 0

    @property
    def is_zero(self) -> bool:
        return self._nanos == 0

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self._nanos + other._nanos)

    def __radd__(self, other: object) -> Duration:
        """Support sum() by handling 0 + Duration."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(nanoseconds=self._nanos - other._nanos)

    def __mul__(self, other: object) -> Duration:
        """Multiply a duration by an integer.

        Examples:
            >>> Duration(seconds=30) * 3 == Duration(seconds=90)
            True
        """
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Duration(nanoseconds=self._nanos * other)

    def __rmul__(self, other: object) -> Duration:
        return self.__mul__(other)

    def __neg__(self) -> Duration:
        return Duration(nanoseconds=-self._nanos)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        if self.is_negative:
            return -self
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(("Duration", self._nanos))

    def __bool__(self) -> bool:
        return self._nanos != 0

    def __repr__(self) -> str:
        return f"Duration(nanoseconds={self._nanos})"

    def __str__(self) -> str:
        """Return the compact form, e.g. "1d2h3m4s5ms" or "-30s"."""
        from utcalc.format.duration import format_compact

        return format_compact(self)


__all__ = ["Duration"]
