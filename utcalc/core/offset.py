"""Fixed UTC offset.

This module provides the UtcOffset class: a fixed shift from UTC used to
derive wall-clock fields from an Instant. There is no named-zone or
daylight-saving support; an offset is just a number of seconds.
"""

from __future__ import annotations

import re
from typing import ClassVar

from utcalc._internal.constants import MAX_UTC_OFFSET_SECONDS, SECONDS_PER_HOUR
from utcalc.errors import InvalidOffsetError

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{1,2})(?::?(\d{2}))?$")


class UtcOffset:
    """A UTC offset, stored in seconds but restricted to whole minutes.

    Positive values are east of UTC (ahead in time), negative values are
    west. The valid range is -23:59 to +23:59.

    Examples:
        >>> UtcOffset.utc().is_utc
        True

        >>> UtcOffset.from_hours(5, 30).seconds
        19800

        >>> str(UtcOffset.from_string("-0500"))
        '-05:00'
    """

    __slots__ = ("_seconds",)

    _utc_instance: ClassVar[UtcOffset | None] = None

    def __init__(self, seconds: int) -> None:
        """Create an offset of ``seconds`` east of UTC.

        Raises:
            InvalidOffsetError: If the offset is not an integer or lies
                outside (-24h, +24h).
        """
        if isinstance(seconds, bool) or not isinstance(seconds, int):
            raise InvalidOffsetError(
                f"offset seconds must be an integer, got {type(seconds).__name__}"
            )
        if seconds % 60:
            raise InvalidOffsetError(f"offset must be a whole number of minutes, got {seconds}s")
        if abs(seconds) > MAX_UTC_OFFSET_SECONDS:
            raise InvalidOffsetError(
                f"offset {seconds}s is outside the valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )
        self._seconds = seconds

    @classmethod
    def utc(cls) -> UtcOffset:
        """Return the zero offset. All calls return the same instance."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0)
        return cls._utc_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> UtcOffset:
        """Create an offset from hours and minutes.

        The minutes take their sign from ``hours``.

        Raises:
            InvalidOffsetError: If minutes are outside 0-59 or the total
                is out of range.

        Examples:
            >>> UtcOffset.from_hours(-3, 30).seconds
            -12600
        """
        if minutes < 0 or minutes > 59:
            raise InvalidOffsetError(f"offset minutes must be 0-59, got {minutes}")
        sign = -1 if hours < 0 else 1
        return cls(hours * SECONDS_PER_HOUR + sign * minutes * 60)

    @classmethod
    def from_string(cls, s: str) -> UtcOffset:
        """Parse an offset designator.

        Supported formats:
            - "Z", "UTC", "GMT", "UT": zero offset
            - "+HH:MM" / "-HH:MM"
            - "+HHMM" / "-HHMM"
            - "+HH" / "-HH" (also a single hour digit)

        Raises:
            InvalidOffsetError: If the string is malformed or out of range.
        """
        text = s.strip()
        if text.upper() in ("Z", "UTC", "GMT", "UT"):
            return cls.utc()

        match = _OFFSET_PATTERN.match(text)
        if not match:
            raise InvalidOffsetError(f"cannot parse offset: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        hours = int(hours_str)
        minutes = int(minutes_str) if minutes_str else 0
        if hours > 23 or minutes > 59:
            raise InvalidOffsetError(f"offset out of range: {s!r}")

        sign = 1 if sign_str == "+" else -1
        return cls(sign * (hours * SECONDS_PER_HOUR + minutes * 60))

    @property
    def seconds(self) -> int:
        """Return the offset in seconds east of UTC."""
        return self._seconds

    @property
    def nanos(self) -> int:
        return self._seconds * 1_000_000_000

    @property
    def is_utc(self) -> bool:
        return self._seconds == 0

    def _parts(self) -> tuple[str, int, int]:
        total = abs(self._seconds)
        sign = "-" if self._seconds < 0 else "+"
        return sign, total // SECONDS_PER_HOUR, (total % SECONDS_PER_HOUR) // 60

    def compact(self) -> str:
        """Return the offset as +HHMM (RFC 2822 style)."""
        sign, hours, minutes = self._parts()
        return f"{sign}{hours:02d}{minutes:02d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self._seconds == other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __repr__(self) -> str:
        return f"UtcOffset(seconds={self._seconds})"

    def __str__(self) -> str:
        """Return the offset as +HH:MM."""
        sign, hours, minutes = self._parts()
        return f"{sign}{hours:02d}:{minutes:02d}"

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "_seconds"):
            raise AttributeError("UtcOffset is immutable")
        object.__setattr__(self, name, value)


__all__ = ["UtcOffset"]
