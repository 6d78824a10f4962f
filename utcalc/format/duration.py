"""Duration rendering.

Two styles are available:

    SECONDS: exact decimal seconds, e.g. "5400", "-0.25"
    COMPACT: unit-suffixed parts, e.g. "1h30m", "-30s", "0s"
"""

from __future__ import annotations

from enum import Enum

from utcalc._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from utcalc.core.duration import Duration
from utcalc.core.period import Period
from utcalc.format.formatter import format_epoch
from utcalc.units.unit import Unit

_COMPACT_PARTS: tuple[tuple[str, int], ...] = (
    ("d", NANOS_PER_DAY),
    ("h", NANOS_PER_HOUR),
    ("m", NANOS_PER_MINUTE),
    ("s", NANOS_PER_SECOND),
    ("ms", NANOS_PER_MILLISECOND),
    ("us", NANOS_PER_MICROSECOND),
    ("ns", 1),
)


class DurationStyle(Enum):
    """How format_duration renders a Duration."""

    SECONDS = "seconds"
    COMPACT = "compact"


def format_compact(duration: Duration) -> str:
    """Render a Duration as concatenated unit parts, largest first.

    Zero parts are skipped; a zero duration is "0s". Days are the
    largest unit since a Duration carries no calendar.

    Examples:
        >>> format_compact(Duration(days=1, hours=2, minutes=3, seconds=4, milliseconds=5))
        '1d2h3m4s5ms'
        >>> format_compact(Duration(seconds=-30))
        '-30s'
        >>> format_compact(Duration.zero())
        '0s'
    """
    nanos = duration.total_nanoseconds
    if nanos == 0:
        return "0s"
    parts = ["-" if nanos < 0 else ""]
    remaining = abs(nanos)
    for suffix, size in _COMPACT_PARTS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count}{suffix}")
    return "".join(parts)


def format_period(period: Period) -> str:
    """Render a Period as its non-zero components, e.g. "1y2mo3d4h".

    Each component carries its own sign; the exact remainder uses the
    compact Duration form.

    Examples:
        >>> format_period(Period(years=1, months=2, days=3, hours=4))
        '1y2mo3d4h'
        >>> format_period(Period(months=-1))
        '-1mo'
    """
    parts = [
        f"{count}{suffix}"
        for count, suffix in (
            (period.years, "y"),
            (period.months, "mo"),
            (period.weeks, "w"),
            (period.days, "d"),
        )
        if count
    ]
    if not period.time.is_zero:
        parts.append(format_compact(period.time))
    return "".join(parts) or "0s"


def format_duration(duration: Duration, style: DurationStyle = DurationStyle.SECONDS) -> str:
    """Render a Duration in the given style.

    Examples:
        >>> format_duration(Duration(hours=1, minutes=30))
        '5400'
        >>> format_duration(Duration(milliseconds=-250))
        '-0.25'
        >>> format_duration(Duration(hours=1, minutes=30), DurationStyle.COMPACT)
        '1h30m'
    """
    if not isinstance(duration, Duration):
        raise TypeError(f"expected Duration, got {type(duration).__name__}")
    if style is DurationStyle.COMPACT:
        return format_compact(duration)
    return format_epoch(duration.total_nanoseconds, Unit.SECONDS)


__all__ = ["DurationStyle", "format_compact", "format_duration", "format_period"]
