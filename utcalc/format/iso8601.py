"""ISO 8601 and RFC 2822 style rendering of wall-clock fields.

Functions:
    format_iso8601: YYYY-MM-DDTHH:MM:SS[.fraction], optionally with Z/+HH:MM.
    format_rfc2822: "Ddd, DD Mon YYYY HH:MM:SS +HHMM".

Fractions use automatic precision: omitted when zero, otherwise the
shortest of 3, 6 or 9 digits that represents the value exactly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from utcalc._internal.constants import MONTH_ABBREVIATIONS, WEEKDAY_ABBREVIATIONS

if TYPE_CHECKING:
    from utcalc.core.civil import CalendarDateTime


def format_fraction(nanosecond: int) -> str:
    """Return ".fff", ".ffffff", ".fffffffff" or "" for a nanosecond field.

    Examples:
        >>> format_fraction(123_000_000)
        '.123'
        >>> format_fraction(123_456_000)
        '.123456'
        >>> format_fraction(0)
        ''
    """
    if nanosecond == 0:
        return ""
    if nanosecond % 1_000_000 == 0:
        return f".{nanosecond // 1_000_000:03d}"
    if nanosecond % 1_000 == 0:
        return f".{nanosecond // 1_000:06d}"
    return f".{nanosecond:09d}"


def format_iso8601(civil: CalendarDateTime, *, with_offset: bool = False) -> str:
    """Format wall-clock fields as an ISO 8601 date-time.

    Args:
        civil: The fields to render.
        with_offset: Append "Z" for a zero offset, otherwise "+HH:MM".

    Examples:
        >>> from utcalc.core.civil import CalendarDateTime
        >>> from utcalc.core.offset import UtcOffset
        >>> format_iso8601(CalendarDateTime(2024, 1, 15, 14, 30, 45))
        '2024-01-15T14:30:45'
        >>> format_iso8601(CalendarDateTime(2024, 1, 15, 14, 30, 45, offset=UtcOffset.from_hours(5, 30)), with_offset=True)
        '2024-01-15T14:30:45+05:30'
    """
    text = (
        f"{civil.year:04d}-{civil.month:02d}-{civil.day:02d}"
        f"T{civil.hour:02d}:{civil.minute:02d}:{civil.second:02d}"
        f"{format_fraction(civil.nanosecond)}"
    )
    if with_offset:
        text += "Z" if civil.offset.is_utc else str(civil.offset)
    return text


def format_rfc2822(civil: CalendarDateTime) -> str:
    """Format wall-clock fields in the RFC 2822 style.

    Sub-second fractions are truncated; the format has no field for them.

    Examples:
        >>> from utcalc.core.civil import CalendarDateTime
        >>> format_rfc2822(CalendarDateTime(2024, 1, 15, 14, 30, 45, 999))
        'Mon, 15 Jan 2024 14:30:45 +0000'
    """
    return (
        f"{WEEKDAY_ABBREVIATIONS[civil.weekday]}, "
        f"{civil.day:02d} {MONTH_ABBREVIATIONS[civil.month]} {civil.year:04d} "
        f"{civil.hour:02d}:{civil.minute:02d}:{civil.second:02d} "
        f"{civil.offset.compact()}"
    )


__all__ = ["format_fraction", "format_iso8601", "format_rfc2822"]
