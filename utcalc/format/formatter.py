"""Instant formatting.

This module provides format_instant(), the single entry point for
turning an Instant into display text.

Supported range:
    Instants from 0001-01-01T00:00:00Z through 9999-12-31T23:59:59.999999999Z
    format in every kind and at every offset. An offset can move the wall
    clock of the first or last day into year 0000 or 10000; those years are
    written as they are and read back by parse(). Instants outside the range
    raise FormatRangeError for every kind, so that a value is either
    representable in all kinds or in none.
"""

from __future__ import annotations

from utcalc._internal.constants import MAX_EPOCH_NANOS, MAX_YEAR, MIN_EPOCH_NANOS, MIN_YEAR
from utcalc.core.civil import CalendarDateTime
from utcalc.core.instant import Instant
from utcalc.core.offset import UtcOffset
from utcalc.errors import FormatRangeError, InvalidOffsetError
from utcalc.format.iso8601 import format_iso8601, format_rfc2822
from utcalc.format.kinds import CustomPattern, FormatKind, OutputKind
from utcalc.format.pattern import compile_pattern, render_pattern
from utcalc.units.unit import Unit

MIN_INSTANT = Instant(MIN_EPOCH_NANOS)
MAX_INSTANT = Instant(MAX_EPOCH_NANOS)


def format_epoch(nanos: int, unit: Unit) -> str:
    """Render a nanosecond count as an exact decimal number of ``unit``.

    Trailing zeros of the fraction are trimmed; a whole value has no
    decimal point.

    Examples:
        >>> format_epoch(1_500_000_000, Unit.SECONDS)
        '1.5'
        >>> format_epoch(-250_000_000, Unit.SECONDS)
        '-0.25'
        >>> format_epoch(0, Unit.MILLISECONDS)
        '0'
    """
    sign = "-" if nanos < 0 else ""
    whole, remainder = divmod(abs(nanos), unit.nanos_per_unit)
    if remainder == 0:
        return f"{sign}{whole}"
    fraction = f"{remainder:0{unit.fraction_digits}d}".rstrip("0")
    return f"{sign}{whole}.{fraction}"


def _check_offset(offset: object) -> UtcOffset:
    if offset is None:
        return UtcOffset.utc()
    if not isinstance(offset, UtcOffset):
        raise InvalidOffsetError(f"expected UtcOffset, got {type(offset).__name__}")
    return offset


def to_civil(instant: Instant, offset: UtcOffset | None = None) -> CalendarDateTime:
    """Return the wall-clock view of ``instant``, checking the supported range.

    Raises:
        FormatRangeError: If the instant is outside years 1-9999 at UTC.
    """
    if instant < MIN_INSTANT or instant > MAX_INSTANT:
        raise FormatRangeError(
            f"{instant!r} is outside the supported range {MIN_YEAR:04d}-{MAX_YEAR:04d}"
        )
    return CalendarDateTime.from_instant(instant, offset)


def format_instant(
    instant: Instant,
    kind: OutputKind,
    offset: UtcOffset | None = None,
) -> str:
    """Format an Instant as text.

    Args:
        instant: The instant to format.
        kind: A FormatKind, or a CustomPattern.
        offset: Shifts the displayed wall-clock fields. None means UTC.
            Epoch kinds are independent of the offset.

    Returns:
        The formatted text.

    Raises:
        InvalidOffsetError: If offset is not a valid UtcOffset.
        UnknownTokenError: If a custom pattern uses an unknown token.
        FormatRangeError: If the instant is outside the supported range.

    Examples:
        >>> format_instant(Instant.epoch(), FormatKind.EPOCH_SECONDS)
        '0'

        >>> format_instant(Instant.from_seconds(1705329045), FormatKind.ISO8601_WITH_OFFSET)
        '2024-01-15T14:30:45Z'

        >>> format_instant(Instant.from_seconds(1705329045), CustomPattern("%H:%M %Z"), UtcOffset.from_hours(1))
        '15:30 +01:00'
    """
    if not isinstance(instant, Instant):
        raise TypeError(f"expected Instant, got {type(instant).__name__}")
    offset = _check_offset(offset)

    if isinstance(kind, CustomPattern):
        # Compile first so an unknown token wins over a range error
        compile_pattern(kind.pattern)
        return render_pattern(kind.pattern, to_civil(instant, offset))

    if not isinstance(kind, FormatKind):
        raise TypeError(f"expected FormatKind or CustomPattern, got {type(kind).__name__}")

    civil = to_civil(instant, offset)
    unit = kind.epoch_unit
    if unit is not None:
        return format_epoch(instant.nanos, unit)
    if kind is FormatKind.ISO8601:
        return format_iso8601(civil)
    if kind is FormatKind.ISO8601_WITH_OFFSET:
        return format_iso8601(civil, with_offset=True)
    return format_rfc2822(civil)


__all__ = [
    "MIN_INSTANT",
    "MAX_INSTANT",
    "format_epoch",
    "format_instant",
    "to_civil",
]
