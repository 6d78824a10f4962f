"""Numeric epoch input.

A bare number is read as a count of seconds, milliseconds, microseconds
or nanoseconds since the Unix epoch. The unit comes from an explicit hint
or, failing that, from the number of integer digits:

    digits   unit          covers roughly
    <= 11    seconds       years -1200 .. 5138
    12-14    milliseconds  1973 .. 5138
    15-17    microseconds  1973 .. 5138
    18-20    nanoseconds   1973 .. 5138

Anything longer needs a hint. Fraction digits finer than a nanosecond
are dropped (truncation toward zero).
"""

from __future__ import annotations

import re

from utcalc._internal.constants import (
    MAX_EPOCH_SECONDS,
    MAX_NUMERIC_DIGITS,
    MAX_UNHINTED_DIGITS,
    NANOS_PER_SECOND,
)
from utcalc.core.instant import Instant
from utcalc.errors import ParseRangeError, UnsupportedFormatError
from utcalc.units.unit import Unit

NUMERIC_PATTERN = re.compile(r"^(?P<sign>[+-])?(?P<whole>\d+)(?:\.(?P<fraction>\d*))?$", re.ASCII)

# Upper bound of integer digits for each unit when no hint is given
_DIGIT_LIMITS: tuple[tuple[int, Unit], ...] = (
    (11, Unit.SECONDS),
    (14, Unit.MILLISECONDS),
    (17, Unit.MICROSECONDS),
    (MAX_UNHINTED_DIGITS, Unit.NANOSECONDS),
)


def infer_unit(digits: str) -> Unit:
    """Pick a unit from the integer digits of an unhinted number.

    Leading zeros are ignored, so "0000000000001" is one second.

    Raises:
        UnsupportedFormatError: If there are too many digits to guess.

    Examples:
        >>> infer_unit("1700000000")
        <Unit.SECONDS: 'seconds'>
        >>> infer_unit("1700000000000")
        <Unit.MILLISECONDS: 'milliseconds'>
    """
    count = len(digits.lstrip("0")) or 1
    for limit, unit in _DIGIT_LIMITS:
        if count <= limit:
            return unit
    raise UnsupportedFormatError(
        f"numeric input with {count} integer digits is ambiguous; give a unit hint"
    )


def parse_numeric(text: str, hint: Unit | None = None) -> Instant | None:
    """Parse ``text`` as a numeric epoch, or return None if it is not a number.

    Args:
        text: Trimmed input text.
        hint: Unit to read the number in. None selects one by magnitude.

    Raises:
        UnsupportedFormatError: If the magnitude is ambiguous without a hint.
        ParseRangeError: If the value exceeds the signed 64-bit second range.

    Examples:
        >>> parse_numeric("1.5")
        Instant(1500000000)
        >>> parse_numeric("1700000000000", Unit.SECONDS).seconds
        1700000000000
        >>> parse_numeric("abc") is None
        True
    """
    match = NUMERIC_PATTERN.match(text)
    if match is None:
        return None

    whole = match.group("whole").lstrip("0") or "0"
    unit = hint if hint is not None else infer_unit(whole)
    if len(whole) > MAX_NUMERIC_DIGITS:
        raise ParseRangeError(
            f"numeric input with {len(whole)} integer digits exceeds the 64-bit second range"
        )
    digits = unit.fraction_digits
    fraction = (match.group("fraction") or "")[:digits].ljust(digits, "0")

    nanos = int(whole) * unit.nanos_per_unit + (int(fraction) if fraction else 0)
    if match.group("sign") == "-":
        nanos = -nanos

    if abs(nanos) // NANOS_PER_SECOND > MAX_EPOCH_SECONDS:
        raise ParseRangeError(f"numeric input {text!r} exceeds the 64-bit second range")
    return Instant(nanos)


__all__ = ["NUMERIC_PATTERN", "infer_unit", "parse_numeric"]
