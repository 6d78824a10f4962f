"""Duration text parsing.

Durations are written as an optional sign followed by one or more
``amount unit`` terms, e.g. "4h5m30s", "1.5h", "-2d", "1 month 3 hours".
The sign applies to the whole duration.

Years and months are calendar units: their length depends on where the
duration is applied, so text that uses them yields a Period. Everything
else is exact and yields a Duration.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Union

from utcalc._internal.constants import (
    MAX_NUMERIC_DIGITS,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    NANOS_PER_WEEK,
)
from utcalc.core.duration import Duration
from utcalc.core.period import Period
from utcalc.errors import InvalidFieldError, ParseRangeError, UnsupportedFormatError
from utcalc.parse.parser import normalize_input

# Unit names for duration parsing
TIME_UNITS: dict[str, str] = {
    "y": "years",
    "yr": "years",
    "yrs": "years",
    "year": "years",
    "years": "years",
    "mo": "months",
    "month": "months",
    "months": "months",
    "w": "weeks",
    "wk": "weeks",
    "wks": "weeks",
    "week": "weeks",
    "weeks": "weeks",
    "d": "days",
    "day": "days",
    "days": "days",
    "h": "hours",
    "hr": "hours",
    "hrs": "hours",
    "hour": "hours",
    "hours": "hours",
    "m": "minutes",
    "min": "minutes",
    "mins": "minutes",
    "minute": "minutes",
    "minutes": "minutes",
    "s": "seconds",
    "sec": "seconds",
    "secs": "seconds",
    "second": "seconds",
    "seconds": "seconds",
    "ms": "milliseconds",
    "msec": "milliseconds",
    "millisecond": "milliseconds",
    "milliseconds": "milliseconds",
    "us": "microseconds",
    "µs": "microseconds",
    "usec": "microseconds",
    "microsecond": "microseconds",
    "microseconds": "microseconds",
    "ns": "nanoseconds",
    "nsec": "nanoseconds",
    "nanosecond": "nanoseconds",
    "nanoseconds": "nanoseconds",
}

CALENDAR_UNITS = ("years", "months")

# Nanoseconds per exact unit; days and weeks are exact under a fixed offset
_EXACT_NANOS: dict[str, int] = {
    "weeks": NANOS_PER_WEEK,
    "days": NANOS_PER_DAY,
    "hours": NANOS_PER_HOUR,
    "minutes": NANOS_PER_MINUTE,
    "seconds": NANOS_PER_SECOND,
    "milliseconds": NANOS_PER_MILLISECOND,
    "microseconds": NANOS_PER_MICROSECOND,
    "nanoseconds": 1,
}

_SIGN_PATTERN = re.compile(r"^([+-])\s*")
_TERM_PATTERN = re.compile(r"\s*(\d+(?:\.\d*)?|\.\d+)\s*([^\W\d_]+)")

DurationValue = Union[Duration, Period]


class DurationTerm(NamedTuple):
    """One ``amount unit`` term of a duration."""

    amount: str
    unit: str


def _bounded_amount(amount: str) -> str:
    """Drop leading zeros and excess fraction digits from an amount.

    Raises:
        ParseRangeError: If the whole part has too many digits to be a time.
    """
    whole, dot, fraction = amount.partition(".")
    whole = whole.lstrip("0") or "0"
    if len(whole) > MAX_NUMERIC_DIGITS:
        raise ParseRangeError(f"duration amount with {len(whole)} digits is out of range")
    return f"{whole}{dot}{fraction[:MAX_NUMERIC_DIGITS]}"


def split_terms(text: str) -> list[DurationTerm]:
    """Split unsigned duration text into terms.

    Raises:
        UnsupportedFormatError: If the text is not a run of terms.
        ParseRangeError: If an amount has too many digits.

    Examples:
        >>> split_terms("4h5m30s")
        [DurationTerm(amount='4', unit='hours'), DurationTerm(amount='5', unit='minutes'), DurationTerm(amount='30', unit='seconds')]
    """
    terms: list[DurationTerm] = []
    pos = 0
    while pos < len(text):
        match = _TERM_PATTERN.match(text, pos)
        if match is None:
            raise UnsupportedFormatError(f"unrecognized duration: {text!r}")
        unit_name = match.group(2)
        unit = TIME_UNITS.get(unit_name.lower())
        if unit is None:
            raise UnsupportedFormatError(f"unknown duration unit: {unit_name!r}")
        terms.append(DurationTerm(_bounded_amount(match.group(1)), unit))
        pos = match.end()
    if not terms:
        raise UnsupportedFormatError(f"unrecognized duration: {text!r}")
    return terms


def _scaled(amount: str, size: int) -> int:
    """Return amount * size in nanoseconds, truncating below one nanosecond."""
    whole, _, fraction = amount.partition(".")
    nanos = int(whole or "0") * size
    if fraction:
        nanos += int(fraction) * size // 10 ** len(fraction)
    return nanos


def parse_duration(text: str) -> DurationValue:
    """Parse duration text into a Duration or Period.

    Args:
        text: Duration text such as "4h5m30s" or "-1 month 2 days".

    Returns:
        A Duration when only exact units are used, otherwise a Period
        whose weeks and days are kept as whole days and whose finer
        units form the exact remainder.

    Raises:
        EmptyInputError: If the text is empty.
        UnsupportedFormatError: If the text is not a duration.
        InvalidFieldError: If a year or month amount is fractional.
        ParseRangeError: If an amount has too many digits.

    Examples:
        >>> parse_duration("4h5m30s") == Duration(hours=4, minutes=5, seconds=30)
        True

        >>> parse_duration("1.5h") == Duration(minutes=90)
        True

        >>> parse_duration("-1 month 3 hours") == Period(months=-1, hours=-3)
        True
    """
    text = normalize_input(text)
    sign = 1
    match = _SIGN_PATTERN.match(text)
    if match:
        sign = -1 if match.group(1) == "-" else 1
        text = text[match.end():]

    calendar = {"years": 0, "months": 0}
    has_calendar = False
    days = 0
    nanos = 0
    for term in split_terms(text):
        if term.unit in CALENDAR_UNITS:
            if "." in term.amount:
                raise InvalidFieldError(term.unit, term.amount)
            calendar[term.unit] += int(term.amount)
            has_calendar = True
        elif term.unit in ("weeks", "days") and "." not in term.amount:
            days += int(term.amount) * (7 if term.unit == "weeks" else 1)
        else:
            nanos += _scaled(term.amount, _EXACT_NANOS[term.unit])

    if not has_calendar:
        return Duration(days=sign * days, nanoseconds=sign * nanos)
    return Period(
        years=sign * calendar["years"],
        months=sign * calendar["months"],
        days=sign * days,
        nanoseconds=sign * nanos,
    )


__all__ = [
    "TIME_UNITS",
    "CALENDAR_UNITS",
    "DurationTerm",
    "DurationValue",
    "split_terms",
    "parse_duration",
]
