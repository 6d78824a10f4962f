"""Instant parsing from heterogeneous text.

This module provides parse(), which accepts every input form utcalc
understands and returns an Instant.

Precedence (first match wins):
    1. Numeric epoch: "1705329045", "1705329045123", "-1.5"
    2. The keyword "now"
    3. ISO-like: "2024-01-15T14:30:45.123+05:30", "2024/01/15 14:30"
    4. RFC-2822-like: "Mon, 15 Jan 2024 14:30:45 +0000"
    5. Partial forms: "14:30" and "--01-15" (relative to now), "2024-01"
"""

from __future__ import annotations

from utcalc._internal.constants import MAX_EPOCH_NANOS, MAX_YEAR, MIN_EPOCH_NANOS, MIN_YEAR
from utcalc.core.civil import CalendarDateTime
from utcalc.core.instant import Instant
from utcalc.core.offset import UtcOffset
from utcalc.errors import (
    EmptyInputError,
    InvalidFieldError,
    InvalidOffsetError,
    ParseRangeError,
    UnsupportedFormatError,
)
from utcalc.parse._forms import MONTH_NAMES, WEEKDAY_NAMES, Components, match_template
from utcalc.parse.numeric import parse_numeric
from utcalc.units.unit import Unit

_QUOTES = ("'", '"')


def normalize_input(text: str) -> str:
    """Trim whitespace and one pair of surrounding quotes.

    Raises:
        EmptyInputError: If nothing is left.

    Examples:
        >>> normalize_input("  '2024-01-15 14:30:45'  ")
        '2024-01-15 14:30:45'
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    text = text.strip()
    if len(text) >= 2 and text[0] in _QUOTES and text[-1] == text[0]:
        text = text[1:-1].strip()
    if not text:
        raise EmptyInputError()
    return text


def parse_offset(text: str) -> UtcOffset:
    """Parse an offset designator, reporting problems as a field error."""
    try:
        return UtcOffset.from_string(text)
    except InvalidOffsetError:
        raise InvalidFieldError("offset", text) from None


def check_year(year: int) -> None:
    """Reject years that cannot hold a supported instant at any offset.

    Years 0000 and 10000 pass: an offset can put the first or last day of
    the range there. check_range() decides for the resulting instant.
    """
    if year < MIN_YEAR - 1 or year > MAX_YEAR + 1:
        raise ParseRangeError(
            f"year {year} is outside the supported range {MIN_YEAR:04d}-{MAX_YEAR:04d}"
        )


def check_range(instant: Instant) -> Instant:
    """Return ``instant`` if it lies in years 1-9999 at UTC.

    Raises:
        ParseRangeError: If it does not.
    """
    if instant.nanos < MIN_EPOCH_NANOS or instant.nanos > MAX_EPOCH_NANOS:
        raise ParseRangeError(
            f"{instant!r} is outside the supported range {MIN_YEAR:04d}-{MAX_YEAR:04d}"
        )
    return instant


def _resolve_offset(components: Components, default_offset: UtcOffset | None) -> UtcOffset:
    designator = components.get("offset")
    if designator is not None:
        return parse_offset(str(designator))
    if default_offset is not None:
        return default_offset
    return UtcOffset.utc()


def _month_from_name(name: str) -> int:
    month = MONTH_NAMES.get(name.lower())
    if month is None:
        raise InvalidFieldError("month", name)
    return month


def build_civil(components: Components, offset: UtcOffset) -> CalendarDateTime:
    year = int(components["year"])  # type: ignore[arg-type]
    check_year(year)
    return CalendarDateTime(
        year,
        int(components["month"]),  # type: ignore[arg-type]
        int(components["day"]),  # type: ignore[arg-type]
        int(components.get("hour") or 0),
        int(components.get("minute") or 0),
        int(components.get("second") or 0),
        int(components.get("nanosecond") or 0),
        offset,
    )


def build_instant(components: Components, offset: UtcOffset) -> Instant:
    """Validate calendar components and return the instant they denote."""
    return check_range(build_civil(components, offset).to_instant())


def _from_rfc2822(components: Components) -> Instant:
    components = dict(components)
    components["month"] = _month_from_name(str(components["month"]))
    offset = parse_offset(str(components["offset"]))
    civil = build_civil(components, offset)

    weekday = components.get("weekday")
    if weekday is not None:
        expected = WEEKDAY_NAMES.get(str(weekday).lower())
        if expected is None or expected != civil.weekday:
            raise InvalidFieldError("weekday", weekday)
    return check_range(civil.to_instant())


def _from_partial(components: Components, now: Instant, default_offset: UtcOffset | None) -> Instant:
    offset = _resolve_offset(components, default_offset)
    today = CalendarDateTime.from_instant(now, offset)
    filled = {"year": today.year, "month": today.month, "day": today.day}
    filled.update((key, value) for key, value in components.items() if value is not None)
    return build_instant(filled, offset)


def parse(
    text: str,
    hint: Unit | None = None,
    *,
    now: Instant | None = None,
    default_offset: UtcOffset | None = None,
) -> Instant:
    """Parse text into an Instant.

    Args:
        text: The text to parse. Surrounding whitespace and one pair of
            quotes are ignored.
        hint: Unit for numeric input. None selects one by magnitude.
        now: The current instant, used by "now" and by partial forms.
            utcalc never reads the system clock itself.
        default_offset: Offset for forms that carry none. None means UTC.

    Returns:
        The parsed Instant.

    Raises:
        EmptyInputError: If the text is empty.
        InvalidFieldError: If a field is out of range (month 13, Feb 30).
        UnsupportedFormatError: If no form matches, or a relative form is
            used without ``now``.
        ParseRangeError: If the value is outside the supported range.

    Examples:
        >>> parse("0") == Instant.epoch()
        True

        >>> parse("2024-01-15T14:30:45Z").seconds
        1705329045

        >>> parse("2024-01-15 15:30:45", default_offset=UtcOffset.from_hours(1)).seconds
        1705329045

        >>> parse("2024-02-30T00:00:00Z")
        Traceback (most recent call last):
        ...
        utcalc.errors.InvalidFieldError: invalid day: 30
    """
    if hint is not None and not isinstance(hint, Unit):
        raise TypeError(f"hint must be a Unit, got {type(hint).__name__}")
    if default_offset is not None and not isinstance(default_offset, UtcOffset):
        raise TypeError(f"default_offset must be a UtcOffset, got {type(default_offset).__name__}")

    text = normalize_input(text)

    numeric = parse_numeric(text, hint)
    if numeric is not None:
        return numeric

    if text.lower() == "now":
        if now is None:
            raise UnsupportedFormatError("'now' requires the current instant to be supplied")
        return now

    found = match_template(text)
    if found is None:
        raise UnsupportedFormatError(f"unrecognized time format: {text!r}")
    template, components = found

    if template.needs_now and now is None:
        raise UnsupportedFormatError(
            f"{template.name} input {text!r} requires the current instant to be supplied"
        )

    if template.name == "rfc2822":
        return _from_rfc2822(components)
    if template.needs_now:
        return _from_partial(components, now, default_offset)  # type: ignore[arg-type]
    return build_instant(components, _resolve_offset(components, default_offset))


__all__ = [
    "parse",
    "normalize_input",
    "parse_offset",
    "check_year",
    "check_range",
    "build_civil",
    "build_instant",
]
