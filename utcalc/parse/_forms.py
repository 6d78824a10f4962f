"""Input templates for the text forms accepted by parse().

Each template pairs a regex with an extractor that pulls raw components
out of a match. Templates are tried in the order of INPUT_TEMPLATES and
the first match wins; validation of the extracted values happens in the
parser, not here.

Internal module - use parse() from utcalc.parse instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Pattern

Components = dict[str, int | str | None]

# Offset designator shared by the ISO-like and time-only forms
_OFFSET = r"(?P<offset>[Zz]|[+-]\d{2}(?::?\d{2})?)"

# Optional clock part: HH:MM[:SS[.fraction]]
_CLOCK = r"(?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d+))?)?"

MONTH_NAMES: dict[str, int] = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}

WEEKDAY_NAMES: dict[str, int] = {
    "mon": 0,
    "tue": 1,
    "wed": 2,
    "thu": 3,
    "fri": 4,
    "sat": 5,
    "sun": 6,
}


@dataclass(frozen=True)
class InputTemplate:
    """A recognised input form.

    Attributes:
        name: Short identifier, used in error messages.
        pattern: Compiled regex matched against the whole trimmed text.
        extractor: Function turning a match into raw components.
        needs_now: True if the form is relative to the current instant.
    """

    name: str
    pattern: Pattern[str]
    extractor: Callable[[re.Match[str]], Components]
    needs_now: bool = False


def fraction_to_nanos(fraction: str | None) -> int:
    """Convert fractional-second digits to nanoseconds, truncating past 9 digits."""
    if not fraction:
        return 0
    return int(fraction[:9].ljust(9, "0"))


def _clock_components(match: re.Match[str]) -> Components:
    second = match.group("second")
    return {
        "hour": int(match.group("hour")),
        "minute": int(match.group("minute")),
        "second": int(second) if second else 0,
        "nanosecond": fraction_to_nanos(match.group("fraction")),
        "offset": match.group("offset"),
    }


# ISO-like: 2024-01-15T14:30:45.123+05:30, 2024/01/15 14:30, 2024-01-15
_ISO_DATETIME_PATTERN = re.compile(
    r"^(?P<year>\d{4,6})(?P<sep>[-/])(?P<month>\d{2})(?P=sep)(?P<day>\d{2})"
    rf"(?:[Tt ]{_CLOCK}(?:\s?{_OFFSET})?)?$",
    re.ASCII,
)


def _extract_iso_datetime(match: re.Match[str]) -> Components:
    components: Components = {
        "year": int(match.group("year")),
        "month": int(match.group("month")),
        "day": int(match.group("day")),
    }
    if match.group("hour") is None:
        components.update(hour=0, minute=0, second=0, nanosecond=0, offset=None)
    else:
        components.update(_clock_components(match))
    return components


# RFC-2822-like: Mon, 15 Jan 2024 14:30:45 +0000
_RFC2822_PATTERN = re.compile(
    r"^(?:(?P<weekday>[A-Za-z]{3}),\s*)?"
    r"(?P<day>\d{1,2})\s+(?P<month>[A-Za-z]{3})\s+(?P<year>\d{4,5})\s+"
    r"(?P<hour>\d{2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?\s*"
    r"(?P<offset>[+-]\d{4}|GMT|UTC|UT|Z)$",
    re.ASCII | re.IGNORECASE,
)


def _extract_rfc2822(match: re.Match[str]) -> Components:
    second = match.group("second")
    return {
        "weekday": match.group("weekday"),
        "year": int(match.group("year")),
        "month": match.group("month"),
        "day": int(match.group("day")),
        "hour": int(match.group("hour")),
        "minute": int(match.group("minute")),
        "second": int(second) if second else 0,
        "nanosecond": 0,
        "offset": match.group("offset"),
    }


# Time only: 14:30, 14:30:45.5+01:00
_TIME_ONLY_PATTERN = re.compile(
    rf"^{_CLOCK}(?:\s?{_OFFSET})?$",
    re.ASCII,
)


def _extract_time_only(match: re.Match[str]) -> Components:
    return _clock_components(match)


# Month and day without a year: --01-15
_MONTH_DAY_PATTERN = re.compile(
    r"^--(?P<month>\d{2})-(?P<day>\d{2})$",
    re.ASCII,
)


def _extract_month_day(match: re.Match[str]) -> Components:
    return {
        "month": int(match.group("month")),
        "day": int(match.group("day")),
    }


# Year and month: 2024-01, 2024/01
_YEAR_MONTH_PATTERN = re.compile(
    r"^(?P<year>\d{4})[-/](?P<month>\d{2})$",
    re.ASCII,
)


def _extract_year_month(match: re.Match[str]) -> Components:
    return {
        "year": int(match.group("year")),
        "month": int(match.group("month")),
        "day": 1,
    }


INPUT_TEMPLATES: tuple[InputTemplate, ...] = (
    InputTemplate("iso_datetime", _ISO_DATETIME_PATTERN, _extract_iso_datetime),
    InputTemplate("rfc2822", _RFC2822_PATTERN, _extract_rfc2822),
    InputTemplate("time_only", _TIME_ONLY_PATTERN, _extract_time_only, needs_now=True),
    InputTemplate("month_day", _MONTH_DAY_PATTERN, _extract_month_day, needs_now=True),
    InputTemplate("year_month", _YEAR_MONTH_PATTERN, _extract_year_month),
)


def match_template(text: str) -> tuple[InputTemplate, Components] | None:
    """Return the first template matching ``text`` and its components."""
    for template in INPUT_TEMPLATES:
        match = template.pattern.match(text)
        if match:
            return template, template.extractor(match)
    return None


__all__ = [
    "Components",
    "InputTemplate",
    "INPUT_TEMPLATES",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "fraction_to_nanos",
    "match_template",
]
