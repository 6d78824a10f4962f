"""Internal constants for utcalc.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000
NANOS_PER_WEEK: int = 7 * NANOS_PER_DAY

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Formattable and parseable year range
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# First and last instant of that range, in nanoseconds since the epoch
MIN_EPOCH_NANOS: int = -62_135_596_800 * NANOS_PER_SECOND  # 0001-01-01T00:00:00Z
MAX_EPOCH_NANOS: int = 253_402_300_800 * NANOS_PER_SECOND - 1  # 9999-12-31T23:59:59.999999999Z

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "",
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

WEEKDAY_ABBREVIATIONS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

# Offsets must lie strictly inside +/- 24 hours
MAX_UTC_OFFSET_SECONDS: int = 24 * SECONDS_PER_HOUR - 1

# Hinted numeric input must fit a signed 64-bit count of seconds
MAX_EPOCH_SECONDS: int = 2**63 - 1

# Unhinted numeric input: integer digit count -> unit exponent (10**-n seconds)
MAX_UNHINTED_DIGITS: int = 20

# Longest run of significant digits read as a number. Anything longer is
# past the 64-bit second range in every unit.
MAX_NUMERIC_DIGITS: int = 30


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "NANOS_PER_WEEK",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_EPOCH_NANOS",
    "MAX_EPOCH_NANOS",
    "DAYS_IN_MONTH",
    "MONTH_ABBREVIATIONS",
    "WEEKDAY_ABBREVIATIONS",
    "MAX_UTC_OFFSET_SECONDS",
    "MAX_EPOCH_SECONDS",
    "MAX_UNHINTED_DIGITS",
    "MAX_NUMERIC_DIGITS",
]
