"""utcalc: a Unix-time calculator core.

utcalc converts between raw epoch numbers and human-readable calendar
text, and does arithmetic on time values with nanosecond precision.

Core Types:
    Instant: Absolute point in time (nanoseconds since the Unix epoch)
    UtcOffset: Fixed shift from UTC
    CalendarDateTime: Wall-clock fields of an Instant at an offset
    Duration: Exact span of time
    Period: Calendar amount (years, months, weeks, days) plus exact time

Units:
    Unit: Epoch magnitude (SECONDS, MILLISECONDS, MICROSECONDS, NANOSECONDS)

Functions:
    parse: Parse text into an Instant
    parse_duration: Parse duration text into a Duration or Period
    format_instant: Format an Instant as a FormatKind or CustomPattern
    add, subtract, diff, calendar_diff: Arithmetic
    evaluate_sheet: Evaluate a multi-line worksheet

Facade:
    Calculator: convert() and compute() with stage-tagged errors

Exceptions:
    UtcalcError: Base exception
    ParseError: Failed to parse text (EmptyInputError, InvalidFieldError, ...)
    FormatError: Failed to format (InvalidOffsetError, UnknownTokenError, ...)
    CalculatorError: A facade stage failed

Example:
    >>> from utcalc import Calculator, FormatKind, UtcOffset
    >>> Calculator().convert("1705329045000", target_kind=FormatKind.RFC2822_LIKE,
    ...                      target_offset=UtcOffset.from_hours(-5))
    'Mon, 15 Jan 2024 09:30:45 -0500'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from utcalc.core.civil import CalendarDateTime
from utcalc.core.duration import Duration
from utcalc.core.instant import Instant
from utcalc.core.offset import UtcOffset
from utcalc.core.period import Period

# Units
from utcalc.units.unit import Unit

# Exceptions
from utcalc.errors import (
    CalculatorError,
    EmptyInputError,
    FormatError,
    FormatErrorKind,
    FormatRangeError,
    InvalidFieldError,
    InvalidOffsetError,
    ParseError,
    ParseErrorKind,
    ParseRangeError,
    Stage,
    UnknownTokenError,
    UnsupportedFormatError,
    UtcalcError,
)

# Parse, format and arithmetic
from utcalc.arithmetic import add, calendar_diff, diff, subtract
from utcalc.format import CustomPattern, DurationStyle, FormatKind, format_duration, format_instant
from utcalc.parse import parse, parse_duration, parse_with_pattern

# Facade and worksheet
from utcalc.calculator import Calculator, Capabilities, Operation, capabilities
from utcalc.config import CalculatorConfig
from utcalc.worksheet import SheetLine, evaluate_sheet

__all__: list[str] = [
    "__version__",
    # Core types
    "CalendarDateTime",
    "Duration",
    "Instant",
    "Period",
    "UtcOffset",
    # Units
    "Unit",
    # Exceptions
    "UtcalcError",
    "ParseError",
    "ParseErrorKind",
    "EmptyInputError",
    "InvalidFieldError",
    "UnsupportedFormatError",
    "ParseRangeError",
    "FormatError",
    "FormatErrorKind",
    "InvalidOffsetError",
    "UnknownTokenError",
    "FormatRangeError",
    "CalculatorError",
    "Stage",
    # Parse, format and arithmetic
    "parse",
    "parse_duration",
    "parse_with_pattern",
    "format_instant",
    "format_duration",
    "FormatKind",
    "CustomPattern",
    "DurationStyle",
    "add",
    "subtract",
    "diff",
    "calendar_diff",
    # Facade and worksheet
    "Calculator",
    "CalculatorConfig",
    "Capabilities",
    "Operation",
    "capabilities",
    "SheetLine",
    "evaluate_sheet",
]
