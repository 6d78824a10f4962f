"""utcalc exception hierarchy.

All utcalc-specific exceptions inherit from UtcalcError. Parse and format
failures carry a ``kind`` tag so callers can branch on the failure without
string matching; the calculator facade wraps either family together with
the stage that failed.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class ParseErrorKind(Enum):
    """Tag identifying why a parse failed."""

    EMPTY = "empty"
    INVALID_FIELD = "invalid_field"
    UNSUPPORTED = "unsupported"
    OUT_OF_RANGE = "out_of_range"


class FormatErrorKind(Enum):
    """Tag identifying why formatting failed."""

    INVALID_OFFSET = "invalid_offset"
    UNKNOWN_TOKEN = "unknown_token"
    OUT_OF_RANGE = "out_of_range"


class Stage(Enum):
    """Pipeline stage reported by CalculatorError."""

    PARSING_INPUT_A = "parsing input A"
    PARSING_INPUT_B = "parsing input B"
    FORMATTING_RESULT = "formatting result"


class UtcalcError(Exception):
    """Base exception for all utcalc errors."""

    pass


class ParseError(UtcalcError):
    """Failed to turn text into a time value.

    Subclasses pin down the reason; ``kind`` mirrors the subclass so the
    error can be inspected without isinstance chains.
    """

    kind: ClassVar[ParseErrorKind] = ParseErrorKind.UNSUPPORTED


class EmptyInputError(ParseError):
    """Input was empty after trimming whitespace."""

    kind = ParseErrorKind.EMPTY

    def __init__(self, message: str = "empty input") -> None:
        super().__init__(message)


class InvalidFieldError(ParseError):
    """A calendar or clock field is outside its valid range.

    Examples:
        - Month 13
        - Day 30 in February
        - Hour 24
    """

    kind = ParseErrorKind.INVALID_FIELD

    def __init__(self, field: str, value: object, message: str | None = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message or f"invalid {field}: {value!r}")


class UnsupportedFormatError(ParseError):
    """Input did not match any recognized form."""

    kind = ParseErrorKind.UNSUPPORTED


class ParseRangeError(ParseError):
    """Input is well formed but lies outside the supported range."""

    kind = ParseErrorKind.OUT_OF_RANGE


class FormatError(UtcalcError):
    """Failed to render a time value as text."""

    kind: ClassVar[FormatErrorKind] = FormatErrorKind.OUT_OF_RANGE


class InvalidOffsetError(FormatError):
    """UTC offset outside the open range (-24h, +24h)."""

    kind = FormatErrorKind.INVALID_OFFSET


class UnknownTokenError(FormatError):
    """Custom pattern contains a token outside the closed token set."""

    kind = FormatErrorKind.UNKNOWN_TOKEN

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"unknown pattern token: {token!r}")


class FormatRangeError(FormatError):
    """Instant lies outside the formattable year range."""

    kind = FormatErrorKind.OUT_OF_RANGE


class CalculatorError(UtcalcError):
    """A facade operation failed.

    Attributes:
        stage: Which stage of the pipeline failed.
        input_text: The text being processed at that stage, if any.
        cause: The underlying ParseError or FormatError.
    """

    def __init__(
        self,
        stage: Stage,
        cause: ParseError | FormatError,
        input_text: str | None = None,
    ) -> None:
        self.stage = stage
        self.cause = cause
        self.input_text = input_text
        if input_text is None:
            message = f"{stage.value} failed: {cause}"
        else:
            message = f"{stage.value} failed on {input_text!r}: {cause}"
        super().__init__(message)


__all__ = [
    "ParseErrorKind",
    "FormatErrorKind",
    "Stage",
    "UtcalcError",
    "ParseError",
    "EmptyInputError",
    "InvalidFieldError",
    "UnsupportedFormatError",
    "ParseRangeError",
    "FormatError",
    "InvalidOffsetError",
    "UnknownTokenError",
    "FormatRangeError",
    "CalculatorError",
]
