"""Custom pattern language.

Patterns are strftime-like strings built from a closed set of tokens.
Each pattern is compiled into a sequence of PatternToken values and
literal text before use, so an unknown token is reported up front and is
never silently copied into the output.

Supported Tokens:
    %Y - 4-digit year (0001-9999; 0000 or 10000 at the range edges)
    %m - 2-digit month (01-12)
    %d - 2-digit day (01-31)
    %H - 2-digit hour, 24-hour (00-23)
    %M - 2-digit minute (00-59)
    %S - 2-digit second (00-59)
    %f - 9-digit fractional second (nanoseconds)
    %z - UTC offset as +HHMM
    %Z - UTC offset as "UTC" or +HH:MM
    %% - Literal %

Examples:
    >>> compile_pattern("%Y-%m-%d")
    (<PatternToken.YEAR: '%Y'>, '-', <PatternToken.MONTH: '%m'>, '-', <PatternToken.DAY: '%d'>)
"""

from __future__ import annotations

import functools
from enum import Enum
from typing import TYPE_CHECKING, Union

from utcalc.errors import UnknownTokenError

if TYPE_CHECKING:
    from utcalc.core.civil import CalendarDateTime


class PatternToken(Enum):
    """The closed set of custom pattern tokens."""

    YEAR = "%Y"
    MONTH = "%m"
    DAY = "%d"
    HOUR = "%H"
    MINUTE = "%M"
    SECOND = "%S"
    FRACTION = "%f"
    OFFSET = "%z"
    OFFSET_NAME = "%Z"
    PERCENT = "%%"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[PatternToken, str] = {
    PatternToken.YEAR: "year",
    PatternToken.MONTH: "month",
    PatternToken.DAY: "day",
    PatternToken.HOUR: "hour",
    PatternToken.MINUTE: "minute",
    PatternToken.SECOND: "second",
    PatternToken.FRACTION: "fractional second",
    PatternToken.OFFSET: "offset",
    PatternToken.OFFSET_NAME: "offset name",
    PatternToken.PERCENT: "literal %",
}

_BY_TEXT: dict[str, PatternToken] = {token.value: token for token in PatternToken}

PatternPart = Union[PatternToken, str]


@functools.lru_cache(maxsize=128)
def compile_pattern(pattern: str) -> tuple[PatternPart, ...]:
    """Split a pattern into tokens and literal runs.

    Adjacent literal characters are merged into one string.

    Raises:
        UnknownTokenError: If a %-directive is not in the token set, or
            the pattern ends with a lone %.
    """
    parts: list[PatternPart] = []
    literal: list[str] = []
    i = 0
    while i < len(pattern):
        if pattern[i] == "%":
            directive = pattern[i : i + 2]
            token = _BY_TEXT.get(directive)
            if token is None:
                raise UnknownTokenError(directive)
            if literal:
                parts.append("".join(literal))
                literal = []
            parts.append(token)
            i += 2
        else:
            literal.append(pattern[i])
            i += 1
    if literal:
        parts.append("".join(literal))
    return tuple(parts)


def render_token(token: PatternToken, civil: CalendarDateTime) -> str:
    """Render one token for the given wall-clock fields."""
    if token is PatternToken.YEAR:
        return f"{civil.year:04d}"
    elif token is PatternToken.MONTH:
        return f"{civil.month:02d}"
    elif token is PatternToken.DAY:
        return f"{civil.day:02d}"
    elif token is PatternToken.HOUR:
        return f"{civil.hour:02d}"
    elif token is PatternToken.MINUTE:
        return f"{civil.minute:02d}"
    elif token is PatternToken.SECOND:
        return f"{civil.second:02d}"
    elif token is PatternToken.FRACTION:
        return f"{civil.nanosecond:09d}"
    elif token is PatternToken.OFFSET:
        return civil.offset.compact()
    elif token is PatternToken.OFFSET_NAME:
        return "UTC" if civil.offset.is_utc else str(civil.offset)
    return "%"


def render_pattern(pattern: str, civil: CalendarDateTime) -> str:
    """Render ``pattern`` for the given wall-clock fields.

    Examples:
        >>> from utcalc.core.civil import CalendarDateTime
        >>> render_pattern("%d/%m/%Y %H:%M", CalendarDateTime(2024, 1, 15, 14, 30))
        '15/01/2024 14:30'
    """
    parts = compile_pattern(pattern)
    return "".join(
        render_token(part, civil) if isinstance(part, PatternToken) else part
        for part in parts
    )


__all__ = [
    "PatternToken",
    "PatternPart",
    "compile_pattern",
    "render_token",
    "render_pattern",
]
