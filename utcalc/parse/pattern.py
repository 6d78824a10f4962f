"""Parsing text produced by a custom pattern.

The pattern language is the one the formatter uses (see
utcalc.format.pattern). A pattern is compiled into a regex with one named
group per token; a token that appears twice must match the same text
both times.
"""

from __future__ import annotations

import functools
import re

from utcalc.core.instant import Instant
from utcalc.core.offset import UtcOffset
from utcalc.errors import InvalidFieldError, UnsupportedFormatError
from utcalc.format.pattern import PatternToken, compile_pattern
from utcalc.parse._forms import fraction_to_nanos
from utcalc.parse.parser import build_instant, normalize_input, parse_offset

_TOKEN_REGEX: dict[PatternToken, str] = {
    PatternToken.YEAR: r"\d{4,5}",
    PatternToken.MONTH: r"\d{2}",
    PatternToken.DAY: r"\d{2}",
    PatternToken.HOUR: r"\d{2}",
    PatternToken.MINUTE: r"\d{2}",
    PatternToken.SECOND: r"\d{2}",
    PatternToken.FRACTION: r"\d{9}",
    PatternToken.OFFSET: r"[+-]\d{4}",
    PatternToken.OFFSET_NAME: r"UTC|[+-]\d{2}:\d{2}",
}

_REQUIRED = (PatternToken.YEAR, PatternToken.MONTH, PatternToken.DAY)


@functools.lru_cache(maxsize=128)
def pattern_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a custom pattern into a regex for fullmatch().

    Raises:
        UnknownTokenError: If the pattern uses an unknown token.
        UnsupportedFormatError: If the pattern lacks a year, month or day.
    """
    parts = compile_pattern(pattern)
    missing = [token.value for token in _REQUIRED if token not in parts]
    if missing:
        raise UnsupportedFormatError(
            f"pattern {pattern!r} cannot be parsed without {', '.join(missing)}"
        )

    seen: set[PatternToken] = set()
    chunks: list[str] = []
    for part in parts:
        if isinstance(part, str):
            chunks.append(re.escape(part))
        elif part is PatternToken.PERCENT:
            chunks.append("%")
        elif part in seen:
            chunks.append(f"(?P={part.name.lower()})")
        else:
            seen.add(part)
            chunks.append(f"(?P<{part.name.lower()}>{_TOKEN_REGEX[part]})")
    return re.compile("".join(chunks), re.ASCII)


def parse_with_pattern(
    text: str,
    pattern: str,
    *,
    default_offset: UtcOffset | None = None,
) -> Instant:
    """Parse text that was produced by formatting with ``pattern``.

    Fields absent from the pattern default to zero; an absent offset
    falls back to ``default_offset``, then UTC.

    Raises:
        EmptyInputError: If the text is empty.
        UnknownTokenError: If the pattern uses an unknown token.
        UnsupportedFormatError: If the pattern lacks date tokens or the
            text does not match it.
        InvalidFieldError: If a field is out of range, or %z and %Z
            disagree.
        ParseRangeError: If the instant is outside years 1-9999.

    Examples:
        >>> parse_with_pattern("15/01/2024 14:30", "%d/%m/%Y %H:%M").seconds
        1705329000
    """
    regex = pattern_to_regex(pattern)
    text = normalize_input(text)
    match = regex.fullmatch(text)
    if match is None:
        raise UnsupportedFormatError(f"{text!r} does not match pattern {pattern!r}")

    fields = match.groupdict()
    offset_texts = {fields[name] for name in ("offset", "offset_name") if fields.get(name)}
    offsets = {parse_offset(value) for value in offset_texts}
    if len(offsets) > 1:
        raise InvalidFieldError("offset", " / ".join(sorted(offset_texts)))
    if offsets:
        offset = offsets.pop()
    elif default_offset is not None:
        offset = default_offset
    else:
        offset = UtcOffset.utc()

    components = {
        "year": int(fields["year"]),
        "month": int(fields["month"]),
        "day": int(fields["day"]),
        "hour": int(fields.get("hour") or 0),
        "minute": int(fields.get("minute") or 0),
        "second": int(fields.get("second") or 0),
        "nanosecond": fraction_to_nanos(fields.get("fraction")),
    }
    return build_instant(components, offset)


__all__ = ["parse_with_pattern", "pattern_to_regex"]
