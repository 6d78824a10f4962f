"""Parsing of instants and durations from text.

Public API:
    parse: Parse any supported instant form into an Instant.
    parse_with_pattern: Parse text produced by a custom pattern.
    parse_duration: Parse duration text into a Duration or Period.
    infer_unit: Pick the epoch unit of an unhinted number.

Examples:
    >>> from utcalc.parse import parse, parse_duration
    >>> parse("1700000000000").seconds
    1700000000
    >>> str(parse_duration("90m"))
    '1h30m'
"""

from __future__ import annotations

from utcalc.parse.duration import DurationValue, parse_duration
from utcalc.parse.numeric import infer_unit, parse_numeric
from utcalc.parse.parser import normalize_input, parse, parse_offset
from utcalc.parse.pattern import parse_with_pattern

__all__ = [
    "DurationValue",
    "parse",
    "parse_with_pattern",
    "parse_duration",
    "parse_numeric",
    "infer_unit",
    "normalize_input",
    "parse_offset",
]
