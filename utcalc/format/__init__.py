"""Formatting of Instants and Durations.

Functions:
    format_instant: Render an Instant in a FormatKind or CustomPattern.
    format_duration: Render a Duration as seconds or compact parts.

Examples:
    >>> from utcalc.core import Instant, UtcOffset
    >>> from utcalc.format import FormatKind, format_instant
    >>> format_instant(Instant.from_millis(1705329045123), FormatKind.ISO8601, UtcOffset.from_hours(1))
    '2024-01-15T15:30:45.123'
"""

from __future__ import annotations

from utcalc.format.duration import DurationStyle, format_compact, format_duration, format_period
from utcalc.format.formatter import MAX_INSTANT, MIN_INSTANT, format_epoch, format_instant, to_civil
from utcalc.format.iso8601 import format_fraction, format_iso8601, format_rfc2822
from utcalc.format.kinds import CustomPattern, FormatKind, OutputKind
from utcalc.format.pattern import PatternToken, compile_pattern, render_pattern

__all__ = [
    "FormatKind",
    "CustomPattern",
    "OutputKind",
    "PatternToken",
    "DurationStyle",
    "MIN_INSTANT",
    "MAX_INSTANT",
    "format_instant",
    "format_duration",
    "format_compact",
    "format_period",
    "format_epoch",
    "format_fraction",
    "format_iso8601",
    "format_rfc2822",
    "compile_pattern",
    "render_pattern",
    "to_civil",
]
