"""Multi-line worksheet evaluation.

A worksheet is plain text with one expression per line. Lines are
evaluated top to bottom and each produces a SheetLine. Two kinds of
line are special:

    #UTC+1, #UTC-5   Directive: later lines use this offset
    #3               Reference: the value of line 3 (inside expressions too)

A line that fails to evaluate records its error and the sheet carries
on; blank lines produce an empty SheetLine.

Examples:
    >>> from utcalc.core import Instant
    >>> lines = evaluate_sheet("#UTC+1\\n'1970-01-01 01:00:00'\\n#2 + 1h", now=Instant.epoch())
    >>> [line.display() for line in lines]
    ['UTC+01:00', '1970-01-01 01:00:00 +01:00', '1970-01-01 02:00:00 +01:00']
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from utcalc.config import CalculatorConfig
from utcalc.core.duration import Duration
from utcalc.core.instant import Instant
from utcalc.core.offset import UtcOffset
from utcalc.core.period import Period
from utcalc.errors import UnsupportedFormatError, UtcalcError
from utcalc.format.duration import format_compact, format_duration, format_period
from utcalc.format.formatter import format_epoch, to_civil
from utcalc.format.iso8601 import format_fraction
from utcalc.units.unit import Unit
from utcalc.worksheet.expression import ExpressionEvaluator, Value

logger = logging.getLogger(__name__)

_DIRECTIVE_PATTERN = re.compile(r"^#UTC([+-])(\d{1,2})$", re.ASCII)

# Shown for lines without a value
PLACEHOLDER = "..."


def parse_directive(line: str) -> UtcOffset | None:
    """Return the offset of a ``#UTC±H`` directive, or None if ``line`` is not one.

    Examples:
        >>> parse_directive("#UTC+5")
        UtcOffset(seconds=18000)
        >>> parse_directive("#UTC+24") is None
        True
    """
    match = _DIRECTIVE_PATTERN.match(line.strip())
    if match is None:
        return None
    hours = int(match.group(2))
    if hours > 23:
        return None
    return UtcOffset.from_hours(-hours if match.group(1) == "-" else hours)


@dataclass(frozen=True)
class SheetLine:
    """The outcome of one worksheet line.

    Attributes:
        number: 1-based line number.
        offset: Offset in effect while the line was evaluated.
        value: The computed value, or None for blank and failed lines.
        error: The error that stopped evaluation, if any.
        text: The source text of the line.
    """

    number: int
    offset: UtcOffset
    value: Value | None = None
    error: UtcalcError | None = None
    text: str = ""

    @property
    def ok(self) -> bool:
        return self.value is not None

    def display(self) -> str:
        """Return the human-readable column.

        Instants show as "YYYY-MM-DD HH:MM:SS +HH:MM" at the line's offset,
        durations in compact form and offsets as "UTC+HH:MM".
        """
        value = self.value
        if isinstance(value, Instant):
            civil = to_civil(value, self.offset)
            return (
                f"{civil.year:04d}-{civil.month:02d}-{civil.day:02d} "
                f"{civil.hour:02d}:{civil.minute:02d}:{civil.second:02d}"
                f"{format_fraction(civil.nanosecond)} {civil.offset}"
            )
        if isinstance(value, Duration):
            return format_compact(value)
        return self._common(value)

    def timestamp(self) -> str:
        """Return the numeric column.

        Instants show as epoch seconds and durations as seconds, both
        exact decimals.
        """
        value = self.value
        if isinstance(value, Instant):
            return format_epoch(value.nanos, Unit.SECONDS)
        if isinstance(value, Duration):
            return format_duration(value)
        return self._common(value)

    @staticmethod
    def _common(value: Value | None) -> str:
        if isinstance(value, Period):
            return format_period(value)
        if isinstance(value, UtcOffset):
            return f"UTC{value}"
        return PLACEHOLDER


class _LineValues:
    """Resolves ``#N`` references against the lines evaluated so far."""

    def __init__(self, lines: list[SheetLine]) -> None:
        self._lines = lines

    def __call__(self, number: int) -> Value:
        if number < 1 or number > len(self._lines):
            raise UnsupportedFormatError(f"line #{number} does not exist yet")
        line = self._lines[number - 1]
        if line.value is None:
            raise UnsupportedFormatError(f"line #{number} has no value")
        return line.value


def evaluate_sheet(
    text: str,
    *,
    now: Instant,
    config: CalculatorConfig | None = None,
) -> list[SheetLine]:
    """Evaluate every line of a worksheet.

    Args:
        text: The worksheet, lines separated by newlines.
        now: Value of the ``now`` keyword.
        config: Supplies the starting offset and the numeric hint.

    Returns:
        One SheetLine per input line, in order.

    Examples:
        >>> lines = evaluate_sheet("100 - 70\\n4h5m30s\\nbogus", now=Instant.epoch())
        >>> [line.timestamp() for line in lines]
        ['30', '14730', '...']
        >>> type(lines[2].error).__name__
        'UnsupportedFormatError'
    """
    if not isinstance(now, Instant):
        raise TypeError(f"now must be an Instant, got {type(now).__name__}")
    if config is None:
        config = CalculatorConfig()

    offset = config.effective_offset
    lines: list[SheetLine] = []
    resolve = _LineValues(lines)

    for number, source in enumerate(text.split("\n"), start=1):
        source = source.rstrip("\r")
        if not source.strip():
            lines.append(SheetLine(number, offset, text=source))
            continue

        directive = parse_directive(source)
        if directive is not None:
            lines.append(SheetLine(number, offset, directive, text=source))
            offset = directive
            continue

        evaluator = ExpressionEvaluator(offset, now, config.ambiguous_numeric_hint, resolve)
        try:
            value = evaluator.evaluate(source)
            if isinstance(value, Instant):
                to_civil(value, offset)
        except UtcalcError as exc:
            logger.debug(
                "sheet_line_failed",
                extra={"line": number, "error": type(exc).__name__, "detail": str(exc)},
            )
            lines.append(SheetLine(number, offset, error=exc, text=source))
            continue

        lines.append(SheetLine(number, offset, value, text=source))
        if isinstance(value, UtcOffset):
            offset = value

    return lines


__all__ = ["PLACEHOLDER", "SheetLine", "evaluate_sheet", "parse_directive"]
