"""Calculator facade.

The Calculator composes parsing, arithmetic and formatting into the two
operations a front end needs:

    convert: text -> Instant -> text in another kind or offset
    compute: two inputs and an Operation -> formatted result

Every failure is re-raised as CalculatorError carrying the Stage that
failed and the input being processed, with the original error chained.

Examples:
    >>> from utcalc.calculator import Calculator, Operation
    >>> calc = Calculator()
    >>> calc.convert("1705329045")
    '2024-01-15T14:30:45Z'
    >>> calc.compute("2024-01-31T00:00:00Z", "1mo", Operation.ADD)
    '2024-02-29T00:00:00Z'
"""

from __future__ import annotations

import contextlib
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from utcalc._internal.constants import MAX_YEAR, MIN_YEAR
from utcalc.arithmetic.ops import add, diff, subtract
from utcalc.config import CalculatorConfig
from utcalc.core.instant import Instant
from utcalc.core.offset import UtcOffset
from utcalc.errors import CalculatorError, FormatError, ParseError, Stage
from utcalc.format.duration import DurationStyle, format_duration
from utcalc.format.formatter import format_instant
from utcalc.format.kinds import FormatKind, OutputKind
from utcalc.format.pattern import PatternToken
from utcalc.parse.duration import parse_duration
from utcalc.parse.parser import parse
from utcalc.units.unit import Unit

logger = logging.getLogger(__name__)


class Operation(Enum):
    """Binary operations supported by Calculator.compute().

    Values:
        ADD: Instant + duration text -> Instant.
        SUBTRACT: Instant - duration text -> Instant.
        DIFF: Instant - Instant -> Duration.
    """

    ADD = "add"
    SUBTRACT = "subtract"
    DIFF = "diff"


@dataclass(frozen=True)
class Capabilities:
    """What this build of utcalc can parse, format and compute.

    Attributes:
        format_kinds: Fixed output kinds.
        pattern_tokens: Tokens accepted in custom patterns.
        units: Units accepted as numeric hints.
        operations: Operations accepted by compute().
        duration_styles: Styles for Duration results.
        min_year: Earliest supported year.
        max_year: Latest supported year.
    """

    format_kinds: tuple[FormatKind, ...]
    pattern_tokens: tuple[PatternToken, ...]
    units: tuple[Unit, ...]
    operations: tuple[Operation, ...]
    duration_styles: tuple[DurationStyle, ...]
    min_year: int
    max_year: int


def capabilities() -> Capabilities:
    """Describe the supported kinds, tokens, units, operations and range.

    Examples:
        >>> caps = capabilities()
        >>> (caps.min_year, caps.max_year)
        (1, 9999)
        >>> FormatKind.RFC2822_LIKE in caps.format_kinds
        True
    """
    return Capabilities(
        format_kinds=tuple(FormatKind),
        pattern_tokens=tuple(PatternToken),
        units=tuple(Unit),
        operations=tuple(Operation),
        duration_styles=tuple(DurationStyle),
        min_year=MIN_YEAR,
        max_year=MAX_YEAR,
    )


@contextlib.contextmanager
def _stage(stage: Stage, input_text: str | None = None) -> Iterator[None]:
    try:
        yield
    except (ParseError, FormatError) as exc:
        logger.debug(
            "calculator_stage_failed",
            extra={"stage": stage.value, "input_text": input_text, "error": type(exc).__name__},
        )
        raise CalculatorError(stage, exc, input_text) from exc


class Calculator:
    """Facade over parse, arithmetic and format.

    A Calculator holds only its configuration and never reads the system
    clock; callers that want "now" or partial inputs pass ``now``.

    Attributes:
        config: Defaults for offsets and numeric hints.
    """

    def __init__(self, config: CalculatorConfig | None = None) -> None:
        if config is None:
            config = CalculatorConfig()
        if not isinstance(config, CalculatorConfig):
            raise TypeError(f"expected CalculatorConfig, got {type(config).__name__}")
        self.config = config

    def _hint(self, hint: Unit | None) -> Unit | None:
        return hint if hint is not None else self.config.ambiguous_numeric_hint

    def _offset(self, target_offset: UtcOffset | None) -> UtcOffset:
        return target_offset if target_offset is not None else self.config.effective_offset

    def _parse(self, stage: Stage, text: str, hint: Unit | None, now: Instant | None) -> Instant:
        with _stage(stage, text):
            return parse(
                text,
                self._hint(hint),
                now=now,
                default_offset=self.config.default_offset,
            )

    def convert(
        self,
        text: str,
        hint: Unit | None = None,
        target_kind: OutputKind = FormatKind.ISO8601_WITH_OFFSET,
        target_offset: UtcOffset | None = None,
        *,
        now: Instant | None = None,
    ) -> str:
        """Parse ``text`` and format it as ``target_kind``.

        Args:
            text: Input in any form parse() accepts.
            hint: Unit for numeric input; falls back to the config.
            target_kind: Output kind or CustomPattern.
            target_offset: Output offset; falls back to the config, then UTC.
            now: Current instant for "now" and partial inputs.

        Raises:
            CalculatorError: With Stage.PARSING_INPUT_A or
                Stage.FORMATTING_RESULT.

        Examples:
            >>> Calculator().convert("2024-01-15T14:30:45Z", target_kind=FormatKind.EPOCH_MILLIS)
            '1705329045000'
        """
        instant = self._parse(Stage.PARSING_INPUT_A, text, hint, now)
        with _stage(Stage.FORMATTING_RESULT, text):
            return format_instant(instant, target_kind, self._offset(target_offset))

    def compute(
        self,
        text_a: str,
        text_b: str,
        operation: Operation,
        *,
        hint: Unit | None = None,
        target_kind: OutputKind = FormatKind.ISO8601_WITH_OFFSET,
        target_offset: UtcOffset | None = None,
        duration_style: DurationStyle = DurationStyle.SECONDS,
        now: Instant | None = None,
    ) -> str:
        """Apply ``operation`` to two inputs and format the result.

        For ADD and SUBTRACT, ``text_b`` is duration text ("1mo", "4h5m")
        and the result is an Instant formatted as ``target_kind``. Calendar
        amounts are applied to the wall clock at the target offset. For
        DIFF, both inputs are instants and the result is the Duration
        ``a - b`` formatted in ``duration_style``.

        Raises:
            CalculatorError: Tagged with the stage that failed.

        Examples:
            >>> Calculator().compute("2024-01-02T00:00:00Z", "2024-01-01T00:00:00Z", Operation.DIFF)
            '86400'
        """
        if not isinstance(operation, Operation):
            raise TypeError(f"expected Operation, got {type(operation).__name__}")

        offset = self._offset(target_offset)
        a = self._parse(Stage.PARSING_INPUT_A, text_a, hint, now)

        if operation is Operation.DIFF:
            b = self._parse(Stage.PARSING_INPUT_B, text_b, hint, now)
            with _stage(Stage.FORMATTING_RESULT, text_a):
                return format_duration(diff(a, b), duration_style)

        with _stage(Stage.PARSING_INPUT_B, text_b):
            amount = parse_duration(text_b)
        if operation is Operation.ADD:
            result = add(a, amount, offset=offset)
        else:
            result = subtract(a, amount, offset=offset)
        with _stage(Stage.FORMATTING_RESULT, text_a):
            return format_instant(result, target_kind, offset)

    def capabilities(self) -> Capabilities:
        return capabilities()


__all__ = ["Calculator", "Capabilities", "Operation", "capabilities"]
