"""Expression evaluation for worksheet lines.

Grammar:
    expr := term (('+' | '-') term)*
    term := '(' expr ')' | '-' term | duration | number | 'now' | quoted | '#' N

Values are Instants, Durations, Periods or UtcOffsets (the last only via
a reference to a directive line). The value algebra follows
combine(): mixes that have no meaning raise UnsupportedFormatError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Union

from utcalc._internal.constants import MAX_NUMERIC_DIGITS
from utcalc.arithmetic.ops import add, diff, subtract
from utcalc.core.duration import Duration
from utcalc.core.instant import Instant
from utcalc.core.offset import UtcOffset
from utcalc.core.period import Period
from utcalc.errors import UnsupportedFormatError
from utcalc.parse.duration import parse_duration
from utcalc.parse.parser import parse
from utcalc.units.unit import Unit
from utcalc.worksheet.lexer import Token, TokenKind, tokenize

Value = Union[Instant, Duration, Period, UtcOffset]

# Resolves a 1-based line reference to that line's value
ReferenceResolver = Callable[[int], Value]

# Deepest nesting of parentheses and unary minus in one expression
MAX_NESTING = 100


def _describe(value: Value) -> str:
    return type(value).__name__


def combine(left: Value, operator: str, right: Value, offset: UtcOffset | None = None) -> Value:
    """Apply ``+`` or ``-`` to two values.

    Rules:
        Instant +/- Duration  -> Instant
        Duration + Instant    -> Instant
        Instant - Instant     -> Duration
        Duration +/- Duration -> Duration
        Instant +/- Period    -> Instant (month-end clamped at ``offset``)
        Period +/- Period     -> Period
        Period +/- Duration   -> Period (and Duration +/- Period)
        Instant + Instant     -> Duration (both read as time since the epoch)
        Duration - Instant    -> Instant (the Instant read as time since the epoch)

    Raises:
        UnsupportedFormatError: For any other combination.

    Examples:
        >>> combine(Instant.from_seconds(3), "+", Duration(hours=2))
        Instant(7203000000000)
        >>> combine(Instant.from_seconds(100), "-", Instant.from_seconds(70))
        Duration(nanoseconds=30000000000)
    """
    adding = operator == "+"
    if isinstance(left, Instant):
        if isinstance(right, (Duration, Period)):
            if adding:
                return add(left, right, offset=offset)
            return subtract(left, right, offset=offset)
        if isinstance(right, Instant):
            if adding:
                return Duration(nanoseconds=left.nanos + right.nanos)
            return diff(left, right)
    elif isinstance(left, Duration):
        if isinstance(right, (Duration, Period)):
            return left + right if adding else left - right
        if isinstance(right, Instant):
            if adding:
                return add(right, left)
            return Instant(left.total_nanoseconds - right.nanos)
    elif isinstance(left, Period) and isinstance(right, (Duration, Period)):
        return left + right if adding else left - right

    raise UnsupportedFormatError(
        f"cannot compute {_describe(left)} {operator} {_describe(right)}"
    )


@dataclass
class ExpressionEvaluator:
    """Recursive-descent evaluator for one worksheet line.

    Attributes:
        offset: Offset for quoted datetimes without one and for calendar
            arithmetic.
        now: Value of the ``now`` keyword.
        hint: Unit for bare numbers. None selects one by magnitude.
        resolve: Looks up the value of a referenced line.
    """

    offset: UtcOffset
    now: Instant
    hint: Unit | None = None
    resolve: ReferenceResolver | None = None
    _tokens: list[Token] = field(default_factory=list, init=False, repr=False)
    _pos: int = field(default=0, init=False, repr=False)
    _depth: int = field(default=0, init=False, repr=False)

    def evaluate(self, line: str) -> Value:
        """Evaluate a whole line.

        Raises:
            ParseError: If the line is malformed or an operand fails to parse.

        Examples:
            >>> ExpressionEvaluator(UtcOffset.utc(), Instant.epoch()).evaluate("30s + 5m + 4h")
            Duration(nanoseconds=14730000000000)
        """
        self._tokens = tokenize(line)
        self._pos = 0
        self._depth = 0
        if self._peek().kind is TokenKind.END:
            raise UnsupportedFormatError("empty expression")
        value = self._expr()
        token = self._peek()
        if token.kind is not TokenKind.END:
            raise UnsupportedFormatError(
                f"unexpected {token.text!r} at column {token.column + 1}"
            )
        return value

    def _peek(self) -> Token:
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def _expr(self) -> Value:
        value = self._term()
        while self._peek().kind in (TokenKind.PLUS, TokenKind.MINUS):
            operator = self._advance().text
            value = combine(value, operator, self._term(), self.offset)
        return value

    def _term(self) -> Value:
        self._depth += 1
        try:
            if self._depth > MAX_NESTING:
                raise UnsupportedFormatError(
                    f"expression nested too deeply at column {self._peek().column + 1}"
                )
            return self._operand()
        finally:
            self._depth -= 1

    def _operand(self) -> Value:
        token = self._advance()
        kind = token.kind

        if kind is TokenKind.LPAREN:
            value = self._expr()
            closing = self._advance()
            if closing.kind is not TokenKind.RPAREN:
                raise UnsupportedFormatError(f"expected ')' at column {closing.column + 1}")
            return value
        if kind is TokenKind.MINUS:
            return self._negate(self._term(), token)
        if kind is TokenKind.DURATION:
            return parse_duration(token.text)
        if kind is TokenKind.NUMBER:
            return parse(token.text, self.hint)
        if kind is TokenKind.NOW:
            return self.now
        if kind is TokenKind.QUOTED:
            return parse(token.text, self.hint, now=self.now, default_offset=self.offset)
        if kind is TokenKind.REFERENCE:
            if self.resolve is None:
                raise UnsupportedFormatError(f"line reference {token.text} is not available here")
            number = token.text[1:].lstrip("0") or "0"
            if len(number) > MAX_NUMERIC_DIGITS:
                raise UnsupportedFormatError(f"line reference {token.text[:12]}... does not exist")
            return self.resolve(int(number))
        if kind is TokenKind.END:
            raise UnsupportedFormatError("expression ended unexpectedly")
        raise UnsupportedFormatError(f"unexpected {token.text!r} at column {token.column + 1}")

    def _negate(self, value: Value, token: Token) -> Value:
        if isinstance(value, Instant):
            return Instant(-value.nanos)
        if isinstance(value, (Duration, Period)):
            return -value
        raise UnsupportedFormatError(
            f"cannot negate {_describe(value)} at column {token.column + 1}"
        )


def evaluate_expression(
    line: str,
    *,
    offset: UtcOffset | None = None,
    now: Instant,
    hint: Unit | None = None,
) -> Value:
    """Evaluate a single expression without line references.

    Examples:
        >>> evaluate_expression("'2014-05-06 22:08:07' - 2h", offset=UtcOffset.from_hours(1), now=Instant.epoch()).seconds
        1399403287
    """
    evaluator = ExpressionEvaluator(offset or UtcOffset.utc(), now, hint)
    return evaluator.evaluate(line)


__all__ = [
    "Value",
    "ReferenceResolver",
    "ExpressionEvaluator",
    "combine",
    "evaluate_expression",
]
