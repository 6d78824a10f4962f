"""Worksheet evaluation: expressions over timestamps and durations.

Public API:
    evaluate_sheet: Evaluate a multi-line worksheet into SheetLines.
    evaluate_expression: Evaluate a single expression.
    SheetLine: Outcome of one line, with display() and timestamp() columns.

Examples:
    >>> from utcalc.core import Instant
    >>> from utcalc.worksheet import evaluate_sheet
    >>> [line.display() for line in evaluate_sheet("now + 1m2s", now=Instant.from_seconds(1))]
    ['1970-01-01 00:01:03 +00:00']
"""

from __future__ import annotations

from utcalc.worksheet.expression import ExpressionEvaluator, Value, combine, evaluate_expression
from utcalc.worksheet.lexer import Token, TokenKind, tokenize
from utcalc.worksheet.sheet import PLACEHOLDER, SheetLine, evaluate_sheet, parse_directive

__all__ = [
    "Value",
    "SheetLine",
    "PLACEHOLDER",
    "ExpressionEvaluator",
    "Token",
    "TokenKind",
    "combine",
    "evaluate_expression",
    "evaluate_sheet",
    "parse_directive",
    "tokenize",
]
