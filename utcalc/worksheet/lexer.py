"""Tokenizer for worksheet expressions.

Internal module - use evaluate_sheet() from utcalc.worksheet instead.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple

from utcalc.errors import UnsupportedFormatError


class TokenKind(Enum):
    """Classification of expression tokens."""

    PLUS = "+"
    MINUS = "-"
    LPAREN = "("
    RPAREN = ")"
    NOW = "now"
    NUMBER = "number"
    DURATION = "duration"
    QUOTED = "quoted"
    REFERENCE = "reference"
    END = "end"


class Token(NamedTuple):
    """A lexed token and the column it starts at."""

    kind: TokenKind
    text: str
    column: int


# Order matters: a duration starts like a number, so it is tried first
_TOKEN_PATTERNS: tuple[tuple[TokenKind, re.Pattern[str]], ...] = (
    (TokenKind.DURATION, re.compile(r"(?:(?:\d+(?:\.\d+)?|\.\d+)[^\W\d_]+)+")),
    (TokenKind.NUMBER, re.compile(r"\d+(?:\.\d*)?")),
    (TokenKind.NOW, re.compile(r"now\b", re.IGNORECASE)),
    (TokenKind.QUOTED, re.compile(r"'[^']*'|\"[^\"]*\"")),
    (TokenKind.REFERENCE, re.compile(r"#(\d+)")),
)

_SINGLE_CHARS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


def tokenize(line: str) -> list[Token]:
    """Split an expression line into tokens, ending with an END token.

    Raises:
        UnsupportedFormatError: On a character that starts no token.

    Examples:
        >>> [token.kind.name for token in tokenize("now + 4h5m")]
        ['NOW', 'PLUS', 'DURATION', 'END']
    """
    tokens: list[Token] = []
    pos = 0
    while pos < len(line):
        char = line[pos]
        if char.isspace():
            pos += 1
            continue
        if char in _SINGLE_CHARS:
            tokens.append(Token(_SINGLE_CHARS[char], char, pos))
            pos += 1
            continue
        for kind, pattern in _TOKEN_PATTERNS:
            match = pattern.match(line, pos)
            if match:
                tokens.append(Token(kind, match.group(0), pos))
                pos = match.end()
                break
        else:
            raise UnsupportedFormatError(f"unexpected character {char!r} at column {pos + 1}")
    tokens.append(Token(TokenKind.END, "", len(line)))
    return tokens


__all__ = ["Token", "TokenKind", "tokenize"]
