"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    # Binary operators
    ADD = auto()  # +
    SUBTRACT = auto()  # -
    MULTIPLY = auto()  # *
    DIVIDE = auto()  # /
    POWER = auto()  # **

    # Operands and grouping
    NUMBER = auto()  # [0-9]+
    LPAREN = auto()  # (
    RPAREN = auto()  # )

    ILLEGAL = auto()  # any other single character
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token.

    The token does not copy its text: ``text`` is sliced from the source
    string on demand using the span offsets.
    """

    type: TokenType
    span: Span
    source: str = field(repr=False, compare=False)

    @property
    def text(self) -> str:
        return self.source[self.span.start.offset : self.span.end.offset]


_WHITESPACE = frozenset(" \t\r\n")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch != "" and ch in "0123456789"


def is_whitespace(ch: str) -> bool:
    return ch in _WHITESPACE
