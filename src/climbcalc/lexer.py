"""climbcalc lexer: converts an expression into a lazy token stream."""

from __future__ import annotations

from collections.abc import Iterator

from climbcalc.tokens import Position, Span, Token, TokenType, is_digit, is_whitespace

_SINGLE_CHAR = {
    "+": TokenType.ADD,
    "-": TokenType.SUBTRACT,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


class Lexer:
    """Tokenize expression text one token at a time."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1

    @property
    def source(self) -> str:
        return self._source

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == TokenType.EOF:
                return

    def next_token(self) -> Token:
        """Return the next token; at end of input, return EOF every time."""
        self._skip_ws()

        start = self._current_pos()
        ch = self._peek()

        if ch == "":
            return self._make(TokenType.EOF, start)

        if is_digit(ch):
            while is_digit(self._peek()):
                self._advance()
            return self._make(TokenType.NUMBER, start)

        if ch == "*" and self._peek(1) == "*":
            self._advance()
            self._advance()
            return self._make(TokenType.POWER, start)

        self._advance()
        return self._make(_SINGLE_CHAR.get(ch, TokenType.ILLEGAL), start)

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _skip_ws(self) -> None:
        while is_whitespace(self._peek()):
            self._advance()

    def _make(self, tt: TokenType, start: Position) -> Token:
        return Token(tt, Span(start, self._current_pos()), self._source)


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source and return the token list."""
    return list(Lexer(source))
