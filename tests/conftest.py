"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from climbcalc.errors import ExpressionError
from climbcalc.lexer import tokenize
from climbcalc.parser import parse
from climbcalc.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = tokenize(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def fail():
    """Return a helper that evaluates source and returns the raised error."""

    def _fail(source: str, allow_trailing: bool = False) -> ExpressionError:
        with pytest.raises(ExpressionError) as exc_info:
            parse(source, allow_trailing=allow_trailing)
        return exc_info.value

    return _fail


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
