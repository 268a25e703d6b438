"""Test the operator table and IEEE-754 arithmetic helpers."""

import math

import pytest

from climbcalc.operators import (
    OPERATIONS,
    OPERATORS,
    Associativity,
    divide,
    operator_info,
    power,
)
from climbcalc.tokens import TokenType

BINARY = [
    TokenType.ADD,
    TokenType.SUBTRACT,
    TokenType.MULTIPLY,
    TokenType.DIVIDE,
    TokenType.POWER,
]


class TestTable:
    @pytest.mark.parametrize(
        "tt, precedence, assoc",
        [
            (TokenType.ADD, 1, Associativity.LEFT),
            (TokenType.SUBTRACT, 1, Associativity.LEFT),
            (TokenType.MULTIPLY, 2, Associativity.LEFT),
            (TokenType.DIVIDE, 2, Associativity.LEFT),
            (TokenType.POWER, 3, Associativity.RIGHT),
        ],
    )
    def test_entries(self, tt, precedence, assoc):
        info = operator_info(tt)
        assert info is not None
        assert info.precedence == precedence
        assert info.associativity is assoc

    def test_table_covers_exactly_binary_operators(self):
        assert set(OPERATORS) == set(BINARY)
        assert set(OPERATIONS) == set(BINARY)

    @pytest.mark.parametrize(
        "tt",
        [TokenType.NUMBER, TokenType.LPAREN, TokenType.RPAREN, TokenType.ILLEGAL, TokenType.EOF],
    )
    def test_non_operators_have_no_entry(self, tt):
        assert operator_info(tt) is None

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            OPERATORS[TokenType.ADD] = OPERATORS[TokenType.POWER]  # type: ignore[index]

    def test_next_min_precedence(self):
        assert OPERATORS[TokenType.SUBTRACT].next_min_precedence() == 2
        assert OPERATORS[TokenType.DIVIDE].next_min_precedence() == 3
        assert OPERATORS[TokenType.POWER].next_min_precedence() == 3


class TestDivide:
    def test_ordinary(self):
        assert divide(10.0, 4.0) == 2.5

    def test_positive_by_zero(self):
        assert divide(1.0, 0.0) == math.inf

    def test_negative_by_zero(self):
        assert divide(-1.0, 0.0) == -math.inf

    def test_by_negative_zero(self):
        assert divide(1.0, -0.0) == -math.inf

    def test_zero_by_zero(self):
        assert math.isnan(divide(0.0, 0.0))


class TestPower:
    def test_ordinary(self):
        assert power(2.0, 10.0) == 1024.0

    def test_zero_to_negative(self):
        assert power(0.0, -1.0) == math.inf

    def test_negative_zero_to_odd_negative(self):
        assert power(-0.0, -1.0) == -math.inf

    def test_negative_base_fractional_exponent(self):
        assert math.isnan(power(-8.0, 0.5))

    def test_overflow(self):
        assert power(10.0, 400.0) == math.inf

    def test_negative_overflow_odd_exponent(self):
        assert power(-10.0, 401.0) == -math.inf

    def test_negative_overflow_even_exponent(self):
        assert power(-10.0, 400.0) == math.inf
