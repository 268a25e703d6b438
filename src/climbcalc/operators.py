"""Binary operator table and IEEE-754 arithmetic."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType

from climbcalc.tokens import TokenType


class Associativity(Enum):
    LEFT = auto()
    RIGHT = auto()


@dataclass(frozen=True, slots=True)
class OperatorInfo:
    """Binding strength of a binary operator."""

    precedence: int
    associativity: Associativity

    def next_min_precedence(self) -> int:
        """Minimum precedence for the right-hand operand.

        Left-associative operators bump it so that an operator of the same
        level ends the right operand; right-associative ones keep it so the
        right operand absorbs it.
        """
        if self.associativity is Associativity.LEFT:
            return self.precedence + 1
        return self.precedence


OPERATORS: Mapping[TokenType, OperatorInfo] = MappingProxyType(
    {
        TokenType.ADD: OperatorInfo(1, Associativity.LEFT),
        TokenType.SUBTRACT: OperatorInfo(1, Associativity.LEFT),
        TokenType.MULTIPLY: OperatorInfo(2, Associativity.LEFT),
        TokenType.DIVIDE: OperatorInfo(2, Associativity.LEFT),
        TokenType.POWER: OperatorInfo(3, Associativity.RIGHT),
    }
)


def operator_info(tt: TokenType) -> OperatorInfo | None:
    """Return the table entry for tt, or None if it is not a binary operator."""
    return OPERATORS.get(tt)


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


def add(lhs: float, rhs: float) -> float:
    return lhs + rhs


def subtract(lhs: float, rhs: float) -> float:
    return lhs - rhs


def multiply(lhs: float, rhs: float) -> float:
    return lhs * rhs


def divide(lhs: float, rhs: float) -> float:
    """Float division that yields inf/nan instead of raising."""
    try:
        return lhs / rhs
    except ZeroDivisionError:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)


def power(lhs: float, rhs: float) -> float:
    """C ``pow()`` semantics: overflow and domain errors become inf/nan."""
    try:
        return math.pow(lhs, rhs)
    except OverflowError:
        if lhs < 0 and _is_odd_integer(rhs):
            return -math.inf
        return math.inf
    except ValueError:
        # 0 ** negative is a pole; negative ** non-integer has no real value
        if lhs == 0:
            if _is_odd_integer(rhs):
                return math.copysign(math.inf, lhs)
            return math.inf
        return math.nan


OPERATIONS: Mapping[TokenType, Callable[[float, float], float]] = MappingProxyType(
    {
        TokenType.ADD: add,
        TokenType.SUBTRACT: subtract,
        TokenType.MULTIPLY: multiply,
        TokenType.DIVIDE: divide,
        TokenType.POWER: power,
    }
)
