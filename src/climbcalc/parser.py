"""climbcalc parser: evaluates a token stream by precedence climbing.

No syntax tree is built: each sub-expression is reduced to a float as soon
as both of its operands are known.
"""

from __future__ import annotations

from climbcalc.errors import ErrorKind, ExpressionError
from climbcalc.lexer import Lexer
from climbcalc.operators import OPERATIONS, operator_info
from climbcalc.tokens import Token, TokenType


class Parser:
    """Precedence-climbing evaluator with a single token of lookahead."""

    def __init__(self, lexer: Lexer, *, allow_trailing: bool = False) -> None:
        self._lexer = lexer
        self._allow_trailing = allow_trailing
        self._token: Token | None = None

    @property
    def token(self) -> Token:
        """The current lookahead token."""
        if self._token is None:
            raise RuntimeError("parser has not read a token yet")
        return self._token

    def parse(self) -> float:
        try:
            value = self._compute_expr(1)
        except RecursionError:
            raise self._error(ErrorKind.TOO_DEEP) from None
        if not self._allow_trailing and self.token.type != TokenType.EOF:
            raise self._error(
                ErrorKind.TRAILING_INPUT,
                f"unexpected '{self.token.text}' after expression",
            )
        return value

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _advance(self) -> None:
        self._token = self._lexer.next_token()

    def _error(
        self, kind: ErrorKind, message: str | None = None, tok: Token | None = None
    ) -> ExpressionError:
        if tok is None:
            tok = self.token
        return ExpressionError(kind, message or kind.value, tok.span, self._lexer.source)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def _compute_atom(self) -> float:
        self._advance()
        tok = self.token

        if tok.type == TokenType.LPAREN:
            value = self._compute_expr(1)
            if self.token.type != TokenType.RPAREN:
                raise self._error(ErrorKind.UNMATCHED_PAREN)
            self._advance()
            return value

        if tok.type == TokenType.EOF:
            raise self._error(ErrorKind.UNEXPECTED_END)

        if tok.type != TokenType.NUMBER:
            raise self._error(ErrorKind.UNEXPECTED_TOKEN, f"unexpected token '{tok.text}'")

        # float() turns an over-long digit run into inf
        value = float(tok.text)
        self._advance()
        return value

    def _compute_expr(self, min_precedence: int) -> float:
        lhs = self._compute_atom()

        while True:
            op = self.token
            info = operator_info(op.type)
            if info is None:
                if op.type == TokenType.ILLEGAL:
                    raise self._error(ErrorKind.UNKNOWN_OPERATOR, f"unknown operator '{op.text}'")
                break
            if info.precedence < min_precedence:
                break

            rhs = self._compute_expr(info.next_min_precedence())
            lhs = self._compute_op(op, lhs, rhs)

        return lhs

    def _compute_op(self, op: Token, lhs: float, rhs: float) -> float:
        func = OPERATIONS.get(op.type)
        if func is None:
            raise self._error(ErrorKind.UNKNOWN_OPERATOR, f"unknown operator '{op.text}'", op)
        return func(lhs, rhs)


def parse(source: str, *, allow_trailing: bool = False) -> float:
    """Convenience function: lex and evaluate source, returning its value."""
    return Parser(Lexer(source), allow_trailing=allow_trailing).parse()
