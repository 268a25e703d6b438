"""climbcalc arithmetic expression evaluator."""

from __future__ import annotations

__version__ = "0.1.0"


def evaluate(source: str, *, allow_trailing: bool = False) -> float:
    """Lex and evaluate an arithmetic expression, returning its value."""
    from climbcalc.parser import parse

    return parse(source, allow_trailing=allow_trailing)
