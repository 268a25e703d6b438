"""Error types with formatted source context."""

from __future__ import annotations

from enum import Enum

from climbcalc.tokens import Span


class ErrorKind(Enum):
    UNEXPECTED_END = "unexpected end of expression"
    UNEXPECTED_TOKEN = "unexpected token"
    UNMATCHED_PAREN = "unmatched '('"
    UNKNOWN_OPERATOR = "unknown operator"
    TRAILING_INPUT = "unexpected input after expression"
    TOO_DEEP = "expression is nested too deeply"


def locate_line(source: str, offset: int) -> tuple[str, int]:
    """Return the source line containing offset and the 0-based column in it.

    The line runs from the nearest newline (or buffer edge) before offset to
    the nearest newline (or buffer edge) after it, without a trailing CR.
    """
    offset = max(0, min(offset, len(source)))
    start = source.rfind("\n", 0, offset) + 1
    end = source.find("\n", offset)
    if end == -1:
        end = len(source)
    line = source[start:end]
    if line.endswith("\r"):
        line = line[:-1]
    return line, offset - start


class ExpressionError(Exception):
    """Raised on the first lexing or evaluation error of an expression.

    Carries the error kind and the span of the offending token; the caret
    display is built only when the error is formatted.
    """

    def __init__(self, kind: ErrorKind, message: str, span: Span, source: str) -> None:
        self.kind = kind
        self.message = message
        self.span = span
        self.source = source
        super().__init__(message)

    def __str__(self) -> str:
        return self.format()

    @property
    def column(self) -> int:
        """0-based column of the offending token within its line."""
        return locate_line(self.source, self.span.start.offset)[1]

    def format(self, filename: str | None = None, line: int | None = None) -> str:
        """Render the message, the offending source line and a caret under it.

        With a filename, a ``--> file:line:col`` location is included; line
        overrides the token's own line number when the source was one line
        cut out of a larger file.
        """
        source_line, col = locate_line(self.source, self.span.start.offset)
        parts = [f"error: {self.message}"]
        if filename is not None:
            lineno = line if line is not None else self.span.start.line
            parts.append(f"  --> {filename}:{lineno}:{col + 1}")
        parts.append(source_line)
        parts.append(" " * col + "^")
        return "\n".join(parts)
