"""Result formatting for display."""

from __future__ import annotations

import math


def format_value(value: float, precision: int | None = None) -> str:
    """Format value for display.

    Without a precision the shortest round-trip representation is used, with
    integral values printed without a decimal point. With a precision, the
    ``%g`` general format with that many significant digits is used.
    """
    if precision is not None:
        return f"{value:.{precision}g}"

    if math.isfinite(value) and value.is_integer():
        text = repr(value)
        # Large integral values are already in exponent form, e.g. 1e+16
        if text.endswith(".0"):
            return text[:-2]
        return text
    return repr(value)


def render_result(value: float, precision: int | None = None) -> str:
    """Render a successful evaluation the way the shell prints it."""
    return f" = {format_value(value, precision)}"
