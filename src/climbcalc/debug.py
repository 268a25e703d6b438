"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from climbcalc.lexer import Lexer


def dump_tokens(source: str, *, file: TextIO = sys.stderr) -> None:
    """Print every token of source to *file*, one per line."""
    for tok in Lexer(source):
        file.write(f"{{ {tok.text!r}, {tok.type.name} }}\n")
