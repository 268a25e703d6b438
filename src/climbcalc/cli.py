"""Command-line interface for climbcalc."""

from __future__ import annotations

import argparse
import sys
import tomllib
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from climbcalc.errors import ExpressionError

QUIT_COMMAND = ":quit"
DEFAULT_PROMPT = "> "
CONFIG_NAME = "climbcalc.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    expressions: list[str]
    input_file: Path | None
    prompt: str
    precision: int | None
    allow_trailing: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="climbcalc",
        description="Arithmetic expression evaluator",
    )
    p.add_argument(
        "input",
        nargs="?",
        help="File with one expression per line (default: interactive prompt)",
    )
    p.add_argument(
        "-e",
        "--expr",
        action="append",
        default=[],
        metavar="EXPR",
        help="Evaluate EXPR and exit (repeatable)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument(
        "--prompt",
        default=None,
        help=f"Interactive prompt (default: {DEFAULT_PROMPT!r})",
    )
    p.add_argument(
        "--precision",
        default=None,
        metavar="DIGITS",
        help="Significant digits in results (default: shortest round-trip)",
    )
    p.add_argument(
        "--allow-trailing",
        action="store_const",
        const=True,
        default=None,
        help="Ignore input left over after a complete expression",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    return p


def parse_precision_arg(s: str) -> int:
    """Parse a positive number of significant digits."""
    try:
        value = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid precision (expected an integer): {s}"
        ) from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"invalid precision (must be at least 1): {s}")
    return value


def load_config(config_path: Path | None, base_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else base_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace, base_dir: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, base_dir if base_dir is not None else Path("."))

    section = config.get("climbcalc")
    if not isinstance(section, dict):
        section = {}

    prompt = DEFAULT_PROMPT
    cfg_prompt = section.get("prompt")
    if isinstance(cfg_prompt, str):
        prompt = cfg_prompt
    if args.prompt is not None:
        prompt = args.prompt

    precision: int | None = None
    cfg_precision = section.get("precision")
    if isinstance(cfg_precision, int) and not isinstance(cfg_precision, bool):
        precision = parse_precision_arg(str(cfg_precision))
    if args.precision is not None:
        precision = parse_precision_arg(args.precision)

    allow_trailing = False
    cfg_trailing = section.get("allow_trailing")
    if isinstance(cfg_trailing, bool):
        allow_trailing = cfg_trailing
    if args.allow_trailing is not None:
        allow_trailing = args.allow_trailing

    return CliOptions(
        expressions=list(args.expr),
        input_file=Path(args.input) if args.input else None,
        prompt=prompt,
        precision=precision,
        allow_trailing=allow_trailing,
        debug=args.debug,
    )


def evaluate_line(line: str, options: CliOptions) -> str:
    """Evaluate one line and return the text the shell prints for it.

    Raises ExpressionError when the line is not a valid expression.
    """
    from climbcalc.debug import dump_tokens
    from climbcalc.parser import parse
    from climbcalc.render import render_result

    if options.debug:
        dump_tokens(line, file=sys.stderr)

    value = parse(line, allow_trailing=options.allow_trailing)
    return render_result(value, options.precision)


def run_repl(
    options: CliOptions, stdin: TextIO | None = None, stdout: TextIO | None = None
) -> None:
    """Read-evaluate-print loop. Ends on :quit or end of input."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    while True:
        stdout.write(options.prompt)
        stdout.flush()

        line = stdin.readline()
        if not line:
            break
        line = line.removesuffix("\n")

        if line == QUIT_COMMAND:
            break
        if not line.strip():
            continue

        try:
            print(evaluate_line(line, options), file=stdout)
        except ExpressionError as exc:
            print(exc.format(), file=stdout)


def run_batch(
    lines: Iterable[str],
    options: CliOptions,
    filename: str | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Evaluate each non-blank line. Returns 1 if any line failed, else 0."""
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    status = 0
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            print(evaluate_line(line, options), file=stdout)
        except ExpressionError as exc:
            print(exc.format(filename, lineno if filename is not None else None), file=stderr)
            status = 1
    return status


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    if not options.expressions and options.input_file is None:
        run_repl(options)
        return 0

    status = run_batch(options.expressions, options)

    if options.input_file is not None:
        try:
            text = options.input_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        # read_text already turned \r\n and \r into \n; other separators
        # that splitlines() honours are illegal characters inside a line
        lines = text.split("\n")
        status = max(status, run_batch(lines, options, str(options.input_file)))

    return status
