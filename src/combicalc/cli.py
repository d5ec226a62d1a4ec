"""Command-line driver.

Reads one line (from ``--expression`` or standard input), evaluates it and
prints the integer result on stdout. A failure is printed as one formatted
line on stderr and nothing is written to stdout.

Exit Codes:
    0: Success
    1: Syntax error (including nesting depth exceeded)
    2: Usage error (reported by argparse)
    3: Configuration error (bad option value, oversize input, missing Babel)
    4: Arithmetic fault (division by zero)

Usage:
    echo "2 + 3 * 4" | combicalc
    combicalc --expression "(2+3)*4" --locale de_DE
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from combicalc.calculator import evaluate
from combicalc.constants import MAX_NESTING_DEPTH, MAX_SOURCE_SIZE
from combicalc.core.babel_compat import BabelImportError
from combicalc.diagnostics import CalcArithmeticError, CalcError, CalcSyntaxError
from combicalc.formatting import format_result

__all__ = ["EXIT_ARITHMETIC", "EXIT_CONFIG", "EXIT_OK", "EXIT_SYNTAX", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SYNTAX = 1
EXIT_ARITHMETIC = 4
EXIT_CONFIG = 3


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="combicalc",
        description="Evaluate one line of integer arithmetic (+ - * / and parentheses).",
    )
    parser.add_argument(
        "-e",
        "--expression",
        help="Expression to evaluate instead of reading a line from stdin",
    )
    parser.add_argument(
        "--echo",
        action="store_true",
        help="Print the input line before the result",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject input left over after the expression",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_NESTING_DEPTH,
        metavar="N",
        help=f"Maximum parenthesis nesting (default: {MAX_NESTING_DEPTH})",
    )
    parser.add_argument(
        "--max-size",
        type=int,
        default=MAX_SOURCE_SIZE,
        metavar="CHARS",
        help=f"Maximum input length, 0 for unlimited (default: {MAX_SOURCE_SIZE})",
    )
    parser.add_argument(
        "--locale",
        help="Format the result for a locale, e.g. en_US (requires combicalc[babel])",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging and error hints on stderr",
    )
    return parser


def _read_line(stream: TextIO) -> str:
    line = stream.readline()
    return line.removesuffix("\n").removesuffix("\r")


def _report(error: CalcError, stream: TextIO, *, verbose: bool) -> None:
    """Print the error line, plus the diagnostic hint when verbose."""
    print(error, file=stream)
    if verbose and error.diagnostic is not None and error.diagnostic.hint:
        print(f"hint: {error.diagnostic.hint}", file=stream)


def main(
    argv: list[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run the driver.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])
        stdin: Input stream (default: sys.stdin)
        stdout: Output stream for the result (default: sys.stdout)
        stderr: Output stream for errors (default: sys.stderr)

    Returns:
        Process exit code
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    source = args.expression if args.expression is not None else _read_line(stdin)
    if args.echo:
        print(source, file=stdout)

    try:
        value = evaluate(
            source,
            strict=args.strict,
            max_source_size=args.max_size,
            max_nesting_depth=args.max_depth,
        )
        text = format_result(value, args.locale)
    except CalcSyntaxError as e:
        _report(e, stderr, verbose=args.verbose)
        return EXIT_SYNTAX
    except CalcArithmeticError as e:
        _report(e, stderr, verbose=args.verbose)
        return EXIT_ARITHMETIC
    except (BabelImportError, ValueError) as e:
        logger.debug("Configuration error: %s", e)
        print(f"error: {e}", file=stderr)
        return EXIT_CONFIG

    print(text, file=stdout)
    return EXIT_OK
