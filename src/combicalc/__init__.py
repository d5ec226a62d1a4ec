"""combicalc - parser combinators and an integer arithmetic evaluator.

A small combinator engine (immutable cursor, backtracking alternation,
repetition, value transformation) and a recursive-descent grammar that
evaluates ``+ - * /`` with parentheses while it parses.

Public API:
    evaluate - Parse and evaluate an arithmetic expression
    parse - Run any parser over a complete input
    format_result - Render a result, optionally locale-aware

Exceptions:
    CalcError - Base exception class
    CalcSyntaxError - Input does not match the grammar
    NestingDepthError - Parentheses nested too deeply
    CalcArithmeticError - Fatal arithmetic fault
    DivisionByZeroError - Division by zero

Submodules:
    combicalc.syntax - Cursor, Parser, combinators, lexical parsers, grammar
    combicalc.diagnostics - Diagnostic codes, templates and exceptions
"""

from .calculator import evaluate, parse
from .diagnostics import (
    CalcArithmeticError,
    CalcError,
    CalcSyntaxError,
    DivisionByZeroError,
    NestingDepthError,
)
from .formatting import format_result

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("combicalc")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CalcArithmeticError",
    "CalcError",
    "CalcSyntaxError",
    "DivisionByZeroError",
    "NestingDepthError",
    "__version__",
    "evaluate",
    "format_result",
    "parse",
]
