"""combicalc exception hierarchy with structured diagnostics.

Parse failures travel through the combinators as ordinary return values
(:class:`~combicalc.syntax.cursor.ParseFailure`). The exceptions below are
what callers of the public API see, plus the fatal channels that no
combinator is allowed to recover from.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from combicalc.syntax.cursor import ParseFailure

__all__ = [
    "CalcArithmeticError",
    "CalcError",
    "CalcSyntaxError",
    "DivisionByZeroError",
    "NestingDepthError",
]


class CalcError(Exception):
    """Base exception for all combicalc errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CalcError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CalcSyntaxError(CalcError):
    """Input did not match the grammar.

    Raised by the public entry points when the top-level parser returns a
    failure. The original failure value is kept for inspection.

    Attributes:
        failure: The ParseFailure the parser returned (None for limit errors)
    """

    def __init__(
        self, message: str | Diagnostic, *, failure: ParseFailure | None = None
    ) -> None:
        super().__init__(message)
        self.failure = failure


class NestingDepthError(CalcSyntaxError):
    """Parentheses nested deeper than the configured limit.

    Raised from inside the parser, so it bypasses every alternation and
    backtracking combinator and aborts the whole parse.
    """


class CalcArithmeticError(CalcError):
    """Fatal arithmetic fault during evaluation.

    Never converted into a parse failure.
    """


class DivisionByZeroError(CalcArithmeticError):
    """Right operand of a division step evaluated to zero.

    Example:
        "4/0" -> DivisionByZeroError
    """
