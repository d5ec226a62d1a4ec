"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Syntax errors (parse failures surfaced to callers)
        2000-2999: Arithmetic faults (fatal, never backtracked)
        3000-3999: Limit errors (input size, nesting depth)
    """

    # Syntax errors (1000-1999)
    UNEXPECTED_END_OF_INPUT = 1001
    UNSATISFIED_PREDICATE = 1002
    EXPECTATION_FAILED = 1003
    TRAILING_INPUT = 1004

    # Arithmetic faults (2000-2999)
    DIVISION_BY_ZERO = 2001

    # Limit errors (3000-3999)
    NESTING_DEPTH_EXCEEDED = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Attributes:
        offset: Character offset into the input (0-indexed)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    offset: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If offset is negative, or line/column is less than 1.
        """
        if self.offset < 0:
            msg = f"SourceSpan.offset must be >= 0, got {self.offset}"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for faults without a position)
        found: Offending character, None at end of input or when not applicable
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    found: str | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic as a single line.

        Positioned diagnostics use the ``[line L, col C] message: 'c'`` form;
        the trailing character clause is omitted at end of input.

        Example:
            >>> span = SourceSpan(offset=2, line=1, column=3)
            >>> Diagnostic(DiagnosticCode.EXPECTATION_FAILED, "not digit", span, "x").format_error()
            "[line 1, col 3] not digit: 'x'"
        """
        if self.span is None:
            return self.message
        text = f"[line {self.span.line}, col {self.span.column}] {self.message}"
        if self.found is not None:
            text += f": '{self.found}'"
        return text
