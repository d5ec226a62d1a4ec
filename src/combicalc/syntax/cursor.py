"""Immutable cursor infrastructure for combinator parsing.

Implements the immutable cursor pattern: a cursor is a value, so saving a
backtracking checkpoint is keeping a reference and restoring it is using
that reference again. Nothing ever mutates the source text.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor
    - Line:column tracked incrementally, so failures report in O(1)

Line Ending Support:
    ``\\n`` is the only line delimiter. Consuming it moves to column 1 of
    the next line.
"""

from dataclasses import dataclass, field, replace
from enum import StrEnum

from combicalc.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate, SourceSpan

__all__ = ["Cursor", "FailureKind", "ParseFailure", "ParseResult"]


def _line_column(source: str, pos: int) -> tuple[int, int]:
    line = source.count("\n", 0, pos) + 1
    last_newline = source.rfind("\n", 0, pos)
    column = pos - last_newline if last_newline >= 0 else pos + 1
    return line, column


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Two cursors compare equal when they point at the same offset of the same
    source; line, column and nesting depth are derived bookkeeping and take
    no part in equality.

    Example:
        >>> cursor = Cursor("1+2")
        >>> cursor.current
        '1'
        >>> cursor.advance().current
        '+'
        >>> cursor.current  # Original unchanged (immutability)
        '1'
    """

    source: str
    pos: int = 0
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)
    depth: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        """Reject positions outside the source and derive line/column.

        A cursor built with only an offset (line and column left at their
        defaults) gets the line and column of that offset. No position past
        the start can legitimately be line 1, column 1.
        """
        if not 0 <= self.pos <= len(self.source):
            msg = f"Cursor position {self.pos} outside source of length {len(self.source)}"
            raise ValueError(msg)
        if self.pos > 0 and self.line == 1 and self.column == 1:
            line, column = _line_column(self.source, self.pos)
            object.__setattr__(self, "line", line)
            object.__setattr__(self, "column", column)

    @classmethod
    def at(cls, source: str, pos: int) -> "Cursor":
        """Create a cursor at an arbitrary offset with line/column computed.

        Example:
            >>> c = Cursor.at("ab\\ncd", 4)
            >>> (c.line, c.column)
            (2, 2)
        """
        return cls(source, pos, *_line_column(source, pos))

    @property
    def is_eof(self) -> bool:
        """True when every character has been consumed."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            raise EOFError(ErrorTemplate.end_of_input())
        return self.source[self.pos]

    def peek(self) -> str | None:
        """Return the next character without advancing, None at end of input."""
        if self.is_eof:
            return None
        return self.source[self.pos]

    @property
    def remaining(self) -> str:
        """Unconsumed part of the source."""
        return self.source[self.pos :]

    def advance(self) -> "Cursor":
        """Return new cursor past the current character.

        Consuming a newline moves to column 1 of the next line.

        Raises:
            EOFError: If at end of input
        """
        if self.current == "\n":
            return replace(self, pos=self.pos + 1, line=self.line + 1, column=1)
        return replace(self, pos=self.pos + 1, column=self.column + 1)

    def same_position(self, other: "Cursor") -> bool:
        """True iff both cursors point at the same offset of the same source.

        Used to decide whether a failed sub-parse consumed input.
        """
        return self.pos == other.pos and self.source is other.source

    def with_depth(self, depth: int) -> "Cursor":
        """Return the same position carrying a different nesting depth."""
        return replace(self, depth=depth)

    def span(self) -> SourceSpan:
        """Source location of this cursor."""
        return SourceSpan(offset=self.pos, line=self.line, column=self.column)

    def fail(self, kind: "FailureKind", message: str) -> "ParseFailure":
        """Build a failure anchored at this position."""
        return ParseFailure(kind, message, self)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value
    """

    value: T
    cursor: Cursor


class FailureKind(StrEnum):
    """Recoverable parse failure categories.

    END_OF_INPUT: A primitive looked past the end of the buffer
    UNSATISFIED_PREDICATE: A raw character test rejected the next character
    EXPECTATION: A named expectation ("not digit", "not char '('") was unmet
    """

    END_OF_INPUT = "end-of-input"
    UNSATISFIED_PREDICATE = "unsatisfied-predicate"
    EXPECTATION = "expectation"

    @property
    def code(self) -> DiagnosticCode:
        """Diagnostic code reported for this kind."""
        return _KIND_CODES[self]


_KIND_CODES: dict[FailureKind, DiagnosticCode] = {
    FailureKind.END_OF_INPUT: DiagnosticCode.UNEXPECTED_END_OF_INPUT,
    FailureKind.UNSATISFIED_PREDICATE: DiagnosticCode.UNSATISFIED_PREDICATE,
    FailureKind.EXPECTATION: DiagnosticCode.EXPECTATION_FAILED,
}


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Recoverable parse failure with location.

    ``cursor`` is the position at the moment of failure and is what gets
    reported. ``checkpoint`` is where the input stands after the failure;
    it equals ``cursor`` unless a backtracking combinator rewound it.
    Comparing it with the cursor a parser started from tells whether input
    was consumed.

    Example:
        >>> failure = Cursor("1+x").advance().advance().fail(FailureKind.EXPECTATION, "not digit")
        >>> failure.format_error()
        "[line 1, col 3] not digit: 'x'"
    """

    kind: FailureKind
    message: str
    cursor: Cursor
    checkpoint: Cursor | None = None

    @property
    def position(self) -> Cursor:
        """Cursor the input is left at after this failure."""
        return self.checkpoint if self.checkpoint is not None else self.cursor

    @property
    def found(self) -> str | None:
        """Character at the failure position, None at end of input."""
        return self.cursor.peek()

    def consumed_from(self, start: Cursor) -> bool:
        """True if the failing parser advanced past ``start`` before failing."""
        return not self.position.same_position(start)

    def relabel(self, message: str) -> "ParseFailure":
        """Same position, new name for the unmet expectation."""
        return replace(self, kind=FailureKind.EXPECTATION, message=message)

    def to_diagnostic(self) -> Diagnostic:
        """Convert to a structured diagnostic."""
        return ErrorTemplate.syntax_error(
            self.kind.code, self.message, self.cursor.span(), self.found
        )

    def format_error(self) -> str:
        """Format as ``[line L, col C] message: 'c'`` (char omitted at EOF)."""
        return self.to_diagnostic().format_error()
