"""Parser abstraction and combinator algebra.

A :class:`Parser` wraps a function from an immutable
:class:`~combicalc.syntax.cursor.Cursor` to either a
:class:`~combicalc.syntax.cursor.ParseResult` (value plus advanced cursor) or
a :class:`~combicalc.syntax.cursor.ParseFailure` (message plus the cursor at
the point of failure). Parsers hold no cursor and no per-parse state, so one
parser object can be reused across any number of independent parses.

Failure Channels:
    Recoverable parse failures are RETURNED, never raised. Only
    :func:`or_else` (conditionally) and :func:`attempt` (unconditionally)
    act on them; every other combinator hands them back unchanged.

    Fatal faults (DivisionByZeroError, NestingDepthError) are RAISED, so no
    combinator in this module can mistake them for a backtrackable failure.

Backtracking Policy:
    ``or_else(p1, p2)`` only tries ``p2`` when ``p1`` failed without
    consuming input. Wrap ``p1`` in :func:`attempt` when both branches share
    a prefix.

Operator Sugar:
    a + b   seq2(a, b)        a >> b  then(a, b)
    p * n   repeat(n, p)      a << b  before(a, b)
    a | b   or_else(a, b)     -p      negate(p)
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from combicalc.diagnostics import ErrorTemplate, NestingDepthError
from combicalc.syntax.cursor import Cursor, FailureKind, ParseFailure, ParseResult

__all__ = [
    "Deferred",
    "Forward",
    "ParseOutcome",
    "Parser",
    "any_char",
    "apply_binary",
    "attempt",
    "before",
    "char",
    "fmap",
    "forward",
    "label",
    "many",
    "many1",
    "many1_text",
    "many_text",
    "negate",
    "nested",
    "or_else",
    "reject",
    "repeat",
    "satisfy",
    "seq2",
    "string",
    "then",
]

type ParseOutcome[T] = ParseResult[T] | ParseFailure


class Parser[T]:
    """Deferred computation over a cursor.

    Calling a parser with a cursor runs it. The callable it wraps must be
    pure with respect to the cursor: same cursor in, same outcome out.

    Example:
        >>> p = char("a") + char("b")
        >>> p.parse("abc").value
        'ab'
        >>> p.parse("ax").format_error()
        "[line 1, col 2] not char 'b': 'x'"
    """

    __slots__ = ("_run", "name")

    def __init__(self, run: Callable[[Cursor], ParseOutcome[T]], name: str = "parser") -> None:
        self._run = run
        self.name = name

    def __call__(self, cursor: Cursor) -> ParseOutcome[T]:
        return self._run(cursor)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"

    def parse(self, source: str) -> ParseOutcome[T]:
        """Run against a fresh cursor at the start of ``source``."""
        return self(Cursor(source))

    def map[U](self, function: Callable[[T], U]) -> Parser[U]:
        """Method form of :func:`fmap`."""
        return fmap(function, self)

    def __add__(self, other: Parser[Any]) -> Parser[str]:
        return seq2(self, other)

    def __mul__(self, count: int) -> Parser[str]:
        return repeat(count, self)

    __rmul__ = __mul__

    def __rshift__[U](self, other: Parser[U]) -> Parser[U]:
        return then(self, other)

    def __lshift__(self, other: Parser[Any]) -> Parser[T]:
        return before(self, other)

    def __or__(self, other: Parser[T]) -> Parser[T]:
        return or_else(self, other)

    def __neg__(self) -> Parser[T]:
        return negate(self)


class Forward[T](Parser[T]):
    """Indirection cell for mutually recursive rules.

    Create the cell first, reference it from other rules, then bind it once
    with :meth:`define`.

    Example:
        >>> inner = forward("inner")
        >>> outer = char("[") >> inner << char("]")
        >>> inner.define(char("x") | outer)
        >>> outer.parse("[[x]]").value
        'x'
    """

    __slots__ = ("_target",)

    def __init__(self, name: str = "forward") -> None:
        super().__init__(self._dispatch, name)
        self._target: Parser[T] | None = None

    def define(self, parser: Parser[T]) -> None:
        """Bind the cell to its real definition.

        Raises:
            RuntimeError: If the cell is already defined
        """
        if self._target is not None:
            msg = f"Forward parser '{self.name}' is already defined"
            raise RuntimeError(msg)
        self._target = parser

    def _dispatch(self, cursor: Cursor) -> ParseOutcome[T]:
        if self._target is None:
            msg = f"Forward parser '{self.name}' used before define()"
            raise RuntimeError(msg)
        return self._target(cursor)


def forward(name: str = "forward") -> Forward[Any]:
    """Create an unbound :class:`Forward` cell."""
    return Forward(name)


@dataclass(frozen=True, slots=True)
class Deferred[L, R, T]:
    """A binary function with its right operand already parsed.

    Produced by :func:`apply_binary`. Applying it to a left-hand accumulator
    finishes the computation, so a sequence of these is a left fold waiting
    to happen.

    Example:
        >>> step = Deferred(operator.sub, 3)
        >>> step.apply(8)
        5
    """

    function: Callable[[L, R], T]
    operand: R

    def apply(self, accumulator: L) -> T:
        """Compute ``function(accumulator, operand)``."""
        return self.function(accumulator, self.operand)

    __call__ = apply


# =============================================================================
# Primitives
# =============================================================================


def satisfy(predicate: Callable[[str], bool], name: str = "satisfy") -> Parser[str]:
    """Consume one character accepted by ``predicate``.

    The only parser that reads the cursor directly. Fails without advancing
    at end of input or when the predicate rejects the character.
    """

    def run(cursor: Cursor) -> ParseOutcome[str]:
        ch = cursor.peek()
        if ch is None:
            return cursor.fail(FailureKind.END_OF_INPUT, ErrorTemplate.end_of_input())
        if not predicate(ch):
            return cursor.fail(
                FailureKind.UNSATISFIED_PREDICATE, ErrorTemplate.unsatisfied_predicate()
            )
        return ParseResult(ch, cursor.advance())

    return Parser(run, name)


def label[T](parser: Parser[T], message: str) -> Parser[T]:
    """Replace the message of any failure of ``parser``, keeping its position."""

    def run(cursor: Cursor) -> ParseOutcome[T]:
        outcome = parser(cursor)
        if isinstance(outcome, ParseFailure):
            return outcome.relabel(message)
        return outcome

    return Parser(run, parser.name)


def reject(message: str) -> Parser[Any]:
    """Fail unconditionally with ``message`` at the current position."""

    def run(cursor: Cursor) -> ParseFailure:
        return cursor.fail(FailureKind.EXPECTATION, message)

    return Parser(run, "reject")


any_char: Parser[str] = satisfy(lambda _: True, "any_char")


def char(expected: str) -> Parser[str]:
    """Match one literal character."""
    parser = or_else(
        satisfy(lambda ch: ch == expected, repr(expected)),
        reject(ErrorTemplate.not_char(expected)),
    )
    parser.name = repr(expected)
    return parser


def string(text: str) -> Parser[str]:
    """Match literal text character by character.

    A mismatch after the first character fails having consumed input, so
    ``or_else`` will not try another branch unless this is wrapped in
    :func:`attempt`.
    """
    steps = tuple(label(char(ch), ErrorTemplate.not_string(text)) for ch in text)

    def run(cursor: Cursor) -> ParseOutcome[str]:
        for step in steps:
            outcome = step(cursor)
            if isinstance(outcome, ParseFailure):
                return outcome
            cursor = outcome.cursor
        return ParseResult(text, cursor)

    return Parser(run, repr(text))


# =============================================================================
# Sequencing
# =============================================================================


def seq2(first: Parser[Any], second: Parser[Any]) -> Parser[str]:
    """Run both parsers in order and concatenate their textual results."""

    def run(cursor: Cursor) -> ParseOutcome[str]:
        left = first(cursor)
        if isinstance(left, ParseFailure):
            return left
        right = second(left.cursor)
        if isinstance(right, ParseFailure):
            return right
        return ParseResult(f"{left.value}{right.value}", right.cursor)

    return Parser(run, f"{first.name} + {second.name}")


def repeat(count: int, parser: Parser[Any]) -> Parser[str]:
    """Run ``parser`` exactly ``count`` times, concatenating the results.

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        msg = f"repeat count must be >= 0, got {count}"
        raise ValueError(msg)

    def run(cursor: Cursor) -> ParseOutcome[str]:
        parts: list[str] = []
        for _ in range(count):
            outcome = parser(cursor)
            if isinstance(outcome, ParseFailure):
                return outcome
            parts.append(str(outcome.value))
            cursor = outcome.cursor
        return ParseResult("".join(parts), cursor)

    return Parser(run, f"{parser.name} * {count}")


def then[A, B](first: Parser[A], second: Parser[B]) -> Parser[B]:
    """Run both, keep the result of ``second``."""

    def run(cursor: Cursor) -> ParseOutcome[B]:
        left = first(cursor)
        if isinstance(left, ParseFailure):
            return left
        return second(left.cursor)

    return Parser(run, f"{first.name} >> {second.name}")


def before[A, B](first: Parser[A], second: Parser[B]) -> Parser[A]:
    """Run both, keep the result of ``first``."""

    def run(cursor: Cursor) -> ParseOutcome[A]:
        left = first(cursor)
        if isinstance(left, ParseFailure):
            return left
        right = second(left.cursor)
        if isinstance(right, ParseFailure):
            return right
        return ParseResult(left.value, right.cursor)

    return Parser(run, f"{first.name} << {second.name}")


# =============================================================================
# Transformation
# =============================================================================


def fmap[T, U](function: Callable[[T], U], parser: Parser[T]) -> Parser[U]:
    """Apply a pure function to the result of ``parser``; failures pass through."""

    def run(cursor: Cursor) -> ParseOutcome[U]:
        outcome = parser(cursor)
        if isinstance(outcome, ParseFailure):
            return outcome
        return ParseResult(function(outcome.value), outcome.cursor)

    return Parser(run, parser.name)


def apply_binary[L, R, T](
    function: Callable[[L, R], T], parser: Parser[R]
) -> Parser[Deferred[L, R, T]]:
    """Parse a right operand and return it closed into a :class:`Deferred` step.

    ``function`` is not called here; it runs when the step is applied to an
    accumulator.
    """
    return fmap(lambda operand: Deferred(function, operand), parser)


def negate[T](parser: Parser[T]) -> Parser[T]:
    """Arithmetic negation of a numeric parser's result."""
    return fmap(operator.neg, parser)


# =============================================================================
# Repetition
# =============================================================================


def many[T](parser: Parser[T], *, commit: bool = False) -> Parser[tuple[T, ...]]:
    """Zero or more repetitions, collected in order.

    Each attempt starts from the cursor the previous success left behind.
    The first failure ends the loop and the cursor is restored to that
    checkpoint, discarding whatever the failed attempt consumed, so this
    never fails.

    With ``commit=True`` a failure that consumed input is returned instead:
    once an iteration has moved past its first character it is not an
    alternative to stopping any more.

    Raises:
        RuntimeError: If ``parser`` succeeds without consuming input
    """

    def run(cursor: Cursor) -> ParseOutcome[tuple[T, ...]]:
        values: list[T] = []
        while True:
            outcome = parser(cursor)
            if isinstance(outcome, ParseFailure):
                if commit and outcome.consumed_from(cursor):
                    return outcome
                return ParseResult(tuple(values), cursor)
            if outcome.cursor.same_position(cursor):
                msg = f"many() applied to parser '{parser.name}' that accepts empty input"
                raise RuntimeError(msg)
            values.append(outcome.value)
            cursor = outcome.cursor

    return Parser(run, f"many({parser.name})")


def many_text(parser: Parser[str], *, commit: bool = False) -> Parser[str]:
    """:func:`many` over text fragments, concatenated."""
    return fmap("".join, many(parser, commit=commit))


def many1[T](parser: Parser[T], *, commit: bool = False) -> Parser[tuple[T, ...]]:
    """One or more repetitions; fails exactly when the first attempt fails."""
    rest = many(parser, commit=commit)

    def run(cursor: Cursor) -> ParseOutcome[tuple[T, ...]]:
        head = parser(cursor)
        if isinstance(head, ParseFailure):
            return head
        tail = rest(head.cursor)
        if isinstance(tail, ParseFailure):
            return tail
        return ParseResult((head.value, *tail.value), tail.cursor)

    return Parser(run, f"many1({parser.name})")


def many1_text(parser: Parser[str], *, commit: bool = False) -> Parser[str]:
    """:func:`many1` over text fragments, concatenated."""
    return fmap("".join, many1(parser, commit=commit))


# =============================================================================
# Alternation and backtracking
# =============================================================================


def or_else[T](first: Parser[T], second: Parser[T]) -> Parser[T]:
    """Try ``first``; if it fails without consuming input, run ``second``.

    A failure of ``first`` after consuming input is returned as is and
    ``second`` never runs.
    """

    def run(cursor: Cursor) -> ParseOutcome[T]:
        outcome = first(cursor)
        if isinstance(outcome, ParseFailure) and not outcome.consumed_from(cursor):
            return second(cursor)
        return outcome

    return Parser(run, f"{first.name} | {second.name}")


def attempt[T](parser: Parser[T]) -> Parser[T]:
    """On failure, rewind to where ``parser`` started.

    The failure still reports the position where matching broke down, but
    it no longer counts as having consumed input.
    """

    def run(cursor: Cursor) -> ParseOutcome[T]:
        outcome = parser(cursor)
        if isinstance(outcome, ParseFailure):
            return replace(outcome, checkpoint=cursor)
        return outcome

    return Parser(run, f"attempt({parser.name})")


# =============================================================================
# Nesting
# =============================================================================


def nested[T](parser: Parser[T], max_depth: int) -> Parser[T]:
    """Run ``parser`` one nesting level deeper.

    Raises:
        NestingDepthError: If the cursor is already ``max_depth`` levels deep
    """

    def run(cursor: Cursor) -> ParseOutcome[T]:
        if cursor.depth >= max_depth:
            raise NestingDepthError(
                ErrorTemplate.nesting_depth_exceeded(max_depth, cursor.span())
            )
        outcome = parser(cursor.with_depth(cursor.depth + 1))
        if isinstance(outcome, ParseFailure):
            return outcome
        return ParseResult(outcome.value, outcome.cursor.with_depth(cursor.depth))

    return Parser(run, f"nested({parser.name})")
