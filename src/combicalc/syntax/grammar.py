"""Arithmetic grammar evaluated while it is parsed.

Grammar::

    number = digit, {digit} ;
    factor = spaces, ( "(" expr ")" | number ), spaces ;
    term   = factor, { ("*" factor | "/" factor) } ;
    expr   = term,   { ("+" term   | "-" term  ) } ;

No tree is built. ``term`` and ``expr`` parse a seed operand followed by a
list of :class:`~combicalc.syntax.combinators.Deferred` steps (an operator
with its right operand already parsed) and fold the steps over the seed
from left to right. The accumulator is always the left operand, which keeps
``-`` and ``/`` left-associative.

Whitespace:
    Only ``factor`` skips horizontal space, before and after. Operators and
    parentheses have no whitespace handling of their own; space after an
    operator is absorbed by the next factor's leading ``spaces``.

Recursion:
    ``factor`` refers to ``expr`` for parenthesised sub-expressions. The
    cycle is closed with a :class:`~combicalc.syntax.combinators.Forward`
    cell for ``factor`` that is bound after ``term`` and ``expr`` exist.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from functools import reduce

from combicalc.constants import MAX_NESTING_DEPTH
from combicalc.core.depth import depth_clamp
from combicalc.diagnostics import DivisionByZeroError, ErrorTemplate
from combicalc.syntax.combinators import (
    Deferred,
    Parser,
    ParseOutcome,
    apply_binary,
    char,
    forward,
    many,
    many1_text,
    nested,
    reject,
)
from combicalc.syntax.cursor import Cursor, ParseFailure, ParseResult
from combicalc.syntax.lexical import digit, spaces

__all__ = [
    "Grammar",
    "Operator",
    "build_grammar",
    "expr",
    "factor",
    "fold_left",
    "number",
    "term",
]


class Operator(StrEnum):
    """Binary operators of the grammar, callable as ``op(left, right)``."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    def __call__(self, left: int, right: int) -> int:
        match self:
            case Operator.ADD:
                return left + right
            case Operator.SUBTRACT:
                return left - right
            case Operator.MULTIPLY:
                return left * right
            case Operator.DIVIDE:
                return _truncating_divide(left, right)


def _truncating_divide(left: int, right: int) -> int:
    """Integer division rounding toward zero.

    Raises:
        DivisionByZeroError: If right is zero
    """
    if right == 0:
        raise DivisionByZeroError(ErrorTemplate.division_by_zero(left))
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def fold_left[T](
    seed: Parser[T], steps: Parser[tuple[Callable[[T], T], ...]]
) -> Parser[T]:
    """Parse a seed value and a list of steps, then apply the steps in order.

    Steps run only after both parsers succeeded, so a fault raised by a
    step (division by zero) never surfaces halfway through parsing.

    Example:
        >>> p = fold_left(number, many(char("-") >> apply_binary(Operator.SUBTRACT, number)))
        >>> p.parse("8-3-2").value
        3
    """

    def run(cursor: Cursor) -> ParseOutcome[T]:
        initial = seed(cursor)
        if isinstance(initial, ParseFailure):
            return initial
        pending = steps(initial.cursor)
        if isinstance(pending, ParseFailure):
            return pending
        value = reduce(lambda accumulator, step: step(accumulator), pending.value, initial.value)
        return ParseResult(value, pending.cursor)

    return Parser(run, f"fold({seed.name})")


def _step(symbol: Operator, operand: Parser[int]) -> Parser[Deferred[int, int, int]]:
    return char(symbol.value) >> apply_binary(symbol, operand)


@dataclass(frozen=True, slots=True)
class Grammar:
    """The four grammar rules built together.

    Attributes:
        number: One or more digits as a base-10 integer
        factor: Parenthesised expression or number, with surrounding space
        term: Factors joined by ``*`` and ``/``
        expr: Terms joined by ``+`` and ``-``
        max_nesting_depth: Parenthesis nesting limit after clamping
    """

    number: Parser[int]
    factor: Parser[int]
    term: Parser[int]
    expr: Parser[int]
    max_nesting_depth: int


def build_grammar(max_nesting_depth: int = MAX_NESTING_DEPTH) -> Grammar:
    """Build an independent set of grammar rules.

    Args:
        max_nesting_depth: Maximum parenthesis nesting. Clamped against the
            interpreter recursion limit.

    Returns:
        Grammar bundle; every rule is reusable across parses.
    """
    depth = depth_clamp(max_nesting_depth)

    number_rule = many1_text(digit).map(int)
    number_rule.name = "number"

    factor_cell = forward("factor")

    term_rule = fold_left(
        factor_cell,
        many(
            _step(Operator.MULTIPLY, factor_cell) | _step(Operator.DIVIDE, factor_cell),
            commit=True,
        ),
    )
    term_rule.name = "term"

    expr_rule = fold_left(
        term_rule,
        many(
            _step(Operator.ADD, term_rule) | _step(Operator.SUBTRACT, term_rule),
            commit=True,
        ),
    )
    expr_rule.name = "expr"

    parenthesized = char("(") >> nested(expr_rule << char(")"), depth)
    factor_cell.define(
        spaces
        >> (parenthesized | number_rule | reject(ErrorTemplate.not_class("factor")))
        << spaces
    )

    return Grammar(
        number=number_rule,
        factor=factor_cell,
        term=term_rule,
        expr=expr_rule,
        max_nesting_depth=depth,
    )


_DEFAULT_GRAMMAR = build_grammar()

number = _DEFAULT_GRAMMAR.number
factor = _DEFAULT_GRAMMAR.factor
term = _DEFAULT_GRAMMAR.term
expr = _DEFAULT_GRAMMAR.expr
