"""Entry points: run a parser over a whole input and report failures.

:func:`parse` is the general form (any parser, any value type).
:func:`evaluate` runs the arithmetic grammar with input-size and nesting
limits and, optionally, rejects unconsumed trailing input.

Parse failures are converted into :class:`~combicalc.diagnostics.CalcSyntaxError`
here, at the boundary. Arithmetic faults and nesting errors propagate from
inside the parser unchanged.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from combicalc.constants import MAX_NESTING_DEPTH, MAX_SOURCE_SIZE
from combicalc.diagnostics import CalcSyntaxError, DiagnosticCode, ErrorTemplate
from combicalc.syntax.combinators import Parser
from combicalc.syntax.cursor import Cursor, FailureKind, ParseFailure, ParseResult
from combicalc.syntax.grammar import Grammar, build_grammar

__all__ = ["evaluate", "parse", "parse_partial"]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _grammar(max_nesting_depth: int) -> Grammar:
    return build_grammar(max_nesting_depth)


def parse_partial[T](parser: Parser[T], source: str) -> ParseResult[T]:
    """Run ``parser`` from the start of ``source``; leftover input is allowed.

    Returns:
        The result, whose cursor shows how much input was consumed

    Raises:
        CalcSyntaxError: If the parser fails
    """
    outcome = parser(Cursor(source))
    if isinstance(outcome, ParseFailure):
        raise CalcSyntaxError(outcome.to_diagnostic(), failure=outcome)
    return outcome


def parse[T](parser: Parser[T], source: str, *, strict: bool = False) -> T:
    """Run ``parser`` over ``source`` and return its value.

    Args:
        parser: Any parser
        source: Complete input text
        strict: Also fail if input remains after the parser stops

    Raises:
        CalcSyntaxError: If the parser fails, or strict and input remains
    """
    result = parse_partial(parser, source)
    if strict and not result.cursor.is_eof:
        failure = result.cursor.fail(FailureKind.EXPECTATION, ErrorTemplate.trailing_input())
        diagnostic = ErrorTemplate.syntax_error(
            DiagnosticCode.TRAILING_INPUT, failure.message, failure.cursor.span(), failure.found
        )
        raise CalcSyntaxError(diagnostic, failure=failure)
    return result.value


def evaluate(
    source: str,
    *,
    strict: bool = False,
    max_source_size: int | None = None,
    max_nesting_depth: int | None = None,
) -> int:
    """Parse and evaluate an arithmetic expression.

    Args:
        source: Expression text, e.g. ``"2+3*4"``
        strict: Reject input left over after the expression
        max_source_size: Maximum input length (default: MAX_SOURCE_SIZE).
            0 disables the check.
        max_nesting_depth: Maximum parenthesis nesting (default: MAX_NESTING_DEPTH)

    Returns:
        Integer value of the expression

    Raises:
        ValueError: If source exceeds max_source_size
        CalcSyntaxError: If the input does not match the grammar
        NestingDepthError: If parentheses nest too deeply
        DivisionByZeroError: If a division has a zero right operand

    Example:
        >>> evaluate("2+3*4")
        14
        >>> evaluate("8/4/2")
        1
    """
    size_limit = MAX_SOURCE_SIZE if max_source_size is None else max_source_size
    if size_limit > 0 and len(source) > size_limit:
        raise ValueError(ErrorTemplate.source_too_large(len(source), size_limit))

    grammar = _grammar(MAX_NESTING_DEPTH if max_nesting_depth is None else max_nesting_depth)
    logger.debug("Evaluating %d characters (strict=%s)", len(source), strict)
    value = parse(grammar.expr, source, strict=strict)
    logger.debug("Evaluated to %d", value)
    return value
