"""Combinator parsing engine and the arithmetic grammar built on it.

Python 3.13+.
"""

from .combinators import (
    Deferred,
    Forward,
    ParseOutcome,
    Parser,
    any_char,
    apply_binary,
    attempt,
    before,
    char,
    fmap,
    forward,
    label,
    many,
    many1,
    many1_text,
    many_text,
    negate,
    nested,
    or_else,
    reject,
    repeat,
    satisfy,
    seq2,
    string,
    then,
)
from .cursor import Cursor, FailureKind, ParseFailure, ParseResult
from .grammar import Grammar, Operator, build_grammar, expr, factor, fold_left, number, term

__all__ = [
    "Cursor",
    "Deferred",
    "FailureKind",
    "Forward",
    "Grammar",
    "Operator",
    "ParseFailure",
    "ParseOutcome",
    "ParseResult",
    "Parser",
    "any_char",
    "apply_binary",
    "attempt",
    "before",
    "build_grammar",
    "char",
    "expr",
    "factor",
    "fmap",
    "fold_left",
    "forward",
    "label",
    "many",
    "many1",
    "many1_text",
    "many_text",
    "negate",
    "nested",
    "number",
    "or_else",
    "reject",
    "repeat",
    "satisfy",
    "seq2",
    "string",
    "term",
    "then",
]
