"""Character classes and the lexical parsers built from them.

Every class is ASCII-only: ``str.isdigit()`` and friends accept Unicode
digits and letters that ``int()`` and the grammar do not expect.

Each named parser is ``satisfy(predicate) | reject("not <name>")``, so a
rejected character reports which class was expected.
"""

from collections.abc import Callable

from combicalc.diagnostics import ErrorTemplate
from combicalc.syntax.combinators import Parser, many_text, or_else, reject, satisfy

__all__ = [
    "alpha",
    "alpha_num",
    "digit",
    "is_alpha",
    "is_alpha_num",
    "is_digit",
    "is_letter",
    "is_lower",
    "is_space",
    "is_upper",
    "letter",
    "lower",
    "space",
    "spaces",
    "upper",
]

_ASCII_DIGITS: frozenset[str] = frozenset("0123456789")
_ASCII_UPPER: frozenset[str] = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_LOWER: frozenset[str] = frozenset("abcdefghijklmnopqrstuvwxyz")

# Horizontal space only; a newline is not a space for this grammar.
_INLINE_SPACE: frozenset[str] = frozenset(" \t")


def is_digit(ch: str) -> bool:
    return ch in _ASCII_DIGITS


def is_upper(ch: str) -> bool:
    return ch in _ASCII_UPPER


def is_lower(ch: str) -> bool:
    return ch in _ASCII_LOWER


def is_alpha(ch: str) -> bool:
    return is_upper(ch) or is_lower(ch)


def is_alpha_num(ch: str) -> bool:
    return is_alpha(ch) or is_digit(ch)


def is_letter(ch: str) -> bool:
    """Identifier letter: alpha or underscore."""
    return is_alpha(ch) or ch == "_"


def is_space(ch: str) -> bool:
    return ch in _INLINE_SPACE


def _named(predicate: Callable[[str], bool], name: str) -> Parser[str]:
    parser = or_else(satisfy(predicate, name), reject(ErrorTemplate.not_class(name)))
    parser.name = name
    return parser


digit = _named(is_digit, "digit")
upper = _named(is_upper, "upper")
lower = _named(is_lower, "lower")
alpha = _named(is_alpha, "alpha")
alpha_num = _named(is_alpha_num, "alphaNum")
letter = _named(is_letter, "letter")
space = _named(is_space, "space")

spaces = many_text(space)
