"""Diagnostic system for combicalc errors.

Provides structured error diagnostics with codes, spans and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    CalcArithmeticError,
    CalcError,
    CalcSyntaxError,
    DivisionByZeroError,
    NestingDepthError,
)
from .templates import ErrorTemplate

__all__ = [
    "CalcArithmeticError",
    "CalcError",
    "CalcSyntaxError",
    "Diagnostic",
    "DiagnosticCode",
    "DivisionByZeroError",
    "ErrorTemplate",
    "NestingDepthError",
    "SourceSpan",
]
