"""Tests for diagnostics: codes, spans, templates and the exception hierarchy."""

from __future__ import annotations

import pytest

from combicalc.diagnostics import (
    CalcArithmeticError,
    CalcError,
    CalcSyntaxError,
    Diagnostic,
    DiagnosticCode,
    DivisionByZeroError,
    ErrorTemplate,
    NestingDepthError,
    SourceSpan,
)

# ============================================================================
# CODES AND SPANS
# ============================================================================


class TestDiagnosticCode:
    """Code numbering."""

    def test_codes_unique(self) -> None:
        """Every code has its own number."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low"),
        [
            (DiagnosticCode.UNEXPECTED_END_OF_INPUT, 1000),
            (DiagnosticCode.UNSATISFIED_PREDICATE, 1000),
            (DiagnosticCode.EXPECTATION_FAILED, 1000),
            (DiagnosticCode.TRAILING_INPUT, 1000),
            (DiagnosticCode.DIVISION_BY_ZERO, 2000),
            (DiagnosticCode.NESTING_DEPTH_EXCEEDED, 3000),
        ],
    )
    def test_code_ranges(self, code: DiagnosticCode, low: int) -> None:
        """Codes sit in their category's range."""
        assert low <= code.value < low + 1000


class TestSourceSpan:
    """SourceSpan validation."""

    def test_valid(self) -> None:
        """A 0-indexed offset and 1-indexed line/column are accepted."""
        span = SourceSpan(offset=0, line=1, column=1)
        assert (span.offset, span.line, span.column) == (0, 1, 1)

    @pytest.mark.parametrize(
        ("offset", "line", "column", "field"),
        [(-1, 1, 1, "offset"), (0, 0, 1, "line"), (0, 1, 0, "column")],
    )
    def test_invalid(self, offset: int, line: int, column: int, field: str) -> None:
        """Out-of-range fields are rejected by name."""
        with pytest.raises(ValueError, match=f"SourceSpan.{field}"):
            SourceSpan(offset=offset, line=line, column=column)


# ============================================================================
# DIAGNOSTIC FORMATTING
# ============================================================================


class TestDiagnosticFormat:
    """Diagnostic.format_error()."""

    def test_with_found_character(self) -> None:
        """The offending character is appended in single quotes."""
        diagnostic = Diagnostic(
            DiagnosticCode.EXPECTATION_FAILED,
            "not digit",
            SourceSpan(offset=2, line=1, column=3),
            "x",
        )
        assert diagnostic.format_error() == "[line 1, col 3] not digit: 'x'"

    def test_at_end_of_input(self) -> None:
        """No character clause when nothing was found."""
        diagnostic = Diagnostic(
            DiagnosticCode.EXPECTATION_FAILED,
            "not factor",
            SourceSpan(offset=2, line=1, column=3),
        )
        assert diagnostic.format_error() == "[line 1, col 3] not factor"

    def test_without_span(self) -> None:
        """Unpositioned diagnostics format as the bare message."""
        diagnostic = Diagnostic(DiagnosticCode.DIVISION_BY_ZERO, "division by zero: 1 / 0")
        assert diagnostic.format_error() == "division by zero: 1 / 0"
        assert str(diagnostic) == "division by zero: 1 / 0"

    def test_later_line(self) -> None:
        """Line numbers other than 1 are reported."""
        diagnostic = Diagnostic(
            DiagnosticCode.EXPECTATION_FAILED,
            "not digit",
            SourceSpan(offset=7, line=3, column=2),
            "?",
        )
        assert diagnostic.format_error() == "[line 3, col 2] not digit: '?'"


# ============================================================================
# TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """Message text."""

    def test_parse_messages(self) -> None:
        """Parser-level messages are short and fixed."""
        assert ErrorTemplate.end_of_input() == "unexpected end of input"
        assert ErrorTemplate.unsatisfied_predicate() == "unsatisfied predicate"
        assert ErrorTemplate.not_class("digit") == "not digit"
        assert ErrorTemplate.not_char("(") == "not char '('"
        assert ErrorTemplate.not_string("let") == 'not string "let"'
        assert ErrorTemplate.trailing_input() == "unexpected trailing input"

    def test_syntax_error_hint_at_end_of_input(self) -> None:
        """Only end-of-input failures carry a hint."""
        span = SourceSpan(offset=0, line=1, column=1)

        at_end = ErrorTemplate.syntax_error(DiagnosticCode.EXPECTATION_FAILED, "not factor", span, None)
        mid = ErrorTemplate.syntax_error(DiagnosticCode.EXPECTATION_FAILED, "not factor", span, "x")

        assert at_end.hint is not None
        assert mid.hint is None
        assert mid.found == "x"

    def test_division_by_zero(self) -> None:
        """Division fault names the dividend and has no position."""
        diagnostic = ErrorTemplate.division_by_zero(-12)

        assert diagnostic.code is DiagnosticCode.DIVISION_BY_ZERO
        assert diagnostic.message == "division by zero: -12 / 0"
        assert diagnostic.span is None

    def test_nesting_depth_exceeded(self) -> None:
        """Nesting fault names the limit and is positioned."""
        span = SourceSpan(offset=4, line=1, column=5)
        diagnostic = ErrorTemplate.nesting_depth_exceeded(3, span)

        assert diagnostic.code is DiagnosticCode.NESTING_DEPTH_EXCEEDED
        assert diagnostic.format_error() == "[line 1, col 5] nesting depth exceeds maximum (3)"

    def test_source_too_large(self) -> None:
        """Sizes are printed with thousands separators."""
        message = ErrorTemplate.source_too_large(70000, 65536)

        assert "70,000" in message
        assert "65,536" in message


# ============================================================================
# EXCEPTIONS
# ============================================================================


class TestExceptions:
    """Exception hierarchy and payloads."""

    def test_hierarchy(self) -> None:
        """Syntax and arithmetic branches share CalcError."""
        assert issubclass(CalcSyntaxError, CalcError)
        assert issubclass(NestingDepthError, CalcSyntaxError)
        assert issubclass(CalcArithmeticError, CalcError)
        assert issubclass(DivisionByZeroError, CalcArithmeticError)
        assert not issubclass(DivisionByZeroError, CalcSyntaxError)

    def test_from_string(self) -> None:
        """A plain message has no diagnostic."""
        error = CalcError("boom")

        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_from_diagnostic(self) -> None:
        """A diagnostic is kept and formatted into the message."""
        diagnostic = ErrorTemplate.nesting_depth_exceeded(2, SourceSpan(offset=2, line=1, column=3))
        error = NestingDepthError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error) == "[line 1, col 3] nesting depth exceeds maximum (2)"
        assert error.failure is None

    def test_syntax_error_failure_keyword(self) -> None:
        """CalcSyntaxError accepts the failure keyword only."""
        error = CalcSyntaxError("bad", failure=None)

        assert error.failure is None
        with pytest.raises(TypeError):
            CalcSyntaxError("bad", None)  # type: ignore[misc]
