"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Parser-level messages ("not digit", "not char '('") are short because
    they are embedded in the positioned ``[line L, col C]`` format.
    """

    # =========================================================================
    # PARSE FAILURE MESSAGES
    # =========================================================================

    @staticmethod
    def end_of_input() -> str:
        """Message for a peek past the end of the buffer."""
        return "unexpected end of input"

    @staticmethod
    def unsatisfied_predicate() -> str:
        """Message for a character rejected by a raw predicate."""
        return "unsatisfied predicate"

    @staticmethod
    def not_class(name: str) -> str:
        """Message for a character-class parser ("not digit")."""
        return f"not {name}"

    @staticmethod
    def not_char(char: str) -> str:
        """Message for a literal character parser."""
        return f"not char '{char}'"

    @staticmethod
    def not_string(text: str) -> str:
        """Message for a literal text parser."""
        return f'not string "{text}"'

    @staticmethod
    def trailing_input() -> str:
        """Message for input left over after a strict parse."""
        return "unexpected trailing input"

    # =========================================================================
    # DIAGNOSTICS
    # =========================================================================

    @staticmethod
    def syntax_error(
        code: DiagnosticCode, message: str, span: SourceSpan, found: str | None
    ) -> Diagnostic:
        """Positioned syntax error.

        Args:
            code: One of the 1000-range syntax codes
            message: Parser-level message
            span: Location of the failure
            found: Next unconsumed character, None at end of input

        Returns:
            Diagnostic for the failure
        """
        hint = None
        if found is None:
            hint = "The expression ended early; check for a missing operand or ')'"
        return Diagnostic(code=code, message=message, span=span, found=found, hint=hint)

    @staticmethod
    def division_by_zero(dividend: int) -> Diagnostic:
        """Division step with a zero right operand.

        Args:
            dividend: Accumulated left operand at the time of the fault

        Returns:
            Diagnostic for DIVISION_BY_ZERO
        """
        msg = f"division by zero: {dividend} / 0"
        return Diagnostic(
            code=DiagnosticCode.DIVISION_BY_ZERO,
            message=msg,
            hint="The right operand of '/' must be non-zero",
        )

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, span: SourceSpan) -> Diagnostic:
        """Parenthesis nesting limit reached.

        Args:
            max_depth: Configured maximum nesting depth
            span: Position just inside the parenthesis that went too deep

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"nesting depth exceeds maximum ({max_depth})"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            span=span,
            hint="Flatten the expression or raise max_nesting_depth",
        )

    @staticmethod
    def source_too_large(size: int, max_size: int) -> str:
        """Input longer than the configured limit."""
        return (
            f"Source size ({size:,} characters) exceeds maximum "
            f"({max_size:,} characters). "
            "Configure max_source_size to increase the limit."
        )
