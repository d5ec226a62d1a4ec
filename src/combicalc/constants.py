"""Shared constants for combicalc.

Centralized configuration constants used by the syntax layer, the
calculator entry points and the command-line driver.

Constants are grouped by domain:
- Depth limits: Recursion protection for nested parentheses
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_NESTING_DEPTH",
    "FRAMES_PER_NESTING_LEVEL",
    "RESERVED_FRAMES",
    # Input limits
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# Each parenthesised sub-expression re-enters factor -> expr -> term -> factor
# through a chain of combinator closures. Python frames per nesting level are
# therefore a multiple of one, and the usable depth is bounded by
# sys.getrecursionlimit() / FRAMES_PER_NESTING_LEVEL.

# Maximum parenthesis nesting depth accepted by the default grammar. Kept a few
# levels below max_safe_depth() at the stock recursion limit (23) so that
# frames held by the caller (test runners, logging handlers) still fit.
# Pass max_nesting_depth to evaluate() or --max-depth to go up to the clamp.
MAX_NESTING_DEPTH: int = 20

# Upper bound on interpreter frames consumed by a single nesting level.
FRAMES_PER_NESTING_LEVEL: int = 40

# Frames reserved for the caller (pytest, CLI, logging) below the parser.
RESERVED_FRAMES: int = 50

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum input length in characters (64 KiB). The driver reads one line.
MAX_SOURCE_SIZE: int = 64 * 1024
