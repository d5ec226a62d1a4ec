"""Babel compatibility layer for optional dependency handling.

combicalc supports two installation modes:
    - Core: `pip install combicalc` (no external dependencies)
    - Locale output: `pip install combicalc[babel]` (Babel formats results)

Only :mod:`combicalc.formatting` needs Babel, and only when a locale is
requested. This module gives it one consistent check and error message.

Usage Pattern:
    from combicalc.core.babel_compat import require_babel

    def my_function(locale_code: str) -> None:
        require_babel("my_function")  # Raises ImportError if Babel missing
        from babel.numbers import format_decimal  # Safe to import Babel now
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from importlib.util import find_spec

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]


class BabelImportError(ImportError):
    """Babel is required for the requested feature but is not installed."""

    def __init__(self, feature: str) -> None:
        self.feature = feature
        super().__init__(
            f"{feature} requires Babel for locale-aware formatting. "
            "Install with: pip install combicalc[babel]"
        )


@lru_cache(maxsize=1)
def is_babel_available() -> bool:
    """Check whether Babel can be imported (result cached)."""
    return find_spec("babel") is not None


def require_babel(feature: str) -> None:
    """Raise BabelImportError unless Babel is installed.

    Args:
        feature: Name of the feature needing Babel, used in the message

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not is_babel_available():
        raise BabelImportError(feature)
