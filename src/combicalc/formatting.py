"""Rendering of evaluation results.

Results are plain Python integers. Without a locale they print as ``str()``
does, which is what the command-line driver writes by default. With a
locale, Babel applies CLDR digit grouping (``1234567`` -> ``1,234,567`` for
en_US, ``1.234.567`` for de_DE).
"""

from __future__ import annotations

import logging

from combicalc.core.babel_compat import require_babel

__all__ = ["format_result"]

logger = logging.getLogger(__name__)


def format_result(value: int, locale: str | None = None) -> str:
    """Format an integer result for display.

    Args:
        value: Evaluated integer
        locale: Locale code such as "en_US"; None for plain digits

    Returns:
        Formatted number

    Raises:
        BabelImportError: If a locale is requested and Babel is missing
        ValueError: If Babel does not recognise the locale
    """
    if locale is None:
        return str(value)

    require_babel("format_result")
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415 - optional dependency
    from babel.numbers import format_decimal  # noqa: PLC0415 - optional dependency

    try:
        babel_locale = Locale.parse(locale.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        msg = f"Unknown locale '{locale}': {e}"
        raise ValueError(msg) from e

    logger.debug("Formatting %d for locale %s", value, babel_locale)
    return format_decimal(value, locale=babel_locale)
