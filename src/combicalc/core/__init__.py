"""Core utilities shared by the syntax layer and the entry points.

Exports:
    depth_clamp: Clamp a nesting limit against the recursion limit
    max_safe_depth: Deepest nesting the recursion limit allows
    require_babel: Gate for the optional Babel dependency

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel
from .depth import depth_clamp, max_safe_depth

__all__ = [
    "BabelImportError",
    "depth_clamp", "is_babel_available", "max_safe_depth", "require_babel"]
