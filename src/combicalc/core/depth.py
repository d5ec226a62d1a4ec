"""Nesting depth limiting for recursion protection.

Parenthesised sub-expressions recurse through the grammar, and every level
costs a bounded number of interpreter frames. The configured nesting limit
is clamped so that a maximally nested input fails with NestingDepthError
instead of RecursionError.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

from combicalc.constants import FRAMES_PER_NESTING_LEVEL, RESERVED_FRAMES

__all__ = ["depth_clamp", "max_safe_depth"]

logger = logging.getLogger(__name__)


def max_safe_depth(
    frames_per_level: int = FRAMES_PER_NESTING_LEVEL,
    reserve_frames: int = RESERVED_FRAMES,
) -> int:
    """Deepest nesting the current recursion limit can accommodate."""
    return max(1, (sys.getrecursionlimit() - reserve_frames) // frames_per_level)


def depth_clamp(
    requested_depth: int,
    frames_per_level: int = FRAMES_PER_NESTING_LEVEL,
    reserve_frames: int = RESERVED_FRAMES,
) -> int:
    """Clamp requested nesting depth against Python recursion limit.

    Logs a warning if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        frames_per_level: Interpreter frames used per nesting level
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary

    Raises:
        ValueError: If requested_depth is less than 1

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> depth_clamp(10)  # OK, within limit
        10
        >>> depth_clamp(500)  # (1000 - 50) // 40
        23
    """
    if requested_depth < 1:
        msg = f"Nesting depth must be >= 1, got {requested_depth}"
        raise ValueError(msg)
    safe_depth = max_safe_depth(frames_per_level, reserve_frames)
    if requested_depth > safe_depth:
        logger.warning(
            "Requested nesting depth %d exceeds what the Python recursion limit (%d) "
            "supports. Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            safe_depth,
        )
        return safe_depth
    return requested_depth
