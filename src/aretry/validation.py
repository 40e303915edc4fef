r"""Parameter validation utilities for the retry executors.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before the first attempt runs.
"""

from __future__ import annotations

__all__ = ["validate_delay", "validate_max_count"]


def validate_max_count(max_count: int) -> None:
    """Validate the attempt ceiling.

    Args:
        max_count: Maximum number of counted attempts. Must be a
            positive integer. Skipped attempts do not count.

    Raises:
        TypeError: If ``max_count`` is not an integer (booleans are
            rejected as well).
        ValueError: If ``max_count`` is not strictly positive.

    Example:
        ```pycon
        >>> from aretry.validation import validate_max_count
        >>> validate_max_count(3)
        >>> validate_max_count(0)
        Traceback (most recent call last):
        ...
        ValueError: max_count must be > 0, got 0

        ```
    """
    if isinstance(max_count, bool) or not isinstance(max_count, int):
        msg = f"max_count must be an int, got {type(max_count).__name__}"
        raise TypeError(msg)
    if max_count <= 0:
        msg = f"max_count must be > 0, got {max_count}"
        raise ValueError(msg)


def validate_delay(delay: float) -> None:
    """Validate a constant delay value.

    Args:
        delay: The delay in seconds. Must be >= 0.

    Raises:
        ValueError: If ``delay`` is negative.

    Example:
        ```pycon
        >>> from aretry.validation import validate_delay
        >>> validate_delay(0.5)
        >>> validate_delay(-1.0)
        Traceback (most recent call last):
        ...
        ValueError: delay must be >= 0, got -1.0

        ```
    """
    if delay < 0:
        msg = f"delay must be >= 0, got {delay}"
        raise ValueError(msg)
