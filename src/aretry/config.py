r"""Configuration dataclass and defaults for the retry executors.

This module provides configuration constants and a dataclass-based
configuration object shared by ``RetryExecutor`` and
``AsyncRetryExecutor``.
"""

from __future__ import annotations

__all__ = ["DEFAULT_DELAY", "DEFAULT_MAX_COUNT", "RetryConfig"]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from aretry.policies import DEFAULT_DELAY, always_retry, default_delay
from aretry.validation import validate_max_count

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from datetime import timedelta

    from aretry.scope import ExecutionScope

# Default maximum number of counted attempts
# Skipped attempts are not counted
DEFAULT_MAX_COUNT = 3


@dataclass
class RetryConfig:
    """Configuration for retry behavior.

    Args:
        max_count: Maximum number of counted attempts. Must be > 0.
        delay_policy: Callable returning the delay in seconds (or a
            ``timedelta``) to wait before the next attempt or before
            re-running a skipped attempt.
        failure_policy: Callable deciding whether to keep retrying
            after a failed attempt. It may return an awaitable when used
            with ``AsyncRetryExecutor``.

    Raises:
        TypeError: If ``max_count`` is not an integer.
        ValueError: If ``max_count`` is not strictly positive.

    Example:
        ```pycon
        >>> from aretry import RetryConfig
        >>> config = RetryConfig()
        >>> config.max_count
        3
        >>> config = RetryConfig(max_count=5)
        >>> merged = config.merge(max_count=10)
        >>> merged.max_count
        10
        >>> config.max_count  # Original unchanged
        5

        ```
    """

    max_count: int = DEFAULT_MAX_COUNT
    delay_policy: Callable[[ExecutionScope], float | timedelta] = default_delay
    failure_policy: Callable[
        [ExecutionScope, Exception], bool | Awaitable[bool]
    ] = always_retry

    def __post_init__(self) -> None:
        validate_max_count(self.max_count)

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ``RetryConfig`` instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        The keys match the keyword arguments of ``aretry.retry`` and
        ``aretry.retry_sync``.

        Returns:
            Dictionary with retry configuration parameters.

        Example:
            ```pycon
            >>> from aretry import RetryConfig
            >>> RetryConfig(max_count=5).to_dict()["max_count"]
            5

            ```
        """
        return {
            "max_count": self.max_count,
            "delay_policy": self.delay_policy,
            "failure_policy": self.failure_policy,
        }
