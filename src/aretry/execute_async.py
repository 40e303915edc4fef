r"""Contains the ``retry`` function to run async work with automatic
retry logic."""

from __future__ import annotations

__all__ = ["retry"]

from typing import TYPE_CHECKING, TypeVar

from aretry.config import DEFAULT_MAX_COUNT, RetryConfig
from aretry.executor_async import AsyncRetryExecutor
from aretry.policies import always_retry, default_delay

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from datetime import timedelta

    from aretry.outcome import Outcome
    from aretry.scope import DoingScope, ExecutionScope

T = TypeVar("T")


async def retry(
    work: Callable[[DoingScope], Awaitable[T]],
    *,
    max_count: int = DEFAULT_MAX_COUNT,
    delay_policy: Callable[[ExecutionScope], float | timedelta] = default_delay,
    failure_policy: Callable[
        [ExecutionScope, Exception], bool | Awaitable[bool]
    ] = always_retry,
) -> Outcome[T]:
    """Run async work, retrying it when it fails.

    The work is called with a ``DoingScope`` whose ``attempt`` starts at
    1. On failure, ``failure_policy`` is consulted: ``False`` ends the
    invocation with that failure, ``True`` schedules another attempt
    after ``delay_policy`` seconds unless ``max_count`` attempts have
    already run. Calling ``scope.skip()`` re-runs the current attempt
    after a delay without counting it.

    Args:
        work: Async callable receiving the ``DoingScope``.
        max_count: Maximum number of counted attempts. Must be > 0.
        delay_policy: Callable returning the delay before the next
            attempt, in seconds or as a ``timedelta``. Defaults to a
            constant 5 seconds.
        failure_policy: Callable deciding whether to continue after a
            failure. May be async. Defaults to always continuing.

    Returns:
        ``Success`` with the work's value, or ``Failure`` with the error
        of the last attempt.

    Raises:
        TypeError: If ``max_count`` is not an integer.
        ValueError: If ``max_count`` is not strictly positive.
        asyncio.CancelledError: If the invocation is cancelled.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import retry
        >>> async def work(scope):
        ...     if scope.attempt < 3:
        ...         raise ConnectionError(f"error {scope.attempt}")
        ...     return "ok"
        ...
        >>> outcome = asyncio.run(retry(work, delay_policy=lambda scope: 0))
        >>> outcome.get_or_raise()
        'ok'

        ```
    """
    config = RetryConfig(
        max_count=max_count,
        delay_policy=delay_policy,
        failure_policy=failure_policy,
    )
    return await AsyncRetryExecutor(config).execute(work)
