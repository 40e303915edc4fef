r"""Contains the ``retry_sync`` function to run blocking work with
automatic retry logic."""

from __future__ import annotations

__all__ = ["retry_sync"]

from typing import TYPE_CHECKING, TypeVar

from aretry.config import DEFAULT_MAX_COUNT, RetryConfig
from aretry.executor import RetryExecutor
from aretry.policies import always_retry, default_delay

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable
    from datetime import timedelta

    from aretry.outcome import Outcome
    from aretry.scope import DoingScope, ExecutionScope

T = TypeVar("T")


def retry_sync(
    work: Callable[[DoingScope], T],
    *,
    max_count: int = DEFAULT_MAX_COUNT,
    delay_policy: Callable[[ExecutionScope], float | timedelta] = default_delay,
    failure_policy: Callable[[ExecutionScope, Exception], bool] = always_retry,
    cancel_event: threading.Event | None = None,
) -> Outcome[T]:
    """Run blocking work, retrying it when it fails.

    This is the synchronous counterpart of ``aretry.retry``. Setting
    ``cancel_event`` from another thread stops the invocation at the next
    checkpoint, or immediately if it is waiting between attempts.

    Args:
        work: Callable receiving the ``DoingScope``.
        max_count: Maximum number of counted attempts. Must be > 0.
        delay_policy: Callable returning the delay before the next
            attempt, in seconds or as a ``timedelta``.
        failure_policy: Callable deciding whether to continue after a
            failure.
        cancel_event: Optional cancellation token.

    Returns:
        ``Success`` with the work's value, or ``Failure`` with the error
        of the last attempt.

    Raises:
        TypeError: If ``max_count`` is not an integer.
        ValueError: If ``max_count`` is not strictly positive.
        RetryCancelledError: If the invocation is cancelled.
    """
    config = RetryConfig(
        max_count=max_count,
        delay_policy=delay_policy,
        failure_policy=failure_policy,
    )
    return RetryExecutor(config).execute(work, cancel_event=cancel_event)
