r"""aretry - Retry primitive for async and blocking work.

This package runs a unit of work repeatedly until it succeeds, a
caller-supplied failure policy stops it, or an attempt ceiling is
reached. The work receives a scope exposing the current attempt number
and a ``skip()`` operation that re-runs the attempt without counting it.
Cancellation is never retried: it always propagates to the caller.

Key Features:
    - Async executor built on asyncio, with a blocking counterpart
    - Pluggable delay and failure policies (sync or async failure policy)
    - Uncounted skips requested by the work itself
    - Cancellation transparency, including swallowed cancellations
    - Outcome values instead of raised errors for terminal failures
    - httpx integration for transient HTTP failures

Example:
    ```pycon
    >>> import asyncio
    >>> from aretry import retry, constant_delay
    >>> attempts = []
    >>> async def work(scope):
    ...     attempts.append(scope.attempt)
    ...     raise ConnectionError("unreachable")
    ...
    >>> outcome = asyncio.run(retry(work, max_count=3, delay_policy=constant_delay(0)))
    >>> attempts
    [1, 2, 3]
    >>> outcome.is_failure
    True

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_MAX_COUNT",
    "AsyncRetryExecutor",
    "DoingScope",
    "ExecutionScope",
    "Failure",
    "Outcome",
    "RetryCancelledError",
    "RetryConfig",
    "RetryExecutor",
    "Success",
    "__version__",
    "always_retry",
    "constant_delay",
    "default_delay",
    "never_retry",
    "retry",
    "retry_on",
    "retry_sync",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.config import DEFAULT_DELAY, DEFAULT_MAX_COUNT, RetryConfig
from aretry.exceptions import RetryCancelledError
from aretry.execute import retry_sync
from aretry.execute_async import retry
from aretry.executor import RetryExecutor
from aretry.executor_async import AsyncRetryExecutor
from aretry.outcome import Failure, Outcome, Success
from aretry.policies import always_retry, constant_delay, default_delay, never_retry, retry_on
from aretry.scope import DoingScope, ExecutionScope

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
