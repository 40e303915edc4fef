r"""HTTP helpers built on httpx.

This module provides a failure policy that recognizes transient HTTP
errors and a helper that sends an ``httpx.AsyncClient`` request through
the async retry executor.
"""

from __future__ import annotations

__all__ = [
    "RETRY_STATUS_CODES",
    "is_transient_http_error",
    "request_with_retry",
    "retry_transient_http_errors",
]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from aretry.config import DEFAULT_MAX_COUNT, RetryConfig
from aretry.executor_async import AsyncRetryExecutor
from aretry.policies import default_delay

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from datetime import timedelta

    from aretry.outcome import Outcome
    from aretry.scope import DoingScope, ExecutionScope

logger: logging.Logger = logging.getLogger(__name__)

# HTTP status codes that should trigger automatic retry
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


def is_transient_http_error(
    error: Exception, status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES
) -> bool:
    """Indicate if an httpx error is worth retrying.

    Timeouts and transport errors (connection refused, reset, ...) are
    transient. A ``httpx.HTTPStatusError`` is transient only if its status
    code is in ``status_forcelist``. Any other error is not.

    Args:
        error: The error raised by an attempt.
        status_forcelist: HTTP status codes considered transient.

    Returns:
        ``True`` if the request should be retried.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.http import is_transient_http_error
        >>> is_transient_http_error(httpx.ConnectTimeout("timed out"))
        True
        >>> is_transient_http_error(ValueError("bad payload"))
        False

        ```
    """
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code in status_forcelist
    return isinstance(error, (httpx.TimeoutException, httpx.TransportError))


def retry_transient_http_errors(scope: ExecutionScope, error: Exception) -> bool:
    """Failure policy retrying transient HTTP errors only."""
    should_retry = is_transient_http_error(error)
    if not should_retry:
        logger.debug(
            f"Not retrying {type(error).__name__} raised at attempt {scope.attempt}: {error}"
        )
    return should_retry


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    max_count: int = DEFAULT_MAX_COUNT,
    delay_policy: Callable[[ExecutionScope], float | timedelta] = default_delay,
    failure_policy: Callable[
        [ExecutionScope, Exception], bool | Awaitable[bool]
    ] = retry_transient_http_errors,
    **kwargs: Any,
) -> Outcome[httpx.Response]:
    """Send an HTTP request, retrying it on transient failures.

    Responses with a status code >= 400 are turned into
    ``httpx.HTTPStatusError`` failures, so the failure policy sees them
    like any other error.

    Args:
        client: The client used to send the request.
        method: The HTTP method name (e.g., "GET", "POST").
        url: The URL to request.
        max_count: Maximum number of counted attempts. Must be > 0.
        delay_policy: Callable returning the delay before the next attempt.
        failure_policy: Callable deciding whether to continue after a
            failure. Defaults to ``retry_transient_http_errors``.
        **kwargs: Additional keyword arguments passed to
            ``client.request``.

    Returns:
        ``Success`` with the response, or ``Failure`` with the error of
        the last attempt.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from aretry.http import request_with_retry
        >>> async def main():
        ...     async with httpx.AsyncClient() as client:
        ...         outcome = await request_with_retry(client, "GET", "https://api.example.com/data")
        ...     return outcome.get_or_raise()
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """
    config = RetryConfig(
        max_count=max_count,
        delay_policy=delay_policy,
        failure_policy=failure_policy,
    )

    async def send(scope: DoingScope) -> httpx.Response:
        logger.debug(f"{method} {url} (attempt {scope.attempt}/{max_count})")
        response = await client.request(method, url, **kwargs)
        response.raise_for_status()
        return response

    return await AsyncRetryExecutor(config).execute(send)
