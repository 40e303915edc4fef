r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs an async
unit of work with retry, skip and cancellation semantics.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.config import RetryConfig
from aretry.exceptions import SkipAttempt
from aretry.executor_core import AttemptResult, AttemptStatus, resolve_delay
from aretry.outcome import Failure, Success
from aretry.scope import AttemptCounter, AttemptScope, WorkScope

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.outcome import Outcome
    from aretry.scope import DoingScope

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


def ensure_not_cancelled() -> None:
    """Raise ``asyncio.CancelledError`` if the current task is being
    cancelled.

    This catches cancellation requests that the work or the failure
    policy received and swallowed.

    Raises:
        asyncio.CancelledError: If a cancellation of the current task
            is pending.
    """
    task = asyncio.current_task()
    if task is not None and task.cancelling():
        raise asyncio.CancelledError


class AsyncRetryExecutor:
    """Executes an async unit of work with automatic retry logic.

    The executor runs the work with a ``DoingScope`` exposing the current
    attempt number. When the work fails, the failure policy decides
    whether to continue; the delay policy decides how long to wait before
    the next attempt. Calling ``scope.skip()`` inside the work re-runs the
    same attempt after a delay without counting it and without consulting
    the failure policy.

    ``asyncio.CancelledError`` is never treated as a failure: it always
    propagates and no outcome is produced. The executor also checks for a
    pending cancellation of its task after the work and after the failure
    policy, so a retry loop never outlives its cancelled task.

    Attributes:
        config: Retry configuration with the attempt ceiling and the
            delay and failure policies.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import AsyncRetryExecutor, RetryConfig, constant_delay
        >>> async def work(scope):
        ...     if scope.attempt < 2:
        ...         raise ConnectionError("flaky")
        ...     return f"done at attempt {scope.attempt}"
        ...
        >>> executor = AsyncRetryExecutor(RetryConfig(delay_policy=constant_delay(0)))
        >>> outcome = asyncio.run(executor.execute(work))
        >>> outcome.get_or_raise()
        'done at attempt 2'

        ```
    """

    def __init__(self, config: RetryConfig | None = None) -> None:
        self.config = config if config is not None else RetryConfig()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(config={self.config})"

    async def execute(self, work: Callable[[DoingScope], Awaitable[T]]) -> Outcome[T]:
        """Run the work until it succeeds, the failure policy stops it, or
        the attempt ceiling is reached.

        Args:
            work: Async callable receiving the ``DoingScope`` of the
                current attempt.

        Returns:
            ``Success`` with the value returned by the work, or
            ``Failure`` with the error raised by the last attempt.

        Raises:
            asyncio.CancelledError: If the invocation is cancelled.
        """
        counter = AttemptCounter()
        scope = WorkScope(counter)
        policy_scope = AttemptScope(counter)
        max_count = self.config.max_count

        while True:
            result = await self._run_attempt(work, scope)
            ensure_not_cancelled()

            if result.status is AttemptStatus.SUCCESS:
                logger.debug(f"Attempt {scope.attempt}/{max_count} succeeded")
                return Success(result.value)

            if result.status is AttemptStatus.SKIPPED:
                delay = resolve_delay(self.config.delay_policy, policy_scope)
                logger.debug(
                    f"Attempt {scope.attempt}/{max_count} skipped, "
                    f"running it again in {delay:.2f}s"
                )
                await asyncio.sleep(delay)
                continue

            error = result.error
            logger.debug(
                f"Attempt {scope.attempt}/{max_count} failed with "
                f"{type(error).__name__}: {error}"
            )
            should_continue = await self._should_continue(policy_scope, error)
            ensure_not_cancelled()

            if not should_continue:
                logger.debug(f"Failure policy stopped retrying at attempt {scope.attempt}")
                return Failure(error)

            if scope.attempt >= max_count:
                logger.debug(f"Giving up after {scope.attempt} attempts")
                return Failure(error)

            delay = resolve_delay(self.config.delay_policy, policy_scope)
            logger.debug(f"Waiting {delay:.2f}s before attempt {scope.attempt + 1}")
            await asyncio.sleep(delay)
            counter.increment()

    async def _run_attempt(
        self,
        work: Callable[[DoingScope], Awaitable[T]],
        scope: WorkScope,
    ) -> AttemptResult:
        try:
            value = await work(scope)
        except SkipAttempt:
            return AttemptResult.skipped()
        except Exception as exc:  # noqa: BLE001
            return AttemptResult.failure(exc)
        return AttemptResult.success(value)

    async def _should_continue(self, scope: AttemptScope, error: Exception) -> bool:
        decision = self.config.failure_policy(scope, error)
        if inspect.isawaitable(decision):
            decision = await decision
        return bool(decision)
