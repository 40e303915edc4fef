r"""Synchronous retry executor.

This module provides the RetryExecutor class, the blocking counterpart
of ``AsyncRetryExecutor``. Cancellation is cooperative and goes through
an optional ``threading.Event`` token.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import inspect
import logging
import time
from typing import TYPE_CHECKING, TypeVar

from aretry.config import RetryConfig
from aretry.exceptions import RetryCancelledError, SkipAttempt
from aretry.executor_core import AttemptResult, AttemptStatus, resolve_delay
from aretry.outcome import Failure, Success
from aretry.scope import AttemptCounter, AttemptScope, WorkScope

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable

    from aretry.outcome import Outcome
    from aretry.scope import DoingScope

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes a blocking unit of work with automatic retry logic.

    The retry, skip and failure-policy semantics are the same as
    ``AsyncRetryExecutor``. When a ``cancel_event`` is passed to
    ``execute``, the executor checks it after the work and after the
    failure policy, and waits on it during delays; once it is set the
    invocation ends with ``RetryCancelledError`` and no outcome.

    Attributes:
        config: Retry configuration with the attempt ceiling and the
            delay and failure policies.

    Example:
        ```pycon
        >>> from aretry import RetryConfig, RetryExecutor, constant_delay
        >>> attempts = []
        >>> def work(scope):
        ...     attempts.append(scope.attempt)
        ...     raise TimeoutError("slow")
        ...
        >>> executor = RetryExecutor(RetryConfig(max_count=3, delay_policy=constant_delay(0)))
        >>> outcome = executor.execute(work)
        >>> attempts
        [1, 2, 3]
        >>> outcome.error_or_none()
        TimeoutError('slow')

        ```
    """

    def __init__(self, config: RetryConfig | None = None) -> None:
        self.config = config if config is not None else RetryConfig()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(config={self.config})"

    def execute(
        self,
        work: Callable[[DoingScope], T],
        cancel_event: threading.Event | None = None,
    ) -> Outcome[T]:
        """Run the work until it succeeds, the failure policy stops it, or
        the attempt ceiling is reached.

        Args:
            work: Callable receiving the ``DoingScope`` of the current
                attempt.
            cancel_event: Optional cancellation token.

        Returns:
            ``Success`` with the value returned by the work, or
            ``Failure`` with the error raised by the last attempt.

        Raises:
            RetryCancelledError: If ``cancel_event`` is set, or if the
                work raised it.
        """
        counter = AttemptCounter()
        scope = WorkScope(counter)
        policy_scope = AttemptScope(counter)
        max_count = self.config.max_count

        while True:
            result = self._run_attempt(work, scope)
            self._ensure_not_cancelled(scope, cancel_event)

            if result.status is AttemptStatus.SUCCESS:
                logger.debug(f"Attempt {scope.attempt}/{max_count} succeeded")
                return Success(result.value)

            if result.status is AttemptStatus.SKIPPED:
                delay = resolve_delay(self.config.delay_policy, policy_scope)
                logger.debug(
                    f"Attempt {scope.attempt}/{max_count} skipped, "
                    f"running it again in {delay:.2f}s"
                )
                self._sleep(delay, scope, cancel_event)
                continue

            error = result.error
            logger.debug(
                f"Attempt {scope.attempt}/{max_count} failed with "
                f"{type(error).__name__}: {error}"
            )
            should_continue = self._should_continue(policy_scope, error)
            self._ensure_not_cancelled(scope, cancel_event)

            if not should_continue:
                logger.debug(f"Failure policy stopped retrying at attempt {scope.attempt}")
                return Failure(error)

            if scope.attempt >= max_count:
                logger.debug(f"Giving up after {scope.attempt} attempts")
                return Failure(error)

            delay = resolve_delay(self.config.delay_policy, policy_scope)
            logger.debug(f"Waiting {delay:.2f}s before attempt {scope.attempt + 1}")
            self._sleep(delay, scope, cancel_event)
            counter.increment()

    def _run_attempt(self, work: Callable[[DoingScope], T], scope: WorkScope) -> AttemptResult:
        try:
            value = work(scope)
        except SkipAttempt:
            return AttemptResult.skipped()
        except RetryCancelledError:
            raise
        except Exception as exc:  # noqa: BLE001
            return AttemptResult.failure(exc)
        return AttemptResult.success(value)

    def _ensure_not_cancelled(
        self, scope: AttemptScope, cancel_event: threading.Event | None
    ) -> None:
        if cancel_event is not None and cancel_event.is_set():
            logger.debug(f"Retry cancelled at attempt {scope.attempt}")
            raise RetryCancelledError(scope.attempt)

    def _sleep(
        self, delay: float, scope: AttemptScope, cancel_event: threading.Event | None
    ) -> None:
        if cancel_event is None:
            time.sleep(delay)
            return
        if cancel_event.wait(delay):
            logger.debug(f"Retry cancelled while waiting at attempt {scope.attempt}")
            raise RetryCancelledError(scope.attempt)

    def _should_continue(self, scope: AttemptScope, error: Exception) -> bool:
        decision = self.config.failure_policy(scope, error)
        if inspect.isawaitable(decision):
            if inspect.iscoroutine(decision):
                decision.close()
            msg = (
                "failure_policy returned an awaitable; use AsyncRetryExecutor "
                "for async failure policies"
            )
            raise TypeError(msg)
        return bool(decision)
