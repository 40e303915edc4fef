r"""Exceptions raised by the retry executors."""

from __future__ import annotations

__all__ = ["RetryCancelledError", "SkipAttempt"]


class RetryCancelledError(Exception):
    """Raised when a synchronous retry invocation is cancelled.

    The synchronous executor raises this error when its cancellation
    token is set. It is never reported to the failure policy and never
    wrapped in an outcome.

    Args:
        attempt: The attempt number that was current when the
            cancellation was observed.

    Example:
        ```pycon
        >>> from aretry import RetryCancelledError
        >>> error = RetryCancelledError(attempt=2)
        >>> error.attempt
        2
        >>> str(error)
        'retry cancelled at attempt 2'

        ```
    """

    def __init__(self, attempt: int) -> None:
        super().__init__(f"retry cancelled at attempt {attempt}")
        self.attempt = attempt


class SkipAttempt(BaseException):  # noqa: N818
    """Control signal raised by ``DoingScope.skip()``.

    It derives from ``BaseException`` so that a broad ``except Exception``
    inside the work does not swallow it. Only the executors catch it.
    """
