r"""Ready-made delay and failure policies.

A delay policy maps the current ``ExecutionScope`` to the number of
seconds to wait before the next attempt (or before re-running a skipped
attempt). A failure policy maps the current scope and the latest error
to whether the executor should keep retrying.

Policies are plain callables, so any function or closure with the right
signature can be used instead of the helpers below.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "always_retry",
    "constant_delay",
    "default_delay",
    "never_retry",
    "retry_on",
]

from typing import TYPE_CHECKING

from aretry.validation import validate_delay

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.scope import ExecutionScope

# Delay in seconds between two attempts when no delay policy is given
DEFAULT_DELAY = 5.0


def default_delay(scope: ExecutionScope) -> float:  # noqa: ARG001
    """Return ``DEFAULT_DELAY`` for every attempt."""
    return DEFAULT_DELAY


def constant_delay(delay: float) -> Callable[[ExecutionScope], float]:
    """Create a delay policy that always waits the same time.

    Args:
        delay: The delay in seconds. Must be >= 0.

    Returns:
        The delay policy.

    Raises:
        ValueError: If ``delay`` is negative.

    Example:
        ```pycon
        >>> from aretry import constant_delay
        >>> from aretry.scope import AttemptScope
        >>> policy = constant_delay(0.5)
        >>> policy(AttemptScope())
        0.5

        ```
    """
    validate_delay(delay)

    def policy(scope: ExecutionScope) -> float:  # noqa: ARG001
        return delay

    return policy


def always_retry(scope: ExecutionScope, error: Exception) -> bool:  # noqa: ARG001
    """Keep retrying whatever the error is."""
    return True


def never_retry(scope: ExecutionScope, error: Exception) -> bool:  # noqa: ARG001
    """Stop at the first failure."""
    return False


def retry_on(
    *exception_types: type[Exception],
) -> Callable[[ExecutionScope, Exception], bool]:
    """Create a failure policy that retries only some error types.

    Args:
        *exception_types: The exception types that should trigger a
            retry. Subclasses match as well.

    Returns:
        The failure policy.

    Raises:
        ValueError: If no exception type is given.

    Example:
        ```pycon
        >>> from aretry import retry_on
        >>> from aretry.scope import AttemptScope
        >>> policy = retry_on(TimeoutError, ConnectionError)
        >>> policy(AttemptScope(), ConnectionResetError())
        True
        >>> policy(AttemptScope(), KeyError("missing"))
        False

        ```
    """
    if not exception_types:
        msg = "retry_on requires at least one exception type"
        raise ValueError(msg)

    def policy(scope: ExecutionScope, error: Exception) -> bool:  # noqa: ARG001
        return isinstance(error, exception_types)

    return policy
