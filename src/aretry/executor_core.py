r"""Shared core logic for retry executors.

This module provides the attempt result type and helper functions used
by both the synchronous and the asynchronous retry executors.
"""

from __future__ import annotations

__all__ = ["AttemptResult", "AttemptStatus", "resolve_delay"]

import enum
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.scope import ExecutionScope

logger: logging.Logger = logging.getLogger(__name__)


class AttemptStatus(enum.Enum):
    """Disposition of a single attempt."""

    SUCCESS = "success"
    FAILURE = "failure"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class AttemptResult:
    """Result of one invocation of the work.

    Attributes:
        status: How the attempt ended.
        value: The value returned by the work (``SUCCESS`` only).
        error: The error raised by the work (``FAILURE`` only).
    """

    status: AttemptStatus
    value: Any = None
    error: Exception | None = None

    @classmethod
    def success(cls, value: Any) -> AttemptResult:
        return cls(AttemptStatus.SUCCESS, value=value)

    @classmethod
    def failure(cls, error: Exception) -> AttemptResult:
        return cls(AttemptStatus.FAILURE, error=error)

    @classmethod
    def skipped(cls) -> AttemptResult:
        return cls(AttemptStatus.SKIPPED)


def resolve_delay(
    delay_policy: Callable[[ExecutionScope], float | timedelta],
    scope: ExecutionScope,
) -> float:
    """Compute the delay in seconds before the next attempt.

    Args:
        delay_policy: The caller-supplied delay policy.
        scope: The scope of the attempt that just ended.

    Returns:
        The delay in seconds. ``timedelta`` values are converted and
        negative values are clamped to zero.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from aretry.executor_core import resolve_delay
        >>> from aretry.scope import AttemptScope
        >>> resolve_delay(lambda scope: timedelta(milliseconds=250), AttemptScope())
        0.25
        >>> resolve_delay(lambda scope: -1, AttemptScope())
        0.0

        ```
    """
    delay = delay_policy(scope)
    if isinstance(delay, timedelta):
        delay = delay.total_seconds()
    if delay < 0:
        logger.debug(f"Clamping negative delay {delay:.2f}s to 0s")
        return 0.0
    return float(delay)
