r"""Outcome types returned by the retry executors.

An outcome is either a ``Success`` wrapping the value returned by the
work, or a ``Failure`` wrapping the last error raised by the work.
Exactly one outcome is produced per invocation that is not cancelled.
"""

from __future__ import annotations

__all__ = ["Failure", "Outcome", "Success"]

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The value returned by the work.

    Example:
        ```pycon
        >>> from aretry import Success
        >>> outcome = Success(42)
        >>> outcome.is_success
        True
        >>> outcome.get_or_raise()
        42

        ```
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    def get_or_raise(self) -> T:
        """Return the wrapped value."""
        return self.value

    def get_or_none(self) -> T:
        return self.value

    def error_or_none(self) -> None:
        return None


@dataclass(frozen=True)
class Failure:
    """Terminal failure outcome.

    Attributes:
        error: The error raised by the last attempt of the work.

    Example:
        ```pycon
        >>> from aretry import Failure
        >>> outcome = Failure(RuntimeError("boom"))
        >>> outcome.is_failure
        True
        >>> outcome.error_or_none()
        RuntimeError('boom')
        >>> outcome.get_or_none() is None
        True

        ```
    """

    error: Exception

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    def get_or_raise(self) -> NoReturn:
        """Raise the wrapped error.

        Raises:
            Exception: The error raised by the last attempt.
        """
        raise self.error

    def get_or_none(self) -> None:
        return None

    def error_or_none(self) -> Exception:
        return self.error


Outcome = Union[Success[T], Failure]
