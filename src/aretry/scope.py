r"""Scope interfaces exposed to the work and to the retry policies.

Two views of the same per-invocation state are provided:

- ``ExecutionScope``: the read-only view given to the delay and failure
  policies. It only exposes the current attempt number.
- ``DoingScope``: the richer view given to the work. It adds ``skip()``,
  which aborts the current attempt without counting it.

The executors own one ``AttemptCounter`` per invocation and hand out an
``AttemptScope`` to the policies and a ``WorkScope`` to the work. Neither
view can change the counter.
"""

from __future__ import annotations

__all__ = ["AttemptCounter", "AttemptScope", "DoingScope", "ExecutionScope", "WorkScope"]

from typing import NoReturn, Protocol, runtime_checkable

from aretry.exceptions import SkipAttempt


@runtime_checkable
class ExecutionScope(Protocol):
    """Read-only view of a retry invocation."""

    @property
    def attempt(self) -> int:
        """The current attempt number (1-indexed)."""


@runtime_checkable
class DoingScope(ExecutionScope, Protocol):
    """View of a retry invocation given to the work."""

    def skip(self) -> NoReturn:
        """Abort the current attempt without counting it.

        The executor waits for the delay policy and then runs the work
        again with the same attempt number. The failure policy is not
        consulted.
        """


class AttemptCounter:
    """Attempt counter owned by one executor invocation.

    Example:
        ```pycon
        >>> from aretry.scope import AttemptCounter
        >>> counter = AttemptCounter()
        >>> counter.value
        1
        >>> counter.increment()
        >>> counter.value
        2

        ```
    """

    def __init__(self) -> None:
        self._value = 1

    @property
    def value(self) -> int:
        return self._value

    def increment(self) -> None:
        """Advance to the next counted attempt."""
        self._value += 1


class AttemptScope:
    """Read-only ``ExecutionScope`` backed by an ``AttemptCounter``.

    Args:
        counter: The counter to read. A fresh counter starting at 1 is
            used if omitted.

    Example:
        ```pycon
        >>> from aretry.scope import AttemptCounter, AttemptScope
        >>> counter = AttemptCounter()
        >>> scope = AttemptScope(counter)
        >>> counter.increment()
        >>> scope.attempt
        2

        ```
    """

    __slots__ = ("_counter",)

    def __init__(self, counter: AttemptCounter | None = None) -> None:
        self._counter = counter if counter is not None else AttemptCounter()

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(attempt={self.attempt})"

    @property
    def attempt(self) -> int:
        return self._counter.value


class WorkScope(AttemptScope):
    """``DoingScope`` given to the work."""

    __slots__ = ()

    def skip(self) -> NoReturn:
        raise SkipAttempt
