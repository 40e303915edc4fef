from __future__ import annotations

import pytest

from aretry import always_retry, constant_delay, default_delay, never_retry, retry_on
from aretry.scope import AttemptCounter, AttemptScope


def test_default_delay() -> None:
    assert default_delay(AttemptScope()) == 5.0


@pytest.mark.parametrize("delay", [0.0, 1.5, 30])
def test_constant_delay(delay: float) -> None:
    policy = constant_delay(delay)
    counter = AttemptCounter()
    scope = AttemptScope(counter)
    assert policy(scope) == delay
    counter.increment()
    assert policy(scope) == delay


def test_constant_delay_negative() -> None:
    with pytest.raises(ValueError, match=r"delay must be >= 0"):
        constant_delay(-1.0)


def test_always_retry() -> None:
    assert always_retry(AttemptScope(), RuntimeError())


def test_never_retry() -> None:
    assert not never_retry(AttemptScope(), RuntimeError())


def test_retry_on_matches_subclasses() -> None:
    policy = retry_on(OSError)
    assert policy(AttemptScope(), ConnectionResetError())
    assert policy(AttemptScope(), TimeoutError())


def test_retry_on_multiple_types() -> None:
    policy = retry_on(KeyError, ValueError)
    assert policy(AttemptScope(), KeyError("key"))
    assert policy(AttemptScope(), ValueError("value"))
    assert not policy(AttemptScope(), RuntimeError("other"))


def test_retry_on_requires_a_type() -> None:
    with pytest.raises(ValueError, match=r"at least one exception type"):
        retry_on()
