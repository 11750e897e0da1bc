r"""Unit tests for the attempt limiting handler."""

from __future__ import annotations

import pytest

from aretries import RetryState, tries


def make_state(attempts: int) -> RetryState:
    error = ConnectionError("unreachable")
    return RetryState(error=error, attempts=attempts, start_time=0.0, errors=[error])


###########################
#     Tests for tries     #
###########################


@pytest.mark.parametrize("attempts", [1, 2])
def test_tries_permits_retry_below_limit(attempts: int) -> None:
    state = make_state(attempts)
    assert tries(3)(state.error, state) is None


@pytest.mark.parametrize("attempts", [3, 4])
def test_tries_aborts_at_limit(attempts: int) -> None:
    state = make_state(attempts)

    with pytest.raises(ConnectionError) as exc_info:
        tries(3)(state.error, state)

    assert exc_info.value is state.error


def test_tries_one_disables_retry() -> None:
    state = make_state(1)

    with pytest.raises(ConnectionError):
        tries(1)(state.error, state)


def test_tries_zero_aborts_immediately() -> None:
    state = make_state(1)

    with pytest.raises(ConnectionError):
        tries(0)(state.error, state)


def test_tries_negative() -> None:
    with pytest.raises(ValueError, match=r"max_tries must be >= 0, got -1"):
        tries(-1)
