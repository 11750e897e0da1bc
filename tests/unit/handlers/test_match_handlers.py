r"""Unit tests for the error filtering handlers."""

from __future__ import annotations

import time
from enum import Enum
from unittest.mock import AsyncMock, Mock

import pytest

from aretries import RETRY, RetrySignal, RetryState, explicitly, if_error_matches, if_true


class ErrorCode(str, Enum):
    INSUFFICIENT_SCALE = "DB_INSUFFICIENT_SCALE"


class DatabaseError(Exception):
    def __init__(self, code: str | int, status: int = 500) -> None:
        super().__init__(code)
        self.code = code
        self.status = status


def make_state(error: BaseException, attempts: int = 1) -> RetryState:
    return RetryState(error=error, attempts=attempts, start_time=time.time(), errors=[error])


######################################
#     Tests for if_error_matches     #
######################################


def test_if_error_matches_pattern_match() -> None:
    error = DatabaseError("DB_INSUFFICIENT_SCALE")
    handler = if_error_matches({"code": "DB_INSUFFICIENT_SCALE"})

    assert handler(error, make_state(error)) is None


def test_if_error_matches_pattern_mismatch_reraises_same_error() -> None:
    error = DatabaseError("Y")
    handler = if_error_matches({"code": "X"})

    with pytest.raises(DatabaseError) as exc_info:
        handler(error, make_state(error))

    assert exc_info.value is error


def test_if_error_matches_pattern_with_several_keys() -> None:
    error = DatabaseError("DB_LOCKED", status=503)
    handler = if_error_matches({"code": "DB_LOCKED", "status": 503})

    handler(error, make_state(error))


def test_if_error_matches_pattern_missing_attribute() -> None:
    error = ValueError("no code here")
    handler = if_error_matches({"code": "X"})

    with pytest.raises(ValueError, match=r"no code here"):
        handler(error, make_state(error))


def test_if_error_matches_pattern_str_enum_code() -> None:
    error = DatabaseError(ErrorCode.INSUFFICIENT_SCALE)
    handler = if_error_matches({"code": "DB_INSUFFICIENT_SCALE"})

    handler(error, make_state(error))


def test_if_error_matches_pattern_numeric_types() -> None:
    error = DatabaseError("X", status=503.0)
    handler = if_error_matches({"status": 503})

    handler(error, make_state(error))


def test_if_error_matches_predicate() -> None:
    error = DatabaseError(123)
    handler = if_error_matches(lambda err: getattr(err, "code", None) == 123)

    handler(error, make_state(error))


def test_if_error_matches_predicate_false() -> None:
    error = DatabaseError(124)
    handler = if_error_matches(lambda err: getattr(err, "code", None) == 123)

    with pytest.raises(DatabaseError):
        handler(error, make_state(error))


def test_if_error_matches_exception_class() -> None:
    error = ConnectionResetError("reset")
    handler = if_error_matches(ConnectionError)

    handler(error, make_state(error))


def test_if_error_matches_exception_class_mismatch() -> None:
    error = KeyError("missing")
    handler = if_error_matches(ConnectionError, TimeoutError)

    with pytest.raises(KeyError):
        handler(error, make_state(error))


def test_if_error_matches_any_matcher() -> None:
    error = DatabaseError("B")
    handler = if_error_matches({"code": "A"}, lambda err: False, {"code": "B"})

    handler(error, make_state(error))


def test_if_error_matches_stops_at_first_match() -> None:
    error = DatabaseError("A")
    second = Mock(return_value=True)
    handler = if_error_matches(lambda err: True, second)

    handler(error, make_state(error))

    second.assert_not_called()


def test_if_error_matches_without_matchers_always_aborts() -> None:
    error = DatabaseError("A")
    handler = if_error_matches()

    with pytest.raises(DatabaseError):
        handler(error, make_state(error))


def test_if_error_matches_custom_match_strategy() -> None:
    error = DatabaseError("A")
    pattern = {"anything": True}
    match = Mock(return_value=True)
    handler = if_error_matches(pattern, match=match)

    handler(error, make_state(error))

    match.assert_called_once_with(error, pattern)


def test_if_error_matches_custom_match_strategy_mismatch() -> None:
    error = DatabaseError("A")
    handler = if_error_matches({"code": "A"}, match=Mock(return_value=False))

    with pytest.raises(DatabaseError):
        handler(error, make_state(error))


def test_if_error_matches_rejects_non_callable_match() -> None:
    with pytest.raises(TypeError, match=r"match must be callable"):
        if_error_matches({"code": "A"}, match="lodash")


#############################
#     Tests for if_true     #
#############################


@pytest.mark.asyncio
async def test_if_true_sync_predicate_true() -> None:
    error = ValueError()
    state = make_state(error)
    predicate = Mock(return_value=True)

    await if_true(predicate)(error, state)

    predicate.assert_called_once_with(error, state)


@pytest.mark.asyncio
async def test_if_true_sync_predicate_false() -> None:
    error = ValueError("stop")

    with pytest.raises(ValueError, match=r"stop") as exc_info:
        await if_true(lambda err, state: False)(error, make_state(error))

    assert exc_info.value is error


@pytest.mark.asyncio
async def test_if_true_async_predicate() -> None:
    error = ValueError()
    predicate = AsyncMock(return_value=True)

    await if_true(predicate)(error, make_state(error))

    predicate.assert_awaited_once()


@pytest.mark.asyncio
async def test_if_true_async_predicate_false() -> None:
    error = ValueError()

    with pytest.raises(ValueError):
        await if_true(AsyncMock(return_value=False))(error, make_state(error))


@pytest.mark.asyncio
async def test_if_true_uses_state() -> None:
    handler = if_true(lambda err, state: state.attempts < 3)
    error = ValueError()

    await handler(error, make_state(error, attempts=2))
    with pytest.raises(ValueError):
        await handler(error, make_state(error, attempts=3))


@pytest.mark.asyncio
async def test_if_true_truthy_value() -> None:
    error = ValueError()
    await if_true(lambda err, state: "yes")(error, make_state(error))


def test_if_true_rejects_non_callable() -> None:
    with pytest.raises(TypeError, match=r"predicate must be callable, got bool"):
        if_true(True)


################################
#     Tests for explicitly     #
################################


def test_explicitly_retry_sentinel_passes() -> None:
    assert explicitly(RETRY, make_state(RETRY)) is None


def test_explicitly_without_state() -> None:
    assert explicitly(RETRY) is None


def test_explicitly_other_error_reraised() -> None:
    error = ValueError("not a retry")

    with pytest.raises(ValueError, match=r"not a retry") as exc_info:
        explicitly(error, make_state(error))

    assert exc_info.value is error


def test_explicitly_compares_by_identity() -> None:
    lookalike = RetrySignal("retry requested")

    with pytest.raises(RetrySignal) as exc_info:
        explicitly(lookalike, make_state(lookalike))

    assert exc_info.value is lookalike
