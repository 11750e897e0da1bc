r"""Unit tests for parameter validation."""

from __future__ import annotations

import math

import pytest

from aretries.utils.validation import (
    validate_backoff_params,
    validate_callable,
    validate_duration,
    validate_max_tries,
)

#######################################
#     Tests for validate_duration     #
#######################################


@pytest.mark.parametrize("value", [0, 0.5, 250, math.inf])
def test_validate_duration_valid(value: float) -> None:
    validate_duration("milliseconds", value)


def test_validate_duration_negative() -> None:
    with pytest.raises(ValueError, match=r"seconds must be >= 0, got -2"):
        validate_duration("seconds", -2)


########################################
#     Tests for validate_max_tries     #
########################################


@pytest.mark.parametrize("value", [0, 1, 100])
def test_validate_max_tries_valid(value: int) -> None:
    validate_max_tries(value)


def test_validate_max_tries_negative() -> None:
    with pytest.raises(ValueError, match=r"max_tries must be >= 0, got -3"):
        validate_max_tries(-3)


#######################################
#     Tests for validate_callable     #
#######################################


@pytest.mark.parametrize("value", [print, lambda: None, ValueError, object().__repr__])
def test_validate_callable_valid(value: object) -> None:
    validate_callable("action", value)


def test_validate_callable_invalid() -> None:
    with pytest.raises(TypeError, match=r"action must be callable, got NoneType"):
        validate_callable("action", None)


#############################################
#     Tests for validate_backoff_params     #
#############################################


def test_validate_backoff_params_valid() -> None:
    validate_backoff_params(initial_delay=0, max_delay=math.inf, max_attempts=None, time_multiple=1)


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"initial_delay": -1.0}, r"initial_delay must be >= 0, got -1.0"),
        ({"max_delay": 0.0}, r"max_delay must be > 0, got 0.0"),
        ({"max_delay": -5.0}, r"max_delay must be > 0, got -5.0"),
        ({"max_attempts": -1}, r"max_attempts must be >= 0, got -1"),
        ({"time_multiple": 0.0}, r"time_multiple must be > 0, got 0.0"),
    ],
)
def test_validate_backoff_params_invalid(kwargs: dict, message: str) -> None:
    params = {"initial_delay": 100.0, "max_delay": 5000.0, "max_attempts": 5, "time_multiple": 2.0}
    params.update(kwargs)
    with pytest.raises(ValueError, match=message):
        validate_backoff_params(**params)
