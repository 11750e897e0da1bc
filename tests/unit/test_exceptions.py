r"""Unit tests for the RETRY sentinel."""

from __future__ import annotations

import pytest

from aretries import RETRY, RetrySignal


def test_retry_sentinel_is_exception() -> None:
    assert isinstance(RETRY, RetrySignal)
    assert isinstance(RETRY, Exception)


def test_retry_sentinel_repr() -> None:
    assert repr(RETRY) == "RETRY"


def test_retry_signal_other_instance_repr() -> None:
    assert repr(RetrySignal("manual")) == "RetrySignal('manual')"


def test_retry_sentinel_can_be_raised() -> None:
    with pytest.raises(RetrySignal) as exc_info:
        raise RETRY

    assert exc_info.value is RETRY


def test_retry_sentinel_is_unique() -> None:
    from aretries.exceptions import RETRY as retry_sentinel

    assert retry_sentinel is RETRY
    assert RetrySignal("retry requested") is not RETRY
