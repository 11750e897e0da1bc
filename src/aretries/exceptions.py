r"""Exceptions and sentinels used to steer a retry sequence."""

from __future__ import annotations

__all__ = ["RETRY", "RetrySignal"]


class RetrySignal(Exception):  # noqa: N818
    r"""Exception type of the ``RETRY`` sentinel.

    Raising ``RETRY`` from an action states explicitly that the attempt
    should be retried. Only the ``RETRY`` instance itself is recognized
    (by identity); other instances of this class are treated like any
    other error.
    """

    def __repr__(self) -> str:
        return "RETRY" if self is RETRY else super().__repr__()


RETRY = RetrySignal("retry requested")
