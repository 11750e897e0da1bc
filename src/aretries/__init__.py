r"""aretries - Composable retries for asynchronous operations.

This package re-executes a fallible action according to a chain of
pluggable handlers. After every failure, each handler inspects the error
and the retry state, and either permits another attempt (returns
normally), replaces the error, waits, or aborts the sequence by raising.

Key Features:
    - ``retry(action, *handlers)``: the attempt loop
    - Filtering handlers: ``if_error_matches``, ``if_true``, ``explicitly``
    - Limits: ``tries``, ``deadline_ms``, ``deadline_sec``
    - Delays: ``delay_ms``, ``delay_sec``, ``exponential_backoff`` and
      ``backoff`` with constant, linear, Fibonacci or exponential strategies
    - Reusable, immutable policies: ``create``, ``RetryPolicy.prefix``,
      ``RetryPolicy.postfix`` and the ``retrying`` decorator

Example:
    ```pycon
    >>> import asyncio
    >>> from aretries import create, deadline_sec, exponential_backoff, if_error_matches
    >>> # Filtering & abort handlers first, time-based handlers last
    >>> retry_database_call = create(
    ...     if_error_matches({"code": "DB_INSUFFICIENT_SCALE"}),
    ...     deadline_sec(15),
    ...     exponential_backoff(max_delay=5000, jitter=True),
    ... )
    >>> async def get_account():
    ...     return {"id": "156"}
    ...
    >>> asyncio.run(retry_database_call(get_account))
    {'id': '156'}

    ```
"""

from __future__ import annotations

__all__ = [
    "RETRY",
    "ExponentialBackoffOptions",
    "RetryHandler",
    "RetryPolicy",
    "RetrySignal",
    "RetryState",
    "__version__",
    "aggregate_errors",
    "backoff",
    "create",
    "current_retry_state",
    "deadline_ms",
    "deadline_sec",
    "delay_ms",
    "delay_sec",
    "explicitly",
    "exponential_backoff",
    "if_error_matches",
    "if_true",
    "log_retry",
    "retry",
    "retrying",
    "tries",
]

from importlib.metadata import PackageNotFoundError, version

from aretries.config import ExponentialBackoffOptions
from aretries.engine import retry
from aretries.exceptions import RETRY, RetrySignal
from aretries.handlers import (
    aggregate_errors,
    backoff,
    deadline_ms,
    deadline_sec,
    delay_ms,
    delay_sec,
    explicitly,
    exponential_backoff,
    if_error_matches,
    if_true,
    log_retry,
    tries,
)
from aretries.policy import RetryPolicy, create, retrying
from aretries.state import RetryHandler, RetryState, current_retry_state

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
