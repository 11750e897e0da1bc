r"""Retry state shared by the engine and the handler chain.

A ``RetryState`` is created once per call to ``retry`` and threaded through
every handler after every failed attempt. Handlers may read it to make
decisions and may overwrite ``error`` to replace or wrap the failure.
"""

from __future__ import annotations

__all__ = ["RetryHandler", "RetryState", "current_retry_state"]

import contextvars
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, TypeAlias


@dataclass
class RetryState:
    """Mutable record describing one logical retry sequence.

    Attributes:
        error: The most recent failure. Handlers can reassign it to
            replace or wrap the error seen by later handlers and by the
            caller.
        attempts: The number of the attempt that just failed (1-indexed).
        start_time: Timestamp (``time.time()``) taken when the first
            attempt started.
        errors: Errors of all failed attempts so far, oldest first. The
            last slot is kept in sync with ``error`` while the handler
            chain runs.

    Example:
        ```pycon
        >>> from aretries.state import RetryState
        >>> state = RetryState(error=ValueError("boom"), attempts=1, start_time=0.0)
        >>> state.attempts
        1
        >>> state.errors
        []

        ```
    """

    error: BaseException
    attempts: int
    start_time: float
    errors: list[BaseException] = field(default_factory=list)

    @property
    def elapsed(self) -> float:
        """Seconds elapsed since the first attempt started."""
        return time.time() - self.start_time


RetryHandler: TypeAlias = Callable[[BaseException, RetryState], "Awaitable[None] | None"]

_current_state: contextvars.ContextVar[RetryState | None] = contextvars.ContextVar(
    "retry_state", default=None
)


def current_retry_state() -> RetryState | None:
    """Return the state of the retry sequence running in this context.

    The state is only available once the first attempt has failed, and
    only inside the task that runs ``retry``.

    Returns:
        The active ``RetryState``, or ``None`` outside a retry sequence
        or before its first failure.
    """
    return _current_state.get()


def _set_current_state(state: RetryState | None) -> contextvars.Token[Any]:
    return _current_state.set(state)


def _reset_current_state(token: contextvars.Token[Any]) -> None:
    _current_state.reset(token)
