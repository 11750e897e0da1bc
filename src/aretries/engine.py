r"""Retry engine driving the attempt loop.

This module provides ``retry``, which invokes an action until it succeeds
or until one of the handlers in the chain aborts the sequence by raising.
"""

from __future__ import annotations

__all__ = ["retry", "run_handlers"]

import inspect
import logging
import time
from typing import TYPE_CHECKING, Any, TypeVar

from aretries.exceptions import RETRY
from aretries.state import RetryState, _reset_current_state, _set_current_state
from aretries.utils.validation import validate_callable

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from aretries.state import RetryHandler

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


async def retry(action: Callable[[], Awaitable[T] | T], *handlers: RetryHandler) -> T:
    """Invoke ``action`` until it succeeds or a handler aborts.

    After every failed attempt the handlers run in order, each one fully
    awaited before the next starts. A handler that returns normally
    permits another attempt; a handler that raises ends the whole
    sequence and its exception propagates to the caller. With no handlers
    the action is retried until it succeeds.

    The action is always attempted at least once. Only ``Exception``
    subclasses count as failures: cancellation and other
    ``BaseException``s raised by the action propagate unchanged.

    Args:
        action: A zero-argument callable. If it returns an awaitable, the
            awaitable is awaited and its result is the attempt outcome.
        *handlers: The decision chain, run after each failure with
            ``(state.error, state)``. Handlers may be sync or async.

    Returns:
        The value produced by the first successful attempt.

    Raises:
        TypeError: If ``action`` or a handler is not callable.
        BaseException: Whatever a handler raises to abort the sequence.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretries import retry, tries
        >>> calls = []
        >>> async def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("not yet")
        ...     return "ok"
        ...
        >>> asyncio.run(retry(flaky, tries(5)))
        'ok'
        >>> len(calls)
        3

        ```
    """
    validate_callable("action", action)
    for handler in handlers:
        validate_callable("handler", handler)

    start_time = time.time()
    errors: list[BaseException] = []
    state: RetryState | None = None
    token = None
    attempts = 1
    try:
        while True:
            try:
                result = action()
                if inspect.isawaitable(result):
                    result = await result
            except Exception as exc:  # noqa: BLE001
                if exc is RETRY:
                    # The sentinel is shared; drop the frames and context of this raise
                    exc.__traceback__ = None
                    exc.__context__ = None
                    exc.__cause__ = None
                error: BaseException = exc
            else:
                if attempts > 1:
                    logger.debug(f"Attempt {attempts} succeeded after {attempts - 1} failure(s)")
                return result

            errors.append(error)
            if state is None:
                state = RetryState(
                    error=error, attempts=attempts, start_time=start_time, errors=errors
                )
                token = _set_current_state(state)
            else:
                state.error = error
                state.attempts = attempts
            logger.debug(f"Attempt {attempts} failed: {type(error).__name__}: {error}")

            await run_handlers(handlers, state)
            attempts += 1
    finally:
        if token is not None:
            _reset_current_state(token)


async def run_handlers(handlers: Iterable[RetryHandler], state: RetryState) -> None:
    """Run a handler chain once against ``state``.

    Each handler is called with ``(state.error, state)`` and awaited if it
    returns an awaitable. After each handler returns, the last slot of
    ``state.errors`` is synchronized with ``state.error``. The first
    exception raised by a handler propagates and stops the chain.

    Args:
        handlers: The handlers to run, in order.
        state: The state of the current retry sequence.
    """
    for handler in handlers:
        try:
            outcome: Any = handler(state.error, state)
            if inspect.isawaitable(outcome):
                await outcome
        except BaseException as exc:
            logger.debug(
                f"Retry aborted by {_describe(handler)} after {state.attempts} attempt(s): "
                f"{type(exc).__name__}: {exc}"
            )
            raise
        state.errors[-1] = state.error


def _describe(handler: Any) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)
