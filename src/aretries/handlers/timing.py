r"""Handlers based on wall-clock time: fixed delays and deadlines.

Time-based handlers belong at the end of a chain. Deadlines never
interrupt an attempt in flight; they only prevent the next attempt.
"""

from __future__ import annotations

__all__ = ["deadline_ms", "deadline_sec", "delay_ms", "delay_sec"]

import logging
import time
from typing import TYPE_CHECKING

from aretries.utils.sleep import sleep_ms
from aretries.utils.validation import validate_duration

if TYPE_CHECKING:
    from aretries.state import RetryHandler, RetryState

logger: logging.Logger = logging.getLogger(__name__)


def delay_ms(milliseconds: float) -> RetryHandler:
    """Create a handler that waits a fixed time in milliseconds.

    Args:
        milliseconds: The delay before the next attempt. Must be >= 0.

    Returns:
        A handler that always permits a retry after sleeping.
    """
    validate_duration("milliseconds", milliseconds)

    async def delay_handler(error: BaseException, state: RetryState) -> None:  # noqa: ARG001
        await sleep_ms(milliseconds)

    return delay_handler


def delay_sec(seconds: float) -> RetryHandler:
    """Create a handler that waits a fixed time in seconds."""
    validate_duration("seconds", seconds)
    return delay_ms(seconds * 1e3)


def deadline_ms(milliseconds: float) -> RetryHandler:
    """Create a handler that stops retrying once a total time has elapsed.

    The elapsed time is measured from the start of the first attempt.
    Note that an attempt already running is never cancelled: the deadline
    is only checked after an attempt has failed.

    Args:
        milliseconds: The time budget in milliseconds. Must be >= 0.

    Returns:
        A handler that re-raises the error once the budget is exceeded.

    Example:
        ```pycon
        >>> from aretries import create, deadline_sec, delay_ms
        >>> policy = create(deadline_sec(15), delay_ms(500))

        ```
    """
    validate_duration("milliseconds", milliseconds)

    def deadline_handler(error: BaseException, state: RetryState) -> None:
        elapsed = (time.time() - state.start_time) * 1e3
        if elapsed > milliseconds:
            logger.debug(f"Deadline of {milliseconds:.0f}ms exceeded ({elapsed:.0f}ms elapsed)")
            raise error

    return deadline_handler


def deadline_sec(seconds: float) -> RetryHandler:
    """Create a handler that stops retrying once ``seconds`` have elapsed."""
    validate_duration("seconds", seconds)
    return deadline_ms(seconds * 1e3)
