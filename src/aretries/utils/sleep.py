r"""Asynchronous sleep and delay helpers used by the delay handlers."""

from __future__ import annotations

__all__ = ["apply_jitter", "sleep_ms"]

import asyncio
import logging
import random

logger: logging.Logger = logging.getLogger(__name__)


async def sleep_ms(milliseconds: float) -> None:
    """Suspend the current task for the given number of milliseconds.

    The sleep cannot be interrupted by the retry engine; cancelling the
    surrounding task cancels it as usual.

    Args:
        milliseconds: The duration to wait. Values <= 0 still yield to
            the event loop once.
    """
    logger.debug(f"Waiting {milliseconds:.2f}ms before next attempt")
    await asyncio.sleep(max(milliseconds, 0.0) / 1e3)


def apply_jitter(delay: float) -> float:
    """Scale ``delay`` by a uniform random value in ``[0, 1)``.

    This is the "full jitter" scheme: the actual wait is anywhere between
    zero and the computed delay.

    Args:
        delay: The computed delay.

    Returns:
        The jittered delay.

    Example:
        ```pycon
        >>> from aretries.utils.sleep import apply_jitter
        >>> 0.0 <= apply_jitter(100.0) < 100.0
        True

        ```
    """
    return delay * random.random()  # noqa: S311
