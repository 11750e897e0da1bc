r"""Handlers limiting the number of attempts."""

from __future__ import annotations

__all__ = ["tries"]

from typing import TYPE_CHECKING

from aretries.utils.validation import validate_max_tries

if TYPE_CHECKING:
    from aretries.state import RetryHandler, RetryState


def tries(max_tries: int) -> RetryHandler:
    """Create a handler limiting the total number of attempts.

    The count includes the first attempt, so ``tries(1)`` disables
    retrying and ``tries(3)`` allows two retries.

    Args:
        max_tries: Maximum number of attempts. Must be >= 0.

    Returns:
        A handler that re-raises the error once ``max_tries`` attempts
        have failed.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretries import retry, tries
        >>> calls = []
        >>> async def always_fails():
        ...     calls.append(1)
        ...     raise ConnectionError("unreachable")
        ...
        >>> asyncio.run(retry(always_fails, tries(3)))  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ConnectionError: unreachable
        >>> len(calls)  # doctest: +SKIP
        3

        ```
    """
    validate_max_tries(max_tries)

    def tries_handler(error: BaseException, state: RetryState) -> None:
        if state.attempts >= max_tries:
            raise error

    return tries_handler
