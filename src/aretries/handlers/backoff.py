r"""Handlers that wait an increasing amount of time between attempts."""

from __future__ import annotations

__all__ = ["backoff", "exponential_backoff"]

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from aretries.backoff.base import BaseBackoffStrategy
from aretries.backoff.exponential import ExponentialBackoff
from aretries.config import ExponentialBackoffOptions
from aretries.utils.sleep import apply_jitter, sleep_ms

if TYPE_CHECKING:
    from aretries.state import RetryHandler, RetryState

logger: logging.Logger = logging.getLogger(__name__)


def backoff(
    strategy: BaseBackoffStrategy,
    *,
    max_attempts: int | None = None,
    jitter: bool = False,
) -> RetryHandler:
    """Create a handler that sleeps according to a backoff strategy.

    After the Nth failed attempt the handler sleeps
    ``strategy.calculate(N - 1)`` milliseconds, scaled by a uniform random
    value in ``[0, 1)`` when ``jitter`` is enabled.

    Args:
        strategy: The strategy computing the delay in milliseconds.
        max_attempts: If set, re-raise the error instead of sleeping once
            this many attempts have failed.
        jitter: Whether to apply full jitter to every delay.

    Returns:
        A handler that sleeps, or aborts once ``max_attempts`` is reached.

    Raises:
        TypeError: If ``strategy`` is not a ``BaseBackoffStrategy``.
        ValueError: If ``max_attempts`` is negative.

    Example:
        ```pycon
        >>> from aretries import backoff, create, if_error_matches
        >>> from aretries.backoff import FibonacciBackoff
        >>> policy = create(
        ...     if_error_matches(ConnectionError),
        ...     backoff(FibonacciBackoff(base_delay=50.0), max_attempts=8),
        ... )

        ```
    """
    if not isinstance(strategy, BaseBackoffStrategy):
        msg = f"strategy must be a BaseBackoffStrategy, got {type(strategy).__name__}"
        raise TypeError(msg)
    if max_attempts is not None and max_attempts < 0:
        msg = f"max_attempts must be >= 0, got {max_attempts}"
        raise ValueError(msg)

    async def backoff_handler(error: BaseException, state: RetryState) -> None:
        if max_attempts is not None and state.attempts >= max_attempts:
            logger.debug(f"Backoff gave up after {state.attempts} attempt(s)")
            raise error
        delay = strategy.calculate(state.attempts - 1)
        if jitter:
            delay = apply_jitter(delay)
        await sleep_ms(delay)

    return backoff_handler


def exponential_backoff(
    options: ExponentialBackoffOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> RetryHandler:
    """Create a handler retrying with exponentially increasing delays.

    After the Nth failed attempt the handler sleeps
    ``min(initial_delay * time_multiple ** (N - 1), max_delay)``
    milliseconds (times a random factor in ``[0, 1)`` with ``jitter``),
    and aborts once ``max_attempts`` attempts have failed.

    Args:
        options: An ``ExponentialBackoffOptions`` or a mapping of option
            names to values. Missing options take their defaults.
        **overrides: Option values overriding those in ``options``.

    Returns:
        The backoff handler.

    Raises:
        TypeError: If an unknown option is given.
        ValueError: If an option value is out of range.

    Example:
        ```pycon
        >>> from aretries import exponential_backoff
        >>> handler = exponential_backoff(max_delay=5000, jitter=True)
        >>> handler = exponential_backoff({"initial_delay": 1000})

        ```
    """
    if isinstance(options, Mapping):
        overrides = {**options, **overrides}
        options = None
    resolved = options if options is not None else ExponentialBackoffOptions()
    if overrides:
        resolved = replace(resolved, **overrides)

    strategy = ExponentialBackoff(
        base_delay=resolved.initial_delay,
        max_delay=resolved.max_delay,
        multiplier=resolved.time_multiple,
    )
    return backoff(strategy, max_attempts=resolved.max_attempts, jitter=resolved.jitter)
