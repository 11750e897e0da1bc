r"""Handlers reporting on a retry sequence without steering it."""

from __future__ import annotations

__all__ = ["aggregate_errors", "log_retry"]

import logging
from typing import TYPE_CHECKING

from aretries.engine import run_handlers
from aretries.utils.validation import validate_callable

if TYPE_CHECKING:
    from aretries.state import RetryHandler, RetryState


def log_retry(
    logger: logging.Logger | None = None,
    level: int = logging.WARNING,
) -> RetryHandler:
    """Create a handler that logs every failed attempt.

    The handler always permits a retry. Place it after the filtering
    handlers so that only retried failures are logged.

    Args:
        logger: The logger to use. Defaults to the ``aretries.handlers.observe``
            logger.
        level: The log level of the records.

    Returns:
        The logging handler.
    """
    target = logger if logger is not None else logging.getLogger(__name__)

    def log_retry_handler(error: BaseException, state: RetryState) -> None:
        target.log(
            level,
            f"Attempt {state.attempts} failed after {state.elapsed:.2f}s: "
            f"{type(error).__name__}: {error}",
        )

    return log_retry_handler


def aggregate_errors(
    *handlers: RetryHandler,
    message: str = "all attempts failed",
) -> RetryHandler:
    """Wrap handlers so that an abort reports every error seen.

    The wrapped handlers run in order, like in the engine. If one of them
    raises an ``Exception``, an ``ExceptionGroup`` holding the errors of
    all failed attempts is raised instead, chained from the original
    exception.

    Args:
        *handlers: The handlers to wrap.
        message: The message of the exception group.

    Returns:
        The wrapping handler.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretries import aggregate_errors, retry, tries
        >>> async def always_fails():
        ...     raise ConnectionError("unreachable")
        ...
        >>> asyncio.run(retry(always_fails, aggregate_errors(tries(2))))  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ExceptionGroup: all attempts failed (2 sub-exceptions)

        ```
    """
    for handler in handlers:
        validate_callable("handler", handler)

    async def aggregate_errors_handler(error: BaseException, state: RetryState) -> None:  # noqa: ARG001
        try:
            await run_handlers(handlers, state)
        except Exception as exc:
            raise ExceptionGroup(message, list(state.errors)) from exc

    return aggregate_errors_handler
