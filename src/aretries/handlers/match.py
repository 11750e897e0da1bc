r"""Handlers that filter which errors are retried.

Filtering handlers belong at the start of a chain, so that a non-matching
error aborts before any delay is paid.
"""

from __future__ import annotations

__all__ = ["explicitly", "if_error_matches", "if_true"]

import inspect
from typing import TYPE_CHECKING, Any

from aretries.exceptions import RETRY
from aretries.utils.matching import is_match
from aretries.utils.validation import validate_callable

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping

    from aretries.state import RetryHandler, RetryState
    from aretries.utils.matching import MatchStrategy


def explicitly(error: BaseException, state: RetryState | None = None) -> None:  # noqa: ARG001
    """Retry only when the action raised the ``RETRY`` sentinel.

    Use it as a handler; any other error is re-raised and aborts.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretries import RETRY, explicitly, retry
        >>> calls = []
        >>> def poll():
        ...     calls.append(1)
        ...     if len(calls) < 2:
        ...         raise RETRY
        ...     return "ready"
        ...
        >>> asyncio.run(retry(poll, explicitly))
        'ready'

        ```
    """
    if error is not RETRY:
        raise error


def if_true(
    predicate: Callable[[BaseException, RetryState], bool | Awaitable[bool]],
) -> RetryHandler:
    """Create a handler that retries only while ``predicate`` holds.

    Args:
        predicate: Called with ``(error, state)``. May be sync or async.

    Returns:
        A handler that re-raises the error when the predicate is falsy.

    Raises:
        TypeError: If ``predicate`` is not callable.
    """
    validate_callable("predicate", predicate)

    async def if_true_handler(error: BaseException, state: RetryState) -> None:
        result = predicate(error, state)
        if inspect.isawaitable(result):
            result = await result
        if not result:
            raise error

    return if_true_handler


def if_error_matches(
    *matchers: type[BaseException] | Callable[[BaseException], bool] | Mapping[str, Any],
    match: MatchStrategy = is_match,
) -> RetryHandler:
    """Create a handler that retries only errors matching a matcher.

    The error only needs to match one of the matchers. A matcher can be:
    - an exception class: matches instances of that class.
    - a callable: called with the error, must return ``True`` on match.
    - anything else (typically a mapping): a partial shape compared
      against the error with ``match``.

    Args:
        *matchers: The matchers to try, in order.
        match: The partial matching strategy used for shape matchers.
            Defaults to ``is_match``, which needs ``coola`` installed.

    Returns:
        A handler that re-raises the error unchanged when nothing matches.

    Example:
        ```pycon
        >>> from aretries import if_error_matches
        >>> on_scaling = if_error_matches({"code": "DB_INSUFFICIENT_SCALE"})
        >>> on_network = if_error_matches(ConnectionError, TimeoutError)

        ```
    """
    validate_callable("match", match)

    def matches(error: BaseException) -> bool:
        for matcher in matchers:
            if isinstance(matcher, type):
                if isinstance(error, matcher):
                    return True
            elif callable(matcher):
                if matcher(error):
                    return True
            elif match(error, matcher):
                return True
        return False

    def if_error_matches_handler(error: BaseException, state: RetryState) -> None:  # noqa: ARG001
        if not matches(error):
            raise error

    return if_error_matches_handler
