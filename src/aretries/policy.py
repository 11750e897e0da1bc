r"""Reusable retry policies.

A ``RetryPolicy`` freezes a chain of handlers so the same retry behavior
can be shared by many call sites. Policies are immutable: ``prefix`` and
``postfix`` derive new policies and leave the original untouched, so a base
policy can serve as a template customized per call site.
"""

from __future__ import annotations

__all__ = ["RetryPolicy", "create", "retrying"]

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from aretries.engine import retry
from aretries.utils.validation import validate_callable

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Sequence

    from aretries.state import RetryHandler

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """An immutable, reusable retry behavior.

    Calling the policy with an action (and optional extra handlers) runs
    ``retry`` with ``prefix_handlers + extra handlers + postfix_handlers``.

    Attributes:
        prefix_handlers: Handlers run before the per-call handlers.
        postfix_handlers: Handlers run after the per-call handlers.

    Example:
        ```pycon
        >>> from aretries import create, delay_ms, if_error_matches, tries
        >>> retry_db_call = create(if_error_matches({"code": "DB_INSUFFICIENT_SCALE"}), tries(5))
        >>> slow_db_call = retry_db_call.postfix(delay_ms(1000))
        >>> len(retry_db_call.postfix_handlers), len(slow_db_call.postfix_handlers)
        (0, 1)

        ```
    """

    prefix_handlers: tuple[RetryHandler, ...] = ()
    postfix_handlers: tuple[RetryHandler, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "prefix_handlers", tuple(self.prefix_handlers))
        object.__setattr__(self, "postfix_handlers", tuple(self.postfix_handlers))
        for handler in (*self.prefix_handlers, *self.postfix_handlers):
            validate_callable("handler", handler)

    async def __call__(self, action: Callable[[], Awaitable[T] | T], *handlers: RetryHandler) -> T:
        """Run ``action`` with this policy and optional infix handlers."""
        return await retry(action, *self.prefix_handlers, *handlers, *self.postfix_handlers)

    @property
    def handlers(self) -> tuple[RetryHandler, ...]:
        """The full chain when no infix handlers are given."""
        return (*self.prefix_handlers, *self.postfix_handlers)

    def prefix(self, *handlers: RetryHandler) -> RetryPolicy:
        """Return a new policy with ``handlers`` appended to the prefix
        segment."""
        return RetryPolicy((*self.prefix_handlers, *handlers), self.postfix_handlers)

    def postfix(self, *handlers: RetryHandler) -> RetryPolicy:
        """Return a new policy with ``handlers`` appended to the postfix
        segment."""
        return RetryPolicy(self.prefix_handlers, (*self.postfix_handlers, *handlers))

    def decorate(self, func: Callable[..., Awaitable[T] | T]) -> Callable[..., Awaitable[T]]:
        """Wrap ``func`` so that every call is retried with this policy.

        Args:
            func: A sync or async function.

        Returns:
            An async function with the same signature as ``func``.

        Example:
            ```pycon
            >>> import asyncio
            >>> from aretries import create, tries
            >>> calls = []
            >>> @create(tries(3)).decorate
            ... async def fetch(key):
            ...     calls.append(key)
            ...     if len(calls) < 2:
            ...         raise ConnectionError(key)
            ...     return key.upper()
            ...
            >>> asyncio.run(fetch("abc"))
            'ABC'

            ```
        """
        validate_callable("func", func)

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            return await self(functools.partial(func, *args, **kwargs))

        return wrapper


def create(*args: Any) -> RetryPolicy:
    """Create a reusable retry policy.

    Two call forms are supported:
    - ``create(h1, h2, ...)``: the handlers form the prefix segment.
    - ``create([h1, h2], [h3])``: explicit prefix and (optional) postfix
      segments, given as lists or tuples.

    Args:
        *args: Either handlers, or a prefix sequence optionally followed
            by a postfix sequence (or ``None``).

    Returns:
        The new policy.

    Raises:
        TypeError: If the arguments do not follow one of the two forms,
            or if a handler is not callable.

    Example:
        ```pycon
        >>> from aretries import create, deadline_sec, exponential_backoff, if_error_matches
        >>> retry_database_call = create(
        ...     if_error_matches({"code": "DB_INSUFFICIENT_SCALE"}),
        ...     deadline_sec(15),
        ...     exponential_backoff(max_delay=5000, jitter=True),
        ... )

        ```
    """
    if args and isinstance(args[0], (list, tuple)):
        if len(args) > 2:
            msg = f"create() takes at most 2 handler sequences, got {len(args)} arguments"
            raise TypeError(msg)
        postfix = args[1] if len(args) == 2 else None
        if postfix is not None and not isinstance(postfix, (list, tuple)):
            msg = f"postfix handlers must be a list or tuple, got {type(postfix).__name__}"
            raise TypeError(msg)
        return RetryPolicy(tuple(args[0]), tuple(postfix or ()))
    return RetryPolicy(tuple(args))


def retrying(
    *handlers: RetryHandler | Sequence[RetryHandler] | None,
) -> Callable[[Callable[..., Awaitable[T] | T]], Callable[..., Awaitable[T]]]:
    """Decorator retrying every call of the decorated function.

    Accepts the same arguments as ``create``.

    Example:
        ```pycon
        >>> from aretries import delay_ms, retrying, tries
        >>> @retrying(tries(5), delay_ms(100))
        ... async def cleanup_cache():
        ...     pass
        ...

        ```
    """
    return create(*handlers).decorate
