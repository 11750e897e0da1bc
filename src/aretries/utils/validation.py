r"""Parameter validation for the handler factories.

The factories validate their arguments eagerly so that a misconfigured
policy fails when it is built rather than after the first failed attempt.
"""

from __future__ import annotations

__all__ = [
    "validate_backoff_params",
    "validate_callable",
    "validate_duration",
    "validate_max_tries",
]

from typing import Any


def validate_duration(name: str, value: float) -> None:
    """Validate a delay or deadline duration.

    Args:
        name: The parameter name used in the error message.
        value: The duration. Must be >= 0.

    Raises:
        ValueError: If the duration is negative.

    Example:
        ```pycon
        >>> from aretries.utils.validation import validate_duration
        >>> validate_duration("milliseconds", 250)
        >>> validate_duration("milliseconds", -1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: milliseconds must be >= 0, got -1

        ```
    """
    if value < 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValueError(msg)


def validate_max_tries(max_tries: int) -> None:
    """Validate an attempt limit.

    Args:
        max_tries: Maximum number of attempts. Must be >= 0.

    Raises:
        ValueError: If ``max_tries`` is negative.
    """
    if max_tries < 0:
        msg = f"max_tries must be >= 0, got {max_tries}"
        raise ValueError(msg)


def validate_callable(name: str, value: Any) -> None:
    """Raise ``TypeError`` if ``value`` cannot be called."""
    if not callable(value):
        msg = f"{name} must be callable, got {type(value).__name__}"
        raise TypeError(msg)


def validate_backoff_params(
    initial_delay: float,
    max_delay: float,
    max_attempts: int | None,
    time_multiple: float,
) -> None:
    """Validate exponential backoff parameters.

    Args:
        initial_delay: Delay after the first failure in milliseconds.
            Must be >= 0.
        max_delay: Cap for a single delay in milliseconds. Must be > 0.
        max_attempts: Attempt limit. Must be >= 0 if provided.
        time_multiple: Growth factor between delays. Must be > 0.

    Raises:
        ValueError: If any parameter is out of range.

    Example:
        ```pycon
        >>> from aretries.utils.validation import validate_backoff_params
        >>> validate_backoff_params(
        ...     initial_delay=100, max_delay=5000, max_attempts=5, time_multiple=2
        ... )

        ```
    """
    if initial_delay < 0:
        msg = f"initial_delay must be >= 0, got {initial_delay}"
        raise ValueError(msg)
    if max_delay <= 0:
        msg = f"max_delay must be > 0, got {max_delay}"
        raise ValueError(msg)
    if max_attempts is not None and max_attempts < 0:
        msg = f"max_attempts must be >= 0, got {max_attempts}"
        raise ValueError(msg)
    if time_multiple <= 0:
        msg = f"time_multiple must be > 0, got {time_multiple}"
        raise ValueError(msg)
