r"""Default values and option objects for the built-in handlers.

All durations are expressed in milliseconds.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_INITIAL_DELAY_MS",
    "DEFAULT_JITTER",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY_MS",
    "DEFAULT_TIME_MULTIPLE",
    "ExponentialBackoffOptions",
]

import math
from dataclasses import dataclass

from aretries.utils.validation import validate_backoff_params

# Delay after the first failure
DEFAULT_INITIAL_DELAY_MS = 100.0

# No cap on individual delays
DEFAULT_MAX_DELAY_MS = math.inf

# Attempt number at which exponential backoff gives up
DEFAULT_MAX_ATTEMPTS = 10

DEFAULT_TIME_MULTIPLE = 2.0

DEFAULT_JITTER = False


@dataclass(frozen=True)
class ExponentialBackoffOptions:
    """Options for ``exponential_backoff``.

    Attributes:
        jitter: If ``True``, each delay is multiplied by a uniform random
            value in ``[0, 1)`` ("full jitter").
        max_delay: Cap for a single delay in milliseconds.
        initial_delay: Delay after the first failure in milliseconds.
            Grows by ``time_multiple`` after every further failure.
        max_attempts: Abort once this many attempts have failed.
        time_multiple: Multiplier applied to the delay for each
            subsequent attempt.

    Raises:
        ValueError: If any option is out of range.

    Example:
        ```pycon
        >>> from aretries.config import ExponentialBackoffOptions
        >>> options = ExponentialBackoffOptions(initial_delay=1000.0, jitter=True)
        >>> options.max_attempts
        10

        ```
    """

    jitter: bool = DEFAULT_JITTER
    max_delay: float = DEFAULT_MAX_DELAY_MS
    initial_delay: float = DEFAULT_INITIAL_DELAY_MS
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    time_multiple: float = DEFAULT_TIME_MULTIPLE

    def __post_init__(self) -> None:
        validate_backoff_params(
            initial_delay=self.initial_delay,
            max_delay=self.max_delay,
            max_attempts=self.max_attempts,
            time_multiple=self.time_multiple,
        )
