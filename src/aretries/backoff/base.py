r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy maps the 0-indexed retry number to the delay to
    wait before that retry. Retry 0 follows the first failed attempt.

    Args:
        base_delay: The base delay. Must be non-negative.
        max_delay: Optional cap for a single delay. Must be positive if
            specified; ``math.inf`` means no cap.
    """

    def __init__(self, base_delay: float, max_delay: float | None = None) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the delay before a given retry.

        Args:
            attempt: The retry number (0-indexed). For example,
                attempt=0 is the first retry, attempt=1 is the second, etc.

        Returns:
            The delay before that retry.
        """

    def _cap(self, delay: float) -> float:
        if self.max_delay is not None:
            return min(delay, self.max_delay)
        return delay
