r"""Linear backoff strategy."""

from __future__ import annotations

__all__ = ["LinearBackoff"]

from aretries.backoff.base import BaseBackoffStrategy


class LinearBackoff(BaseBackoffStrategy):
    """Linear backoff strategy.

    Calculates delay as: base_delay * (attempt + 1), with optional
    max_delay cap.

    Args:
        base_delay: The delay before the first retry (default: 100.0).
        max_delay: Optional cap for a single delay.

    Example:
        ```pycon
        >>> from aretries.backoff import LinearBackoff
        >>> backoff = LinearBackoff(base_delay=100.0)
        >>> backoff.calculate(0)
        100.0
        >>> backoff.calculate(2)
        300.0
        >>> LinearBackoff(base_delay=200.0, max_delay=500.0).calculate(5)
        500.0

        ```
    """

    def __init__(self, base_delay: float = 100.0, max_delay: float | None = None) -> None:
        super().__init__(base_delay=base_delay, max_delay=max_delay)

    def calculate(self, attempt: int) -> float:
        return self._cap(self.base_delay * (attempt + 1))
