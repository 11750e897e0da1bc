r"""Fibonacci backoff strategy."""

from __future__ import annotations

__all__ = ["FibonacciBackoff"]

from aretries.backoff.base import BaseBackoffStrategy


class FibonacciBackoff(BaseBackoffStrategy):
    """Fibonacci backoff strategy.

    Calculates delay as: base_delay * fibonacci(attempt + 1), with optional
    max_delay cap. The sequence (1, 1, 2, 3, 5, 8, ...) ramps up more
    gradually than exponential growth.

    Args:
        base_delay: The delay unit (default: 100.0).
        max_delay: Optional cap for a single delay.

    Example:
        ```pycon
        >>> from aretries.backoff import FibonacciBackoff
        >>> backoff = FibonacciBackoff(base_delay=100.0)
        >>> [backoff.calculate(i) for i in range(6)]
        [100.0, 100.0, 200.0, 300.0, 500.0, 800.0]
        >>> FibonacciBackoff(base_delay=100.0, max_delay=1000.0).calculate(10)
        1000.0

        ```
    """

    def __init__(self, base_delay: float = 100.0, max_delay: float | None = None) -> None:
        super().__init__(base_delay=base_delay, max_delay=max_delay)

    @staticmethod
    def _fibonacci(n: int) -> int:
        """Return the nth Fibonacci number (1-indexed)."""
        if n <= 0:
            return 0
        a, b = 0, 1
        for _ in range(n - 1):
            a, b = b, a + b
        return b

    def calculate(self, attempt: int) -> float:
        try:
            delay = self.base_delay * self._fibonacci(attempt + 1)
        except OverflowError:
            delay = float("inf")
        return self._cap(delay)
