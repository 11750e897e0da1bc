r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from aretries.backoff.base import BaseBackoffStrategy


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (multiplier ** attempt), with
    optional max_delay cap.

    Args:
        base_delay: The delay before the first retry (default: 100.0).
        max_delay: Optional cap for a single delay.
        multiplier: Growth factor between consecutive delays
            (default: 2.0). Must be positive.

    Example:
        ```pycon
        >>> from aretries.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=100.0)
        >>> backoff.calculate(0)
        100.0
        >>> backoff.calculate(1)
        200.0
        >>> backoff.calculate(2)
        400.0
        >>> backoff = ExponentialBackoff(base_delay=100.0, max_delay=250.0, multiplier=3.0)
        >>> backoff.calculate(1)  # Would be 300.0, but capped
        250.0

        ```
    """

    def __init__(
        self,
        base_delay: float = 100.0,
        max_delay: float | None = None,
        multiplier: float = 2.0,
    ) -> None:
        if multiplier <= 0:
            msg = f"multiplier must be positive, got {multiplier}"
            raise ValueError(msg)
        super().__init__(base_delay=base_delay, max_delay=max_delay)
        self.multiplier = multiplier

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay}, multiplier={self.multiplier})"
        )

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The retry number (0-indexed).

        Returns:
            base_delay * (multiplier ** attempt), capped at max_delay
            if set.
        """
        try:
            delay = self.base_delay * (self.multiplier**attempt)
        except OverflowError:
            delay = float("inf")
        return self._cap(delay)
