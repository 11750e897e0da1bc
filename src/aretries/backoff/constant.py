r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from aretries.backoff.base import BaseBackoffStrategy


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Returns the same delay for every retry, regardless of the retry number.

    Args:
        delay: The fixed delay (default: 100.0).

    Example:
        ```pycon
        >>> from aretries.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=250.0)
        >>> backoff.calculate(0)
        250.0
        >>> backoff.calculate(10)
        250.0

        ```
    """

    def __init__(self, delay: float = 100.0) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)
        super().__init__(base_delay=delay)

    @property
    def delay(self) -> float:
        return self.base_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        return self.base_delay
