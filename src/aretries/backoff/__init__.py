r"""Backoff strategies for computing the delay before the next attempt.

This package provides exponential, linear, Fibonacci, and constant backoff
patterns. Strategies are unit-agnostic; the ``backoff`` handler feeds them
milliseconds.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "FibonacciBackoff",
    "LinearBackoff",
]

from aretries.backoff.base import BaseBackoffStrategy
from aretries.backoff.constant import ConstantBackoff
from aretries.backoff.exponential import ExponentialBackoff
from aretries.backoff.fibonacci import FibonacciBackoff
from aretries.backoff.linear import LinearBackoff
