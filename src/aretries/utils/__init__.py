r"""Utility functions shared by the retry engine and the handlers.

This package provides parameter validation, deep partial matching of
errors, asynchronous sleep helpers, and opt-in structured logging.
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "apply_jitter",
    "is_match",
    "log_structured",
    "sleep_ms",
    "validate_backoff_params",
    "validate_callable",
    "validate_duration",
    "validate_max_tries",
]

from aretries.utils.matching import is_match
from aretries.utils.sleep import apply_jitter, sleep_ms
from aretries.utils.structured_logging import StructuredFormatter, log_structured
from aretries.utils.validation import (
    validate_backoff_params,
    validate_callable,
    validate_duration,
    validate_max_tries,
)
