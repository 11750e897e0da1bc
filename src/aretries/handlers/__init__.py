r"""Built-in retry handlers.

Every factory in this package returns a handler, i.e. a callable taking
``(error, state)`` that returns normally to permit another attempt or
raises to abort the retry sequence. Handlers compose by position in the
chain: put filtering handlers (``if_error_matches``, ``if_true``,
``explicitly``, ``tries``, ``deadline_*``) before time-based ones
(``delay_*``, ``backoff``, ``exponential_backoff``).
"""

from __future__ import annotations

__all__ = [
    "aggregate_errors",
    "backoff",
    "deadline_ms",
    "deadline_sec",
    "delay_ms",
    "delay_sec",
    "explicitly",
    "exponential_backoff",
    "if_error_matches",
    "if_true",
    "log_retry",
    "tries",
]

from aretries.handlers.backoff import backoff, exponential_backoff
from aretries.handlers.limits import tries
from aretries.handlers.match import explicitly, if_error_matches, if_true
from aretries.handlers.observe import aggregate_errors, log_retry
from aretries.handlers.timing import deadline_ms, deadline_sec, delay_ms, delay_sec
