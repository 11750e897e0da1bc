r"""Structured logging utilities for machine-readable log output.

The formatter emits one JSON object per record. Records emitted while a
retry sequence is running (by the engine, a handler or the retried action
itself) automatically carry the attempt number and elapsed time of that
sequence, which makes it easy to group log lines per retry sequence in a
log aggregation system.

Structured logging is opt-in:

```python
import logging
from aretries.utils.structured_logging import StructuredFormatter

handler = logging.StreamHandler()
handler.setFormatter(StructuredFormatter())

logger = logging.getLogger("aretries")
logger.addHandler(handler)
logger.setLevel(logging.DEBUG)
```
"""

from __future__ import annotations

__all__ = ["StructuredFormatter", "log_structured"]

import json
import logging
import time
from typing import Any

from aretries.state import current_retry_state

# Attributes every LogRecord carries; anything else was passed via ``extra``
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Standard fields in the JSON output:
        - timestamp: ISO 8601 timestamp (UTC, millisecond precision)
        - level: Log level name
        - logger: Logger name
        - message: Log message
        - module / function / line: Origin of the record
        - retry_attempts: Attempt number of the active retry sequence
        - retry_elapsed: Seconds since the active sequence started

    The ``retry_*`` fields are only present when the record is emitted
    inside a retry sequence after its first failure. Fields passed via
    ``extra`` are included as-is; values that are not JSON serializable
    are rendered with ``repr``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from aretries.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("doctest_structured")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("Cache cleaned", extra={"entries": 3})
        >>> json.loads(stream.getvalue())["entries"]
        3

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        state = current_retry_state()
        if state is not None:
            log_data["retry_attempts"] = state.attempts
            log_data["retry_elapsed"] = round(state.elapsed, 3)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = value

        return json.dumps(log_data, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format the record creation time as ISO 8601, ignoring
        ``datefmt``."""
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log a message with structured data.

    Args:
        logger: Logger to use.
        level: Log level (e.g., ``logging.DEBUG``).
        message: Log message.
        **extra: Additional fields, rendered by ``StructuredFormatter``.
    """
    logger.log(level, message, extra=extra)
