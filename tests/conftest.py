from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster.

    The delay handlers call ``asyncio.sleep`` with seconds, so a handler
    waiting 250ms is recorded as ``call(0.25)``.
    """
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_handler() -> Mock:
    """Create a synchronous handler that always permits a retry."""
    return Mock(return_value=None)
