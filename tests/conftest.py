from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> AsyncMock:
    """Create a sleep function resolving instantly."""
    return AsyncMock(return_value=None)


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", new_callable=AsyncMock, return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_emitter() -> Mock:
    """Create an object satisfying the Notifiable protocol."""
    return Mock(spec=["emit"])


@pytest.fixture
def always_retry() -> Mock:
    """Create a predicate approving every retry."""
    return Mock(return_value=True)


@pytest.fixture
def never_retry() -> Mock:
    """Create a predicate declining every retry."""
    return Mock(return_value=False)
