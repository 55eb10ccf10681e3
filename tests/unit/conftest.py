from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, patch

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def _no_sleep() -> Generator[None, None, None]:
    """Disable asyncio.sleep in unit tests so retry backoff does not slow them down."""
    with patch("asyncio.sleep", new_callable=AsyncMock):
        yield
