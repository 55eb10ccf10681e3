from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from feed_watcher.detection import FeedFetcher, HttpFetcher

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@pytest.fixture
async def client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(timeout=httpx.Timeout(5.0)) as client:
        yield client


@pytest.fixture
def feed_fetcher(client: httpx.AsyncClient) -> FeedFetcher:
    return FeedFetcher(HttpFetcher(client))
