from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from feed_watcher.detection.feed.parser import parse_feed
from feed_watcher.observability import get_logger

if TYPE_CHECKING:
    from feed_watcher.detection.http_fetcher import HttpFetcher
    from feed_watcher.detection.models import FeedEntry

logger = get_logger(__name__)


class FeedFetchError(Exception):
    """Raised when a feed cannot be retrieved or parsed."""

    def __init__(self, url: str, reason: str, *, status_code: int | None = None) -> None:
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"{reason}: {url}")


class FeedFetcher:
    def __init__(self, http_fetcher: HttpFetcher) -> None:
        self._http_fetcher = http_fetcher

    async def fetch(self, url: str) -> tuple[FeedEntry, ...]:
        try:
            result = await self._http_fetcher.fetch(url)
        except httpx.HTTPError as exc:
            msg = f"request failed ({type(exc).__name__})"
            raise FeedFetchError(url, msg) from exc

        if not result.ok:
            msg = f"unexpected status {result.status_code}"
            raise FeedFetchError(url, msg, status_code=result.status_code)

        parsed = parse_feed(result.content, url)
        if parsed is None:
            msg = "unparseable feed"
            raise FeedFetchError(url, msg, status_code=result.status_code)

        logger.debug("feed_fetched", url=url, entries=len(parsed.entries))
        return parsed.entries
