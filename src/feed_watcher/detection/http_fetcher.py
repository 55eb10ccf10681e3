import time
from dataclasses import dataclass
from email.utils import parsedate_to_datetime
from enum import StrEnum
from http import HTTPStatus

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from feed_watcher.observability import get_logger

logger = get_logger(__name__)


class HTTPHeader(StrEnum):
    ACCEPT = "Accept"
    RETRY_AFTER = "Retry-After"


FEED_ACCEPT = "application/rss+xml, application/atom+xml, application/xml;q=0.9, text/xml;q=0.8, */*;q=0.5"


class RetriableHTTPError(Exception):
    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        super().__init__(f"Retriable HTTP error: {response.status_code}")


@dataclass(frozen=True, slots=True)
class FetchResult:
    url: str
    status_code: int
    content: str

    @property
    def ok(self) -> bool:
        return HTTPStatus.OK <= self.status_code < HTTPStatus.MULTIPLE_CHOICES


_MAX_ATTEMPTS = 3
_DEFAULT_RETRY_AFTER = 60.0
_exponential_backoff = wait_exponential(multiplier=1, min=1, max=60)


def parse_retry_after(header: str) -> float:
    try:
        return max(0.0, float(header))
    except ValueError:
        pass
    try:
        return max(0.0, parsedate_to_datetime(header).timestamp() - time.time())
    except (ValueError, TypeError):
        return _DEFAULT_RETRY_AFTER


def wait_strategy(retry_state: RetryCallState) -> float:
    outcome = retry_state.outcome
    exc = outcome.exception() if outcome is not None else None
    if isinstance(exc, RetriableHTTPError) and exc.response.status_code == HTTPStatus.TOO_MANY_REQUESTS:
        retry_after = exc.response.headers.get(HTTPHeader.RETRY_AFTER)
        return _DEFAULT_RETRY_AFTER if retry_after is None else parse_retry_after(retry_after)
    return float(_exponential_backoff(retry_state=retry_state))


def _is_retriable_status(status_code: int) -> bool:
    return status_code == HTTPStatus.TOO_MANY_REQUESTS or status_code >= HTTPStatus.INTERNAL_SERVER_ERROR


class HttpFetcher:
    """GET with retries on timeouts, 5xx and 429.

    A retriable status that persists after the last attempt is returned as a
    normal :class:`FetchResult`; transport errors are re-raised.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch(self, url: str) -> FetchResult:
        headers = {HTTPHeader.ACCEPT: FEED_ACCEPT}
        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception_type((httpx.TimeoutException, RetriableHTTPError)),
                wait=wait_strategy,
                stop=stop_after_attempt(_MAX_ATTEMPTS),
                reraise=True,
            ):
                with attempt:
                    response = await self._client.get(url, headers=headers, follow_redirects=True)
                    if _is_retriable_status(response.status_code):
                        logger.debug("fetch_retrying", url=url, status_code=response.status_code)
                        raise RetriableHTTPError(response)
        except RetriableHTTPError as exc:
            response = exc.response

        return FetchResult(url=url, status_code=response.status_code, content=response.text)
