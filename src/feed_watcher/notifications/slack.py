from http import HTTPStatus

import httpx
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from feed_watcher.config.models import SlackConfig
from feed_watcher.notifications.base import Notifier
from feed_watcher.notifications.models import Notification, NotificationItem
from feed_watcher.observability import get_logger

logger = get_logger(__name__)

# Slack rejects messages with more than 50 blocks
_MAX_ITEM_BLOCKS = 45


class SlackNotifier(Notifier):
    def __init__(self, client: httpx.AsyncClient, config: SlackConfig) -> None:
        self._client = client
        self._config = config

    async def send(self, notification: Notification) -> None:
        payload = self._build_payload(notification)

        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type((httpx.TimeoutException, httpx.HTTPStatusError)),
            wait=wait_exponential(multiplier=1, max=60),
            stop=stop_after_attempt(3),
            reraise=True,
        ):
            with attempt:
                response = await self._client.post(self._config.webhook_url, json=payload)
                if response.status_code >= HTTPStatus.INTERNAL_SERVER_ERROR:
                    logger.warning("slack_send_failed", status_code=response.status_code)
                    response.raise_for_status()

        if response.status_code >= HTTPStatus.BAD_REQUEST:
            logger.error("slack_send_failed", status_code=response.status_code, reason=response.text)
            response.raise_for_status()

        logger.info("slack_send_succeeded", items=len(notification.items))

    @staticmethod
    def _format_item(item: NotificationItem) -> str:
        if item.url is None:
            return item.text
        return f"<{item.url}|{item.text}>"

    @classmethod
    def _build_payload(cls, notification: Notification) -> dict[str, object]:
        blocks: list[dict[str, object]] = [
            {"type": "header", "text": {"type": "plain_text", "text": notification.title}},
        ]
        shown = notification.items[:_MAX_ITEM_BLOCKS]
        blocks.extend({"type": "section", "text": {"type": "mrkdwn", "text": cls._format_item(item)}} for item in shown)
        hidden = len(notification.items) - len(shown)
        if hidden > 0:
            blocks.append({"type": "context", "elements": [{"type": "mrkdwn", "text": f"and {hidden} more"}]})
        return {"text": notification.title, "blocks": blocks}
