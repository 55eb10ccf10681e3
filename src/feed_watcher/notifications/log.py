from feed_watcher.notifications.base import Notifier
from feed_watcher.notifications.models import Notification
from feed_watcher.observability import get_logger

logger = get_logger(__name__)


class LogNotifier(Notifier):
    """Writes each new entry to the structured log."""

    async def send(self, notification: Notification) -> None:
        for item in notification.items:
            logger.info("new_item", notification=notification.title, title=item.text, link=item.url)
