from feed_watcher.notifications.base import Notifier
from feed_watcher.notifications.log import LogNotifier
from feed_watcher.notifications.models import Notification, NotificationItem
from feed_watcher.notifications.slack import SlackNotifier

__all__ = ["LogNotifier", "Notification", "NotificationItem", "Notifier", "SlackNotifier"]
