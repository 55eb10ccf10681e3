from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from feed_watcher.notifications.models import Notification

if TYPE_CHECKING:
    from feed_watcher.events import NewItemsEvent


class Notifier(ABC):
    @abstractmethod
    async def send(self, notification: Notification) -> None: ...

    async def __call__(self, event: NewItemsEvent) -> None:
        """Event-bus handler entry point for new-items events."""
        await self.send(Notification.from_new_items(event))
