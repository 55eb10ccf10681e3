from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from feed_watcher.events import NewItemsEvent

_UNTITLED = "(untitled)"


@dataclass(frozen=True, slots=True)
class NotificationItem:
    text: str
    url: str | None = None


@dataclass(frozen=True, slots=True)
class Notification:
    title: str
    items: tuple[NotificationItem, ...] = field(default_factory=tuple)

    @classmethod
    def from_new_items(cls, event: NewItemsEvent) -> Notification:
        count = len(event.entries)
        noun = "entry" if count == 1 else "entries"
        items = tuple(NotificationItem(text=entry.title or entry.guid or _UNTITLED, url=entry.link) for entry in event.entries)
        return cls(title=f"{count} new {noun}: {event.feed_name}", items=items)
