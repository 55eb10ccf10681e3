from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from feed_watcher.detection.models import FeedEntry


class EventKind(StrEnum):
    NEW_ITEMS = "new_items"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class NewItemsEvent:
    kind: ClassVar[EventKind] = EventKind.NEW_ITEMS

    feed_url: str
    feed_name: str
    entries: tuple[FeedEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class ErrorEvent:
    kind: ClassVar[EventKind] = EventKind.ERROR

    feed_url: str
    feed_name: str
    error: Exception


Event = NewItemsEvent | ErrorEvent
