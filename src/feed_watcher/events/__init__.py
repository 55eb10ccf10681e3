from feed_watcher.events.bus import EventBus, Handler
from feed_watcher.events.models import ErrorEvent, Event, EventKind, NewItemsEvent

__all__ = [
    "ErrorEvent",
    "Event",
    "EventBus",
    "EventKind",
    "Handler",
    "NewItemsEvent",
]
