from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from feed_watcher.events.models import EventKind
from feed_watcher.observability import get_logger

if TYPE_CHECKING:
    from feed_watcher.events.models import Event

logger = get_logger(__name__)

Handler = Callable[[Any], object]


class EventBus:
    """In-process publish/subscribe channel keyed by :class:`EventKind`.

    Handlers run sequentially on the publisher's task, in subscription order.
    Coroutine results are awaited before the next handler runs. A failing
    handler is logged and skipped.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventKind, list[Handler]] = {kind: [] for kind in EventKind}

    def subscribe(self, kind: EventKind, handler: Handler) -> Handler:
        if not callable(handler):
            msg = "handler must be callable"
            raise TypeError(msg)
        self._handlers[kind].append(handler)
        return handler

    def unsubscribe(self, kind: EventKind, handler: Handler) -> bool:
        handlers = self._handlers[kind]
        try:
            handlers.remove(handler)
        except ValueError:
            return False
        return True

    def handler_count(self, kind: EventKind) -> int:
        return len(self._handlers[kind])

    async def publish(self, event: Event) -> None:
        # snapshot so handlers may unsubscribe while being delivered to
        for handler in tuple(self._handlers[event.kind]):
            try:
                result = handler(event)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception(
                    "event_handler_failed",
                    kind=str(event.kind),
                    feed_url=event.feed_url,
                    handler=getattr(handler, "__qualname__", repr(handler)),
                )
