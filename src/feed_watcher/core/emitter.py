from __future__ import annotations

from typing import TYPE_CHECKING, Any

from feed_watcher.core.scheduler import FeedPoller
from feed_watcher.detection.change_detector import ChangeDetector
from feed_watcher.events import EventBus, EventKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from feed_watcher.detection.change_detector import Fetcher
    from feed_watcher.detection.models import FeedEntry
    from feed_watcher.events import ErrorEvent, Handler, NewItemsEvent

DEFAULT_INTERVAL_SECONDS = 60


class FeedEmitter:
    """One watched feed: detector, event bus and poller wired together.

    ``on_new_items`` handlers receive the new entries newest-first;
    ``on_error`` handlers receive the exception raised by the fetch.
    Handlers may be plain functions or coroutine functions.
    """

    def __init__(
        self,
        url: str,
        *,
        fetcher: Fetcher,
        name: str | None = None,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        bus: EventBus | None = None,
    ) -> None:
        self._bus = bus or EventBus()
        self._detector = ChangeDetector(url, fetcher=fetcher, bus=self._bus, name=name)
        self._poller = FeedPoller(interval_seconds, self._detector)

    @property
    def url(self) -> str:
        return self._detector.url

    @property
    def name(self) -> str:
        return self._detector.name

    @name.setter
    def name(self, value: str) -> None:
        self._detector.name = value

    @property
    def detector(self) -> ChangeDetector:
        return self._detector

    @property
    def bus(self) -> EventBus:
        return self._bus

    @property
    def running(self) -> bool:
        return self._poller.running

    def on_new_items(self, handler: Callable[[tuple[FeedEntry, ...]], Any]) -> Handler:
        def deliver(event: NewItemsEvent) -> Any:
            return handler(event.entries)

        deliver.__qualname__ = getattr(handler, "__qualname__", deliver.__qualname__)
        return self._bus.subscribe(EventKind.NEW_ITEMS, deliver)

    def on_error(self, handler: Callable[[Exception], Any]) -> Handler:
        def deliver(event: ErrorEvent) -> Any:
            return handler(event.error)

        deliver.__qualname__ = getattr(handler, "__qualname__", deliver.__qualname__)
        return self._bus.subscribe(EventKind.ERROR, deliver)

    def remove_handler(self, handler: Handler) -> bool:
        return any(self._bus.unsubscribe(kind, handler) for kind in EventKind)

    async def poll(self) -> None:
        await self._detector.poll()

    async def new_items_after(self, guid: str) -> tuple[FeedEntry, ...]:
        return await self._detector.new_items_after(guid)

    async def start(self) -> None:
        await self._poller.start()

    async def shutdown(self) -> None:
        await self._poller.shutdown()
