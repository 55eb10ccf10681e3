from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Protocol

from feed_watcher.detection.models import FeedState
from feed_watcher.events import ErrorEvent, EventBus, NewItemsEvent
from feed_watcher.observability import feed_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from feed_watcher.detection.models import FeedEntry


class Fetcher(Protocol):
    async def fetch(self, url: str) -> Sequence[FeedEntry]: ...


def _index_of(entries: Sequence[FeedEntry], guid: str) -> int | None:
    for index, entry in enumerate(entries):
        if entry.usable_guid == guid:
            return index
    return None


def compute_delta(entries: Sequence[FeedEntry], last_seen_guid: str | None) -> tuple[FeedEntry, ...]:
    """Return the entries strictly newer than ``last_seen_guid``.

    ``entries`` is newest-first. When ``last_seen_guid`` is ``None`` or does not
    occur in ``entries`` the delta is empty.
    """
    if last_seen_guid is None:
        return ()
    index = _index_of(entries, last_seen_guid)
    if index is None:
        return ()
    return tuple(entries[:index])


class ChangeDetector:
    """Tracks the newest entry of one feed and publishes what appeared since.

    The first successful poll only records a baseline. Later polls publish a
    :class:`NewItemsEvent` with every entry above the previous baseline.
    Fetch failures are published as :class:`ErrorEvent` and leave the
    baseline untouched; :meth:`poll` itself never raises.
    """

    def __init__(
        self,
        url: str,
        *,
        fetcher: Fetcher,
        bus: EventBus | None = None,
        name: str | None = None,
    ) -> None:
        self._state = FeedState(url=url, name=name or str(uuid.uuid4()))
        self._fetcher = fetcher
        self._bus = bus or EventBus()

    @property
    def url(self) -> str:
        return self._state.url

    @property
    def name(self) -> str:
        return self._state.name

    @name.setter
    def name(self, value: str) -> None:
        self._state.name = value

    @property
    def last_seen_guid(self) -> str | None:
        return self._state.last_seen_guid

    @property
    def state(self) -> FeedState:
        return self._state

    @property
    def bus(self) -> EventBus:
        return self._bus

    async def poll(self) -> None:
        state = self._state
        log = feed_logger(__name__, state.url, state.name)

        try:
            entries = await self._fetcher.fetch(state.url)
        except Exception as exc:  # noqa: BLE001
            log.warning("poll_failed", error=str(exc), error_type=type(exc).__name__)
            await self._bus.publish(ErrorEvent(feed_url=state.url, feed_name=state.name, error=exc))
            return

        if not entries:
            log.debug("feed_empty")
            return

        newest_guid = entries[0].usable_guid
        if newest_guid is None:
            log.debug("newest_entry_without_guid", title=entries[0].title)
            return

        previous_guid = state.last_seen_guid
        if previous_guid is None:
            state.last_seen_guid = newest_guid
            log.info("baseline_established", guid=newest_guid, entries=len(entries))
            return

        if newest_guid == previous_guid:
            return

        delta = compute_delta(entries, previous_guid)
        state.last_seen_guid = newest_guid

        if not delta:
            log.info("baseline_unresolvable", previous_guid=previous_guid, guid=newest_guid)
            return

        log.info("new_items_detected", count=len(delta), guid=newest_guid)
        await self._bus.publish(NewItemsEvent(feed_url=state.url, feed_name=state.name, entries=delta))

    async def new_items_after(self, guid: str) -> tuple[FeedEntry, ...]:
        entries = await self._fetcher.fetch(self._state.url)
        return compute_delta(entries, guid)
