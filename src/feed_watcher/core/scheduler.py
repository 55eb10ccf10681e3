from __future__ import annotations

import asyncio
import contextlib
from typing import Protocol

from feed_watcher.observability import get_logger

logger = get_logger(__name__)


class Pollable(Protocol):
    async def poll(self) -> None: ...


class FeedPoller:
    """Runs ``detector.poll()`` every ``interval_seconds`` on one task.

    Each poll is awaited before the next wait starts, so polls of the same
    detector never overlap. :meth:`shutdown` lets an in-flight poll finish.
    """

    def __init__(self, interval_seconds: float, detector: object, *, run_immediately: bool = True) -> None:
        if interval_seconds <= 0:
            msg = "interval_seconds must be positive"
            raise ValueError(msg)
        if not callable(getattr(detector, "poll", None)):
            msg = "detector must define poll"
            raise TypeError(msg)

        self._interval_seconds = interval_seconds
        self._detector: Pollable = detector  # type: ignore[assignment]
        self._run_immediately = run_immediately
        self._task: asyncio.Task[None] | None = None
        self._stop_event = asyncio.Event()

    @property
    def interval_seconds(self) -> float:
        return self._interval_seconds

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        if self.running:
            return
        self._stop_event.clear()
        self._task = asyncio.create_task(self._run())

    async def shutdown(self) -> None:
        if self._task is None:
            return
        self._stop_event.set()
        await self._task
        self._task = None

    async def _run(self) -> None:
        if self._run_immediately:
            await self._poll_once()
        while not await self._wait_interval():
            await self._poll_once()

    async def _poll_once(self) -> None:
        try:
            await self._detector.poll()
        except Exception:
            logger.exception("poll_crashed", detector=type(self._detector).__name__)

    async def _wait_interval(self) -> bool:
        """Sleep one interval; return ``True`` if shutdown was requested."""
        with contextlib.suppress(TimeoutError):
            await asyncio.wait_for(self._stop_event.wait(), timeout=self._interval_seconds)
        return self._stop_event.is_set()
