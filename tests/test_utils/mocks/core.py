from __future__ import annotations

import asyncio


class CountingDetector:
    def __init__(self) -> None:
        self.calls = 0

    async def poll(self) -> None:
        self.calls += 1


class BlockingDetector:
    def __init__(self, delay: float = 0.3) -> None:
        self.started = asyncio.Event()
        self.finished = asyncio.Event()
        self._delay = delay

    async def poll(self) -> None:
        self.started.set()
        await asyncio.sleep(self._delay)
        self.finished.set()


class OverlapTrackingDetector:
    def __init__(self, delay: float) -> None:
        self._delay = delay
        self._active = 0
        self.max_active = 0
        self.calls = 0

    async def poll(self) -> None:
        self.calls += 1
        self._active += 1
        self.max_active = max(self.max_active, self._active)
        try:
            await asyncio.sleep(self._delay)
        finally:
            self._active -= 1


class RaisingDetector:
    def __init__(self) -> None:
        self.calls = 0

    async def poll(self) -> None:
        self.calls += 1
        msg = "poll exploded"
        raise RuntimeError(msg)
