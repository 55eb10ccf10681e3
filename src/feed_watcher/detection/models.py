from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


@dataclass(frozen=True, slots=True)
class FeedEntry:
    guid: str | None
    title: str | None
    link: str | None = None
    published: datetime | None = None

    @property
    def usable_guid(self) -> str | None:
        if self.guid is None:
            return None
        guid = self.guid.strip()
        return guid or None


@dataclass(slots=True)
class FeedState:
    """Polling state of a single feed.

    ``last_seen_guid`` is ``None`` until the first successful poll establishes
    a baseline. ``url`` is fixed for the lifetime of the state.
    """

    url: str
    name: str
    last_seen_guid: str | None = None
