from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import UTC, datetime

import feedparser

from feed_watcher.detection.models import FeedEntry


@dataclass(frozen=True, slots=True)
class ParsedFeed:
    url: str
    title: str | None
    entries: tuple[FeedEntry, ...]


def parse_feed(content: str, feed_url: str) -> ParsedFeed | None:
    """Parse an RSS/Atom document, keeping the document's entry order.

    Returns ``None`` when the content is not recognisable as a feed at all.
    Entries without a ``guid``/``id`` are kept with ``guid=None``.
    """
    parsed = feedparser.parse(content or "")

    feed_title = _get_str(parsed.get("feed", {}), "title")
    if parsed.get("bozo") and not parsed.entries and feed_title is None:
        return None
    if not parsed.get("version") and not parsed.entries and feed_title is None:
        return None

    entries = tuple(
        FeedEntry(
            guid=_get_str(entry, "id"),
            title=_get_str(entry, "title"),
            link=_get_str(entry, "link"),
            published=_parse_published(entry),
        )
        for entry in parsed.entries
    )
    return ParsedFeed(url=feed_url, title=feed_title, entries=entries)


def _parse_published(entry: dict[str, object]) -> datetime | None:
    parsed = entry.get("published_parsed") or entry.get("updated_parsed")
    if not isinstance(parsed, time.struct_time):
        return None
    try:
        return datetime(*parsed[:6], tzinfo=UTC)
    except (TypeError, ValueError, OverflowError):
        return None


def _get_str(mapping: dict[str, object], key: str) -> str | None:
    value = mapping.get(key)
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None
