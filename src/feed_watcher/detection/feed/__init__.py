from feed_watcher.detection.feed.fetcher import FeedFetcher, FeedFetchError
from feed_watcher.detection.feed.parser import ParsedFeed, parse_feed

__all__ = [
    "FeedFetchError",
    "FeedFetcher",
    "ParsedFeed",
    "parse_feed",
]
