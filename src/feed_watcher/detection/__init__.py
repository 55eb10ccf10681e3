from feed_watcher.detection.change_detector import ChangeDetector, Fetcher, compute_delta
from feed_watcher.detection.feed import FeedFetcher, FeedFetchError, ParsedFeed, parse_feed
from feed_watcher.detection.http_fetcher import FetchResult, HttpFetcher
from feed_watcher.detection.models import FeedEntry, FeedState

__all__ = [
    "ChangeDetector",
    "FeedEntry",
    "FeedFetchError",
    "FeedFetcher",
    "FeedState",
    "FetchResult",
    "Fetcher",
    "HttpFetcher",
    "ParsedFeed",
    "compute_delta",
    "parse_feed",
]
