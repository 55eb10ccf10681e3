from feed_watcher.core.emitter import DEFAULT_INTERVAL_SECONDS, FeedEmitter
from feed_watcher.core.scheduler import FeedPoller

__all__ = ["DEFAULT_INTERVAL_SECONDS", "FeedEmitter", "FeedPoller"]
