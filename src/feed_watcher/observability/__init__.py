from feed_watcher.observability.logging import configure_logging, feed_logger, get_logger

__all__ = ["configure_logging", "feed_logger", "get_logger"]
