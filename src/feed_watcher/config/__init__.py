from .errors import ConfigError
from .loader import load_config
from .models import AppConfig, FeedConfig, SlackConfig

__all__ = [
    "AppConfig",
    "ConfigError",
    "FeedConfig",
    "SlackConfig",
    "load_config",
]
