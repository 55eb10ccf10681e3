"""Config-related errors."""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when the configuration file is missing, unreadable or invalid."""
