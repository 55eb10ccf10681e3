from __future__ import annotations

import json
import logging
import os
import re
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, cast

import structlog

if TYPE_CHECKING:
    from collections.abc import MutableMapping

_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})
_DEFAULT_LEVEL = "INFO"

_SECRET_KEYS = re.compile(r"(token|api_?key|authorization|cookie|webhook|secret|password)", re.IGNORECASE)
_SECRET_QUERY_PARAMS = re.compile(r"\b(token|api_key|apikey|access_token|key)=([^&\s]+)")
_SLACK_WEBHOOK = re.compile(r"hooks\.slack\.com/services/[^\s>|]+")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_ESCAPES = {"\n": "\\n", "\r": "\\r", "\t": "\\t"}
_MAX_VALUE_LENGTH = 4000

# values copied out of fetched feeds
_FEED_TEXT_KEYS = frozenset({"feed_name", "title", "guid", "previous_guid", "link"})
_MAX_FEED_TEXT_LENGTH = 200


def _escape(match: re.Match[str]) -> str:
    char = match.group(0)
    return _ESCAPES.get(char, f"\\x{ord(char):02x}")


def _sanitize_str(value: str) -> str:
    # feed titles are untrusted input; keep one event per line
    value = _CONTROL_CHARS.sub(_escape, value)
    value = _SECRET_QUERY_PARAMS.sub(r"\1=***", value)
    value = _SLACK_WEBHOOK.sub("hooks.slack.com/services/***", value)
    if len(value) > _MAX_VALUE_LENGTH:
        return value[:_MAX_VALUE_LENGTH] + "..."
    return value


def sanitize_value(value: object) -> object:
    if isinstance(value, str):
        return _sanitize_str(value)
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, dict):
        return {key: sanitize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [sanitize_value(item) for item in value]
    return _sanitize_str(str(value))


def sanitize_event(_: object, __: object, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    return {key: "***" if _SECRET_KEYS.search(key) else sanitize_value(value) for key, value in event_dict.items()}


def clip_feed_text(_: object, __: object, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Shorten titles and GUIDs taken from a feed so one entry cannot flood a log line."""
    for key in _FEED_TEXT_KEYS.intersection(event_dict):
        value = event_dict[key]
        if isinstance(value, str) and len(value) > _MAX_FEED_TEXT_LENGTH:
            event_dict[key] = value[:_MAX_FEED_TEXT_LENGTH] + "..."
    return event_dict


def feed_logger(name: str, feed_url: str, feed_name: str) -> structlog.BoundLogger:
    return get_logger(name).bind(feed_url=feed_url, feed_name=feed_name)


def add_timestamp(_: object, __: object, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


def render_json(_: object, __: object, event_dict: MutableMapping[str, Any]) -> str:
    return json.dumps(event_dict, ensure_ascii=False, default=str)


def parse_level() -> str:
    level = os.environ.get("LOG_LEVEL", _DEFAULT_LEVEL).upper()
    return level if level in _LEVELS else _DEFAULT_LEVEL


def configure_logging() -> structlog.BoundLogger:
    processors: list[structlog.types.Processor] = [
        structlog.processors.format_exc_info,
        sanitize_event,
        clip_feed_text,
        add_timestamp,
        structlog.processors.add_log_level,
    ]
    if os.environ.get("LOG_FORMAT", "json").lower() == "console":
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(render_json)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelNamesMapping()[parse_level()]),
        cache_logger_on_first_use=True,
    )
    return cast("structlog.BoundLogger", structlog.get_logger())


def get_logger(name: str) -> structlog.BoundLogger:
    return cast("structlog.BoundLogger", structlog.get_logger(name))
