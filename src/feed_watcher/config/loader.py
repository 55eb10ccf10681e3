from __future__ import annotations

import os
import tomllib
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from feed_watcher.config.errors import ConfigError
from feed_watcher.config.models import AppConfig

if TYPE_CHECKING:
    from pathlib import Path

SLACK_WEBHOOK_ENV = "SLACK_WEBHOOK_URL"


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    webhook_url = os.environ.get(SLACK_WEBHOOK_ENV)
    if not webhook_url:
        return data
    slack = data.get("slack")
    slack = dict(slack) if isinstance(slack, dict) else {}
    slack["webhook_url"] = webhook_url
    return {**data, "slack": slack}


def load_config(path: Path) -> AppConfig:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"config not readable: {path}"
        raise ConfigError(msg) from exc

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        msg = "toml parse error"
        raise ConfigError(msg) from exc

    try:
        return AppConfig.model_validate(_apply_env_overrides(data))
    except ValidationError as exc:
        msg = f"invalid config: {path}"
        raise ConfigError(msg) from exc
