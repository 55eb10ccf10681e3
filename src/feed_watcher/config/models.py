from __future__ import annotations

from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

_FEED_SCHEMES = frozenset({"http", "https"})


def _is_valid_url(value: str, schemes: frozenset[str] = _FEED_SCHEMES) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in schemes and bool(parsed.netloc)


class SlackConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    webhook_url: str

    @field_validator("webhook_url")
    @classmethod
    def _validate_webhook_url(cls, value: str) -> str:
        if not _is_valid_url(value, frozenset({"https"})):
            msg = "must be a valid https URL"
            raise ValueError(msg)
        return value


class FeedConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    url: str
    name: str | None = None

    @field_validator("url")
    @classmethod
    def _validate_url(cls, value: str) -> str:
        if not _is_valid_url(value):
            msg = "must be a valid http(s) URL"
            raise ValueError(msg)
        return value

    @field_validator("name")
    @classmethod
    def _validate_name(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return value


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    interval_seconds: int = Field(default=60, gt=0)
    feeds: list[FeedConfig]
    slack: SlackConfig | None = None

    @field_validator("feeds")
    @classmethod
    def _validate_feeds(cls, value: list[FeedConfig]) -> list[FeedConfig]:
        if not value:
            msg = "must be non-empty"
            raise ValueError(msg)
        return value
