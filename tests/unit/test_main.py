from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

import httpx
import pytest
import respx
from typer.testing import CliRunner

from feed_watcher.config import AppConfig, FeedConfig, SlackConfig, load_config
from feed_watcher.events import EventKind
from feed_watcher.main import app, build_notifier, create_application
from feed_watcher.notifications import LogNotifier, SlackNotifier
from tests.test_utils.helpers import fixture_path, rss_document

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

FEED_URL = "https://example.com/feed.xml"

runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_logging_setup() -> Iterator[None]:
    with patch("feed_watcher.main.configure_logging"):
        yield


def test_run_with_invalid_config_exits_with_error() -> None:
    result = runner.invoke(app, ["run", "--config", str(fixture_path("config/broken.toml"))])

    assert result.exit_code == 1


def test_run_with_missing_config_exits_with_error(tmp_path: Path) -> None:
    result = runner.invoke(app, ["run", "--config", f"{tmp_path}/absent.toml"])

    assert result.exit_code == 1


@respx.mock
def test_run_once_polls_every_feed_once(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SLACK_WEBHOOK_URL", raising=False)
    episodes = respx.get("https://example.com/episodes.xml").mock(return_value=httpx.Response(200, text=rss_document("e1")))
    atom = respx.get("https://example.org/atom.xml").mock(return_value=httpx.Response(200, text=rss_document("a1")))

    result = runner.invoke(app, ["run", "-c", str(fixture_path("config/full_valid.toml")), "--once"])

    assert result.exit_code == 0
    assert episodes.call_count == 1
    assert atom.call_count == 1


@respx.mock
def test_new_items_prints_entries_after_guid() -> None:
    respx.get(FEED_URL).mock(return_value=httpx.Response(200, text=rss_document("g3", "g2", "g1")))

    result = runner.invoke(app, ["new-items", FEED_URL, "--after", "g1"])

    assert result.exit_code == 0
    printed = [line for line in result.stdout.splitlines() if " | " in line]
    assert printed == ["Post g3 | g3", "Post g2 | g2"]


@respx.mock
def test_new_items_reports_fetch_failure() -> None:
    respx.get(FEED_URL).mock(return_value=httpx.Response(404, text="Not Found"))

    result = runner.invoke(app, ["new-items", FEED_URL, "--after", "g1"])

    assert result.exit_code == 1


def test_build_notifier_without_slack_logs() -> None:
    config = AppConfig(feeds=[FeedConfig(url=FEED_URL)])

    assert isinstance(build_notifier(config, httpx.AsyncClient()), LogNotifier)


def test_build_notifier_with_slack() -> None:
    config = AppConfig(
        feeds=[FeedConfig(url=FEED_URL)],
        slack=SlackConfig(webhook_url="https://hooks.slack.com/services/T/B/X"),
    )

    assert isinstance(build_notifier(config, httpx.AsyncClient()), SlackNotifier)


async def test_create_application_builds_one_emitter_per_feed() -> None:
    config = load_config(fixture_path("config/full_valid.toml"))

    async with create_application(config) as components:
        emitters = components.emitters
        assert [emitter.url for emitter in emitters] == [feed.url for feed in config.feeds]
        assert emitters[0].name == "Episodes"
        assert all(emitter.bus.handler_count(EventKind.NEW_ITEMS) == 1 for emitter in emitters)
        assert emitters[0].bus is not emitters[1].bus

    assert components.client.is_closed
