from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import httpx
import typer

from feed_watcher.config import ConfigError, load_config
from feed_watcher.core import FeedEmitter
from feed_watcher.detection import FeedFetcher, FeedFetchError, HttpFetcher
from feed_watcher.events import EventKind
from feed_watcher.notifications import LogNotifier, Notifier, SlackNotifier
from feed_watcher.observability import configure_logging, get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from feed_watcher.config import AppConfig

logger = get_logger(__name__)

app = typer.Typer(add_completion=False)

_HTTP_TIMEOUT = httpx.Timeout(10.0)


@dataclass(frozen=True, slots=True)
class ApplicationComponents:
    config: AppConfig
    client: httpx.AsyncClient
    emitters: tuple[FeedEmitter, ...]


def build_notifier(config: AppConfig, client: httpx.AsyncClient) -> Notifier:
    if config.slack is None:
        return LogNotifier()
    return SlackNotifier(client=client, config=config.slack)


@asynccontextmanager
async def create_application(config: AppConfig) -> AsyncIterator[ApplicationComponents]:
    client = httpx.AsyncClient(timeout=_HTTP_TIMEOUT)
    fetcher = FeedFetcher(HttpFetcher(client))
    notifier = build_notifier(config, client)

    emitters: list[FeedEmitter] = []
    for feed in config.feeds:
        emitter = FeedEmitter(feed.url, fetcher=fetcher, name=feed.name, interval_seconds=config.interval_seconds)
        emitter.bus.subscribe(EventKind.NEW_ITEMS, notifier)
        emitters.append(emitter)

    try:
        yield ApplicationComponents(config=config, client=client, emitters=tuple(emitters))
    finally:
        await client.aclose()


async def _run_emitters(config: AppConfig) -> None:
    async with create_application(config) as components:
        for emitter in components.emitters:
            await emitter.start()
        logger.info("watcher_started", feeds=len(components.emitters), interval_seconds=config.interval_seconds)
        try:
            await asyncio.Event().wait()
        finally:
            await asyncio.gather(*(emitter.shutdown() for emitter in components.emitters))
            logger.info("watcher_stopped")


async def _run_once(config: AppConfig) -> None:
    async with create_application(config) as components:
        await asyncio.gather(*(emitter.poll() for emitter in components.emitters))
        logger.info("poll_once_completed", feeds=len(components.emitters))


async def _new_items_after(url: str, guid: str) -> None:
    async with httpx.AsyncClient(timeout=_HTTP_TIMEOUT) as client:
        emitter = FeedEmitter(url, fetcher=FeedFetcher(HttpFetcher(client)))
        entries = await emitter.new_items_after(guid)
    for entry in entries:
        typer.echo(f"{entry.title or ''} | {entry.guid or ''}")


@app.command()
def run(
    config: Annotated[Path, typer.Option("-c", "--config", help="Path to the TOML config file.")],
    once: Annotated[bool, typer.Option("--once", help="Poll every feed once and exit.")] = False,
) -> None:
    """Watch every configured feed until interrupted."""
    configure_logging()
    try:
        app_config = load_config(config)
    except ConfigError as exc:
        logger.error("config_invalid", error=str(exc), cause=str(exc.__cause__))
        raise typer.Exit(code=1) from exc

    try:
        if once:
            asyncio.run(_run_once(app_config))
        else:
            asyncio.run(_run_emitters(app_config))
    except KeyboardInterrupt:
        logger.info("interrupted")


@app.command("new-items")
def new_items(
    url: Annotated[str, typer.Argument(help="Feed URL.")],
    after: Annotated[str, typer.Option("--after", help="GUID of the last entry already seen.")],
) -> None:
    """Print the entries published after the given GUID, newest first."""
    configure_logging()
    try:
        asyncio.run(_new_items_after(url, after))
    except FeedFetchError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
