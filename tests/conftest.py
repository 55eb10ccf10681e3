"""Shared pytest configuration for all test levels."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

from feed_watcher.events import EventBus
from tests.test_utils.helpers import EventRecorder, read_fixture

FEED_URL = "https://example.com/feed.xml"


@pytest.fixture
def feed_url() -> str:
    return FEED_URL


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def recorder(bus: EventBus) -> EventRecorder:
    return EventRecorder(bus)


@pytest.fixture
def rss_valid() -> str:
    return read_fixture("feeds/rss_valid.xml")


# Configure Hypothesis global settings
settings.register_profile(
    "dev",
    max_examples=50,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.function_scoped_fixture],
)
settings.register_profile(
    "ci",
    max_examples=200,
    deadline=5000,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

if os.getenv("CI"):
    settings.load_profile("ci")
else:
    settings.load_profile("dev")


_LEVEL_MARKERS = {
    "unit": pytest.mark.unit,
    "integration": pytest.mark.integration,
}


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    root = Path(__file__).resolve().parent
    for item in items:
        try:
            rel = item.path.resolve().relative_to(root)
        except ValueError:
            continue
        marker = _LEVEL_MARKERS.get(rel.parts[0])
        if marker is not None:
            item.add_marker(marker)
