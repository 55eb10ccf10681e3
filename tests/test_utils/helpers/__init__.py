"""Test helpers."""

from tests.test_utils.helpers.events import EventRecorder
from tests.test_utils.helpers.feeds import rss_document
from tests.test_utils.helpers.fixture import fixture_path, read_fixture

__all__ = [
    "EventRecorder",
    "fixture_path",
    "read_fixture",
    "rss_document",
]
