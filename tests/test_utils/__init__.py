"""Shared test utilities."""

from tests.test_utils import factories, fakes, helpers, mocks, strategies

__all__ = [
    "factories",
    "fakes",
    "helpers",
    "mocks",
    "strategies",
]
