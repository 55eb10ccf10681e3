from __future__ import annotations

from tests.test_utils.strategies.feed import feed_histories, guid_lists, guid_strategy

__all__ = ["feed_histories", "guid_lists", "guid_strategy"]
