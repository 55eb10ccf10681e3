from tests.test_utils.factories.detection import FeedEntryFactory, build_entries

__all__ = ["FeedEntryFactory", "build_entries"]
