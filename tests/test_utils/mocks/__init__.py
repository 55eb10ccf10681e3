from tests.test_utils.mocks.core import BlockingDetector, CountingDetector, OverlapTrackingDetector, RaisingDetector

__all__ = ["BlockingDetector", "CountingDetector", "OverlapTrackingDetector", "RaisingDetector"]
